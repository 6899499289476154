"""
Dependency wiring.

Builds the error boundary and the use cases with their infrastructure
adapters. FastAPI routes reach these through ``Depends``; the CLI and
gRPC servicers call them directly. This is the composition root shared
by every transport.
"""

from functools import lru_cache

from exception_boundary.application.user.get_user import GetUserUseCase
from exception_boundary.application.user.register_user import RegisterUserUseCase
from exception_boundary.application.video.get_video import GetVideoUseCase
from exception_boundary.application.video.upload_thumbnail import (
    UploadThumbnailUseCase,
)
from exception_boundary.core.config import Settings, settings
from exception_boundary.domain.user.policy import UserTransportPolicyProvider
from exception_boundary.domain.video.policy import VideoTransportPolicyProvider
from exception_boundary.infrastructure.memory import (
    InMemoryUserRepository,
    InMemoryVideoRepository,
)
from exception_boundary.shared.errors.adapter import DefaultErrorAdapter
from exception_boundary.shared.errors.boundary import ErrorBoundary
from exception_boundary.shared.i18n.translator import Translator
from exception_boundary.shared.policy.platform_provider import (
    PlatformTransportPolicyProvider,
)
from exception_boundary.shared.policy.registry import (
    DefaultTransportPolicy,
    TransportPolicyRegistry,
)
from exception_boundary.shared.presentation.base import Transport
from exception_boundary.shared.presentation.cli import CliErrorPresenter
from exception_boundary.shared.presentation.http import (
    HtmlErrorPresenter,
    HttpErrorPresenter,
)
from exception_boundary.shared.presentation.registry import ErrorPresenterRegistry
from exception_boundary.shared.presentation.rpc import GrpcErrorPresenter


def build_transport_policy() -> TransportPolicyRegistry:
    """Registry with one provider per error code family."""
    return TransportPolicyRegistry(
        providers=[
            PlatformTransportPolicyProvider(),
            UserTransportPolicyProvider(),
            VideoTransportPolicyProvider(),
        ],
        fallback=DefaultTransportPolicy(),
    )


def build_error_boundary(config: Settings = settings) -> ErrorBoundary:
    """Wire adapter, policy, translator and presenters into a boundary."""
    translator = Translator(
        config.lang_path,
        default_locale=config.default_locale,
        fallback_locale=config.fallback_locale,
    )
    policy = build_transport_policy()
    presenters = ErrorPresenterRegistry(
        http=HttpErrorPresenter(policy, translator),
        html=HtmlErrorPresenter(policy, translator, config.templates_path),
        cli=CliErrorPresenter(policy, translator),
        grpc=GrpcErrorPresenter(policy, translator),
        default_http_transport=Transport(config.default_http_transport),
    )
    return ErrorBoundary(DefaultErrorAdapter(), presenters, translator)


@lru_cache
def get_error_boundary() -> ErrorBoundary:
    return build_error_boundary()


@lru_cache
def get_user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@lru_cache
def get_video_repository() -> InMemoryVideoRepository:
    return InMemoryVideoRepository()


def get_register_user_use_case() -> RegisterUserUseCase:
    """Build RegisterUserUseCase with its infrastructure dependencies."""
    return RegisterUserUseCase(user_repo=get_user_repository())


def get_user_use_case() -> GetUserUseCase:
    """Build GetUserUseCase with its infrastructure dependencies."""
    return GetUserUseCase(user_repo=get_user_repository())


def get_upload_thumbnail_use_case() -> UploadThumbnailUseCase:
    return UploadThumbnailUseCase()


def get_video_use_case() -> GetVideoUseCase:
    """Build GetVideoUseCase with its infrastructure dependencies."""
    return GetVideoUseCase(video_repo=get_video_repository())
