"""gRPC error boundary for servicer methods.

Wraps unary servicer methods so any exception, semantic or not, is
rendered by the ErrorBoundary and turned into a gRPC abort with the
policy status, translated details and trailing metadata
(``response_code``, ``log_level``, ``correlation_id``).

Usage::

    class VideoServicer(video_pb2_grpc.VideoServiceServicer):
        @grpc_error_boundary()
        async def GetVideo(self, request, context):
            ...
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable

import grpc
from grpc import aio as grpc_aio

from exception_boundary.interfaces.dependencies import get_error_boundary
from exception_boundary.shared.errors.boundary import ErrorBoundary
from exception_boundary.shared.presentation.rpc import GrpcErrorStatus


def _render(boundary: ErrorBoundary, exc: Exception, context) -> GrpcErrorStatus:
    status = boundary.render_grpc(exc, context.invocation_metadata())
    context.set_trailing_metadata(status.metadata)
    return status


def grpc_error_boundary(boundary: ErrorBoundary | None = None) -> Callable:
    """Decorator factory for sync and asyncio servicer methods.

    Args:
        boundary: Boundary to render with. Defaults to the shared one.

    RPC errors and aborts issued by the servicer itself pass through
    untouched: asyncio aborts raise ``AbortError``, sync aborts leave a
    status code on the context.
    """

    def decorator(func):
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(self, request, context):
                try:
                    return await func(self, request, context)
                except (grpc.RpcError, grpc_aio.AbortError):
                    raise
                except Exception as e:
                    status = _render(boundary or get_error_boundary(), e, context)
                    await context.abort(status.code, status.details)

            return async_wrapper

        @functools.wraps(func)
        def wrapper(self, request, context):
            try:
                return func(self, request, context)
            except grpc.RpcError:
                raise
            except Exception as e:
                if context.code() is not None:
                    # the servicer already aborted; grpc raises a bare Exception
                    raise
                status = _render(boundary or get_error_boundary(), e, context)
                context.abort(status.code, status.details)

        return wrapper

    return decorator


__all__ = ["grpc_error_boundary"]
