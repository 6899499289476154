"""
Transport outcome value object and policy ports.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import grpc

from exception_boundary.shared.errors.codes import ErrorCode

EXIT_INTERNAL = 1
EXIT_INVALID_INPUT = 2
EXIT_NOT_FOUND = 3
EXIT_CONFLICT = 4
EXIT_AUTH = 5
EXIT_RATE_LIMITED = 6


@dataclass(frozen=True)
class TransportOutcome:
    """How one error code surfaces on every transport.

    Attributes:
        http_status: HTTP response status.
        cli_exit_code: Process exit code for console commands.
        grpc_status: gRPC status code.
    """

    http_status: int
    cli_exit_code: int
    grpc_status: grpc.StatusCode


INTERNAL_OUTCOME = TransportOutcome(500, EXIT_INTERNAL, grpc.StatusCode.INTERNAL)


class TransportPolicy(ABC):
    """Resolves transport outcomes for any error code."""

    @abstractmethod
    def outcome(self, code: ErrorCode) -> TransportOutcome:
        """Resolve all outcomes for a given error code."""
        raise NotImplementedError

    def http_status(self, code: ErrorCode) -> int:
        return self.outcome(code).http_status

    def cli_exit_code(self, code: ErrorCode) -> int:
        return self.outcome(code).cli_exit_code

    def grpc_status(self, code: ErrorCode) -> grpc.StatusCode:
        return self.outcome(code).grpc_status


class TransportPolicyProvider(ABC):
    """Owns the outcomes of one error code family."""

    @abstractmethod
    def supports(self, code: ErrorCode) -> bool:
        """Whether this provider owns the given code (usually by enum class)."""
        raise NotImplementedError

    @abstractmethod
    def outcome(self, code: ErrorCode) -> TransportOutcome:
        """Resolve transport outcomes for a code owned by this provider."""
        raise NotImplementedError
