"""Exception hierarchy for the tks client."""

from typing import Optional

import grpc


class TksError(Exception):
    """Base class for all tks client errors."""


class ConfigurationError(TksError):
    """A required configuration value is missing or the config file is unusable."""


class ServiceConnectionError(TksError):
    """A channel to the remote service could not be established."""

    def __init__(self, target: str, reason: str = ""):
        self.target = target
        self.reason = reason
        message = f"did not connect: {target}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RemoteCallError(TksError):
    """A remote call failed or exceeded its deadline."""

    def __init__(self, message: str, code: Optional[grpc.StatusCode] = None):
        super().__init__(message)
        self.code = code

    @classmethod
    def from_rpc_error(cls, error: grpc.RpcError) -> "RemoteCallError":
        """
        Build a RemoteCallError from a failed gRPC call.

        Args:
            error: Error raised by the gRPC stub

        Returns:
            RemoteCallError carrying the call's status code and details
        """
        code = error.code() if hasattr(error, "code") else None
        details = error.details() if hasattr(error, "details") else str(error)
        code_name = code.name if code is not None else "UNKNOWN"
        return cls(f"rpc error: code = {code_name} desc = {details}", code=code)
