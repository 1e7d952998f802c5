from typing import Optional


class PpdError(Exception):
    """Base class for every error ppdctl reports to the user."""
    exit_code = 1

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TransportError(PpdError):
    """The D-Bus exchange with the daemon failed or returned a malformed reply."""

    def __init__(self, cause: BaseException, operation: Optional[str] = None):
        self.cause = cause
        self.operation = operation
        message = f"DBus error: {cause}" if operation is None else f"DBus error in {operation}: {cause}"
        super().__init__(message)


class InvalidProfile(PpdError):
    """Profile name is not recognized or not advertised by the daemon."""

    def __init__(self, profile: object):
        self.profile = profile
        super().__init__(f"Invalid profile: {profile}")


class InvalidConfig(PpdError):
    """Mutually exclusive or missing options, or a bad configuration file."""

    def __init__(self, message: str):
        super().__init__(f"Invalid configuration: {message}")


class Unimplemented(PpdError):
    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"Unimplemented feature: {feature}")
