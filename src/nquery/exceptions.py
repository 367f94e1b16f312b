"""Exceptions raised while querying the Nomad API."""

from typing import Optional


class NomadError(Exception):
    """Base class for failures reported to the user."""


class NomadConnectionError(NomadError):
    """Raised when the configured Nomad address cannot be reached.

    Attributes:
        address: The base address the client tried to reach
    """

    def __init__(self, address: str, message: Optional[str] = None):
        self.address = address
        self.message = message or f"Could not connect to server at {address}"
        super().__init__(self.message)


class NomadReadError(NomadError):
    """Raised when a response could not be turned into the expected data."""

    def __init__(self, message: Optional[str] = None):
        self.message = message or "failed to read response"
        super().__init__(self.message)


class NomadHTTPError(NomadReadError):
    """Raised when the server answers with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the server
        body: Response body text
    """

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        detail = f"{status_code}: {body}" if body else str(status_code)
        super().__init__(f"failed to read response: {detail}")


class NomadDecodeError(NomadReadError):
    """Raised when a successful response body is not the expected JSON."""


class InvalidFieldPathError(NomadError):
    """Raised when a requested output field is not a valid path expression.

    Attributes:
        field: The field as given on the command line
    """

    def __init__(self, field: str, reason: str = ""):
        self.field = field
        self.message = f"Invalid field path '{field}'"
        if reason:
            self.message += f": {reason}"
        super().__init__(self.message)


class InternalConsistencyError(AssertionError):
    """Raised when an include flag and its exclude flag are both set.

    Argument parsing makes the two flags mutually exclusive, so this signals
    a programming error rather than bad user input.
    """
