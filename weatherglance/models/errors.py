"""Query error kinds and their user-facing messages."""

from enum import StrEnum

from weatherglance.config.defaults import DEFAULT_CREDENTIAL_ENV

NOT_FOUND_MESSAGE = "City not found. Try another search."
INVALID_INPUT_MESSAGE = "Please enter a city name."
GENERIC_FAILURE_MESSAGE = "Something went wrong."


class ErrorKind(StrEnum):
    MISSING_CREDENTIAL = "missing-credential"
    INVALID_INPUT = "invalid-input"
    NOT_FOUND = "not-found"
    TRANSPORT_OR_PARSE = "transport-or-parse"


class QueryError(Exception):
    """Raised when a weather query cannot produce a result."""

    kind: ErrorKind = ErrorKind.TRANSPORT_OR_PARSE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingCredential(QueryError):
    kind = ErrorKind.MISSING_CREDENTIAL

    def __init__(self, env_var: str = DEFAULT_CREDENTIAL_ENV):
        super().__init__(f"Set {env_var} in the environment to fetch weather data.")
        self.env_var = env_var


class InvalidInput(QueryError):
    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message)


class NotFound(QueryError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, status_code: int | None = None):
        super().__init__(NOT_FOUND_MESSAGE)
        self.status_code = status_code


class TransportOrParseError(QueryError):
    kind = ErrorKind.TRANSPORT_OR_PARSE

    @classmethod
    def from_exception(cls, exc: BaseException) -> "TransportOrParseError":
        return cls(str(exc) or GENERIC_FAILURE_MESSAGE)
