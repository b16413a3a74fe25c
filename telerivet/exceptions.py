"""Public exceptions for the Telerivet SDK."""


class TelerivetError(Exception):
    """Base exception for all Telerivet SDK errors."""


class TelerivetAPIError(TelerivetError):
    """Error returned by the Telerivet API."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        param: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.param = param
        self.status_code = status_code


class InvalidParameterError(TelerivetAPIError):
    """A request parameter was missing or invalid (error code `invalid_param`)."""


class NotFoundError(TelerivetAPIError):
    """The referenced resource does not exist (error code `not_found`)."""


class TelerivetConfigError(TelerivetError):
    """Configuration error (missing env vars, invalid config)."""
