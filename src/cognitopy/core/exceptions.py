"""Custom exception hierarchy for the cognitopy user export tool."""

from typing import Any


class CognitoPyError(Exception):
    """Base exception for cognitopy.

    This is the root exception class for all cognitopy-specific errors.
    All other custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: The main error message
            details: Optional additional details about the error
        """
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message."""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class AuthConfigError(CognitoPyError):
    """AWS credential or client configuration errors.

    Raised when a boto3 session or client cannot be built, such as an
    unknown named profile or missing credentials.
    """


class ValidationError(CognitoPyError):
    """Input validation errors.

    Raised when command line input fails validation, such as a missing
    user pool id, an unsupported export format, or a bad import file.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: str | None = None,
        details: str | None = None,
    ):
        """Initialize the validation error.

        Args:
            message: The main error message
            field: The field that failed validation
            value: The invalid value
            details: Optional additional details about the error
        """
        self.field = field
        self.value = value
        super().__init__(message, details)

    def _format_message(self) -> str:
        parts = [self.message]

        if self.field:
            parts.append(f"Field: {self.field}")

        if self.value:
            parts.append(f"Value: {self.value}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class FileOperationError(CognitoPyError):
    """File operation errors.

    Raised when reading the import file or writing the export file fails.
    """

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        operation: str | None = None,
        details: str | None = None,
    ):
        """Initialize the file operation error.

        Args:
            message: The main error message
            file_path: The file path that caused the error
            operation: The file operation that failed (read, write, etc.)
            details: Optional additional details about the error
        """
        self.file_path = file_path
        self.operation = operation
        super().__init__(message, details)

    def _format_message(self) -> str:
        parts = [self.message]

        if self.operation:
            parts.append(f"Operation: {self.operation}")

        if self.file_path:
            parts.append(f"File: {self.file_path}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class APIError(CognitoPyError):
    """Cognito Identity Provider API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        operation: str | None = None,
        error_code: str | None = None,
        details: str | None = None,
    ):
        """Initialize the API error.

        Args:
            message: The main error message
            status_code: The HTTP status code from the API response
            operation: The API operation that failed (ListUsers, GetCSVHeader)
            error_code: The AWS error code, e.g. ResourceNotFoundException
            details: Optional additional details about the error
        """
        self.status_code = status_code
        self.operation = operation
        self.error_code = error_code
        super().__init__(message, details)

    def _format_message(self) -> str:
        parts = [self.message]

        if self.error_code:
            parts.append(f"Code: {self.error_code}")

        if self.status_code:
            parts.append(f"Status: {self.status_code}")

        if self.operation:
            parts.append(f"Operation: {self.operation}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class RateLimitError(APIError):
    """Throttling errors from the Cognito API."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        operation: str | None = None,
        error_code: str | None = None,
        details: str | None = None,
    ):
        super().__init__(
            message=message,
            status_code=429,
            operation=operation,
            error_code=error_code,
            details=details,
        )


class OperationNotImplementedError(CognitoPyError):
    """Raised by declared operations that have no implementation yet."""

    def __init__(self, operation: str, details: str | None = None):
        self.operation = operation
        super().__init__(f"Operation '{operation}' is not implemented", details)


THROTTLING_ERROR_CODES = frozenset(
    {
        "ThrottlingException",
        "TooManyRequestsException",
        "Throttling",
        "LimitExceededException",
    }
)

AUTH_ERROR_CODES = frozenset(
    {
        "NotAuthorizedException",
        "UnrecognizedClientException",
        "AccessDeniedException",
        "InvalidClientTokenId",
        "ExpiredTokenException",
        "SignatureDoesNotMatch",
    }
)


def wrap_client_error(exc: Exception, operation: str | None = None) -> CognitoPyError:
    """Wrap boto3/botocore exceptions into the cognitopy exception hierarchy.

    Used when reporting a failure; the export itself lets the original
    exception propagate.

    Args:
        exc: The original exception
        operation: Optional operation context

    Returns:
        CognitoPyError: Wrapped exception
    """
    from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

    if isinstance(exc, CognitoPyError):
        return exc

    if isinstance(exc, ClientError):
        error: dict[str, Any] = exc.response.get("Error", {})
        error_code = error.get("Code", "")
        error_msg = error.get("Message", "") or str(exc)
        status_code = exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode")

        if error_code in THROTTLING_ERROR_CODES:
            return RateLimitError(
                message=error_msg, operation=operation, error_code=error_code
            )

        if error_code in AUTH_ERROR_CODES:
            return AuthConfigError(
                message=f"Authentication failed: {error_msg}",
                details=f"Code: {error_code}",
            )

        return APIError(
            message=error_msg,
            status_code=status_code,
            operation=operation,
            error_code=error_code or None,
        )

    if isinstance(exc, NoCredentialsError):
        return AuthConfigError(message=f"Authentication failed: {exc}")

    if isinstance(exc, BotoCoreError):
        return APIError(message=str(exc), operation=operation)

    return CognitoPyError(
        message=f"Unexpected error: {str(exc)}",
        details=f"Operation: {operation}, Type: {type(exc).__name__}"
        if operation
        else f"Type: {type(exc).__name__}",
    )
