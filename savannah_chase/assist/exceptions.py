# Specific exception types for the remote assist calls
class AssistError(Exception):
    """Base exception for assist (language model) errors."""

    pass


class AssistConfigurationError(AssistError):
    """Raised when the assist client cannot be created (e.g. missing API key)."""

    pass


class AssistRequestError(AssistError):
    """Raised when the remote service call fails."""

    pass


class AssistResponseError(AssistError):
    """Raised when the response is missing or does not match the schema."""

    pass
