"""Error taxonomy and provider error classification."""
from __future__ import annotations
import enum


class ErrorKind(enum.Enum):
    MISSING_CREDENTIAL = "missing_credential"
    INVALID_CREDENTIAL = "invalid_credential"
    MODEL_UNAVAILABLE = "model_unavailable"
    UNKNOWN_PROVIDER_FAILURE = "unknown_provider_failure"


class GatewayError(Exception):
    """Base class for failures surfaced to the caller as a JSON error."""
    status_code = 500
    kind: ErrorKind | None = None
    public_message = "Failed to summarize. Please try again later."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.public_message)


class ConfigurationError(GatewayError):
    status_code = 500
    kind = ErrorKind.MISSING_CREDENTIAL
    public_message = "API key is not configured. Please set GOOGLE_API_KEY in your environment variables."


class ValidationError(GatewayError):
    status_code = 400
    public_message = "No text provided"


class CredentialError(GatewayError):
    status_code = 401
    kind = ErrorKind.INVALID_CREDENTIAL
    public_message = "Invalid API key. Please check your GOOGLE_API_KEY configuration."


class ModelUnavailableError(GatewayError):
    """Raised once every configured model has been tried."""
    status_code = 500
    kind = ErrorKind.MODEL_UNAVAILABLE
    public_message = "Model configuration error. None of the configured models are available."


class ProviderError(GatewayError):
    status_code = 500
    kind = ErrorKind.UNKNOWN_PROVIDER_FAILURE
    public_message = "Failed to summarize. Please try again later."


class ProviderAPIError(Exception):
    """Error returned by the generation provider.

    `status_code` is the HTTP status when the provider answered, None for
    transport failures.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


MODEL_CONFIG_MESSAGE = "Model configuration error. Please check the model name and availability."

CREDENTIAL_HINT = "api key"
MODEL_HINTS = (
    "model",
    "models/",
    "not found",
    "not supported",
    "unknown model",
    "overloaded",
)


def classify_error(error: BaseException) -> ErrorKind:
    """
    Map a provider failure to an ErrorKind.

    Matching is a case-insensitive substring heuristic on the message; a
    structured 404 from the provider also counts as model unavailable.
    The credential check wins over the model hints.

    Args:
        error: Exception raised by the provider call.

    Returns:
        INVALID_CREDENTIAL, MODEL_UNAVAILABLE or UNKNOWN_PROVIDER_FAILURE.
    """
    message = str(error).lower()
    if CREDENTIAL_HINT in message:
        return ErrorKind.INVALID_CREDENTIAL
    if any(hint in message for hint in MODEL_HINTS):
        return ErrorKind.MODEL_UNAVAILABLE
    if isinstance(error, ProviderAPIError) and error.status_code == 404:
        return ErrorKind.MODEL_UNAVAILABLE
    return ErrorKind.UNKNOWN_PROVIDER_FAILURE


def error_for(kind: ErrorKind) -> GatewayError:
    """
    Build the caller-facing error for a classified failure that escaped the
    fallback loop.

    A model-unavailable failure outside the loop points at configuration
    rather than at an exhausted candidate list, hence its own message.
    """
    if kind is ErrorKind.MODEL_UNAVAILABLE:
        return ModelUnavailableError(MODEL_CONFIG_MESSAGE)
    for cls in (ConfigurationError, CredentialError, ProviderError):
        if cls.kind is kind:
            return cls()
    return ProviderError()
