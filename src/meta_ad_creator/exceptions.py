"""
Domain-specific exceptions for the ad generation flow.

Every failure carries a :class:`FailureKind` so the orchestration boundary can
turn it into a single user-visible message.  All exceptions inherit from
``AdCreatorError`` so callers can also use a single broad catch when needed.
"""

from __future__ import annotations

from enum import Enum

GENERIC_FAILURE_MESSAGE = "Ad generation failed. Please check your internet connection and try again."


class FailureKind(str, Enum):
    MISSING_REQUIRED_ASSET = "missing_required_asset"
    INVALID_CREDENTIAL = "invalid_credential"
    NO_IMAGE_RETURNED = "no_image_returned"
    TRANSPORT_OR_SERVICE_ERROR = "transport_or_service_error"
    CONFIGURATION = "configuration"


class AdCreatorError(Exception):
    """Base exception for all ad creator errors."""

    kind: FailureKind = FailureKind.TRANSPORT_OR_SERVICE_ERROR


class MissingRequiredAssetError(AdCreatorError):
    """Raised when a request is attempted without a product image."""

    kind = FailureKind.MISSING_REQUIRED_ASSET

    def __init__(self, message: str = "Please upload your Product Picture first.") -> None:
        super().__init__(message)


class GenerationError(AdCreatorError):
    """Raised when the generation call does not produce a creative."""


class InvalidCredentialError(GenerationError):
    """Raised when the selected API key is missing or not recognized by the service."""

    kind = FailureKind.INVALID_CREDENTIAL

    def __init__(self, message: str = "API Key error. Please re-select your API key.") -> None:
        super().__init__(message)


class NoImageReturnedError(GenerationError):
    """Raised when the service answers without any inline image part."""

    kind = FailureKind.NO_IMAGE_RETURNED

    def __init__(self, message: str = "No image was returned. Try adjusting your prompt or images.") -> None:
        super().__init__(message)


class TransportOrServiceError(GenerationError):
    """Raised when the service call itself fails.

    Attributes
    ----------
    model:
        Model identifier the failed call targeted, when known.
    """

    kind = FailureKind.TRANSPORT_OR_SERVICE_ERROR

    def __init__(self, message: str | None = None, model: str | None = None) -> None:
        super().__init__(message or GENERIC_FAILURE_MESSAGE)
        self.model = model


class ConfigurationError(AdCreatorError):
    """Raised when required configuration (env vars, model table) is missing."""

    kind = FailureKind.CONFIGURATION
