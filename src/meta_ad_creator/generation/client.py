from __future__ import annotations

import logging
from typing import Any

from meta_ad_creator.exceptions import (
    InvalidCredentialError,
    NoImageReturnedError,
    TransportOrServiceError,
)
from meta_ad_creator.generation.request import GenerationRequest
from meta_ad_creator.models.ad import GeneratedCreative
from meta_ad_creator.providers.base import CredentialSelector, GenerationBackend

logger = logging.getLogger(__name__)

# Returned by the service when the selected key does not belong to a usable project.
INVALID_CREDENTIAL_MARKER = "Requested entity was not found."


def extract_inline_image(response: Any) -> tuple[bytes, str] | None:
    """Return ``(data, mime_type)`` of the first inline image in the first candidate."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None

    content = getattr(candidates[0], "content", None)
    parts = (getattr(content, "parts", None) or []) if content else []
    for part in parts:
        inline_data = getattr(part, "inline_data", None)
        if inline_data is not None and getattr(inline_data, "data", None):
            return inline_data.data, getattr(inline_data, "mime_type", None) or "image/png"
    return None


class GenerationClient:
    def __init__(self, backend: GenerationBackend, credentials: CredentialSelector):
        self.backend = backend
        self.credentials = credentials

    async def _ensure_credential(self) -> None:
        try:
            if await self.credentials.has_selected_key():
                return
            logger.info("No API key selected; opening key selection")
            selected = await self.credentials.select_key()
        except Exception as exc:
            raise InvalidCredentialError(f"API key selection failed: {exc}") from exc
        if not selected:
            raise InvalidCredentialError("No API key was selected. Please select an API key and try again.")

    async def _reselect_key(self) -> None:
        # The user resubmits afterwards; the outcome only matters for the log.
        try:
            selected = await self.credentials.select_key()
        except Exception:
            logger.exception("API key re-selection failed")
            return
        if not selected:
            logger.warning("API key re-selection did not produce a key")

    async def generate(self, request: GenerationRequest) -> GeneratedCreative:
        if request.requires_credential:
            await self._ensure_credential()

        try:
            response = await self.backend.generate_content(request)
        except Exception as exc:
            message = str(exc)
            logger.error("Generation call to %s failed: %s", request.model, message or type(exc).__name__)
            if INVALID_CREDENTIAL_MARKER in message:
                await self._reselect_key()
                raise InvalidCredentialError() from exc
            raise TransportOrServiceError(message or None, model=request.model) from exc

        extracted = extract_inline_image(response)
        if extracted is None:
            logger.warning("Model %s returned no image data", request.model)
            raise NoImageReturnedError()

        data, mime_type = extracted
        logger.info("Received %s image from %s (%d bytes)", mime_type, request.model, len(data))
        return GeneratedCreative(image_data=data, mime_type=mime_type, prompt=request.prompt, model=request.model)
