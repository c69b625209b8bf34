from __future__ import annotations

import logging
import os

from google import genai
from google.genai import types

from meta_ad_creator.exceptions import ConfigurationError
from meta_ad_creator.generation.request import GenerationRequest, InlineImagePart, TextPart

from .base import GenerationBackend

logger = logging.getLogger(__name__)


def to_genai_contents(request: GenerationRequest) -> types.Content:
    parts: list[types.Part] = []
    for part in request.parts:
        if isinstance(part, TextPart):
            parts.append(types.Part.from_text(text=part.text))
        elif isinstance(part, InlineImagePart):
            parts.append(types.Part.from_bytes(data=part.data, mime_type=part.mime_type))
    return types.Content(role="user", parts=parts)


def to_genai_config(request: GenerationRequest) -> types.GenerateContentConfig:
    image_config_kwargs: dict[str, str] = {"aspect_ratio": request.aspect_ratio}
    if request.image_size is not None:
        image_config_kwargs["image_size"] = request.image_size
    return types.GenerateContentConfig(
        response_modalities=["IMAGE", "TEXT"],
        image_config=types.ImageConfig(**image_config_kwargs),
    )


class GeminiDeveloperBackend(GenerationBackend):
    """Gemini Developer API backend.

    The client is created right before each call so a key chosen through the
    credential selector during this session is picked up.
    """

    def __init__(self, api_key_env: str = "GEMINI_API_KEY"):
        self.api_key_env = api_key_env

    def _client(self) -> genai.Client:
        api_key = os.getenv(self.api_key_env)
        if not api_key:
            raise ConfigurationError(f"Missing API key environment variable: {self.api_key_env}")
        return genai.Client(api_key=api_key)

    async def generate_content(self, request: GenerationRequest) -> types.GenerateContentResponse:
        client = self._client()
        logger.info("Calling Gemini model %s", request.model)
        return await client.aio.models.generate_content(
            model=request.model,
            contents=to_genai_contents(request),
            config=to_genai_config(request),
        )
