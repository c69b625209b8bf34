from __future__ import annotations

import hashlib
import io

from google.genai import types
from PIL import Image, ImageDraw, ImageFont

from meta_ad_creator.generation.request import GenerationRequest

from .base import GenerationBackend

_BASE_EDGE = {"1K": 256, "2K": 512, "4K": 1024}


def _canvas_size(aspect_ratio: str, image_size: str | None) -> tuple[int, int]:
    edge = _BASE_EDGE.get(image_size or "1K", 256)
    width_ratio, height_ratio = (int(value) for value in aspect_ratio.split(":"))
    if width_ratio >= height_ratio:
        return edge, max(1, round(edge * height_ratio / width_ratio))
    return max(1, round(edge * width_ratio / height_ratio)), edge


def render_mock_creative(prompt: str, size: tuple[int, int]) -> bytes:
    width, height = size
    digest = hashlib.sha256(prompt.encode("utf-8")).hexdigest()
    color_a = tuple(int(digest[i : i + 2], 16) for i in (0, 2, 4))
    color_b = tuple(int(digest[i : i + 2], 16) for i in (6, 8, 10))

    image = Image.new("RGB", (width, height), color_a)
    draw = ImageDraw.Draw(image)

    for y in range(height):
        blend = y / max(height - 1, 1)
        r = int(color_a[0] * (1 - blend) + color_b[0] * blend)
        g = int(color_a[1] * (1 - blend) + color_b[1] * blend)
        b = int(color_a[2] * (1 - blend) + color_b[2] * blend)
        draw.line([(0, y), (width, y)], fill=(r, g, b))

    font = ImageFont.load_default()
    label = "MOCK AD"
    text_bbox = draw.textbbox((0, 0), label, font=font)
    text_w = text_bbox[2] - text_bbox[0]
    text_h = text_bbox[3] - text_bbox[1]
    draw.rounded_rectangle([(8, 8), (8 + text_w + 12, 8 + text_h + 8)], radius=6, fill=(0, 0, 0))
    draw.text((14, 12), label, fill=(255, 255, 255), font=font)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


class MockGenerationBackend(GenerationBackend):
    """Offline backend answering with a gradient PNG derived from the prompt."""

    def __init__(self) -> None:
        self.calls: list[GenerationRequest] = []

    async def generate_content(self, request: GenerationRequest) -> types.GenerateContentResponse:
        self.calls.append(request)
        png = render_mock_creative(request.prompt, _canvas_size(request.aspect_ratio, request.image_size))
        return types.GenerateContentResponse(
            candidates=[
                types.Candidate(
                    content=types.Content(
                        role="model",
                        parts=[
                            types.Part.from_text(text="Here is your ad."),
                            types.Part.from_bytes(data=png, mime_type="image/png"),
                        ],
                    )
                )
            ]
        )
