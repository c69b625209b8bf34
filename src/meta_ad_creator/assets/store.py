from __future__ import annotations

import asyncio
import base64
import io
import logging
import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

_DEFAULT_MIME_TYPE = "image/jpeg"


class AssetSlot(str, Enum):
    PRODUCT = "product"
    CONCEPT = "concept"
    LOGO = "logo"


@dataclass(frozen=True, slots=True)
class EncodedImage:
    data: bytes
    mime_type: str

    @property
    def data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


def _sniff_mime_type(data: bytes, path: Path) -> str:
    try:
        with Image.open(io.BytesIO(data)) as image:
            if image.format and image.format in Image.MIME:
                return Image.MIME[image.format]
    except (UnidentifiedImageError, OSError):
        pass
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or _DEFAULT_MIME_TYPE


async def read_encoded_image(path: Path) -> EncodedImage:
    data = await asyncio.to_thread(path.read_bytes)
    return EncodedImage(data=data, mime_type=_sniff_mime_type(data, path))


class AssetStore:
    """The three optional image slots of one session."""

    def __init__(self) -> None:
        self._slots: dict[AssetSlot, EncodedImage | None] = {slot: None for slot in AssetSlot}

    async def set_asset(self, slot: AssetSlot, path: Path | None) -> EncodedImage | None:
        """Read *path* and replace whatever *slot* held.

        A missing path is ignored and leaves the slot untouched.
        """
        if path is None:
            return None
        encoded = await read_encoded_image(Path(path))
        self._slots[AssetSlot(slot)] = encoded
        logger.info("Loaded %s image %s (%s, %d bytes)", AssetSlot(slot).value, path, encoded.mime_type, len(encoded.data))
        return encoded

    def put(self, slot: AssetSlot, image: EncodedImage | None) -> None:
        self._slots[AssetSlot(slot)] = image

    def get(self, slot: AssetSlot) -> EncodedImage | None:
        return self._slots[AssetSlot(slot)]

    def clear(self, slot: AssetSlot) -> None:
        self._slots[AssetSlot(slot)] = None

    def clear_all(self) -> None:
        for slot in AssetSlot:
            self._slots[slot] = None

    @property
    def product(self) -> EncodedImage | None:
        return self._slots[AssetSlot.PRODUCT]

    @property
    def concept(self) -> EncodedImage | None:
        return self._slots[AssetSlot.CONCEPT]

    @property
    def logo(self) -> EncodedImage | None:
        return self._slots[AssetSlot.LOGO]
