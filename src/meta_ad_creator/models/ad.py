from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

logger = logging.getLogger(__name__)


class ResolutionTier(str, Enum):
    STANDARD = "1K"
    HIGH = "2K"
    PREMIUM = "4K"


class AspectRatio(str, Enum):
    SQUARE = "1:1"
    PORTRAIT_3_4 = "3:4"
    LANDSCAPE_4_3 = "4:3"
    PORTRAIT = "9:16"
    LANDSCAPE = "16:9"


# 3:4 and 4:3 are accepted by the service but not offered for selection.
EXPOSED_ASPECT_RATIOS: tuple[AspectRatio, ...] = (
    AspectRatio.SQUARE,
    AspectRatio.PORTRAIT,
    AspectRatio.LANDSCAPE,
)


def _as_number(value: str) -> float | None:
    try:
        return float(value.replace(",", "").strip())
    except ValueError:
        return None


class AdParameters(BaseModel):
    model_config = ConfigDict(validate_assignment=True, coerce_numbers_to_str=True)

    brand_name: str = "swaggers"
    slogan: str = "STYLE THAT SPEAKS FOR ITSELF"
    actual_price: str = "5000"
    sale_price: str = "3500"
    currency: str = "Rupees"
    image_size: ResolutionTier = ResolutionTier.STANDARD
    aspect_ratio: AspectRatio = AspectRatio.SQUARE

    @model_validator(mode="after")
    def _warn_on_price_order(self) -> "AdParameters":
        actual = _as_number(self.actual_price)
        sale = _as_number(self.sale_price)
        if actual is not None and sale is not None and sale >= actual:
            logger.warning(
                "Sale price %s is not lower than actual price %s", self.sale_price, self.actual_price
            )
        return self


@dataclass(frozen=True, slots=True)
class GeneratedCreative:
    image_data: bytes
    mime_type: str
    prompt: str
    model: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def timestamp_ms(self) -> int:
        return int(self.created_at.timestamp() * 1000)


def download_filename(brand_name: str) -> str:
    # Separators and dot-only names would let the brand pick the directory.
    stem = brand_name.replace("/", "_").replace("\\", "_").strip()
    if stem.strip(".") == "":
        stem = "brand"
    return f"{stem}-Meta-Ad.png"
