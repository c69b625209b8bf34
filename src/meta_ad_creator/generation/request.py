from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from meta_ad_creator.assets.store import AssetSlot, AssetStore
from meta_ad_creator.exceptions import MissingRequiredAssetError
from meta_ad_creator.generation.tiers import TIER_PROFILES, TierProfile, resolve_tier
from meta_ad_creator.models.ad import AdParameters, ResolutionTier

logger = logging.getLogger(__name__)

# Image parts are appended in this order after the text prompt.
IMAGE_PART_ORDER: tuple[AssetSlot, ...] = (AssetSlot.PRODUCT, AssetSlot.CONCEPT, AssetSlot.LOGO)


class TextPart(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class InlineImagePart(BaseModel):
    model_config = ConfigDict(frozen=True)

    slot: AssetSlot
    data: bytes
    mime_type: str


class GenerationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    label: str
    prompt: str
    parts: list[TextPart | InlineImagePart] = Field(min_length=2)
    aspect_ratio: str
    image_size: str | None = None
    requires_credential: bool = False

    @property
    def image_parts(self) -> list[InlineImagePart]:
        return [part for part in self.parts if isinstance(part, InlineImagePart)]


def build_generation_request(
    params: AdParameters,
    assets: AssetStore,
    prompt: str,
    profiles: Mapping[ResolutionTier, TierProfile] = TIER_PROFILES,
) -> GenerationRequest:
    if assets.product is None:
        raise MissingRequiredAssetError()

    profile: TierProfile = resolve_tier(params.image_size, profiles)

    parts: list[TextPart | InlineImagePart] = [TextPart(text=prompt)]
    for slot in IMAGE_PART_ORDER:
        image = assets.get(slot)
        if image is None:
            continue
        parts.append(InlineImagePart(slot=slot, data=image.data, mime_type=image.mime_type))

    image_size = params.image_size.value if profile.forwards_image_size else None
    logger.info(
        "Selected model %s for tier %s (aspect ratio %s, %d image parts)",
        profile.model,
        params.image_size.value,
        params.aspect_ratio.value,
        len(parts) - 1,
    )
    return GenerationRequest(
        model=profile.model,
        label=profile.label,
        prompt=prompt,
        parts=parts,
        aspect_ratio=params.aspect_ratio.value,
        image_size=image_size,
        requires_credential=profile.requires_credential,
    )
