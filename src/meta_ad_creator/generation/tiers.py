"""Resolution tier to model configuration lookup.

Adding a tier means adding a row to :data:`TIER_PROFILES`; nothing else in the
request path branches on the tier value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

from meta_ad_creator.exceptions import ConfigurationError
from meta_ad_creator.models.ad import ResolutionTier

FAST_MODEL = "gemini-2.5-flash-image"
PRO_MODEL = "gemini-3-pro-image-preview"


@dataclass(frozen=True, slots=True)
class TierProfile:
    model: str
    label: str
    forwards_image_size: bool
    requires_credential: bool


TIER_PROFILES: Mapping[ResolutionTier, TierProfile] = {
    ResolutionTier.STANDARD: TierProfile(
        model=FAST_MODEL, label="Gemini 2.5 Flash", forwards_image_size=False, requires_credential=False
    ),
    ResolutionTier.HIGH: TierProfile(
        model=PRO_MODEL, label="Gemini 3 Pro", forwards_image_size=True, requires_credential=True
    ),
    ResolutionTier.PREMIUM: TierProfile(
        model=PRO_MODEL, label="Gemini 3 Pro", forwards_image_size=True, requires_credential=True
    ),
}


def with_models(
    fast_model: str | None = None,
    pro_model: str | None = None,
    profiles: Mapping[ResolutionTier, TierProfile] = TIER_PROFILES,
) -> dict[ResolutionTier, TierProfile]:
    """Return a copy of *profiles* with the baseline and upgraded model names swapped in."""
    updated: dict[ResolutionTier, TierProfile] = {}
    for tier, profile in profiles.items():
        if profile.forwards_image_size:
            updated[tier] = replace(profile, model=pro_model or profile.model)
        else:
            updated[tier] = replace(profile, model=fast_model or profile.model)
    return updated


def resolve_tier(tier: ResolutionTier, profiles: Mapping[ResolutionTier, TierProfile] = TIER_PROFILES) -> TierProfile:
    try:
        return profiles[ResolutionTier(tier)]
    except (KeyError, ValueError) as exc:
        raise ConfigurationError(f"No model configured for resolution tier: {getattr(tier, 'value', tier)}") from exc
