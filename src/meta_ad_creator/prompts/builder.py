from __future__ import annotations

from meta_ad_creator.assets.store import AssetStore
from meta_ad_creator.models.ad import AdParameters

AD_PLACEMENTS = "Facebook and Instagram feed, Stories and Reels placements"


def build_ad_prompt(params: AdParameters, assets: AssetStore) -> str:
    brand = params.brand_name
    actual = params.actual_price
    sale = params.sale_price
    currency = params.currency

    if assets.logo is not None:
        branding_line = (
            "- LOGO PROVIDED: Use the provided Logo Image. "
            "Place it professionally in a corner or alongside the brand name."
        )
    else:
        branding_line = f'- BRAND TEXT: Place the brand name "{brand}" elegantly in a premium font.'

    composition = [
        "- HERO: Use the provided Product Image as the central focus. Ensure the product looks high-end.",
    ]
    if assets.concept is not None:
        composition.append(
            "- STYLE REFERENCE: Incorporate the aesthetic, lighting, and premium layout vibes "
            "from the Concept Image. Do not use it as the hero."
        )

    lines = [
        f'Create a high-impact Meta Ad for the brand "{brand}", suitable for {AD_PLACEMENTS}.',
        "",
        "IMPORTANT BRANDING & LOGO:",
        f'- BRAND NAME: The brand is named "{brand}".',
        branding_line,
        "",
        "CRITICAL SALE DETAILS:",
        "- The product is ON SALE.",
        f"- Regular Price: {actual} {currency}",
        f"- Sale Price: {sale} {currency}",
        f"- The price drop from {actual} to {sale} must be the primary visual highlight.",
        "",
        "COMPOSITION:",
        *composition,
        "- TEXT OVERLAYS:",
        f'  1. "{params.slogan}" in a bold, professional font.',
        '  2. "HUGE SALE" or "SPECIAL OFFER" badge.',
        f'  3. "NOW ONLY {sale}" (make this the biggest text).',
        f'  4. "WAS {actual}" (crossed out or smaller).',
        "- ATMOSPHERE: High-end, clean studio lighting with a complementary lifestyle background.",
        "",
        "Ensure the final image looks like a professional social media advertisement ready for Meta platforms. "
        "The brand logo/name must be integrated seamlessly.",
    ]
    return "\n".join(lines)
