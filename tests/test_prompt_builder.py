from meta_ad_creator.assets.store import AssetSlot, AssetStore, EncodedImage
from meta_ad_creator.models.ad import AdParameters
from meta_ad_creator.prompts.builder import build_ad_prompt

_IMAGE = EncodedImage(data=b"img", mime_type="image/png")


def _params() -> AdParameters:
    return AdParameters(
        brand_name="Acme",
        slogan="GO FAST",
        actual_price="100",
        sale_price="80",
        currency="USD",
    )


def _assets(*slots: AssetSlot) -> AssetStore:
    store = AssetStore()
    for slot in slots:
        store.put(slot, _IMAGE)
    return store


def test_prompt_states_brand_prices_and_currency() -> None:
    prompt = build_ad_prompt(_params(), _assets(AssetSlot.PRODUCT))
    assert '"Acme"' in prompt
    assert "Regular Price: 100 USD" in prompt
    assert "Sale Price: 80 USD" in prompt
    assert "price drop from 100 to 80" in prompt
    assert '"GO FAST" in a bold' in prompt
    assert '"NOW ONLY 80" (make this the biggest text)' in prompt
    assert '"WAS 100" (crossed out or smaller)' in prompt


def test_logo_replaces_premium_font_fallback() -> None:
    with_logo = build_ad_prompt(_params(), _assets(AssetSlot.PRODUCT, AssetSlot.LOGO))
    without_logo = build_ad_prompt(_params(), _assets(AssetSlot.PRODUCT))

    assert "premium font" not in with_logo
    assert "LOGO PROVIDED" in with_logo
    assert "premium font" in without_logo
    assert 'Place the brand name "Acme"' in without_logo


def test_style_reference_only_when_concept_present() -> None:
    with_concept = build_ad_prompt(_params(), _assets(AssetSlot.PRODUCT, AssetSlot.CONCEPT))
    without_concept = build_ad_prompt(_params(), _assets(AssetSlot.PRODUCT))

    assert "STYLE REFERENCE" in with_concept
    assert "Do not use it as the hero" in with_concept
    assert "STYLE REFERENCE" not in without_concept


def test_prompt_is_deterministic() -> None:
    params = _params()
    assets = _assets(AssetSlot.PRODUCT, AssetSlot.CONCEPT, AssetSlot.LOGO)
    assert build_ad_prompt(params, assets) == build_ad_prompt(params, assets)


def test_prompt_ignores_tier_and_ratio() -> None:
    assets = _assets(AssetSlot.PRODUCT)
    base = build_ad_prompt(_params(), assets)
    changed = _params()
    changed.image_size = "4K"
    changed.aspect_ratio = "16:9"
    assert build_ad_prompt(changed, assets) == base
