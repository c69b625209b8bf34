import asyncio
from pathlib import Path

from PIL import Image

from meta_ad_creator.assets.store import AssetSlot, AssetStore, EncodedImage


def _write_png(path: Path, color=(255, 0, 0)) -> Path:
    Image.new("RGB", (8, 8), color).save(path, format="PNG")
    return path


def test_set_asset_reads_and_sniffs_mime(tmp_path: Path) -> None:
    # Extension deliberately wrong: content decides the MIME type.
    path = _write_png(tmp_path / "product.jpg")
    store = AssetStore()

    encoded = asyncio.run(store.set_asset(AssetSlot.PRODUCT, path))

    assert encoded is not None
    assert encoded.mime_type == "image/png"
    assert encoded.data == path.read_bytes()
    assert store.product == encoded
    assert encoded.data_uri.startswith("data:image/png;base64,")


def test_set_asset_replaces_existing_slot(tmp_path: Path) -> None:
    first = _write_png(tmp_path / "a.png", (1, 2, 3))
    second = _write_png(tmp_path / "b.png", (4, 5, 6))
    store = AssetStore()

    asyncio.run(store.set_asset(AssetSlot.LOGO, first))
    asyncio.run(store.set_asset(AssetSlot.LOGO, second))

    assert store.logo is not None
    assert store.logo.data == second.read_bytes()


def test_set_asset_without_file_is_noop(tmp_path: Path) -> None:
    store = AssetStore()
    store.put(AssetSlot.CONCEPT, EncodedImage(data=b"x", mime_type="image/png"))

    assert asyncio.run(store.set_asset(AssetSlot.CONCEPT, None)) is None
    assert store.concept is not None


def test_unknown_bytes_fall_back_to_file_name(tmp_path: Path) -> None:
    path = tmp_path / "logo.gif"
    path.write_bytes(b"not really an image")

    encoded = asyncio.run(AssetStore().set_asset(AssetSlot.LOGO, path))

    assert encoded is not None
    assert encoded.mime_type == "image/gif"


def test_clear_and_clear_all() -> None:
    store = AssetStore()
    image = EncodedImage(data=b"x", mime_type="image/png")
    for slot in AssetSlot:
        store.put(slot, image)

    store.clear(AssetSlot.CONCEPT)
    assert store.concept is None
    assert store.product is image
    assert store.logo is image

    store.clear_all()
    assert store.product is None and store.concept is None and store.logo is None

