from .store import AssetSlot, AssetStore, EncodedImage, read_encoded_image

__all__ = ["AssetSlot", "AssetStore", "EncodedImage", "read_encoded_image"]
