from __future__ import annotations

import io
import json
from pathlib import Path

from PIL import Image

from meta_ad_creator.models.ad import GeneratedCreative, download_filename


def save_creative(creative: GeneratedCreative, output_dir: Path, brand_name: str) -> Path:
    output_path = output_dir / download_filename(brand_name)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with Image.open(io.BytesIO(creative.image_data)) as image:
        image.save(output_path, format="PNG")
    return output_path


def creative_summary(creative: GeneratedCreative) -> dict:
    return {
        "model": creative.model,
        "mime_type": creative.mime_type,
        "created_at": creative.created_at.isoformat(),
        "timestamp_ms": creative.timestamp_ms,
        "prompt": creative.prompt,
    }


def write_json(payload: dict, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
