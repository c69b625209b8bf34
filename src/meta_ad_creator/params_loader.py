from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models.ad import AdParameters

MIN_VALID_EXAMPLE_YAML = """brand_name: "Acme"
slogan: "GO FAST"
actual_price: "100"
sale_price: "80"
currency: "USD"
image_size: "1K"
aspect_ratio: "1:1"
"""


class ParametersValidationError(ValueError):
    pass


def _parse_params_file(params_path: Path) -> dict[str, Any]:
    suffix = params_path.suffix.lower()
    content = params_path.read_text(encoding="utf-8")

    if suffix in {".yaml", ".yml"}:
        parsed = yaml.safe_load(content)
    elif suffix == ".json":
        parsed = json.loads(content)
    else:
        raise ParametersValidationError(
            "Unsupported parameters format. Use .yaml, .yml, or .json files.\n\n"
            f"Minimal valid YAML example:\n{MIN_VALID_EXAMPLE_YAML}"
        )

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ParametersValidationError(
            "Parameters root must be an object/map.\n\n"
            f"Minimal valid YAML example:\n{MIN_VALID_EXAMPLE_YAML}"
        )
    return parsed


def build_parameters(values: dict[str, Any]) -> AdParameters:
    try:
        return AdParameters.model_validate(values)
    except ValidationError as exc:
        errors = []
        for item in exc.errors():
            location = ".".join(str(part) for part in item["loc"])
            errors.append(f"- {location}: {item['msg']}")
        raise ParametersValidationError(
            "Ad parameters validation failed:\n"
            + "\n".join(errors)
            + "\n\nMinimal valid YAML example:\n"
            + MIN_VALID_EXAMPLE_YAML
        ) from exc


def load_ad_parameters(params_path: Path, overrides: dict[str, Any] | None = None) -> AdParameters:
    """Load parameters from a YAML/JSON file; non-None *overrides* win over file values."""
    if not params_path.exists():
        raise ParametersValidationError(f"Parameters file not found: {params_path}")

    try:
        parsed = _parse_params_file(params_path)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ParametersValidationError(
            f"Unable to parse parameters file: {exc}\n\n"
            f"Minimal valid YAML example:\n{MIN_VALID_EXAMPLE_YAML}"
        ) from exc

    merged = {**parsed, **{key: value for key, value in (overrides or {}).items() if value is not None}}
    return build_parameters(merged)
