from __future__ import annotations

import argparse
import asyncio
import logging
import os
from pathlib import Path

from meta_ad_creator.assets.store import AssetSlot
from meta_ad_creator.generation.client import GenerationClient
from meta_ad_creator.generation.tiers import FAST_MODEL, PRO_MODEL, with_models
from meta_ad_creator.models.ad import EXPOSED_ASPECT_RATIOS, ResolutionTier
from meta_ad_creator.output.writer import creative_summary, save_creative, write_json
from meta_ad_creator.params_loader import ParametersValidationError, build_parameters, load_ad_parameters
from meta_ad_creator.pipeline import generate_ad
from meta_ad_creator.providers.factory import create_backend, create_credentials
from meta_ad_creator.session import AdSession, ResultSink


def _strip_optional_quotes(value: str) -> str:
    trimmed = value.strip()
    if len(trimmed) >= 2 and ((trimmed[0] == '"' and trimmed[-1] == '"') or (trimmed[0] == "'" and trimmed[-1] == "'")):
        return trimmed[1:-1]
    return trimmed


def _load_env_file(env_path: Path) -> None:
    if not env_path.exists() or not env_path.is_file():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, raw_value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue

        os.environ.setdefault(key, _strip_optional_quotes(raw_value))


def _load_default_env_files() -> None:
    cwd_env = Path.cwd() / ".env"
    project_root_env = Path(__file__).resolve().parents[2] / ".env"

    _load_env_file(project_root_env)
    if cwd_env != project_root_env:
        _load_env_file(cwd_env)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Meta Ad Creator: turn a product photo and sale details into an ad")
    parser.add_argument("--product", default=None, help="Product picture (required to generate)")
    parser.add_argument("--concept", default=None, help="Optional style/concept reference picture")
    parser.add_argument("--logo", default=None, help="Optional brand logo")
    parser.add_argument("--params", default=None, help="Ad parameters file (.yaml/.yml/.json)")
    parser.add_argument("--brand", dest="brand_name", default=None, help="Brand name")
    parser.add_argument("--slogan", default=None, help="Slogan text")
    parser.add_argument("--actual-price", default=None, help="Regular price")
    parser.add_argument("--sale-price", default=None, help="Sale price")
    parser.add_argument("--currency", default=None, help="Currency label")
    parser.add_argument(
        "--size",
        dest="image_size",
        choices=[tier.value for tier in ResolutionTier],
        default=None,
        help="Output resolution tier; 2K and 4K use the upgraded model",
    )
    parser.add_argument(
        "--aspect-ratio",
        choices=[ratio.value for ratio in EXPOSED_ASPECT_RATIOS],
        default=None,
        help="Output aspect ratio",
    )
    parser.add_argument("--output", default=".", help="Folder for the downloaded ad")
    parser.add_argument("--provider", choices=["mock", "real"], default="mock", help="Provider mode")
    parser.add_argument(
        "--fast-model",
        default=os.getenv("GEMINI_FAST_MODEL", FAST_MODEL),
        help="Model used for the 1K tier",
    )
    parser.add_argument(
        "--pro-model",
        default=os.getenv("GEMINI_PRO_MODEL", PRO_MODEL),
        help="Model used for the 2K and 4K tiers",
    )
    parser.add_argument("--api-key-env", default="GEMINI_API_KEY", help="Environment variable holding the API key")
    parser.add_argument(
        "--save-prompt",
        action="store_true",
        help="Also write a JSON file with the prompt, model and timestamp next to the ad",
    )
    return parser.parse_args(argv)


def _parameter_overrides(args: argparse.Namespace) -> dict:
    return {
        "brand_name": args.brand_name,
        "slogan": args.slogan,
        "actual_price": args.actual_price,
        "sale_price": args.sale_price,
        "currency": args.currency,
        "image_size": args.image_size,
        "aspect_ratio": args.aspect_ratio,
    }


def _log_progress(sink: ResultSink) -> None:
    if sink.is_generating and sink.phase:
        print(sink.phase)


async def run(args: argparse.Namespace) -> tuple[AdSession, Path | None]:
    overrides = _parameter_overrides(args)
    if args.params:
        parameters = load_ad_parameters(Path(args.params), overrides)
    else:
        parameters = build_parameters({key: value for key, value in overrides.items() if value is not None})

    session = AdSession(parameters=parameters)
    session.result.listener = _log_progress
    await session.assets.set_asset(AssetSlot.PRODUCT, Path(args.product) if args.product else None)
    await session.assets.set_asset(AssetSlot.CONCEPT, Path(args.concept) if args.concept else None)
    await session.assets.set_asset(AssetSlot.LOGO, Path(args.logo) if args.logo else None)

    client = GenerationClient(
        backend=create_backend(args.provider, api_key_env=args.api_key_env),
        credentials=create_credentials(args.provider, api_key_env=args.api_key_env),
    )
    profiles = with_models(fast_model=args.fast_model, pro_model=args.pro_model)
    creative = await generate_ad(session, client, profiles)
    if creative is None:
        return session, None

    output_dir = Path(args.output)
    output_path = save_creative(creative, output_dir, parameters.brand_name)
    if args.save_prompt:
        write_json(creative_summary(creative), output_path.with_suffix(".json"))
    return session, output_path


def main(argv: list[str] | None = None) -> None:
    _load_default_env_files()
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")

    try:
        session, output_path = asyncio.run(run(args))
    except ParametersValidationError as exc:
        raise SystemExit(f"Validation error:\n{exc}") from exc
    except OSError as exc:
        raise SystemExit(f"Ad creation failed: {exc}") from exc

    if output_path is None:
        raise SystemExit(f"Generation failed: {session.result.error}")
    print(f"Ad saved to {output_path}")


if __name__ == "__main__":
    main()
