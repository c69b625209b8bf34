import json
from pathlib import Path

import pytest
from PIL import Image

from meta_ad_creator.cli import _load_default_env_files, main, parse_args
from meta_ad_creator.generation.tiers import FAST_MODEL, PRO_MODEL


def _clear_model_env(monkeypatch) -> None:
    for name in ("GEMINI_FAST_MODEL", "GEMINI_PRO_MODEL", "GEMINI_API_KEY"):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)


def _product(tmp_path: Path) -> Path:
    product = tmp_path / "product.png"
    Image.new("RGB", (16, 16), (200, 10, 10)).save(product)
    return product


def test_model_defaults_come_from_dotenv(tmp_path: Path, monkeypatch) -> None:
    _clear_model_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text('GEMINI_PRO_MODEL="pro-from-env"\n# comment\n', encoding="utf-8")

    _load_default_env_files()
    args = parse_args([])

    assert args.pro_model == "pro-from-env"
    assert args.fast_model == FAST_MODEL


def test_exported_model_wins_over_dotenv(tmp_path: Path, monkeypatch) -> None:
    _clear_model_env(monkeypatch)
    monkeypatch.setenv("GEMINI_FAST_MODEL", "fast-exported")
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("GEMINI_FAST_MODEL=fast-from-file\n", encoding="utf-8")

    _load_default_env_files()
    args = parse_args([])

    assert args.fast_model == "fast-exported"
    assert args.pro_model == PRO_MODEL


def test_main_mock_run_downloads_ad(tmp_path: Path, monkeypatch) -> None:
    _clear_model_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    product = _product(tmp_path)
    output_dir = tmp_path / "out"

    main(
        [
            "--product", str(product),
            "--brand", "Acme",
            "--actual-price", "100",
            "--sale-price", "80",
            "--currency", "USD",
            "--output", str(output_dir),
            "--save-prompt",
        ]
    )

    ad_path = output_dir / "Acme-Meta-Ad.png"
    assert ad_path.exists()
    with Image.open(ad_path) as image:
        assert image.format == "PNG"
    summary = json.loads((output_dir / "Acme-Meta-Ad.json").read_text(encoding="utf-8"))
    assert summary["model"] == "gemini-2.5-flash-image"
    assert "Acme" in summary["prompt"]


def test_main_without_product_exits_with_message(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main(["--output", str(tmp_path)])
    assert "Please upload your Product Picture first." in str(exc.value)


def test_mock_upgraded_tier_runs_without_api_key(tmp_path: Path, monkeypatch) -> None:
    _clear_model_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    output_dir = tmp_path / "out"

    main(["--product", str(_product(tmp_path)), "--size", "2K", "--brand", "Acme", "--output", str(output_dir), "--save-prompt"])

    assert (output_dir / "Acme-Meta-Ad.png").exists()
    summary = json.loads((output_dir / "Acme-Meta-Ad.json").read_text(encoding="utf-8"))
    assert summary["model"] == PRO_MODEL


def test_brand_cannot_steer_download_outside_output(tmp_path: Path, monkeypatch) -> None:
    _clear_model_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    output_dir = tmp_path / "out"

    main(["--product", str(_product(tmp_path)), "--brand", "../escaped", "--output", str(output_dir)])

    assert not (tmp_path / "escaped-Meta-Ad.png").exists()
    assert [path.name for path in output_dir.iterdir()] == [".._escaped-Meta-Ad.png"]
