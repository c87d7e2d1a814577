from __future__ import annotations

import json
from pathlib import Path

import pytest

from pexeso.paths import get_paths
from pexeso.services.settings import ContentError, SettingsService


def _service() -> SettingsService:
    paths = get_paths()
    return SettingsService(paths.data_dir, paths.schema_dir)


def _write(path: Path, raw: object) -> Path:
    path.write_text(json.dumps(raw), encoding="utf-8")
    return path


def test_shipped_settings_validate() -> None:
    settings = _service().load_settings()
    assert settings.window.width >= 560
    assert settings.fonts.file is None
    assert settings.colors.card_back != settings.colors.card_face


def test_schema_violation_is_reported(tmp_path: Path) -> None:
    raw = json.loads((get_paths().data_dir / "settings.json").read_text(encoding="utf-8"))
    raw["window"]["width"] = "wide"
    raw["colors"]["win"] = [0, 300, 0]
    with pytest.raises(ContentError) as exc:
        _service().load_settings(_write(tmp_path / "settings.json", raw))
    msg = str(exc.value)
    assert "window/width" in msg
    assert "colors/win" in msg


def test_missing_and_malformed_files(tmp_path: Path) -> None:
    with pytest.raises(ContentError, match="Missing settings file"):
        _service().load_settings(tmp_path / "nope.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ContentError, match="Invalid JSON"):
        _service().load_settings(bad)


def test_cli_overrides() -> None:
    settings = _service().load_settings()
    out = settings.with_overrides(width=800, font_file="fonts/Roboto-Black.ttf")
    assert out.window.width == 800
    assert out.window.height == settings.window.height
    assert out.fonts.file == "fonts/Roboto-Black.ttf"
    assert settings.with_overrides() == settings


def test_overrides_pass_through_the_schema() -> None:
    service = _service()
    settings = service.load_settings()
    assert service.apply_overrides(settings, width=800).window.width == 800
    with pytest.raises(ContentError, match="window/width"):
        service.apply_overrides(settings, width=-5)
    # smaller than the 4x4 grid
    with pytest.raises(ContentError, match="window/height"):
        service.apply_overrides(settings, height=400)
