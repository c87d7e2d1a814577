from __future__ import annotations

import json
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

Color = tuple[int, int, int]


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing settings file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.absolute_path])
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_section(obj: Mapping[str, object], key: str) -> Mapping[str, object]:
    v = obj.get(key)
    if not isinstance(v, dict):
        raise ContentError(f"Expected object for {key}")
    return v


def _require_str(obj: Mapping[str, object], key: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


def _require_int(obj: Mapping[str, object], key: str) -> int:
    v = obj.get(key)
    if not isinstance(v, int):
        raise ContentError(f"Expected int for {key}")
    return v


def _optional_str(obj: Mapping[str, object], key: str) -> str | None:
    v = obj.get(key)
    if v is None:
        return None
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


def _require_color(obj: Mapping[str, object], key: str) -> Color:
    v = obj.get(key)
    if not isinstance(v, list) or len(v) != 3 or not all(isinstance(c, int) for c in v):
        raise ContentError(f"Expected [r, g, b] for {key}")
    return (v[0], v[1], v[2])


@dataclass(frozen=True)
class WindowSettings:
    title: str
    width: int
    height: int
    fps: int


@dataclass(frozen=True)
class FontSettings:
    file: str | None  # relative to assets/; None means pygame's bundled font
    card: int
    ui: int
    big: int


@dataclass(frozen=True)
class Palette:
    background: Color
    card_back: Color
    card_face: Color
    card_matched: Color
    outline: Color
    label: Color
    text: Color
    win: Color


@dataclass(frozen=True)
class Settings:
    window: WindowSettings
    fonts: FontSettings
    colors: Palette

    def with_overrides(
        self,
        width: int | None = None,
        height: int | None = None,
        font_file: str | None = None,
    ) -> "Settings":
        window = replace(
            self.window,
            width=width if width is not None else self.window.width,
            height=height if height is not None else self.window.height,
        )
        fonts = self.fonts if font_file is None else replace(self.fonts, file=font_file)
        return replace(self, window=window, fonts=fonts)


def _settings_to_raw(settings: Settings) -> dict[str, object]:
    return {
        "window": asdict(settings.window),
        "fonts": asdict(settings.fonts),
        "colors": {k: list(v) for k, v in asdict(settings.colors).items()},
    }


class SettingsService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def _schema(self) -> object:
        return _load_json(self._schema_dir / "settings.schema.json")

    def apply_overrides(
        self,
        settings: Settings,
        width: int | None = None,
        height: int | None = None,
        font_file: str | None = None,
    ) -> Settings:
        """Command-line overrides must pass the same schema as settings.json."""
        out = settings.with_overrides(width=width, height=height, font_file=font_file)
        validate_json(_settings_to_raw(out), self._schema(), context="command-line overrides")
        return out

    def load_settings(self, path: Path | None = None) -> Settings:
        settings_path = path or (self._data_dir / "settings.json")
        schema = self._schema()
        raw = _load_json(settings_path)
        validate_json(raw, schema, context=str(settings_path))
        if not isinstance(raw, dict):
            raise ContentError("settings.json must be an object")

        win = _require_section(raw, "window")
        fonts = _require_section(raw, "fonts")
        colors = _require_section(raw, "colors")
        return Settings(
            window=WindowSettings(
                title=_require_str(win, "title"),
                width=_require_int(win, "width"),
                height=_require_int(win, "height"),
                fps=_require_int(win, "fps"),
            ),
            fonts=FontSettings(
                file=_optional_str(fonts, "file"),
                card=_require_int(fonts, "card"),
                ui=_require_int(fonts, "ui"),
                big=_require_int(fonts, "big"),
            ),
            colors=Palette(
                background=_require_color(colors, "background"),
                card_back=_require_color(colors, "card_back"),
                card_face=_require_color(colors, "card_face"),
                card_matched=_require_color(colors, "card_matched"),
                outline=_require_color(colors, "outline"),
                label=_require_color(colors, "label"),
                text=_require_color(colors, "text"),
                win=_require_color(colors, "win"),
            ),
        )
