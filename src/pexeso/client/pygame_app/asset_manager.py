from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame  # type: ignore[import-not-found]

from pexeso.services.settings import FontSettings


@dataclass
class Fonts:
    card: pygame.font.Font
    ui: pygame.font.Font
    big: pygame.font.Font


@dataclass
class FontLoadResult:
    ok: bool
    fonts: Fonts | None = None
    error: str | None = None


class AssetManager:
    def __init__(self, repo_root: Path, assets_dir: Path) -> None:
        self.repo_root = repo_root
        self.assets_dir = assets_dir
        self.fonts: Fonts | None = None

    def _resolve(self, path_str: str) -> Path:
        p = Path(path_str)
        if p.is_absolute():
            return p
        # Allow settings to reference "assets/..."
        if path_str.startswith("assets/"):
            return self.repo_root / path_str
        return self.assets_dir / path_str

    def load_fonts(self, cfg: FontSettings) -> FontLoadResult:
        """Load every font once. Failure is reported, never raised."""
        if self.fonts is not None:
            return FontLoadResult(ok=True, fonts=self.fonts)

        pygame.font.init()
        source: str | None = None
        if cfg.file is not None:
            path = self._resolve(cfg.file)
            if not path.is_file():
                return FontLoadResult(ok=False, error=f"Font not found: {path}")
            source = path.as_posix()

        try:
            fonts = Fonts(
                card=pygame.font.Font(source, cfg.card),
                ui=pygame.font.Font(source, cfg.ui),
                big=pygame.font.Font(source, cfg.big),
            )
        except (OSError, pygame.error) as e:
            return FontLoadResult(ok=False, error=f"Could not load font {source or '<default>'}: {e}")

        self.fonts = fonts
        return FontLoadResult(ok=True, fonts=fonts)
