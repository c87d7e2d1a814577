from __future__ import annotations

import argparse
import sys

import pygame  # type: ignore[import-not-found]

from pexeso.paths import get_paths
from pexeso.services.settings import ContentError, SettingsService
from pexeso.services.telemetry import TelemetryService

from .app import App, GameContext
from .asset_manager import AssetManager
from .scenes.game import GameScene, new_seed


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pexeso")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None, help="fix the card shuffle")
    parser.add_argument("--font", default=None, help="font file, relative to assets/")
    parser.add_argument("--no-telemetry", action="store_true")
    args = parser.parse_args(argv)

    paths = get_paths()
    service = SettingsService(paths.data_dir, paths.schema_dir)
    try:
        settings = service.apply_overrides(
            service.load_settings(), width=args.width, height=args.height, font_file=args.font
        )
    except ContentError as e:
        return _fail(str(e))

    telemetry = TelemetryService(paths.userdata_dir / "telemetry.jsonl", enabled=not args.no_telemetry)
    seed = args.seed if args.seed is not None else new_seed()

    pygame.init()
    try:
        assets = AssetManager(repo_root=paths.repo_root, assets_dir=paths.assets_dir)
        loaded = assets.load_fonts(settings.fonts)
        if not loaded.ok or loaded.fonts is None:
            telemetry.log("boot", {"ok": False, "error": loaded.error})
            return _fail(loaded.error or "font failed to load")

        try:
            screen = pygame.display.set_mode((settings.window.width, settings.window.height))
        except pygame.error as e:
            telemetry.log("boot", {"ok": False, "error": str(e)})
            return _fail(f"Could not open window: {e}")
        pygame.display.set_caption(settings.window.title)
        telemetry.log("boot", {"ok": True, "seed": seed})

        ctx = GameContext(
            screen=screen,
            clock=pygame.time.Clock(),
            settings=settings,
            fonts=loaded.fonts,
            telemetry=telemetry,
        )
        app = App(ctx, GameScene(ctx, seed=seed))
        return app.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())
