from __future__ import annotations

import random

import pygame  # type: ignore[import-not-found]

from pexeso.engine.actions import ClickAction
from pexeso.engine.board import is_game_won, new_board, step

from ..app import GameContext, SceneTransition
from ..card_view import draw_board
from ..ui import Button, draw_text, draw_text_centered


def new_seed() -> int:
    return random.randrange(1, 2**31 - 1)


class GameScene:
    def __init__(self, ctx: GameContext, seed: int) -> None:
        self.ctx = ctx
        self.state = new_board(seed)
        self._next: SceneTransition | None = None

        w, h = ctx.screen.get_size()
        self.btn_again = Button(
            rect=pygame.Rect(w // 2 - 110, h // 2 + 50, 220, 52),
            text="Play again",
            on_click=self._on_play_again,
        )
        self.ctx.telemetry.log("game_started", {"seed": seed})

    def _on_play_again(self) -> None:
        self._next = SceneTransition(GameScene(self.ctx, seed=new_seed()))

    def handle_event(self, event: pygame.event.Event) -> None:
        if is_game_won(self.state):
            self.btn_again.handle_event(event)
            return
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._handle_click(event.pos)

    def _handle_click(self, pos: tuple[int, int]) -> None:
        # get_ticks is monotonic from pygame.init()
        now = pygame.time.get_ticks() / 1000.0
        res = step(self.state, ClickAction(x=float(pos[0]), y=float(pos[1]), at=now))
        if res.ok:
            self.ctx.telemetry.log_events(res.events)

    def update(self, dt: float) -> SceneTransition | None:
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        colors = self.ctx.settings.colors
        fonts = self.ctx.fonts
        screen.fill(colors.background)
        draw_board(screen, fonts.card, self.state, colors)
        self._draw_score(screen)
        if is_game_won(self.state):
            self._draw_win(screen)

    def _draw_score(self, screen: pygame.Surface) -> None:
        total = self.state.config.pairs
        ox, _ = self.state.config.origin
        draw_text(
            screen,
            self.ctx.fonts.ui,
            f"Attempts: {self.state.attempts}   Pairs: {self.state.matches}/{total}",
            (int(ox), screen.get_height() - 45),
            color=self.ctx.settings.colors.text,
        )

    def _draw_win(self, screen: pygame.Surface) -> None:
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 170))
        screen.blit(overlay, (0, 0))

        cx, cy = screen.get_width() // 2, screen.get_height() // 2
        colors = self.ctx.settings.colors
        draw_text_centered(screen, self.ctx.fonts.big, "You Win!", (cx, cy - 50), color=colors.win)
        draw_text_centered(
            screen,
            self.ctx.fonts.ui,
            f"All pairs found in {self.state.attempts} attempts",
            (cx, cy + 10),
            color=colors.text,
        )
        self.btn_again.draw(screen, self.ctx.fonts.ui)
