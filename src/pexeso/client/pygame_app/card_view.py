from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from pexeso.engine.board import BoardState
from pexeso.engine.types import Card
from pexeso.services.settings import Palette


def card_rect(card: Card) -> pygame.Rect:
    r = card.rect
    return pygame.Rect(int(r.x), int(r.y), int(r.w), int(r.h))


def draw_card(screen: pygame.Surface, font: pygame.font.Font, card: Card, palette: Palette) -> None:
    """Outline always; the value only while the card is face up."""
    rect = card_rect(card)
    if card.matched:
        fill = palette.card_matched
    elif card.revealed:
        fill = palette.card_face
    else:
        fill = palette.card_back
    pygame.draw.rect(screen, fill, rect, border_radius=8)
    pygame.draw.rect(screen, palette.outline, rect, width=2, border_radius=8)

    if card.face_up:
        img = font.render(str(card.value), True, palette.label)
        screen.blit(img, img.get_rect(center=rect.center).topleft)


def draw_board(screen: pygame.Surface, font: pygame.font.Font, state: BoardState, palette: Palette) -> None:
    for card in state.cards:
        draw_card(screen, font, card, palette)
