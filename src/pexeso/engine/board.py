from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .actions import Action, ClickAction
from .types import Card, Idle, OneSelected, Point, Selection, SelectionPhase, TwoPending

Event = dict[str, object]


@dataclass(frozen=True)
class BoardConfig:
    pairs: int = 8
    columns: int = 4
    card_size: float = 100.0
    spacing: float = 120.0
    origin: tuple[float, float] = (50.0, 50.0)
    reveal_delay: float = 1.0  # seconds both cards stay up before a click may resolve them


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None


@dataclass
class BoardState:
    config: BoardConfig
    seed: int
    cards: list[Card]
    selection: Selection = field(default_factory=Idle)
    attempts: int = 0
    matches: int = 0
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)


def _pair_values(pairs: int) -> list[int]:
    values: list[int] = []
    for v in range(1, pairs + 1):
        values.append(v)
        values.append(v)
    return values


def _check_values(values: Sequence[int], pairs: int) -> None:
    if sorted(values) != _pair_values(pairs):
        raise ValueError(f"Card values must be exactly two of each of 1..{pairs}.")


def _layout(values: Sequence[int], cfg: BoardConfig) -> list[Card]:
    ox, oy = cfg.origin
    cards: list[Card] = []
    for i, value in enumerate(values):
        row, col = divmod(i, cfg.columns)
        cards.append(Card.at(ox + cfg.spacing * col, oy + cfg.spacing * row, value, size=cfg.card_size))
    return cards


def is_game_won(state: BoardState) -> bool:
    return all(card.matched for card in state.cards)


def selection_phase(state: BoardState) -> SelectionPhase:
    sel = state.selection
    if isinstance(sel, TwoPending):
        return "two_pending"
    if isinstance(sel, OneSelected):
        return "one_selected"
    return "idle"


def find_selectable(state: BoardState, point: Point) -> int | None:
    """Index of the first hidden, unmatched card under `point`, if any."""
    for i, card in enumerate(state.cards):
        if not card.matched and card.contains(point) and not card.is_visible():
            return i
    return None


def _resolve_pending(state: BoardState, pending: TwoPending) -> None:
    first = state.cards[pending.first]
    second = state.cards[pending.second]
    state.attempts += 1
    if first.value_equals(second):
        first.set_matched()
        second.set_matched()
        state.matches += 1
        state.event_log.append(
            {
                "type": "PAIR_MATCHED",
                "first": pending.first,
                "second": pending.second,
                "value": first.value,
                "attempts": state.attempts,
                "matches": state.matches,
            }
        )
        if is_game_won(state):
            state.event_log.append({"type": "GAME_WON", "attempts": state.attempts})
    else:
        first.flip()
        second.flip()
        state.event_log.append(
            {
                "type": "PAIR_MISSED",
                "first": pending.first,
                "second": pending.second,
                "attempts": state.attempts,
                "matches": state.matches,
            }
        )
    state.selection = Idle()


def _click(state: BoardState, action: ClickAction) -> StepResult:
    before = len(state.event_log)
    state.action_log.append(action)

    if isinstance(state.selection, TwoPending):
        _resolve_pending(state, state.selection)

    index = find_selectable(state, action.point)
    if index is None:
        return StepResult(ok=True, events=state.event_log[before:])

    card = state.cards[index]
    card.flip()
    sel = state.selection
    if isinstance(sel, OneSelected):
        state.selection = TwoPending(first=sel.first, second=index, since=action.at)
    else:
        state.selection = OneSelected(first=index)
    state.event_log.append({"type": "CARD_REVEALED", "index": index, "value": card.value})
    return StepResult(ok=True, events=state.event_log[before:])


def step(state: BoardState, action: Action) -> StepResult:
    """Apply a single click to the board.

    Mutates `state` in-place. Clicks that arrive while a pair is still on
    display are rejected without touching the state or the action log, so a
    replay of the log reproduces the same board.
    """
    if is_game_won(state):
        return StepResult(ok=False, events=[], error="Game already won.")

    sel = state.selection
    if isinstance(sel, TwoPending) and action.at - sel.since < state.config.reveal_delay:
        return StepResult(ok=False, events=[], error="Pair still on display.")

    return _click(state, action)


def new_board(
    seed: int,
    config: BoardConfig | None = None,
    values: Sequence[int] | None = None,
) -> BoardState:
    cfg = config or BoardConfig()
    if values is None:
        deal = _pair_values(cfg.pairs)
        random.Random(seed).shuffle(deal)
    else:
        _check_values(values, cfg.pairs)
        deal = list(values)
    return BoardState(config=cfg, seed=seed, cards=_layout(deal, cfg))


def replay(
    seed: int,
    actions: Iterable[Action],
    config: BoardConfig | None = None,
    values: Sequence[int] | None = None,
) -> BoardState:
    state = new_board(seed, config=config, values=values)
    for a in actions:
        step(state, a)
    return state
