from __future__ import annotations


from .actions import Action
from .board import BoardState, selection_phase
from .types import Card, OneSelected, Selection, TwoPending


def action_to_dict(a: Action) -> dict[str, object]:
    return {"type": "click", "x": a.x, "y": a.y, "at": a.at}


def _selection_to_dict(sel: Selection) -> dict[str, object]:
    if isinstance(sel, TwoPending):
        return {"first": sel.first, "second": sel.second, "since": sel.since}
    if isinstance(sel, OneSelected):
        return {"first": sel.first}
    return {}


def _card_to_dict(c: Card) -> dict[str, object]:
    return {
        "x": c.rect.x,
        "y": c.rect.y,
        "size": c.rect.w,
        "value": c.value,
        "revealed": c.revealed,
        "matched": c.matched,
    }


def snapshot(state: BoardState) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current board state."""
    return {
        "seed": state.seed,
        "attempts": state.attempts,
        "matches": state.matches,
        "phase": selection_phase(state),
        "selection": _selection_to_dict(state.selection),
        "cards": [_card_to_dict(c) for c in state.cards],
        "action_log": [action_to_dict(a) for a in state.action_log],
    }
