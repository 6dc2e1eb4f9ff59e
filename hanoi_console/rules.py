from __future__ import annotations

from .state import PEG_COUNT, IllegalMoveError, Move, PegIndex, PuzzleState


def is_valid(state: PuzzleState, from_peg: PegIndex, to_peg: PegIndex) -> bool:
    """Return whether the top disk of `from_peg` may be placed on `to_peg`."""

    moving = state.peek_top(from_peg)
    if moving is None:
        return False
    resting = state.peek_top(to_peg)
    if resting is None:
        return True
    return moving < resting


def legal_moves(state: PuzzleState) -> list[Move]:
    legal: list[Move] = []
    for from_peg in range(PEG_COUNT):
        for to_peg in range(PEG_COUNT):
            if to_peg != from_peg and is_valid(state, from_peg, to_peg):
                legal.append((from_peg, to_peg))
    return legal


def illegal_reason(state: PuzzleState, from_peg: PegIndex, to_peg: PegIndex) -> str | None:
    """Explain why a move is rejected, or return None for a legal move."""

    if from_peg == to_peg:
        return "from_peg and to_peg must be different"
    moving = state.peek_top(from_peg)
    if moving is None:
        return f"peg {from_peg + 1} is empty"
    resting = state.peek_top(to_peg)
    if resting is not None and resting < moving:
        return f"cannot place disk {moving} on top of smaller disk {resting}"
    return None


def check_move(state: PuzzleState, from_peg: PegIndex, to_peg: PegIndex) -> None:
    reason = illegal_reason(state, from_peg, to_peg)
    if reason is not None:
        raise IllegalMoveError(reason)
