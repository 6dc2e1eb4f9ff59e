from __future__ import annotations

from typing import Iterator

from .state import (
    AUXILIARY_PEG,
    PEG_COUNT,
    SOURCE_PEG,
    TARGET_PEG,
    Move,
    PegIndex,
    PuzzleState,
    validate_n_disks,
    validate_peg_index,
)

_ALL_PEGS = sum(range(PEG_COUNT))


def optimal_move_count(n_disks: int) -> int:
    validate_n_disks(n_disks)
    return (1 << n_disks) - 1


def _validate_roles(source: PegIndex, auxiliary: PegIndex, target: PegIndex) -> None:
    for peg in (source, auxiliary, target):
        validate_peg_index(peg)
    if len({source, auxiliary, target}) != PEG_COUNT:
        raise ValueError(
            "source, auxiliary and target must be three distinct pegs, "
            f"got {(source, auxiliary, target)}"
        )


def _tower(count: int, source: PegIndex, auxiliary: PegIndex, target: PegIndex) -> Iterator[Move]:
    if count == 0:
        return
    yield from _tower(count - 1, source, target, auxiliary)
    yield (source, target)
    yield from _tower(count - 1, auxiliary, source, target)


def solve_moves(
    count: int,
    source: PegIndex = SOURCE_PEG,
    auxiliary: PegIndex = AUXILIARY_PEG,
    target: PegIndex = TARGET_PEG,
) -> Iterator[Move]:
    """Lazily yield the optimal moves carrying `count` disks from `source` to `target`.

    The smaller sub-tower is parked on `auxiliary`, the largest disk moves,
    then the sub-tower is rebuilt on top of it. Exactly `2**count - 1` moves.
    """

    validate_n_disks(count)
    _validate_roles(source, auxiliary, target)
    return _tower(count, source, auxiliary, target)


class OptimalSolution:
    """Restartable view over `solve_moves`: every iteration starts over."""

    def __init__(
        self,
        n_disks: int,
        source: PegIndex = SOURCE_PEG,
        auxiliary: PegIndex = AUXILIARY_PEG,
        target: PegIndex = TARGET_PEG,
    ) -> None:
        validate_n_disks(n_disks)
        _validate_roles(source, auxiliary, target)
        self.n_disks = n_disks
        self.source = source
        self.auxiliary = auxiliary
        self.target = target

    def __iter__(self) -> Iterator[Move]:
        return _tower(self.n_disks, self.source, self.auxiliary, self.target)

    def __len__(self) -> int:
        return optimal_move_count(self.n_disks)


def solve_from_state(state: PuzzleState, target: PegIndex = TARGET_PEG) -> Iterator[Move]:
    """Yield the shortest move sequence from `state` to a full tower on `target`.

    Works from any size-ordered configuration. From the starting position it
    is the same sequence as `solve_moves(n, 0, 1, 2)`.
    """

    validate_peg_index(target)
    positions = list(state.disk_positions())

    def gather(count: int, goal: PegIndex) -> Iterator[Move]:
        if count == 0:
            return
        where = positions[count - 1]
        if where == goal:
            yield from gather(count - 1, goal)
            return
        spare = _ALL_PEGS - where - goal
        yield from gather(count - 1, spare)
        yield (where, goal)
        positions[count - 1] = goal
        yield from _tower(count - 1, spare, where, goal)

    return gather(state.n_disks, target)
