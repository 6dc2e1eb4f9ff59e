from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

PegIndex: TypeAlias = int
Disk: TypeAlias = int
Move: TypeAlias = tuple[PegIndex, PegIndex]

PEG_COUNT = 3
SOURCE_PEG = 0
AUXILIARY_PEG = 1
TARGET_PEG = 2


class HanoiError(Exception):
    """Base exception for the console puzzle."""


class InvalidPegError(HanoiError, ValueError):
    """Raised when a peg index is out of range."""


class IllegalMoveError(HanoiError):
    """Raised when a move violates Tower of Hanoi rules."""


@dataclass(frozen=True, slots=True)
class HanoiState:
    """Immutable snapshot of a puzzle configuration.

    Representation notes:
      - `pegs` is a 3-tuple of stacks, each stack listed bottom->top.
      - Disk sizes are integers 1..n, where 1 is the smallest.
      - `disk_positions[d-1]` gives the peg index (0..2) holding disk `d`.
    """

    n_disks: int
    pegs: tuple[tuple[Disk, ...], ...]
    disk_positions: tuple[PegIndex, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "n_disks": self.n_disks,
            "pegs": [list(p) for p in self.pegs],
            "disk_positions": list(self.disk_positions),
        }


def initial_stack(n_disks: int) -> list[Disk]:
    return list(range(n_disks, 0, -1))


def validate_n_disks(n_disks: int) -> None:
    if isinstance(n_disks, bool) or not isinstance(n_disks, int):
        raise TypeError(f"n_disks must be int, got {type(n_disks).__name__}")
    if n_disks < 0:
        raise ValueError(f"n_disks must be >= 0, got {n_disks}")


def validate_peg_index(peg: int) -> None:
    if isinstance(peg, bool) or not isinstance(peg, int):
        raise TypeError(f"peg index must be int, got {type(peg).__name__}")
    if peg < 0 or peg >= PEG_COUNT:
        raise InvalidPegError(f"peg index must be in [0, {PEG_COUNT - 1}], got {peg}")


class PuzzleState:
    """The three live peg stacks.

    Mutation is limited to `pop`/`push`; neither checks the size rule, which
    is the job of `hanoi_console.rules`.
    """

    def __init__(self, n_disks: int, *, start_peg: PegIndex = SOURCE_PEG) -> None:
        validate_n_disks(n_disks)
        validate_peg_index(start_peg)
        self.n_disks = n_disks
        self._pegs: list[list[Disk]] = [[] for _ in range(PEG_COUNT)]
        self._pegs[start_peg] = initial_stack(n_disks)

    @classmethod
    def from_pegs(cls, pegs: list[list[Disk]] | tuple[tuple[Disk, ...], ...]) -> PuzzleState:
        """Build a state from explicit bottom->top stacks."""

        if len(pegs) != PEG_COUNT:
            raise InvalidPegError(f"expected {PEG_COUNT} pegs, got {len(pegs)}")
        disks = sorted(disk for peg in pegs for disk in peg)
        if disks != list(range(1, len(disks) + 1)):
            raise ValueError(f"pegs must hold disks 1..n exactly once, got {disks}")
        state = cls(0)
        state.n_disks = len(disks)
        state._pegs = [list(peg) for peg in pegs]
        return state

    @property
    def pegs(self) -> tuple[tuple[Disk, ...], ...]:
        return tuple(tuple(peg) for peg in self._pegs)

    def height(self, peg: PegIndex) -> int:
        validate_peg_index(peg)
        return len(self._pegs[peg])

    def peek_top(self, peg: PegIndex) -> Disk | None:
        validate_peg_index(peg)
        stack = self._pegs[peg]
        return stack[-1] if stack else None

    def pop(self, peg: PegIndex) -> Disk:
        validate_peg_index(peg)
        return self._pegs[peg].pop()

    def push(self, peg: PegIndex, disk: Disk) -> None:
        validate_peg_index(peg)
        self._pegs[peg].append(disk)

    def is_solved(self, target_peg: PegIndex = TARGET_PEG, n_disks: int | None = None) -> bool:
        validate_peg_index(target_peg)
        expected = self.n_disks if n_disks is None else n_disks
        return len(self._pegs[target_peg]) == expected

    def disk_positions(self) -> tuple[PegIndex, ...]:
        positions = [0] * self.n_disks
        for peg_index, stack in enumerate(self._pegs):
            for disk in stack:
                positions[disk - 1] = peg_index
        return tuple(positions)

    def snapshot(self) -> HanoiState:
        return HanoiState(
            n_disks=self.n_disks,
            pegs=self.pegs,
            disk_positions=self.disk_positions(),
        )

    def __repr__(self) -> str:
        return f"PuzzleState(n_disks={self.n_disks}, pegs={[list(p) for p in self._pegs]})"
