from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .clock import FrameClock
from .state import Disk, Move, PuzzleState, TARGET_PEG


@dataclass(frozen=True, slots=True)
class Frame:
    """Everything the renderer needs to draw one screen."""

    pegs: tuple[tuple[Disk, ...], ...]
    max_disk: int
    move_count: int
    elapsed_s: int
    highlight: Move | None = None

    def moved_disk(self) -> Disk | None:
        if self.highlight is None:
            return None
        destination = self.pegs[self.highlight[1]]
        return destination[-1] if destination else None


@dataclass(slots=True)
class GameSession:
    state: PuzzleState
    clock: FrameClock
    started_at: float
    move_count: int = 0
    history: list[Move] = field(default_factory=list)

    @classmethod
    def start(cls, n_disks: int, clock: FrameClock) -> GameSession:
        return cls(state=PuzzleState(n_disks), clock=clock, started_at=clock.now())

    @property
    def n_disks(self) -> int:
        return self.state.n_disks

    def elapsed_seconds(self) -> int:
        return max(0, int(self.clock.now() - self.started_at))

    def apply(self, move: Move) -> Disk:
        """Move the top disk without checking the size rule."""

        from_peg, to_peg = move
        disk = self.state.pop(from_peg)
        self.state.push(to_peg, disk)
        self.move_count += 1
        self.history.append(move)
        return disk

    def is_won(self) -> bool:
        return self.state.is_solved(TARGET_PEG)

    def frame(self, highlight: Move | None = None) -> Frame:
        return Frame(
            pegs=self.state.pegs,
            max_disk=self.state.n_disks,
            move_count=self.move_count,
            elapsed_s=self.elapsed_seconds(),
            highlight=highlight,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": self.state.snapshot().to_dict(),
            "move_count": self.move_count,
            "elapsed_s": self.elapsed_seconds(),
            "history": [list(m) for m in self.history],
        }
