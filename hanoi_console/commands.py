from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .state import PEG_COUNT, Move

CommandKind = Literal["quit", "autosolve", "move", "invalid"]

QUIT_WORDS = frozenset({"q", "quit", "exit"})
AUTOSOLVE_WORDS = frozenset({"a", "autosolve", "solve"})


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    move: Move | None = None
    raw: str = ""


def _parse_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def parse_command(line: str | None) -> Command:
    """Parse one turn line.

    Peg numbers are 1-based on input and 0-based in the returned move.
    """

    if line is None:
        return Command("invalid")
    raw = line.strip()
    word = raw.lower()
    if word in QUIT_WORDS:
        return Command("quit", raw=raw)
    if word in AUTOSOLVE_WORDS:
        return Command("autosolve", raw=raw)

    parts = raw.split()
    if len(parts) != 2:
        return Command("invalid", raw=raw)
    from_peg = _parse_int(parts[0])
    to_peg = _parse_int(parts[1])
    if from_peg is None or to_peg is None:
        return Command("invalid", raw=raw)
    if not (1 <= from_peg <= PEG_COUNT and 1 <= to_peg <= PEG_COUNT):
        return Command("invalid", raw=raw)
    if from_peg == to_peg:
        return Command("invalid", raw=raw)
    return Command("move", move=(from_peg - 1, to_peg - 1), raw=raw)


def parse_disk_count(
    line: str | None, *, default: int, minimum: int, maximum: int
) -> int:
    """Read a disk count, falling back to `default` and clamping to the range.

    Negative numbers count as unparseable, like any other non-count text.
    """

    value = _parse_int(line.strip()) if line is not None else None
    if value is None or value < 0:
        value = default
    return max(minimum, min(maximum, value))
