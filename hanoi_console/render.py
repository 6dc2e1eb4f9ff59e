from __future__ import annotations

import colorsys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from .session import Frame
from .state import PEG_COUNT

if TYPE_CHECKING:
    from .controller import GameResult

DISK_CHAR = "▄"
TITLE = "Tower of Hanoi"
TITLE_STYLE = "bold rgb(255,215,0)"
FALLBACK_HEIGHT = 24

DISK_COLORS: tuple[tuple[int, int, int], ...] = (
    (255, 85, 85),  # red
    (255, 215, 0),  # gold
    (0, 191, 255),  # deep sky blue
    (124, 252, 0),  # lawn green
    (255, 105, 180),  # hot pink
    (255, 140, 0),  # dark orange
    (186, 85, 211),  # medium orchid
    (64, 224, 208),  # turquoise
    (255, 0, 255),  # magenta
    (0, 255, 127),  # spring green
    (255, 69, 0),  # orange red
    (0, 255, 255),  # cyan
    (255, 255, 0),  # yellow
    (0, 128, 255),  # azure
    (255, 20, 147),  # deep pink
    (0, 255, 0),  # lime
)

CELEBRATION_STYLES = (
    "bold red",
    "bold yellow",
    "bold green",
    "bold cyan",
    "bold blue",
    "bold magenta",
)

INSTRUCTIONS = (
    "  Move all disks from the leftmost tower to the rightmost tower.",
    "  Only one disk can be moved at a time.",
    "  No disk may be placed on top of a smaller disk.",
    "  Enter moves as two numbers: from to (e.g., 1 3).",
    "  Type 'autosolve' (or 'a') to watch the optimal solution.",
    "  Type 'q' to quit.",
)


def disk_color(index: int, total: int) -> tuple[int, int, int]:
    """Palette color for the `index`-th largest disk; HLS hues past the palette."""

    if index < len(DISK_COLORS):
        return DISK_COLORS[index]
    hue = index / max(total, 1)
    r, g, b = colorsys.hls_to_rgb(hue, 0.5, 0.7)
    return (round(r * 255), round(g * 255), round(b * 255))


def disk_text(size: int, max_size: int) -> Text:
    width = size * 2 - 1
    pad = " " * (max_size - size)
    r, g, b = disk_color(max_size - size, max_size)
    text = Text(pad)
    text.append(DISK_CHAR * width, style=f"bold rgb({r},{g},{b})")
    text.append(pad)
    return text


def _label_style(peg: int, highlight: tuple[int, int] | None) -> str:
    if highlight is None:
        return "bold white"
    if peg == highlight[0]:
        return "bold red"
    if peg == highlight[1]:
        return "bold green"
    return "bold white"


def tower_rows(frame: Frame) -> list[Text]:
    """One `Text` per disk level, top level first, then the peg labels."""

    slot_width = frame.max_disk * 2 - 1
    rows: list[Text] = []
    for level in range(frame.max_disk - 1, -1, -1):
        line = Text()
        for peg in frame.pegs:
            line.append(" ")
            if level < len(peg):
                line.append_text(disk_text(peg[level], frame.max_disk))
            else:
                line.append(" " * slot_width)
            line.append(" ")
        rows.append(line)

    labels = Text()
    for peg in range(PEG_COUNT):
        label = f"[{peg + 1}]"
        left = max(0, slot_width - len(label)) // 2
        right = max(0, slot_width - left - len(label))
        labels.append(" " + " " * left)
        labels.append(label, style=_label_style(peg, frame.highlight))
        labels.append(" " * right + " ")
    rows.append(labels)
    return rows


class TerminalRenderer:
    """Draws frames and messages on a rich `Console`."""

    def __init__(self, console: Console | None = None, *, color: bool = True) -> None:
        self.console = console or Console(highlight=False, no_color=not color)

    def clear(self) -> None:
        self.console.clear()

    def _center(self, renderable: Text | str, style: str | None = None) -> None:
        self.console.print(renderable, style=style, justify="center")

    def banner(self) -> None:
        self._center(Text(TITLE, style=TITLE_STYLE))

    def instructions(self) -> None:
        self.console.print(Text("How to Play:", style="bold underline cyan"))
        for line in INSTRUCTIONS:
            self.console.print(Text(line, style="bright_white"))
        self.console.print()

    def prompt_disk_count(self) -> str:
        return "How many disks? (3-8 recommended): "

    def prompt_move(self) -> str:
        return "Move (from to), 'autosolve', or 'q': "

    def render(self, frame: Frame) -> None:
        self.clear()
        self.banner()
        self._center(
            Text(f"Moves: {frame.move_count}   Time: {frame.elapsed_s}s", style="bold yellow")
        )

        content_height = 1 + 1 + frame.max_disk + 1 + 2
        term_height = self.console.size.height or FALLBACK_HEIGHT
        vertical_pad = max(3, (term_height - content_height) // 2)
        self.console.print("\n" * (vertical_pad - 1))

        for row in tower_rows(frame):
            self._center(row)

        disk = frame.moved_disk()
        if frame.highlight is not None and disk is not None:
            from_peg, to_peg = frame.highlight
            self._center(
                Text(f"Disk {disk}: [{from_peg + 1}] -> [{to_peg + 1}]", style="dim")
            )
        self.console.print()

    def warning(self, message: str) -> None:
        self.console.print(Text(message, style="bold red"))

    def celebrate(self, message: str, index: int) -> None:
        self.console.print("\n")
        self._center(
            Text(message, style=CELEBRATION_STYLES[index % len(CELEBRATION_STYLES)])
        )
        self.console.print()

    def victory(self, message: str) -> None:
        self.console.print("\n")
        self._center(Text(message, style="bold bright_green"))
        self.console.print()

    def summary(self, result: GameResult) -> None:
        how = "autosolved" if result.autosolved else "solved"
        self._center(
            Text(
                f"{result.n_disks} disks {how} in {result.move_count} moves "
                f"(optimal: {result.optimal_moves}), {result.elapsed_s}s",
                style="bold yellow",
            )
        )

    def farewell(self) -> None:
        self.console.print(Text("Goodbye!", style="bold bright_magenta"))
