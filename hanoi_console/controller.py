from __future__ import annotations

import enum
import json
import sys
from dataclasses import dataclass, field
from typing import Callable, Protocol

from .clock import FrameClock, SystemClock
from .commands import Command, parse_command, parse_disk_count
from .config import GameConfig
from .rules import illegal_reason, is_valid
from .session import Frame, GameSession
from .solver import optimal_move_count, solve_from_state
from .state import TARGET_PEG, Move

LineReader = Callable[[str], str]

CELEBRATION_MESSAGES = (
    "You are a Tower of Hanoi God!",
    "Flawless Victory!",
    "Unstoppable!",
    "Legendary!",
    "Congratulations!",
)
INVALID_INPUT_MESSAGE = "Invalid input! Try again."
INVALID_MOVE_MESSAGE = "Invalid move! Try again."


class Renderer(Protocol):
    def clear(self) -> None: ...
    def instructions(self) -> None: ...
    def prompt_disk_count(self) -> str: ...
    def prompt_move(self) -> str: ...
    def render(self, frame: Frame) -> None: ...
    def warning(self, message: str) -> None: ...
    def celebrate(self, message: str, index: int) -> None: ...
    def victory(self, message: str) -> None: ...
    def summary(self, result: GameResult) -> None: ...
    def farewell(self) -> None: ...


class Phase(enum.Enum):
    SETUP = "setup"
    PLAYING = "playing"
    SOLVING = "solving"
    WON = "won"
    QUIT = "quit"


class Outcome(str, enum.Enum):
    WON = "won"
    QUIT = "quit"


@dataclass(frozen=True, slots=True)
class GameResult:
    outcome: Outcome
    n_disks: int
    move_count: int
    elapsed_s: int
    autosolved: bool = False
    history: tuple[Move, ...] = field(default_factory=tuple)

    @property
    def optimal_moves(self) -> int:
        return optimal_move_count(self.n_disks)


class GameController:
    """Drives one game from the disk-count prompt to a win or a quit."""

    def __init__(
        self,
        renderer: Renderer,
        read_line: LineReader,
        *,
        clock: FrameClock | None = None,
        config: GameConfig | None = None,
        debug: bool = False,
    ) -> None:
        self.renderer = renderer
        self.read_line = read_line
        self.clock = clock or SystemClock()
        self.config = config or GameConfig()
        self.debug = bool(debug)
        self.phase = Phase.SETUP
        self.session: GameSession | None = None
        self._autosolved = False

    def _log(self, message: str) -> None:
        if not self.debug:
            return
        print(f"[hanoi debug] {message}", file=sys.stderr, flush=True)

    def setup(self, n_disks: int | None = None) -> GameSession:
        self.phase = Phase.SETUP
        self.renderer.clear()
        self.renderer.instructions()
        if n_disks is None:
            try:
                line: str | None = self.read_line(self.renderer.prompt_disk_count())
            except (EOFError, OSError) as exc:
                self._log(f"disk count read failed ({exc!r}); using default")
                line = None
            n_disks = parse_disk_count(
                line,
                default=self.config.default_disks,
                minimum=self.config.min_disks,
                maximum=self.config.max_disks,
            )
        else:
            n_disks = self.config.clamp_disks(n_disks)

        self._log(f"starting with {n_disks} disks")
        self.session = GameSession.start(n_disks, self.clock)
        self._autosolved = False
        self.phase = Phase.PLAYING
        return self.session

    def run(self, n_disks: int | None = None, *, autosolve: bool = False) -> GameResult:
        session = self.setup(n_disks)
        if autosolve:
            self.phase = Phase.SOLVING

        while self.phase is Phase.PLAYING:
            self.renderer.render(session.frame())
            if session.is_won():
                self.phase = Phase.WON
                break
            self.phase = self.play_turn(session)

        if self.phase is Phase.QUIT:
            self.renderer.farewell()
            return self._result(session, Outcome.QUIT)

        if self.phase is Phase.SOLVING:
            self.autosolve(session)
            self.phase = Phase.WON

        self.celebrate()
        result = self._result(session, Outcome.WON)
        self.renderer.summary(result)
        return result

    def _read_command(self) -> Command:
        try:
            line = self.read_line(self.renderer.prompt_move())
        except EOFError:
            self._log("input closed; quitting")
            return Command("quit")
        except OSError as exc:
            self._log(f"input read failed ({exc!r})")
            return Command("invalid")
        return parse_command(line)

    def play_turn(self, session: GameSession) -> Phase:
        """Read and handle one line of input; return the next phase."""

        command = self._read_command()
        if command.kind == "quit":
            return Phase.QUIT
        if command.kind == "autosolve":
            return Phase.SOLVING
        if command.kind == "invalid" or command.move is None:
            self._log(f"rejected input {command.raw!r}")
            self._warn(INVALID_INPUT_MESSAGE)
            return Phase.PLAYING

        from_peg, to_peg = command.move
        if not is_valid(session.state, from_peg, to_peg):
            self._log(
                f"illegal move {command.raw!r}: "
                f"{illegal_reason(session.state, from_peg, to_peg)}"
            )
            self._warn(INVALID_MOVE_MESSAGE)
            return Phase.PLAYING

        self._apply_and_show(session, command.move)
        return Phase.PLAYING

    def autosolve(self, session: GameSession) -> None:
        self.phase = Phase.SOLVING
        self._autosolved = True
        applied = 0
        self._log(f"autosolve from {session.state!r}")
        for move in solve_from_state(session.state, TARGET_PEG):
            assert is_valid(session.state, *move), f"solver produced illegal move {move}"
            self._apply_and_show(session, move)
            applied += 1
        self._log(f"autosolve finished after {applied} moves")

    def celebrate(self) -> None:
        for index in range(self.config.celebration_frames):
            message = CELEBRATION_MESSAGES[index % len(CELEBRATION_MESSAGES)]
            self.renderer.celebrate(message, index)
            self.clock.sleep(self.config.celebration_delay_s)
            self.renderer.clear()
        self.renderer.victory(CELEBRATION_MESSAGES[0])

    def _apply_and_show(self, session: GameSession, move: Move) -> None:
        disk = session.apply(move)
        self._log(f"move {session.move_count}: disk {disk} {move[0] + 1}->{move[1] + 1}")
        self.renderer.render(session.frame(highlight=move))
        self.clock.sleep(self.config.frame_delay_s)

    def _warn(self, message: str) -> None:
        self.renderer.warning(message)
        self.clock.sleep(self.config.warning_delay_s)

    def _result(self, session: GameSession, outcome: Outcome) -> GameResult:
        self.phase = Phase.WON if outcome is Outcome.WON else Phase.QUIT
        self._log(f"{outcome.value}: {json.dumps(session.to_dict(), sort_keys=True)}")
        return GameResult(
            outcome=outcome,
            n_disks=session.n_disks,
            move_count=session.move_count,
            elapsed_s=session.elapsed_seconds(),
            autosolved=self._autosolved,
            history=tuple(session.history),
        )
