"""Tower of Hanoi for the terminal: puzzle state, solver and game loop."""

from __future__ import annotations

from .clock import FrameClock, ManualClock, SystemClock
from .commands import Command, parse_command, parse_disk_count
from .config import ConfigError, GameConfig, load_config, resolve_config
from .controller import GameController, GameResult, Outcome, Phase
from .rules import check_move, is_valid, legal_moves
from .session import Frame, GameSession
from .solver import OptimalSolution, optimal_move_count, solve_from_state, solve_moves
from .state import (
    Disk,
    HanoiError,
    HanoiState,
    IllegalMoveError,
    InvalidPegError,
    Move,
    PegIndex,
    PuzzleState,
)

__all__ = [
    "FrameClock",
    "ManualClock",
    "SystemClock",
    "Command",
    "parse_command",
    "parse_disk_count",
    "ConfigError",
    "GameConfig",
    "load_config",
    "resolve_config",
    "GameController",
    "GameResult",
    "Outcome",
    "Phase",
    "check_move",
    "is_valid",
    "legal_moves",
    "Frame",
    "GameSession",
    "OptimalSolution",
    "optimal_move_count",
    "solve_from_state",
    "solve_moves",
    "Disk",
    "HanoiError",
    "HanoiState",
    "IllegalMoveError",
    "InvalidPegError",
    "Move",
    "PegIndex",
    "PuzzleState",
]
