from __future__ import annotations

import json

from hanoi_console import GameSession, ManualClock, is_valid, optimal_move_count, solve_moves


def main() -> None:
    session = GameSession.start(4, ManualClock())

    for move in solve_moves(session.n_disks, 0, 1, 2):
        if not is_valid(session.state, *move):
            raise RuntimeError(f"solver produced illegal move {move}")
        session.apply(move)

    print("Solved:", session.is_won())
    print("Moves:", session.move_count, "(optimal:", optimal_move_count(session.n_disks), ")")
    print("\nSession:\n", json.dumps(session.to_dict(), indent=2, sort_keys=True))


if __name__ == "__main__":
    main()
