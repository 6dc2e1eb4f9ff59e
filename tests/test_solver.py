from __future__ import annotations

import unittest

from hanoi_console.rules import is_valid
from hanoi_console.state import PuzzleState
from hanoi_console.solver import (
    OptimalSolution,
    optimal_move_count,
    solve_from_state,
    solve_moves,
)

THREE_DISK_SOLUTION = [(0, 2), (0, 1), (2, 1), (0, 2), (1, 0), (1, 2), (0, 2)]


def _play(state: PuzzleState, moves) -> int:
    count = 0
    for from_peg, to_peg in moves:
        assert is_valid(state, from_peg, to_peg), (from_peg, to_peg, state)
        state.push(to_peg, state.pop(from_peg))
        count += 1
    return count


class TestRecursiveSolver(unittest.TestCase):
    def test_three_disk_sequence(self) -> None:
        self.assertEqual(list(solve_moves(3, 0, 1, 2)), THREE_DISK_SOLUTION)

    def test_three_disk_example_final_state(self) -> None:
        state = PuzzleState(3)
        self.assertEqual(_play(state, THREE_DISK_SOLUTION), 7)
        self.assertEqual(state.pegs, ((), (), (3, 2, 1)))

    def test_move_count_and_final_state_across_range(self) -> None:
        for n_disks in range(1, 13):
            state = PuzzleState(n_disks)
            moves = _play(state, solve_moves(n_disks))
            self.assertEqual(moves, 2**n_disks - 1)
            self.assertEqual(moves, optimal_move_count(n_disks))
            self.assertEqual(state.pegs[2], tuple(range(n_disks, 0, -1)))
            self.assertTrue(state.is_solved())

    def test_zero_disks_yields_nothing(self) -> None:
        self.assertEqual(list(solve_moves(0)), [])

    def test_generator_is_lazy(self) -> None:
        moves = solve_moves(20)
        self.assertEqual(next(moves), (0, 1))

    def test_other_peg_roles(self) -> None:
        state = PuzzleState(4, start_peg=2)
        _play(state, solve_moves(4, 2, 1, 0))
        self.assertEqual(state.pegs[0], (4, 3, 2, 1))

    def test_rejects_repeated_roles(self) -> None:
        with self.assertRaises(ValueError):
            solve_moves(3, 0, 0, 2)
        with self.assertRaises(ValueError):
            solve_moves(-1)

    def test_optimal_solution_is_restartable(self) -> None:
        solution = OptimalSolution(4)
        self.assertEqual(len(solution), 15)
        first = list(solution)
        second = list(solution)
        self.assertEqual(first, second)
        self.assertEqual(len(first), 15)


class TestSolveFromState(unittest.TestCase):
    def test_matches_classic_from_start(self) -> None:
        for n_disks in range(0, 8):
            self.assertEqual(
                list(solve_from_state(PuzzleState(n_disks))),
                list(solve_moves(n_disks, 0, 1, 2)),
            )

    def test_resumes_partway_through_optimal_play(self) -> None:
        state = PuzzleState(3)
        _play(state, THREE_DISK_SOLUTION[:3])
        remaining = list(solve_from_state(state))
        self.assertEqual(remaining, THREE_DISK_SOLUTION[3:])

    def test_finishes_from_arbitrary_position(self) -> None:
        state = PuzzleState.from_pegs([[5, 2], [4, 1], [3]])
        moves = _play(state, solve_from_state(state))
        self.assertTrue(state.is_solved())
        self.assertEqual(state.pegs[2], (5, 4, 3, 2, 1))
        self.assertLessEqual(moves, optimal_move_count(5))

    def test_already_solved_needs_no_moves(self) -> None:
        state = PuzzleState.from_pegs([[], [], [3, 2, 1]])
        self.assertEqual(list(solve_from_state(state)), [])


if __name__ == "__main__":
    unittest.main()
