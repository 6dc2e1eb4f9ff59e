from __future__ import annotations

import random
import unittest

from hanoi_console.rules import check_move, illegal_reason, is_valid, legal_moves
from hanoi_console.state import IllegalMoveError, PuzzleState


def _apply(state: PuzzleState, from_peg: int, to_peg: int) -> None:
    state.push(to_peg, state.pop(from_peg))


class TestMoveValidator(unittest.TestCase):
    def test_empty_source_is_never_valid(self) -> None:
        state = PuzzleState.from_pegs([[2, 1], [], []])
        for to_peg in (0, 2):
            self.assertFalse(is_valid(state, 1, to_peg))

    def test_empty_destination_accepts_any_disk(self) -> None:
        state = PuzzleState.from_pegs([[3], [2, 1], []])
        self.assertTrue(is_valid(state, 0, 2))
        self.assertTrue(is_valid(state, 1, 2))

    def test_compares_tops_when_both_non_empty(self) -> None:
        state = PuzzleState.from_pegs([[4, 2], [3], [1]])
        for from_peg in range(3):
            for to_peg in range(3):
                if from_peg == to_peg:
                    continue
                expected = state.peek_top(from_peg) < state.peek_top(to_peg)
                self.assertEqual(is_valid(state, from_peg, to_peg), expected)

    def test_validation_does_not_mutate(self) -> None:
        state = PuzzleState(3)
        before = state.pegs
        is_valid(state, 0, 1)
        is_valid(state, 1, 0)
        legal_moves(state)
        self.assertEqual(state.pegs, before)

    def test_legal_moves_from_start(self) -> None:
        self.assertEqual(set(legal_moves(PuzzleState(3))), {(0, 1), (0, 2)})

    def test_check_move_reasons(self) -> None:
        state = PuzzleState.from_pegs([[2], [1], []])
        self.assertIsNone(illegal_reason(state, 1, 0))
        self.assertIn("empty", illegal_reason(state, 2, 0) or "")
        with self.assertRaises(IllegalMoveError):
            check_move(state, 0, 1)
        with self.assertRaises(IllegalMoveError):
            check_move(state, 0, 0)

    def test_random_legal_play_keeps_invariants(self) -> None:
        rng = random.Random(1234)
        for n_disks in (1, 3, 5, 7):
            state = PuzzleState(n_disks)
            for _ in range(300):
                from_peg, to_peg = rng.choice(legal_moves(state))
                self.assertTrue(is_valid(state, from_peg, to_peg))
                _apply(state, from_peg, to_peg)

                disks = sorted(d for peg in state.pegs for d in peg)
                self.assertEqual(disks, list(range(1, n_disks + 1)))
                for peg in state.pegs:
                    self.assertEqual(list(peg), sorted(peg, reverse=True))
                    self.assertEqual(len(set(peg)), len(peg))


if __name__ == "__main__":
    unittest.main()
