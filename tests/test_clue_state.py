import unittest

import fakes  # noqa: F401  (sets LOG_DIR before trivia_board is imported)
from trivia_board.exceptions import AddressingError
from trivia_board.models.board import Board, Category, Clue, RevealState
from trivia_board.services.clue_state import cell_text, resolve_clue, reveal


def _mk_board(layout):
    # layout: [(title, [(question, answer), ...]), ...]
    categories = []
    for index, (title, pairs) in enumerate(layout):
        clues = tuple(Clue(question=q, answer=a) for q, a in pairs)
        categories.append(Category(category_id=index, title=title, clues=clues))
    return Board(categories=tuple(categories))


class TestClueState(unittest.TestCase):
    def setUp(self):
        self.board = _mk_board([
            ("Science", [("H2O is this", "What is water?")]),
            ("History", [("First US president", "Who is Washington?")]),
        ])

    def _states(self):
        return [[c.reveal_state for c in cat.clues] for cat in self.board.categories]

    def test_given_hidden_clue_when_revealed_three_times_then_question_answer_then_noop(self):
        first = reveal(self.board, 0, 0)
        self.assertEqual(first.state, RevealState.QUESTION)
        self.assertEqual(first.text, "H2O is this")
        self.assertTrue(first.changed)

        second = reveal(self.board, 0, 0)
        self.assertEqual(second.state, RevealState.ANSWER)
        self.assertEqual(second.text, "What is water?")
        self.assertTrue(second.changed)

        third = reveal(self.board, 0, 0)
        self.assertEqual(third.state, RevealState.ANSWER)
        self.assertEqual(third.text, "What is water?")
        self.assertFalse(third.changed)

        # Other clue untouched
        self.assertEqual(self.board.categories[1].clues[0].reveal_state, RevealState.HIDDEN)

    def test_given_answer_clue_when_revealed_repeatedly_then_state_never_changes(self):
        reveal(self.board, 1, 0)
        reveal(self.board, 1, 0)
        for _ in range(10):
            result = reveal(self.board, 1, 0)
            self.assertEqual(result.state, RevealState.ANSWER)
            self.assertFalse(result.changed)

    def test_given_sequence_of_reveals_when_observed_then_state_never_regresses(self):
        order = [RevealState.HIDDEN, RevealState.QUESTION, RevealState.ANSWER]
        last = order.index(self.board.categories[0].clues[0].reveal_state)
        for _ in range(5):
            result = reveal(self.board, 0, 0)
            now = order.index(result.state)
            self.assertGreaterEqual(now, last)
            self.assertLessEqual(now - last, 1)
            last = now

    def test_given_out_of_range_indices_when_revealed_then_addressing_error_and_board_unchanged(self):
        before = self._states()
        for address in [(2, 0), (0, 1), (-1, 0), (0, -1), (6, 0), (99, 99)]:
            with self.assertRaises(AddressingError):
                reveal(self.board, *address)
        self.assertEqual(self._states(), before)

    def test_given_non_integer_indices_when_revealed_then_addressing_error(self):
        for address in [("0", 0), (0, None), (True, 0), (0.0, 0)]:
            with self.assertRaises(AddressingError):
                reveal(self.board, *address)

    def test_given_no_board_when_revealed_then_addressing_error(self):
        with self.assertRaises(AddressingError) as ctx:
            reveal(None, 0, 0)
        self.assertIn("no board", ctx.exception.reason)

    def test_given_six_category_board_when_revealing_category_six_then_error_not_crash(self):
        board = _mk_board([(f"Cat {i}", [("q", "a")]) for i in range(6)])
        with self.assertRaises(AddressingError):
            reveal(board, 6, 0)
        self.assertIs(resolve_clue(board, 5, 0), board.categories[5].clues[0])

    def test_given_board_when_counting_categories_then_first_index_past_end_rejected(self):
        self.assertEqual(self.board.category_count, 2)
        with self.assertRaises(AddressingError) as ctx:
            reveal(self.board, self.board.category_count, 0)
        self.assertIn("out of range 0..1", ctx.exception.reason)
        self.assertEqual(self._states(), [[RevealState.HIDDEN], [RevealState.HIDDEN]])

    def test_given_hidden_clue_when_rendering_then_placeholder_text(self):
        clue = self.board.categories[0].clues[0]
        self.assertEqual(cell_text(clue), "?")


if __name__ == "__main__":
    unittest.main(verbosity=2)
