import io
import os
import tempfile
import unittest
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

from rich.console import Console

from wordle_assist.utils.logging import (
    format_share_summary,
    plot_turn_distribution,
    print_single_guess,
    print_suggestion,
    summarize_records,
)
from wordle_assist.wordle.game import Game
from wordle_assist.wordle.solver import SolverRecord


def make_console():
    return Console(file=io.StringIO(), force_terminal=False, width=80)


class TestTerminalOutput(unittest.TestCase):

    def test_print_single_guess(self):
        console = make_console()
        result = Game.for_word("crane").check("trace")
        print_single_guess(result, console)
        self.assertEqual(console.file.getvalue().strip(), "T  R  A  C  E")

    def test_share_summary_hard_mode(self):
        game = Game(word="crane", day=12).set_hard_mode()
        game.check("trace")
        game.check("crane")
        self.assertEqual(
            format_share_summary(game, assisted=False),
            "Wordle 12 2/6*\n\n⬛🟩🟩🟨🟩\n🟩🟩🟩🟩🟩"
        )

    def test_share_summary_easy_assisted_without_day(self):
        game = Game.for_word("crane")
        game.check("crane")
        summary = format_share_summary(game, assisted=True)
        self.assertTrue(summary.startswith("Wordle  1/6 TA\n"))

    def test_print_suggestion_truncates(self):
        console = make_console()
        reduction = [("ample", 1, 12), ("apple", 2, 12), ("angle", 2, 11)]
        print_suggestion(2, reduction, console)
        output = console.file.getvalue()
        self.assertIn("Pos Score", output)
        self.assertIn("ample", output)
        self.assertIn("apple", output)
        self.assertNotIn("angle", output)
        self.assertIn("...", output)

    def test_print_suggestion_without_truncation(self):
        console = make_console()
        print_suggestion(5, [("crane", 1, 5)], console)
        output = console.file.getvalue()
        self.assertIn("crane", output)
        self.assertNotIn("...", output)


class TestBenchmarkMetrics(unittest.TestCase):
    def setUp(self):
        self.records = [
            SolverRecord(secret_word="crane", solved=True, turns_to_solve=3),
            SolverRecord(secret_word="slate", solved=True, turns_to_solve=4),
            SolverRecord(secret_word="apple", solved=False, turns_to_solve=-1),
        ]

    def test_summarize_records(self):
        row = summarize_records(self.records).iloc[0]
        self.assertEqual(row["total_games"], 3)
        self.assertEqual(row["total_wins"], 2)
        self.assertAlmostEqual(row["win_rate"], 200 / 3)
        self.assertAlmostEqual(row["avg_turns_on_win"], 3.5)
        self.assertEqual(row["solved_in_3"], 1)
        self.assertEqual(row["solved_in_1"], 0)
        self.assertEqual(row["failed"], 1)

    def test_summarize_no_records(self):
        row = summarize_records([]).iloc[0]
        self.assertEqual(row["win_rate"], 0.0)
        self.assertEqual(row["avg_turns_on_win"], 0.0)

    def test_plot_turn_distribution(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            output = plot_turn_distribution(self.records, Path(tmpdir) / "plots" / "turns.png")
            self.assertTrue(os.path.exists(output))

    def test_plot_without_records(self):
        self.assertIsNone(plot_turn_distribution([], Path("unused.png")))


if __name__ == "__main__":
    unittest.main()
