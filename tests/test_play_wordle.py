import io
import json
import os
import tempfile
import unittest
from unittest.mock import patch

from scripts import play_wordle
from wordle_assist.wordle.game import Outcome

CORPUS = ("crane", "trace", "brace", "grace", "react", "caret", "crate", "slate", "apple")


@patch('scripts.play_wordle.read_files.all_words', return_value=CORPUS)
class TestPlayWordle(unittest.TestCase):

    def run_main(self, argv):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            code = play_wordle.main(argv)
        return code, stdout.getvalue()

    @patch('scripts.play_wordle.print_results')
    def test_win_prints_results(self, mock_print_results, _):
        code, _ = self.run_main(["--word", "crane", "trace", "crane"])
        self.assertEqual(code, 0)
        mock_print_results.assert_called_once()
        game, assisted = mock_print_results.call_args[0]
        self.assertEqual(game.guesses()[-1].result, Outcome.WIN)
        self.assertFalse(game.is_easy())
        self.assertFalse(assisted)

    @patch('scripts.play_wordle.print_results')
    def test_day_picks_word(self, mock_print_results, _):
        code, _ = self.run_main(["--day", "1", "--easy", "trace"])
        self.assertEqual(code, 0)
        game, _ = mock_print_results.call_args[0]
        self.assertEqual(game.word, "trace")
        self.assertTrue(game.is_easy())

    def test_day_out_of_range(self, _):
        code, output = self.run_main(["--day", "99"])
        self.assertEqual(code, 1)
        self.assertIn("No word available for day 99", output)

    def test_invalid_guess_length(self, _):
        code, output = self.run_main(["--word", "crane", "trace", "cat"])
        self.assertEqual(code, 1)
        self.assertIn("Invalid guesses: ['cat']", output)

    @patch('scripts.play_wordle.print_suggestion')
    def test_suggestions(self, mock_print_suggestion, _):
        code, output = self.run_main(["--word", "crane", "--suggest", "--suggest-count", "3", "trace"])
        self.assertEqual(code, 0)
        self.assertIn("Words remaining: 1", output)
        count, ranked = mock_print_suggestion.call_args[0]
        self.assertEqual(count, 3)
        self.assertEqual(ranked, [("crane", 1, 5)])

    @patch('scripts.play_wordle.print_suggestion')
    def test_no_suggestions_without_flag(self, mock_print_suggestion, _):
        code, output = self.run_main(["--word", "crane", "trace"])
        self.assertEqual(code, 0)
        mock_print_suggestion.assert_not_called()
        self.assertNotIn("Words remaining", output)

    def test_hard_mode_violation(self, _):
        code, output = self.run_main(["--word", "crane", "plaid", "stern", "crane"])
        self.assertEqual(code, 0)
        self.assertIn("Guess 'stern' does not contain all revealed letters.", output)
        # the rejected guess is still shown, as a row of not-found tiles
        self.assertIn("P  L  A  I  D", output)
        self.assertIn("S  T  E  R  N", output)
        self.assertNotIn("C  R  A  N  E", output)

    def test_six_letter_config_is_rejected(self, _):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "config.json")
            with open(path, "w") as f:
                json.dump({"game": {"word_length": 6}}, f)
            with self.assertRaises(AssertionError):
                self.run_main(["--config", path, "--word", "banana", "bandaa"])

    def test_cheat(self, _):
        _, output = self.run_main(["--word", "crane", "--cheat", "--cheat", "--cheat"])
        self.assertIn("Today's secret word is: 'crane'", output)
        _, output = self.run_main(["--word", "crane", "--cheat", "--cheat"])
        self.assertNotIn("secret word", output)

    def test_empty_corpus(self, mock_all_words):
        mock_all_words.return_value = ()
        code, output = self.run_main(["--word", "crane"])
        self.assertEqual(code, 1)
        self.assertIn("No words available", output)


if __name__ == "__main__":
    unittest.main()
