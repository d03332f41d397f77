# Plays a game of Wordle from the command line: pass your guesses as arguments
# and get colored feedback, the share summary once the game is over, and
# optionally a ranked list of next guesses.
import argparse
from typing import List, Optional

from wordle_assist.utils import config as cfg
from wordle_assist.utils import constants
from wordle_assist.utils import read_files
from wordle_assist.utils.logging import print_results, print_single_guess, print_suggestion
from wordle_assist.wordle.dictionary_set import DictionarySet
from wordle_assist.wordle.game import Game, Outcome
from wordle_assist.wordle.solver import play_guesses
from wordle_assist.wordle.suggest import suggest
from wordle_assist.wordle.word_list import WordList


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Wordle and get suggestions for your next guess.")
    puzzle = parser.add_mutually_exclusive_group()
    puzzle.add_argument("-d", "--day", type=int, help="Which day's puzzle to try; defaults to today's.")
    puzzle.add_argument("-w", "--word", type=str, help="Word to use for the puzzle instead of the default.")
    parser.add_argument("-s", "--suggest", action="store_true", help="Suggest words to try based on previous results.")
    parser.add_argument(
        "--suggest-count",
        type=int,
        default=None,
        metavar="COUNT",
        help="Number of words to suggest (used with --suggest).",
    )
    parser.add_argument("--cheat", action="count", default=0, help="Straight up cheat. You must supply this flag at least three times.")
    parser.add_argument("-e", "--easy", action="store_true", help="Use easy mode.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON configuration file.")
    parser.add_argument("--workers", type=int, default=None, help="Processes used to rank suggestions.")
    parser.add_argument("guesses", nargs="*", help="Your guesses.")
    return parser


def invalid_guesses(guesses: List[str], word_length: int = constants.WORD_LENGTH) -> List[str]:
    return [g for g in guesses if len(g) != word_length or not g.isalpha()]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = cfg.load_config_from_file(args.config) if args.config else cfg.WordleConfig.default()
    if args.suggest_count is not None:
        config.suggest.count = args.suggest_count
    if args.workers is not None:
        config.suggest.workers = args.workers

    corpus = read_files.all_words(config)
    if not corpus:
        print("No words available. Check the corpus URL or local word list.")
        return 1

    if args.word:
        if invalid_guesses([args.word], config.game.word_length):
            print(f"Invalid word: {args.word!r}")
            return 1
        game = Game.for_word(args.word, max_guesses=config.game.max_guesses)
    else:
        day = args.day if args.day is not None else read_files.day_index(epoch=config.game.epoch_date)
        try:
            game = Game.for_day(day, corpus, max_guesses=config.game.max_guesses)
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    easy = args.easy or not config.game.hard_mode
    if not easy:
        game = game.set_hard_mode()

    if args.cheat >= 3:
        print(f"Today's secret word is: {game.word!r}\n")

    invalid = invalid_guesses(args.guesses, config.game.word_length)
    if invalid:
        print(f"Invalid guesses: {invalid}")
        return 1

    outcome, word_list, results = play_guesses(game, args.guesses, WordList.from_corpus(corpus))
    for result in results:
        print_single_guess(result)

    print()

    if outcome in (Outcome.WIN, Outcome.LOSE):
        print_results(game, args.suggest)
    elif outcome is Outcome.INCORRECT:
        if args.suggest:
            print(f"Words remaining: {word_list.word_count()}")
            ranked = suggest(
                DictionarySet.from_word_list(word_list), word_list,
                easy=easy, corpus=corpus, workers=config.suggest.workers
            )
            print_suggestion(config.suggest.count, ranked)
    else:
        print(f"Guess '{results[-1].guess}' does not contain all revealed letters.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
