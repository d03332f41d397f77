from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from wordle_assist.utils import config as cfg
from wordle_assist.wordle.dictionary_set import DictionarySet
from wordle_assist.wordle.game import CheckData, Game, LetterResult, Outcome, Verdict
from wordle_assist.wordle.suggest import suggest
from wordle_assist.wordle.word_list import WordList


# ==============================================================================
# ---  DATA STRUCTURES ---
# ==============================================================================
@dataclass
class SolverRecord:
    """A structured object to hold the results of a single self-played game."""
    secret_word: str
    solved: bool
    turns_to_solve: int
    guesses: List[str] = field(default_factory=list)
    remaining_per_turn: List[int] = field(default_factory=list)


# ==============================================================================
# ---  ELIMINATION ---
# ==============================================================================
def eliminate_words(word_list: WordList, letters: Sequence[LetterResult]) -> WordList:
    """
    Narrows `word_list` to the words consistent with one guess's letter results.

    A NOT_FOUND letter that is found elsewhere in the same guess is skipped
    rather than removed, so a word holding that letter once survives. Letter
    counts are not tracked, so words with extra copies of such a letter also
    survive.
    """
    dictionary = DictionarySet.from_word_list(word_list)
    found_letters = {lr.to_char() for lr in letters if lr.is_found()}

    for i, result in enumerate(letters):
        c = result.to_char()
        if result.verdict is Verdict.EXACT:
            word_list = word_list.intersect(dictionary.list_for_position(i, c))
        elif result.verdict is Verdict.CONTAINS:
            word_list = word_list.subtract(dictionary.list_for_position(i, c)).ensure_letter(c)
        elif c not in found_letters:
            word_list = word_list.remove_letter(c)
    return word_list


def play_guesses(
    game: Game,
    guesses: Iterable[str],
    word_list: WordList
) -> Tuple[Outcome, WordList, List[CheckData]]:
    """
    Plays `guesses` in order, narrowing the candidates after each one.

    Stops at the first guess that wins, loses or is invalid; the remaining
    guesses are ignored.

    Returns:
        The last outcome, the narrowed candidates and the result of every
        evaluated guess.
    """
    outcome = Outcome.INCORRECT
    results: List[CheckData] = []
    for guess in guesses:
        if outcome is not Outcome.INCORRECT:
            break
        result = game.check(guess)
        results.append(result)
        outcome = result.result
        if outcome is not Outcome.INVALID:
            word_list = eliminate_words(word_list, result.letters)
    return outcome, word_list, results


# ==============================================================================
# ---  SELF-PLAY ---
# ==============================================================================
def solve(
    secret: str,
    corpus: Sequence[str],
    config: Optional[cfg.WordleConfig] = None,
) -> SolverRecord:
    """
    Plays a game against `secret`, always guessing the top suggestion.

    The first guess is the configured start word; hard mode and the number of
    worker processes come from the config.
    """
    config = config or cfg.WordleConfig.default()
    start_word = (config.benchmark or cfg.BenchmarkConfig()).start_word
    easy = not config.game.hard_mode

    game = Game.for_word(secret, max_guesses=config.game.max_guesses)
    if config.game.hard_mode:
        game = game.set_hard_mode()

    word_list = WordList.from_corpus(corpus)
    record = SolverRecord(secret_word=secret, solved=False, turns_to_solve=-1)
    guess = start_word

    while True:
        outcome, word_list, _ = play_guesses(game, [guess], word_list)
        record.guesses.append(guess)
        record.remaining_per_turn.append(word_list.word_count())

        if outcome is Outcome.WIN:
            record.solved = True
            record.turns_to_solve = len(game.guesses())
            return record
        if outcome is not Outcome.INCORRECT or word_list.word_count() == 0:
            return record

        ranked = suggest(
            DictionarySet.from_word_list(word_list), word_list,
            easy=easy, corpus=corpus, workers=config.suggest.workers
        )
        guess = ranked[0][0]
