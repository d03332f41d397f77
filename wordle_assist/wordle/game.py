from bisect import bisect_left
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from wordle_assist.utils import constants
from wordle_assist.utils import read_files

# Marks a secret letter already credited to an exact match
_USED = '_'

# ==============================================================================
# ---  DATA STRUCTURES FOR GAME LOGIC ---
# ==============================================================================
class Verdict(Enum):
    EXACT = "exact"
    CONTAINS = "contains"
    NOT_FOUND = "not_found"


class Outcome(Enum):
    WIN = "win"
    INCORRECT = "incorrect"
    LOSE = "lose"
    INVALID = "invalid"


@dataclass(frozen=True)
class LetterResult:
    """The verdict for a single guessed letter."""
    letter: str
    verdict: Verdict

    def is_found(self) -> bool:
        return self.verdict in (Verdict.EXACT, Verdict.CONTAINS)

    def to_char(self) -> str:
        return self.letter


@dataclass
class CheckData:
    """Represents a single evaluated guess: per-letter verdicts plus the game outcome."""
    guess: str
    letters: List[LetterResult]
    result: Outcome
    # Guess number this check used up, 0 for an invalid guess
    guesses: int = 0

    def is_terminal(self) -> bool:
        return self.result in (Outcome.WIN, Outcome.LOSE)


# ==============================================================================
# ---  CORE EVALUATION ---
# ==============================================================================
def score_letters(secret: str, guess: str) -> Tuple[List[LetterResult], Set[str]]:
    """
    Scores `guess` against `secret` without any hard mode check.

    Every letter of the secret can satisfy at most one guessed position, so a
    guess with a doubled letter gets a single credit for a letter the secret
    holds once.

    Returns:
        The per-letter results in guess order and the set of letters that were
        found (exact or misplaced).
    """
    word_chars = list(secret)
    letters: List[LetterResult] = []
    revealed: Set[str] = set()

    # First pass: exact matches use up their secret letter
    for i, c in enumerate(guess):
        if i < len(word_chars) and word_chars[i] == c:
            word_chars[i] = _USED
            revealed.add(c)
            letters.append(LetterResult(c, Verdict.EXACT))
        else:
            letters.append(LetterResult(c, Verdict.NOT_FOUND))

    # Second pass: misplaced letters, each taking one remaining secret letter
    word_chars.sort()
    for i, result in enumerate(letters):
        if result.verdict is not Verdict.NOT_FOUND:
            continue
        found_at = bisect_left(word_chars, result.letter)
        if found_at < len(word_chars) and word_chars[found_at] == result.letter:
            del word_chars[found_at]
            revealed.add(result.letter)
            letters[i] = LetterResult(result.letter, Verdict.CONTAINS)

    return letters, revealed


def missing_revealed_letters(guess: str, revealed: Iterable[str]) -> List[str]:
    """Revealed letters the guess fails to reuse, sorted."""
    return sorted(c for c in set(revealed) if c not in guess)


def evaluate(
    secret: str,
    guess: str,
    hard_mode: bool = False,
    revealed: Iterable[str] = (),
    guess_number: int = 1,
    max_guesses: int = constants.MAX_GUESSES
) -> Tuple[List[LetterResult], Outcome]:
    """
    Evaluates a guess against the secret word.

    Args:
        secret: The secret word.
        guess: The guessed word, same length as the secret.
        hard_mode: If True, the guess must contain every letter in `revealed`.
        revealed: Letters found by earlier guesses.
        guess_number: Which guess this is, starting at 1.
        max_guesses: Number of guesses allowed in a game.

    Returns:
        A tuple of (letters, outcome). An invalid hard mode guess yields all
        NOT_FOUND letters and Outcome.INVALID.
    """
    if hard_mode and missing_revealed_letters(guess, revealed):
        return [LetterResult(c, Verdict.NOT_FOUND) for c in guess], Outcome.INVALID

    letters, _ = score_letters(secret, guess)
    correct = all(lr.verdict is Verdict.EXACT for lr in letters)

    if correct and guess_number <= max_guesses:
        outcome = Outcome.WIN
    elif guess_number < max_guesses:
        outcome = Outcome.INCORRECT
    else:
        outcome = Outcome.LOSE
    return letters, outcome


# ==============================================================================
# ---  GAME STATE ---
# ==============================================================================
@dataclass
class Game:
    """A single game of Wordle against a known secret word."""
    word: str
    day: Optional[int] = None
    hard: bool = False
    max_guesses: int = constants.MAX_GUESSES
    revealed: Set[str] = field(default_factory=set)
    history: List[CheckData] = field(default_factory=list)

    @classmethod
    def for_word(cls, word: str, max_guesses: int = constants.MAX_GUESSES) -> "Game":
        return cls(word=word.lower(), max_guesses=max_guesses)

    @classmethod
    def for_day(
        cls,
        day: Optional[int] = None,
        words: Optional[Sequence[str]] = None,
        max_guesses: int = constants.MAX_GUESSES
    ) -> "Game":
        """Starts the puzzle for `day`, or today's puzzle when no day is given."""
        if day is None:
            day = read_files.day_index()
        word = read_files.word_for_day(day, words)
        if word is None:
            raise ValueError(f"No word available for day {day}")
        return cls(word=word, day=day, max_guesses=max_guesses)

    def set_hard_mode(self) -> "Game":
        return replace(self, hard=True, revealed=set(self.revealed), history=list(self.history))

    def is_easy(self) -> bool:
        return not self.hard

    def guesses(self) -> List[CheckData]:
        return list(self.history)

    def is_over(self) -> bool:
        return bool(self.history) and self.history[-1].is_terminal()

    def check(self, guess: str) -> CheckData:
        """
        Evaluates `guess` and records it in the game history.

        Once the game is won or lost the last result is returned again. An
        invalid hard mode guess is returned without being recorded, so it does
        not use up a turn.
        """
        if self.is_over():
            return self.history[-1]

        guess = guess.lower()
        guess_number = len(self.history) + 1
        letters, outcome = evaluate(
            self.word, guess,
            hard_mode=self.hard,
            revealed=self.revealed,
            guess_number=guess_number,
            max_guesses=self.max_guesses
        )
        if outcome is Outcome.INVALID:
            return CheckData(guess=guess, letters=letters, result=outcome, guesses=0)

        self.revealed.update(lr.letter for lr in letters if lr.is_found())
        verdict = CheckData(guess=guess, letters=letters, result=outcome, guesses=guess_number)
        self.history.append(verdict)
        return verdict
