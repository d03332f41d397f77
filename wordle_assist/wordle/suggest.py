"""
Ranks candidate guesses by how well they split the remaining words.

Each word gets a bucket value: one bit per letter of a guess, set when the
word contains that letter. Guesses made of the same letters produce the same
buckets, so the pool is grouped by sorted letters and every group is rated by
its largest bucket, i.e. the number of words left in the worst case. This is
quadratic in the number of words.

A second value, the position score, counts how many remaining words share
each (position, letter) pair with the guess. The higher it is, the more likely
the guess gets exact matches.
"""
from collections import Counter
from itertools import groupby
from multiprocessing import Pool
from typing import Iterable, List, Optional, Sequence, Tuple

from wordle_assist.utils import constants
from wordle_assist.utils import read_files
from wordle_assist.wordle.dictionary_set import DictionarySet
from wordle_assist.wordle.word_list import WordList

Suggestion = Tuple[str, int, int]


def pattern_from_word(word: str) -> str:
    return "".join(sorted(word))


def bucket_for_word(pattern: str, word: str) -> int:
    bucket = 0
    for c in pattern:
        bucket = (bucket << 1) + (1 if c in word else 0)
    return bucket


def worst_case_for_pattern(pattern: str, words: Iterable[str]) -> int:
    """Size of the largest group of `words` that `pattern` cannot tell apart."""
    hist = Counter(bucket_for_word(pattern, word) for word in words)
    return max(hist.values(), default=0)


def calculate_score(dictionary: DictionarySet, word: str) -> int:
    return sum(len(dictionary.list_for_position(i, c)) for i, c in enumerate(word))


# ==============================================================================
# --- Worker setup (shared by all processes) ---
# ==============================================================================
REMAINING: Tuple[str, ...] = ()


def init_worker(remaining: Tuple[str, ...]):
    global REMAINING
    REMAINING = remaining


def _worst_case_in_worker(pattern: str) -> int:
    return worst_case_for_pattern(pattern, REMAINING)


def _worst_cases(patterns: List[str], words: Tuple[str, ...], workers: int) -> List[int]:
    if workers <= 1 or len(patterns) < 2:
        return [worst_case_for_pattern(p, words) for p in patterns]

    with Pool(processes=workers, initializer=init_worker, initargs=(words,)) as pool:
        return pool.map(_worst_case_in_worker, patterns)


def suggest(
    dictionary: DictionarySet,
    word_list: WordList,
    easy: bool,
    corpus: Optional[Sequence[str]] = None,
    workers: int = 1
) -> List[Suggestion]:
    """
    Ranks guesses for the current candidates.

    Args:
        dictionary: Letter index built from `word_list`.
        word_list: The remaining candidates.
        easy: If True, any corpus word may be suggested, including words
            already ruled out. Otherwise only remaining candidates are.
        corpus: The guess pool for easy mode, defaults to the full corpus.
        workers: Processes used to rate the pattern groups.

    Returns:
        A list of (word, worst_case_remaining, position_score), best first:
        fewest remaining, then highest position score, then alphabetical.
    """
    words = word_list.get()
    if word_list.word_count() == 1:
        return [(words[0], constants.SINGLE_CANDIDATE_REMAINING, constants.SINGLE_CANDIDATE_SCORE)]

    if easy:
        pool_words = list(corpus if corpus is not None else read_files.all_words())
    else:
        pool_words = list(words)
    pool_words.sort(key=pattern_from_word)

    grouped = [(pattern, list(group)) for pattern, group in groupby(pool_words, key=pattern_from_word)]
    worst_cases = _worst_cases([pattern for pattern, _ in grouped], words, workers)

    reduction = [
        (word, remaining, calculate_score(dictionary, word))
        for (_, pattern_words), remaining in zip(grouped, worst_cases)
        for word in pattern_words
    ]
    reduction.sort(key=lambda item: (item[1], -item[2], item[0]))
    return reduction
