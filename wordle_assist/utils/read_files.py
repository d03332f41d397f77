import os
import requests
from datetime import date
from typing import Optional, Tuple
from functools import lru_cache

from wordle_assist.utils import constants
from wordle_assist.utils import config as cfg


def _clean_words(lines) -> Tuple[str, ...]:
    """Lowercases, keeps 5-letter alphabetic words and drops repeats, preserving order."""
    words = (line.strip().lower() for line in lines)
    return tuple(dict.fromkeys(w for w in words if constants.FIVE_LETTER_WORD_RE.match(w)))


@lru_cache(maxsize=None)
def load_word_list_from_url(url: str, output_path: str) -> Tuple[str, ...]:
    """
    Loads the ordered word corpus, preferring a local copy over the remote URL.

    Args:
        url (str): The URL of the text file to load.
        output_path (str): Local copy to read from, and to write after a download.

    Returns:
        Tuple[str, ...]: Unique lowercase 5-letter words in file order, or an
        empty tuple if loading fails.
    """
    try:
        if output_path and os.path.exists(output_path):
            print(f"File found reading locally: {output_path}")
            with open(output_path, "r") as f:
                words = _clean_words(f)
            if words:
                return words

        response = requests.get(url, timeout=30)

        response.raise_for_status()

        words = _clean_words(response.text.splitlines())
        print(f"Successfully loaded {len(words)} words from the URL.")
        if output_path:
            os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
            with open(output_path, "w") as f:
                f.write("\n".join(words))
        return words

    except requests.exceptions.RequestException as e:
        print(f"Error: Could not fetch word list from URL. {e}")
        return tuple()


def all_words(config: Optional[cfg.WordleConfig] = None) -> Tuple[str, ...]:
    """Returns the full corpus. Loaded once per process, every caller shares the same tuple."""
    corpus = (config or cfg.WordleConfig()).corpus
    return load_word_list_from_url(corpus.url, corpus.path)


def word_for_day(index: int, words: Optional[Tuple[str, ...]] = None) -> Optional[str]:
    """The answer for puzzle day `index`, or None when the corpus has no such day."""
    if words is None:
        words = all_words()
    if 0 <= index < len(words):
        return words[index]
    return None


def day_index(today: Optional[date] = None, epoch: date = constants.WORDLE_EPOCH) -> int:
    """Number of days between the epoch and `today` (defaults to the local date)."""
    today = today or date.today()
    return abs((today - epoch).days)
