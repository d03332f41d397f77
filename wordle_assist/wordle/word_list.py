from typing import Iterable, Iterator, Optional, Sequence, Tuple

from wordle_assist.utils import read_files


class WordList:
    """
    An ordered, immutable set of candidate words.

    Every filter returns a new WordList and leaves the receiver untouched, so
    older snapshots stay valid. The words themselves are the corpus strings,
    never copies.
    """
    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()):
        self._words: Tuple[str, ...] = tuple(words)

    @classmethod
    def from_corpus(cls, words: Optional[Sequence[str]] = None) -> "WordList":
        if words is None:
            words = read_files.all_words()
        return cls(words)

    # --- Filters ---
    def intersect(self, allowed: Iterable[str]) -> "WordList":
        allowed = set(allowed)
        return WordList(w for w in self._words if w in allowed)

    def subtract(self, disallowed: Iterable[str]) -> "WordList":
        disallowed = set(disallowed)
        return WordList(w for w in self._words if w not in disallowed)

    def ensure_letter(self, c: str) -> "WordList":
        return WordList(w for w in self._words if c in w)

    def remove_letter(self, c: str) -> "WordList":
        return WordList(w for w in self._words if c not in w)

    def whittle(self, c: str) -> "WordList":
        # Same filter as ensure_letter, applied once per letter of a pattern
        return self.ensure_letter(c)

    def count_containing(self, letters: Iterable[str]) -> int:
        """How many words contain every letter in `letters`."""
        remaining = self
        for c in sorted(letters):
            remaining = remaining.whittle(c)
        return remaining.word_count()

    # --- Accessors ---
    def word_count(self) -> int:
        return len(self._words)

    def get(self) -> Tuple[str, ...]:
        return self._words

    words = get

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordList):
            return NotImplemented
        return self._words == other._words

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        preview = ", ".join(self._words[:5])
        more = ", ..." if len(self._words) > 5 else ""
        return f"WordList({len(self._words)}: {preview}{more})"
