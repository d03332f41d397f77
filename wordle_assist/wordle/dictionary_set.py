from typing import Dict, FrozenSet, List

from wordle_assist.utils import constants
from wordle_assist.wordle.word_list import WordList

_EMPTY: FrozenSet[str] = frozenset()


class DictionarySet:
    """
    Letter index over a WordList.

    `position_maps[i][c]` holds the words with letter `c` at position `i`;
    `contains_map[c]` holds the words containing `c` anywhere. Every letter of
    the alphabet has an entry, an empty one meaning zero matches.
    """

    def __init__(self, position_maps: List[Dict[str, FrozenSet[str]]], contains_map: Dict[str, FrozenSet[str]]):
        self.position_maps = position_maps
        self.contains_map = contains_map

    @classmethod
    def from_word_list(cls, word_list: WordList, word_length: int = constants.WORD_LENGTH) -> "DictionarySet":
        positions = [{c: set() for c in constants.ALPHABET} for _ in range(word_length)]
        contains = {c: set() for c in constants.ALPHABET}
        for word in word_list:
            for i, c in enumerate(word):
                positions[i].setdefault(c, set()).add(word)
                contains.setdefault(c, set()).add(word)

        return cls(
            position_maps=[{c: frozenset(ws) for c, ws in m.items()} for m in positions],
            contains_map={c: frozenset(ws) for c, ws in contains.items()},
        )

    def list_for_position(self, index: int, c: str) -> FrozenSet[str]:
        return self.position_maps[index].get(c, _EMPTY)

    def containing(self, c: str) -> FrozenSet[str]:
        return self.contains_map.get(c, _EMPTY)
