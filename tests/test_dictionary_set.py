import unittest

from wordle_assist.utils.constants import ALPHABET
from wordle_assist.wordle.dictionary_set import DictionarySet
from wordle_assist.wordle.word_list import WordList


class TestDictionarySet(unittest.TestCase):
    def setUp(self):
        self.dictionary = DictionarySet.from_word_list(WordList(["apple", "ample", "angle"]))

    def test_position_lookup(self):
        self.assertEqual(self.dictionary.list_for_position(0, "a"), {"apple", "ample", "angle"})
        self.assertEqual(self.dictionary.list_for_position(1, "p"), {"apple"})
        self.assertEqual(self.dictionary.list_for_position(1, "m"), {"ample"})
        self.assertEqual(self.dictionary.list_for_position(2, "p"), {"apple", "ample"})

    def test_contains_lookup(self):
        self.assertEqual(self.dictionary.containing("l"), {"apple", "ample", "angle"})
        self.assertEqual(self.dictionary.containing("g"), {"angle"})

    def test_every_letter_has_an_entry(self):
        for letter in ALPHABET:
            self.assertIn(letter, self.dictionary.contains_map)
            for position_map in self.dictionary.position_maps:
                self.assertIn(letter, position_map)
        self.assertEqual(self.dictionary.list_for_position(3, "z"), frozenset())
        self.assertEqual(self.dictionary.containing("z"), frozenset())

    def test_unknown_character_is_empty(self):
        self.assertEqual(self.dictionary.list_for_position(0, "1"), frozenset())
        self.assertEqual(self.dictionary.containing("-"), frozenset())

    def test_empty_word_list(self):
        dictionary = DictionarySet.from_word_list(WordList())
        self.assertEqual(len(dictionary.position_maps), 5)
        self.assertTrue(all(not words for words in dictionary.contains_map.values()))


if __name__ == "__main__":
    unittest.main()
