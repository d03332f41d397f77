import re
import string
from datetime import date

# --- Game Rules ---
WORD_LENGTH = 5
MAX_GUESSES = 6
ALPHABET = string.ascii_lowercase

# --- Word Lists ---
# The corpus is ordered: index N is the answer for day N after the epoch.
URL_WORD_LIST = "https://raw.githubusercontent.com/Roy-Orbison/wordle-guesses-answers/refs/heads/main/answers.txt"
WORD_LIST_PATH = "./data/wordle_answers.txt"

# Day 0 of the puzzle
WORDLE_EPOCH = date(2021, 6, 19)

# --- Matching Patterns ---
# Only lowercase words of exactly WORD_LENGTH letters make it into the corpus
FIVE_LETTER_WORD_RE = re.compile(r'^[a-z]{5}$')

# --- Suggestion Scores ---
# Reported for the last remaining candidate instead of ranking it
SINGLE_CANDIDATE_REMAINING = 1
SINGLE_CANDIDATE_SCORE = 5
