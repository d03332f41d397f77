from dataclasses import dataclass, asdict, field
from datetime import date
import json
from pathlib import Path
from typing import Dict, Optional

from wordle_assist.utils import constants


@dataclass
class GameConfig:
    word_length: int = constants.WORD_LENGTH
    max_guesses: int = constants.MAX_GUESSES
    # Every revealed letter must be reused in later guesses
    hard_mode: bool = True
    # ISO date of puzzle day 0
    epoch: str = constants.WORDLE_EPOCH.isoformat()

    def __post_init__(self):
        assert self.word_length == constants.WORD_LENGTH, f"word_length must be {constants.WORD_LENGTH}"
        assert self.max_guesses > 0, "max_guesses must be positive"

    @property
    def epoch_date(self) -> date:
        return date.fromisoformat(self.epoch)


@dataclass
class CorpusConfig:
    url: str = constants.URL_WORD_LIST
    # Local copy of the word list, written after the first download
    path: str = constants.WORD_LIST_PATH


@dataclass
class SuggestConfig:
    # Rows shown in the suggestion table
    count: int = 20
    # Processes used to rank pattern groups, 1 keeps everything in-process
    workers: int = 1

    def __post_init__(self):
        assert self.count > 0, "count must be greater than 0"
        assert self.workers > 0, "workers must be greater than 0"


@dataclass
class BenchmarkConfig:
    start_word: str = "slate"
    samples: int = 100
    seed: int = 42


@dataclass
class WordleConfig:
    game: GameConfig = field(default_factory=GameConfig)
    corpus: CorpusConfig = field(default_factory=CorpusConfig)
    suggest: SuggestConfig = field(default_factory=SuggestConfig)
    # Only needed by the benchmark script
    benchmark: Optional[BenchmarkConfig] = None

    @classmethod
    def default(cls) -> "WordleConfig":
        return cls(benchmark=BenchmarkConfig())

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "WordleConfig":
        benchmark = None
        if "benchmark" in config_dict.keys():
            benchmark = BenchmarkConfig(**config_dict["benchmark"])

        return cls(
            game=GameConfig(**config_dict.get("game", {})),
            corpus=CorpusConfig(**config_dict.get("corpus", {})),
            suggest=SuggestConfig(**config_dict.get("suggest", {})),
            benchmark=benchmark
        )

    def to_dict(self) -> Dict:
        return asdict(self)


def save_config(config: WordleConfig, file_path: Path):
    """Saves the configuration object to a JSON file."""
    with open(file_path, 'w') as f:
        json.dump(asdict(config), f, indent=4)
    print(f"Configuration saved to {file_path}")


def load_config_from_file(config_path: str) -> WordleConfig:
    """Loads the game configuration from a JSON file."""
    config_file = Path(config_path)
    if not config_file.is_file():
        raise FileNotFoundError(f"Configuration file not found at: {config_path}")

    with open(config_file, 'r') as f:
        config_dict = json.load(f)

    return WordleConfig.from_dict(config_dict)
