# This script lets the solver play against a sample of corpus words, always
# picking its top suggestion, and reports how many turns it needed.
import argparse
import random
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from wordle_assist.utils import config as cfg
from wordle_assist.utils import read_files
from wordle_assist.utils.logging import plot_turn_distribution, print_summary, summarize_records
from wordle_assist.wordle.solver import SolverRecord, solve


def run_benchmark(corpus, config: cfg.WordleConfig, num_samples: int, seed: int) -> List[SolverRecord]:
    """Plays `num_samples` games against randomly chosen corpus words."""
    secrets = list(corpus)
    if num_samples < len(secrets):
        secrets = random.Random(seed).sample(secrets, num_samples)

    records: List[SolverRecord] = []
    solved = 0
    sum_turns = 0
    pbar = tqdm(secrets, desc="Solving", unit="word")
    for idx, secret in enumerate(pbar, start=1):
        record = solve(secret, corpus, config)
        records.append(record)
        if record.solved:
            solved += 1
            sum_turns += record.turns_to_solve

        pbar.set_postfix({
            "succ_rate": f"{solved / idx:.2%}",
            "avg_turns": f"{(sum_turns / solved if solved else 0):.2f}"
        })
    return records


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark the suggestion solver by self-play.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON configuration file.")
    parser.add_argument("--samples", type=int, default=None, help="Number of secret words to play.")
    parser.add_argument("--easy", action="store_true", help="Let the solver guess any corpus word.")
    parser.add_argument("--plot", type=str, default=None, help="Where to save the turn distribution chart.")
    args = parser.parse_args(argv)

    config = cfg.load_config_from_file(args.config) if args.config else cfg.WordleConfig.default()
    if config.benchmark is None:
        config.benchmark = cfg.BenchmarkConfig()
    if args.easy:
        config.game.hard_mode = False
    num_samples = args.samples if args.samples is not None else config.benchmark.samples

    corpus = read_files.all_words(config)
    if not corpus:
        print("No words available. Check the corpus URL or local word list.")
        return 1

    print(f"Playing {min(num_samples, len(corpus))} games from a corpus of {len(corpus)} words "
          f"(start word '{config.benchmark.start_word}', {'hard' if config.game.hard_mode else 'easy'} mode).")
    records = run_benchmark(corpus, config, num_samples, config.benchmark.seed)

    print_summary(summarize_records(records, config.game.max_guesses))
    if args.plot:
        plot_turn_distribution(records, Path(args.plot), config.game.max_guesses)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
