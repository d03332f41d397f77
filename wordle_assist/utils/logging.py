from collections import Counter
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from rich.console import Console
from rich.table import Table
from rich.text import Text

from wordle_assist.utils import constants
from wordle_assist.wordle.game import CheckData, Game, Verdict
from wordle_assist.wordle.solver import SolverRecord

TILE_STYLES = {
    Verdict.EXACT: "bold black on green",
    Verdict.CONTAINS: "bold black on yellow",
    Verdict.NOT_FOUND: "white on black",
}

TILE_EMOJI = {
    Verdict.EXACT: "🟩",
    Verdict.CONTAINS: "🟨",
    Verdict.NOT_FOUND: "⬛",
}

_console = Console()


# ==============================================================================
# --- Terminal Output ---
# ==============================================================================
def print_single_guess(result: CheckData, console: Optional[Console] = None):
    """Prints one guess as a row of colored letter tiles."""
    console = console or _console
    row = Text()
    for letter in result.letters:
        row.append(f" {letter.to_char().upper()} ", style=TILE_STYLES[letter.verdict])
    console.print(row)


def format_share_summary(game: Game, assisted: bool) -> str:
    """
    Builds the spoiler-free result summary, e.g. 'Wordle 245 4/6*' followed by
    one emoji row per guess. '*' marks hard mode and ' TA' marks a game played
    with suggestions.
    """
    num_str = "" if game.day is None else str(game.day)
    hard_str = "" if game.is_easy() else "*"
    assisted_str = " TA" if assisted else ""
    guesses = game.guesses()

    lines = [f"Wordle {num_str} {len(guesses)}/{game.max_guesses}{hard_str}{assisted_str}", ""]
    for result in guesses:
        lines.append("".join(TILE_EMOJI[letter.verdict] for letter in result.letters))
    return "\n".join(lines)


def print_results(game: Game, assisted: bool, console: Optional[Console] = None):
    console = console or _console
    console.print(format_share_summary(game, assisted), highlight=False)


def build_suggestion_table(count: int, reduction: Sequence[Tuple[str, int, int]]) -> Table:
    table = Table()
    table.add_column("Word")
    table.add_column("Remaining", justify="right")
    table.add_column("Pos Score", justify="right")
    for word, remaining, score in reduction[:count]:
        table.add_row(word, str(remaining), str(score))
    if len(reduction) > count:
        table.add_row("...", "", "")
    return table


def print_suggestion(count: int, reduction: Sequence[Tuple[str, int, int]], console: Optional[Console] = None):
    """Prints the top `count` suggestions, with a '...' row when some were left out."""
    console = console or _console
    console.print(build_suggestion_table(count, reduction))


# ==============================================================================
# --- Benchmark Metrics ---
# ==============================================================================
def summarize_records(records: List[SolverRecord], max_guesses: int = constants.MAX_GUESSES) -> pd.DataFrame:
    """
    Summarizes self-played games into a one-row DataFrame with the win rate,
    average turns on a win and the number of games per turn count.
    """
    total_games = len(records)
    winning_turns = [r.turns_to_solve for r in records if r.solved]
    wins = len(winning_turns)

    summary = {
        "total_games": total_games,
        "total_wins": wins,
        "win_rate": (wins / total_games) * 100.0 if total_games > 0 else 0.0,
        "avg_turns_on_win": float(np.mean(winning_turns)) if winning_turns else 0.0,
    }
    turn_counts = Counter(winning_turns)
    for turn in range(1, max_guesses + 1):
        summary[f"solved_in_{turn}"] = turn_counts.get(turn, 0)
    summary["failed"] = total_games - wins
    return pd.DataFrame([summary])


def print_summary(summary: pd.DataFrame):
    row = summary.iloc[0]
    print("\n" + "="*60 + "\n" + " " * 20 + "SOLVER BENCHMARK RESULTS" + "\n" + "="*60)
    print(f"  Win Rate: {row['win_rate']:.2f}% ({row['total_wins']}/{row['total_games']})")
    print(f"  Avg. Turns on Win: {row['avg_turns_on_win']:.2f}")
    for column in summary.columns:
        if column.startswith("solved_in_"):
            print(f"  Solved in {column.rsplit('_', 1)[-1]}: {row[column]}")
    print(f"  Failed: {row['failed']}")
    print("="*60)


def plot_turn_distribution(records: List[SolverRecord], output_path: Path, max_guesses: int = constants.MAX_GUESSES) -> Optional[Path]:
    """
    Generates a bar chart showing the distribution of wins by number of turns.
    Returns the path of the saved chart, or None when there are no games.
    """
    if not records:
        print("No games recorded, skipping distribution chart.")
        return None

    turn_counts = Counter(r.turns_to_solve for r in records if r.solved)
    labels = [str(turn) for turn in range(1, max_guesses + 1)] + ["X"]
    values = [turn_counts.get(turn, 0) for turn in range(1, max_guesses + 1)]
    values.append(sum(1 for r in records if not r.solved))
    x = np.arange(len(labels))

    fig, ax = plt.subplots(figsize=(10, 6))
    bars = ax.bar(x, values, color='cornflowerblue')
    ax.set_ylabel('Number of Games', fontsize=12)
    ax.set_xlabel('Turns to Solve', fontsize=12)
    ax.set_title(f'Distribution of Wins by Number of Turns (Total Games Played {len(records)})', fontsize=14)
    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.bar_label(bars, padding=3)
    fig.tight_layout()

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"Chart saved to {output_path}")
    return output_path
