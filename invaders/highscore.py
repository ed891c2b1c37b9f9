"""The top-five high-score table stored as ``NAME SCORE`` lines."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

TABLE_SIZE = 5

StrPath = str | PathLike[str]


@dataclass(frozen=True)
class ScoreEntry:
    name: str
    score: int


def load_scores(path: StrPath) -> list[ScoreEntry]:
    """Read up to five entries from a score file.

    Raises FileNotFoundError if the file is missing and ValueError if a score
    is not a number.
    """
    tokens = iter(Path(path).read_text().split())
    entries: list[ScoreEntry] = []
    for name, score in zip(tokens, tokens):
        try:
            entries.append(ScoreEntry(name, int(score)))
        except ValueError:
            raise ValueError(f"bad score for {name!r}: {score!r}") from None
        if len(entries) == TABLE_SIZE:
            break
    return entries


def merge_score(scores: Iterable[ScoreEntry], name: str, score: int) -> list[ScoreEntry]:
    """Add a result and return the best five, highest first.

    Equal scores are ordered by name, the later name first.
    """
    combined = [*scores, ScoreEntry(name, score)]
    combined.sort(key=lambda e: (e.score, e.name), reverse=True)
    return combined[:TABLE_SIZE]


def save_scores(path: StrPath, scores: Iterable[ScoreEntry]) -> None:
    Path(path).write_text("".join(f"{e.name} {e.score}\n" for e in scores))


def record_score(path: StrPath, name: str, score: int) -> list[ScoreEntry]:
    """Load the table, add a result, write it back and return it."""
    table = merge_score(load_scores(path), name, score)
    save_scores(path, table)
    return table