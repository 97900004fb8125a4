"""High-score file: one line per finished puzzle, best scores first."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime, timezone
from pathlib import Path

SCORE_LIMIT = 10


@dataclass(frozen=True)
class ScoreEntry:
    """One recorded game: when it finished (UTC) and its score."""

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    score: int = 0

    def format_line(self):
        """The line as stored in the score file, without the newline."""
        return (
            f"{self.year:4d} {self.month:2d} {self.day:2d} "
            f"{self.hour:4d} {self.minute:2d} {self.second:2d} {self.score:4d}"
        )


def parse_score_line(line):
    """Read the leading integers of a score line.

    Parsing stops at the first token that is not an integer; fields not
    reached stay zero.
    """
    values = []
    for token in line.split()[: len(fields(ScoreEntry))]:
        try:
            values.append(int(token))
        except ValueError:
            break
    return ScoreEntry(*values)


def read_scores(path, limit=SCORE_LIMIT):
    """Best ``limit`` entries of the score file, highest score first.

    Entries with equal scores keep their order in the file. A missing
    file gives an empty list.
    """
    try:
        text = Path(path).read_text()
    except FileNotFoundError:
        return []
    entries = [parse_score_line(line) for line in text.splitlines() if line.strip()]
    entries.sort(key=lambda entry: entry.score, reverse=True)
    return entries[:limit]


def append_score(path, moves, when=None):
    """Append a line recording ``moves`` at time ``when`` (default: now, UTC)."""
    if when is None:
        when = datetime.now(timezone.utc)
    entry = ScoreEntry(
        when.year, when.month, when.day, when.hour, when.minute, when.second, moves
    )
    with open(path, "a") as handle:
        handle.write(entry.format_line() + "\n")
    return entry