"""Leaderboard entry type and ranking helpers."""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

_INT_PATTERN = re.compile(r"[+-]?\d+")


@dataclass
class Entry:
    """A single ranked record.

    ``id`` is ``None`` until the record is known to exist remotely.
    """

    name: str
    score: int
    id: int | None = None

    @property
    def is_local(self) -> bool:
        """True when the entry has never been confirmed persisted."""
        return self.id is None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Entry":
        """Build an entry from a remote row, ignoring unknown columns.

        Raises:
            TypeError: If the row is not a mapping.
            ValueError: If the score is not a whole number.
        """
        if not isinstance(record, Mapping):
            raise TypeError(f"expected a row object, got {type(record).__name__}")
        return cls(
            name=record.get("name") or "",
            score=_record_score(record.get("score")),
            id=record.get("id"),
        )

    def to_record(self) -> dict[str, Any]:
        """Row payload for an insert; the store assigns ``id``."""
        return {"name": self.name, "score": self.score}


def _record_score(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"score must be a whole number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"score must be a whole number, got {value!r}")
    return int(value)


def score_rank(entry: Entry) -> int:
    return -entry.score


def sort_entries(entries: list[Entry]) -> None:
    """Sort in place, highest score first.

    ``list.sort`` is stable, so equal scores keep their current order.
    """
    entries.sort(key=score_rank)


def is_ranked(entries: Iterable[Entry]) -> bool:
    """Check that scores never increase along the sequence."""
    scores = [e.score for e in entries]
    return all(a >= b for a, b in zip(scores, scores[1:]))


def parse_score(raw: str) -> int | None:
    """Parse the leading integer of user-typed score text.

    Anything after the leading digits is ignored. Returns None when the
    text does not start with an integer.

    Examples:
        " 42 "  -> 42
        "-7"    -> -7
        "4.5"   -> 4
        "12abc" -> 12
        "abc"   -> None
    """
    match = _INT_PATTERN.match(raw.strip())
    if match is None:
        return None
    return int(match.group())


def coerce_score(raw: str) -> int:
    """Score for an in-place edit: unparseable text counts as 0."""
    score = parse_score(raw)
    return 0 if score is None else score
