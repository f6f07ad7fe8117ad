from __future__ import annotations

import logging
from typing import NamedTuple

from rapidfuzz import fuzz, utils

from staff_lookup.core.roster import RosterSnapshot
from staff_lookup.models.employee import EmployeeDetail

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.3


class Match(NamedTuple):
    record: EmployeeDetail
    score: float


def field_similarity(needle: str, haystack: str) -> float:
    """Similarity on a 0-100 scale between a normalized query and field.

    A query no longer than the field is aligned against its best-matching
    substring, so a hit anywhere in the field counts the same as a prefix.
    A longer query is compared against the whole field.
    """
    if not needle or not haystack:
        return 0.0
    if len(needle) <= len(haystack):
        return fuzz.partial_ratio(needle, haystack)
    return fuzz.ratio(needle, haystack)


class MatchIndex:
    """Approximate text index over the name and id of every roster record."""

    def __init__(self, roster: RosterSnapshot, threshold: float = DEFAULT_THRESHOLD) -> None:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {threshold}")

        self.roster = roster
        self.threshold = threshold
        self._fields: list[tuple[str, str]] = [
            (utils.default_process(record.name or ""), utils.default_process(record.id))
            for record in roster.records
        ]

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def score_cutoff(self) -> float:
        return round((1.0 - self.threshold) * 100.0, 6)

    def query(self, text: str, limit: int | None = None) -> list[Match] | None:
        """Return roster records matching ``text``, closest first.

        Returns ``None`` when ``text`` is blank, meaning no query was run.
        An empty list means the query ran and nothing matched.
        """
        if not text.strip():
            return None

        needle = utils.default_process(text)
        cutoff = self.score_cutoff

        scored: list[tuple[float, int]] = []
        for position, (name, identifier) in enumerate(self._fields):
            score = max(field_similarity(needle, name), field_similarity(needle, identifier))
            if score >= cutoff:
                scored.append((score, position))

        scored.sort(key=lambda item: (-item[0], item[1]))
        if limit is not None:
            scored = scored[:limit]

        records = self.roster.records
        return [Match(records[position], score / 100.0) for score, position in scored]


def build_index(roster: RosterSnapshot, threshold: float = DEFAULT_THRESHOLD) -> MatchIndex:
    index = MatchIndex(roster, threshold=threshold)
    logger.debug("Match index built (version=%d, records=%d)", roster.version, len(index))
    return index
