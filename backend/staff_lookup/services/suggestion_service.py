from __future__ import annotations

import logging

from staff_lookup.core.config import Settings
from staff_lookup.core.match_index import DEFAULT_THRESHOLD, MatchIndex, build_index
from staff_lookup.models.employee import EmployeeDetail, Suggestion
from staff_lookup.services.roster_store import RosterStore, roster_store

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTION_LIMIT = 10


def compute_suggestions(index: MatchIndex, live_text: str, limit: int = DEFAULT_SUGGESTION_LIMIT) -> list[Suggestion]:
    if not live_text.strip():
        return []

    matches = index.query(live_text, limit=limit) or []
    return [Suggestion.from_record(match.record) for match in matches]


class SuggestionEngine:
    """Live suggestions against the index of the store's current roster."""

    def __init__(self, store: RosterStore) -> None:
        self.store = store
        self.limit = DEFAULT_SUGGESTION_LIMIT
        self.threshold = DEFAULT_THRESHOLD
        self._index: MatchIndex | None = None

    def configure(self, settings: Settings) -> None:
        self.limit = settings.SUGGESTION_LIMIT
        if settings.MATCH_THRESHOLD != self.threshold:
            self.threshold = settings.MATCH_THRESHOLD
            self._index = None

    def current_index(self) -> MatchIndex:
        snapshot = self.store.snapshot
        if self._index is None or self._index.roster is not snapshot:
            self._index = build_index(snapshot, threshold=self.threshold)
            logger.info("Match index rebuilt for roster version %d", snapshot.version)
        return self._index

    def compute_suggestions(self, live_text: str) -> list[Suggestion]:
        if not live_text.strip():
            return []
        return compute_suggestions(self.current_index(), live_text, limit=self.limit)

    def filter_roster(self, text: str) -> list[EmployeeDetail]:
        """All matching records in rank order, or the whole roster for blank text."""
        index = self.current_index()
        matches = index.query(text)
        if matches is None:
            return list(index.roster.records)
        return [match.record for match in matches]


suggestion_engine = SuggestionEngine(roster_store)
