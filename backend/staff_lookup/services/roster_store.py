"""In-memory holder of the current roster snapshot."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from staff_lookup.core.config import Settings
from staff_lookup.core.roster import RosterSnapshot
from staff_lookup.models.employee import EmployeeDetail
from staff_lookup.models.search import RosterStatus
from staff_lookup.services.employee_service import employee_service
from staff_lookup.services.roster_api_client import roster_api_client
from staff_lookup.services.roster_source import RosterSource, RosterUnavailableError

logger = logging.getLogger(__name__)


def select_source(settings: Settings) -> RosterSource:
    if settings.ROSTER_SOURCE == "http":
        return roster_api_client
    return employee_service


class RosterStore:
    """Single writer of the roster; everyone else reads ``snapshot``.

    Every write publishes a new snapshot object, which is what tells readers
    (the suggestion engine's index cache) that the roster changed.
    """

    def __init__(self) -> None:
        self.source: RosterSource | None = None
        self.last_error: str | None = None
        self._snapshot = RosterSnapshot.unavailable()

    @property
    def snapshot(self) -> RosterSnapshot:
        return self._snapshot

    async def initialize(self, settings: Settings, source: RosterSource | None = None) -> None:
        self.source = source if source is not None else select_source(settings)
        await self.refresh()

    async def close(self) -> None:
        self.source = None

    def replace(self, records: Iterable[EmployeeDetail]) -> RosterSnapshot:
        self._snapshot = RosterSnapshot(records, version=self._snapshot.version + 1)
        self.last_error = None
        logger.info("Roster updated (version=%d, size=%d)", self._snapshot.version, len(self._snapshot))
        return self._snapshot

    def mark_unavailable(self, reason: str) -> RosterSnapshot:
        self._snapshot = RosterSnapshot.unavailable(version=self._snapshot.version + 1)
        self.last_error = reason
        return self._snapshot

    async def refresh(self) -> RosterSnapshot:
        if self.source is None:
            logger.warning("No roster source configured — roster unavailable")
            return self.mark_unavailable("No roster source configured")

        try:
            records = await self.source.get_roster()
        except RosterUnavailableError as err:
            logger.warning("Roster unavailable: %s", err)
            return self.mark_unavailable(str(err))
        except Exception as err:
            logger.exception("Roster refresh failed")
            return self.mark_unavailable(f"Roster refresh failed: {err}")

        return self.replace(records)

    def status(self) -> RosterStatus:
        snapshot = self._snapshot
        return RosterStatus(
            version=snapshot.version,
            size=len(snapshot),
            available=snapshot.available,
            error=self.last_error,
        )


roster_store = RosterStore()
