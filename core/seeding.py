# =============================================================================
# core/seeding.py  —  One-time import of the static datasets into the store
# =============================================================================
#
# Pushes everything in core/nepal_data.py to a fresh backend, keyed by id,
# so running it twice is harmless.  Order matters: provinces before their
# districts (districts carry a province_id foreign key).
#
# Only one import may run at a time per seeder.  A second call while one is
# in flight returns immediately with success=False instead of queueing.
# =============================================================================

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from core import nepal_data
from core.resolver import DATASETS
from core.schema import (
    DESTINATION_SCHEMA,
    DISTRICT_SCHEMA,
    IMPACT_METRIC_SCHEMA,
    PROVINCE_SCHEMA,
    VISITOR_POINT_SCHEMA,
)
from core.store import StoreError

logger = logging.getLogger(__name__)

ALREADY_RUNNING = "Migration already in progress"


@dataclass(frozen=True)
class SeedResult:
    success: bool
    error: Optional[str] = None


class DataSeeder:
    """Upserts the bundled static datasets into a RemoteStore."""

    def __init__(self, store, resolver=None):
        self.store = store
        self.resolver = resolver
        self._running = threading.Lock()

    @property
    def in_progress(self) -> bool:
        return self._running.locked()

    def seed(self) -> SeedResult:
        if not self._running.acquire(blocking=False):
            logger.warning("%s, ignoring second request", ALREADY_RUNNING)
            return SeedResult(success=False, error=ALREADY_RUNNING)
        try:
            logger.info("Starting import of static data")
            self._seed_all()
        except StoreError as e:
            logger.error("Import failed: %s", e.message)
            return SeedResult(success=False, error=e.message)
        finally:
            self._running.release()

        if self.resolver is not None:
            for name in DATASETS:
                self.resolver.invalidate(name)
        logger.info("Import finished: all static data is now in the store")
        return SeedResult(success=True)

    def _seed_all(self) -> None:
        # 1. Provinces, then each province's districts
        for province in nepal_data.PROVINCES:
            self._upsert("provinces", [PROVINCE_SCHEMA.to_remote(province, exclude=("districts",))],
                         f"Province {province.name}")
            if province.districts:
                rows = [
                    {**DISTRICT_SCHEMA.to_remote(d), "province_id": province.id}
                    for d in province.districts
                ]
                self._upsert("districts", rows, f"Districts for {province.name}")

        # 2. Destinations
        self._upsert("destinations",
                     [DESTINATION_SCHEMA.to_remote(d) for d in nepal_data.DESTINATIONS],
                     "Destinations")

        # 3. Impact metrics
        self._upsert("impact_metrics",
                     [IMPACT_METRIC_SCHEMA.to_remote(m) for m in nepal_data.IMPACT_METRICS],
                     "Impact metrics")

        # 4. Visitor series; the table wants a numeric id per month
        self._upsert("monthly_visitor_data",
                     [{"id": i, **VISITOR_POINT_SCHEMA.to_remote(p)}
                      for i, p in enumerate(nepal_data.MONTHLY_VISITOR_DATA, start=1)],
                     "Monthly visitor data")

    def _upsert(self, table: str, rows: list[dict], what: str) -> None:
        try:
            self.store.upsert(table, rows, on_conflict="id")
        except StoreError as e:
            raise StoreError(f"{what} error: {e.message}", code=e.code) from e
