# =============================================================================
# core/resolver.py  —  Data resolution: remote store first, static fallback
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Decides, per dataset, whether the application sees the remote store's
#   rows or the bundled static tables in core/nepal_data.py.
#
# THE RULE (applied independently to each dataset):
#   - the fetch fails (store error or a row that won't reshape)
#       -> log a warning, mark the dataset is_error, serve static data
#   - the fetch returns zero rows
#       -> serve static data, no error
#   - the fetch returns rows
#       -> every row goes through the dataset's RecordSchema
#
#   A dataset is either entirely remote or entirely static.  Rows are never
#   merged with static records field by field.
#
# CACHING:
#   Each successful (dataset, category) result is cached for the life of
#   the resolver, so resolving twice returns equal output.  Writes call
#   invalidate() to force the next read back to the store.  A failed fetch
#   is remembered only for snapshot(); the next resolve() tries the store
#   again.
#
#   Trek candidates are never cached: every quiz submission fetches them.
#
# NO STORE CONFIGURED:
#   DataResolver(None) serves static data for everything, with no error.
#   This is the offline mode the USE_LIVE_DATA toggle selects.
# =============================================================================

import asyncio
import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from core import nepal_data
from core.models import (
    DataSnapshot,
    Destination,
    ImpactMetric,
    MonthlyVisitorPoint,
    NewsArticle,
    Province,
    Trek,
)
from core.schema import (
    DESTINATION_SCHEMA,
    IMPACT_METRIC_SCHEMA,
    NEWS_ARTICLE_SCHEMA,
    PROVINCE_SCHEMA,
    TREK_SCHEMA,
    VISITOR_POINT_SCHEMA,
    RecordSchema,
    SchemaError,
)
from core.store import QueryError, RemoteStore, StoreError
from core.trek_data import FALLBACK_TREKS

logger = logging.getLogger(__name__)


PROVINCES = "provinces"
DESTINATIONS = "destinations"
IMPACT_METRICS = "impact_metrics"
MONTHLY_VISITOR_DATA = "monthly_visitor_data"
NEWS = "news"


@dataclass(frozen=True)
class DatasetSource:
    """Where one display dataset lives remotely and locally."""

    table: str
    schema: RecordSchema
    static: tuple
    columns: str = "*"
    order: Optional[str] = None


DATASETS: dict[str, DatasetSource] = {
    PROVINCES: DatasetSource(
        table="provinces",
        schema=PROVINCE_SCHEMA,
        static=nepal_data.PROVINCES,
        columns="*,districts(*)",
        order="name",
    ),
    DESTINATIONS: DatasetSource(
        table="destinations",
        schema=DESTINATION_SCHEMA,
        static=nepal_data.DESTINATIONS,
        order="name",
    ),
    IMPACT_METRICS: DatasetSource(
        table="impact_metrics",
        schema=IMPACT_METRIC_SCHEMA,
        static=nepal_data.IMPACT_METRICS,
        order="id",
    ),
    MONTHLY_VISITOR_DATA: DatasetSource(
        table="monthly_visitor_data",
        schema=VISITOR_POINT_SCHEMA,
        static=nepal_data.MONTHLY_VISITOR_DATA,
        order="id",
    ),
}

# Reshape failures count as fetch failures, not crashes.
_FETCH_ERRORS = (StoreError, SchemaError, KeyError, TypeError, ValueError)


@dataclass
class DatasetState:
    """One dataset as the application sees it right now."""

    name: str
    records: list = field(default_factory=list)
    source: str = "static"             # "remote" or "static"
    is_loading: bool = False
    is_error: bool = False


class DataResolver:
    """Serves each display dataset from the store, or from static data."""

    def __init__(self, store: Optional[RemoteStore] = None):
        self.store = store
        self._cache: dict[tuple[str, Optional[str]], object] = {}
        self._failures: dict[tuple[str, Optional[str]], DatasetState] = {}
        self._lock = threading.Lock()

    @property
    def is_live(self) -> bool:
        return self.store is not None

    # ------------------------------------------------------------------
    # Display datasets
    # ------------------------------------------------------------------

    def resolve(self, name: str, category: Optional[str] = None) -> DatasetState:
        """Resolve one dataset, from cache when possible.

        `category` only applies to destinations.  Failed fetches are not
        cached, so a store that recovers is picked up on the next call.
        """
        if name not in DATASETS:
            raise KeyError(f"Unknown dataset '{name}'")
        key = (name, category)
        with self._lock:
            cached = self._cache.get(key)
        if cached is not None:
            return cached

        state = self._fetch(name, category)
        with self._lock:
            if state.is_error:
                self._failures[key] = state
            else:
                self._cache[key] = state
                self._failures.pop(key, None)
        return state

    def provinces(self) -> list[Province]:
        return self.resolve(PROVINCES).records

    def destinations(self, category: Optional[str] = None) -> list[Destination]:
        return self.resolve(DESTINATIONS, category).records

    def impact_metrics(self) -> list[ImpactMetric]:
        return self.resolve(IMPACT_METRICS).records

    def monthly_visitor_data(self) -> list[MonthlyVisitorPoint]:
        return self.resolve(MONTHLY_VISITOR_DATA).records

    def snapshot(self) -> DataSnapshot:
        """The four datasets as they stand, without fetching anything.

        A dataset that has not been resolved yet shows its static data and
        counts as loading.  One whose last fetch failed shows its static
        data with is_error set.
        """
        states = [self._peek(name) for name in DATASETS]
        by_name = {state.name: state for state in states}
        return DataSnapshot(
            provinces=by_name[PROVINCES].records,
            destinations=by_name[DESTINATIONS].records,
            impact_metrics=by_name[IMPACT_METRICS].records,
            monthly_visitor_data=by_name[MONTHLY_VISITOR_DATA].records,
            is_loading=any(state.is_loading for state in states),
            is_error=any(state.is_error for state in states),
        )

    async def load(self) -> DataSnapshot:
        """Resolve all four datasets concurrently and return the snapshot."""
        await asyncio.gather(
            *(asyncio.to_thread(self.resolve, name) for name in DATASETS)
        )
        return self.snapshot()

    def invalidate(self, name: str) -> None:
        """Forget every cached view of a dataset, category views included."""
        with self._lock:
            for key in [k for k in self._cache if k[0] == name]:
                del self._cache[key]
            for key in [k for k in self._failures if k[0] == name]:
                del self._failures[key]

    # ------------------------------------------------------------------
    # Trek candidates and community news
    # ------------------------------------------------------------------

    def trek_candidates(self) -> tuple[list[Trek], str]:
        """Treks to score, and where they came from.

        Returns (treks, "remote") when the destinations table has rows, and
        (FALLBACK_TREKS, "fallback") when it is empty, the query is rejected,
        or no store is configured.  A TransportError is not caught here: the
        caller decides what an unreachable store means for matching.

        Fetched fresh on every call.
        """
        if self.store is None:
            return list(FALLBACK_TREKS), "fallback"

        try:
            rows = self.store.select("destinations")
        except QueryError:
            logger.warning("Trek query rejected, using fallback treks", exc_info=True)
            return list(FALLBACK_TREKS), "fallback"

        if not rows:
            logger.warning("Store returned no treks, using fallback treks")
            return list(FALLBACK_TREKS), "fallback"

        return TREK_SCHEMA.from_remote_rows(rows), "remote"

    def news_articles(self) -> list[NewsArticle]:
        """Community-shared articles, newest first.  Never raises."""
        with self._lock:
            cached = self._cache.get((NEWS, None))
        if cached is not None:
            return cached

        articles: list[NewsArticle] = []
        if self.store is not None:
            try:
                rows = self.store.select(
                    "news_articles", order="published_at", descending=True
                )
                articles = NEWS_ARTICLE_SCHEMA.from_remote_rows(rows)
            except _FETCH_ERRORS:
                logger.warning("Could not load community news", exc_info=True)
                return []
        with self._lock:
            self._cache[(NEWS, None)] = articles
        return articles

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _peek(self, name: str) -> DatasetState:
        with self._lock:
            cached = self._cache.get((name, None)) or self._failures.get((name, None))
        if cached is not None:
            return cached
        return DatasetState(
            name=name,
            records=list(DATASETS[name].static),
            is_loading=self.store is not None,
        )

    def _fetch(self, name: str, category: Optional[str]) -> DatasetState:
        source = DATASETS[name]
        static = [r for r in source.static if category is None or r.category == category]

        if self.store is None:
            return DatasetState(name=name, records=static)

        filters = {"category": category} if category else None
        try:
            rows = self.store.select(
                source.table,
                columns=source.columns,
                filters=filters,
                order=source.order,
            )
            records = source.schema.from_remote_rows(rows)
        except _FETCH_ERRORS:
            logger.warning(
                "Falling back to static %s: remote fetch failed", name, exc_info=True
            )
            return DatasetState(name=name, records=static, is_error=True)

        if not records:
            logger.info("Remote %s is empty, serving static data", name)
            return DatasetState(name=name, records=static)

        return DatasetState(name=name, records=records, source="remote")
