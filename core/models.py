# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every record that flows through
# the system: the trek candidates the matcher scores, the quiz answers it
# scores them against, and the flat display records (provinces, districts,
# destinations, impact metrics, visitor series, news) that the resolution
# layer serves.
#
# IMMUTABILITY:
#   Records loaded from the store or the bundled static tables are frozen.
#   A matching pass reads them; nothing is allowed to write to them.  That's
#   why sequences are tuples rather than lists.
#
# VALIDATION:
#   Trek and QuizAnswers check their invariants in __post_init__.  A bad
#   record fails at construction, not halfway through a scoring pass.
# =============================================================================

from dataclasses import dataclass, field
from typing import Optional


# -----------------------------------------------------------------------------
# Enumerations
# -----------------------------------------------------------------------------
# Kept as plain tuples/dicts: the quiz offers them as options, the schema
# layer validates against them, and the matcher ranks fitness by them.
# -----------------------------------------------------------------------------
PRIORITY_TYPES = ("Mountains", "Culture", "Wildlife", "Mix")
BUDGET_LEVELS = ("Budget", "Mid-range", "Luxury")
FITNESS_RANKS: dict[str, int] = {
    "Beginner": 1,
    "Moderate": 2,
    "Experienced": 3,
}
TRAVEL_STYLES = ("solo", "group")

DESTINATION_CATEGORIES = (
    "Heritage Sites",
    "Trekking Routes",
    "Wildlife",
    "Spiritual Centers",
    "Adventure Sports",
    "Cultural Villages",
)


# -----------------------------------------------------------------------------
# Trek — a candidate recommendation unit
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Trek:
    """A multi-day itinerary eligible for recommendation.

    Only min_days/max_days, priority_type, budget_level, fitness_required
    and ideal_for are scored.  The rest is display material.
    """

    id: str
    name: str
    description: str
    min_days: int
    max_days: int
    priority_type: tuple[str, ...]
    budget_level: str
    fitness_required: str
    ideal_for: tuple[str, ...]
    highlights: tuple[str, ...] = ()
    best_season: str = "March-May"
    estimated_cost_usd: int = 500
    permit_required: bool = False
    image_url: str = ""

    def __post_init__(self):
        if self.min_days > self.max_days:
            raise ValueError(
                f"Trek '{self.id}': min_days ({self.min_days}) exceeds "
                f"max_days ({self.max_days})"
            )
        if not self.priority_type:
            raise ValueError(f"Trek '{self.id}': priority_type must not be empty")
        if not self.ideal_for:
            raise ValueError(f"Trek '{self.id}': ideal_for must not be empty")
        if self.budget_level not in BUDGET_LEVELS:
            raise ValueError(f"Trek '{self.id}': unknown budget_level {self.budget_level!r}")
        if self.fitness_required not in FITNESS_RANKS:
            raise ValueError(
                f"Trek '{self.id}': unknown fitness_required {self.fitness_required!r}"
            )


# -----------------------------------------------------------------------------
# QuizAnswers — the five-field preference input to the matcher
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class QuizAnswers:
    """A completed quiz.  All five answers are mandatory."""

    days: int                          # Desired trip length
    priority: str                      # One of PRIORITY_TYPES
    budget: str                        # One of BUDGET_LEVELS
    fitness: str                       # One of FITNESS_RANKS
    style: str                         # "solo" or "group"

    def __post_init__(self):
        if isinstance(self.days, bool) or not isinstance(self.days, int) or self.days < 1:
            raise ValueError(f"days must be a positive integer, got {self.days!r}")
        if self.priority not in PRIORITY_TYPES:
            raise ValueError(f"Unknown priority {self.priority!r}")
        if self.budget not in BUDGET_LEVELS:
            raise ValueError(f"Unknown budget {self.budget!r}")
        if self.fitness not in FITNESS_RANKS:
            raise ValueError(f"Unknown fitness {self.fitness!r}")
        if self.style not in TRAVEL_STYLES:
            raise ValueError(f"Unknown style {self.style!r}")


@dataclass(frozen=True)
class ScoredCandidate:
    """A trek paired with its score for one matching pass."""

    trek: Trek
    score: int


# -----------------------------------------------------------------------------
# TrekRecommendation — what the quiz results screen renders
# -----------------------------------------------------------------------------
@dataclass
class TrekRecommendation:
    """Top matches for one quiz submission.

    scored=False means the candidate fetch failed outright and the list is
    the fixed default ordering, not a ranking.
    """

    candidates: list[ScoredCandidate] = field(default_factory=list)
    scored: bool = True
    source: str = "remote"             # "remote", "fallback" or "default"

    @property
    def treks(self) -> list[Trek]:
        return [c.trek for c in self.candidates]

    @property
    def best_match(self) -> Optional[Trek]:
        return self.candidates[0].trek if self.candidates else None

    @property
    def alternatives(self) -> list[Trek]:
        return [c.trek for c in self.candidates[1:]]

    @property
    def is_empty(self) -> bool:
        return not self.candidates


# -----------------------------------------------------------------------------
# Geography: provinces and their districts
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class District:
    id: str
    name: str
    headquarters: str
    area: int                          # sq km
    population: int


@dataclass(frozen=True)
class Province:
    id: str
    name: str
    capital: str
    area: int
    population: int
    districts: tuple[District, ...] = ()


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class Destination:
    """A place shown on the map and in the highlights sections."""

    id: str
    name: str
    province_id: str
    district_id: str
    category: str                      # One of DESTINATION_CATEGORIES
    best_months: tuple[str, ...]
    description: str
    cultural_significance: str
    image: str
    coordinates: Coordinates
    elevation: Optional[str] = None    # "5,364 m" display text, not a number
    weather_condition: Optional[str] = None
    temperature: Optional[int] = None  # Celsius


@dataclass(frozen=True)
class ImpactMetric:
    id: str
    label: str
    value: float
    unit: str
    change: float                      # Percent
    change_label: str


@dataclass(frozen=True)
class MonthlyVisitorPoint:
    month: str                         # "Jan" .. "Dec"
    visitors: int
    carbon_offset: int


@dataclass(frozen=True)
class NewsArticle:
    title: str
    description: str
    url: str
    published_at: str                  # ISO date or timestamp
    source: str
    category: Optional[str] = None
    image_url: Optional[str] = None
    destination_id: Optional[str] = None
    province_id: Optional[str] = None
    district_id: Optional[str] = None
    id: Optional[str] = None


# -----------------------------------------------------------------------------
# DataSnapshot — the merged view handed to the rest of the application
# -----------------------------------------------------------------------------
@dataclass
class DataSnapshot:
    """One consistent view of the four display datasets.

    is_loading / is_error are the OR across the four independent fetches.
    An error never empties a dataset: the static fallback is shown instead.
    """

    provinces: list[Province]
    destinations: list[Destination]
    impact_metrics: list[ImpactMetric]
    monthly_visitor_data: list[MonthlyVisitorPoint]
    is_loading: bool = False
    is_error: bool = False


# -----------------------------------------------------------------------------
# Map widget contract
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class MarkerSpec:
    destination_id: str
    position: Coordinates
    category: str
    color: str
    label: str


@dataclass
class MapView:
    center: Coordinates
    zoom: int
    markers: list[MarkerSpec] = field(default_factory=list)
