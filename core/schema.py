# =============================================================================
# core/schema.py  —  Remote row <-> record translation, with defaults
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares, once per record type, how a row from the remote store maps
#   onto the in-memory dataclass: which column feeds which attribute, how
#   the value is converted, and what to use when the column is absent.
#
# ONE DEFAULTING POLICY:
#   Every place that turns a store row into a record goes through
#   RecordSchema.from_remote().  Every write goes through to_remote().
#   The defaults table below is the only place a fallback value for a
#   missing column is written down.
#
#   "Missing" means: column absent, or its value is None.  Fields flagged
#   empty_is_missing also treat an empty list or string, or a zero, as
#   missing.  Trek columns use this: a trek with no priority tags or a
#   0-day range would be unscoreable, so it gets the default instead.
# =============================================================================

from dataclasses import asdict, dataclass
from typing import Any, Callable, Optional

from core.models import (
    Coordinates,
    Destination,
    District,
    ImpactMetric,
    MonthlyVisitorPoint,
    NewsArticle,
    Province,
    Trek,
)


_MISSING = object()


class SchemaError(ValueError):
    """A remote row lacks a column that has no default."""


@dataclass(frozen=True)
class FieldSpec:
    attr: str
    column: Optional[str] = None       # Remote column name; defaults to attr
    default: Any = _MISSING
    parse: Optional[Callable[[Any], Any]] = None
    dump: Optional[Callable[[Any], Any]] = None
    empty_is_missing: bool = False

    @property
    def remote_name(self) -> str:
        return self.column or self.attr

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING

    def is_missing(self, raw: Any) -> bool:
        if raw is None:
            return True
        if self.empty_is_missing and not raw:
            return True
        return False


class RecordSchema:
    """Bidirectional mapping between a store row and one dataclass."""

    def __init__(self, model: type, fields: list[FieldSpec]):
        self.model = model
        self.fields = fields

    def from_remote(self, row: dict) -> Any:
        values = {}
        for spec in self.fields:
            raw = row.get(spec.remote_name)
            if spec.is_missing(raw):
                if not spec.has_default:
                    raise SchemaError(
                        f"{self.model.__name__}: row is missing required "
                        f"column '{spec.remote_name}'"
                    )
                values[spec.attr] = spec.default
            else:
                values[spec.attr] = spec.parse(raw) if spec.parse else raw
        return self.model(**values)

    def to_remote(self, record: Any, exclude: tuple[str, ...] = ()) -> dict:
        row = {}
        for spec in self.fields:
            if spec.attr in exclude:
                continue
            value = getattr(record, spec.attr)
            if spec.dump is not None and value is not None:
                value = spec.dump(value)
            row[spec.remote_name] = value
        return row

    def from_remote_rows(self, rows: list[dict]) -> list:
        return [self.from_remote(row) for row in rows]


# -----------------------------------------------------------------------------
# Converters
# -----------------------------------------------------------------------------
def _parse_coordinates(raw: dict) -> Coordinates:
    return Coordinates(lat=float(raw["lat"]), lng=float(raw["lng"]))


def _dump_coordinates(value: Coordinates) -> dict:
    return asdict(value)


def _as_tuple(raw) -> tuple:
    return tuple(raw)


def _as_list(value) -> list:
    return list(value)


# -----------------------------------------------------------------------------
# Schemas
# -----------------------------------------------------------------------------
DISTRICT_SCHEMA = RecordSchema(District, [
    FieldSpec("id"),
    FieldSpec("name"),
    FieldSpec("headquarters", default=""),
    FieldSpec("area", default=0),
    FieldSpec("population", default=0),
])


def _parse_districts(rows: list[dict]) -> tuple[District, ...]:
    return tuple(DISTRICT_SCHEMA.from_remote(row) for row in rows)


def _dump_districts(districts: tuple[District, ...]) -> list[dict]:
    return [DISTRICT_SCHEMA.to_remote(d) for d in districts]


# Provinces arrive with their districts embedded (select=*,districts(*)).
PROVINCE_SCHEMA = RecordSchema(Province, [
    FieldSpec("id"),
    FieldSpec("name"),
    FieldSpec("capital", default=""),
    FieldSpec("area", default=0),
    FieldSpec("population", default=0),
    FieldSpec("districts", default=(), parse=_parse_districts, dump=_dump_districts),
])

# Kathmandu, used when a community-added row has no coordinates yet.
DEFAULT_COORDINATES = Coordinates(27.7, 85.3)
DEFAULT_BEST_MONTHS = ("March", "April", "October", "November")
PLACEHOLDER_IMAGE = "/placeholder-destination.jpg"

DESTINATION_SCHEMA = RecordSchema(Destination, [
    FieldSpec("id"),
    FieldSpec("name"),
    FieldSpec("province_id"),
    FieldSpec("district_id", default=""),
    FieldSpec("category"),
    FieldSpec("best_months", default=DEFAULT_BEST_MONTHS, parse=_as_tuple, dump=_as_list),
    FieldSpec("description", default=""),
    FieldSpec("cultural_significance", default=""),
    FieldSpec("image", default=PLACEHOLDER_IMAGE),
    FieldSpec("coordinates", default=DEFAULT_COORDINATES,
              parse=_parse_coordinates, dump=_dump_coordinates),
    FieldSpec("elevation", default=None),
    FieldSpec("weather_condition", default=None),
    FieldSpec("temperature", default=None),
])

# Treks are read from the same destinations table; the trek-specific
# columns are optional there, hence the long defaults list.
TREK_SCHEMA = RecordSchema(Trek, [
    FieldSpec("id"),
    FieldSpec("name"),
    FieldSpec("description", default=""),
    FieldSpec("image_url", column="image", default=""),
    FieldSpec("min_days", default=3, empty_is_missing=True),
    FieldSpec("max_days", default=15, empty_is_missing=True),
    FieldSpec("priority_type", default=("Mountains",),
              parse=_as_tuple, dump=_as_list, empty_is_missing=True),
    FieldSpec("budget_level", default="Mid-range", empty_is_missing=True),
    FieldSpec("fitness_required", default="Moderate", empty_is_missing=True),
    FieldSpec("ideal_for", default=("solo", "group"),
              parse=_as_tuple, dump=_as_list, empty_is_missing=True),
    FieldSpec("highlights", default=(), parse=_as_tuple, dump=_as_list),
    FieldSpec("best_season", default="March-May", empty_is_missing=True),
    FieldSpec("estimated_cost_usd", default=500, empty_is_missing=True),
    FieldSpec("permit_required", default=False),
])

IMPACT_METRIC_SCHEMA = RecordSchema(ImpactMetric, [
    FieldSpec("id"),
    FieldSpec("label"),
    FieldSpec("value"),
    FieldSpec("unit", default=""),
    FieldSpec("change", default=0),
    FieldSpec("change_label", default=""),
])

VISITOR_POINT_SCHEMA = RecordSchema(MonthlyVisitorPoint, [
    FieldSpec("month"),
    FieldSpec("visitors"),
    FieldSpec("carbon_offset", default=0),
])

NEWS_ARTICLE_SCHEMA = RecordSchema(NewsArticle, [
    FieldSpec("title"),
    FieldSpec("description", default=""),
    FieldSpec("url", default="#"),
    FieldSpec("published_at"),
    FieldSpec("source", default="Community"),
    FieldSpec("category", default=None),
    FieldSpec("image_url", default=None),
    FieldSpec("destination_id", default=None),
    FieldSpec("province_id", default=None),
    FieldSpec("district_id", default=None),
    FieldSpec("id", default=None),
])
