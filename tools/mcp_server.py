# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the Nepal discovery operations as MCP tools.  Each tool is a
#   thin wrapper: it logs the call, delegates to a private helper that does
#   the core/ work, and returns a plain dict.
#
# WHY THE PRIVATE HELPERS?
#   The decorated functions belong to FastMCP once registered.  The helpers
#   (_trek_recommendations, _contribute_destination, ...) take their
#   collaborators as arguments, so they can be exercised with an in-memory
#   store and no MCP transport.
#
# TOOL NAMING CONVENTIONS:
#   - get_* / list_* / search_*  → read-only, idempotent, safe to retry
#   - contribute_* / share_*     → writes; a retry after success is rejected
#                                  by the store's uniqueness check
#   - import_static_data         → idempotent upsert keyed by id
#
# ERRORS NEVER ESCAPE A TOOL:
#   Bad input and store failures come back as {"error": ...} dicts.  Reads
#   don't fail at all: the resolver serves static data instead and sets
#   "is_error" so the agent can mention it.
#
# RUNNING THIS SERVER:
#     a) Run standalone:  python -m tools.mcp_server
#     b) Connected to an MCP client via stdio transport
# =============================================================================

import base64
import binascii
import json
import logging
import sys
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from core.config import Settings, build_store
from core.contribution import (
    ArticleSubmission,
    ContributionError,
    ContributionService,
    ContributionValidationError,
    DestinationSubmission,
    ImageUpload,
)
from core.mapping import build_map_view
from core.matching import recommend_treks
from core.models import QuizAnswers
from core.news import news_categories, search_news
from core.resolver import DATASETS, DESTINATIONS, DataResolver
from core.seeding import DataSeeder
from core.territory import ALL, available_districts, filter_destinations

load_dotenv()

# =============================================================================
# Logging Setup
# =============================================================================
# STDERR only: STDOUT carries the MCP JSON stream.
#   - CYAN for incoming requests (tool name + parameters)
#   - GREEN for response JSON
#   - YELLOW for intermediate status/progress messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


# =============================================================================
# Shared collaborators
# =============================================================================
# Built once, on first use, from the environment.  With USE_LIVE_DATA off
# the store is None: reads serve static data, writes report an error.
# =============================================================================
@dataclass
class ToolContext:
    resolver: DataResolver
    contributions: ContributionService
    seeder: DataSeeder


@lru_cache(maxsize=1)
def _context() -> ToolContext:
    settings = Settings.from_env()
    store = build_store(settings)
    _log_status(f"Data source: {'live store' if store else 'static data'}")
    resolver = DataResolver(store)
    return ToolContext(
        resolver=resolver,
        contributions=ContributionService(store, resolver),
        seeder=DataSeeder(store, resolver),
    )


mcp = FastMCP("nepal-discovery")


# =============================================================================
# Helpers (one per tool)
# =============================================================================
def _trek_recommendations(resolver, days, priority, budget, fitness, style) -> dict:
    try:
        answers = QuizAnswers(days=days, priority=priority, budget=budget,
                              fitness=fitness, style=style)
    except ValueError as e:
        return {"error": str(e)}

    recommendation = recommend_treks(answers, resolver)
    _log_status(f"{len(recommendation.candidates)} matches from {recommendation.source} "
                f"(scored={recommendation.scored})")
    return {
        "source": recommendation.source,
        "scored": recommendation.scored,
        "matches": [
            {"score": c.score if recommendation.scored else None, **asdict(c.trek)}
            for c in recommendation.candidates
        ],
    }


def _nepal_overview(resolver) -> dict:
    for name in DATASETS:
        resolver.resolve(name)
    snapshot = resolver.snapshot()
    return {
        "provinces": [
            {
                "id": p.id,
                "name": p.name,
                "capital": p.capital,
                "population": p.population,
                "district_count": len(p.districts),
            }
            for p in snapshot.provinces
        ],
        "destination_count": len(snapshot.destinations),
        "impact_metrics": [asdict(m) for m in snapshot.impact_metrics],
        "annual_visitors": sum(p.visitors for p in snapshot.monthly_visitor_data),
        "peak_month": max(snapshot.monthly_visitor_data, key=lambda p: p.visitors).month
        if snapshot.monthly_visitor_data else None,
        "is_error": snapshot.is_error,
    }


def _list_destinations(resolver, category: Optional[str] = None,
                       province_id: Optional[str] = None,
                       district_id: Optional[str] = None) -> dict:
    category = None if category in (None, "", ALL) else category
    state = resolver.resolve(DESTINATIONS, category)
    destinations = filter_destinations(state.records, province_id, district_id)
    return {
        "count": len(destinations),
        "source": state.source,
        "is_error": state.is_error,
        "destinations": [asdict(d) for d in destinations],
    }


def _list_districts(resolver, province_id: Optional[str] = None) -> dict:
    districts = available_districts(resolver.provinces(), province_id)
    return {
        "province_id": province_id or ALL,
        "count": len(districts),
        "districts": [asdict(d) for d in districts],
    }


def _map_markers(resolver, category: str = "all") -> dict:
    view = build_map_view(resolver.destinations(), category)
    return asdict(view)


def _travel_news(resolver, destination: str = "all", category: str = "all",
                 query: str = "") -> dict:
    community = resolver.news_articles()
    articles = search_news(destination, category, query, community)
    return {
        "count": len(articles),
        "categories": news_categories(community),
        "articles": [asdict(a) for a in articles[:10]],
    }


def _decode_image(image_base64: str, image_filename: str,
                  content_type: str) -> Optional[ImageUpload]:
    if not image_base64:
        return None
    try:
        data = base64.b64decode(image_base64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ContributionValidationError("image_base64", "<binary>", "Image is not valid base64.") from e
    return ImageUpload(filename=image_filename or "upload.jpg", data=data,
                       content_type=content_type)


def _contribute_destination(service, name, province, category, description="",
                            district="", image_base64="", image_filename="",
                            image_content_type="image/jpeg") -> dict:
    try:
        image = _decode_image(image_base64, image_filename, image_content_type)
        destination = service.add_destination(DestinationSubmission(
            name=name,
            province=province,
            category=category,
            description=description,
            district=district or None,
            image=image,
        ))
    except ContributionValidationError as e:
        return e.to_dict()
    except ContributionError as e:
        return {"error": e.message}
    return {"created": asdict(destination)}


def _share_travel_story(service, title, body, source="", destination_id="",
                        province="", district="", image_base64="",
                        image_filename="", image_content_type="image/jpeg") -> dict:
    try:
        image = _decode_image(image_base64, image_filename, image_content_type)
        article = service.share_article(ArticleSubmission(
            title=title,
            body=body,
            source=source or "Community",
            destination_id=destination_id or None,
            province=province or None,
            district=district or None,
            image=image,
        ))
    except ContributionValidationError as e:
        return e.to_dict()
    except ContributionError as e:
        return {"error": e.message}
    return {"created": asdict(article)}


def _import_static_data(seeder) -> dict:
    if seeder.store is None:
        return {"success": False, "error": "No live data store is configured."}
    return asdict(seeder.seed())


# =============================================================================
# TOOL 1: get_trek_recommendations
# =============================================================================
@mcp.tool()
def get_trek_recommendations(
    days: int,
    priority: str,
    budget: str,
    fitness: str,
    style: str,
) -> dict:
    """Match a traveller's quiz answers to the three best Nepal treks.

    Args:
        days: Trip length in days (the quiz offers 5, 10 or 20).
        priority: "Mountains", "Culture", "Wildlife" or "Mix".
        budget: "Budget", "Mid-range" or "Luxury".
        fitness: "Beginner", "Moderate" or "Experienced".
        style: "solo" or "group".

    Returns:
        A dict with:
          - matches: up to 3 treks, best first, each with its score (0-100)
          - scored: False when candidates could not be loaded at all and
            the matches are a fixed default list (scores are then null)
          - source: "remote", "fallback" (static trek table) or "default"
    """
    _log_request("get_trek_recommendations", days=days, priority=priority,
                 budget=budget, fitness=fitness, style=style)
    result = _trek_recommendations(_context().resolver, days, priority, budget, fitness, style)
    return _log_response("get_trek_recommendations", result)


# =============================================================================
# TOOL 2: get_nepal_overview
# =============================================================================
@mcp.tool()
def get_nepal_overview() -> dict:
    """Summarize Nepal's provinces, tourism impact metrics and visitor numbers.

    Returns:
        A dict with provinces (name, capital, population, district count),
        destination_count, impact_metrics, annual_visitors, peak_month and
        is_error (True when some data is from the offline fallback).
    """
    _log_request("get_nepal_overview")
    return _log_response("get_nepal_overview", _nepal_overview(_context().resolver))


# =============================================================================
# TOOL 3: list_destinations
# =============================================================================
@mcp.tool()
def list_destinations(category: str = "", province_id: str = "", district_id: str = "") -> dict:
    """List top destinations, optionally filtered.

    The filters combine: a destination must match every one that is set.

    Args:
        category: e.g. "Heritage Sites", "Trekking Routes", "Wildlife",
            "Spiritual Centers", "Adventure Sports", "Cultural Villages".
            Empty for all.
        province_id: e.g. "bagmati", "gandaki".  Empty for all.
        district_id: e.g. "kaski", "mustang".  Empty for all.  Use
            list_districts to see the districts of a province.
    """
    _log_request("list_destinations", category=category, province_id=province_id,
                 district_id=district_id)
    result = _list_destinations(_context().resolver, category, province_id, district_id)
    _log_status(f"{result['count']} destinations from {result['source']} data")
    return _log_response("list_destinations", result)


# =============================================================================
# TOOL 4: list_districts
# =============================================================================
@mcp.tool()
def list_districts(province_id: str = "") -> dict:
    """Districts available for filtering destinations.

    Args:
        province_id: e.g. "karnali".  Empty for every district in Nepal.
    """
    _log_request("list_districts", province_id=province_id)
    return _log_response("list_districts", _list_districts(_context().resolver, province_id))


# =============================================================================
# TOOL 5: get_map_markers
# =============================================================================
@mcp.tool()
def get_map_markers(category: str = "all") -> dict:
    """Map centre, zoom and one coloured marker per destination.

    Args:
        category: A destination category, or "all".
    """
    _log_request("get_map_markers", category=category)
    return _log_response("get_map_markers", _map_markers(_context().resolver, category))


# =============================================================================
# TOOL 6: search_travel_news
# =============================================================================
@mcp.tool()
def search_travel_news(destination: str = "all", category: str = "all", query: str = "") -> dict:
    """Search Nepal travel news and community stories.

    Args:
        destination: A destination id (e.g. "pokhara"), or "all".
        category: An exact news category (e.g. "Wildlife"), or "all".
        query: Free-text search over titles and descriptions.

    Returns:
        A dict with count, the available categories and up to 10 articles.
    """
    _log_request("search_travel_news", destination=destination, category=category, query=query)
    return _log_response("search_travel_news",
                         _travel_news(_context().resolver, destination, category, query))


# =============================================================================
# TOOL 7: contribute_destination
# =============================================================================
@mcp.tool()
def contribute_destination(
    name: str,
    province: str,
    category: str,
    description: str = "",
    district: str = "",
    image_base64: str = "",
    image_filename: str = "",
    image_content_type: str = "image/jpeg",
) -> dict:
    """Add a community destination.

    Province and district are checked against the known lists before
    anything is saved.  A misspelt name returns an error with a suggestion.

    Returns:
        {"created": {...}} on success, or {"error", "field", "value",
        "suggestion"} on a validation problem, or {"error"} otherwise.
    """
    _log_request("contribute_destination", name=name, province=province,
                 category=category, district=district,
                 has_image=bool(image_base64))
    result = _contribute_destination(
        _context().contributions, name, province, category, description,
        district, image_base64, image_filename, image_content_type,
    )
    return _log_response("contribute_destination", result)


# =============================================================================
# TOOL 8: share_travel_story
# =============================================================================
@mcp.tool()
def share_travel_story(
    title: str,
    body: str,
    source: str = "",
    destination_id: str = "",
    province: str = "",
    district: str = "",
    image_base64: str = "",
    image_filename: str = "",
    image_content_type: str = "image/jpeg",
) -> dict:
    """Share a short traveller story in the community news feed."""
    _log_request("share_travel_story", title=title, source=source,
                 destination_id=destination_id, province=province,
                 district=district, has_image=bool(image_base64))
    result = _share_travel_story(
        _context().contributions, title, body, source, destination_id,
        province, district, image_base64, image_filename, image_content_type,
    )
    return _log_response("share_travel_story", result)


# =============================================================================
# TOOL 9: import_static_data
# =============================================================================
@mcp.tool()
def import_static_data() -> dict:
    """Upsert the bundled provinces, districts, destinations and metrics
    into the live store.  Safe to run more than once."""
    _log_request("import_static_data")
    return _log_response("import_static_data", _import_static_data(_context().seeder))


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
