# =============================================================================
# core/contribution.py  —  Community contribution write path
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Lets travellers add a destination or share a short article.  Both go
#   through the same sequence:
#
#     1. validate locally   (no network call if anything is wrong)
#     2. upload the image   (optional; a failure aborts, nothing inserted)
#     3. insert the row     (a failure removes the uploaded image again)
#     4. invalidate caches  (only after the insert succeeded)
#
# PROVINCE / DISTRICT NAMES:
#   Names are compared after normalization (trimmed, whitespace collapsed,
#   case-folded), against the provinces the resolver currently serves.
#   An unknown name is rejected with a "did you mean" suggestion: the first
#   known name that starts with the same letter.  That is a first-letter
#   lookup, not an edit-distance match; "Kathmandoo" and "Kailali" look
#   equally close to it.
#
# ERRORS:
#   ContributionValidationError   bad input, caught before any request
#   DuplicateContributionError    the store reported a uniqueness violation
#   ContributionError             anything else that went wrong remotely
#   Each carries a `message` fit to show the traveller as-is.
# =============================================================================

import logging
import os
import re
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence

from core.models import DESTINATION_CATEGORIES, Destination, District, NewsArticle, Province
from core.resolver import DESTINATIONS, NEWS
from core.schema import (
    DEFAULT_BEST_MONTHS,
    DEFAULT_COORDINATES,
    DESTINATION_SCHEMA,
    NEWS_ARTICLE_SCHEMA,
    PLACEHOLDER_IMAGE,
)
from core.store import QueryError, StoreError

logger = logging.getLogger(__name__)

DESTINATION_BUCKET = "destinations"
ARTICLE_BUCKET = "articles"
COMMUNITY_CATEGORY = "Community"
DEFAULT_CULTURAL_SIGNIFICANCE = "Newly added community destination."


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------
class ContributionError(Exception):
    """A contribution could not be saved."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateContributionError(ContributionError):
    """The store already holds a row with this id."""


class ContributionValidationError(ContributionError):
    """A submitted field was rejected before anything was sent."""

    def __init__(self, field: str, value: str, message: str, suggestion: Optional[str] = None):
        if suggestion:
            message = f"{message} Did you mean '{suggestion}'?"
        super().__init__(message)
        self.field = field
        self.value = value
        self.suggestion = suggestion

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "field": self.field,
            "value": self.value,
            "suggestion": self.suggestion,
        }


# -----------------------------------------------------------------------------
# Submissions
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ImageUpload:
    filename: str
    data: bytes
    content_type: str = "image/jpeg"


@dataclass(frozen=True)
class DestinationSubmission:
    name: str
    province: str                      # Province name or id
    category: str
    description: str = ""
    district: Optional[str] = None     # District name or id
    image: Optional[ImageUpload] = None


@dataclass(frozen=True)
class ArticleSubmission:
    title: str
    body: str
    source: str = COMMUNITY_CATEGORY
    destination_id: Optional[str] = None
    province: Optional[str] = None
    district: Optional[str] = None
    image: Optional[ImageUpload] = None


# -----------------------------------------------------------------------------
# Name handling
# -----------------------------------------------------------------------------
def normalize_name(value: str) -> str:
    """Trim, collapse inner whitespace and case-fold."""
    return " ".join(value.split()).casefold()


def slugify(name: str) -> str:
    """'Rara  Lake' -> 'rara-lake'."""
    return re.sub(r"\s+", "-", name.strip().lower())


def suggest_name(value: str, known: Sequence[str]) -> Optional[str]:
    """First known name sharing the first letter of `value`, if any."""
    normalized = normalize_name(value)
    if not normalized:
        return None
    for name in known:
        if normalize_name(name).startswith(normalized[0]):
            return name
    return None


def find_province(value: str, provinces: Sequence[Province]) -> Province:
    """Match a province by name or id, or raise with a suggestion."""
    wanted = normalize_name(value)
    for province in provinces:
        if wanted in (normalize_name(province.name), normalize_name(province.id)):
            return province
    raise ContributionValidationError(
        "province", value,
        f"Unknown province '{value}'.",
        suggest_name(value, [p.name for p in provinces]),
    )


def find_district(value: str, province: Province) -> District:
    """Match a district of `province` by name or id, or raise with a suggestion."""
    wanted = normalize_name(value)
    for district in province.districts:
        if wanted in (normalize_name(district.name), normalize_name(district.id)):
            return district
    raise ContributionValidationError(
        "district", value,
        f"'{value}' is not a district of {province.name} Province.",
        suggest_name(value, [d.name for d in province.districts]),
    )


# -----------------------------------------------------------------------------
# Service
# -----------------------------------------------------------------------------
class ContributionService:
    """Validates and saves community contributions."""

    def __init__(self, store, resolver):
        self.store = store
        self.resolver = resolver

    def add_destination(self, submission: DestinationSubmission) -> Destination:
        """Validate, upload, insert, invalidate.  Returns the saved record."""
        name = " ".join(submission.name.split())
        if not name:
            raise ContributionValidationError("name", submission.name, "A destination name is required.")
        if submission.category not in DESTINATION_CATEGORIES:
            raise ContributionValidationError(
                "category", submission.category,
                f"Unknown category '{submission.category}'.",
                suggest_name(submission.category, DESTINATION_CATEGORIES),
            )
        province = find_province(submission.province, self.resolver.provinces())
        district_id = ""
        if submission.district:
            district_id = find_district(submission.district, province).id
        self._require_store()

        image = PLACEHOLDER_IMAGE
        uploaded = None
        if submission.image is not None:
            uploaded, image = self._upload(DESTINATION_BUCKET, submission.image)

        destination = Destination(
            id=slugify(name),
            name=name,
            province_id=province.id,
            district_id=district_id,
            category=submission.category,
            best_months=DEFAULT_BEST_MONTHS,
            description=submission.description.strip(),
            cultural_significance=DEFAULT_CULTURAL_SIGNIFICANCE,
            image=image,
            coordinates=DEFAULT_COORDINATES,
        )
        row = DESTINATION_SCHEMA.to_remote(destination)
        if not district_id:
            del row["district_id"]
        self._insert("destinations", row, f"A destination called '{name}' already exists.",
                     uploaded)

        self.resolver.invalidate(DESTINATIONS)
        logger.info("Added community destination %s", destination.id)
        return destination

    def share_article(self, submission: ArticleSubmission) -> NewsArticle:
        """Validate, upload, insert, invalidate.  Returns the saved record."""
        title = submission.title.strip()
        body = submission.body.strip()
        if not title:
            raise ContributionValidationError("title", submission.title, "A title is required.")
        if not body:
            raise ContributionValidationError("body", submission.body, "Please write a few words.")

        province_id = district_id = None
        if submission.province:
            province = find_province(submission.province, self.resolver.provinces())
            province_id = province.id
            if submission.district:
                district_id = find_district(submission.district, province).id
        elif submission.district:
            raise ContributionValidationError(
                "district", submission.district, "Choose a province before a district."
            )
        if submission.destination_id:
            known = [d.id for d in self.resolver.destinations()]
            if submission.destination_id not in known:
                raise ContributionValidationError(
                    "destination_id", submission.destination_id,
                    f"Unknown destination '{submission.destination_id}'.",
                    suggest_name(submission.destination_id, known),
                )
        self._require_store()

        image_url = uploaded = None
        if submission.image is not None:
            uploaded, image_url = self._upload(ARTICLE_BUCKET, submission.image)

        article = NewsArticle(
            title=title,
            description=body,
            url="#",
            published_at=datetime.now(timezone.utc).isoformat(),
            source=submission.source.strip() or COMMUNITY_CATEGORY,
            category=COMMUNITY_CATEGORY,
            image_url=image_url,
            destination_id=submission.destination_id or None,
            province_id=province_id,
            district_id=district_id,
        )
        # The store assigns the id.
        row = NEWS_ARTICLE_SCHEMA.to_remote(article, exclude=("id",))
        saved = self._insert("news_articles", row, "This story has already been shared.", uploaded)

        self.resolver.invalidate(NEWS)
        logger.info("Shared community article %r", title)
        if isinstance(saved, dict) and saved.get("id") is not None:
            return NEWS_ARTICLE_SCHEMA.from_remote(saved)
        return article

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _require_store(self) -> None:
        if self.store is None:
            raise ContributionError(
                "Contributions are unavailable: no live data store is configured."
            )

    def _upload(self, bucket: str, image: ImageUpload) -> tuple[tuple[str, str], str]:
        """Upload an image; returns ((bucket, object name), public URL)."""
        _, ext = os.path.splitext(image.filename)
        name = f"{uuid.uuid4().hex}{ext.lower()}"
        try:
            url = self.store.upload(bucket, name, image.data, image.content_type)
        except StoreError as e:
            logger.error("Image upload to %s failed", bucket, exc_info=True)
            raise ContributionError("Image upload failed. Please try again.") from e
        return (bucket, name), url

    def _insert(self, table: str, row: dict, duplicate_message: str,
                uploaded: Optional[tuple[str, str]] = None) -> dict:
        try:
            return self.store.insert(table, row)
        except StoreError as e:
            if uploaded is not None:
                self._discard(*uploaded)
            if isinstance(e, QueryError) and e.is_unique_violation:
                raise DuplicateContributionError(duplicate_message) from e
            logger.error("Insert into %s failed", table, exc_info=True)
            raise ContributionError("Could not save your contribution. Please try again.") from e

    def _discard(self, bucket: str, name: str) -> None:
        # Best effort: the insert error is what the traveller sees.
        try:
            self.store.remove(bucket, name)
        except StoreError:
            logger.warning("Could not remove orphaned upload %s/%s", bucket, name, exc_info=True)
