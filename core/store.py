# =============================================================================
# core/store.py  —  Remote relational store + object storage client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Talks to the hosted backend: a PostgREST-style REST API for the tables
#   (provinces, districts, destinations, impact_metrics,
#   monthly_visitor_data, news_articles) and a storage API for image
#   uploads.
#
# THE INTERFACE IS SMALL ON PURPOSE:
#   select / insert / upsert / upload / remove / public_url.  The
#   resolution layer and the contribution path only ever see RemoteStore,
#   so tests swap in an in-memory fake and a deployment could swap in
#   another backend without touching core/resolver.py.
#
# ERROR TAXONOMY:
#   QueryError      the store answered, with an error payload (bad query,
#                   constraint violation).  Carries the store's error code,
#                   e.g. "23505" for a uniqueness violation.
#   TransportError  the store could not be reached (DNS, refused, timeout).
#   Both derive from StoreError so read paths can fail soft on either.
# =============================================================================

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Optional

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class StoreError(Exception):
    """Base class for every failure reported by the remote store."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class QueryError(StoreError):
    """The store rejected the request."""

    @property
    def is_unique_violation(self) -> bool:
        return self.code == UNIQUE_VIOLATION


class TransportError(StoreError):
    """The store was unreachable."""


class RemoteStore:
    """Operations the application needs from the hosted backend."""

    def select(
        self,
        table: str,
        columns: str = "*",
        filters: Optional[dict] = None,
        order: Optional[str] = None,
        descending: bool = False,
    ) -> list[dict]:
        raise NotImplementedError

    def insert(self, table: str, row: dict) -> dict:
        raise NotImplementedError

    def upsert(self, table: str, rows: list[dict], on_conflict: str = "id") -> None:
        raise NotImplementedError

    def upload(self, bucket: str, name: str, data: bytes, content_type: str) -> str:
        """Store a file and return its public URL."""
        raise NotImplementedError

    def remove(self, bucket: str, name: str) -> None:
        raise NotImplementedError

    def public_url(self, bucket: str, name: str) -> str:
        raise NotImplementedError


class PostgrestStore(RemoteStore):
    """RemoteStore over the PostgREST and storage REST endpoints."""

    def __init__(self, base_url: str, api_key: str, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def select(self, table, columns="*", filters=None, order=None, descending=False):
        params = {"select": columns}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{value}"
        if order:
            params["order"] = f"{order}.{'desc' if descending else 'asc'}"
        url = f"{self.base_url}/rest/v1/{table}?{urllib.parse.urlencode(params)}"
        return self._request("GET", url) or []

    def insert(self, table, row):
        url = f"{self.base_url}/rest/v1/{table}"
        created = self._request(
            "POST", url, body=row, headers={"Prefer": "return=representation"}
        )
        return created[0] if created else row

    def upsert(self, table, rows, on_conflict="id"):
        query = urllib.parse.urlencode({"on_conflict": on_conflict})
        url = f"{self.base_url}/rest/v1/{table}?{query}"
        self._request(
            "POST", url, body=rows,
            headers={"Prefer": "resolution=merge-duplicates,return=minimal"},
        )

    # ------------------------------------------------------------------
    # Object storage
    # ------------------------------------------------------------------

    def upload(self, bucket, name, data, content_type):
        url = f"{self.base_url}/storage/v1/object/{bucket}/{urllib.parse.quote(name)}"
        self._request(
            "POST", url, raw_body=data,
            headers={"Content-Type": content_type, "x-upsert": "false"},
        )
        return self.public_url(bucket, name)

    def remove(self, bucket, name):
        url = f"{self.base_url}/storage/v1/object/{bucket}/{urllib.parse.quote(name)}"
        self._request("DELETE", url)

    def public_url(self, bucket, name):
        return f"{self.base_url}/storage/v1/object/public/{bucket}/{urllib.parse.quote(name)}"

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _request(self, method, url, body=None, raw_body=None, headers=None):
        all_headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }
        data = raw_body
        if body is not None:
            data = json.dumps(body).encode("utf-8")
            all_headers["Content-Type"] = "application/json"
        all_headers.update(headers or {})

        req = urllib.request.Request(url, data=data, headers=all_headers, method=method)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                payload = response.read()
        except urllib.error.HTTPError as e:
            raise _query_error(e) from e
        except (urllib.error.URLError, TimeoutError, OSError) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not payload:
            return None
        try:
            return json.loads(payload.decode("utf-8"))
        except ValueError as e:
            raise QueryError(f"{method} {url} returned invalid JSON") from e


def _query_error(error: urllib.error.HTTPError) -> QueryError:
    """Turn an HTTP error response into a QueryError with the store's code."""
    code = None
    message = f"HTTP {error.code}"
    try:
        details = json.loads(error.read().decode("utf-8"))
    except ValueError:
        details = None
    if isinstance(details, dict):
        code = details.get("code") or details.get("error")
        message = details.get("message") or message
    if code is not None:
        code = str(code)
    return QueryError(message, code=code)
