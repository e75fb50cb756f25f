import io
import json
import urllib.error

import pytest

from core import store as store_module
from core.config import Settings, build_store
from core.store import PostgrestStore, QueryError, TransportError


class FakeResponse:
    def __init__(self, payload=b""):
        self.payload = payload

    def read(self):
        return self.payload

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def requests(monkeypatch):
    sent = []
    replies = []

    def fake_urlopen(req, timeout=None):
        sent.append((req, timeout))
        reply = replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return FakeResponse(reply)

    monkeypatch.setattr(store_module.urllib.request, "urlopen", fake_urlopen)
    return sent, replies


def test_select_builds_filtered_ordered_query(requests):
    sent, replies = requests
    replies.append(json.dumps([{"id": "pokhara"}]).encode())
    client = PostgrestStore("https://db.test/", "anon-key", timeout=3)

    rows = client.select("destinations", filters={"category": "Wildlife"},
                         order="name", descending=True)

    req, timeout = sent[0]
    assert rows == [{"id": "pokhara"}]
    assert timeout == 3
    assert req.get_method() == "GET"
    assert req.full_url.startswith("https://db.test/rest/v1/destinations?")
    assert "category=eq.Wildlife" in req.full_url
    assert "order=name.desc" in req.full_url
    assert req.get_header("Apikey") == "anon-key"
    assert req.get_header("Authorization") == "Bearer anon-key"


def test_upsert_merges_duplicates(requests):
    sent, replies = requests
    replies.append(b"")
    PostgrestStore("https://db.test", "k").upsert("provinces", [{"id": "koshi"}])

    req, _ = sent[0]
    assert req.get_method() == "POST"
    assert req.full_url == "https://db.test/rest/v1/provinces?on_conflict=id"
    assert req.get_header("Prefer") == "resolution=merge-duplicates,return=minimal"
    assert json.loads(req.data) == [{"id": "koshi"}]


def test_upload_returns_public_url(requests):
    sent, replies = requests
    replies.append(b"{}")
    url = PostgrestStore("https://db.test", "k").upload("destinations", "abc.jpg", b"img", "image/jpeg")

    assert url == "https://db.test/storage/v1/object/public/destinations/abc.jpg"
    assert sent[0][0].data == b"img"


def test_http_error_becomes_query_error_with_code(requests):
    _, replies = requests
    body = io.BytesIO(json.dumps({"code": "23505", "message": "duplicate key"}).encode())
    replies.append(urllib.error.HTTPError("https://db.test", 409, "Conflict", {}, body))

    with pytest.raises(QueryError) as info:
        PostgrestStore("https://db.test", "k").insert("destinations", {"id": "x"})
    assert info.value.is_unique_violation
    assert info.value.message == "duplicate key"


def test_unreachable_store_is_transport_error(requests):
    _, replies = requests
    replies.append(urllib.error.URLError("connection refused"))
    with pytest.raises(TransportError):
        PostgrestStore("https://db.test", "k").select("provinces")


def test_settings_default_to_static_data(monkeypatch):
    for name in ("USE_LIVE_DATA", "SUPABASE_URL", "SUPABASE_ANON_KEY", "TREK_EXPERT_MODEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert not settings.use_live_data
    assert settings.store_timeout_seconds == 10
    assert settings.trek_expert_model == "groq/llama-3.1-8b-instant"
    assert build_store(settings) is None


def test_live_toggle_needs_url_and_key(monkeypatch):
    monkeypatch.setenv("USE_LIVE_DATA", "TRUE")
    monkeypatch.setenv("SUPABASE_URL", "https://db.test")
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
    assert build_store(Settings.from_env()) is None

    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
    monkeypatch.setenv("STORE_TIMEOUT_SECONDS", "4")
    client = build_store(Settings.from_env())
    assert isinstance(client, PostgrestStore)
    assert client.timeout == 4


def test_remove_deletes_storage_object(requests):
    sent, replies = requests
    replies.append(b"")
    PostgrestStore("https://db.test", "k").remove("articles", "abc.png")

    req, _ = sent[0]
    assert req.get_method() == "DELETE"
    assert req.full_url == "https://db.test/storage/v1/object/articles/abc.png"
