import pytest

from conftest import FakeStore, destination_row
from core.contribution import (
    ArticleSubmission,
    ContributionError,
    ContributionService,
    ContributionValidationError,
    DestinationSubmission,
    DuplicateContributionError,
    ImageUpload,
    normalize_name,
    slugify,
    suggest_name,
)
from core.resolver import DataResolver
from core.store import QueryError, TransportError


@pytest.fixture
def service(store, resolver):
    return ContributionService(store, resolver)


def submission(**overrides):
    fields = dict(name="Namo Buddha", province="Bagmati", category="Spiritual Centers",
                  description="Hilltop monastery.")
    fields.update(overrides)
    return DestinationSubmission(**fields)


def test_normalize_and_slug():
    assert normalize_name("  Sudur   Pashchim ") == "sudur pashchim"
    assert slugify("Namo  Buddha") == "namo-buddha"


def test_suggestion_is_first_name_with_same_letter():
    assert suggest_name("Nonexistent", ["Kathmandu", "Nuwakot", "Nawalpur"]) == "Nuwakot"
    assert suggest_name("Xyz", ["Kathmandu"]) is None
    assert suggest_name("", ["Kathmandu"]) is None


def test_unknown_district_rejected_before_any_request(service, store):
    with pytest.raises(ContributionValidationError) as info:
        service.add_destination(submission(district="Nonexistent"))
    err = info.value
    assert err.field == "district"
    assert err.suggestion == "Nuwakot"
    assert err.to_dict()["suggestion"] == "Nuwakot"
    assert store.ops("insert") == []
    assert store.ops("upload") == []


def test_unknown_province_suggests_by_first_letter(service, store):
    with pytest.raises(ContributionValidationError) as info:
        service.add_destination(submission(province="Gandhaki"))
    assert info.value.field == "province"
    assert info.value.suggestion == "Gandaki"
    assert "Did you mean 'Gandaki'?" in info.value.message
    assert store.ops("insert") == []


def test_district_must_belong_to_province(service):
    # Kaski is in Gandaki, not Bagmati
    with pytest.raises(ContributionValidationError):
        service.add_destination(submission(district="Kaski"))


def test_names_match_case_and_whitespace_insensitively(service, store):
    dest = service.add_destination(submission(province="  bagMATI ", district="nuwakot"))
    assert dest.province_id == "bagmati"
    assert dest.district_id == "nuwakot"


def test_add_destination_inserts_with_defaults(service, store):
    dest = service.add_destination(submission())
    (_, table, row), = store.ops("insert")
    assert table == "destinations"
    assert row["id"] == "namo-buddha"
    assert row["coordinates"] == {"lat": 27.7, "lng": 85.3}
    assert row["best_months"] == ["March", "April", "October", "November"]
    assert row["image"] == "/placeholder-destination.jpg"
    assert "district_id" not in row
    assert dest.cultural_significance == "Newly added community destination."


def test_add_destination_uploads_image_first(service, store):
    image = ImageUpload("Stupa.JPG", b"\xff\xd8data")
    dest = service.add_destination(submission(image=image))
    assert [c[0] for c in store.calls if c[0] != "select"] == ["upload", "insert"]
    bucket, name, data, _ = store.uploads[0]
    assert bucket == "destinations"
    assert name.endswith(".jpg")
    assert data == b"\xff\xd8data"
    assert dest.image == store.public_url("destinations", name)


def test_upload_names_do_not_collide(service, store):
    image = ImageUpload("a.png", b"x", "image/png")
    service.add_destination(submission(name="One", image=image))
    service.add_destination(submission(name="Two", image=image))
    assert store.uploads[0][1] != store.uploads[1][1]


def test_upload_failure_aborts_before_insert():
    store = FakeStore(fail={"upload": TransportError("down")})
    service = ContributionService(store, DataResolver(store))
    with pytest.raises(ContributionError):
        service.add_destination(submission(image=ImageUpload("a.jpg", b"x")))
    assert store.ops("insert") == []


@pytest.mark.parametrize("error", [
    TransportError("down"),
    QueryError("duplicate key", code="23505"),
])
def test_failed_insert_removes_uploaded_image(error):
    store = FakeStore(fail={"insert": error})
    service = ContributionService(store, DataResolver(store))
    with pytest.raises(ContributionError):
        service.add_destination(submission(image=ImageUpload("a.jpg", b"x")))
    (_, bucket, name), = store.ops("upload")
    assert store.ops("remove") == [("remove", bucket, name)]
    assert store.uploads == []


def test_failed_cleanup_still_reports_insert_error(caplog):
    store = FakeStore(fail={"insert": TransportError("down"), "remove": TransportError("down")})
    service = ContributionService(store, DataResolver(store))
    with caplog.at_level("WARNING", logger="core.contribution"):
        with pytest.raises(ContributionError) as info:
            service.share_article(ArticleSubmission(
                title="Tea at Ghandruk", body="Lovely.", image=ImageUpload("t.png", b"x")))
    assert info.value.message == "Could not save your contribution. Please try again."
    assert any("orphaned upload" in r.getMessage() for r in caplog.records)


def test_insert_without_image_removes_nothing(store, service):
    store.fail["insert"] = TransportError("down")
    with pytest.raises(ContributionError):
        service.add_destination(submission())
    assert store.ops("remove") == []


def test_insert_refreshes_destinations_and_treks(store, resolver, service):
    assert [d.id for d in resolver.destinations()][0] == "everest-base-camp"
    treks, source = resolver.trek_candidates()
    assert source == "fallback"

    service.add_destination(submission())

    assert [d.id for d in resolver.destinations()] == ["namo-buddha"]
    treks, source = resolver.trek_candidates()
    assert source == "remote"
    assert [t.id for t in treks] == ["namo-buddha"]


def test_duplicate_id_reports_already_exists(store, service):
    store.tables["destinations"] = [destination_row(id="namo-buddha", name="Namo Buddha")]
    with pytest.raises(DuplicateContributionError) as info:
        service.add_destination(submission())
    assert "already exists" in info.value.message


def test_other_store_failure_is_generic(store, resolver):
    store.fail["insert"] = QueryError("check constraint violated", code="23514")
    service = ContributionService(store, resolver)
    with pytest.raises(ContributionError) as info:
        service.add_destination(submission())
    assert not isinstance(info.value, DuplicateContributionError)
    assert info.value.message == "Could not save your contribution. Please try again."


def test_failed_insert_does_not_invalidate(store, resolver):
    resolver.destinations()
    store.fail["insert"] = TransportError("down")
    with pytest.raises(ContributionError):
        ContributionService(store, resolver).add_destination(submission())
    assert len([c for c in store.ops("select") if c[1] == "destinations"]) == 1
    resolver.destinations()
    assert len([c for c in store.ops("select") if c[1] == "destinations"]) == 1


def test_no_store_configured():
    service = ContributionService(None, DataResolver(None))
    with pytest.raises(ContributionError) as info:
        service.add_destination(submission())
    assert "no live data store" in info.value.message


def test_unknown_category_rejected(service):
    with pytest.raises(ContributionValidationError) as info:
        service.add_destination(submission(category="Spiritual"))
    assert info.value.suggestion == "Spiritual Centers"


def test_share_article(store, resolver, service):
    assert resolver.news_articles() == []
    article = service.share_article(ArticleSubmission(
        title="  Sunrise at Namo Buddha ",
        body="Worth the early start.",
        province="Bagmati",
        district="Kavrepalanchok",
        destination_id="kathmandu-valley",
        image=ImageUpload("sunrise.jpeg", b"img"),
    ))
    (_, table, row), = store.ops("insert")
    assert table == "news_articles"
    assert "id" not in row
    assert row["category"] == "Community"
    assert row["province_id"] == "bagmati"
    assert row["district_id"] == "kavrepalanchok"
    assert store.uploads[0][0] == "articles"
    assert article.title == "Sunrise at Namo Buddha"
    assert article.id is not None
    assert [a.title for a in resolver.news_articles()] == ["Sunrise at Namo Buddha"]


def test_article_needs_title_and_body(service, store):
    with pytest.raises(ContributionValidationError):
        service.share_article(ArticleSubmission(title=" ", body="x"))
    with pytest.raises(ContributionValidationError):
        service.share_article(ArticleSubmission(title="x", body=""))
    assert store.ops("insert") == []


def test_article_unknown_destination_rejected(service):
    with pytest.raises(ContributionValidationError) as info:
        service.share_article(ArticleSubmission(title="t", body="b", destination_id="atlantis"))
    assert info.value.field == "destination_id"
