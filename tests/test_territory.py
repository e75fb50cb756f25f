from core import nepal_data
from core.territory import available_districts, filter_destinations


DESTINATIONS = list(nepal_data.DESTINATIONS)
PROVINCES = list(nepal_data.PROVINCES)


def ids(destinations):
    return [d.id for d in destinations]


def test_no_filters_keeps_everything():
    assert filter_destinations(DESTINATIONS) == DESTINATIONS
    assert filter_destinations(DESTINATIONS, "all", "all", "all") == DESTINATIONS


def test_province_and_district_combine():
    assert ids(filter_destinations(DESTINATIONS, "gandaki", "mustang")) == [
        "upper-mustang", "muktinath",
    ]


def test_all_three_filters_combine():
    found = filter_destinations(DESTINATIONS, "gandaki", "mustang", "Spiritual Centers")
    assert ids(found) == ["muktinath"]
    assert filter_destinations(DESTINATIONS, "gandaki", "mustang", "Wildlife") == []


def test_district_from_another_province_matches_nothing():
    assert filter_destinations(DESTINATIONS, "koshi", "mustang") == []


def test_category_alone():
    found = filter_destinations(DESTINATIONS, category="Heritage Sites")
    assert "kathmandu-valley" in ids(found)
    assert all(d.category == "Heritage Sites" for d in found)


def test_districts_for_one_province():
    karnali = available_districts(PROVINCES, "karnali")
    assert len(karnali) == 10
    assert karnali[0].id == "rukum-west"


def test_every_district_when_no_province_chosen():
    total = sum(len(p.districts) for p in PROVINCES)
    assert len(available_districts(PROVINCES)) == total
    assert len(available_districts(PROVINCES, "all")) == total


def test_unknown_province_has_no_districts():
    assert available_districts(PROVINCES, "atlantis") == []
