from core import nepal_data
from core.mapping import (
    DEFAULT_MARKER_COLOR,
    NEPAL_CENTER,
    build_map_view,
    destination_for_marker,
    marker_color,
)
from core.models import Coordinates, NewsArticle
from core.news import NEWS_FEEDS, news_categories, search_news


def community_article(title="Tea at Ghandruk", category="Community"):
    return NewsArticle(title=title, description="Traveller story.", url="#",
                       published_at="2024-02-01", source="Community", category=category)


def test_default_search_is_general_feed():
    assert search_news() == list(NEWS_FEEDS["default"])


def test_destination_feed_goes_first():
    results = search_news(destination="pokhara")
    assert results[:3] == list(NEWS_FEEDS["pokhara"])
    assert len(results) == 3 + len(NEWS_FEEDS["default"])


def test_unknown_destination_adds_nothing():
    assert search_news(destination="atlantis") == list(NEWS_FEEDS["default"])


def test_category_and_query_filters():
    wildlife = search_news(destination="chitwan-national-park", category="Wildlife")
    assert [a.category for a in wildlife] == ["Wildlife", "Wildlife"]

    found = search_news(query="  TIGER ")
    assert found == []
    found = search_news(destination="chitwan-national-park", query="tiger")
    assert [a.title for a in found] == ["Tiger Population in Chitwan Reaches 128"]


def test_query_matches_description():
    found = search_news(query="homestay")
    assert [a.source for a in found] == ["Rural Development"]


def test_community_articles_lead_and_duplicates_drop():
    story = community_article()
    dup = community_article(title=NEWS_FEEDS["default"][0].title)
    results = search_news(community=[story, dup])
    assert results[0] == story
    assert [a.title for a in results].count(dup.title) == 1
    assert results[1] == dup


def test_categories_include_community():
    cats = news_categories([community_article(category="Stories")])
    assert "Stories" in cats
    assert "Wildlife" in cats
    assert cats == sorted(cats)


def test_map_view_has_marker_per_destination():
    view = build_map_view(nepal_data.DESTINATIONS)
    assert view.center == NEPAL_CENTER
    assert view.zoom == 7
    assert len(view.markers) == len(nepal_data.DESTINATIONS)
    everest = view.markers[0]
    assert everest.destination_id == "everest-base-camp"
    assert everest.color == "#10B981"
    assert everest.label == "Everest Base Camp"


def test_map_category_filter_and_unknown_colour():
    view = build_map_view(nepal_data.DESTINATIONS, category="Wildlife")
    assert view.markers
    assert all(m.category == "Wildlife" for m in view.markers)
    assert marker_color("Festivals") == DEFAULT_MARKER_COLOR


def test_destination_without_coordinates_gets_no_marker():
    dest = nepal_data.DESTINATIONS[0]
    from dataclasses import replace
    blank = replace(dest, id="blank", coordinates=Coordinates(0, 0))
    view = build_map_view([blank, dest])
    assert [m.destination_id for m in view.markers] == [dest.id]


def test_marker_click_resolves_destination():
    assert destination_for_marker(nepal_data.DESTINATIONS, "lumbini").name == "Lumbini"
    assert destination_for_marker(nepal_data.DESTINATIONS, "nowhere") is None
