from main import show_results
from core.models import ScoredCandidate, TrekRecommendation
from core.trek_data import FALLBACK_TREKS


def test_empty_recommendation_says_no_match(capsys):
    assert show_results(TrekRecommendation(candidates=[])) is False
    out = capsys.readouterr().out
    assert "No treks match your answers" in out


def test_scored_matches_are_listed(capsys):
    rec = TrekRecommendation(candidates=[ScoredCandidate(FALLBACK_TREKS[1], 100)])
    assert show_results(rec) is True
    out = capsys.readouterr().out
    assert "1. Annapurna Base Camp  [100% match]" in out
    assert "No treks match" not in out


def test_unscored_defaults_show_no_percentage(capsys):
    rec = TrekRecommendation(candidates=[ScoredCandidate(FALLBACK_TREKS[0], 0)],
                             scored=False, source="default")
    show_results(rec)
    assert "[popular pick]" in capsys.readouterr().out
