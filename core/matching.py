# =============================================================================
# core/matching.py  —  Trek Matching Engine
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Scores every candidate trek against a completed quiz and returns the
#   top matches.  The scoring is a fixed additive heuristic, not a learned
#   model: every point can be traced back to one quiz answer.
#
# SCORING BREAKDOWN (max 100 for a perfect fit):
#   Days in range      +30   (days within [min_days, max_days])
#     ...or near miss  +10   (within 2 days of min_days, only if not in range)
#   Priority match     +25   (answer among the trek's priority tags)
#   Budget match       +15   (exact budget level)
#   Fitness OK         +20   (trek's required fitness <= traveller's)
#   Style match        +10   (solo/group among the trek's ideal_for)
#
#   The near-miss bonus and the in-range bonus are exclusive, so a score
#   is always between 0 and 100.
#
# ORDERING:
#   Candidates are sorted by score, highest first.  Python's sort is
#   stable, so ties keep the order the candidates were supplied in (remote
#   row order, or the static table order).
# =============================================================================

import logging

from core.models import (
    FITNESS_RANKS,
    QuizAnswers,
    ScoredCandidate,
    Trek,
    TrekRecommendation,
)
from core.trek_data import FALLBACK_TREKS

logger = logging.getLogger(__name__)

DEFAULT_MATCH_LIMIT = 3


def score_trek(trek: Trek, answers: QuizAnswers) -> int:
    """Score one trek for one traveller.  Pure; never mutates the trek."""
    score = 0

    # --- Duration fit (0, 10 or 30 points) ---
    if trek.min_days <= answers.days <= trek.max_days:
        score += 30
    elif abs(answers.days - trek.min_days) <= 2:
        score += 10

    # --- Priority (0-25 points) ---
    if answers.priority in trek.priority_type:
        score += 25

    # --- Budget (0-15 points) ---
    if trek.budget_level == answers.budget:
        score += 15

    # --- Fitness (0-20 points) ---
    # Overqualified is fine; underqualified is not.
    if FITNESS_RANKS[trek.fitness_required] <= FITNESS_RANKS[answers.fitness]:
        score += 20

    # --- Travel style (0-10 points) ---
    if answers.style in trek.ideal_for:
        score += 10

    return score


def rank_treks(treks, answers: QuizAnswers) -> list[ScoredCandidate]:
    """Score every trek and sort best first, ties in input order."""
    scored = [ScoredCandidate(trek=trek, score=score_trek(trek, answers)) for trek in treks]
    scored.sort(key=lambda c: c.score, reverse=True)
    return scored


def match_treks(treks, answers: QuizAnswers, limit: int = DEFAULT_MATCH_LIMIT) -> list[ScoredCandidate]:
    """The top `limit` candidates.  An empty candidate list gives []."""
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    return rank_treks(treks, answers)[:limit]


def recommend_treks(answers: QuizAnswers, resolver) -> TrekRecommendation:
    """Top three treks for a completed quiz.

    Candidates come from resolver.trek_candidates(), which already swaps in
    the static trek table when the store is empty or rejects the query.

    If sourcing blows up anyway (store unreachable, a row that will not
    reshape), the traveller still gets something: the first three static
    treks, unscored, in their fixed order.

    Args:
        answers: The completed quiz.
        resolver: A DataResolver (anything with trek_candidates()).

    Returns:
        TrekRecommendation.  `scored` is False only on the total-failure path.
    """
    try:
        treks, source = resolver.trek_candidates()
    except Exception:
        logger.error("Trek candidate sourcing failed, using defaults", exc_info=True)
        return TrekRecommendation(
            candidates=[ScoredCandidate(trek=t, score=0) for t in FALLBACK_TREKS[:DEFAULT_MATCH_LIMIT]],
            scored=False,
            source="default",
        )

    return TrekRecommendation(
        candidates=match_treks(treks, answers),
        scored=True,
        source=source,
    )
