# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the Nepal discovery backend:
# trek matching, data resolution with static fallback, the quiz, community
# contributions, seeding, map markers and news search.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any orchestration
#   framework.  With no store configured, every module here works offline
#   on the bundled static datasets.
# =============================================================================
