# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK trek expert.
#
# ARCHITECTURAL ROLE:
#   After the quiz, the traveller can ask follow-up questions about their
#   matches.  The agent answers from a prompt built around those matches
#   (agent/prompt.py); TrekExpertChat (agent/trek_expert.py) owns the
#   runner, the session and the transcript.
#
# THE LLM'S ROLE:
#   Any chat-completion model LiteLlm can reach.  It does not score or
#   pick treks; core/matching.py already did that.
# =============================================================================
