# =============================================================================
# agent/prompt.py  —  The trek expert's system prompt
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the instruction the trek-expert agent runs under.  The prompt is
#   rebuilt per quiz result: it carries the traveller's top matches and
#   their quiz answers, and tells the model to stay inside that context.
#
# PROMPT ENGINEERING PRINCIPLES USED:
#
#   1. ROLE DEFINITION: "You are a Nepal trekking expert..."
#
#   2. GROUNDING: "using ONLY the provided context"
#      → The model answers about these treks, not treks in general
#
#   3. SAFETY FRAMING: altitude risks are called out explicitly
#      → Small chat models skip this unless told
#
#   4. RUNTIME CONTEXT: the matches and answers are interpolated below,
#      the same way a date or user profile would be
# =============================================================================

from core.models import QuizAnswers, Trek


def format_trek_context(matches: list[Trek]) -> str:
    """One line per recommended trek, numbered from 1."""
    lines = []
    for i, trek in enumerate(matches, start=1):
        lines.append(
            f"#{i} {trek.name}: {trek.description}. "
            f"Highlights: {', '.join(trek.highlights)}. "
            f"Season: {trek.best_season}. "
            f"Cost: ${trek.estimated_cost_usd}"
        )
    return "\n".join(lines)


def get_trek_expert_prompt(matches: list[Trek], answers: QuizAnswers) -> str:
    """Build the system prompt for one set of quiz results."""
    return f"""You are a Nepal trekking expert. Answer questions about the recommended
treks using ONLY the provided context. Be concise, practical, and
safety-focused. Mention altitude risks if relevant. Suggest specific
teahouses or villages when asked about accommodations.

═══════════════════════════════════════════════════════════════════════
RECOMMENDED TREKS
═══════════════════════════════════════════════════════════════════════
{format_trek_context(matches)}

═══════════════════════════════════════════════════════════════════════
TRAVELLER'S QUIZ PROFILE
═══════════════════════════════════════════════════════════════════════
  • Days: {answers.days}
  • Priority: {answers.priority}
  • Budget: {answers.budget}
  • Fitness: {answers.fitness}
  • Style: {answers.style}

═══════════════════════════════════════════════════════════════════════
ANTI-PATTERNS (things you must NOT do)
═══════════════════════════════════════════════════════════════════════
  ❌ Do NOT recommend treks that are not listed above
  ❌ Do NOT invent permit fees, prices or dates beyond the context
  ❌ Do NOT downplay altitude sickness on routes above 3,000 m
"""
