# =============================================================================
# main.py  —  Entry Point: trek quiz, results, and the trek expert chat
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Loads the four display datasets (live store or static fallback)
#   2. Walks through the five-question trek quiz (resumes if interrupted)
#   3. Shows the top three matching treks
#   4. Opens a chat with the trek expert about those treks
#
# ENVIRONMENT (.env is loaded first):
#   USE_LIVE_DATA, SUPABASE_URL, SUPABASE_ANON_KEY   live data (optional)
#   QUIZ_STATE_PATH                                  where quiz progress lives
#   TREK_EXPERT_MODEL + the provider's API key       e.g. GROQ_API_KEY
# =============================================================================

import asyncio
import logging

from dotenv import load_dotenv

# LiteLlm reads the provider API key from the environment when it
# initializes, so this must run before the agent is created.
load_dotenv()

from agent.trek_expert import TrekExpertChat
from core.config import Settings, build_store
from core.matching import recommend_treks
from core.models import TrekRecommendation
from core.quiz import QUIZ_STEPS, QuizSession
from core.resolver import DataResolver


def _ask_option(session: QuizSession):
    """Prompt for one quiz step.  Returns the chosen value, "back" or None."""
    step = session.step
    print(f"\n❓ [{session.current_step + 1}/{len(QUIZ_STEPS)}] {step.question}")
    for i, option in enumerate(step.options, start=1):
        print(f"   {i}. {option.label}  ({option.description})")
    while True:
        raw = input("   Your choice (number, 'b' to go back): ").strip().lower()
        if raw in ("quit", "exit", "q"):
            return None
        if raw == "b":
            return "back"
        if raw.isdigit() and 1 <= int(raw) <= len(step.options):
            return step.options[int(raw) - 1].value
        print("   ⚠️  Please pick one of the listed numbers.")


def run_quiz(session: QuizSession) -> bool:
    """Drive the quiz to completion.  Returns False if the user quits."""
    if session.current_step > 0:
        print(f"\n↩️  Resuming your quiz at question {session.current_step + 1}.")
    while True:
        choice = _ask_option(session)
        if choice is None:
            return False
        if choice == "back":
            session.back()
            continue
        last_step = session.current_step == len(QUIZ_STEPS) - 1
        session.select(choice)
        if last_step and session.is_complete:
            return True


def show_results(recommendation: TrekRecommendation) -> bool:
    """Print the matches.  Returns False when there is nothing to show."""
    print("\n" + "-" * 70)
    print("🏔️  YOUR TOP MATCHES")
    print("-" * 70)
    if recommendation.is_empty:
        print("\n  No treks match your answers. Try the quiz again with different choices.")
        return False

    for i, candidate in enumerate(recommendation.candidates, start=1):
        trek = candidate.trek
        score = f"{candidate.score}% match" if recommendation.scored else "popular pick"
        print(f"\n  {i}. {trek.name}  [{score}]")
        print(f"     {trek.min_days}-{trek.max_days} days · {trek.fitness_required} · "
              f"~${trek.estimated_cost_usd} · {trek.best_season}")
        print(f"     {trek.description}")
    return True


async def run_app():
    print("=" * 70)
    print("  DISCOVER NEPAL  —  TREK FINDER")
    print("  Powered by Google ADK + LiteLlm")
    print("=" * 70)

    settings = Settings.from_env()
    resolver = DataResolver(build_store(settings))

    print("\n🔧 Loading destinations...")
    snapshot = await resolver.load()
    print(f"✅ {len(snapshot.provinces)} provinces, "
          f"{len(snapshot.destinations)} destinations loaded.")
    if snapshot.is_error:
        print("⚠️  Live data unavailable. Showing offline data.")

    session = QuizSession(settings.quiz_state_path)
    try:
        finished = run_quiz(session)
    except (EOFError, KeyboardInterrupt):
        finished = False
    if not finished:
        print("\n\n👋 Your progress is saved. Goodbye!")
        return

    answers = session.answers()
    recommendation = recommend_treks(answers, resolver)
    session.reset()
    if not show_results(recommendation):
        return

    chat = TrekExpertChat(recommendation.treks, answers, model=settings.trek_expert_model)
    print("\n" + "-" * 70)
    print(f"\n🤖 Expert: {chat.transcript[0].content}")
    print("   (Type 'quit' to exit)")

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        print("\n🤖 Expert is thinking...")
        reply = await chat.ask(user_input)
        print(f"\n🤖 Expert:\n\n{reply}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    asyncio.run(run_app())
