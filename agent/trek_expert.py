# =============================================================================
# agent/trek_expert.py  —  Google ADK trek expert (chat-completion via LiteLlm)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the ADK agent that answers follow-up questions about a quiz
#   result, and wraps it in TrekExpertChat: a small conversation object
#   that owns the runner, the session and the visible transcript.
#
# MODEL:
#   LiteLlm routes to any chat-completion provider.  The default is
#   "groq/llama-3.1-8b-instant" (LiteLlm reads GROQ_API_KEY from the
#   environment).  Set TREK_EXPERT_MODEL to use something else, e.g.
#   "openrouter/openai/gpt-4o-mini".
#
# FAILURE BEHAVIOUR:
#   The chat never raises into the caller.  If the model call fails for any
#   reason, a fixed "temporarily unavailable" reply is appended to the
#   transcript and returned in place of an answer.
#
# NO TOOLS:
#   The expert only talks about the treks already in its prompt, so it gets
#   no MCP toolset.  Each quiz result gets its own agent instance because
#   the instruction embeds that result.
# =============================================================================

import logging
import uuid
from dataclasses import dataclass

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.prompt import get_trek_expert_prompt
from core.config import DEFAULT_TREK_EXPERT_MODEL
from core.models import QuizAnswers, Trek

logger = logging.getLogger(__name__)

APP_NAME = "nepal_trek_expert"
FALLBACK_REPLY = (
    "Expert temporarily unavailable. Please try again later or reach out "
    "to our team at assistance@discovernepal.com."
)


def create_agent(
    matches: list[Trek],
    answers: QuizAnswers,
    model: str = DEFAULT_TREK_EXPERT_MODEL,
) -> Agent:
    """Create the trek expert for one set of quiz results."""
    return Agent(
        name="nepal_trek_expert",
        model=LiteLlm(model=model, temperature=0.7, max_tokens=500),
        instruction=get_trek_expert_prompt(matches, answers),
    )


def greeting_for(matches: list[Trek]) -> str:
    top = matches[0].name if matches else "a great trek"
    return (
        f"Namaste! I'm your Nepal trekking expert. I see {top} is your top "
        f"match. How can I help you plan your adventure?"
    )


@dataclass
class ChatMessage:
    role: str                          # "user" or "assistant"
    content: str


class TrekExpertChat:
    """One traveller's conversation with the trek expert."""

    def __init__(
        self,
        matches: list[Trek],
        answers: QuizAnswers,
        model: str = DEFAULT_TREK_EXPERT_MODEL,
        runner=None,
        session_service=None,
        user_id: str = "traveller",
    ):
        self.matches = list(matches)
        self.answers = answers
        self.user_id = user_id
        self.session_service = session_service or InMemorySessionService()
        self.runner = runner or Runner(
            agent=create_agent(self.matches, answers, model),
            app_name=APP_NAME,
            session_service=self.session_service,
        )
        self.transcript: list[ChatMessage] = [
            ChatMessage("assistant", greeting_for(self.matches))
        ]
        self._session_id = None

    async def ask(self, message: str) -> str:
        """Send one message and return the expert's reply.

        Blank messages are ignored and return an empty string.
        """
        text = message.strip()
        if not text:
            return ""
        self.transcript.append(ChatMessage("user", text))

        try:
            reply = await self._run(text)
        except Exception:
            logger.error("Trek expert call failed", exc_info=True)
            reply = None

        if not reply:
            reply = FALLBACK_REPLY
        self.transcript.append(ChatMessage("assistant", reply))
        return reply

    async def _run(self, text: str) -> str:
        if self._session_id is None:
            session = await self.session_service.create_session(
                app_name=APP_NAME,
                user_id=self.user_id,
                session_id=uuid.uuid4().hex,
            )
            self._session_id = session.id

        content = types.Content(role="user", parts=[types.Part(text=text)])
        final_response = ""
        async for event in self.runner.run_async(
            user_id=self.user_id,
            session_id=self._session_id,
            new_message=content,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
        return final_response
