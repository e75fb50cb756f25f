import asyncio
from types import SimpleNamespace

from agent.prompt import get_trek_expert_prompt
from agent.trek_expert import FALLBACK_REPLY, TrekExpertChat, create_agent
from core.trek_data import FALLBACK_TREKS


class FakeSessionService:
    def __init__(self):
        self.created = []

    async def create_session(self, app_name, user_id, session_id=None, state=None):
        self.created.append((app_name, user_id))
        return SimpleNamespace(id=session_id or "session-1")


class FakeRunner:
    def __init__(self, replies=(), error=None):
        self.replies = list(replies)
        self.error = error
        self.messages = []

    async def run_async(self, user_id, session_id, new_message):
        self.messages.append(new_message.parts[0].text)
        if self.error is not None:
            raise self.error
        for text in self.replies:
            yield SimpleNamespace(content=SimpleNamespace(parts=[SimpleNamespace(text=text)]))


def make_chat(answers, runner):
    return TrekExpertChat(list(FALLBACK_TREKS[:3]), answers,
                          runner=runner, session_service=FakeSessionService())


def test_prompt_embeds_matches_and_answers(answers):
    prompt = get_trek_expert_prompt(list(FALLBACK_TREKS[:3]), answers)
    assert "#1 Everest Base Camp" in prompt
    assert "#3 Ghorepani Poon Hill" in prompt
    assert "Kala Patthar sunrise, Tengboche Monastery, Namche Bazaar" in prompt
    assert "Cost: $1400" in prompt
    assert "Days: 9" in prompt
    assert "Style: solo" in prompt
    assert "ONLY the provided context" in prompt


def test_agent_uses_prompt_as_instruction(answers):
    agent = create_agent(list(FALLBACK_TREKS[:3]), answers, model="groq/llama-3.1-8b-instant")
    assert agent.name == "nepal_trek_expert"
    assert "Everest Base Camp" in agent.instruction


def test_greeting_names_top_match(answers):
    chat = make_chat(answers, FakeRunner())
    assert chat.transcript[0].role == "assistant"
    assert "Everest Base Camp is your top match" in chat.transcript[0].content


def test_ask_returns_last_text_and_keeps_transcript(answers):
    runner = FakeRunner(replies=["Thinking...", "Acclimatize in Namche for two nights."])
    chat = make_chat(answers, runner)
    reply = asyncio.run(chat.ask("  How do I acclimatize?  "))
    assert reply == "Acclimatize in Namche for two nights."
    assert runner.messages == ["How do I acclimatize?"]
    assert [(m.role, m.content) for m in chat.transcript[1:]] == [
        ("user", "How do I acclimatize?"),
        ("assistant", "Acclimatize in Namche for two nights."),
    ]


def test_session_created_once(answers):
    runner = FakeRunner(replies=["ok"])
    chat = make_chat(answers, runner)
    asyncio.run(chat.ask("one"))
    asyncio.run(chat.ask("two"))
    assert len(chat.session_service.created) == 1


def test_model_failure_gives_fallback_reply(answers):
    chat = make_chat(answers, FakeRunner(error=RuntimeError("rate limited")))
    reply = asyncio.run(chat.ask("Is it cold?"))
    assert reply == FALLBACK_REPLY
    assert chat.transcript[-1].content == FALLBACK_REPLY


def test_empty_model_reply_gives_fallback(answers):
    chat = make_chat(answers, FakeRunner(replies=[]))
    assert asyncio.run(chat.ask("Hello")) == FALLBACK_REPLY


def test_blank_message_ignored(answers):
    runner = FakeRunner(replies=["ok"])
    chat = make_chat(answers, runner)
    assert asyncio.run(chat.ask("   ")) == ""
    assert len(chat.transcript) == 1
    assert runner.messages == []
