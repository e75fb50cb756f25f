# =============================================================================
# core/config.py  —  Environment-driven settings
# =============================================================================
#
# DATA SOURCE TOGGLE:
#   Set USE_LIVE_DATA=true to read from (and write to) the hosted backend
#   configured by SUPABASE_URL / SUPABASE_ANON_KEY.  Leave it unset or
#   "false" to run entirely on the bundled static datasets.
#
#   With the toggle on but the URL or key missing, build_store() returns
#   None and the application behaves as if the toggle were off.  Reads still
#   work; contribution writes report that no backend is configured.
#
# The entry points (main.py, tools/mcp_server.py) call load_dotenv() before
# Settings.from_env(), so a local .env file is honoured.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Optional

from core.store import PostgrestStore, RemoteStore


DEFAULT_QUIZ_STATE_PATH = os.path.join(os.path.expanduser("~"), ".nepal_quiz_state.json")
DEFAULT_TREK_EXPERT_MODEL = "groq/llama-3.1-8b-instant"


@dataclass(frozen=True)
class Settings:
    use_live_data: bool = False
    supabase_url: str = ""
    supabase_anon_key: str = ""
    store_timeout_seconds: float = 10
    quiz_state_path: str = DEFAULT_QUIZ_STATE_PATH
    trek_expert_model: str = DEFAULT_TREK_EXPERT_MODEL

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            use_live_data=os.environ.get("USE_LIVE_DATA", "false").lower() == "true",
            supabase_url=os.environ.get("SUPABASE_URL", ""),
            supabase_anon_key=os.environ.get("SUPABASE_ANON_KEY", ""),
            store_timeout_seconds=float(os.environ.get("STORE_TIMEOUT_SECONDS", "10")),
            quiz_state_path=os.environ.get("QUIZ_STATE_PATH", DEFAULT_QUIZ_STATE_PATH),
            trek_expert_model=os.environ.get("TREK_EXPERT_MODEL", DEFAULT_TREK_EXPERT_MODEL),
        )

    @property
    def store_configured(self) -> bool:
        return self.use_live_data and bool(self.supabase_url) and bool(self.supabase_anon_key)


def build_store(settings: Settings) -> Optional[RemoteStore]:
    """Return a live store client, or None to run on static data."""
    if not settings.store_configured:
        return None
    return PostgrestStore(
        settings.supabase_url,
        settings.supabase_anon_key,
        timeout=settings.store_timeout_seconds,
    )
