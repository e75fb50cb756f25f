# =============================================================================
# core/quiz.py  —  The five-question trek quiz, with resumable state
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Walks a traveller through five fixed questions (days, priority, budget,
#   fitness, style) and turns the answers into a QuizAnswers for the
#   matcher.
#
# PERSISTENCE:
#   After every answer the session writes {"current_step", "answers"} to a
#   small JSON file.  A new QuizSession pointed at the same file resumes at
#   the same step.  reset() clears the answers and deletes the file.
#   A missing or unreadable state file just means "start fresh".
# =============================================================================

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from core.models import QuizAnswers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuizOption:
    label: str
    value: Any
    description: str = ""


@dataclass(frozen=True)
class QuizStep:
    field: str                         # QuizAnswers attribute this step fills
    question: str
    options: tuple[QuizOption, ...]


QUIZ_STEPS: tuple[QuizStep, ...] = (
    QuizStep("days", "How many days do you have for the trek?", (
        QuizOption("3-5 days", 5, "Short & Sweet"),
        QuizOption("7-10 days", 10, "Standard Experience"),
        QuizOption("14+ days", 20, "Deep Exploration"),
    )),
    QuizStep("priority", "What's your main priority?", (
        QuizOption("Mountains", "Mountains", "Breathtaking peaks & panoramas"),
        QuizOption("Culture", "Culture", "Rich heritage & ancient traditions"),
        QuizOption("Wildlife", "Wildlife", "Nature's wonders & animals"),
        QuizOption("Mix", "Mix", "A bit of everything"),
    )),
    QuizStep("budget", "What's your budget level?", (
        QuizOption("Budget", "Budget", "Economical teahouse trekking"),
        QuizOption("Mid-range", "Mid-range", "Comfortable stays & good meals"),
        QuizOption("Luxury", "Luxury", "Premium lodges & services"),
    )),
    QuizStep("fitness", "What's your fitness level?", (
        QuizOption("Beginner", "Beginner", "Comfortable with 3-4h walking"),
        QuizOption("Moderate", "Moderate", "Regular hiker, 5-6h walking"),
        QuizOption("Experienced", "Experienced", "Long days, steep climbs, high altitude"),
    )),
    QuizStep("style", "What's your preferred travel style?", (
        QuizOption("Solo", "solo", "Independence & quietness"),
        QuizOption("Group/Trek Partner", "group", "Social experience & shared memories"),
    )),
)


class QuizSession:
    """One traveller's progress through QUIZ_STEPS."""

    def __init__(self, state_path: Optional[str] = None):
        self.state_path = state_path
        self.current_step = 0
        self.answers_so_far: dict[str, Any] = {}
        self._restore()

    @property
    def step(self) -> QuizStep:
        return QUIZ_STEPS[self.current_step]

    @property
    def progress(self) -> float:
        """Fraction of the way through, counting the current step."""
        return (self.current_step + 1) / len(QUIZ_STEPS)

    @property
    def is_complete(self) -> bool:
        return all(step.field in self.answers_so_far for step in QUIZ_STEPS)

    def select(self, value: Any) -> None:
        """Answer the current step and move to the next one.

        On the last step the session stays put; is_complete turns True.
        """
        allowed = [option.value for option in self.step.options]
        if value not in allowed:
            raise ValueError(
                f"{value!r} is not an option for '{self.step.field}' "
                f"(expected one of {allowed})"
            )
        self.answers_so_far[self.step.field] = value
        if self.current_step < len(QUIZ_STEPS) - 1:
            self.current_step += 1
        self._save()

    def back(self) -> None:
        """Go back one step.  Answers already given are kept."""
        if self.current_step > 0:
            self.current_step -= 1
            self._save()

    def reset(self) -> None:
        self.current_step = 0
        self.answers_so_far = {}
        if self.state_path and os.path.exists(self.state_path):
            os.remove(self.state_path)

    def answers(self) -> QuizAnswers:
        if not self.is_complete:
            missing = [s.field for s in QUIZ_STEPS if s.field not in self.answers_so_far]
            raise ValueError(f"Quiz is not complete; missing {', '.join(missing)}")
        return QuizAnswers(**self.answers_so_far)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _save(self) -> None:
        if not self.state_path:
            return
        with open(self.state_path, "w", encoding="utf-8") as f:
            json.dump({"current_step": self.current_step, "answers": self.answers_so_far}, f)

    def _restore(self) -> None:
        if not self.state_path or not os.path.exists(self.state_path):
            return
        try:
            with open(self.state_path, encoding="utf-8") as f:
                saved = json.load(f)
            step = int(saved["current_step"])
            answers = dict(saved["answers"])
        except (OSError, ValueError, KeyError, TypeError):
            logger.warning("Ignoring unreadable quiz state at %s", self.state_path, exc_info=True)
            return
        known = {s.field for s in QUIZ_STEPS}
        self.current_step = min(max(step, 0), len(QUIZ_STEPS) - 1)
        self.answers_so_far = {k: v for k, v in answers.items() if k in known}
