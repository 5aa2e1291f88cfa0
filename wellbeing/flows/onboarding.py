"""Onboarding wizard state machine.

The wizard walks through three steps (name, referral source, objectives).
State lives in a plain mutable mapping so the same machine runs against a
``st.session_state`` slice in the app and against a dict in tests.

Keys kept in the store:

``step``
    current step index, 1-based.
``data``
    accumulated, committed answers for every step seen so far.
``pending``
    live edits reported by the current step view, not yet committed.
``status``
    ``"active"``, ``"complete"`` or ``"skipped"``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from wellbeing.constants import OBJECTIVE_OPTIONS, REFERRAL_OPTIONS

STATUS_ACTIVE = "active"
STATUS_COMPLETE = "complete"
STATUS_SKIPPED = "skipped"


class StepValidationError(ValueError):
    def __init__(self, step_id, message):
        super().__init__(message)
        self.step_id = step_id


@dataclass(frozen=True)
class StepConfig:
    id: str
    field: str
    title: str
    description: str
    error: str
    validate: Callable[[dict], bool]


def _has_username(data):
    return bool(str(data.get("username") or "").strip())


def _has_referral(data):
    return bool(data.get("referral_source"))


def _has_objectives(data):
    return bool(data.get("objectives"))


STEPS: List[StepConfig] = [
    StepConfig(
        id="name",
        field="username",
        title="Welcome!",
        description="Let's get to know you better",
        error="Please enter your name",
        validate=_has_username,
    ),
    StepConfig(
        id="referral",
        field="referral_source",
        title="How did you find us?",
        description="Help us understand our community better",
        error="Please choose how you heard about us",
        validate=_has_referral,
    ),
    StepConfig(
        id="objectives",
        field="objectives",
        title="What are your goals?",
        description="Tell us what brings you here today",
        error="Please choose at least one goal",
        validate=_has_objectives,
    ),
]


@dataclass
class OnboardingResult:
    username: str
    referral_source: str
    objectives: List[str] = field(default_factory=list)

    def to_profile_updates(self, language="en") -> dict:
        return {
            "username": self.username,
            "referral_source": self.referral_source,
            "objectives": list(self.objectives),
            "onboarding_completed": True,
            "language_pref": language,
        }


def _clean(data):
    cleaned = dict(data)
    if "username" in cleaned and cleaned["username"] is not None:
        cleaned["username"] = str(cleaned["username"]).strip()
    if "objectives" in cleaned and cleaned["objectives"] is not None:
        cleaned["objectives"] = list(cleaned["objectives"])
    return cleaned


class OnboardingWizard:
    def __init__(
        self,
        store,
        on_complete: Optional[Callable[[OnboardingResult], None]] = None,
        on_skip: Optional[Callable[[], None]] = None,
        initial_data: Optional[dict] = None,
        steps: Optional[List[StepConfig]] = None,
    ):
        self.store = store
        self.steps = steps or STEPS
        self.on_complete = on_complete
        self.on_skip = on_skip
        if "step" not in store:
            store["step"] = 1
            store["data"] = _clean(initial_data or {})
            store["pending"] = {}
            store["status"] = STATUS_ACTIVE

    @property
    def current_step(self) -> int:
        return int(self.store.get("step", 1))

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def step_config(self) -> StepConfig:
        return self.steps[self.current_step - 1]

    @property
    def is_first_step(self) -> bool:
        return self.current_step == 1

    @property
    def is_last_step(self) -> bool:
        return self.current_step == self.total_steps

    @property
    def status(self) -> str:
        return self.store.get("status", STATUS_ACTIVE)

    @property
    def is_finished(self) -> bool:
        return self.status != STATUS_ACTIVE

    @property
    def data(self) -> Dict:
        return dict(self.store.get("data") or {})

    @property
    def pending(self) -> Dict:
        return dict(self.store.get("pending") or {})

    def effective_data(self) -> Dict:
        merged = self.data
        merged.update(self.pending)
        return merged

    def step_value(self, field_name=None, default=None):
        field_name = field_name or self.step_config.field
        return self.effective_data().get(field_name, default)

    def progress(self):
        percent = round(self.current_step / self.total_steps * 100)
        return self.current_step, self.total_steps, percent

    def next_label(self) -> str:
        return "Get Started" if self.is_last_step else "Continue"

    def update(self, **edits):
        self._ensure_active()
        pending = self.pending
        pending.update(edits)
        self.store["pending"] = pending

    def can_advance(self) -> bool:
        if self.is_finished:
            return False
        return bool(self.step_config.validate(self.effective_data()))

    def next(self) -> Optional[OnboardingResult]:
        self._ensure_active()
        step = self.step_config
        if not step.validate(self.effective_data()):
            raise StepValidationError(step.id, step.error)
        self._commit_pending()
        if self.is_last_step:
            self.store["status"] = STATUS_COMPLETE
            result = self.result()
            if self.on_complete is not None:
                self.on_complete(result)
            return result
        self.store["step"] = self.current_step + 1
        return None

    def back(self) -> bool:
        self._ensure_active()
        if self.is_first_step:
            return False
        self._commit_pending()
        self.store["step"] = self.current_step - 1
        return True

    def skip(self):
        self._ensure_active()
        self.store["pending"] = {}
        self.store["status"] = STATUS_SKIPPED
        if self.on_skip is not None:
            self.on_skip()

    def result(self) -> OnboardingResult:
        data = self.data
        return OnboardingResult(
            username=str(data.get("username") or ""),
            referral_source=str(data.get("referral_source") or ""),
            objectives=list(data.get("objectives") or []),
        )

    def reset(self, initial_data=None):
        self.store["step"] = 1
        self.store["data"] = _clean(initial_data or {})
        self.store["pending"] = {}
        self.store["status"] = STATUS_ACTIVE

    def _commit_pending(self):
        data = self.data
        data.update(_clean(self.pending))
        self.store["data"] = data
        self.store["pending"] = {}

    def _ensure_active(self):
        if self.is_finished:
            raise RuntimeError(f"Onboarding already {self.status}")


def toggle_objective(selected, objective):
    selected = list(selected or [])
    if objective in selected:
        return [item for item in selected if item != objective]
    return selected + [objective]


def referral_options():
    return list(REFERRAL_OPTIONS)


def objective_options():
    return list(OBJECTIVE_OPTIONS)
