from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List

from pydantic import ValidationError

from wellbeing.constants import DASHBOARD_GRATITUDE_LIMIT, DASHBOARD_MOOD_LIMIT
from wellbeing.data import repositories
from wellbeing.data.backend_client import BackendError
from wellbeing.schemas import GratitudeEntry, MoodLog

logger = logging.getLogger(__name__)


@dataclass
class DashboardData:
    mood_logs: List[MoodLog] = field(default_factory=list)
    gratitude_entries: List[GratitudeEntry] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def has_mood_logs(self) -> bool:
        return bool(self.mood_logs)

    @property
    def has_gratitude_entries(self) -> bool:
        return bool(self.gratitude_entries)


def _safe_result(future, label, errors):
    try:
        return future.result()
    except (BackendError, ValidationError) as exc:
        logger.exception("Error loading %s: %s", label, exc)
        errors.append(label)
        return []


def load_dashboard_data(
    user_id,
    mood_limit: int = DASHBOARD_MOOD_LIMIT,
    gratitude_limit: int = DASHBOARD_GRATITUDE_LIMIT,
) -> DashboardData:
    mood_limit = max(1, min(int(mood_limit), DASHBOARD_MOOD_LIMIT))
    gratitude_limit = max(1, min(int(gratitude_limit), DASHBOARD_GRATITUDE_LIMIT))
    errors: List[str] = []
    # Worker threads have no Streamlit script context, so the client is resolved here.
    client = repositories.resolve_client()
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="dashboard-load") as pool:
        mood_future = pool.submit(repositories.list_mood_logs, user_id, mood_limit, client)
        gratitude_future = pool.submit(repositories.list_gratitude_entries, user_id, gratitude_limit, client)
        mood_logs = _safe_result(mood_future, "mood logs", errors)
        gratitude_entries = _safe_result(gratitude_future, "gratitude entries", errors)
    return DashboardData(mood_logs=mood_logs, gratitude_entries=gratitude_entries, errors=errors)


def load_mood_history(user_id) -> List[MoodLog]:
    try:
        return repositories.list_mood_logs(user_id)
    except (BackendError, ValidationError) as exc:
        logger.exception("Error loading mood logs: %s", exc)
        return []


def load_gratitude_history(user_id) -> List[GratitudeEntry]:
    try:
        return repositories.list_gratitude_entries(user_id)
    except (BackendError, ValidationError) as exc:
        logger.exception("Error loading gratitude entries: %s", exc)
        return []
