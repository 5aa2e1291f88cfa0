from datetime import datetime

import pytest

from wellbeing.flows.onboarding import OnboardingResult
from wellbeing.flows.passwords import default_username, validate_new_password
from wellbeing.schemas import MoodLog
from wellbeing.views.dashboard_view import flash_message
from wellbeing.views.onboarding_view import save_onboarding
from wellbeing.visualizations import mood_logs_frame, mood_trend_chart


class TestFlash:
    def test_mood_flash(self):
        assert flash_message({"mood_logged": True, "mood_rating": 4, "mood_tags": 2}) == (
            "Mood logged: 4/5 with 2 tags."
        )
        assert flash_message({"mood_logged": True, "mood_rating": 3, "mood_tags": 0}) == "Mood logged: 3/5."

    def test_gratitude_flash(self):
        assert flash_message({"gratitude_logged": True, "gratitude_length": 12}) == "Gratitude entry saved."

    def test_no_flash(self):
        assert flash_message({}) is None


class TestSaveOnboarding:
    @pytest.fixture
    def result(self):
        return OnboardingResult(username="Ada", referral_source="Friend", objectives=["Be happier"])

    def test_persists_completed_profile(self, fake_client, result):
        assert save_onboarding("user-1", result) is True
        (query,) = fake_client.queries_for("profiles")
        (patch,), _ = query.call("update")
        assert patch == {
            "username": "Ada",
            "referral_source": "Friend",
            "objectives": ["Be happier"],
            "onboarding_completed": True,
            "language_pref": "en",
        }

    def test_failure_is_swallowed(self, fake_client, result):
        fake_client.errors["profiles"] = RuntimeError("row level security")
        assert save_onboarding("user-1", result) is False


class TestPasswords:
    def test_mismatch(self):
        assert validate_new_password("secret1", "secret2") == "Passwords do not match"

    def test_too_short(self):
        assert validate_new_password("abc", "abc") == "Password must be at least 6 characters long"

    def test_valid(self):
        assert validate_new_password("secret1", "secret1") is None

    def test_default_username(self):
        assert default_username("ada.lovelace@example.com") == "ada.lovelace"
        assert default_username("") == "friend"


class TestTrendChart:
    def _log(self, rating, day):
        return MoodLog(id=str(day), user_id="user-1", rating=rating, tags=["calm"], created_at=datetime(2025, 3, day, 9))

    def test_empty(self):
        assert mood_trend_chart([]) is None
        assert mood_logs_frame([]).empty

    def test_oldest_first(self):
        frame = mood_logs_frame([self._log(5, 4), self._log(2, 3)])
        assert list(frame["rating"]) == [2, 5]
        chart = mood_trend_chart([self._log(5, 4), self._log(2, 3)])
        assert list(chart.data[0].y) == [2, 5]
