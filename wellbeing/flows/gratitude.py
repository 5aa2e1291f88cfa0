from __future__ import annotations

from wellbeing.constants import GRATITUDE_MAX_LENGTH, GRATITUDE_MIN_LENGTH, GRATITUDE_WARN_LENGTH


def clean_content(content) -> str:
    return str(content or "").strip()


def can_save(content) -> bool:
    text = clean_content(content)
    return GRATITUDE_MIN_LENGTH <= len(text) <= GRATITUDE_MAX_LENGTH


def character_counter(content) -> str:
    return f"{len(content or '')}/{GRATITUDE_MAX_LENGTH} characters"


def near_limit(content) -> bool:
    return len(content or "") > GRATITUDE_WARN_LENGTH


def logged_flash(content) -> dict:
    return {"gratitude_logged": True, "gratitude_length": len(content or "")}
