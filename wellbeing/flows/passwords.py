from __future__ import annotations

from typing import Optional

from wellbeing.constants import PASSWORD_MIN_LENGTH


def validate_new_password(password, confirm_password) -> Optional[str]:
    if password != confirm_password:
        return "Passwords do not match"
    if len(password or "") < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
    return None


def default_username(email) -> str:
    local = str(email or "").split("@")[0].strip()
    return local or "friend"
