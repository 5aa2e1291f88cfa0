import logging
from typing import Any

from supabase import Client, create_client

from wellbeing.settings import get_settings

logger = logging.getLogger(__name__)

_SECRET_GETTER = None


class BackendError(RuntimeError):
    def __init__(self, message, action=None):
        super().__init__(message)
        self.action = action


def configure(secret_getter):
    global _SECRET_GETTER
    _SECRET_GETTER = secret_getter


def _get_secret(path, default=None):
    if _SECRET_GETTER is None:
        return default
    return _SECRET_GETTER(path, default)


def supabase_url():
    return (
        _get_secret(("supabase", "url"))
        or _get_secret(("SUPABASE_URL",))
        or get_settings().supabase_url
        or ""
    )


def supabase_key():
    return (
        _get_secret(("supabase", "anon_key"))
        or _get_secret(("SUPABASE_ANON_KEY",))
        or get_settings().supabase_anon_key
        or ""
    )


def app_base_url():
    return (
        _get_secret(("app", "base_url"))
        or _get_secret(("APP_BASE_URL",))
        or get_settings().app_base_url
    )


def reset_password_redirect_url():
    return f"{str(app_base_url()).rstrip('/')}/?route=/reset-password"


def is_enabled():
    return bool(supabase_url() and supabase_key())


def create_backend_client() -> Client:
    url = supabase_url()
    if not url:
        raise BackendError("SUPABASE_URL not configured", action="connect")
    key = supabase_key()
    if not key:
        raise BackendError("SUPABASE_ANON_KEY not configured", action="connect")
    try:
        return create_client(url, key)
    except Exception as exc:
        raise BackendError(str(exc) or "Could not create backend client", action="connect") from exc


def _call(action, fn, *args, **kwargs):
    try:
        return fn(*args, **kwargs)
    except BackendError:
        raise
    except Exception as exc:
        logger.debug("Backend call %s failed: %s", action, exc)
        raise BackendError(str(exc) or f"{action} failed", action=action) from exc


def execute(query, action="query") -> Any:
    response = _call(action, query.execute)
    if response is None:
        return None
    return response.data


def sign_up(client, email: str, password: str):
    return _call("sign_up", client.auth.sign_up, {"email": email, "password": password})


def sign_in(client, email: str, password: str):
    return _call(
        "sign_in",
        client.auth.sign_in_with_password,
        {"email": email, "password": password},
    )


def sign_out(client, scope: str = "global"):
    if scope not in {"global", "local", "others"}:
        raise ValueError(f"Unknown sign-out scope: {scope}")
    return _call("sign_out", client.auth.sign_out, {"scope": scope})


def update_password(client, password: str):
    return _call("update_password", client.auth.update_user, {"password": password})


def request_password_reset(client, email: str, redirect_to: str):
    return _call(
        "reset_password",
        client.auth.reset_password_for_email,
        email,
        {"redirect_to": redirect_to},
    )


def set_session(client, access_token: str, refresh_token: str):
    return _call("set_session", client.auth.set_session, access_token, refresh_token)


def get_session(client):
    return _call("get_session", client.auth.get_session)


def current_user(client):
    response = _call("get_user", client.auth.get_user)
    if response is None:
        return None
    return getattr(response, "user", None)


def current_user_id(client) -> str:
    user = current_user(client)
    user_id = getattr(user, "id", None)
    if not user_id:
        raise BackendError("No authenticated user found", action="get_user")
    return str(user_id)


def subscribe(client, callback):
    return _call("subscribe", client.auth.on_auth_state_change, callback)
