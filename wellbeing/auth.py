from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

import streamlit as st

from wellbeing.constants import PUBLIC_ROUTES, ROUTE_LOGIN
from wellbeing.data import backend_client, repositories
from wellbeing.data.backend_client import BackendError
from wellbeing.flows.passwords import default_username
from wellbeing.navigation import get_navigator
from wellbeing.state.session_slices import clear_all_slices, clear_prefixed

logger = logging.getLogger(__name__)

CLIENT_KEY = "backend.client"
AUTH_STATE_KEY = "backend.auth_state"
SUBSCRIPTION_KEY = "backend.subscription"

VIEW_STATE_PREFIXES = (
    "login.",
    "forgot.",
    "reset.",
    "profile.",
    "onboarding.",
    "mood.",
    "gratitude.",
)

GATE_ALLOW = "allow"
GATE_LOADING = "loading"
GATE_REDIRECT = "redirect"

ENV_FALLBACK_KEYS = {
    ("supabase", "url"): "SUPABASE_URL",
    ("supabase", "anon_key"): "SUPABASE_ANON_KEY",
    ("app", "base_url"): "APP_BASE_URL",
}


def get_secret(path, default=None):
    env_key = ENV_FALLBACK_KEYS.get(tuple(path))
    if env_key:
        env_value = os.getenv(env_key)
        if env_value:
            return env_value
    try:
        current = st.secrets
        for key in path:
            if key not in current:
                return default
            current = current[key]
    except Exception:
        return default
    return current


@dataclass
class AuthState:
    session: Any = None
    user: Any = None
    loading: bool = True
    last_event: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.session is not None and self.user is not None

    @property
    def user_id(self) -> Optional[str]:
        user_id = getattr(self.user, "id", None)
        return str(user_id) if user_id else None

    @property
    def email(self) -> str:
        return str(getattr(self.user, "email", "") or "")

    def apply(self, event, session):
        self.last_event = str(event) if event is not None else None
        self.session = session
        self.user = getattr(session, "user", None) if session is not None else None
        self.loading = False

    def clear(self):
        self.apply("SIGNED_OUT", None)


def evaluate_gate(route, auth_state: AuthState) -> str:
    if route in PUBLIC_ROUTES:
        return GATE_ALLOW
    if auth_state.loading:
        return GATE_LOADING
    if not auth_state.is_authenticated:
        return GATE_REDIRECT
    return GATE_ALLOW


def get_auth_state() -> AuthState:
    if AUTH_STATE_KEY not in st.session_state:
        st.session_state[AUTH_STATE_KEY] = AuthState()
    return st.session_state[AUTH_STATE_KEY]


def get_client():
    client = st.session_state.get(CLIENT_KEY)
    if client is not None:
        return client
    client = backend_client.create_backend_client()
    auth_state = get_auth_state()

    # Events can arrive from the client's refresh thread, so the callback only touches auth_state.
    def _on_auth_event(event, session):
        logger.info("Auth event: %s", event)
        auth_state.apply(event, session)

    st.session_state[SUBSCRIPTION_KEY] = backend_client.subscribe(client, _on_auth_event)
    st.session_state[CLIENT_KEY] = client
    return client


def check_session(client, auth_state: AuthState) -> AuthState:
    try:
        session = backend_client.get_session(client)
    except BackendError as exc:
        logger.warning("Session check failed: %s", exc)
        session = None
    auth_state.apply("INITIAL_SESSION", session)
    return auth_state


def ensure_session_checked() -> AuthState:
    auth_state = get_auth_state()
    if auth_state.loading:
        with st.spinner("Checking your session..."):
            check_session(get_client(), auth_state)
    return auth_state


def enforce_session(route) -> bool:
    auth_state = get_auth_state()
    decision = evaluate_gate(route, auth_state)
    if decision == GATE_LOADING:
        auth_state = ensure_session_checked()
        decision = evaluate_gate(route, auth_state)
    if decision == GATE_ALLOW:
        return True
    if decision == GATE_REDIRECT:
        get_navigator().go(ROUTE_LOGIN)
        st.rerun()
    st.caption("Loading...")
    return False


def sign_in(email, password):
    response = backend_client.sign_in(get_client(), email.strip(), password)
    session = getattr(response, "session", None)
    if session is not None:
        get_auth_state().apply("SIGNED_IN", session)
    return response


def sign_up(email, password):
    response = backend_client.sign_up(get_client(), email.strip(), password)
    user = getattr(response, "user", None)
    session = getattr(response, "session", None)
    if session is not None:
        get_auth_state().apply("SIGNED_IN", session)
    if user is not None:
        repositories.create_profile(user.id, default_username(getattr(user, "email", email)))
    return response


def sign_out_everywhere(client, auth_state: AuthState):
    try:
        backend_client.sign_out(client, scope="global")
    except BackendError as exc:
        logger.warning("Server logout failed, proceeding with local logout: %s", exc)
    try:
        backend_client.sign_out(client, scope="local")
    except BackendError as exc:
        logger.warning("Local logout failed: %s", exc)
    auth_state.clear()


def clear_session_state(store=None):
    clear_all_slices(store)
    clear_prefixed(VIEW_STATE_PREFIXES, store)


def sign_out():
    sign_out_everywhere(get_client(), get_auth_state())
    clear_session_state()
    get_navigator().reset()
