from types import SimpleNamespace

import pytest

from wellbeing import auth
from wellbeing.auth import GATE_ALLOW, GATE_LOADING, GATE_REDIRECT, AuthState, evaluate_gate
from wellbeing.data.backend_client import BackendError


def _signed_in(user):
    state = AuthState()
    state.apply("SIGNED_IN", SimpleNamespace(user=user))
    return state


class TestGate:
    @pytest.mark.parametrize("route", ["/", "/login", "/forgot-password", "/reset-password"])
    def test_public_routes_always_render(self, route):
        assert evaluate_gate(route, AuthState()) == GATE_ALLOW

    def test_pending_check_shows_loading(self):
        assert evaluate_gate("/dashboard", AuthState(loading=True)) == GATE_LOADING

    def test_missing_session_redirects(self):
        assert evaluate_gate("/mood/rating", AuthState(loading=False)) == GATE_REDIRECT

    def test_session_renders(self, user):
        assert evaluate_gate("/profile", _signed_in(user)) == GATE_ALLOW


class TestAuthState:
    def test_apply_session(self, user):
        state = _signed_in(user)
        assert state.is_authenticated
        assert state.user_id == "user-1"
        assert state.email == "ada@example.com"
        assert state.last_event == "SIGNED_IN"
        assert not state.loading

    def test_clear(self, user):
        state = _signed_in(user)
        state.clear()
        assert not state.is_authenticated
        assert state.user_id is None
        assert state.last_event == "SIGNED_OUT"

    def test_check_session_without_session(self, fake_client):
        fake_client.auth.user = None
        state = auth.check_session(fake_client, AuthState())
        assert not state.loading
        assert not state.is_authenticated

    def test_check_session_failure_is_treated_as_signed_out(self, fake_client):
        fake_client.auth.failures["get_session"] = RuntimeError("network down")
        state = auth.check_session(fake_client, AuthState())
        assert not state.loading
        assert not state.is_authenticated


class TestSignOut:
    def test_global_then_local(self, fake_client, user):
        state = _signed_in(user)
        auth.sign_out_everywhere(fake_client, state)
        scopes = [args[0] for name, args in fake_client.auth.calls if name == "sign_out"]
        assert scopes == [{"scope": "global"}, {"scope": "local"}]
        assert not state.is_authenticated

    def test_failures_do_not_stop_local_sign_out(self, fake_client, user):
        fake_client.auth.failures["sign_out"] = RuntimeError("offline")
        state = _signed_in(user)
        auth.sign_out_everywhere(fake_client, state)
        assert len([name for name, _ in fake_client.auth.calls if name == "sign_out"]) == 2
        assert not state.is_authenticated


class TestSignUp:
    @pytest.fixture
    def state(self, monkeypatch, fake_client):
        state = AuthState(loading=False)
        monkeypatch.setattr(auth, "get_client", lambda: fake_client)
        monkeypatch.setattr(auth, "get_auth_state", lambda: state)
        return state

    def test_creates_profile_with_email_local_part(self, fake_client, state):
        auth.sign_up(" ada@example.com ", "secret1")
        (credentials,) = [args[0] for name, args in fake_client.auth.calls if name == "sign_up"]
        assert credentials == {"email": "ada@example.com", "password": "secret1"}
        (query,) = fake_client.queries_for("profiles")
        (payload,), _ = query.call("insert")
        assert payload == [{"user_id": "user-1", "username": "ada"}]

    def test_profile_failure_is_reported(self, fake_client, state):
        fake_client.errors["profiles"] = RuntimeError("duplicate key")
        with pytest.raises(BackendError) as excinfo:
            auth.sign_up("ada@example.com", "secret1")
        assert excinfo.value.action == "create_profile"

    def test_sign_in_applies_session(self, fake_client, state):
        auth.sign_in("ada@example.com", "secret1")
        assert state.is_authenticated
        assert state.user_id == "user-1"

    def test_sign_in_error(self, fake_client, state):
        fake_client.auth.failures["sign_in_with_password"] = RuntimeError("Invalid login credentials")
        with pytest.raises(BackendError, match="Invalid login credentials"):
            auth.sign_in("ada@example.com", "wrong")
        assert not state.is_authenticated


def test_clear_session_state_drops_flow_and_view_state():
    store = {
        "slice.onboarding": {"step": 2, "checked_for": "user-1"},
        "login.success": "Successfully signed in!",
        "login.error": "",
        "forgot.sent_to": "ada@example.com",
        "reset.done": True,
        "reset.tokens_applied": "access",
        "profile.username": "Ada",
        "mood.rating": 4,
        "gratitude.content": "my dog",
        "backend.client": "client",
    }
    auth.clear_session_state(store)
    assert store == {"backend.client": "client"}
