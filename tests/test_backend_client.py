import pytest

from wellbeing.data import backend_client
from wellbeing.data.backend_client import BackendError


class TestConfiguration:
    def test_disabled_without_credentials(self, secrets):
        assert not backend_client.is_enabled()
        with pytest.raises(BackendError) as excinfo:
            backend_client.create_backend_client()
        assert excinfo.value.action == "connect"

    def test_secrets_take_precedence_over_environment(self, secrets, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "env-key")
        assert backend_client.supabase_url() == "https://env.supabase.co"

        secrets[("supabase", "url")] = "https://secret.supabase.co"
        assert backend_client.supabase_url() == "https://secret.supabase.co"
        assert backend_client.supabase_key() == "env-key"
        assert backend_client.is_enabled()

    def test_reset_redirect_url(self, secrets):
        assert backend_client.reset_password_redirect_url() == "http://localhost:8501/?route=/reset-password"
        secrets[("app", "base_url")] = "https://wellbeing.example.com/"
        assert backend_client.reset_password_redirect_url() == (
            "https://wellbeing.example.com/?route=/reset-password"
        )


class TestAuthCalls:
    def test_errors_are_wrapped(self, fake_client):
        failure = RuntimeError("Invalid login credentials")
        fake_client.auth.failures["sign_in_with_password"] = failure
        with pytest.raises(BackendError) as excinfo:
            backend_client.sign_in(fake_client, "ada@example.com", "nope")
        assert str(excinfo.value) == "Invalid login credentials"
        assert excinfo.value.action == "sign_in"
        assert excinfo.value.__cause__ is failure

    def test_sign_out_scope(self, fake_client):
        backend_client.sign_out(fake_client, scope="local")
        assert fake_client.auth.calls == [("sign_out", ({"scope": "local"},))]
        with pytest.raises(ValueError):
            backend_client.sign_out(fake_client, scope="everyone")

    def test_request_password_reset(self, fake_client):
        backend_client.request_password_reset(
            fake_client,
            "ada@example.com",
            "http://localhost:8501/?route=/reset-password",
        )
        assert fake_client.auth.calls == [
            (
                "reset_password_for_email",
                ("ada@example.com", {"redirect_to": "http://localhost:8501/?route=/reset-password"}),
            )
        ]

    def test_update_password(self, fake_client):
        backend_client.update_password(fake_client, "secret1")
        assert fake_client.auth.calls == [("update_user", ({"password": "secret1"},))]

    def test_set_session(self, fake_client):
        response = backend_client.set_session(fake_client, "access", "refresh")
        assert response.session.user.id == "user-1"

    def test_current_user_id(self, fake_client):
        assert backend_client.current_user_id(fake_client) == "user-1"
        fake_client.auth.user = None
        with pytest.raises(BackendError, match="No authenticated user found"):
            backend_client.current_user_id(fake_client)

    def test_subscribe(self, fake_client):
        events = []
        backend_client.subscribe(fake_client, lambda event, session: events.append(event))
        fake_client.auth.callbacks[0]("SIGNED_IN", None)
        assert events == ["SIGNED_IN"]
