import logging

import streamlit as st

from wellbeing import auth
from wellbeing.constants import ROUTE_DASHBOARD, ROUTE_LOGIN
from wellbeing.data import backend_client
from wellbeing.data.backend_client import BackendError
from wellbeing.flows.passwords import validate_new_password
from wellbeing.navigation import navigate

logger = logging.getLogger(__name__)


def render_forgot_password_view(ctx):
    sent_to = st.session_state.get("forgot.sent_to")
    if sent_to:
        st.markdown("## Check your email")
        st.success(f"We've sent a password reset link to **{sent_to}**")
        st.caption("Click the link in the email to reset your password")
        if st.button("Back to Login", key="forgot.back_done"):
            st.session_state.pop("forgot.sent_to", None)
            navigate(ROUTE_LOGIN)
        return

    st.markdown("## Reset Password")
    st.caption("Enter your email and we'll send you a reset link")
    with st.form("forgot.form"):
        email = st.text_input("Email", key="forgot.email", placeholder="your@email.com")
        submitted = st.form_submit_button("Send Reset Link", type="primary", use_container_width=True)
    if submitted:
        email = str(email or "").strip()
        if not email:
            st.error("Please enter your email.")
        else:
            try:
                with st.spinner("Sending..."):
                    backend_client.request_password_reset(
                        auth.get_client(),
                        email,
                        backend_client.reset_password_redirect_url(),
                    )
            except BackendError as exc:
                logger.warning("Password reset request failed: %s", exc)
                st.error(str(exc) or "Failed to send reset email")
            else:
                st.session_state["forgot.sent_to"] = email
                st.rerun()

    if st.button("Back to Login", key="forgot.back"):
        navigate(ROUTE_LOGIN)


def _apply_reset_tokens(ctx):
    params = st.query_params
    access_token = params.get("access_token")
    refresh_token = params.get("refresh_token")
    if not access_token or not refresh_token:
        return
    applied_key = "reset.tokens_applied"
    if st.session_state.get(applied_key) == access_token:
        return
    try:
        response = backend_client.set_session(auth.get_client(), access_token, refresh_token)
    except BackendError as exc:
        logger.warning("Could not restore session from reset link: %s", exc)
        st.session_state["reset.error"] = "This reset link is invalid or has expired."
        return
    session = getattr(response, "session", None)
    if session is not None:
        ctx.auth_state.apply("PASSWORD_RECOVERY", session)
    st.session_state[applied_key] = access_token


def render_reset_password_view(ctx):
    _apply_reset_tokens(ctx)

    if st.session_state.get("reset.done"):
        st.markdown("## Password updated")
        st.success("Your password has been successfully reset")
        if st.button("Continue to dashboard", key="reset.continue", type="primary"):
            st.session_state.pop("reset.done", None)
            navigate(ROUTE_DASHBOARD)
        return

    st.markdown("## New Password")
    st.caption("Enter your new password below")
    with st.form("reset.form"):
        password = st.text_input("New password", key="reset.password", type="password")
        confirm = st.text_input("Confirm password", key="reset.confirm", type="password")
        submitted = st.form_submit_button("Update Password", type="primary", use_container_width=True)

    if submitted:
        st.session_state["reset.error"] = validate_new_password(password, confirm) or ""
        if not st.session_state["reset.error"]:
            try:
                with st.spinner("Updating..."):
                    backend_client.update_password(auth.get_client(), password)
            except BackendError as exc:
                logger.warning("Password update failed: %s", exc)
                st.session_state["reset.error"] = str(exc) or "Failed to update password"
            else:
                st.session_state["reset.done"] = True
                st.rerun()

    if st.session_state.get("reset.error"):
        st.error(st.session_state["reset.error"])
