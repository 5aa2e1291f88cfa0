import logging

import streamlit as st

from wellbeing import auth
from wellbeing.constants import ROUTE_DASHBOARD, ROUTE_FORGOT_PASSWORD
from wellbeing.data.backend_client import BackendError
from wellbeing.navigation import navigate

logger = logging.getLogger(__name__)


def _toggle_mode():
    st.session_state["login.signing_up"] = not st.session_state.get("login.signing_up", False)
    st.session_state["login.error"] = ""
    st.session_state["login.success"] = ""


def _submit(signing_up):
    email = str(st.session_state.get("login.email", "")).strip()
    password = str(st.session_state.get("login.password", ""))
    st.session_state["login.error"] = ""
    st.session_state["login.success"] = ""
    if not email or not password:
        st.session_state["login.error"] = "Please enter both email and password."
        return
    if not signing_up:
        try:
            auth.sign_in(email, password)
        except BackendError as exc:
            st.session_state["login.error"] = str(exc)
            return
        st.session_state["login.success"] = "Successfully signed in!"
        return
    try:
        auth.sign_up(email, password)
    except BackendError as exc:
        if exc.action == "create_profile":
            logger.exception("Profile creation error: %s", exc)
            st.session_state["login.error"] = "Error creating user profile."
        else:
            st.session_state["login.error"] = str(exc)
        return
    st.session_state["login.success"] = (
        "Successfully signed up! Please check your email for a confirmation link."
    )


def render_login_view(ctx):
    if ctx.auth_state.is_authenticated:
        navigate(ROUTE_DASHBOARD)

    signing_up = bool(st.session_state.get("login.signing_up", False))
    st.markdown(f"## {'Create Account' if signing_up else 'Welcome Back'}")
    st.caption("Join our community" if signing_up else "Sign in to your account")

    with st.form("login.form"):
        st.text_input("Email", key="login.email", placeholder="your@email.com")
        st.text_input("Password", key="login.password", type="password", placeholder="••••••••")
        submitted = st.form_submit_button(
            "Create Account" if signing_up else "Sign In",
            type="primary",
            use_container_width=True,
        )
    if submitted:
        with st.spinner("Creating your account..." if signing_up else "Signing in..."):
            _submit(signing_up)
        if ctx.auth_state.is_authenticated:
            navigate(ROUTE_DASHBOARD)

    if st.session_state.get("login.error"):
        st.error(st.session_state["login.error"])
    if st.session_state.get("login.success"):
        st.success(st.session_state["login.success"])

    st.button(
        "Already have an account? Sign In" if signing_up else "Need an account? Sign Up",
        key="login.toggle",
        type="tertiary",
        on_click=_toggle_mode,
    )
    if not signing_up and st.button("Forgot your password?", key="login.forgot", type="tertiary"):
        navigate(ROUTE_FORGOT_PASSWORD)
