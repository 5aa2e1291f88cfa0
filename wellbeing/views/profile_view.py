import logging

import streamlit as st

from wellbeing.constants import DEFAULT_LANGUAGE, LANGUAGES, ROUTE_DASHBOARD, USERNAME_MAX_LENGTH
from wellbeing.data import repositories
from wellbeing.data.backend_client import BackendError
from wellbeing.header import render_top_bar

logger = logging.getLogger(__name__)


def _load_profile_into_state(user_id):
    loaded_key = "profile.loaded_for"
    if st.session_state.get(loaded_key) == user_id and "profile.username" in st.session_state:
        return
    st.session_state["profile.error"] = ""
    st.session_state["profile.success"] = ""
    try:
        profile = repositories.get_profile(user_id)
    except BackendError as exc:
        logger.warning("Error fetching profile: %s", exc)
        st.session_state["profile.error"] = f"Error fetching profile: {exc}"
        profile = None
    st.session_state["profile.username"] = (profile.username if profile else "") or ""
    language = (profile.language_pref if profile else None) or DEFAULT_LANGUAGE
    st.session_state["profile.language"] = language if language in LANGUAGES else DEFAULT_LANGUAGE
    st.session_state[loaded_key] = user_id


def render_profile_view(ctx):
    render_top_bar("Profile", "Manage your account", back_route=ROUTE_DASHBOARD)
    with st.spinner("Loading..."):
        _load_profile_into_state(ctx.user_id)

    with st.form("profile.form"):
        st.text_input("Email", value=ctx.user_email, disabled=True)
        st.text_input(
            "Username",
            key="profile.username",
            placeholder="Enter your username",
            max_chars=USERNAME_MAX_LENGTH,
        )
        st.selectbox(
            "Language",
            list(LANGUAGES.keys()),
            key="profile.language",
            format_func=lambda code: LANGUAGES[code],
            help="Choose your preferred language for the application",
        )
        submitted = st.form_submit_button("Update Profile", type="primary", use_container_width=True)

    if submitted:
        st.session_state["profile.error"] = ""
        st.session_state["profile.success"] = ""
        username = str(st.session_state.get("profile.username", "")).strip()
        if not username:
            st.session_state["profile.error"] = "Error updating profile: username is required"
        else:
            try:
                repositories.update_profile(
                    ctx.user_id,
                    {"username": username, "language_pref": st.session_state.get("profile.language")},
                )
            except BackendError as exc:
                logger.exception("Profile update failed: %s", exc)
                st.session_state["profile.error"] = f"Error updating profile: {exc}"
            else:
                st.session_state["profile.success"] = "Profile updated successfully!"

    if st.session_state.get("profile.error"):
        st.error(st.session_state["profile.error"])
    if st.session_state.get("profile.success"):
        st.success(st.session_state["profile.success"])
