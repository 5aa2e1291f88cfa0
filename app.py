import logging

import streamlit as st

from wellbeing import auth
from wellbeing.data import backend_client, repositories
from wellbeing.data.backend_client import BackendError
from wellbeing.logging_config import configure_logging
from wellbeing.router import render_router
from wellbeing.settings import get_settings

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("wellbeing.app")

st.set_page_config(page_title="Wellbeing", page_icon="🌱", layout="centered")

backend_client.configure(auth.get_secret)
repositories.configure(auth.get_client)


def show_backend_setup_required(exc):
    st.markdown("## Backend setup required")
    st.markdown("Configure your Supabase project before using the app.")
    st.code(
        "[supabase]\n"
        "url = \"https://YOUR-PROJECT.supabase.co\"\n"
        "anon_key = \"YOUR_ANON_KEY\"\n\n"
        "[app]\n"
        "base_url = \"https://your-app.streamlit.app\"",
        language="toml",
    )
    st.caption(f"Technical detail: {exc}")
    st.stop()


if not backend_client.is_enabled():
    show_backend_setup_required("SUPABASE_URL / SUPABASE_ANON_KEY not set")

try:
    auth.get_client()
except BackendError as exc:
    logger.exception("Backend client unavailable: %s", exc)
    show_backend_setup_required(exc)

render_router(settings)
