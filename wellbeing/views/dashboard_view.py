import logging

import streamlit as st

from wellbeing import auth
from wellbeing.constants import (
    ROUTE_GRATITUDE_HISTORY,
    ROUTE_GRATITUDE_TODAY,
    ROUTE_LOGIN,
    ROUTE_MOOD_HISTORY,
    ROUTE_MOOD_RATING,
    ROUTE_PROFILE,
)
from wellbeing.data import repositories
from wellbeing.data.backend_client import BackendError
from wellbeing.data.loaders import load_dashboard_data
from wellbeing.flows.mood import emoji_for_rating
from wellbeing.formatting import format_timestamp, humanize_tag, truncate_content
from wellbeing.metrics import mood_summary
from wellbeing.navigation import navigate

logger = logging.getLogger(__name__)


def flash_message(flash):
    if flash.get("mood_logged"):
        count = int(flash.get("mood_tags", 0) or 0)
        suffix = f" with {count} tag{'s' if count != 1 else ''}" if count else ""
        return f"Mood logged: {flash.get('mood_rating')}/5{suffix}."
    if flash.get("gratitude_logged"):
        return "Gratitude entry saved."
    return None


def _greeting_name(ctx):
    try:
        profile = repositories.get_profile(ctx.user_id)
    except BackendError as exc:
        logger.warning("Could not load profile for greeting: %s", exc)
        profile = None
    if profile is not None and profile.username:
        return profile.username
    return ctx.user_email.split("@")[0] or "there"


def _render_mood_section(data):
    st.markdown("#### Recent moods")
    if not data.has_mood_logs:
        st.caption("No mood entries yet. Log how you feel to start seeing your patterns.")
        return
    summary = mood_summary(data.mood_logs)
    cols = st.columns(3)
    cols[0].metric("Average", f"{summary['average_rating']}/5")
    cols[1].metric("Entries", summary["entries"])
    cols[2].metric("Streak", f"{summary['streak_days']}d")
    if summary["top_tags"]:
        st.caption("Most felt: " + ", ".join(humanize_tag(tag) for tag in summary["top_tags"]))
    for log in data.mood_logs:
        tags = ", ".join(humanize_tag(tag) for tag in log.tags)
        st.markdown(f"{emoji_for_rating(log.rating)} **{log.rating}/5** · {format_timestamp(log.created_at)}")
        if tags:
            st.caption(tags)


def _render_gratitude_section(data):
    st.markdown("#### Recent gratitude")
    if not data.has_gratitude_entries:
        st.caption("No gratitude entries yet. Write one to start your journal.")
        return
    for entry in data.gratitude_entries:
        st.markdown(f"🙏 {truncate_content(entry.content)}")
        st.caption(format_timestamp(entry.created_at))


def render_dashboard_view(ctx):
    flash = ctx.navigator.consume_state()
    message = flash_message(flash)
    if message:
        st.success(message)

    st.markdown(f"## Hi, {_greeting_name(ctx)}")
    st.caption("How are you feeling today?")

    action_cols = st.columns(2)
    with action_cols[0]:
        if st.button("Log mood", key="dashboard.log_mood", type="primary", use_container_width=True):
            navigate(ROUTE_MOOD_RATING)
    with action_cols[1]:
        if st.button("Write gratitude", key="dashboard.gratitude", type="primary", use_container_width=True):
            navigate(ROUTE_GRATITUDE_TODAY)

    with st.spinner("Loading your entries..."):
        data = load_dashboard_data(ctx.user_id)
    if data.errors:
        st.warning("Some entries could not be loaded right now.")

    _render_mood_section(data)
    if st.button("Mood history", key="dashboard.mood_history", type="tertiary"):
        navigate(ROUTE_MOOD_HISTORY)
    st.divider()
    _render_gratitude_section(data)
    if st.button("Gratitude history", key="dashboard.gratitude_history", type="tertiary"):
        navigate(ROUTE_GRATITUDE_HISTORY)

    st.divider()
    profile_col, sign_out_col = st.columns(2)
    with profile_col:
        if st.button("Profile", key="dashboard.profile", use_container_width=True):
            navigate(ROUTE_PROFILE)
    with sign_out_col:
        if st.button("Sign Out", key="dashboard.sign_out", use_container_width=True):
            auth.sign_out()
            navigate(ROUTE_LOGIN)
