import logging

import streamlit as st

from wellbeing.constants import (
    GRATITUDE_EXAMPLES,
    GRATITUDE_MAX_LENGTH,
    ROUTE_DASHBOARD,
    ROUTE_GRATITUDE_TODAY,
)
from wellbeing.data import repositories
from wellbeing.data.backend_client import BackendError
from wellbeing.data.loaders import load_gratitude_history
from wellbeing.flows.gratitude import can_save, character_counter, clean_content, logged_flash, near_limit
from wellbeing.formatting import format_timestamp
from wellbeing.header import render_action_bar, render_top_bar
from wellbeing.navigation import navigate

logger = logging.getLogger(__name__)


def render_gratitude_today_view(ctx):
    render_top_bar(
        "What are you grateful for?",
        "Take a moment to reflect on something positive",
        back_route=ROUTE_DASHBOARD,
    )
    st.caption(
        "Take a moment to write down something or someone you're grateful for today. "
        "It could be big or small - what matters is that it's meaningful to you."
    )
    content = st.text_area(
        "Gratitude",
        key="gratitude.content",
        placeholder="I'm grateful for...",
        max_chars=GRATITUDE_MAX_LENGTH,
        height=180,
        label_visibility="collapsed",
    )
    counter = character_counter(content)
    if near_limit(content):
        st.markdown(f":red[{counter}]")
    else:
        st.caption(counter)

    with st.expander("Examples"):
        for example in GRATITUDE_EXAMPLES:
            st.markdown(f"- \"{example}\"")

    action = render_action_bar(
        "Save Entry",
        key="gratitude.actions",
        primary_disabled=not can_save(content),
        secondary_text="Skip Today",
    )
    if action == "secondary":
        st.session_state.pop("gratitude.content", None)
        navigate(ROUTE_DASHBOARD)
    if action == "primary" and can_save(content):
        try:
            with st.spinner("Saving..."):
                repositories.create_gratitude_entry(clean_content(content))
        except BackendError as exc:
            logger.exception("Error saving gratitude entry: %s", exc)
            st.error("Could not save your entry right now. Please try again.")
        else:
            st.session_state.pop("gratitude.content", None)
            navigate(ROUTE_DASHBOARD, logged_flash(content))


def render_gratitude_history_view(ctx):
    render_top_bar("Gratitude History", "Your past gratitude entries", back_route=ROUTE_DASHBOARD)
    with st.spinner("Loading..."):
        entries = load_gratitude_history(ctx.user_id)

    if not entries:
        st.markdown("#### No gratitude entries yet")
        st.caption("Start practicing gratitude to cultivate more positivity in your life.")
        if st.button("Write Your First Entry", key="gratitude.history.first", type="primary"):
            navigate(ROUTE_GRATITUDE_TODAY)
        return

    for entry in entries:
        st.markdown(f"🙏 **I'm grateful for...** · {format_timestamp(entry.created_at)}")
        st.write(entry.content)
        st.divider()

    if render_action_bar("Write New Entry", key="gratitude.history.actions") == "primary":
        navigate(ROUTE_GRATITUDE_TODAY)
