import logging

import streamlit as st

from wellbeing.constants import (
    DEFAULT_MOOD_RATING,
    MOOD_EMOJIS,
    MOOD_RATINGS,
    ROUTE_DASHBOARD,
    ROUTE_MOOD_CONFIRM,
    ROUTE_MOOD_RATING,
    ROUTE_MOOD_TAGS,
)
from wellbeing.data import repositories
from wellbeing.data.backend_client import BackendError
from wellbeing.data.loaders import load_mood_history
from wellbeing.flows.mood import (
    MoodSelection,
    add_custom_tag,
    emoji_for_rating,
    label_for_rating,
    rating_state,
    save_selection,
)
from wellbeing.formatting import format_timestamp, humanize_tag
from wellbeing.header import render_action_bar, render_top_bar
from wellbeing.navigation import navigate
from wellbeing.visualizations import mood_trend_chart

logger = logging.getLogger(__name__)


def render_mood_rating_view(ctx):
    render_top_bar("How are you feeling?", "Pick the face that fits right now", back_route=ROUTE_DASHBOARD)
    if "mood.rating" not in st.session_state:
        st.session_state["mood.rating"] = DEFAULT_MOOD_RATING
    rating = st.select_slider(
        "Mood",
        options=MOOD_RATINGS,
        key="mood.rating",
        format_func=lambda value: f"{MOOD_EMOJIS[value]} {value}",
        label_visibility="collapsed",
    )
    st.markdown(f"<div style='font-size:72px;text-align:center'>{emoji_for_rating(rating)}</div>", unsafe_allow_html=True)
    st.caption(label_for_rating(rating))

    if render_action_bar("Continue", key="mood.rating.actions") == "primary":
        st.session_state.pop("mood.rating", None)
        navigate(ROUTE_MOOD_TAGS, rating_state(rating))


def render_mood_tags_view(ctx):
    selection = MoodSelection.from_state(ctx.nav_state)
    if selection is None:
        navigate(ROUTE_MOOD_RATING)

    render_top_bar(
        "Add tags (optional)",
        "Choose words that describe how you're feeling",
        back_route=ROUTE_MOOD_RATING,
    )
    st.caption(f"{selection.emoji} Rating {selection.rating}/5")

    available = selection.available_tags
    options = available + selection.custom_tags
    chosen = st.pills(
        "Suggested tags",
        options,
        selection_mode="multi",
        default=selection.tags,
        format_func=humanize_tag,
        key=f"mood.tags.{selection.rating}.{len(options)}",
    )
    selected = [tag for tag in options if tag in (chosen or [])]
    if selected != selection.tags:
        ctx.navigator.update_state(selected_tags=selected)
        selection.tags = selected

    with st.form("mood.custom_tag", clear_on_submit=True):
        custom = st.text_input("Add your own tag", placeholder="Enter your own tag...")
        if st.form_submit_button("Add"):
            updated = add_custom_tag(selection.tags, available, custom)
            if updated != selection.tags:
                ctx.navigator.update_state(selected_tags=updated)
                st.rerun()

    if selection.tags:
        st.caption(f"Selected ({len(selection.tags)}): " + ", ".join(humanize_tag(tag) for tag in selection.tags))

    action = render_action_bar("Continue", key="mood.tags.actions", secondary_text="Skip tags")
    if action == "primary":
        navigate(ROUTE_MOOD_CONFIRM, selection.to_state())
    if action == "secondary":
        navigate(ROUTE_MOOD_CONFIRM, MoodSelection(rating=selection.rating).to_state())


def render_mood_confirm_view(ctx):
    selection = MoodSelection.from_state(ctx.nav_state)
    if selection is None:
        navigate(ROUTE_MOOD_RATING)

    render_top_bar("Confirm your mood", "Review your entry before saving", back_route=ROUTE_MOOD_TAGS)
    st.markdown(f"<div style='font-size:64px;text-align:center'>{selection.emoji}</div>", unsafe_allow_html=True)
    st.markdown(f"#### Mood Rating: {selection.rating}/5")
    st.caption(selection.label)

    if selection.tags:
        st.markdown(f"**Tags ({len(selection.tags)})**")
        st.markdown(" ".join(f"`{humanize_tag(tag)}`" for tag in selection.tags))
    else:
        st.caption("No tags added (optional)")

    if st.button("Edit tags", key="mood.confirm.edit"):
        navigate(ROUTE_MOOD_TAGS, selection.to_state())

    if render_action_bar("Save Entry", key="mood.confirm.actions") == "primary":
        try:
            with st.spinner("Saving..."):
                save_selection(selection, repositories.create_mood_log)
        except BackendError as exc:
            logger.exception("Error saving mood log: %s", exc)
            st.error("Could not save your mood right now. Please try again.")
        else:
            navigate(ROUTE_DASHBOARD, selection.logged_flash())


def render_mood_history_view(ctx):
    render_top_bar("Mood History", "Your past mood entries", back_route=ROUTE_DASHBOARD)
    with st.spinner("Loading..."):
        logs = load_mood_history(ctx.user_id)

    if not logs:
        st.markdown("#### No mood entries yet")
        st.caption("Start tracking your mood to see your patterns over time.")
        if st.button("Log Your First Mood", key="mood.history.first", type="primary"):
            navigate(ROUTE_MOOD_RATING)
        return

    chart = mood_trend_chart(logs)
    if chart is not None:
        st.plotly_chart(chart, use_container_width=True)

    for log in logs:
        st.markdown(f"{emoji_for_rating(log.rating)} **Rating: {log.rating}/5** · {format_timestamp(log.created_at)}")
        if log.tags:
            st.caption(", ".join(humanize_tag(tag) for tag in log.tags))
        st.divider()

    if render_action_bar("Log New Mood", key="mood.history.actions") == "primary":
        navigate(ROUTE_MOOD_RATING)
