import logging

import streamlit as st

from wellbeing.constants import ROUTE_DASHBOARD, USERNAME_MAX_LENGTH
from wellbeing.data import repositories
from wellbeing.data.backend_client import BackendError
from wellbeing.flows.onboarding import (
    OnboardingWizard,
    StepValidationError,
    objective_options,
    referral_options,
    toggle_objective,
)
from wellbeing.navigation import navigate
from wellbeing.state.session_slices import clear_slice, get_slice

logger = logging.getLogger(__name__)

SLICE = "onboarding"


def _needs_onboarding(user_id):
    try:
        profile = repositories.get_profile(user_id)
    except BackendError as exc:
        logger.exception("Error checking onboarding status: %s", exc)
        return True
    return profile is None or not profile.onboarding_completed


def save_onboarding(user_id, result, language="en"):
    try:
        repositories.update_profile(user_id, result.to_profile_updates(language))
    except (BackendError, ValueError) as exc:
        logger.exception("Error saving onboarding data: %s", exc)
        return False
    return True


def _render_name_step(wizard):
    widget_key = "onboarding.username"
    if widget_key not in st.session_state:
        st.session_state[widget_key] = wizard.step_value(default="") or ""
    value = st.text_input(
        "What's your name?",
        key=widget_key,
        placeholder="Enter your name",
        max_chars=USERNAME_MAX_LENGTH,
    )
    wizard.update(username=value)
    st.caption("This will be your display name in the app")


def _render_referral_step(wizard):
    st.caption("Help us understand how you found us")
    selected = wizard.step_value()
    for option in referral_options():
        if st.button(
            option,
            key=f"onboarding.referral.{option}",
            type="primary" if option == selected else "secondary",
            use_container_width=True,
        ):
            wizard.update(referral_source=option)
            st.rerun()
    if selected:
        st.caption(f"Thanks! You found us through {selected}.")


def _render_objectives_step(wizard):
    st.caption("What brings you here today? Choose all that apply.")
    selected = list(wizard.step_value(default=[]) or [])
    for option in objective_options():
        is_selected = option in selected
        if st.button(
            f"✓ {option}" if is_selected else option,
            key=f"onboarding.objective.{option}",
            type="primary" if is_selected else "secondary",
            use_container_width=True,
        ):
            wizard.update(objectives=toggle_objective(selected, option))
            st.rerun()


STEP_RENDERERS = {
    "name": _render_name_step,
    "referral": _render_referral_step,
    "objectives": _render_objectives_step,
}


def render_onboarding_view(ctx):
    # Only a pending result is cached; clear_slice drops it on completion or skip.
    store = get_slice(SLICE)
    if store.get("checked_for") != ctx.user_id:
        with st.spinner("Loading..."):
            needed = _needs_onboarding(ctx.user_id)
        if not needed:
            navigate(ROUTE_DASHBOARD)
        store["checked_for"] = ctx.user_id

    def _complete(result):
        save_onboarding(ctx.user_id, result, ctx.settings.default_language)

    wizard = OnboardingWizard(store, on_complete=_complete)
    if wizard.is_finished:
        clear_slice(SLICE)
        navigate(ROUTE_DASHBOARD)

    step_number, total, percent = wizard.progress()
    st.caption(f"Step {step_number} of {total} · {percent}%")
    st.progress(percent / 100)
    step = wizard.step_config
    st.markdown(f"## {step.title}")
    st.caption(step.description)

    STEP_RENDERERS[step.id](wizard)

    st.divider()
    back_col, next_col = st.columns(2)
    with back_col:
        if not wizard.is_first_step and st.button("Back", key="onboarding.back", use_container_width=True):
            wizard.back()
            st.session_state.pop("onboarding.username", None)
            st.rerun()
    with next_col:
        if st.button(
            wizard.next_label(),
            key="onboarding.next",
            type="primary",
            disabled=not wizard.can_advance(),
            use_container_width=True,
        ):
            try:
                result = wizard.next()
            except StepValidationError as exc:
                st.warning(str(exc))
            else:
                if result is not None:
                    clear_slice(SLICE)
                    st.session_state.pop("onboarding.username", None)
                    navigate(ROUTE_DASHBOARD)
                st.rerun()

    if st.button("Skip for now", key="onboarding.skip", type="tertiary"):
        wizard.skip()
        clear_slice(SLICE)
        st.session_state.pop("onboarding.username", None)
        navigate(ROUTE_DASHBOARD)
