import streamlit as st

from wellbeing.constants import ROUTE_DASHBOARD, ROUTE_LOGIN, ROUTE_ONBOARDING
from wellbeing.navigation import navigate


def render_landing_view(ctx):
    st.markdown("## Welcome")
    st.markdown("Track your mood, keep a gratitude journal, and look back on how you've been.")
    if ctx.auth_state.is_authenticated:
        if st.button("Go to dashboard", key="landing.dashboard", type="primary", use_container_width=True):
            navigate(ROUTE_DASHBOARD)
        if st.button("Finish setting up", key="landing.onboarding", type="tertiary"):
            navigate(ROUTE_ONBOARDING)
        return
    if st.button("Sign in or create an account", key="landing.login", type="primary", use_container_width=True):
        navigate(ROUTE_LOGIN)
