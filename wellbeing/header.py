import streamlit as st

from wellbeing.navigation import navigate


def render_top_bar(title, subtitle=None, back_route=None, key=None):
    key = key or title
    if back_route:
        if st.button("← Back", key=f"topbar.back.{key}", type="tertiary"):
            navigate(back_route)
    st.markdown(f"### {title}")
    if subtitle:
        st.caption(subtitle)


def render_action_bar(
    primary_text,
    key,
    primary_disabled=False,
    secondary_text=None,
):
    """Render the bottom action row and report which button was pressed.

    Returns ``"primary"``, ``"secondary"`` or ``None``.
    """
    st.divider()
    if secondary_text:
        secondary_col, primary_col = st.columns(2)
        with secondary_col:
            if st.button(secondary_text, key=f"{key}.secondary", use_container_width=True):
                return "secondary"
    else:
        primary_col = st.container()
    with primary_col:
        if st.button(
            primary_text,
            key=f"{key}.primary",
            type="primary",
            disabled=primary_disabled,
            use_container_width=True,
        ):
            return "primary"
    return None
