import logging

from wellbeing import auth
from wellbeing.constants import (
    ROUTE_DASHBOARD,
    ROUTE_FORGOT_PASSWORD,
    ROUTE_GRATITUDE_HISTORY,
    ROUTE_GRATITUDE_TODAY,
    ROUTE_HOME,
    ROUTE_LOGIN,
    ROUTE_MOOD_CONFIRM,
    ROUTE_MOOD_HISTORY,
    ROUTE_MOOD_RATING,
    ROUTE_MOOD_TAGS,
    ROUTE_ONBOARDING,
    ROUTE_PROFILE,
    ROUTE_RESET_PASSWORD,
)
from wellbeing.context import PageContext
from wellbeing.navigation import get_navigator
from wellbeing.views.dashboard_view import render_dashboard_view
from wellbeing.views.gratitude_views import render_gratitude_history_view, render_gratitude_today_view
from wellbeing.views.landing_view import render_landing_view
from wellbeing.views.login_view import render_login_view
from wellbeing.views.mood_views import (
    render_mood_confirm_view,
    render_mood_history_view,
    render_mood_rating_view,
    render_mood_tags_view,
)
from wellbeing.views.onboarding_view import render_onboarding_view
from wellbeing.views.password_views import render_forgot_password_view, render_reset_password_view
from wellbeing.views.profile_view import render_profile_view

logger = logging.getLogger(__name__)


ROUTES = {
    ROUTE_HOME: render_landing_view,
    ROUTE_LOGIN: render_login_view,
    ROUTE_FORGOT_PASSWORD: render_forgot_password_view,
    ROUTE_RESET_PASSWORD: render_reset_password_view,
    ROUTE_ONBOARDING: render_onboarding_view,
    ROUTE_DASHBOARD: render_dashboard_view,
    ROUTE_PROFILE: render_profile_view,
    ROUTE_MOOD_RATING: render_mood_rating_view,
    ROUTE_MOOD_TAGS: render_mood_tags_view,
    ROUTE_MOOD_CONFIRM: render_mood_confirm_view,
    ROUTE_MOOD_HISTORY: render_mood_history_view,
    ROUTE_GRATITUDE_TODAY: render_gratitude_today_view,
    ROUTE_GRATITUDE_HISTORY: render_gratitude_history_view,
}


def render_router(settings):
    navigator = get_navigator(known_routes=ROUTES)
    route = navigator.current_route()
    auth.ensure_session_checked()
    if not auth.enforce_session(route):
        return
    ctx = PageContext(
        route=route,
        navigator=navigator,
        auth_state=auth.get_auth_state(),
        settings=settings,
    )
    logger.debug("Rendering %s", route)
    return ROUTES[route](ctx)
