import logging

import streamlit as st

from wellbeing.constants import ROUTE_HOME

logger = logging.getLogger(__name__)

ROUTE_KEY = "nav.route"
STATE_KEY = "nav.state"
ROUTE_PARAM = "route"


def normalize_route(route, known_routes=None, default=ROUTE_HOME):
    value = str(route or "").strip()
    if not value:
        return default
    if not value.startswith("/"):
        value = "/" + value
    if len(value) > 1:
        value = value.rstrip("/")
    if known_routes is not None and value not in known_routes:
        return default
    return value


class Navigator:
    def __init__(self, store, query_params=None, known_routes=None):
        self.store = store
        self.query_params = query_params
        self.known_routes = known_routes

    def current_route(self):
        route = self.store.get(ROUTE_KEY)
        if not route and self.query_params is not None:
            route = self.query_params.get(ROUTE_PARAM)
        route = normalize_route(route, self.known_routes)
        self.store[ROUTE_KEY] = route
        return route

    def state(self):
        return dict(self.store.get(STATE_KEY) or {})

    def update_state(self, **values):
        state = self.state()
        state.update(values)
        self.store[STATE_KEY] = state
        return state

    def consume_state(self):
        state = self.state()
        self.store[STATE_KEY] = {}
        return state

    def go(self, route, state=None):
        route = normalize_route(route, self.known_routes)
        previous = self.store.get(ROUTE_KEY)
        self.store[ROUTE_KEY] = route
        self.store[STATE_KEY] = dict(state or {})
        if self.query_params is not None:
            self.query_params.clear()
            if route != ROUTE_HOME:
                self.query_params[ROUTE_PARAM] = route
        logger.debug("Navigate %s -> %s", previous, route)
        return route

    def reset(self):
        for key in (ROUTE_KEY, STATE_KEY):
            if key in self.store:
                del self.store[key]


def get_navigator(known_routes=None):
    return Navigator(st.session_state, st.query_params, known_routes=known_routes)


def navigate(route, state=None):
    get_navigator().go(route, state)
    st.rerun()
