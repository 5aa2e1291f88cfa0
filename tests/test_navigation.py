import pytest

from wellbeing.navigation import ROUTE_KEY, STATE_KEY, Navigator, normalize_route
from wellbeing.router import ROUTES
from wellbeing.state.session_slices import clear_all_slices, clear_slice, get_slice


@pytest.fixture
def store():
    return {}


@pytest.fixture
def query_params():
    return {}


@pytest.fixture
def navigator(store, query_params):
    return Navigator(store, query_params, known_routes=ROUTES)


class TestNormalizeRoute:
    @pytest.mark.parametrize(
        "route, expected",
        [
            (None, "/"),
            ("", "/"),
            ("mood/rating", "/mood/rating"),
            ("/mood/rating/", "/mood/rating"),
            ("/", "/"),
        ],
    )
    def test_normalize(self, route, expected):
        assert normalize_route(route) == expected

    def test_unknown_route_falls_back_to_home(self):
        assert normalize_route("/nowhere", known_routes=ROUTES) == "/"


class TestNavigator:
    def test_defaults_to_home(self, navigator, store):
        assert navigator.current_route() == "/"
        assert store[ROUTE_KEY] == "/"

    def test_deep_link_from_query_param(self, navigator, query_params):
        query_params["route"] = "/gratitude/history"
        assert navigator.current_route() == "/gratitude/history"

    def test_go_mirrors_route_and_replaces_state(self, navigator, store, query_params):
        navigator.go("/mood/tags", {"selected_rating": 4})
        navigator.go("/mood/confirm", {"selected_rating": 4, "selected_tags": ["proud"]})

        assert navigator.current_route() == "/mood/confirm"
        assert query_params == {"route": "/mood/confirm"}
        assert navigator.state() == {"selected_rating": 4, "selected_tags": ["proud"]}

    def test_go_home_clears_query(self, navigator, query_params):
        query_params["access_token"] = "token"
        navigator.go("/")
        assert query_params == {}

    def test_flash_is_consumed_once(self, navigator):
        navigator.go("/dashboard", {"mood_logged": True})
        assert navigator.consume_state() == {"mood_logged": True}
        assert navigator.consume_state() == {}

    def test_update_state(self, navigator):
        navigator.go("/mood/tags", {"selected_rating": 2})
        navigator.update_state(selected_tags=["sad"])
        assert navigator.state() == {"selected_rating": 2, "selected_tags": ["sad"]}

    def test_reset(self, navigator, store):
        navigator.go("/profile", {"x": 1})
        navigator.reset()
        assert ROUTE_KEY not in store
        assert STATE_KEY not in store


def test_router_knows_every_route():
    assert set(ROUTES) == {
        "/",
        "/login",
        "/forgot-password",
        "/reset-password",
        "/onboarding",
        "/dashboard",
        "/profile",
        "/mood/rating",
        "/mood/tags",
        "/mood/confirm",
        "/mood/history",
        "/gratitude/today",
        "/gratitude/history",
    }


def test_session_slices(store):
    get_slice("onboarding", store=store)["step"] = 2
    assert get_slice("onboarding", store=store) == {"step": 2}
    get_slice("mood", store=store)
    clear_slice("mood", store=store)
    assert "slice.mood" not in store
    store["other"] = 1
    clear_all_slices(store=store)
    assert store == {"other": 1}
