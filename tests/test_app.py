from unittest.mock import Mock

import pytest

from gui.app import RecipeSearchApp
from gui.router import Router
from gui.state.context import current_store, use_recipes_context
from recipe_search.edamam_client import RecipeSearchError
from recipe_search.models.schemas import RecipeSchema


def make_page():
    return {
        "from": 1,
        "to": 1,
        "count": 1,
        "hits": [
            {
                "selfLink": {"href": "/r/1", "title": "Self"},
                "recipe": {"uri": "u#recipe_1", "image": "i.jpg", "label": "Soup"},
            }
        ],
        "next": {"href": "/page2", "title": "Next page"},
    }


@pytest.fixture()
def app():
    client = Mock()
    client.search.return_value = make_page()
    application = RecipeSearchApp(router=Router("/recipes"), client=client)
    application.run()
    yield application
    application.close()


def test_app_has_required_methods():
    for method in ("run", "switch_view", "navigate", "search", "close"):
        assert hasattr(RecipeSearchApp, method), f"Missing method: {method}"


def test_run_resolves_current_route(app):
    assert app.current_view == "recipes"
    assert app.synchronizer.attached


def test_params_changes_reach_the_address_bar(app):
    app.store.dispatch.params.update({"mealType": "Dinner", "calories": ("100", "600")})
    assert app.router.location.href == "/recipes?mealType=Dinner&calories=100-600"

    app.store.dispatch.params.clear()
    assert app.router.location.href == "/recipes"


def test_navigate_to_single_recipe_sets_active_id(app):
    assert app.navigate("/recipes/abc") is True
    assert app.current_view == "recipe"
    assert app.store.state.active_id == "abc"

    app.navigate("/recipes")
    assert app.store.state.active_id is None


def test_navigate_back_to_recipes_rewrites_query(app):
    app.store.dispatch.params.update({"diet": "balanced"})
    app.navigate("/recipes/abc")
    app.navigate("/recipes")
    assert app.router.location.href == "/recipes?diet=balanced"


def test_unknown_route(app):
    assert app.navigate("/nowhere") is False
    assert app.current_view == "recipes"


def test_search_uses_current_params(app):
    app.store.dispatch.params.update({"cuisineType": ["Italian", "French"]})
    assert app.search() is True
    app.client.search.assert_called_once_with(
        [("cuisineType", "Italian"), ("cuisineType", "French")]
    )
    assert app.store.state.list["count"] == 1


def test_search_failure_reported_in_state(app):
    app.client.search.side_effect = RecipeSearchError("Recipe API returned 500", status_code=500)
    assert app.search() is False
    assert app.store.state.error == "Recipe API returned 500"
    assert app.store.state.loading is False


def test_next_page(app):
    app.search()
    app.client.next_page.return_value = {**make_page(), "from": 21, "to": 40}
    assert app.next_page() is True
    app.client.next_page.assert_called_once_with("/page2")


def test_open_recipe(app):
    recipe = RecipeSchema(uri="u#recipe_r9", label="Pie")
    app.client.get_recipe.return_value = recipe
    assert app.open_recipe("r9") is recipe
    assert app.router.location.path == "/recipes/r9"
    assert app.store.state.active_id == "r9"


def test_session_mounts_store():
    application = RecipeSearchApp(router=Router("/"), client=Mock())
    with application.session() as running:
        assert current_store() is running.store
        assert use_recipes_context().dispatch is running.store.dispatch
        assert running.current_view == "home"
    assert application.store.closed
    assert current_store() is None
