from gui.router import Location, Router, match_route


def test_match_route_table():
    assert match_route("/").name == "home"
    assert match_route("/recipes").name == "recipes"
    assert match_route("/recipes/").name == "recipes"
    match = match_route("/recipes/abc123")
    assert match.name == "recipe"
    assert match.params == {"id": "abc123"}
    assert match_route("/nope") is None
    assert match_route("/recipes/a/b") is None


def test_location_parse_and_href():
    location = Location.parse("/recipes?health=vegan&health=soy-free&random=true")
    assert location.path == "/recipes"
    assert location.get_all("health") == ["vegan", "soy-free"]
    assert location.href == "/recipes?health=vegan&health=soy-free&random=true"


def test_location_encodes_spaces():
    location = Location(path="/recipes", query=(("cuisineType", "Middle Eastern"),))
    assert location.href == "/recipes?cuisineType=Middle+Eastern"


def test_navigate_pushes_and_back_pops():
    router = Router()
    router.navigate("/recipes")
    router.navigate("/recipes/abc")
    assert [loc.path for loc in router.history] == ["/", "/recipes", "/recipes/abc"]
    assert router.back().path == "/recipes"
    assert router.forward().path == "/recipes/abc"


def test_navigate_after_back_discards_forward_entries():
    router = Router()
    router.navigate("/recipes")
    router.back()
    router.navigate("/recipes/xyz")
    assert [loc.path for loc in router.history] == ["/", "/recipes/xyz"]
    assert router.forward().path == "/recipes/xyz"


def test_set_search_params_replaces_current_entry():
    router = Router("/recipes?old=1")
    router.set_search_params([("diet", "balanced")])
    assert router.location.href == "/recipes?diet=balanced"
    assert len(router.history) == 1


def test_set_search_params_can_push():
    router = Router("/recipes")
    router.set_search_params([("diet", "balanced")], replace=False)
    assert len(router.history) == 2


def test_listeners_are_notified():
    router = Router()
    seen = []
    unsubscribe = router.subscribe(seen.append)
    router.navigate("/recipes")
    router.set_search_params([("diet", "balanced")])
    router.set_search_params([("diet", "balanced")])
    unsubscribe()
    router.navigate("/")
    assert [loc.href for loc in seen] == ["/recipes", "/recipes?diet=balanced"]
