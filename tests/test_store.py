import pytest

from gui.state.context import INITIAL_VALUE, current_store, provider, use_recipes_context
from gui.state.store import RecipesStore
from gui.state.types import Snapshot, empty_list


@pytest.fixture()
def store():
    with RecipesStore() as s:
        yield s


def make_page(**overrides):
    page = {
        "from": 0,
        "to": 20,
        "count": 100,
        "hits": [
            {
                "selfLink": {"href": "/r/1", "title": "Self"},
                "recipe": {"uri": "u#recipe_1", "image": "i.jpg", "label": "Soup"},
            }
        ],
        "next": {"href": "/page2", "title": "next"},
    }
    page.update(overrides)
    return page


# ===========================================================================
# Snapshot
# ===========================================================================


class TestSnapshot:
    def test_initial_read(self, store):
        state = store.state
        assert state == Snapshot(
            loading=False, error=None, active_id=None, params={}, list=empty_list()
        )

    def test_initial_params(self):
        with RecipesStore(params={"diet": "balanced", "q": "soup"}) as store:
            assert store.state.params == {"diet": "balanced"}
            assert store.state.list == empty_list()
            store.dispatch.params.update({"mealType": "Lunch"})
            assert store.state.params == {"diet": "balanced", "mealType": "Lunch"}

    def test_empty_initial_params(self):
        with RecipesStore(params={}) as store:
            assert store.state.params == {}

    def test_reads_without_dispatch_return_same_reference(self, store):
        assert store.state is store.state
        assert store.value is store.value

    def test_snapshot_recomputed_after_change(self, store):
        before = store.state
        store.dispatch.loading(True)
        after = store.state
        assert after is not before
        assert after.loading is True
        assert before.loading is False

    def test_no_op_dispatch_keeps_snapshot(self, store):
        store.dispatch.params.clear()
        before = store.state
        store.dispatch.params.clear()
        assert store.state is before

    def test_status_fields_independently_settable(self, store):
        store.dispatch.id("abc")
        store.dispatch.loading(True)
        store.dispatch.error("x")
        state = store.state
        assert (state.loading, state.error, state.active_id) == (True, "x", "abc")


# ===========================================================================
# Facade
# ===========================================================================


class TestDispatchFacade:
    def test_identity_is_stable(self, store):
        first = store.value.dispatch
        store.dispatch.params.update({"diet": "balanced"})
        store.dispatch.list.update({"count": 1})
        assert store.value.dispatch is first
        assert store.dispatch is first
        assert store.dispatch.params is first.params
        assert store.dispatch.list is first.list

    def test_params_update_then_update(self, store):
        store.dispatch.params.update({"mealType": "dinner"})
        store.dispatch.params.update({"diet": "balanced"})
        assert store.state.params == {"mealType": "dinner", "diet": "balanced"}

    def test_params_set_drops_previous_keys(self, store):
        store.dispatch.params.update({"mealType": "dinner"})
        store.dispatch.params.update({"diet": "balanced"})
        store.dispatch.params.set({"mealType": "lunch"})
        assert store.state.params == {"mealType": "lunch"}

    def test_list_set_then_update(self, store):
        page = make_page()
        store.dispatch.list.set(page)
        store.dispatch.list.update({"from": 20, "to": 40})
        result = store.state.list
        assert (result["from"], result["to"]) == (20, 40)
        assert result["count"] == 100
        assert result["hits"] is page["hits"]
        assert result["next"] is page["next"]

    def test_params_clear(self, store):
        store.dispatch.params.update({"diet": "balanced"})
        store.dispatch.params.clear()
        assert store.state.params == {}

    def test_each_dispatch_touches_one_slice(self, store):
        store.dispatch.list.set(make_page())
        before = store.state
        store.dispatch.params.update({"diet": "balanced"})
        after = store.state
        assert after.list is before.list
        assert (after.loading, after.error, after.active_id) == (False, None, None)


# ===========================================================================
# Observers
# ===========================================================================


class TestObservers:
    def test_listener_sees_committed_snapshot(self, store):
        seen = []
        store.subscribe(seen.append)
        store.dispatch.loading(True)
        assert len(seen) == 1
        assert seen[0] is store.state
        assert seen[0].loading is True

    def test_unchanged_slice_does_not_notify(self, store):
        seen = []
        store.subscribe(seen.append)
        store.dispatch.loading(False)
        # dataclasses.replace always builds a new status object
        assert len(seen) == 1
        seen.clear()
        store.dispatch.params.clear()
        store.dispatch.params.clear()
        assert seen == []

    def test_unsubscribe(self, store):
        seen = []
        unsubscribe = store.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        store.dispatch.loading(True)
        assert seen == []

    def test_dispatch_from_listener_runs_after_current_round(self, store):
        order = []

        def first(snapshot):
            order.append(("first", snapshot.loading, snapshot.error))
            if snapshot.loading and snapshot.error is None:
                store.dispatch.error("late")

        def second(snapshot):
            order.append(("second", snapshot.loading, snapshot.error))

        store.subscribe(first)
        store.subscribe(second)
        store.dispatch.loading(True)

        assert order == [
            ("first", True, None),
            ("second", True, None),
            ("first", True, "late"),
            ("second", True, "late"),
        ]

    def test_batch_coalesces_notifications(self, store):
        seen = []
        store.subscribe(seen.append)
        with store.batch() as dispatch:
            dispatch.list.set(make_page())
            dispatch.loading(False)
            with store.batch():
                dispatch.error(None)
            assert seen == []
            # Commits are visible immediately even though nobody was told yet.
            assert store.state.list["count"] == 100
        assert len(seen) == 1
        assert seen[0].list["count"] == 100

    def test_failing_listener_does_not_stop_the_round(self, store, caplog):
        def broken(snapshot):
            raise RuntimeError("render failed")

        seen = []
        store.subscribe(broken)
        store.subscribe(seen.append)
        store.dispatch.params.update({"diet": "balanced"})

        assert len(seen) == 1
        assert seen[0].params == {"diet": "balanced"}
        assert "Store listener" in caplog.text

        store.dispatch.loading(True)
        assert len(seen) == 2

    def test_batch_without_changes_does_not_notify(self, store):
        seen = []
        store.subscribe(seen.append)
        with store.batch():
            pass
        assert seen == []


# ===========================================================================
# Lifecycle and accessor
# ===========================================================================


class TestLifecycle:
    def test_closed_store_ignores_dispatch(self):
        store = RecipesStore()
        seen = []
        store.subscribe(seen.append)
        store.close()
        store.dispatch.loading(True)
        assert store.closed
        assert store.state.loading is False
        assert seen == []

    def test_accessor_outside_provider_returns_initial_value(self):
        value = use_recipes_context()
        assert value is INITIAL_VALUE
        value.dispatch.loading(True)
        value.dispatch.params.update({"diet": "balanced"})
        assert INITIAL_VALUE.state.loading is False
        assert dict(INITIAL_VALUE.state.params) == {}

    def test_provider_mounts_and_unmounts(self):
        with provider() as store:
            assert current_store() is store
            value = use_recipes_context()
            assert value.state is store.state
            assert use_recipes_context().dispatch is value.dispatch
        assert store.closed
        assert current_store() is None

    def test_nested_provider_shadows_outer(self):
        with provider() as outer:
            with provider() as inner:
                assert current_store() is inner
            assert current_store() is outer
            assert not outer.closed
