"""
Import smoke tests.
Verifies the gui and recipe_search package trees import without a display
server or API credentials.
"""


class TestFullModuleTree:
    """Tests that verify the full module tree is importable."""

    def test_full_gui_import_tree(self):
        """Verify entire gui package can be imported."""
        import gui
        import gui.app
        import gui.router

        import gui.state
        import gui.state.context
        import gui.state.reducers
        import gui.state.store
        import gui.state.types
        import gui.state.url_sync

        import gui.services
        import gui.services.clients
        import gui.services.search_service

        import gui.utils
        import gui.utils.logging

        assert True  # All imports succeeded

    def test_full_domain_import_tree(self):
        """Verify entire recipe_search package can be imported."""
        import recipe_search
        import recipe_search.config
        import recipe_search.edamam_client
        import recipe_search.models
        import recipe_search.models.schemas
        import recipe_search.models.vocabulary
        import recipe_search.utils.logger

        assert True


class TestUtils:
    def test_logging_import(self):
        """Verify logging utilities can be imported."""
        from gui.utils.logging import log, logger

        assert log is not None
        assert logger.name == "recipesearch.gui"

    def test_get_logger_returns_named_logger(self):
        from recipe_search.utils.logger import get_logger

        assert get_logger("recipe_search.test").name == "recipe_search.test"


class TestServicesInit:
    def test_clients_import(self):
        """Verify client factories can be imported."""
        from gui.services.clients import get_recipe_client

        assert get_recipe_client is not None

    def test_state_package_exports(self):
        import gui.state

        for name in gui.state.__all__:
            assert hasattr(gui.state, name), f"Missing export: {name}"
