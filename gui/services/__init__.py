"""Services used by the GUI: API client factories and the search flow."""
from . import clients, search_service  # noqa: F401

from .clients import get_recipe_client
from .search_service import load_next_page, load_recipe, run_search

__all__ = ["get_recipe_client", "load_next_page", "load_recipe", "run_search"]
