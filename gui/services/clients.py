"""Client factories for the GUI layer."""

from __future__ import annotations

from typing import Optional

from recipe_search.config import Settings
from recipe_search.edamam_client import EdamamClient


def get_recipe_client(settings: Optional[Settings] = None) -> EdamamClient:
    """Return an Edamam API client."""

    return EdamamClient(settings=settings)
