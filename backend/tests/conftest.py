import pytest

from pathfinder.engine.career import clear_cache
from pathfinder.templates.registry import TemplateRegistry


@pytest.fixture(autouse=True)
def _reset_state():
    """Fresh template registry and career cache for every test."""
    TemplateRegistry.reset()
    clear_cache()
    yield
    TemplateRegistry.reset()
    clear_cache()
