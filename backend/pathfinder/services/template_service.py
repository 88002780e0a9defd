"""Template management service.

Facade for template loading, status, and lookup.
"""
from __future__ import annotations

import logging
from typing import Any

from pathfinder.models.path import PathTemplate
from pathfinder.templates.registry import TemplateRegistry

logger = logging.getLogger(__name__)


def initialize_templates(template_file: str | None = None) -> None:
    """Load path templates at startup."""
    registry = TemplateRegistry.get()
    registry.load(template_file)
    logger.info("Templates initialized — %d available", registry.get_status()["count"])


def get_template_status() -> dict[str, Any]:
    """Return current template registry status for API consumption."""
    return TemplateRegistry.get().get_status()


def list_templates() -> list[PathTemplate]:
    return TemplateRegistry.get().all()


def get_template(key: str) -> PathTemplate | None:
    """Find a single template by id or name."""
    return TemplateRegistry.get().find(key)


def resolve_templates(selected: list[str]) -> list[PathTemplate]:
    """Resolve selections in caller order, raising if none match."""
    templates = TemplateRegistry.get().resolve(selected)
    if not templates:
        raise ValueError(f"None of the selected templates were found: {', '.join(selected)}")
    return templates
