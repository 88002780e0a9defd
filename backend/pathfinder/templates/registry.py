"""Template registry — stock path templates plus an optional JSON file."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from pathfinder.config import settings
from pathfinder.models.path import PathTemplate
from pathfinder.templates.defaults import default_templates

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """Singleton holding the path templates available for comparison."""

    _instance: "TemplateRegistry | None" = None

    def __init__(self) -> None:
        self._templates: dict[str, PathTemplate] = {}
        self._loaded = False
        self._source: Path | None = None

    @classmethod
    def get(cls) -> "TemplateRegistry":
        if cls._instance is None:
            cls._instance = cls()
            cls._instance._seed()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset singleton — mainly for testing."""
        cls._instance = None

    def _seed(self) -> None:
        for template in default_templates():
            self._templates[template.template_id] = template

    def load(self, template_file: str | Path | None = None) -> None:
        """Add templates from a JSON list on disk; a missing file keeps the seeds."""
        self._source = Path(template_file or settings.TEMPLATE_FILE).resolve()
        logger.info("Loading path templates from %s", self._source)

        if not self._source.is_file():
            logger.warning("Template file %s not found — using stock templates", self._source)
            self._loaded = True
            return

        try:
            data = json.loads(self._source.read_text())
        except json.JSONDecodeError as e:
            logger.warning("Failed to parse template file %s: %s", self._source, e)
            self._loaded = True
            return

        added = 0
        for raw in data if isinstance(data, list) else []:
            try:
                template = PathTemplate.model_validate(raw)
            except ValidationError as e:
                logger.warning("Skipping invalid template entry: %s", e)
                continue
            self._templates[template.template_id] = template
            added += 1

        self._loaded = True
        logger.info("Loaded %d path templates (%d total)", added, len(self._templates))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def all(self) -> list[PathTemplate]:
        return list(self._templates.values())

    def find(self, key: str) -> PathTemplate | None:
        """Look up a template by id, falling back to its name."""
        if key in self._templates:
            return self._templates[key]
        return next((t for t in self._templates.values() if t.template_name == key), None)

    def resolve(self, selected: list[str]) -> list[PathTemplate]:
        """Templates for ``selected`` in caller order; unknown keys are skipped."""
        found: list[PathTemplate] = []
        for key in selected:
            template = self.find(key)
            if template is None:
                logger.warning("Path template not found: %s", key)
                continue
            found.append(template)
        return found

    def get_status(self) -> dict:
        return {
            "status": "loaded" if self._loaded else "seeded",
            "count": len(self._templates),
            "source": str(self._source) if self._source else None,
        }
