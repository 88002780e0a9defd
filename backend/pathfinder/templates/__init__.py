"""Path template registry and stock templates."""
from pathfinder.templates.defaults import default_templates
from pathfinder.templates.registry import TemplateRegistry

__all__ = ["TemplateRegistry", "default_templates"]
