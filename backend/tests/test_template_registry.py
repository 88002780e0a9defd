"""Tests for the path template registry."""
import json

from pathfinder.templates.registry import TemplateRegistry


def test_registry_seeded_with_stock_templates():
    reg = TemplateRegistry.get()
    names = {t.template_name for t in reg.all()}
    assert names == {"College", "Trade", "Military", "Entrepreneurship"}
    assert not reg.is_loaded


def test_find_by_id_or_name():
    reg = TemplateRegistry.get()
    assert reg.find("military").template_name == "Military"
    assert reg.find("Trade").template_id == "trade"
    assert reg.find("Astronaut") is None


def test_resolve_preserves_caller_order_and_skips_unknown():
    reg = TemplateRegistry.get()
    resolved = reg.resolve(["Trade", "missing", "college"])
    assert [t.template_name for t in resolved] == ["Trade", "College"]


def test_load_missing_file_keeps_seeds(tmp_path):
    reg = TemplateRegistry.get()
    reg.load(tmp_path / "nonexistent.json")
    assert reg.is_loaded
    assert len(reg.all()) == 4


def test_load_adds_templates_from_file(tmp_path):
    path = tmp_path / "templates.json"
    path.write_text(json.dumps([
        {"template_id": "nursing", "template_name": "Nursing", "duration_years": 2,
         "starting_salary": 70000, "salary_growth_rate": 0.04, "education_cost": 30000},
        {"template_id": "broken", "duration_years": "forever"},
    ]))
    reg = TemplateRegistry.get()
    reg.load(path)
    assert len(reg.all()) == 5
    assert reg.find("Nursing").starting_salary == 70000
    assert reg.find("broken") is None
    assert reg.get_status()["count"] == 5


def test_load_invalid_json_keeps_seeds(tmp_path):
    path = tmp_path / "templates.json"
    path.write_text("{not json")
    reg = TemplateRegistry.get()
    reg.load(path)
    assert reg.is_loaded
    assert len(reg.all()) == 4
