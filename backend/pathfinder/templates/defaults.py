"""Stock career/education path templates."""
from __future__ import annotations

from pathfinder.models.path import PathTemplate, PathTraits
from pathfinder.models.tax import BenefitsSettings


def default_templates() -> list[PathTemplate]:
    return [
        PathTemplate(
            template_id="college",
            template_name="College",
            duration_years=4,
            starting_salary=60000,
            salary_growth_rate=0.05,
            education_cost=100000,
            benefits_included=True,
            default_benefits=BenefitsSettings(
                health_insurance=2000,
                retirement_contribution=3000,
                employer_match=1500,
            ),
            notes="Traditional 4-year degree path with tuition costs and delayed earnings.",
        ),
        PathTemplate(
            template_id="trade",
            template_name="Trade",
            duration_years=2,
            starting_salary=45000,
            salary_growth_rate=0.03,
            education_cost=15000,
            benefits_included=True,
            default_benefits=BenefitsSettings(
                health_insurance=1500,
                retirement_contribution=1000,
                employer_match=500,
            ),
            notes="Vocational training with lower cost and faster entry to workforce.",
        ),
        PathTemplate(
            template_id="military",
            template_name="Military",
            duration_years=0,
            starting_salary=35000,
            salary_growth_rate=0.04,
            education_cost=0,
            benefits_included=True,
            military_specific=True,
            default_benefits=BenefitsSettings(
                employer_match=1750,
                military_housing_allowance=18000,
                military_subsistence_allowance=4500,
            ),
            notes="Immediate earnings with significant non-taxable allowances and benefits.",
        ),
        PathTemplate(
            template_id="entrepreneurship",
            template_name="Entrepreneurship",
            duration_years=1,
            starting_salary=0,
            salary_growth_rate=0.15,
            education_cost=5000,
            benefits_included=False,
            traits=PathTraits(risk_level="high"),
            notes="High risk path with potential for exponential growth but initial instability.",
        ),
    ]
