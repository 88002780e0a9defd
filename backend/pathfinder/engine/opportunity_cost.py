"""Opportunity-cost comparator — year loops per career/education path.

Each template runs an independent loop of training years (no income, living
costs only) followed by earning years taxed through the net income
calculator. Two comparison metrics are derived:

- break_even_year: first year the net-worth lead flips between the FIRST TWO
  results, in caller order.
- long_term_difference: best minus worst final net worth across ALL results.

The two metrics deliberately draw on different subsets of results.
"""
from __future__ import annotations

from pathfinder.engine.income import calculate_net_income
from pathfinder.models.path import PathComparison, PathResult, PathTemplate, Profile, YearlyPathData
from pathfinder.models.tax import BenefitsSettings, TaxSettings

DEFAULT_LIVING_EXPENSES = 30000.0


def living_expenses(template: PathTemplate) -> float:
    """Annual living cost for a template; zero or unset uses the default."""
    return template.default_expenses or DEFAULT_LIVING_EXPENSES


def _take_home(gross: float, template: PathTemplate, tax_settings: TaxSettings | None) -> tuple[float, float]:
    """Return (take-home pay, total tax) for an earning year."""
    benefits = BenefitsSettings(**template.default_benefits.model_dump(exclude={"custom_benefits"}))
    details = calculate_net_income(gross, tax_settings, benefits)

    take_home = details.net_annual_income
    if template.military_specific:
        # Housing and subsistence allowances are paid on top, untaxed.
        take_home += benefits.military_housing_allowance + benefits.military_subsistence_allowance
    take_home -= benefits.health_insurance
    take_home -= benefits.retirement_contribution
    return take_home, details.total_tax


def project_path(
    template: PathTemplate,
    projection_years: int,
    tax_settings: TaxSettings | None = None,
) -> PathResult:
    """Run the year loop for a single template."""
    expenses = living_expenses(template)
    employer_match = template.default_benefits.employer_match

    salary = template.starting_salary
    cumulative_earnings = 0.0
    cumulative_taxes = 0.0
    net_worth = -template.education_cost
    yearly: list[YearlyPathData] = []

    for year in range(1, projection_years + 1):
        gross = 0.0
        net = 0.0
        tax_paid = 0.0

        if year <= template.duration_years:
            net_worth -= expenses
        else:
            # First earning year keeps the starting salary.
            if year - template.duration_years > 1:
                salary *= 1.0 + template.salary_growth_rate
            gross = salary
            net, tax_paid = _take_home(gross, template, tax_settings)
            net_worth += (net - expenses) + employer_match

        cumulative_earnings += gross
        cumulative_taxes += tax_paid
        yearly.append(YearlyPathData(
            year=year,
            gross_income=gross,
            net_income=net,
            tax_paid=tax_paid,
            cumulative_net_worth=net_worth,
            cumulative_earnings=cumulative_earnings,
        ))

    return PathResult(
        template_name=template.template_name,
        total_earnings=cumulative_earnings,
        total_taxes=cumulative_taxes,
        final_net_worth=net_worth,
        yearly_data=yearly,
    )


def find_break_even_year(first: PathResult, second: PathResult) -> int | None:
    """First year at which the lead between two paths changes hands."""
    pairs = list(zip(first.yearly_data, second.yearly_data))
    for i in range(1, len(pairs)):
        a, b = pairs[i]
        prev_a, prev_b = pairs[i - 1]
        if a.cumulative_net_worth < b.cumulative_net_worth:
            flipped = prev_a.cumulative_net_worth > prev_b.cumulative_net_worth
        else:
            flipped = prev_a.cumulative_net_worth < prev_b.cumulative_net_worth
        if flipped:
            return a.year
    return None


def compare_paths(
    profile: Profile,
    selected_templates: list[PathTemplate],
    projection_years: int = 10,
) -> PathComparison:
    """Project every selected template and derive the comparison metrics."""
    results = [
        project_path(t, projection_years, profile.tax_settings)
        for t in selected_templates
    ]

    break_even_year = None
    long_term_difference = 0.0
    if len(results) >= 2:
        finals = [r.final_net_worth for r in results]
        long_term_difference = max(finals) - min(finals)
        break_even_year = find_break_even_year(results[0], results[1])

    return PathComparison(
        results=results,
        break_even_year=break_even_year,
        long_term_difference=long_term_difference,
        projection_years=projection_years,
    )
