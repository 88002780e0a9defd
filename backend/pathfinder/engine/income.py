"""Net income calculator — gross income to taxable income, tax, and net.

Federal and state rates are flat percentages applied to taxable income,
an approximation of a bracket schedule rather than marginal brackets.
"""
from __future__ import annotations

from pathfinder.models.tax import BenefitsSettings, NetIncomeResult, TaxSettings


def total_benefit_deductions(benefits: BenefitsSettings) -> float:
    """Sum of benefit amounts that reduce taxable income.

    Employer match is excluded: it is not an employee deduction.
    """
    custom = sum(b.amount for b in benefits.custom_benefits)
    return (
        benefits.health_insurance
        + benefits.retirement_contribution
        + benefits.military_housing_allowance
        + benefits.military_subsistence_allowance
        + custom
    )


def calculate_net_income(
    gross_annual_income: float,
    tax_settings: TaxSettings | None = None,
    benefits: BenefitsSettings | None = None,
) -> NetIncomeResult:
    """Compute taxable income, federal/state tax, and after-tax income.

    Net income is gross minus tax only. Benefit costs (health insurance,
    retirement contributions) reduce taxable income but are not taken out
    of take-home here; callers wanting true take-home subtract them.
    """
    tax = tax_settings or TaxSettings()
    benefits = benefits or BenefitsSettings()

    total_benefits = total_benefit_deductions(benefits)
    taxable_income = max(
        0.0,
        gross_annual_income - tax.standard_deduction - total_benefits - tax.additional_deductions,
    )

    federal_tax = taxable_income * tax.federal_bracket
    state_tax = taxable_income * tax.state_bracket
    total_tax = federal_tax + state_tax

    net_annual_income = gross_annual_income - total_tax

    return NetIncomeResult(
        gross_income=gross_annual_income,
        taxable_income=taxable_income,
        federal_tax=federal_tax,
        state_tax=state_tax,
        total_tax=total_tax,
        total_benefits=total_benefits,
        net_annual_income=net_annual_income,
        net_monthly_income=net_annual_income / 12.0,
    )
