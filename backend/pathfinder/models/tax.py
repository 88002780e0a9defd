from typing import Optional

from pydantic import BaseModel


class TaxSettings(BaseModel):
    filing_status: str = "Single"
    federal_bracket: float = 0.22
    state_bracket: float = 0.05
    standard_deduction: float = 13850.0
    additional_deductions: float = 0.0


class CustomBenefit(BaseModel):
    name: str
    amount: float = 0.0


class BenefitsSettings(BaseModel):
    health_insurance: float = 0.0
    retirement_contribution: float = 0.0
    employer_match: float = 0.0
    military_housing_allowance: float = 0.0
    military_subsistence_allowance: float = 0.0
    custom_benefits: list[CustomBenefit] = []


class NetIncomeResult(BaseModel):
    """Breakdown of gross-to-net income for a single year."""
    gross_income: float
    taxable_income: float
    federal_tax: float
    state_tax: float
    total_tax: float
    total_benefits: float
    net_annual_income: float
    net_monthly_income: float


class NetIncomeRequest(BaseModel):
    gross_annual_income: float
    tax_settings: Optional[TaxSettings] = None
    benefits: Optional[BenefitsSettings] = None
