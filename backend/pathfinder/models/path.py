"""Career/education path templates and opportunity-cost comparison models."""
from typing import Literal, Optional

from pydantic import BaseModel, Field

from pathfinder.models.tax import BenefitsSettings, TaxSettings


class PathTraits(BaseModel):
    """Lifestyle and fit attributes the career advisor scores against (1-10 scales)."""
    structure: int = Field(default=5, ge=1, le=10)
    creativity: int = Field(default=5, ge=1, le=10)
    work_life_balance: int = Field(default=5, ge=1, le=10)
    location_flexibility: int = Field(default=5, ge=1, le=10)
    skill_requirement: int = Field(default=5, ge=1, le=10)
    interest_area: str = "general"
    risk_level: Literal["low", "medium", "high"] = "medium"


class PathTemplate(BaseModel):
    template_id: str
    template_name: str
    duration_years: int = Field(default=4, ge=0)
    starting_salary: float = 50000.0
    salary_growth_rate: float = 0.03
    education_cost: float = 0.0
    default_expenses: Optional[float] = None  # annual living cost
    default_benefits: BenefitsSettings = Field(default_factory=BenefitsSettings)
    benefits_included: bool = False
    military_specific: bool = False
    notes: Optional[str] = None
    traits: PathTraits = Field(default_factory=PathTraits)


class Profile(BaseModel):
    """Caller identity plus the tax settings the comparison runs under."""
    profile_id: str
    name: Optional[str] = None
    tax_settings: Optional[TaxSettings] = None


class YearlyPathData(BaseModel):
    year: int
    gross_income: float
    net_income: float
    tax_paid: float
    cumulative_net_worth: float
    cumulative_earnings: float


class PathResult(BaseModel):
    template_name: str
    total_earnings: float
    total_taxes: float
    final_net_worth: float
    yearly_data: list[YearlyPathData]


class PathComparison(BaseModel):
    results: list[PathResult]
    break_even_year: Optional[int] = None
    long_term_difference: float = 0.0
    projection_years: int


class ComparisonRequest(BaseModel):
    """Compare stored templates (by id or name) for a profile."""
    profile: Profile
    selected_templates: list[str] = Field(min_length=1)
    projection_years: int = Field(default=10, ge=1, le=100)
