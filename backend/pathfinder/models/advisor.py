"""Career advisor request/response models."""
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

Level = Literal["low", "medium", "high"]


class UserProfile(BaseModel):
    """Finances and preferences of the person being advised. Preferences use 1-10 scales."""
    starting_savings: float = 0.0
    monthly_lifestyle_cost: float = Field(default=1200.0, ge=0)
    risk_tolerance: Level = "medium"
    structure_preference: int = Field(default=5, ge=1, le=10)
    creativity_preference: int = Field(default=5, ge=1, le=10)
    work_life_importance: int = Field(default=5, ge=1, le=10)
    location_importance: int = Field(default=5, ge=1, le=10)
    skill_confidence: int = Field(default=5, ge=1, le=10)
    interest_alignment: Literal["low", "medium", "high", "neutral"] = "neutral"
    primary_interest: Optional[str] = None


class PreferenceWeights(BaseModel):
    """Relative weights of the four score dimensions; normalised before use."""
    financial_weight: float = Field(default=40, ge=0)
    lifestyle_weight: float = Field(default=30, ge=0)
    time_weight: float = Field(default=20, ge=0)
    alignment_weight: float = Field(default=10, ge=0)

    @model_validator(mode="after")
    def _check_total(self) -> "PreferenceWeights":
        if self.total <= 0:
            raise ValueError("at least one preference weight must be positive")
        return self

    @property
    def total(self) -> float:
        return self.financial_weight + self.lifestyle_weight + self.time_weight + self.alignment_weight


class DimensionScores(BaseModel):
    financial: int
    lifestyle: int
    time_independence: int
    alignment: int


class ScoredPath(BaseModel):
    template_id: str
    template_name: str
    scores: DimensionScores
    overall_score: int


class CategoryPick(BaseModel):
    template_id: str
    template_name: str
    score: int


class Tradeoff(BaseModel):
    path: str
    dimension: Literal["financial", "lifestyle", "time"]
    insight: str


class Recommendation(BaseModel):
    best_overall: Optional[ScoredPath] = None
    best_financial: Optional[CategoryPick] = None
    best_lifestyle: Optional[CategoryPick] = None
    best_low_risk: Optional[CategoryPick] = None
    reasoning: str
    tradeoffs: list[Tradeoff] = []
    all_ranked: list[ScoredPath] = []


class AdvisorRequest(BaseModel):
    user_profile: UserProfile
    paths: list[str] = Field(min_length=2)
    preference_weights: PreferenceWeights = Field(default_factory=PreferenceWeights)


class AdvisorResponse(BaseModel):
    recommendation: Recommendation
    scored_paths: list[ScoredPath]
