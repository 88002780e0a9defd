"""Timeline event models.

A TimelineEvent arrives with a free-form ``payload``. Known event types are
parsed into one variant of a discriminated union keyed by ``type``; each
variant carries only the fields its event uses. Payload keys may be given in
snake_case or camelCase. Unknown types parse to ``None`` and are skipped by
the engine.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, model_validator
from pydantic.alias_generators import to_camel


class EventType(str, Enum):
    income_change = "income_change"
    spending_change = "spending_change"
    asset_add = "asset_add"
    asset_sale = "asset_sale"
    debt_add = "debt_add"
    debt_payoff = "debt_payoff"
    investment_start = "investment_start"
    investment_stop = "investment_stop"
    lifestyle_change = "lifestyle_change"
    career_path_change = "career_path_change"


_KNOWN_TYPES = frozenset(t.value for t in EventType)


class _Payload(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True, "frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # A null value counts as absent so the field default applies.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class IncomeChange(_Payload):
    type: Literal["income_change"] = "income_change"
    new_income: Optional[float] = None


class SpendingChange(_Payload):
    type: Literal["spending_change"] = "spending_change"
    new_spending: Optional[float] = None


class AssetAdd(_Payload):
    type: Literal["asset_add"] = "asset_add"
    amount: float = 0.0


class AssetSale(_Payload):
    type: Literal["asset_sale"] = "asset_sale"
    amount: float = 0.0


class DebtAdd(_Payload):
    type: Literal["debt_add"] = "debt_add"
    amount: float = Field(default=0.0, ge=0)
    interest_rate: float = 0.05
    monthly_payment: float = Field(default=0.0, ge=0)


class DebtPayoff(_Payload):
    type: Literal["debt_payoff"] = "debt_payoff"
    amount: float = 0.0


class InvestmentStart(_Payload):
    type: Literal["investment_start"] = "investment_start"
    initial_value: float = 0.0
    monthly_contribution: float = Field(default=0.0, ge=0)
    return_rate: float = 0.07


class InvestmentStop(_Payload):
    type: Literal["investment_stop"] = "investment_stop"


class LifestyleChange(_Payload):
    type: Literal["lifestyle_change"] = "lifestyle_change"
    new_spending: Optional[float] = None


class CareerPathChange(_Payload):
    type: Literal["career_path_change"] = "career_path_change"
    career_path: Optional[str] = None
    new_income: Optional[float] = None


EventAction = Annotated[
    Union[
        IncomeChange,
        SpendingChange,
        AssetAdd,
        AssetSale,
        DebtAdd,
        DebtPayoff,
        InvestmentStart,
        InvestmentStop,
        LifestyleChange,
        CareerPathChange,
    ],
    Field(discriminator="type"),
]

_ACTION_ADAPTER: TypeAdapter[EventAction] = TypeAdapter(EventAction)


class TimelineEvent(BaseModel):
    """A discrete life event applied at ``year_offset`` (0 = first simulated year)."""
    year_offset: int = Field(ge=0)
    type: str
    payload: dict[str, Any] = {}

    @model_validator(mode="after")
    def _check_payload(self) -> "TimelineEvent":
        # Reject malformed payloads for known types at the boundary.
        self.action
        return self

    @property
    def action(self) -> Optional[EventAction]:
        """Typed payload for known event types, ``None`` otherwise."""
        if self.type not in _KNOWN_TYPES:
            return None
        return _ACTION_ADAPTER.validate_python({**self.payload, "type": self.type})

    @property
    def is_known(self) -> bool:
        return self.type in _KNOWN_TYPES
