"""Simulation parameter models submitted to the simulation service."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

SUPPORTED_METHODS = ("normal", "bootstrap")
WEIGHT_TOLERANCE = 0.01


class PortfolioItem(BaseModel):
    """One asset and its portfolio weight."""

    ticker: str = Field(..., description="Asset identifier, e.g. 'VTI'")
    weight: float = Field(..., description="Portfolio weight in decimal form")

    @field_validator("ticker", mode="before")
    @classmethod
    def _strip_ticker(cls, value: Any) -> str:
        if value is None:
            raise ValueError("each asset in portfolio must have a ticker")
        text = str(value).strip().upper()
        if not text:
            raise ValueError("each asset in portfolio must have a ticker")
        return text

    @field_validator("weight")
    @classmethod
    def _validate_weight(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("asset weights must be greater than 0")
        return float(value)


class SimulationParameters(BaseModel):
    """Inputs of one simulation request.

    Field names follow Python conventions; the camelCase names used on the
    wire are accepted as aliases.
    """

    model_config = ConfigDict(populate_by_name=True)

    portfolio: List[PortfolioItem] = Field(default_factory=list)
    ticker: Optional[str] = Field(None, description="Single asset to simulate instead of a portfolio")
    initial_value: float = Field(..., gt=0, alias="initialValue")
    periods: int = Field(..., ge=1, le=1200, description="Number of months to simulate")
    simulations: int = Field(..., ge=1, le=10000, description="Number of paths")
    withdrawal_rate: float = Field(0.0, ge=0.0, le=1.0, alias="withdrawalRate")
    inflation: float = Field(0.0, ge=0.0, le=1.0)
    method: str = Field("normal", description="'normal' or 'bootstrap'")

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_withdrawal(cls, values: Any) -> Any:
        """The form historically posted ``withdrawal`` rather than ``withdrawalRate``."""
        if isinstance(values, dict) and "withdrawal" in values:
            values = dict(values)
            legacy = values.pop("withdrawal")
            if "withdrawalRate" not in values and "withdrawal_rate" not in values:
                values["withdrawal_rate"] = legacy
        return values

    @field_validator("ticker", mode="before")
    @classmethod
    def _normalize_ticker(cls, value: Optional[Any]) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip().upper()
        return text or None

    @field_validator("method", mode="before")
    @classmethod
    def _normalize_method(cls, value: Any) -> str:
        method = str(value or "").strip().lower()
        if method not in SUPPORTED_METHODS:
            raise ValueError("method must be 'normal' or 'bootstrap'")
        return method

    @model_validator(mode="after")
    def _validate_portfolio(self) -> "SimulationParameters":
        if not self.portfolio and not self.ticker:
            raise ValueError("either portfolio or ticker must be provided")
        if self.portfolio:
            total_weight = sum(item.weight for item in self.portfolio)
            if abs(total_weight - 1.0) > WEIGHT_TOLERANCE:
                raise ValueError("sum of portfolio weights must be approximately 1.0")
        return self

    @property
    def years(self) -> float:
        return self.periods / 12.0


__all__ = ["PortfolioItem", "SimulationParameters", "SUPPORTED_METHODS"]
