"""Normalise simulation service responses into ``SimulationResult`` records.

The service has shipped two response shapes::

    camel: {"paths", "finalStats", "successRate", "simulatedCAGR"}
    snake: {"paths", "final_stats", "success_rate"}

Both are accepted; neither is treated as the authoritative one. Each shape
has its own wire model and the parsed record is tagged with the shape it
came from.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..models.parameters import SimulationParameters
from ..models.results import FinalStats, SimulationResult
from ..utils.numbers import is_finite_number
from .summary import simulated_cagr

LOGGER = logging.getLogger(__name__)

CAMEL = "camel"
SNAKE = "snake"


class PayloadValidationError(ValueError):
    """Raised when a response payload breaks the service contract."""


def clean_paths(value: object) -> List[List[Optional[float]]]:
    """
    Reduce a raw path matrix to rows of finite floats or ``None``.

    Rows that are not lists are dropped and cells that are not finite numbers
    become ``None``, so the aggregator skips them instead of the whole payload
    being rejected.
    """
    if value is None:
        return []
    if hasattr(value, "tolist"):
        value = value.tolist()
    if not isinstance(value, (list, tuple)):
        LOGGER.debug("Ignoring path matrix of type %s", type(value).__name__)
        return []

    rows: List[List[Optional[float]]] = []
    dropped_rows = 0
    blanked = 0
    for row in value:
        if not isinstance(row, (list, tuple)):
            dropped_rows += 1
            continue
        cells: List[Optional[float]] = []
        for cell in row:
            if is_finite_number(cell):
                cells.append(float(cell))
            else:
                if cell is not None:
                    blanked += 1
                cells.append(None)
        rows.append(cells)
    if dropped_rows or blanked:
        LOGGER.debug(
            "Dropped %d malformed path rows and blanked %d unusable values",
            dropped_rows,
            blanked,
        )
    return rows


class _PathsPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    paths: List[List[Optional[float]]] = Field(default_factory=list)

    @field_validator("paths", mode="before")
    @classmethod
    def _clean_paths(cls, value: object) -> List[List[Optional[float]]]:
        return clean_paths(value)


class CamelCasePayload(_PathsPayload):
    """Response shape with camelCase keys and a CAGR field."""

    final_stats: FinalStats = Field(..., alias="finalStats")
    success_rate: float = Field(..., alias="successRate")
    simulated_cagr: Optional[Any] = Field(None, alias="simulatedCAGR")


class SnakeCasePayload(_PathsPayload):
    """Response shape with snake_case keys and no CAGR field."""

    final_stats: FinalStats
    success_rate: float


WIRE_MODELS: Dict[str, Type[BaseModel]] = {
    CAMEL: CamelCasePayload,
    SNAKE: SnakeCasePayload,
}


def detect_wire_shape(payload: Mapping[str, Any]) -> str:
    """Return ``"camel"`` or ``"snake"`` based on which stats key is present."""
    has_camel = "finalStats" in payload
    has_snake = "final_stats" in payload
    if has_camel and has_snake:
        raise PayloadValidationError(
            "Payload contains both 'finalStats' and 'final_stats'; cannot tell which shape it is"
        )
    if has_camel:
        return CAMEL
    if has_snake:
        return SNAKE
    raise PayloadValidationError(
        "Payload is missing final statistics (expected 'finalStats' or 'final_stats')"
    )


def _describe(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        problems.append(f"{location}: {error.get('msg')}")
    return "; ".join(problems)


def _coerce_payload(payload: Union[Mapping[str, Any], str, bytes]) -> Mapping[str, Any]:
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise PayloadValidationError(f"Payload is not valid JSON: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise PayloadValidationError(
            f"Payload must be a JSON object, got {type(payload).__name__}"
        )
    return payload


def normalize_payload(
    payload: Union[Mapping[str, Any], str, bytes],
    parameters: Optional[SimulationParameters] = None,
) -> SimulationResult:
    """
    Parse either response shape into a ``SimulationResult``.

    Missing or non-numeric final statistics and success rate raise
    ``PayloadValidationError``. A missing matrix becomes an empty one,
    malformed rows are dropped, unusable cells become ``None`` and an
    unusable CAGR becomes ``None``. When the payload has no CAGR and
    ``parameters`` are given, the CAGR is derived from the mean final value.
    """
    data = _coerce_payload(payload)
    shape = detect_wire_shape(data)
    LOGGER.debug("Detected %s response shape", shape)

    try:
        wire = WIRE_MODELS[shape].model_validate(data)
    except ValidationError as exc:
        raise PayloadValidationError(
            f"Invalid {shape} simulation payload: {_describe(exc)}"
        ) from exc

    raw_cagr = getattr(wire, "simulated_cagr", None)
    cagr: Optional[float] = float(raw_cagr) if is_finite_number(raw_cagr) else None
    if raw_cagr is not None and cagr is None:
        LOGGER.info("Dropping unusable simulatedCAGR value %r", raw_cagr)
    if cagr is None and raw_cagr is None and parameters is not None:
        cagr = simulated_cagr(
            wire.final_stats.mean,
            parameters.initial_value,
            parameters.periods,
        )

    return SimulationResult(
        paths=wire.paths,
        final_stats=wire.final_stats,
        success_rate=wire.success_rate,
        simulated_cagr=cagr,
        wire_shape=shape,
    )


__all__ = [
    "CAMEL",
    "SNAKE",
    "CamelCasePayload",
    "PayloadValidationError",
    "SnakeCasePayload",
    "clean_paths",
    "detect_wire_shape",
    "normalize_payload",
]
