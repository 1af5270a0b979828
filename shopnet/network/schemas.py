"""Pydantic schemas for shop networks.

These models mirror the dataclasses in ``graph.py`` and the reducer's
intermediate values so both can be dumped as JSON for inspection.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class ShopState(BaseModel):
    """Serializable form of a single shop."""

    id: int = Field(..., ge=0, description="Unique shop identifier")
    neighbors: List[int] = Field(
        default_factory=list,
        description="Identifiers of linked shops in road order (duplicates kept)",
    )


class NetworkState(BaseModel):
    """Adjacency snapshot of a whole shop network."""

    shops: Dict[int, ShopState] = Field(
        default_factory=dict,
        description="Map of shop_id → shop",
    )
    sealed: bool = Field(False, description="Whether the build phase had ended")


class ReductionReport(BaseModel):
    """Every intermediate value of one reduction, plus the final count."""

    threshold: int = Field(..., description="Maximum degree in the network")
    hub_ids: List[int] = Field(
        default_factory=list,
        description="Shops at the maximum degree, ascending",
    )
    impacts: Dict[int, int] = Field(
        default_factory=dict,
        description="Map of hub id → summed degree of its non-hub neighbors",
    )
    required_impact: int = Field(..., description="Maximum impact among hubs")
    survivor_ids: List[int] = Field(
        default_factory=list,
        description="Hubs at the maximum impact, ascending",
    )
    result: int = Field(..., ge=0, description="Survivor count, or 0 when fewer than two survive")

    @property
    def fully_reduced(self) -> bool:
        return self.result == 0
