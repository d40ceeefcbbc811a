"""Tracking advisor data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from conveyors.domain.value_objects import BeltTrackingMethod, TrackingRiskLevel


@dataclass(frozen=True)
class TrackingRiskFactor:
    """One independently assessed tracking risk factor.

    Attributes:
        name: Display name of the factor.
        risk: Risk contribution of the factor.
        explanation: Plain-English rationale.
    """

    name: str
    risk: TrackingRiskLevel
    explanation: str


@dataclass(frozen=True)
class TrackingGuidance:
    """Overall belt tracking recommendation.

    Attributes:
        recommendation: Recommended tracking method.
        risk_level: Overall risk if crowned tracking is used.
        summary: One-sentence summary of the recommendation.
        factors: The six assessed factors, in fixed order.
        warnings: Warnings about the current selection.
        notes: Informational notes.
    """

    recommendation: BeltTrackingMethod
    risk_level: TrackingRiskLevel
    summary: str
    factors: list[TrackingRiskFactor] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @property
    def recommends_v_guide(self) -> bool:
        return self.recommendation == BeltTrackingMethod.V_GUIDED

    def factors_at(self, level: TrackingRiskLevel) -> list[TrackingRiskFactor]:
        return [factor for factor in self.factors if factor.risk == level]
