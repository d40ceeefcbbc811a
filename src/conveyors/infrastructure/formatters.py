"""Plain-text report formatters for the CLI."""

from __future__ import annotations

import math

from conveyors.application.engine import CalculationResult
from conveyors.domain.services.formulas import ConveyorOutputs
from conveyors.domain.services.tracking import TrackingGuidance


def _num(value: float | None, digits: int = 2) -> str:
    if value is None:
        return "-"
    if isinstance(value, float) and not math.isfinite(value):
        return "n/a"
    return f"{value:,.{digits}f}"


class CalculationReportFormatter:
    """Formats a calculation result as a sectioned text report."""

    def format(self, result: CalculationResult) -> str:
        lines: list[str] = []
        if result.metadata is not None:
            lines.append(
                f"Model: {result.metadata.model_key} ({result.metadata.model_version_id})"
            )
            lines.append("")

        if result.outputs is not None:
            lines.extend(self._format_outputs(result.outputs))

        if result.errors:
            lines.append("Errors:")
            lines.extend(f"  {e.field}: {e.message}" for e in result.errors)
            lines.append("")

        if result.warnings:
            lines.append("Warnings:")
            lines.extend(
                f"  [{w.severity.value}] {w.field}: {w.message}" for w in result.warnings
            )
            lines.append("")

        return "\n".join(lines).rstrip()

    def _format_outputs(self, o: ConveyorOutputs) -> list[str]:
        lines = [
            "Load",
            f"  Parts on belt:        {_num(o.parts_on_belt)}",
            f"  Load on belt:         {_num(o.load_on_belt_lbf)} lbf",
            f"  Belt weight:          {_num(o.belt_weight_lbf)} lbf",
            f"  Total load:           {_num(o.total_load_lbf)} lbf",
            f"  Total belt length:    {_num(o.total_belt_length_in)} in",
            "",
            "Belt Pull",
            f"  Friction pull:        {_num(o.friction_pull_lb)} lb",
            f"  Incline pull:         {_num(o.incline_pull_lb)} lb",
            f"  Starting pull:        {_num(o.starting_belt_pull_lb)} lb",
            f"  Total belt pull:      {_num(o.total_belt_pull_lb)} lb",
            "",
            "Drive",
            f"  Belt speed:           {_num(o.belt_speed_fpm)} fpm",
            f"  Drive shaft RPM:      {_num(o.drive_shaft_rpm)}",
            f"  Torque:               {_num(o.torque_drive_shaft_inlbf)} in-lbf",
            f"  Gear ratio:           {_num(o.gear_ratio)}",
            f"  Chain ratio:          {_num(o.chain_ratio)}",
            f"  Total drive ratio:    {_num(o.total_drive_ratio)}",
            "",
            "Pulleys and Shafts",
            f"  Drive pulley:         {_num(o.drive_pulley_diameter_in)} in",
            f"  Tail pulley:          {_num(o.tail_pulley_diameter_in)} in",
            f"  Pulley face length:   {_num(o.pulley_face_length_in)} in",
            f"  Drive shaft:          {_num(o.drive_shaft_diameter_in, 3)} in",
            f"  Tail shaft:           {_num(o.tail_shaft_diameter_in, 3)} in",
            "",
            "Frame",
            f"  Frame height:         {_num(o.effective_frame_height_in)} in",
            f"  Snub rollers:         {'yes' if o.requires_snub_rollers else 'no'}",
            f"  Gravity rollers:      {o.gravity_roller_quantity}",
            "",
        ]
        if o.target_pph is not None:
            lines.extend(
                [
                    "Throughput",
                    f"  Capacity:             {_num(o.capacity_pph, 0)} pph",
                    f"  Target:               {_num(o.target_pph, 0)} pph",
                    f"  Meets target:         {'yes' if o.meets_throughput else 'no'}",
                    "",
                ]
            )
        if o.premium_flags.is_premium:
            lines.append(f"Premium level: {o.premium_flags.level.value}")
            lines.extend(f"  - {reason}" for reason in o.premium_flags.reasons)
            lines.append("")
        return lines


class TrackingReportFormatter:
    """Formats tracking guidance with one line per risk factor."""

    def format(self, guidance: TrackingGuidance) -> str:
        lines = [
            f"Recommendation: {guidance.recommendation.value}",
            f"Risk level: {guidance.risk_level.value}",
            guidance.summary,
            "",
            "Factors:",
        ]
        width = max((len(f.name) for f in guidance.factors), default=0)
        for factor in guidance.factors:
            lines.append(f"  {factor.name.ljust(width)}  {factor.risk.value:<6}  {factor.explanation}")

        if guidance.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  - {w}" for w in guidance.warnings)
        if guidance.notes:
            lines.append("")
            lines.append("Notes:")
            lines.extend(f"  - {n}" for n in guidance.notes)
        return "\n".join(lines)
