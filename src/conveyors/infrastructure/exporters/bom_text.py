"""Clipboard-ready gearmotor BOM text.

Format::

    NORD FLEXBLOC Gearmotor BOM
    Selected Model: <model_type>
    Catalog Page: <catalog_page if known>

    1) Gear Unit: <part number>  | <description>
    2) Motor (STD or BRK): <part number>  | <description>
    3) Adapter: <part number>  | <description>
    4) Output Shaft Kit: <part number or placeholder>  | <description>
    5) Hollow Shaft Bushing: ...            (only when a bore was requested)

    Notes:
    - Applied SF: <value>
    - Catalog SF: <value>
    - MISSING: <label> PN (<reason>)

Components are always listed in the same order. A placeholder dash is only
ever written next to a component without an orderable part number, and it
always carries a qualifier except for a plain Missing component.
"""

from __future__ import annotations

from conveyors.application.dtos import BomOutput
from conveyors.domain.services.bom import (
    COMPONENT_LABELS,
    BomComponent,
    Configured,
    Missing,
    NotRequired,
    Resolved,
    missing_hint,
)
from conveyors.domain.value_objects import ComponentType

PLACEHOLDER = "—"
HEADER = "NORD FLEXBLOC Gearmotor BOM"
MULTIPLE_MATCHES_NOTE = "- NOTE: Multiple matches existed; selected first deterministic match."

# Listed even when absent from the resolution; the bushing only when present.
_ALWAYS_LISTED = (
    ComponentType.GEAR_UNIT,
    ComponentType.MOTOR,
    ComponentType.ADAPTER,
    ComponentType.OUTPUT_SHAFT_KIT,
)


class BomCopyTextFormatter:
    """Formats a resolved BOM as plain text for ordering."""

    def format(self, output: BomOutput) -> str:
        resolution = output.resolution
        lines = [HEADER, f"Selected Model: {resolution.model_type or PLACEHOLDER}"]
        if output.catalog_page:
            lines.append(f"Catalog Page: {output.catalog_page}")
        lines.append("")

        order = list(_ALWAYS_LISTED)
        if resolution.component(ComponentType.HOLLOW_SHAFT_BUSHING) is not None:
            order.append(ComponentType.HOLLOW_SHAFT_BUSHING)

        missing: list[str] = []
        for index, component_type in enumerate(order, start=1):
            label = COMPONENT_LABELS[component_type]
            component = resolution.component(component_type) or BomComponent(
                component_type, Missing()
            )
            lines.append(f"{index}) {label}: {_part_cell(component)}  | {_description(component)}")

            reason = _missing_reason(component)
            if reason is not None:
                missing.append(f"- MISSING: {label} PN ({reason})")

        lines.append("")
        lines.append("Notes:")
        lines.append(f"- Applied SF: {output.applied_sf:g}")
        lines.append(f"- Catalog SF: {output.catalog_sf:g}")
        if resolution.had_multiple_matches:
            lines.append(MULTIPLE_MATCHES_NOTE)
        lines.extend(missing)
        return "\n".join(lines)


def _part_cell(component: BomComponent) -> str:
    match component.outcome:
        case Resolved(part_number=part_number):
            return part_number
        case NotRequired():
            return f"{PLACEHOLDER} (not required)"
        case Configured():
            return f"{PLACEHOLDER} (PN pending, not included in order)"
        case Missing() if component.component_type == ComponentType.OUTPUT_SHAFT_KIT:
            return f"{PLACEHOLDER} (select in Drive Arrangement)"
        case _:
            return PLACEHOLDER


def _description(component: BomComponent) -> str:
    return component.description or PLACEHOLDER


def _missing_reason(component: BomComponent) -> str | None:
    match component.outcome:
        case Resolved() | NotRequired():
            return None
        case Configured(selection_label=label):
            return f"{label} selected; PN pending catalog verification."
        case _:
            return missing_hint(component.component_type)


def format_bom_copy_text(output: BomOutput) -> str:
    """Render a BOM as clipboard text with the default formatter."""
    return BomCopyTextFormatter().format(output)
