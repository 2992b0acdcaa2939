"""Output formatters for site assessments."""

import json

from siterisk.core.models import SiteAssessment
from siterisk.utils.config import settings


class SummaryFormatter:
    """Markdown summary for site engineers."""

    def format(self, result: SiteAssessment) -> str:
        cur = settings.cost.currency
        unit = settings.cost.area_unit
        cost = result.cost
        flood = result.flood_risk

        lines = [
            f"**SITE ASSESSMENT: {'HIGH RISK' if result.high_risk else 'Review'}**",
            f"**Location:** {result.address or f'{result.point.lat:.5f}, {result.point.lng:.5f}'}"
            f" | **Time:** {result.timestamp.strftime('%Y-%m-%d %H:%M')} UTC",
            "",
            "**HAZARDS:**",
            f"- Flood: {flood.level.value}"
            + ("" if flood.in_flood_extent else f" ({self._distance(flood.distance_km)} to extent)"),
        ]

        if result.earthquake_zone and result.zone_info:
            lines.append(
                f"- Seismic: {result.zone_info.zone} ({result.zone_info.pga}, {result.zone_info.risk_level})"
            )
        elif result.earthquake_zone:
            lines.append(f"- Seismic: {result.earthquake_zone.zone}")
        else:
            lines.append("- Seismic: not available")

        lines.append(f"- Elevation: {f'{result.elevation_m:.0f} m' if result.elevation_m is not None else 'not available'}")
        if result.climate:
            lines.append(f"- Climate: {result.climate.climate_zone}")

        lines.extend([
            "",
            "**COST:**",
            f"- Base: {cur} {cost.base_cost_per_unit:,.0f}/{unit}",
            f"- Adjusted: {cur} {cost.adjusted_cost_per_unit:,.0f}/{unit} (x{cost.total_multiplier:.2f})",
            f"- Total ({cost.reference_area:,.0f} {unit}): {cur} {cost.total_cost:,.0f}",
        ])
        if cost.additional_cost > 0:
            lines.append(
                f"- Additional: {cur} {cost.additional_cost:,.0f} ({cost.increase_pct:.1f}% increase)"
            )

        if result.zone_info and result.zone_info.construction_recommendations:
            lines.append("")
            lines.append("**RECOMMENDATIONS:**")
            for i, rec in enumerate(result.zone_info.construction_recommendations[:5], 1):
                lines.append(f"{i}. {rec}")

        if result.working_conditions:
            wc = result.working_conditions
            lines.extend(["", f"**WORKING CONDITIONS:** {wc.overall_level.upper()} ({wc.temperature_category})"])
            for issue in wc.upcoming_issues:
                lines.append(f"- {issue}")

        lines.extend([
            "---",
            f"*Assessment: {result.duration_seconds:.2f}s*",
        ])

        return "\n".join(lines)

    def _distance(self, km: float) -> str:
        if km >= settings.hazards.unknown_distance_km:
            return "distance unknown"
        return f"{km:.2f} km"


class DetailFormatter:
    """JSON with full details."""

    def format(self, result: SiteAssessment) -> dict:
        return result.to_dict()

    def to_json(self, result: SiteAssessment) -> str:
        return json.dumps(self.format(result), indent=2, default=str)


def format_output(result: SiteAssessment, style: str = "summary") -> str:
    if style == "detail":
        return DetailFormatter().to_json(result)
    return SummaryFormatter().format(result)
