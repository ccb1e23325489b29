"""
Report Service - Composes tactical reports

Combines a FormationAnalysis and ChemistryAnalysis with the formation and
roster they were computed from. Renders the same report as structured data
(for JSON) and as plain text. Both renderings read the same fields; nothing
is recomputed here.
"""

from dataclasses import dataclass, fields, is_dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from models.tactics import Player, Formation
from models.analysis import ChemistryAnalysis, FormationAnalysis


@dataclass
class TacticalReport:
    """A formation/chemistry report snapshot."""
    formation: Formation
    players: List[Player]
    formation_analysis: FormationAnalysis
    chemistry_analysis: ChemistryAnalysis
    generated_at: str


def _serialize(value: Any) -> Any:
    """Recursively convert dataclasses and enums into JSON-safe values."""
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _serialize(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    return value


class ReportService:
    """Service for composing and rendering tactical reports."""

    SEPARATOR = "=" * 60
    RULE = "-" * 60

    @staticmethod
    def compose(formation: Formation, players: List[Player],
                formation_analysis: FormationAnalysis,
                chemistry_analysis: ChemistryAnalysis,
                generated_at: Optional[str] = None) -> TacticalReport:
        """
        Bundle both analyses with the inputs they were computed from.

        Args:
            formation: Analyzed formation
            players: Analyzed roster
            formation_analysis: Output of FormationAnalyzer
            chemistry_analysis: Output of ChemistryEngine
            generated_at: ISO timestamp, defaults to now

        Returns:
            TacticalReport
        """
        return TacticalReport(
            formation=formation,
            players=list(players),
            formation_analysis=formation_analysis,
            chemistry_analysis=chemistry_analysis,
            generated_at=generated_at or datetime.now(timezone.utc).isoformat(timespec='seconds'),
        )

    @staticmethod
    def to_dict(report: TacticalReport) -> Dict[str, Any]:
        """Structured rendering with every analysis field, snake_case keys."""
        return _serialize(report)

    @staticmethod
    def serialize(value: Any) -> Any:
        """Serialize any analysis value object for JSON responses."""
        return _serialize(value)

    @classmethod
    def to_text(cls, report: TacticalReport) -> str:
        """Human readable rendering of the same fields as to_dict."""
        formation = report.formation
        fa = report.formation_analysis
        ca = report.chemistry_analysis
        names = {p.id: p.name for p in report.players}

        lines = [
            cls.SEPARATOR,
            "TACTICAL ANALYSIS REPORT",
            cls.SEPARATOR,
            f"Formation: {formation.display_name} ({formation.name}) [{formation.id}]",
            f"Category: {formation.category.value} | Difficulty: {formation.difficulty.value} "
            f"| Popularity: {formation.popularity}/10",
            f"Generated: {report.generated_at}",
        ]
        if formation.description:
            lines.append(f"Description: {formation.description}")
        if formation.best_for:
            lines.append(f"Best for: {', '.join(formation.best_for)}")
        if formation.famous_teams:
            lines.append(f"Famous teams: {', '.join(formation.famous_teams)}")
        if formation.strengths:
            lines.append(f"Declared strengths: {', '.join(formation.strengths)}")
        if formation.weaknesses:
            lines.append(f"Declared weaknesses: {', '.join(formation.weaknesses)}")

        lines.append("")
        lines.append("POSITIONS")
        lines.append(cls.RULE)
        for slot in formation.positions:
            lines.append(f"  {slot.label or slot.role_id}: {slot.role_id} at ({slot.x:g}, {slot.y:g})")
        if not formation.positions:
            lines.append("  No positions")

        lines.append("")
        lines.append("SQUAD")
        lines.append(cls.RULE)
        for p in report.players:
            attributes = ", ".join(f"{k} {v:.0f}" for k, v in p.attributes.items())
            entry = (f"  {p.name} [{p.id}] - {p.role_id or 'N/A'}, {p.nationality or 'N/A'}, "
                     f"age {p.age}, overall {p.overall:.0f}")
            if attributes:
                entry += f" ({attributes})"
            lines.append(entry)
        if not report.players:
            lines.append("  No players")

        lines.append("")
        lines.append(f"OVERALL SCORE: {fa.overall_score:.1f}/100")

        balance = fa.tactical_balance
        lines.append("")
        lines.append("TACTICAL BALANCE")
        lines.append(cls.RULE)
        lines.append(f"  Defensive:   {balance.defensive:.1f}")
        lines.append(f"  Attacking:   {balance.attacking:.1f}")
        lines.append(f"  Possession:  {balance.possession:.1f}")
        lines.append(f"  Width:       {balance.width:.1f}")
        lines.append(f"  Compactness: {balance.compactness:.1f}")

        lines.append("")
        lines.append("STRENGTHS")
        lines.append(cls.RULE)
        for s in fa.strengths:
            lines.append(f"  + {s.aspect} ({s.score:.1f}, {s.impact.value} impact): {s.description}")
        if not fa.strengths:
            lines.append("  None identified")

        lines.append("")
        lines.append("WEAKNESSES")
        lines.append(cls.RULE)
        for w in fa.weaknesses:
            lines.append(f"  - {w.aspect} (severity {w.severity:.1f}): {w.description}")
            lines.append(f"    Solution: {w.solution}")
        if not fa.weaknesses:
            lines.append("  None identified")

        lines.append("")
        lines.append("RECOMMENDATIONS")
        lines.append(cls.RULE)
        for r in fa.recommendations:
            lines.append(f"  [{r.priority.value.upper()}] {r.title} ({r.category.value}): {r.description}")
        if not fa.recommendations:
            lines.append("  None")

        lines.append("")
        lines.append("PLAYER SUITABILITY")
        lines.append(cls.RULE)
        for ps in fa.player_suitability:
            lines.append(f"  {names.get(ps.player_id, ps.player_id)} [{ps.player_id}] -> "
                         f"{ps.position_id}: {ps.suitability_score:.1f}")
            for reason in ps.reasons:
                lines.append(f"    * {reason}")

        lines.append("")
        lines.append("CHEMISTRY")
        lines.append(cls.RULE)
        lines.append(f"  Overall chemistry: {ca.overall_chemistry:.1f}")
        lines.append(f"  Team cohesion:     {ca.team_cohesion:.1f}")

        lines.append("")
        lines.append("PLAYER CHEMISTRY")
        lines.append(cls.RULE)
        for pc in ca.player_chemistry:
            lines.append(f"  {names.get(pc.player_id, pc.player_id)} [{pc.player_id}]: "
                         f"{pc.individual_chemistry:.1f} ({pc.connections} connections)")
            for factor in pc.factors:
                lines.append(f"    * {factor}")

        lines.append("")
        lines.append("CHEMISTRY MATRIX")
        lines.append(cls.RULE)
        for c in ca.chemistry_matrix:
            lines.append(f"  {names.get(c.player1_id, c.player1_id)} [{c.player1_id}] <-> "
                         f"{names.get(c.player2_id, c.player2_id)} [{c.player2_id}]: "
                         f"{c.connection_strength:.1f}")
            for factor in c.factors:
                lines.append(f"    * {factor}")
        if not ca.chemistry_matrix:
            lines.append("  No significant connections")

        lines.append("")
        lines.append("CHEMISTRY RECOMMENDATIONS")
        lines.append(cls.RULE)
        for r in ca.recommendations:
            lines.append(f"  [{r.priority.value.upper()}] {r.kind.value}: {r.message} "
                         f"(players: {', '.join(r.player_ids)})")
        if not ca.recommendations:
            lines.append("  None")

        lines.append(cls.SEPARATOR)
        return "\n".join(lines) + "\n"
