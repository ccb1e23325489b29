"""
Tactical Analysis Manager - Orchestrates the analysis workflow.
"""

from typing import Optional, Tuple, List

from flask import current_app, has_app_context

from analyzers.chemistry_engine import ChemistryEngine
from analyzers.formation_analyzer import FormationAnalyzer
from models.tactics import Formation, Player, AnalysisContext
from models.analysis import ChemistryAnalysis, FormationAnalysis
from models.formation_library import get_formation_by_id
from schemas.tactics import (
    FormationRequestSchema,
    build_context,
    validate_chemistry_request,
    validate_formation_request,
)
from services.report_service import ReportService, TacticalReport


class FormationNotFoundError(LookupError):
    """Raised when a formation id is not in the library."""

    def __init__(self, formation_id: str):
        super().__init__(f"Unknown formation: {formation_id}")
        self.formation_id = formation_id


class TacticalAnalysisManager:
    """
    Manages the end-to-end analysis process.
    1. Validates the raw payload
    2. Resolves library formations
    3. Runs the engines
    4. Composes reports

    Construct one per request; engines hold no mutable state.
    """

    def __init__(self, max_roster_size: int = 40):
        self.max_roster_size = max_roster_size
        self.chemistry_engine = ChemistryEngine()
        self.formation_analyzer = FormationAnalyzer()
        self.report_service = ReportService()

    def analyze_chemistry(self, payload: dict) -> Tuple[List[Player], ChemistryAnalysis]:
        """
        Validate a roster payload and compute chemistry.

        Raises:
            ValueError: If the payload is invalid
        """
        request = validate_chemistry_request(payload)
        players = self._players(request)
        analysis = self.chemistry_engine.compute_team_chemistry(players)
        self._log(f"Chemistry computed for {len(players)} players "
                  f"(overall {analysis.overall_chemistry:.1f})")
        return players, analysis

    def analyze_formation(self, payload: dict) -> Tuple[Formation, List[Player], FormationAnalysis]:
        """
        Validate a formation payload and run the formation analyzer.

        Raises:
            ValueError: If the payload is invalid
            FormationNotFoundError: If a referenced formation id is unknown
        """
        request = validate_formation_request(payload)
        formation, players, context = self._resolve(request)
        analysis = self.formation_analyzer.analyze_formation(formation, players, context)
        self._log(f"Formation {formation.id} analyzed for {len(players)} players "
                  f"(score {analysis.overall_score:.1f})")
        return formation, players, analysis

    def build_report(self, payload: dict) -> TacticalReport:
        """
        Run both engines on one payload and compose a report.

        Raises:
            ValueError: If the payload is invalid
            FormationNotFoundError: If a referenced formation id is unknown
        """
        request = validate_formation_request(payload)
        formation, players, context = self._resolve(request)
        formation_analysis = self.formation_analyzer.analyze_formation(formation, players, context)
        chemistry_analysis = self.chemistry_engine.compute_team_chemistry(players)
        self._log(f"Report composed for {formation.id} with {len(players)} players")
        return self.report_service.compose(formation, players, formation_analysis, chemistry_analysis)

    def _players(self, request) -> List[Player]:
        if len(request.players) > self.max_roster_size:
            raise ValueError(
                f"Roster too large: {len(request.players)} players (max {self.max_roster_size})"
            )
        return request.to_players()

    def _resolve(self, request: FormationRequestSchema) -> Tuple[Formation, List[Player], Optional[AnalysisContext]]:
        players = self._players(request)

        if request.formation is not None:
            formation = request.formation.to_model()
        else:
            formation = self._lookup(request.formation_id)

        opposing = None
        if request.context is not None and request.context.opposing_formation_id:
            opposing = self._lookup(request.context.opposing_formation_id)
        context = build_context(request.context, opposing)

        return formation, players, context

    @staticmethod
    def _lookup(formation_id: str) -> Formation:
        formation = get_formation_by_id(formation_id)
        if formation is None:
            raise FormationNotFoundError(formation_id)
        return formation

    @staticmethod
    def _log(message: str):
        if has_app_context():
            current_app.logger.info(message)
