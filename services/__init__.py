"""
Services Package - Business Logic Layer

This package contains service classes that encapsulate business logic,
keeping route handlers thin and focused on HTTP concerns.
"""

from .report_service import ReportService, TacticalReport
from .tactical_analysis_manager import TacticalAnalysisManager, FormationNotFoundError

__all__ = ['ReportService', 'TacticalReport', 'TacticalAnalysisManager', 'FormationNotFoundError']
