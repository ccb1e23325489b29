"""
Analyzers Package

Contains the chemistry and formation analysis engines.
"""

from .chemistry_engine import ChemistryEngine
from .formation_analyzer import FormationAnalyzer

__all__ = ['ChemistryEngine', 'FormationAnalyzer']
