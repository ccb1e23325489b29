"""
Validation Schemas Package

Contains Pydantic models for input validation and data sanitization.
"""

from .tactics import PlayerSchema, FormationSchema, ChemistryRequestSchema, FormationRequestSchema

__all__ = ['PlayerSchema', 'FormationSchema', 'ChemistryRequestSchema', 'FormationRequestSchema']
