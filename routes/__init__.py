"""
Routes Package - Blueprint Registration

This package organizes Flask routes into modular blueprints.
"""

from .main import main_bp
from .tactics import tactics_bp

__all__ = ['main_bp', 'tactics_bp']
