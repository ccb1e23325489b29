"""
Pytest Configuration and Fixtures

Provides shared fixtures for testing the analysis engines and the Flask
application using the application factory pattern.
"""

import os

import pytest

# Config requires SECRET_KEY at import time
os.environ.setdefault('SECRET_KEY', 'test-secret-key-for-pytest')
os.environ['FLASK_ENV'] = 'testing'


@pytest.fixture(scope='session')
def test_config():
    """Test configuration class."""
    from config import TestingConfig
    return TestingConfig


@pytest.fixture
def app(test_config):
    """
    Create and configure a Flask application instance for testing.

    Uses the application factory pattern to create a clean instance
    for each test function.
    """
    from app import create_app
    app = create_app(test_config)

    ctx = app.app_context()
    ctx.push()

    yield app

    ctx.pop()


@pytest.fixture
def client(app):
    """Flask test client for making HTTP requests."""
    return app.test_client()


@pytest.fixture
def make_player():
    """Factory for Player models with sensible defaults."""
    from models import Player

    def _make(player_id, role_id=None, nationality=None, age=25, overall=75, name=None, **attributes):
        return Player(
            id=player_id,
            name=name or f"Player {player_id}",
            nationality=nationality,
            age=age,
            overall=overall,
            role_id=role_id,
            attributes=attributes,
        )

    return _make


@pytest.fixture
def chemistry_engine():
    from analyzers import ChemistryEngine
    return ChemistryEngine()


@pytest.fixture
def formation_analyzer():
    from analyzers import FormationAnalyzer
    return FormationAnalyzer()


@pytest.fixture
def formation_433():
    """Library 4-3-3 (attacking, intermediate)."""
    from models.formation_library import get_formation_by_id
    return get_formation_by_id('formation-4-3-3')


@pytest.fixture
def squad_433(make_player):
    """Eleven players matching the 4-3-3 roles, ratings spanning 60-90."""
    layout = [
        ('gk', 'GK', 'ENG', 29, 84),
        ('lb', 'LB', 'ENG', 24, 76),
        ('cb1', 'CB', 'FRA', 27, 88),
        ('cb2', 'CB', 'FRA', 31, 82),
        ('rb', 'RB', 'ENG', 22, 70),
        ('cm1', 'CM', 'ESP', 26, 90),
        ('cdm', 'CDM', 'BRA', 28, 79),
        ('cm2', 'CM', 'ENG', 23, 65),
        ('lw', 'LW', 'BRA', 21, 72),
        ('st', 'ST', 'ARG', 30, 86),
        ('rw', 'RW', 'ENG', 19, 60),
    ]
    return [
        make_player(pid, role_id=role, nationality=nat, age=age, overall=ovr)
        for pid, role, nat, age, ovr in layout
    ]


@pytest.fixture
def player_payload():
    """Raw JSON roster in the front end's camelCase shape."""
    return [
        {'id': 'p1', 'name': 'Alan Keeper', 'nationality': 'ENG', 'age': 28, 'overall': 82, 'roleId': 'GK'},
        {'id': 'p2', 'name': 'Ben Stopper', 'nationality': 'ENG', 'age': 26, 'overall': 80, 'roleId': 'CB'},
        {'id': 'p3', 'name': 'Carlos Pivot', 'nationality': 'ESP', 'age': 24, 'overall': 78, 'roleId': 'cdm'},
        {'id': 'p4', 'name': 'Dan Striker', 'nationality': 'ENG', 'age': 30, 'overall': 86, 'roleId': 'ST',
         'attributes': {'pace': 81, 'shooting': 88}},
    ]
