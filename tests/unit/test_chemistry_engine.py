"""
Unit tests for the chemistry engine.

Covers individual chemistry bonuses, pairwise connection strength,
team cohesion and chemistry recommendations.
"""

import itertools

import pytest

from analyzers.chemistry_engine import ChemistryEngine
from models.constants import ChemistryWeights, ChemistryRecommendationKind, Priority


class TestIndividualChemistry:
    """Test per-player chemistry scoring."""

    def test_all_compatriots_same_age_worked_example(self, chemistry_engine, make_player):
        """11 players, same nationality and age, overall 80, distinct roles: every score is 85."""
        roles = ['GK', 'CB', 'LB', 'RB', 'CDM', 'CM', 'CAM', 'LM', 'RM', 'LW', 'ST']
        players = [
            make_player(f"p{i}", role_id=role, nationality='ENG', age=26, overall=80)
            for i, role in enumerate(roles)
        ]

        analysis = chemistry_engine.compute_team_chemistry(players)

        assert len(analysis.player_chemistry) == 11
        for score in analysis.player_chemistry:
            assert score.individual_chemistry == 85
            assert score.connections == 10
        assert analysis.overall_chemistry == 85

    def test_overall_is_mean_of_individual_scores(self, chemistry_engine, make_player):
        """Three-player roster: 75, 50 and 65 average to 63.33."""
        players = [
            make_player('a', role_id='CB', nationality='ENG', age=20, overall=90),
            make_player('b', role_id=None, nationality='ENG', age=30, overall=55),
            make_player('c', role_id='ST', nationality='FRA', age=25, overall=70),
        ]

        analysis = chemistry_engine.compute_team_chemistry(players)
        scores = [s.individual_chemistry for s in analysis.player_chemistry]

        assert scores == [75, 50, 65]
        assert analysis.overall_chemistry == pytest.approx(sum(scores) / 3)
        assert analysis.overall_chemistry == pytest.approx(63.333, abs=0.01)

    def test_nationality_bonus_capped_at_twenty(self, chemistry_engine, make_player):
        players = [make_player(f"p{i}", nationality='BRA', age=20 + i * 10) for i in range(6)]

        score = chemistry_engine.compute_team_chemistry(players).player_chemistry[0]

        # 5 compatriots would be +25 uncapped; no role, rating 75, age 20 vs avg 45
        assert score.individual_chemistry == 70

    def test_low_rating_penalty(self, chemistry_engine, make_player):
        players = [make_player('solo', overall=55, age=25)]

        score = chemistry_engine.compute_team_chemistry(players).player_chemistry[0]

        # base 50 - 5 low rating + 5 age (equal to own average)
        assert score.individual_chemistry == 50
        assert "Low rating limits understanding" in score.factors

    def test_elite_rating_bonus(self, chemistry_engine, make_player):
        players = [make_player('star', overall=85, age=25, role_id='ST')]

        score = chemistry_engine.compute_team_chemistry(players).player_chemistry[0]

        assert score.individual_chemistry == 50 + 10 + 10 + 5

    def test_missing_optional_fields_do_not_raise(self, chemistry_engine, make_player):
        players = [make_player('x'), make_player('y', age=40)]

        analysis = chemistry_engine.compute_team_chemistry(players)

        assert len(analysis.player_chemistry) == 2
        for score in analysis.player_chemistry:
            assert 0 <= score.individual_chemistry <= 100

    def test_custom_weights_are_clamped(self, make_player):
        engine = ChemistryEngine(weights=ChemistryWeights(base_score=95))
        players = [make_player('a', role_id='CM', age=25, overall=90)]

        score = engine.compute_team_chemistry(players).player_chemistry[0]

        assert score.individual_chemistry == 100

    def test_connections_count_uses_nationality_or_age(self, chemistry_engine, make_player):
        players = [
            make_player('a', nationality='ENG', age=20),
            make_player('b', nationality='ENG', age=35),   # same nationality
            make_player('c', nationality='GER', age=25),   # age gap exactly 5
            make_player('d', nationality='ITA', age=26),   # age gap 6
        ]

        scores = chemistry_engine.compute_team_chemistry(players).player_chemistry

        assert scores[0].connections == 2


class TestPairwiseConnections:
    """Test connection strength and the chemistry matrix."""

    def test_maximum_pair_strength(self, chemistry_engine, make_player):
        p1 = make_player('a', role_id='CB', nationality='ENG', age=25, overall=80)
        p2 = make_player('b', role_id='CDM', nationality='ENG', age=27, overall=83)

        connection = chemistry_engine.calculate_connection(p1, p2)

        assert connection.connection_strength == 30 + 20 + 25 + 15
        assert len(connection.factors) == 4

    def test_connection_is_symmetric(self, chemistry_engine, squad_433):
        for p1, p2 in itertools.combinations(squad_433, 2):
            forward = chemistry_engine.calculate_connection(p1, p2)
            backward = chemistry_engine.calculate_connection(p2, p1)
            assert forward.connection_strength == backward.connection_strength
            assert forward.factors == backward.factors

    def test_adjacency_checked_in_either_direction(self, make_player):
        adjacency = {'GK': frozenset({'CB'}), 'CB': frozenset()}
        engine = ChemistryEngine(adjacency=adjacency)
        gk = make_player('gk', role_id='GK', age=20, overall=50)
        cb = make_player('cb', role_id='CB', age=40, overall=90)

        assert engine.calculate_connection(gk, cb).connection_strength == 25
        assert engine.calculate_connection(cb, gk).connection_strength == 25

    def test_near_age_bonus(self, chemistry_engine, make_player):
        p1 = make_player('a', age=20, overall=50)
        p2 = make_player('b', age=25, overall=90)

        assert chemistry_engine.calculate_connection(p1, p2).connection_strength == 10

    def test_matrix_filters_weak_and_sorts_descending(self, chemistry_engine, squad_433):
        analysis = chemistry_engine.compute_team_chemistry(squad_433)
        strengths = [c.connection_strength for c in analysis.chemistry_matrix]

        assert all(s > 30 for s in strengths)
        assert strengths == sorted(strengths, reverse=True)

    def test_connection_of_exactly_thirty_excluded(self, chemistry_engine, make_player):
        players = [
            make_player('a', nationality='ENG', age=20, overall=50),
            make_player('b', nationality='ENG', age=40, overall=90),
        ]

        analysis = chemistry_engine.compute_team_chemistry(players)

        assert analysis.chemistry_matrix == []


class TestTeamCohesion:
    """Test the cohesion aggregate."""

    def test_all_strong_pairs_full_cohesion(self, chemistry_engine, make_player):
        players = [
            make_player('a', role_id='CB', nationality='ENG', age=25, overall=80),
            make_player('b', role_id='CDM', nationality='ENG', age=27, overall=83),
        ]

        assert chemistry_engine.compute_team_chemistry(players).team_cohesion == 100

    def test_diversity_penalty(self, chemistry_engine, make_player):
        nations = ['ENG', 'FRA', 'ESP', 'GER', 'ITA']
        players = [
            make_player(f"p{i}", nationality=nat, age=18 + i * 8, overall=40 + i * 12)
            for i, nat in enumerate(nations)
        ]

        # no strong pairs, 5 nationalities -> 20 - 10
        assert chemistry_engine.compute_team_chemistry(players).team_cohesion == 10

    def test_pair_at_strong_threshold_counts(self, chemistry_engine, make_player):
        """One of three pairs scores exactly 70 and counts as strong."""
        players = [
            make_player('a', role_id='CB', nationality='ENG', age=20, overall=80),
            make_player('b', role_id='CDM', nationality='ENG', age=30, overall=83),
            make_player('c', role_id='ST', nationality='FRA', age=45, overall=50),
        ]

        analysis = chemistry_engine.compute_team_chemistry(players)
        strengths = [c.connection_strength for c in chemistry_engine.calculate_connections(players)]

        assert strengths == [70, 0, 0]
        assert analysis.team_cohesion == pytest.approx((1 / 3) * 80 + 20)

    def test_single_player_cohesion(self, chemistry_engine, make_player):
        analysis = chemistry_engine.compute_team_chemistry([make_player('a')])

        assert analysis.team_cohesion == 20
        assert analysis.chemistry_matrix == []


class TestChemistryRecommendations:
    """Test chemistry recommendation synthesis."""

    def test_low_chemistry_then_isolated(self, chemistry_engine, make_player):
        players = [
            make_player('a', age=20, overall=50),
            make_player('b', age=40, overall=50),
        ]

        recs = chemistry_engine.compute_team_chemistry(players).recommendations

        kinds = [r.kind for r in recs]
        assert kinds == [
            ChemistryRecommendationKind.LOW_CHEMISTRY,
            ChemistryRecommendationKind.LOW_CHEMISTRY,
            ChemistryRecommendationKind.ISOLATED,
            ChemistryRecommendationKind.ISOLATED,
        ]
        assert recs[0].priority == Priority.HIGH
        assert recs[2].priority == Priority.MEDIUM
        assert recs[0].player_ids == ['a']

    def test_recommendations_capped_at_five(self, chemistry_engine, make_player):
        players = [make_player(f"p{i}", age=18 + i * 7, overall=50) for i in range(6)]

        recs = chemistry_engine.compute_team_chemistry(players).recommendations

        assert len(recs) == 5
        assert all(r.kind == ChemistryRecommendationKind.LOW_CHEMISTRY for r in recs)

    def test_national_core(self, chemistry_engine, make_player):
        players = [
            make_player('b1', nationality='BRA', age=25, name='Bruno'),
            make_player('b2', nationality='BRA', age=26, name='Caio'),
            make_player('b3', nationality='BRA', age=27, name='Davi'),
            make_player('a1', nationality='ARG', age=25),
            make_player('a2', nationality='ARG', age=26),
        ]

        recs = chemistry_engine.compute_team_chemistry(players).recommendations
        core = [r for r in recs if r.kind == ChemistryRecommendationKind.NATIONAL_CORE]

        assert len(core) == 1
        assert core[0].priority == Priority.LOW
        assert core[0].player_ids == ['b1', 'b2', 'b3']
        assert 'BRA' in core[0].message
        assert 'Bruno' in core[0].message

    def test_no_core_below_three(self, chemistry_engine, make_player):
        players = [make_player('a', nationality='ENG'), make_player('b', nationality='ENG')]

        recs = chemistry_engine.compute_team_chemistry(players).recommendations

        assert not any(r.kind == ChemistryRecommendationKind.NATIONAL_CORE for r in recs)


class TestDegenerateInput:
    """Test empty rosters and repeat calls."""

    def test_empty_roster(self, chemistry_engine):
        analysis = chemistry_engine.compute_team_chemistry([])

        assert analysis.overall_chemistry == 0
        assert analysis.chemistry_matrix == []
        assert analysis.team_cohesion == 0
        assert analysis.recommendations == []
        assert analysis.player_chemistry == []

    def test_idempotent(self, chemistry_engine, squad_433):
        first = chemistry_engine.compute_team_chemistry(squad_433)
        second = chemistry_engine.compute_team_chemistry(squad_433)

        assert first == second

    def test_scores_in_range(self, chemistry_engine, squad_433):
        analysis = chemistry_engine.compute_team_chemistry(squad_433)

        assert 0 <= analysis.overall_chemistry <= 100
        assert 0 <= analysis.team_cohesion <= 100
        for score in analysis.player_chemistry:
            assert 0 <= score.individual_chemistry <= 100
        for connection in analysis.chemistry_matrix:
            assert 0 <= connection.connection_strength <= 100
