"""
Chemistry Engine - Scores player compatibility across a roster

Computes per-player chemistry, the pairwise chemistry matrix, team
cohesion and chemistry recommendations. Independent of formation.
"""

from collections import Counter
from typing import Dict, List, Optional, Sequence

from models.tactics import Player
from models.analysis import (
    ChemistryAnalysis,
    ChemistryConnection,
    ChemistryRecommendation,
    PlayerChemistryScore,
)
from models.constants import (
    ChemistryWeights,
    ChemistryRecommendationKind,
    DEFAULT_CHEMISTRY_WEIGHTS,
    Priority,
    clamp,
)
from models.role_adjacency import ROLE_ADJACENCY, are_roles_adjacent


class ChemistryEngine:
    """Stateless chemistry scorer. Safe to share between threads."""

    def __init__(self, weights: ChemistryWeights = DEFAULT_CHEMISTRY_WEIGHTS,
                 adjacency=ROLE_ADJACENCY):
        self.weights = weights
        self.adjacency = adjacency

    def compute_team_chemistry(self, players: Sequence[Player]) -> ChemistryAnalysis:
        """
        Compute chemistry for a full roster.

        Args:
            players: Roster to analyze (may be empty)

        Returns:
            ChemistryAnalysis with individual scores, matrix, cohesion and
            recommendations
        """
        players = list(players)
        if not players:
            return ChemistryAnalysis(
                overall_chemistry=0.0,
                player_chemistry=[],
                chemistry_matrix=[],
                team_cohesion=0.0,
                recommendations=[],
            )

        average_age = sum(p.age for p in players) / len(players)
        nationality_counts = Counter(p.nationality for p in players if p.nationality)

        player_chemistry = [
            self.calculate_individual_chemistry(player, players, average_age, nationality_counts)
            for player in players
        ]

        all_connections = self.calculate_connections(players)
        chemistry_matrix = [
            c for c in all_connections
            if c.connection_strength > self.weights.matrix_min_strength
        ]
        # Stable sort keeps roster pair order for ties
        chemistry_matrix.sort(key=lambda c: c.connection_strength, reverse=True)

        overall = sum(s.individual_chemistry for s in player_chemistry) / len(player_chemistry)
        cohesion = self.calculate_team_cohesion(players, all_connections)
        recommendations = self.generate_recommendations(players, player_chemistry, nationality_counts)

        return ChemistryAnalysis(
            overall_chemistry=overall,
            player_chemistry=player_chemistry,
            chemistry_matrix=chemistry_matrix,
            team_cohesion=cohesion,
            recommendations=recommendations,
        )

    # ========== INDIVIDUAL ==========

    def calculate_individual_chemistry(self, player: Player, players: Sequence[Player],
                                       average_age: float,
                                       nationality_counts: Optional[Dict[str, int]] = None
                                       ) -> PlayerChemistryScore:
        """
        Score one player's chemistry with the rest of the roster.

        Bonuses apply in order (nationality, role familiarity, rating, age)
        and the total is clamped to 0-100 at the end.
        """
        w = self.weights
        if nationality_counts is None:
            nationality_counts = Counter(p.nationality for p in players if p.nationality)

        score = w.base_score
        factors = []

        # Nationality
        if player.nationality:
            compatriots = nationality_counts.get(player.nationality, 0) - 1
            if compatriots > 0:
                bonus = min(w.nationality_bonus_cap, w.nationality_bonus_per_teammate * compatriots)
                score += bonus
                factors.append(f"Shares nationality ({player.nationality}) with {compatriots} teammate(s)")

        # Role familiarity
        if player.role_id:
            score += w.role_familiarity_bonus
            factors.append(f"Familiar with {player.role_id} role")

        # Rating
        if player.overall >= w.elite_rating_threshold:
            score += w.elite_rating_bonus
            factors.append("Elite rating lifts teammates")
        elif player.overall < w.low_rating_threshold:
            score -= w.low_rating_penalty
            factors.append("Low rating limits understanding")

        # Age
        if abs(player.age - average_age) < w.age_compatibility_window:
            score += w.age_compatibility_bonus
            factors.append("Similar age to squad average")

        connections = sum(
            1 for other in players
            if other is not player and self._is_related(player, other)
        )

        return PlayerChemistryScore(
            player_id=player.id,
            individual_chemistry=clamp(score),
            connections=connections,
            factors=factors,
        )

    def _is_related(self, player: Player, other: Player) -> bool:
        """Same nationality or within the connection age window."""
        same_nationality = bool(player.nationality) and player.nationality == other.nationality
        close_in_age = abs(player.age - other.age) <= self.weights.connection_age_window
        return same_nationality or close_in_age

    # ========== PAIRWISE ==========

    def calculate_connection(self, player1: Player, player2: Player) -> ChemistryConnection:
        """
        Score the connection between two players.

        Symmetric: swapping the players yields the same strength and factors.
        """
        w = self.weights
        strength = 0.0
        factors = []

        if player1.nationality and player1.nationality == player2.nationality:
            strength += w.pair_same_nationality
            factors.append(f"Same nationality ({player1.nationality})")

        age_gap = abs(player1.age - player2.age)
        if age_gap <= w.pair_close_age_gap:
            strength += w.pair_close_age_bonus
            factors.append("Similar age")
        elif age_gap <= w.pair_near_age_gap:
            strength += w.pair_near_age_bonus
            factors.append("Close in age")

        if are_roles_adjacent(player1.role_id, player2.role_id, self.adjacency):
            strength += w.pair_adjacent_roles
            roles = '-'.join(sorted((player1.role_id, player2.role_id)))
            factors.append(f"Adjacent positions ({roles})")

        if abs(player1.overall - player2.overall) <= w.pair_rating_gap:
            strength += w.pair_similar_rating
            factors.append("Similar ability level")

        return ChemistryConnection(
            player1_id=player1.id,
            player2_id=player2.id,
            connection_strength=clamp(strength),
            factors=factors,
        )

    def calculate_connections(self, players: Sequence[Player]) -> List[ChemistryConnection]:
        """All unordered pairs, unfiltered, in roster pair order."""
        connections = []
        for i, player1 in enumerate(players):
            for player2 in players[i + 1:]:
                connections.append(self.calculate_connection(player1, player2))
        return connections

    # ========== AGGREGATES ==========

    def calculate_team_cohesion(self, players: Sequence[Player],
                                connections: Sequence[ChemistryConnection]) -> float:
        """
        Cohesion from the share of strong pairs, less a nationality diversity penalty.

        Args:
            players: Roster
            connections: Unfiltered pairwise connections

        Returns:
            Cohesion score (0-100), 0 for an empty roster
        """
        w = self.weights
        n = len(players)
        if n == 0:
            return 0.0

        max_pairs = n * (n - 1) / 2
        strong = sum(1 for c in connections if c.connection_strength >= w.strong_connection_strength)
        strong_ratio = strong / max_pairs if max_pairs > 0 else 0.0

        distinct_nationalities = len({p.nationality for p in players if p.nationality})
        diversity_penalty = max(
            0.0,
            (distinct_nationalities - w.diversity_free_nationalities) * w.diversity_penalty_per_nationality
        )

        return clamp(strong_ratio * w.cohesion_ratio_weight + w.cohesion_base - diversity_penalty)

    def generate_recommendations(self, players: Sequence[Player],
                                 scores: Sequence[PlayerChemistryScore],
                                 nationality_counts: Optional[Dict[str, int]] = None
                                 ) -> List[ChemistryRecommendation]:
        """
        Flag low-chemistry and isolated players, then note a national core.

        Isolation uses each player's connections count (shared nationality
        or close age), not the filtered chemistry matrix.
        """
        w = self.weights
        names = {p.id: p.name for p in players}
        recommendations = []

        for score in scores:
            if score.individual_chemistry < w.low_chemistry_threshold:
                recommendations.append(ChemistryRecommendation(
                    kind=ChemistryRecommendationKind.LOW_CHEMISTRY,
                    priority=Priority.HIGH,
                    message=(f"{names[score.player_id]} has low chemistry "
                             f"({score.individual_chemistry:.0f}). Pair them with compatible teammates."),
                    player_ids=[score.player_id],
                ))

        for score in scores:
            if score.connections < w.isolated_connection_threshold:
                recommendations.append(ChemistryRecommendation(
                    kind=ChemistryRecommendationKind.ISOLATED,
                    priority=Priority.MEDIUM,
                    message=(f"{names[score.player_id]} is isolated with {score.connections} "
                             f"connection(s). Consider players of similar age or nationality."),
                    player_ids=[score.player_id],
                ))

        if nationality_counts is None:
            nationality_counts = Counter(p.nationality for p in players if p.nationality)
        core = self._largest_national_core(nationality_counts)
        if core:
            members = [p for p in players if p.nationality == core]
            recommendations.append(ChemistryRecommendation(
                kind=ChemistryRecommendationKind.NATIONAL_CORE,
                priority=Priority.LOW,
                message=(f"Strong {core} core: "
                         f"{', '.join(p.name for p in members)}. Build partnerships around them."),
                player_ids=[p.id for p in members],
            ))

        return recommendations[:w.max_recommendations]

    def _largest_national_core(self, nationality_counts: Dict[str, int]) -> Optional[str]:
        """Largest nationality group meeting the core size; first seen wins ties."""
        best = None
        best_count = 0
        for nationality, count in nationality_counts.items():
            if count >= self.weights.national_core_size and count > best_count:
                best, best_count = nationality, count
        return best
