"""
Formation Analyzer - Tactical insight for a formation and roster

Single-pass pipeline:
classify slots -> tactical balance -> strengths/weaknesses ->
player suitability -> recommendations -> overall score.
"""

import statistics
from typing import List, Optional, Sequence

from models.tactics import Player, Formation, AnalysisContext
from models.analysis import (
    FormationAnalysis,
    PlayerSuitabilityAnalysis,
    TacticalBalance,
    TacticalRecommendation,
    TacticalStrength,
    TacticalWeakness,
)
from models.constants import (
    DEFAULT_FORMATION_THRESHOLDS,
    FormationCategory,
    FormationThresholds,
    Difficulty,
    Impact,
    MatchSituation,
    PositionZone,
    Priority,
    PRIORITY_ORDER,
    RecommendationCategory,
    clamp,
)


# Default note per formation category: (title, description, priority)
CATEGORY_NOTES = {
    FormationCategory.ATTACKING: (
        'High Fitness Required',
        'Attacking formations require high fitness levels. Monitor player stamina.',
        Priority.MEDIUM,
    ),
    FormationCategory.DEFENSIVE: (
        'Prepare Counter-Attack Outlets',
        'Deep blocks invite pressure. Drill quick transitions to a fast outlet player.',
        Priority.MEDIUM,
    ),
    FormationCategory.BALANCED: (
        'Maintain Shape Between Lines',
        'Balanced setups rely on discipline. Keep distances between lines short.',
        Priority.LOW,
    ),
    FormationCategory.MODERN: (
        'Rehearse Positional Rotations',
        'Modern systems depend on rotations. Walk through in-possession movements in training.',
        Priority.LOW,
    ),
    FormationCategory.CLASSIC: (
        'Keep Roles Simple',
        'Classic shapes work best with clear, well understood individual duties.',
        Priority.LOW,
    ),
}


class FormationAnalyzer:
    """Stateless formation analyzer. Safe to share between threads."""

    def __init__(self, thresholds: FormationThresholds = DEFAULT_FORMATION_THRESHOLDS):
        self.thresholds = thresholds

    def analyze_formation(self, formation: Formation, players: Sequence[Player],
                          context: Optional[AnalysisContext] = None) -> FormationAnalysis:
        """
        Analyze a formation for a roster.

        Args:
            formation: Formation to analyze
            players: Roster (may be empty)
            context: Optional match situation / opposing formation

        Returns:
            FormationAnalysis
        """
        players = list(players)
        balance = self.calculate_tactical_balance(formation)
        strengths = self.identify_strengths(formation, balance)
        weaknesses = self.identify_weaknesses(formation, balance)
        suitability = self.analyze_player_suitability(formation, players)
        recommendations = self.generate_recommendations(formation, players, context)
        overall = self.calculate_overall_score(balance, strengths, weaknesses)

        return FormationAnalysis(
            overall_score=overall,
            strengths=strengths,
            weaknesses=weaknesses,
            recommendations=recommendations,
            player_suitability=suitability,
            tactical_balance=balance,
        )

    # ========== BALANCE ==========

    def classify_slot(self, y: float) -> PositionZone:
        t = self.thresholds
        if y > t.defender_min_y:
            return PositionZone.DEFENDER
        if y < t.attacker_max_y:
            return PositionZone.ATTACKER
        return PositionZone.MIDFIELDER

    def count_zones(self, formation: Formation) -> dict:
        counts = {zone: 0 for zone in PositionZone}
        for slot in formation.positions:
            counts[self.classify_slot(slot.y)] += 1
        return counts

    def calculate_tactical_balance(self, formation: Formation) -> TacticalBalance:
        """
        Derive the five balance dimensions from slot coordinates only.

        A formation with no slots has zero width and full compactness.
        """
        t = self.thresholds
        counts = self.count_zones(formation)
        defenders = counts[PositionZone.DEFENDER]
        midfielders = counts[PositionZone.MIDFIELDER]
        attackers = counts[PositionZone.ATTACKER]

        xs = [slot.x for slot in formation.positions]
        ys = [slot.y for slot in formation.positions]

        width = max(xs) - min(xs) if xs else 0.0
        variance = statistics.pvariance(ys) if ys else 0.0
        compactness = 100 - min(variance / t.compactness_variance_divisor, 100)

        return TacticalBalance(
            defensive=clamp((defenders / t.defender_reference_count) * 100 + t.zone_floor),
            attacking=clamp((attackers / t.attacker_reference_count) * 100 + t.zone_floor),
            possession=clamp(midfielders * t.possession_per_midfielder),
            width=clamp(width),
            compactness=clamp(compactness),
        )

    # ========== STRENGTHS & WEAKNESSES ==========

    def identify_strengths(self, formation: Formation, balance: TacticalBalance) -> List[TacticalStrength]:
        t = self.thresholds
        strengths = []

        if balance.defensive > t.strong_defensive:
            strengths.append(TacticalStrength(
                aspect='Defensive Stability',
                score=balance.defensive,
                description='Strong defensive structure with good coverage',
                impact=Impact.HIGH,
            ))

        if balance.attacking > t.strong_attacking:
            strengths.append(TacticalStrength(
                aspect='Attacking Threat',
                score=balance.attacking,
                description='Multiple attacking options and goal threats',
                impact=Impact.HIGH,
            ))

        if balance.possession > t.strong_possession:
            strengths.append(TacticalStrength(
                aspect='Midfield Control',
                score=balance.possession,
                description='Dominates midfield and controls possession',
                impact=Impact.HIGH,
            ))

        if balance.width > t.strong_width:
            strengths.append(TacticalStrength(
                aspect='Width and Flanks',
                score=balance.width,
                description='Excellent width stretching opponent defense',
                impact=Impact.MEDIUM,
            ))

        if balance.compactness > t.strong_compactness:
            strengths.append(TacticalStrength(
                aspect='Team Compactness',
                score=balance.compactness,
                description='Compact shape making it hard to play through',
                impact=Impact.MEDIUM,
            ))

        for idx, declared in enumerate(formation.strengths):
            if len(strengths) >= t.declared_strength_limit:
                break
            strengths.append(TacticalStrength(
                aspect=declared,
                score=clamp(t.declared_strength_score - idx * t.declared_strength_step),
                description=f"{declared} - A key strength of this formation",
                impact=Impact.MEDIUM,
            ))

        strengths.sort(key=lambda s: s.score, reverse=True)
        return strengths[:t.max_strengths]

    def identify_weaknesses(self, formation: Formation, balance: TacticalBalance) -> List[TacticalWeakness]:
        t = self.thresholds
        weaknesses = []

        if balance.defensive < t.weak_defensive:
            weaknesses.append(TacticalWeakness(
                aspect='Defensive Vulnerability',
                severity=clamp(100 - balance.defensive),
                description='Weak defensive coverage leaves team exposed',
                solution='Add defensive midfielder or drop attackers deeper',
            ))

        if balance.attacking < t.weak_attacking:
            weaknesses.append(TacticalWeakness(
                aspect='Limited Attacking Options',
                severity=clamp(100 - balance.attacking),
                description='Few players in attacking positions',
                solution='Push midfielders higher or add attackers',
            ))

        if balance.width < t.weak_width:
            weaknesses.append(TacticalWeakness(
                aspect='Lack of Width',
                severity=clamp(100 - balance.width),
                description='Formation is too narrow, easy to defend against',
                solution='Use wing-backs or wide midfielders',
            ))

        for idx, declared in enumerate(formation.weaknesses):
            weaknesses.append(TacticalWeakness(
                aspect=declared,
                severity=clamp(t.declared_weakness_severity - idx * t.declared_weakness_step),
                description=f"{declared} - Known weakness of this formation",
                solution='Consider tactical adjustments or player selection',
            ))

        weaknesses.sort(key=lambda w: w.severity, reverse=True)
        return weaknesses[:t.max_weaknesses]

    # ========== RECOMMENDATIONS ==========

    def generate_recommendations(self, formation: Formation, players: Sequence[Player],
                                 context: Optional[AnalysisContext] = None) -> List[TacticalRecommendation]:
        """
        Build recommendations from match context, formation and roster size.

        Sorted critical > high > medium > low, insertion order within a tier.
        """
        t = self.thresholds
        recommendations = []
        situation = context.match_situation if context else None

        if situation == MatchSituation.LEADING and formation.category == FormationCategory.ATTACKING:
            recommendations.append(TacticalRecommendation(
                title='Consider More Defensive Setup',
                description='You are leading. Consider a more defensive formation to protect the lead.',
                priority=Priority.HIGH,
                category=RecommendationCategory.STRATEGIC,
            ))

        if situation == MatchSituation.LOSING and formation.category == FormationCategory.DEFENSIVE:
            recommendations.append(TacticalRecommendation(
                title='Increase Attacking Threat',
                description='You need goals. Consider a more attacking formation.',
                priority=Priority.CRITICAL,
                category=RecommendationCategory.STRATEGIC,
            ))

        if formation.difficulty == Difficulty.EXPERT:
            recommendations.append(TacticalRecommendation(
                title='Complex Formation Requires Training',
                description='This is an advanced formation. Ensure players understand their roles.',
                priority=Priority.HIGH,
                category=RecommendationCategory.TACTICAL,
            ))

        if len(players) < t.full_squad_size:
            recommendations.append(TacticalRecommendation(
                title='Insufficient Players',
                description=f"You have {len(players)} players. Need {t.full_squad_size} for full formation.",
                priority=Priority.CRITICAL,
                category=RecommendationCategory.PERSONNEL,
            ))

        if context and context.opposing_formation is not None:
            ours = self.count_zones(formation)[PositionZone.MIDFIELDER]
            theirs = self.count_zones(context.opposing_formation)[PositionZone.MIDFIELDER]
            if theirs > ours:
                recommendations.append(TacticalRecommendation(
                    title='Outnumbered in Midfield',
                    description=(f"{context.opposing_formation.display_name} fields {theirs} midfielders "
                                 f"against your {ours}. Tuck a forward in when defending."),
                    priority=Priority.MEDIUM,
                    category=RecommendationCategory.POSITIONING,
                ))

        note = CATEGORY_NOTES.get(formation.category)
        if note:
            title, description, priority = note
            recommendations.append(TacticalRecommendation(
                title=title,
                description=description,
                priority=priority,
                category=RecommendationCategory.TACTICAL,
            ))

        recommendations.sort(key=lambda r: PRIORITY_ORDER[r.priority])
        return recommendations[:t.max_recommendations]

    # ========== SUITABILITY ==========

    def analyze_player_suitability(self, formation: Formation,
                                   players: Sequence[Player]) -> List[PlayerSuitabilityAnalysis]:
        t = self.thresholds
        results = []

        for player in players:
            slot = next((s for s in formation.positions if s.role_id == player.role_id), None)
            if slot is None:
                results.append(PlayerSuitabilityAnalysis(
                    player_id=player.id,
                    position_id='N/A',
                    suitability_score=t.no_match_score,
                    reasons=['No exact position match in this formation'],
                ))
                continue

            score = self.calculate_player_suitability(player, slot.role_id)
            results.append(PlayerSuitabilityAnalysis(
                player_id=player.id,
                position_id=slot.role_id,
                suitability_score=score,
                reasons=self.get_suitability_reasons(player, slot.role_id, score),
            ))

        return results

    def calculate_player_suitability(self, player: Player, role_id: str) -> float:
        """
        Score a player for a role: 90 for their natural role, 60 otherwise,
        adjusted by a third of the rating distance from 70.
        """
        t = self.thresholds
        score = t.exact_role_base if player.role_id == role_id else t.role_agnostic_base
        score += (player.overall - t.rating_pivot) / t.rating_divisor
        return clamp(score)

    def get_suitability_reasons(self, player: Player, role_id: str, score: float) -> List[str]:
        t = self.thresholds
        reasons = []

        if player.role_id == role_id:
            reasons.append('Natural position match')
        else:
            reasons.append('Not natural position - adaptability required')

        if player.overall >= t.high_rating:
            reasons.append('High overall rating provides versatility')
        elif player.overall < t.low_rating:
            reasons.append('Lower rating may struggle in this role')

        if score >= t.excellent_fit:
            reasons.append('Excellent fit for this position')
        elif score < t.poor_fit:
            reasons.append('Consider alternative player for this role')

        return reasons[:t.max_reasons]

    # ========== OVERALL ==========

    def calculate_overall_score(self, balance: TacticalBalance,
                                strengths: Sequence[TacticalStrength],
                                weaknesses: Sequence[TacticalWeakness]) -> float:
        """
        Weighted headline score. Compactness is left out of the balance term;
        an empty strengths or weaknesses list contributes 0.
        """
        t = self.thresholds
        balance_score = statistics.mean([
            balance.defensive, balance.attacking, balance.possession, balance.width,
        ])
        strength_bonus = statistics.mean([s.score for s in strengths]) if strengths else 0.0
        weakness_penalty = statistics.mean([w.severity for w in weaknesses]) if weaknesses else 0.0

        overall = (balance_score * t.balance_weight
                   + strength_bonus * t.strength_weight
                   - weakness_penalty * t.weakness_weight)
        return clamp(overall)
