"""
Tactics API Blueprint

JSON endpoints for the formation library, chemistry analysis,
formation analysis and tactical reports.
"""

from flask import Blueprint, request, jsonify, current_app, make_response

from extensions import csrf, limiter, ANALYSIS_LIMIT, REPORT_LIMIT
from models.formation_library import (
    PROFESSIONAL_FORMATIONS,
    get_formation_by_id,
    get_formations_by_category,
    get_formations_by_difficulty,
    get_popular_formations,
    search_formations,
)
from services.report_service import ReportService
from services.tactical_analysis_manager import TacticalAnalysisManager, FormationNotFoundError

tactics_bp = Blueprint('tactics', __name__, url_prefix='/api')

# JSON clients send no CSRF token
csrf.exempt(tactics_bp)


def _manager() -> TacticalAnalysisManager:
    """Fresh manager per request."""
    return TacticalAnalysisManager(max_roster_size=current_app.config.get('MAX_ROSTER_SIZE', 40))


def _formation_summary(formation) -> dict:
    return {
        'id': formation.id,
        'name': formation.name,
        'display_name': formation.display_name,
        'category': formation.category.value,
        'difficulty': formation.difficulty.value,
        'popularity': formation.popularity,
        'slot_count': formation.slot_count,
    }


def _bad_request(error: Exception):
    return jsonify({'error': 'Invalid request', 'details': [str(error)]}), 400


def _not_found(error: FormationNotFoundError):
    return jsonify({'error': str(error), 'formation_id': error.formation_id}), 404


@tactics_bp.route("/formations")
def list_formations():
    """
    List library formations.

    Query params: category, difficulty, q (search), popular (limit).
    """
    category = request.args.get('category')
    difficulty = request.args.get('difficulty')
    query = request.args.get('q')
    popular = request.args.get('popular', type=int)

    try:
        if category:
            formations = get_formations_by_category(category)
        elif difficulty:
            formations = get_formations_by_difficulty(difficulty)
        elif query:
            formations = search_formations(query)
        elif popular is not None:
            formations = get_popular_formations(popular)
        else:
            formations = PROFESSIONAL_FORMATIONS
    except ValueError as e:
        return _bad_request(e)

    return jsonify({
        'count': len(formations),
        'formations': [_formation_summary(f) for f in formations]
    })


@tactics_bp.route("/formations/<formation_id>")
def formation_detail(formation_id):
    formation = get_formation_by_id(formation_id)
    if formation is None:
        return _not_found(FormationNotFoundError(formation_id))
    return jsonify(ReportService.serialize(formation))


@tactics_bp.route("/analysis/chemistry", methods=["POST"])
@limiter.limit(ANALYSIS_LIMIT)
def chemistry_analysis():
    """Compute chemistry for a posted roster."""
    try:
        _, analysis = _manager().analyze_chemistry(request.get_json(silent=True))
    except ValueError as e:
        current_app.logger.warning(f"Rejected chemistry request: {e}")
        return _bad_request(e)

    return jsonify(ReportService.serialize(analysis))


@tactics_bp.route("/analysis/formation", methods=["POST"])
@limiter.limit(ANALYSIS_LIMIT)
def formation_analysis():
    """Analyze a library or inline formation for a posted roster."""
    try:
        formation, _, analysis = _manager().analyze_formation(request.get_json(silent=True))
    except FormationNotFoundError as e:
        return _not_found(e)
    except ValueError as e:
        current_app.logger.warning(f"Rejected formation request: {e}")
        return _bad_request(e)

    return jsonify({
        'formation_id': formation.id,
        'analysis': ReportService.serialize(analysis)
    })


@tactics_bp.route("/analysis/report", methods=["POST"])
@limiter.limit(REPORT_LIMIT)
def tactical_report():
    """
    Full tactical report.

    ?format=json (default) returns structured data,
    ?format=text returns a plain-text attachment.
    """
    report_format = request.args.get('format', 'json').lower()
    if report_format not in ('json', 'text'):
        return jsonify({'error': f"Unsupported format: {report_format}"}), 400

    try:
        report = _manager().build_report(request.get_json(silent=True))
    except FormationNotFoundError as e:
        return _not_found(e)
    except ValueError as e:
        current_app.logger.warning(f"Rejected report request: {e}")
        return _bad_request(e)

    if report_format == 'text':
        response = make_response(ReportService.to_text(report))
        response.headers['Content-Type'] = 'text/plain; charset=utf-8'
        response.headers['Content-Disposition'] = (
            f'attachment; filename=tactical-report-{report.formation.id}.txt'
        )
        return response

    return jsonify(ReportService.to_dict(report))
