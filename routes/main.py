"""
Main Routes Blueprint

Service banner, health check and JSON error pages.
"""

from flask import Blueprint, jsonify, current_app

main_bp = Blueprint('main', __name__)


@main_bp.route("/")
def home():
    """Service banner with available endpoints."""
    return jsonify({
        'name': current_app.config.get('SERVICE_NAME', 'Tactics Board Analysis'),
        'version': current_app.config.get('SERVICE_VERSION', '1.0.0'),
        'endpoints': [
            'GET /api/formations',
            'GET /api/formations/<formation_id>',
            'POST /api/analysis/chemistry',
            'POST /api/analysis/formation',
            'POST /api/analysis/report?format=json|text',
        ]
    })


@main_bp.route("/health")
def health():
    return jsonify({'status': 'ok'})
