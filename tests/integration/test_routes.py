"""
Integration Tests for Routes

Tests the Flask blueprints and route handlers to ensure proper HTTP
responses and JSON bodies.
"""

import pytest


@pytest.fixture
def full_squad():
    """Eleven-player roster payload for a 4-3-3."""
    roles = ['GK', 'LB', 'CB', 'CB', 'RB', 'CM', 'CDM', 'CM', 'LW', 'ST', 'RW']
    return [
        {'id': f"p{i}", 'name': f"Player {i}", 'nationality': 'ENG' if i % 2 else 'ESP',
         'age': 22 + i, 'overall': 70 + i, 'roleId': role}
        for i, role in enumerate(roles)
    ]


class TestMainRoutes:
    """Test main blueprint routes."""

    def test_banner(self, client):
        """Test: Root returns service name and endpoints."""
        response = client.get('/')
        data = response.get_json()

        assert response.status_code == 200
        assert data['name'] == 'Tactics Board Analysis'
        assert 'POST /api/analysis/chemistry' in data['endpoints']

    def test_health(self, client):
        """Test: Health check returns ok."""
        response = client.get('/health')

        assert response.status_code == 200
        assert response.get_json() == {'status': 'ok'}

    def test_404_is_json(self, client):
        """Test: Unknown URL returns a JSON 404."""
        response = client.get('/nonexistent-page')

        assert response.status_code == 404
        assert response.get_json()['error'] == 'Not Found'

    def test_method_not_allowed(self, client):
        """Test: GET on a POST-only endpoint returns 405."""
        response = client.get('/api/analysis/chemistry')
        assert response.status_code == 405


class TestFormationRoutes:
    """Test formation library endpoints."""

    def test_list_all(self, client):
        """Test: Listing returns every library formation."""
        data = client.get('/api/formations').get_json()

        assert data['count'] == 23
        assert data['formations'][0]['id'] == 'formation-4-4-2'
        assert data['formations'][0]['slot_count'] == 11

    def test_filter_by_category(self, client):
        """Test: Category filter returns only that category."""
        data = client.get('/api/formations?category=defensive').get_json()

        assert data['count'] > 0
        assert all(f['category'] == 'defensive' for f in data['formations'])

    def test_invalid_category(self, client):
        """Test: Unknown category returns 400."""
        response = client.get('/api/formations?category=ultra')

        assert response.status_code == 400
        assert response.get_json()['error'] == 'Invalid request'

    def test_search(self, client):
        """Test: Search filter matches names."""
        data = client.get('/api/formations?q=false').get_json()

        assert 'formation-4-3-3-false9' in [f['id'] for f in data['formations']]

    def test_popular(self, client):
        """Test: Popular filter honours the limit."""
        data = client.get('/api/formations?popular=3').get_json()

        assert data['count'] == 3

    @pytest.mark.parametrize('limit', ['0', '-1'])
    def test_popular_non_positive(self, client, limit):
        """Test: Non-positive popular limit returns 400."""
        response = client.get(f'/api/formations?popular={limit}')

        assert response.status_code == 400
        assert response.get_json()['error'] == 'Invalid request'

    def test_detail(self, client):
        """Test: Detail returns slots and metadata."""
        response = client.get('/api/formations/formation-4-3-3')
        data = response.get_json()

        assert response.status_code == 200
        assert data['name'] == '4-3-3'
        assert data['category'] == 'attacking'
        assert len(data['positions']) == 11
        assert data['positions'][0]['role_id'] == 'GK'

    def test_detail_unknown(self, client):
        """Test: Unknown formation id returns 404."""
        response = client.get('/api/formations/formation-9-9-9')

        assert response.status_code == 404
        assert response.get_json()['formation_id'] == 'formation-9-9-9'


class TestChemistryRoute:
    """Test chemistry analysis endpoint."""

    def test_chemistry(self, client, player_payload):
        """Test: Valid roster returns a full chemistry analysis."""
        response = client.post('/api/analysis/chemistry', json={'players': player_payload})
        data = response.get_json()

        assert response.status_code == 200
        assert set(data) == {
            'overall_chemistry', 'player_chemistry', 'chemistry_matrix',
            'team_cohesion', 'recommendations'
        }
        assert [p['player_id'] for p in data['player_chemistry']] == ['p1', 'p2', 'p3', 'p4']

    def test_empty_roster(self, client):
        """Test: Empty roster returns zeroed analysis."""
        response = client.post('/api/analysis/chemistry', json={'players': []})
        data = response.get_json()

        assert response.status_code == 200
        assert data['overall_chemistry'] == 0
        assert data['chemistry_matrix'] == []

    def test_invalid_player(self, client):
        """Test: Out-of-range rating returns 400 with details."""
        payload = {'players': [{'id': 'p1', 'name': 'X', 'age': 25, 'overall': 150}]}

        response = client.post('/api/analysis/chemistry', json=payload)

        assert response.status_code == 400
        assert response.get_json()['details']

    def test_roster_too_large(self, client, app):
        """Test: Rosters above MAX_ROSTER_SIZE are rejected."""
        limit = app.config['MAX_ROSTER_SIZE']
        players = [
            {'id': f"p{i}", 'name': f"P{i}", 'age': 25, 'overall': 70}
            for i in range(limit + 1)
        ]

        response = client.post('/api/analysis/chemistry', json={'players': players})

        assert response.status_code == 400
        assert 'Roster too large' in response.get_json()['details'][0]


class TestFormationRoute:
    """Test formation analysis endpoint."""

    def test_library_formation(self, client, full_squad):
        """Test: Library formation id is analyzed."""
        response = client.post('/api/analysis/formation', json={
            'formationId': 'formation-4-3-3',
            'players': full_squad,
        })
        data = response.get_json()

        assert response.status_code == 200
        assert data['formation_id'] == 'formation-4-3-3'
        analysis = data['analysis']
        assert 0 <= analysis['overall_score'] <= 100
        assert len(analysis['player_suitability']) == 11
        assert analysis['recommendations'][0]['title'] == 'High Fitness Required'

    def test_inline_formation_with_context(self, client, player_payload):
        """Test: Inline formation and match context are accepted."""
        response = client.post('/api/analysis/formation', json={
            'players': player_payload,
            'formation': {
                'id': 'my-shape',
                'name': 'My Shape',
                'category': 'attacking',
                'positions': [
                    {'x': 50, 'y': 95, 'roleId': 'GK'},
                    {'x': 50, 'y': 85, 'roleId': 'CB'},
                    {'x': 50, 'y': 20, 'roleId': 'ST'},
                ],
            },
            'context': {'matchSituation': 'leading', 'opposingFormationId': 'formation-4-5-1'},
        })
        data = response.get_json()

        assert response.status_code == 200
        titles = [r['title'] for r in data['analysis']['recommendations']]
        assert titles[0] == 'Insufficient Players'
        assert 'Consider More Defensive Setup' in titles
        assert 'Outnumbered in Midfield' in titles

    def test_unknown_formation(self, client, player_payload):
        """Test: Unknown formation id returns 404."""
        response = client.post('/api/analysis/formation', json={
            'formationId': 'formation-9-9-9', 'players': player_payload,
        })

        assert response.status_code == 404

    def test_unknown_opposing_formation(self, client, player_payload):
        """Test: Unknown opposing formation id returns 404."""
        response = client.post('/api/analysis/formation', json={
            'formationId': 'formation-4-3-3',
            'players': player_payload,
            'context': {'opposingFormationId': 'nope'},
        })

        assert response.status_code == 404

    def test_missing_formation(self, client, player_payload):
        """Test: Missing formation returns 400."""
        response = client.post('/api/analysis/formation', json={'players': player_payload})
        assert response.status_code == 400

    def test_no_body(self, client):
        """Test: Missing JSON body returns 400."""
        response = client.post('/api/analysis/formation')
        assert response.status_code == 400


class TestReportRoute:
    """Test tactical report endpoint."""

    def test_json_report(self, client, full_squad):
        """Test: JSON report contains both analyses."""
        response = client.post('/api/analysis/report', json={
            'formationId': 'formation-4-3-3', 'players': full_squad,
        })
        data = response.get_json()

        assert response.status_code == 200
        assert data['formation']['id'] == 'formation-4-3-3'
        assert len(data['players']) == 11
        assert 'overall_score' in data['formation_analysis']
        assert 'team_cohesion' in data['chemistry_analysis']
        assert data['generated_at']

    def test_text_report(self, client, full_squad):
        """Test: Text report downloads as an attachment."""
        response = client.post('/api/analysis/report?format=text', json={
            'formationId': 'formation-4-3-3', 'players': full_squad,
        })

        assert response.status_code == 200
        assert response.headers['Content-Type'].startswith('text/plain')
        assert 'tactical-report-formation-4-3-3.txt' in response.headers['Content-Disposition']
        assert b'TACTICAL ANALYSIS REPORT' in response.data
        assert b'Player 0' in response.data

    def test_unsupported_format(self, client, full_squad):
        """Test: Unknown report format returns 400."""
        response = client.post('/api/analysis/report?format=pdf', json={
            'formationId': 'formation-4-3-3', 'players': full_squad,
        })

        assert response.status_code == 400
