"""
Rendering tests for the statistics fragment
"""
import re
from pathlib import Path

from flask import render_template
from jinja2 import Environment, FileSystemLoader

import portal_dashboard.components.statistics as statistics_component

FIXED_STATS = {
    'players_online': 42,
    'server_status': 'Online',
    'total_characters': 1337,
    'registrations_today': 7,
    'discord_url': 'https://discord.gg/YB6mfUu',
}


def _render(app, is_guest):
    with app.test_request_context('/'):
        return render_template('statistics.html', stats=dict(FIXED_STATS, is_guest=is_guest))


def _text_of(html, css_class):
    match = re.search(rf'<span class="[^"]*\b{css_class}\b[^"]*">([^<]*)</span>', html)
    return match.group(1) if match else None


class TestPanelStructure:
    """Markup produced for fixed inputs"""

    def test_panel_sections(self, app):
        html = _render(app, is_guest=True)

        assert '<div id="statistics">' in html
        assert 'class="panel panel-default"' in html
        assert 'Statistics</h4>' in html
        for heading in ('Game', 'Website', 'Chat'):
            assert f'<h2 class="t-green">{heading}</h2>' in html

    def test_values_interpolated(self, app):
        html = _render(app, is_guest=True)

        assert _text_of(html, 't-onlineCount') == '42'
        assert _text_of(html, 'server-status') == 'Online'
        assert _text_of(html, 't-totalCharacters') == '1337'
        assert _text_of(html, 't-registrationsToday') == '7'
        assert 'status-online' in html

    def test_offline_status_class(self, app):
        with app.test_request_context('/'):
            html = render_template('statistics.html', stats=dict(FIXED_STATS, server_status='Offline', is_guest=True))

        assert _text_of(html, 'server-status') == 'Offline'
        assert 'status-offline' in html

    def test_discord_link(self, app):
        html = _render(app, is_guest=False)

        assert '<a class="discord" href="https://discord.gg/YB6mfUu">Chat Now!</a>' in html


class TestCallToAction:
    """Guest and registered visitors get different buttons"""

    def test_guest_gets_create_account(self, app):
        html = _render(app, is_guest=True)

        assert 'Not registered?' in html
        assert 'href="/register">Create an account</a>' in html
        assert 'Play Now' not in html

    def test_registered_user_gets_play_now(self, app):
        html = _render(app, is_guest=False)

        assert 'Start your adventure now!' in html
        assert 'href="/guide?m=game_guide">Play Now</a>' in html
        assert 'Create an account' not in html


class TestGuard:
    """The fragment only renders inside the portal"""

    def test_renders_nothing_without_guard(self):
        template_dir = Path(statistics_component.__file__).parent / 'templates'
        env = Environment(loader=FileSystemLoader(str(template_dir)))

        html = env.get_template('statistics.html').render(stats=dict(FIXED_STATS, is_guest=True))

        assert html.strip() == ''

    def test_guard_defined_by_portal(self, app):
        assert app.jinja_env.globals['FORUM'] is True
