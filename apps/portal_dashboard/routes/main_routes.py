"""
Main page routes for the portal
"""
from flask import Blueprint, render_template, request

from ..components.account.service import current_portal_user
from ..components.statistics.service import StatisticsService

# Create main blueprint
main_bp = Blueprint('main', __name__)

statistics = StatisticsService()

GUIDES = {
    'game_guide': 'Game guide',
}


@main_bp.route('/')
def frontpage():
    """Front page with the statistics panel"""
    return render_template(
        'frontpage.html',
        stats=statistics.get_statistics(current_portal_user()),
        login_failed=bool(request.args.get('login_failed')),
    )


@main_bp.route('/guide')
def guide():
    """Guide pages, selected by the m query parameter"""
    page = request.args.get('m', 'game_guide')
    if page not in GUIDES:
        return render_template('guide.html', page=None, title='Guide not found'), 404
    return render_template('guide.html', page=page, title=GUIDES[page])
