"""
Statistics Service
Query layer behind the front page statistics panel
"""
import logging
from datetime import date, datetime, time as dt_time

from flask import current_app, render_template
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from ...core.monitoring import STATUS_OFFLINE, STATUS_ONLINE, check_tcp
from ...extensions import db
from ...models import Account, Character

logger = logging.getLogger(__name__)


class StatisticsService:
    """Service for the Statistics component

    Every query returns a displayable value. Database failures are logged
    and reported as 0, an unreachable server as 'Offline'.
    """

    def players_online(self):
        """Number of characters currently connected to the game server"""
        return self._count(
            db.session.query(func.count(Character.id)).filter(Character.online.is_(True)),
            'players online',
        )

    def total_game_characters(self):
        """Number of game characters ever created"""
        return self._count(db.session.query(func.count(Character.id)), 'total characters')

    def new_registrations_today(self, now=None):
        """Number of website accounts registered since local midnight"""
        today = now.date() if now else date.today()
        midnight = int(datetime.combine(today, dt_time.min).timestamp())
        return self._count(
            db.session.query(func.count(Account.id)).filter(Account.registered >= midnight),
            'registrations today',
        )

    def check_status(self, host, port):
        """'Online' if host:port accepts connections, 'Offline' otherwise

        The configured game server is answered from the monitor's cache.
        """
        monitor = current_app.extensions.get('server_monitor')
        game_server = current_app.config['SERVICES'].get('game_server', {})
        if monitor and (str(game_server.get('host')), str(game_server.get('port'))) == (str(host), str(port)):
            return monitor.get_status('game_server')

        online = check_tcp(host, port, current_app.config['STATUS_CHECK_TIMEOUT'])
        return STATUS_ONLINE if online else STATUS_OFFLINE

    def get_statistics(self, user):
        """Collect every value the statistics panel displays"""
        config = current_app.config
        return {
            'players_online': self.players_online(),
            'server_status': self.check_status(config['GAME_SERVER_HOST'], config['GAME_SERVER_PORT']),
            'total_characters': self.total_game_characters(),
            'registrations_today': self.new_registrations_today(),
            'is_guest': bool(getattr(user, 'is_guest', True)),
            'discord_url': config['DISCORD_INVITE_URL'],
        }

    def render_panel(self, user):
        """Render the statistics fragment for user"""
        return render_template('statistics.html', stats=self.get_statistics(user))

    def _count(self, query, label):
        try:
            return int(query.scalar() or 0)
        except SQLAlchemyError as e:
            logger.error(f'Failed to count {label}: {e}')
            db.session.rollback()
            return 0
