"""Site-wide Flask CLI commands"""

import logging

import click

from pocketcalc import db

logger = logging.getLogger(__name__)


def init_app(app):
    """Register CLI commands with the Flask app"""

    @app.cli.command("init-db")
    def init_db():
        """
        Create any missing tables for local development.
        Deployed databases are managed with `flask db upgrade` instead.
        """
        with app.app_context():
            db.create_all()
        logger.info(f"Tables created: {', '.join(sorted(db.metadata.tables))}")
        click.echo("Database tables created.")
