from flask import Flask
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import logging

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()
csrf = CSRFProtect()

def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object('config')
    if overrides:
        app.config.update(overrides)

    # Validate required settings
    required_settings = ['SECRET_KEY', 'SQLALCHEMY_DATABASE_URI']
    if not app.config.get('TESTING'):
        for name in required_settings:
            if not app.config.get(name):
                raise ValueError(f"Required environment variable {name} is not set")

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app.jinja_env.trim_blocks = app.config.get('JINJA2_TRIM_BLOCKS', False)
    app.jinja_env.lstrip_blocks = app.config.get('JINJA2_LSTRIP_BLOCKS', False)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # Register blueprints
    from pocketcalc.routes.main import main_bp
    from pocketcalc.projects.calculator.routes import calculator_bp
    from pocketcalc.projects.hello.routes import hello_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(calculator_bp, url_prefix='/calculator')
    app.register_blueprint(hello_bp)

    # Register CLI commands
    from pocketcalc import commands
    from pocketcalc.projects.calculator import commands as calculator_commands
    commands.init_app(app)
    calculator_commands.init_app(app)

    # Import models to ensure they're known to Flask-SQLAlchemy
    from pocketcalc.models import LogEntry

    return app
