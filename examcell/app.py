from flask import Flask

from .config import Config
from .models import db


def create_app(config_object=Config):
    """Build the Flask application that owns the database binding and CLI."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Initialize SQLAlchemy with Flask app
    db.init_app(app)

    from .cli import register_commands
    register_commands(app)

    return app
