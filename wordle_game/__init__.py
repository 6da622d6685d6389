"""
Console Wordle Package

The game core (dictionary, validator, scorer, termination and session state
machine) plus two front ends: an interactive console loop and an HTTP API.
"""

from flask import Flask
from flask_cors import CORS

from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with the game blueprint registered
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    return app
