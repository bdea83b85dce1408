"""Static file server — Flask application."""

from flask import Flask
from .blueprint import create_blueprint


def create_app(config=None):
    app = Flask(__name__)
    app.register_blueprint(create_blueprint(config=config), url_prefix="/")
    return app
