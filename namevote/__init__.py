from flask import Flask

from namevote.config import Config
from namevote.extensions import db, migrate
from namevote.routes import register_routes


def create_app(test_config=None):
    app = Flask(
        __name__,
        template_folder="../templates",
    )
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    db.init_app(app)
    migrate.init_app(app, db)

    register_routes(app)
    return app


__all__ = ["db", "migrate", "create_app"]
