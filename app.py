import os
import sys

import click
from flask import Flask, jsonify

from config import Config
from extensions import db, init_extensions
from logger import app_logger
from storage import SqlStore, StorageError


def create_app(config_class=Config, store=None):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # ----------------------------------------------------------------------------------------------------------------------------------
    # SQLite instance directory
    # --------------------------------------------------------------------------------------------------------------------------------------------
    DATABASE_URI = app.config["SQLALCHEMY_DATABASE_URI"]
    if DATABASE_URI.startswith("sqlite:///"):
        os.makedirs(os.path.dirname(DATABASE_URI[len("sqlite:///"):]) or ".", exist_ok=True)

    # --------------------------------------------------------------------------------------------------------------------------
    # Initialize extensions
    # ----------------------------------------------------------------------------------------------------------------------------
    init_extensions(app)

    # Handlers look the store up on the app; tests may inject their own.
    app.extensions["store"] = store if store is not None else SqlStore(db)

    # ------------------------------------------------------------------------------------------------------------------------
    # Register blueprints
    # -----------------------------------------------------------------------------------------------------------------------
    def register_blueprints(app):
        from blueprints.auth import bp as auth_bp
        from blueprints.transactions import bp as transactions_bp
        from blueprints.portfolio import bp as portfolio_bp
        from blueprints.contact import bp as contact_bp

        app.register_blueprint(auth_bp)
        app.register_blueprint(transactions_bp)
        app.register_blueprint(portfolio_bp)
        app.register_blueprint(contact_bp)

    register_blueprints(app)
    register_error_handlers(app)
    register_commands(app)

    # ----------------------
    # Basic routes
    # ----------------------
    @app.route("/healthz")
    def healthz():
        return {"status": "ok"}, 200

    if app.config.get("CHECK_DB_ON_STARTUP", False):
        check_database(app)

    app_logger.info("Application created")
    return app


def check_database(app):
    """Exit the process when the database cannot be reached at startup."""
    with app.app_context():
        try:
            app.extensions["store"].execute("SELECT 1")
        except StorageError as e:
            app_logger.critical(f"Database connection failed: {e}")
            sys.exit(1)
    app_logger.info("Connected to database")


# ----------------------
# JSON error responses
# ----------------------
def register_error_handlers(app):

    @app.errorhandler(StorageError)
    def handle_storage_error(e):
        return jsonify({"error": str(e)}), 500

    @app.errorhandler(403)
    def forbidden(e):
        return jsonify({"error": "Forbidden"}), 403

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(500)
    def internal_error(e):
        return jsonify({"error": "Internal server error"}), 500


# ----------------------
# CLI commands
# ----------------------
def register_commands(app):

    @app.cli.command("init-db")
    def init_db_command():
        """Create all tables."""
        import models  # noqa: F401  registers the tables on db.metadata
        db.create_all()
        click.echo("Initialized the database.")

    @app.cli.command("add-plan")
    @click.argument("name")
    def add_plan_command(name):
        """Insert an investment plan."""
        import repository
        repository.create_plan(app.extensions["store"], name)
        click.echo(f"Added plan {name}.")


# ----------------------
# Local development
# ----------------------
if __name__ == "__main__":
    app = create_app()
    app.run(debug=app.config.get("DEBUG", False), host="0.0.0.0", port=app.config["PORT"])
