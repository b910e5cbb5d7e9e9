import logging

from flask import Flask, jsonify
from flask_cors import CORS

from taskflow.api import auth_bp, tasks_bp
from taskflow.config.firebase_config import EXTENSION_KEY, init_firebase
from taskflow.config.settings import Settings
from taskflow.middleware.error_middleware import register_error_handlers

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str):
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def create_app(settings=Settings, context=None):
    """Create and configure the Flask application.

    Args:
        settings: Settings class read into `app.config`.
        context: Firebase context to use. When omitted, Firebase is
            initialized from `settings`; tests pass a context built on
            in-memory doubles.
    """
    configure_logging(settings.LOG_LEVEL)

    app = Flask(__name__)
    app.config.from_object(settings)

    CORS(app,
         resources={r"/*": {"origins": settings.CORS_ORIGINS}},
         allow_headers=["Content-Type", "Authorization"],
         methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"])

    if context is None:
        context = init_firebase(settings)
    app.extensions[EXTENSION_KEY] = context

    @app.get("/")
    def health():
        return jsonify({
            "status": "ok",
            "service": "taskflow-api",
            "firebase": "connected" if app.extensions.get(EXTENSION_KEY) else "not configured"
        }), 200

    app.register_blueprint(auth_bp)
    app.register_blueprint(tasks_bp)
    register_error_handlers(app)

    return app


def main():
    """Run the development server."""
    app = create_app()
    app.run(host="0.0.0.0", port=Settings.PORT, debug=Settings.DEBUG)


if __name__ == "__main__":  # pragma: no cover
    main()
