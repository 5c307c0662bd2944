"""Flask application factory for the audioswap upload API."""

from flask import Flask, jsonify

from audioswap.config import Settings, load_settings


def create_app(settings: Settings | None = None) -> Flask:
    app = Flask(__name__)
    settings = settings or load_settings()
    settings.ensure_work_dir()
    app.config["SETTINGS"] = settings
    app.config["WORK_DIR"] = settings.work_dir
    app.config["MAX_CONTENT_LENGTH"] = settings.max_upload_bytes

    from audioswap.web.routes import bp
    app.register_blueprint(bp)

    @app.errorhandler(413)
    def request_entity_too_large(error):
        return jsonify({"error": "File too large"}), 413

    return app
