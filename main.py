import logging

from flask import Flask, jsonify
from flask_cors import CORS

from finder.api.common import CLASSIFIER_EXTENSION, STORE_EXTENSION
from finder.api.routes import register_api
from finder.core.config import settings
from finder.core.json_store import JsonStoreHandle
from finder.core.mongo_client import MongoStoreHandle
from finder.core.store import UNINITIALIZED
from finder.services.food_classifier import HuggingFaceFoodClassifier

logger = logging.getLogger(__name__)


def create_store_handle(cfg=settings):
    if cfg.STORE_BACKEND == "json":
        return JsonStoreHandle(cfg.JSON_DATA_PATH)
    return MongoStoreHandle(
        cfg.MONGO_URI,
        cfg.MONGO_DB_NAME,
        cfg.MONGO_COLLECTION,
        timeout_ms=cfg.MONGO_TIMEOUT_MS,
    )


def create_app(store=None, classifier=None, cfg=settings):
    """
    Build the Flask app.

    `store` and `classifier` default to the configured MongoDB handle and
    Hugging Face client. A store handle that is not ready yet is connected
    on a background thread; until then data endpoints answer 503.
    """
    logging.basicConfig(level=cfg.LOG_LEVEL)

    app = Flask(__name__)
    app.config["SECRET_KEY"] = cfg.SECRET_KEY
    app.config["MAX_CONTENT_LENGTH"] = cfg.MAX_UPLOAD_BYTES

    CORS(app)

    if store is None:
        store = create_store_handle(cfg)
    if classifier is None:
        classifier = HuggingFaceFoodClassifier(
            cfg.HF_MODEL_URL, cfg.HF_API_KEY, timeout=cfg.CLASSIFIER_TIMEOUT_S
        )
    app.extensions[STORE_EXTENSION] = store
    app.extensions[CLASSIFIER_EXTENSION] = classifier

    if store.state == UNINITIALIZED:
        store.connect_in_background()

    register_api(app)

    @app.route("/")
    def index():
        return "Restaurant Finder backend is running...", 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route("/health")
    def health():
        if not store.ready:
            return jsonify({"status": "unavailable", "store": store.state}), 503
        return jsonify({"status": "ok", "store": store.state}), 200

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"success": False, "error": "Endpoint not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"success": False, "error": "Method not allowed"}), 405

    @app.errorhandler(413)
    def too_large(error):
        return jsonify({"success": False, "error": "Uploaded image is too large"}), 413

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Unhandled error: {error}")
        return jsonify({"success": False, "error": "Internal Server Error"}), 500

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=settings.PORT)
