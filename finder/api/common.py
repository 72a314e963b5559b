from flask import current_app, jsonify

STORE_EXTENSION = "restaurant_store"
CLASSIFIER_EXTENSION = "food_classifier"


def get_repository():
    """Repository of the injected store handle; raises StoreNotReadyError until connected."""
    return current_app.extensions[STORE_EXTENSION].repository()


def get_classifier():
    return current_app.extensions[CLASSIFIER_EXTENSION]


def error_response(message, status):
    return jsonify({"success": False, "error": message}), status
