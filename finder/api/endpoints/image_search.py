# backend/finder/api/endpoints/image_search.py

import logging

from flask import Blueprint, request, jsonify
from pymongo.errors import PyMongoError

from finder.api.common import get_classifier, get_repository, error_response
from finder.core.errors import FoodDetectionError, StoreNotReadyError
from finder.services.cuisine_inference import infer_restaurants

logger = logging.getLogger(__name__)

image_bp = Blueprint("image_search", __name__)


@image_bp.route("/image-search", methods=["POST"])
def image_search():
    logger.info("Received request to upload image and find restaurants...")

    upload = request.files.get("image")
    image_bytes = upload.read() if upload else b""
    if not image_bytes:
        logger.error("No image uploaded")
        return error_response("No image uploaded", 400)

    try:
        result = infer_restaurants(image_bytes, get_classifier(), get_repository())
    except FoodDetectionError as e:
        return error_response(str(e), 500)
    except StoreNotReadyError as e:
        return error_response(str(e), 503)
    except PyMongoError as e:
        logger.error(f"Error processing image search: {str(e)}")
        return error_response("Internal Server Error", 500)

    return jsonify(result.model_dump(exclude_none=True)), 200
