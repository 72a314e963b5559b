# backend/finder/api/endpoints/restaurants.py

import logging

from flask import Blueprint, request, jsonify
from pymongo.errors import PyMongoError

from finder.api.common import get_repository, error_response
from finder.core.errors import InvalidQueryError, StoreNotReadyError
from finder.models.request_models import PageRequest
from finder.services.listing_service import get_restaurant, list_restaurants, search_restaurants

logger = logging.getLogger(__name__)

bp = Blueprint("restaurants", __name__)


@bp.route("/restaurants", methods=["GET"])
def restaurants():
    page_request = PageRequest.from_query(request.args.get("page"))
    try:
        result = list_restaurants(get_repository(), page_request)
    except StoreNotReadyError as e:
        return error_response(str(e), 503)
    except PyMongoError as e:
        logger.error(f"Error fetching restaurants: {str(e)}")
        return error_response("Failed to fetch restaurants", 500)

    return jsonify(result.model_dump()), 200


@bp.route("/restaurants/search", methods=["GET"])
def search():
    page_request = PageRequest.from_query(request.args.get("page"))
    try:
        result = search_restaurants(get_repository(), request.args.get("q"), page_request)
    except InvalidQueryError as e:
        return error_response(str(e), 400)
    except StoreNotReadyError as e:
        return error_response(str(e), 503)
    except PyMongoError as e:
        logger.error(f"Error searching restaurants: {str(e)}")
        return error_response("Failed to search restaurants", 500)

    return jsonify(result.model_dump()), 200


@bp.route("/restaurants/<int:res_id>", methods=["GET"])
def restaurant_detail(res_id):
    try:
        restaurant = get_restaurant(get_repository(), res_id)
    except StoreNotReadyError as e:
        return error_response(str(e), 503)
    except PyMongoError as e:
        logger.error(f"Error fetching restaurant {res_id}: {str(e)}")
        return error_response("Failed to fetch restaurant", 500)

    if restaurant is None:
        return error_response("Restaurant not found", 404)

    return jsonify({"success": True, "data": restaurant}), 200
