import logging

from flask import Blueprint, request, jsonify
from pymongo.errors import PyMongoError

from finder.api.common import get_repository, error_response
from finder.core.errors import InvalidQueryError, StoreNotReadyError
from finder.services.geo_service import parse_geo_query

logger = logging.getLogger(__name__)

location_bp = Blueprint("location", __name__)


@location_bp.route("/location", methods=["GET"])
def location_search():
    # validate before touching the store
    try:
        query = parse_geo_query(request.args)
    except InvalidQueryError as e:
        return error_response(str(e), 400)

    try:
        restaurants = get_repository().find_within_radius(query)
    except StoreNotReadyError as e:
        return error_response(str(e), 503)
    except PyMongoError as e:
        logger.error(f"Error in location search: {str(e)}")
        return error_response("Internal Server Error", 500)

    if not restaurants:
        return error_response("No restaurants found in this area.", 404)

    return jsonify({"success": True, "data": restaurants}), 200
