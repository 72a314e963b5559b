from flask import Blueprint, request, jsonify
from finder.core.errors import GeocodingError
from finder.services import geo_service

geo_bp = Blueprint("geocode", __name__)


@geo_bp.route("/geocode", methods=["POST"])
def geocode():
    data = request.get_json(silent=True) or {}
    text = (data.get("location_text") or "").strip()

    if not text:
        return jsonify({"success": False, "error": "Missing location_text"}), 400

    try:
        lat, lng = geo_service.geocode_text_location(text)
    except GeocodingError as e:
        return jsonify({"success": False, "error": str(e)}), 502

    if lat is None or lng is None:
        return jsonify({"success": False, "error": "Location not found"}), 404

    return jsonify({"lat": lat, "lng": lng}), 200
