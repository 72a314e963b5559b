# backend/finder/api/routes.py

from finder.api.endpoints.restaurants import bp as restaurants_bp
from finder.api.endpoints.geocode import geo_bp
from finder.api.endpoints.location import location_bp
from finder.api.endpoints.image_search import image_bp

def register_api(app):
    # listing and geocoding live under /api; the client calls the
    # search endpoints at the root
    app.register_blueprint(restaurants_bp, url_prefix="/api")
    app.register_blueprint(geo_bp, url_prefix="/api")
    app.register_blueprint(location_bp)
    app.register_blueprint(image_bp)
