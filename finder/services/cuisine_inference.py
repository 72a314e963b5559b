# backend/finder/services/cuisine_inference.py

import logging
from typing import List

from finder.models.request_models import LabelScore
from finder.models.response_models import ImageSearchResponse
from finder.services.cuisine_map import cuisine_for_label
from finder.services.data_normalizer import reduce_restaurant

logger = logging.getLogger(__name__)

TOP_LABELS = 2

NO_CUISINES_MESSAGE = "No cuisines identified"
NO_RESTAURANTS_MESSAGE = "No matching restaurants found"


def top_cuisines(labels: List[LabelScore], top_n: int = TOP_LABELS) -> List[str]:
    """
    Rank labels by score, keep the best `top_n`, map them to cuisines.
    Unmapped labels are dropped and repeats collapse, order preserved.
    """
    ranked = sorted(labels, key=lambda l: l.score, reverse=True)[:top_n]
    cuisines = []
    for item in ranked:
        cuisine = cuisine_for_label(item.label)
        if cuisine and cuisine not in cuisines:
            cuisines.append(cuisine)
    return cuisines


def infer_restaurants(image_bytes: bytes, classifier, repository) -> ImageSearchResponse:
    """
    Classify → rank & map → query → project.

    FoodDetectionError from the classifier and store errors propagate
    unchanged; nothing partial is returned.
    """
    labels = classifier.classify(image_bytes)

    cuisines = top_cuisines(labels)
    if not cuisines:
        logger.info("No cuisines identified from the food detection results.")
        return ImageSearchResponse(message=NO_CUISINES_MESSAGE)

    logger.info(f"Identified cuisines: {cuisines}")
    entries = repository.find_by_cuisines(cuisines)

    restaurants = [reduce_restaurant(e) for e in entries]
    if not restaurants:
        logger.info("No matching restaurants found.")
        return ImageSearchResponse(message=NO_RESTAURANTS_MESSAGE, cuisines=cuisines)

    return ImageSearchResponse(cuisines=cuisines, restaurants=restaurants)
