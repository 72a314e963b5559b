# backend/finder/services/food_classifier.py
import logging
from typing import List

import requests
from pydantic import ValidationError

from finder.core.errors import FoodDetectionError
from finder.models.request_models import LabelScore

logger = logging.getLogger(__name__)


class HuggingFaceFoodClassifier:
    """
    Single-attempt client for a Hugging Face image-classification endpoint.

    Raw image bytes are POSTed as application/octet-stream; the endpoint
    answers with a list of {label, score}. Every failure (network, non-2xx,
    unexpected body) becomes FoodDetectionError. There is no retry.
    """

    def __init__(self, api_url: str, api_key: str, timeout: float = 30):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout

    def classify(self, image_bytes: bytes) -> List[LabelScore]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/octet-stream",
        }
        logger.info("Sending request to Hugging Face API for food detection...")
        try:
            response = requests.post(self.api_url, data=image_bytes, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"Food detection request failed: {str(e)}")
            raise FoodDetectionError("Food detection failed") from e
        except ValueError as e:
            logger.error(f"Food detection returned non-JSON body: {str(e)}")
            raise FoodDetectionError("Food detection failed") from e

        # model warm-up and quota errors come back as {"error": ...}
        if not isinstance(payload, list) or not payload:
            logger.error(f"Unexpected food detection response: {payload!r}")
            raise FoodDetectionError("Food detection failed")

        try:
            labels = [LabelScore(**item) for item in payload]
        except (TypeError, ValidationError) as e:
            logger.error(f"Malformed food detection labels: {str(e)}")
            raise FoodDetectionError("Food detection failed") from e

        logger.info(f"Food detection response: {[(l.label, l.score) for l in labels]}")
        return labels
