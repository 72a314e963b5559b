import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    MONGO_URI = os.getenv("MONGO_URI")
    MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "project")
    MONGO_COLLECTION = os.getenv("MONGO_COLLECTION", "restaurantlist")
    MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", 5000))

    # "mongo" in production, "json" to serve a local dump of list documents
    STORE_BACKEND = os.getenv("STORE_BACKEND", "mongo")
    JSON_DATA_PATH = os.getenv("JSON_DATA_PATH", os.path.join("finder", "data", "restaurants.json"))

    HF_API_KEY = os.getenv("HF_API_KEY")
    HF_MODEL_URL = os.getenv(
        "HF_MODEL_URL",
        "https://api-inference.huggingface.co/models/ewanlong/food_type_image_detection",
    )
    CLASSIFIER_TIMEOUT_S = float(os.getenv("CLASSIFIER_TIMEOUT_S", 30))

    MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", 10 * 1024 * 1024))
    PAGE_SIZE = 9

    PORT = int(os.getenv("PORT", 5000))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    SECRET_KEY = os.getenv("SECRET_KEY")

settings = Settings()
