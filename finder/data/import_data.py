"""
import_data.py
--------------
Bulk-load a JSON dump of restaurant list documents into MongoDB.

The file must hold a JSON array; every element is one list document of
shape {"restaurants": [{"restaurant": {...}}, ...]}.

Usage:
    python -m finder.data.import_data finder/data/restaurants.json [--drop]
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List

from pymongo import MongoClient

from finder.core.config import settings

logger = logging.getLogger(__name__)


def load_documents(path: str) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a JSON array of list documents")

    return data


def upload_documents(collection, documents: List[Dict[str, Any]], drop: bool = False) -> int:
    if drop:
        logger.info(f"Dropping existing documents in {collection.name}")
        collection.delete_many({})

    if not documents:
        return 0

    result = collection.insert_many(documents)
    return len(result.inserted_ids)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Import restaurant list documents into MongoDB")
    parser.add_argument("path", help="JSON file with an array of list documents")
    parser.add_argument("--drop", action="store_true", help="empty the collection first")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL)

    if not settings.MONGO_URI:
        logger.error("MONGO_URI is not set")
        return 1

    documents = load_documents(args.path)

    client = MongoClient(settings.MONGO_URI)
    try:
        collection = client[settings.MONGO_DB_NAME][settings.MONGO_COLLECTION]
        inserted = upload_documents(collection, documents, drop=args.drop)
    finally:
        client.close()

    logger.info(f"{inserted} documents were inserted.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
