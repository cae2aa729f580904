import logging

from pymongo import MongoClient

from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


def get_db(mongo_uri, db_name):
    """Connect to MongoDB and return the database instance."""
    if not mongo_uri:
        raise ConfigurationError("MONGO_URI must be set when CONTENT_STORE is 'mongo'")

    try:
        client = MongoClient(mongo_uri, tz_aware=True)
        db = client[db_name]
        logger.info(f"Connected to MongoDB database: {db_name}")
    except Exception as e:
        logger.error("Failed to connect to MongoDB", exc_info=True)
        raise e
    return db
