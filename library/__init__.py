"""Books catalog service backed by Elasticsearch (books) and Redis (user activity)."""

__version__ = "1.0.0"
