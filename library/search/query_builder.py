"""
Book query builder - translates optional filters into Elasticsearch search bodies.
Design: Pure functions returning dicts; the repository passes them as search kwargs.
"""

from typing import Any

from library.constants import BOOKS_QUERY_SIZE, UNIQUE_AUTHORS_AGGREGATION
from library.schemas.book import BookFilters


def build_books_query(filters: BookFilters, size: int = BOOKS_QUERY_SIZE) -> dict[str, Any]:
    """Conjunction of the filters that are set. No conditions matches every book (up to size)."""
    conditions: list[dict[str, Any]] = []

    if filters.title:
        # Exact match on the un-analyzed title
        conditions.append({"term": {"title.keyword": filters.title}})

    if filters.author_name:
        conditions.append({"match_phrase": {"author_name": filters.author_name}})

    if filters.min_price is not None and filters.max_price is not None:
        conditions.append(
            {"range": {"price": {"gte": filters.min_price, "lte": filters.max_price}}}
        )

    return {
        "size": size,
        "query": {"bool": {"must": conditions}},
    }


def build_inventory_query() -> dict[str, Any]:
    """Total hit count plus distinct author names; no documents returned."""
    return {
        "size": 0,
        "track_total_hits": True,
        "aggs": {
            UNIQUE_AUTHORS_AGGREGATION: {
                "cardinality": {"field": "author_name.keyword"},
            }
        },
    }
