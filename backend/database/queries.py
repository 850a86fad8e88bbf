"""
Search query builders for the data abstraction layer.

The connector's search backend only accepts pre-shaped query objects, so
lookups the abstraction layer performs on its own (a single product by id,
orders of one user) are encoded here as small query dictionaries.
"""

import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)

# Logical partitions inside the search index
PRODUCT_TYPE = "product"
TAGS_TYPE = "tags"
ATTRIBUTES_TYPE = "attributes"
ORDERS_TYPE = "orders"


def build_product_query(index: str, product_id: Any) -> Dict[str, Any]:
    """
    Build the query object for a single product lookup.

    Args:
        index: Search index holding the products
        product_id: Id of the product, embedded as given

    Returns:
        dict: Exact-match term filter on ``_id``, e.g.
            {"index": index, "type": "product",
             "query": {"query": {"term": {"_id": product_id}}}}
    """
    logger.debug(f"Building product query against index {index}")
    return {
        "index": index,
        "type": PRODUCT_TYPE,
        "query": {
            "query": {
                "term": {
                    "_id": product_id
                }
            }
        }
    }


def build_orders_by_user_query(user_id: Any) -> Dict[str, Any]:
    """Build the match query selecting every order placed by ``user_id``."""
    logger.debug("Building orders-by-user query")
    return {
        "query": {
            "match": {
                "userId": user_id
            }
        }
    }
