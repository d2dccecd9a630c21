"""
Product query builder

Turns the optional filter, sort and pagination parameters of a product
listing into a MongoDB filter document and the skip/limit/sort options that
go with it, and computes the pagination metadata for the response.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_SORT_BY = "name"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def direction(self) -> int:
        """pymongo sort direction"""
        return 1 if self is SortOrder.ASC else -1


_SORT_ORDER_ALIASES = {
    "asc": SortOrder.ASC,
    "ascending": SortOrder.ASC,
    "desc": SortOrder.DESC,
    "descending": SortOrder.DESC,
}


def parse_sort_order(value: Optional[str]) -> SortOrder:
    """
    Resolve a sortOrder parameter.

    Missing means ascending. Unknown values sort descending, which is what
    clients of the storefront have always received for them.
    """
    if value is None:
        return SortOrder.ASC
    order = _SORT_ORDER_ALIASES.get(value.strip().lower())
    if order is None:
        logger.warning(f"Unknown sortOrder '{value}', sorting descending")
        return SortOrder.DESC
    return order


@dataclass
class ProductQuery:
    """Listing parameters as received from the client"""
    category: Optional[str] = None
    search: Optional[str] = None
    added_to_cart: Optional[str] = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: str = DEFAULT_SORT_BY
    sort_order: Optional[str] = None


@dataclass
class QueryOptions:
    """Execution options for a paged find"""
    skip: int
    limit: int
    sort: dict[str, int] = field(default_factory=dict)

    def to_find_kwargs(self) -> dict[str, Any]:
        return {
            "skip": self.skip,
            "limit": self.limit,
            "sort": list(self.sort.items()),
        }


def build_product_filter(
    category: Optional[str] = None,
    search: Optional[str] = None,
    added_to_cart: Optional[str] = None,
) -> dict[str, Any]:
    """Build the filter document; absent parameters add no condition"""
    query: dict[str, Any] = {}

    if category:
        query["category"] = category

    if search:
        # Literal substring, not a client-supplied pattern
        query["title"] = {"$regex": re.escape(search), "$options": "i"}

    if added_to_cart is not None:
        query["addedToCart"] = added_to_cart.strip().lower() == "true"

    return query


def build_query_options(
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
    sort_by: str = DEFAULT_SORT_BY,
    sort_order: Optional[str] = None,
) -> QueryOptions:
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive integers")

    order = parse_sort_order(sort_order)
    return QueryOptions(
        skip=(page - 1) * limit,
        limit=limit,
        sort={sort_by or DEFAULT_SORT_BY: order.direction},
    )


def build_product_query(params: ProductQuery) -> tuple[dict[str, Any], QueryOptions]:
    """Build the (filter, options) pair for a product listing"""
    query = build_product_filter(
        category=params.category,
        search=params.search,
        added_to_cart=params.added_to_cart,
    )
    options = build_query_options(
        page=params.page,
        limit=params.limit,
        sort_by=params.sort_by,
        sort_order=params.sort_order,
    )
    return query, options


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def pagination_meta(total: int, page: int, limit: int) -> dict[str, int]:
    """Pagination block returned alongside a page of products"""
    return {
        "totalProducts": total,
        "totalPages": total_pages(total, limit),
        "currentPage": page,
        "pageSize": limit,
    }
