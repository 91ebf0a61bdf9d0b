# aps/search.py

import logging
from dataclasses import dataclass
from typing import Optional

from aps.config import config
from aps.exceptions import UsageError

logger = logging.getLogger(__name__)

PAGE_PREFIX = "page:"
CATEGORY_PREFIX = "category:"
# featured/default listing, sent as an empty query
HOME = "home"


@dataclass
class SearchQuery:
    text: str = ""
    page: int = 1
    category: Optional[str] = None


def _parse_page(value: str) -> int:
    try:
        page = int(value)
    except ValueError:
        raise UsageError(f"Invalid page number: {value!r}") from None
    if page < 1:
        raise UsageError(f"Invalid page number: {value!r}")
    return page


def parse_search_args(args: list[str]) -> SearchQuery:
    """
    Turn `--search` arguments into a SearchQuery.

    `page:<N>` and `category:<C>` may appear anywhere; every other token is
    the query text, and a later one replaces an earlier one.
    """
    query = SearchQuery()
    for arg in args:
        if arg.startswith(PAGE_PREFIX):
            query.page = _parse_page(arg[len(PAGE_PREFIX):])
        elif arg.startswith(CATEGORY_PREFIX):
            query.category = arg[len(CATEGORY_PREFIX):] or None
        else:
            query.text = arg

    if not query.text and not query.category:
        raise UsageError("Search query or category is required.")
    logger.debug("Parsed search arguments %s → %s", args, query)
    return query


def build_payload(query: SearchQuery, hits_per_page: int | None = None) -> dict:
    filters = []
    if query.category:
        filters.append({"filterType": "main_categories", "value": query.category})

    return {
        "query": "" if query.text == HOME else query.text,
        "filters": filters,
        "hits_per_page": hits_per_page or config.hits_per_page,
        "page": query.page,
    }
