"""Product name search over an already-fetched catalog."""
from typing import Iterable, List

from core.logging import get_logger, safe_text
from .models import Product

logger = get_logger(__name__)


def search_by_name(term: str, catalog: Iterable[Product]) -> List[Product]:
    """
    Return products whose name contains ``term``.

    Matching is a case-sensitive substring test and catalog order is kept.
    An empty term, a non-string term or an empty catalog gives ``[]``.
    The term is only compared in memory, so quotes, SQL fragments, markup
    or very long payloads are just text that usually matches nothing.

    Args:
        term: Name fragment typed by the user
        catalog: Products to search

    Returns:
        Matching products (possibly empty)
    """
    if not isinstance(term, str) or not term:
        return []

    matches = [product for product in catalog if term in product.name]
    logger.debug(
        f"Name search '{safe_text(term)}' matched {len(matches)} product(s)"
    )
    return matches
