"""Domain service: related-product ranking.

Scores every other catalog product against the one being viewed:

    +10    same category
    +3     per shared tag
    +1     per word (longer than 3 chars) of the candidate's name that
           appears inside the target's name, case-insensitive
    +0.01  per recorded view, as a popularity tie-breaker

Candidates with equal scores keep their catalog order. Nothing here
mutates the products it is handed.
"""

from __future__ import annotations

from storefront.domain.model.product import Product

CATEGORY_WEIGHT = 10
TAG_WEIGHT = 3
NAME_WORD_WEIGHT = 1
VIEW_WEIGHT = 0.01
MIN_NAME_WORD_LENGTH = 3
DEFAULT_LIMIT = 4


def score(candidate: Product, target: Product) -> float:
    total = 0.0

    if candidate.category == target.category:
        total += CATEGORY_WEIGHT

    target_tags = target.tags or []
    shared_tags = [tag for tag in candidate.tags or [] if tag in target_tags]
    total += len(shared_tags) * TAG_WEIGHT

    target_name = target.name.lower()
    matches = [
        word
        for word in candidate.name.lower().split(" ")
        if len(word) > MIN_NAME_WORD_LENGTH and word in target_name
    ]
    total += len(matches) * NAME_WORD_WEIGHT

    total += (candidate.views or 0) * VIEW_WEIGHT
    return total


def related_products(
    target: Product,
    catalog: list[Product],
    limit: int = DEFAULT_LIMIT,
) -> list[Product]:
    """Return up to *limit* catalog products ranked by relevance to *target*."""
    if limit <= 0:
        return []
    scored = [(score(p, target), p) for p in catalog if p.id != target.id]
    # sorted() is stable, so equal scores keep catalog order
    ranked = sorted(scored, key=lambda pair: pair[0], reverse=True)
    return [product for _, product in ranked[:limit]]
