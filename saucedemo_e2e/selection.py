"""Random product selection."""

import logging
import random
from typing import Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ITEM_LIMIT = 5


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a private random generator; pass a seed to replay a run."""
    return random.Random(seed)


def sample_without_replacement(items: Sequence[T], limit: int, rng: Optional[random.Random] = None) -> list[T]:
    """
    Draw ``min(limit, len(items))`` entries from ``items``.

    Entries are picked by position, so no catalog entry can be drawn twice.

    Args:
        items: Ordered collection to sample from
        limit: Maximum number of entries to draw
        rng: Random generator (a fresh unseeded one if omitted)

    Returns:
        The drawn entries in draw order
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    rng = rng or make_rng()
    size = min(limit, len(items))
    positions = rng.sample(range(len(items)), size)
    return [items[i] for i in positions]


def select_products(catalog: Sequence[T], limit: int = DEFAULT_ITEM_LIMIT, rng: Optional[random.Random] = None) -> list[T]:
    """Pick the products that one purchase run drives through checkout."""
    selection = sample_without_replacement(catalog, limit, rng)
    logger.info(f"Selected {len(selection)} of {len(catalog)} products")
    return selection
