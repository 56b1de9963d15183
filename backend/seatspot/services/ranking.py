"""Relevance scoring for review ordering."""
import math


def relevance_score(upvotes: int, downvotes: int) -> float:
    """Approval ratio weighted by log10 of vote volume.

    ``0`` when nobody has voted.  The ``+1`` keeps the log defined for a
    single vote and makes the score grow with volume at a fixed ratio.
    """
    total = upvotes + downvotes
    if total == 0:
        return 0.0
    return (upvotes / total) * math.log10(total + 1)


def rank_reviews(reviews: list) -> list:
    """Order reviews by score descending, newest first among equal scores."""
    by_recency = sorted(reviews, key=lambda r: r.created_at, reverse=True)
    return sorted(by_recency, key=lambda r: r.score, reverse=True)
