"""Utility functions for PowerView control.

This module contains helper functions used across the application:
- position_to_percent / percent_to_position: Convert raw shade positions
- similarity_score: Fuzzy name matching score
- find_similar_strings: Rank candidate names by similarity
"""

from models.types import MAX_POSITION


def position_to_percent(position: int) -> int:
    """Convert a raw hub position (0-65535) to a rounded percentage (0-100)."""
    return round(position * 100 / MAX_POSITION)


def percent_to_position(percent: int) -> int:
    """Convert a percentage (0-100) to a raw hub position (0-65535).

    Raises:
        ValueError: if percent is outside 0-100
    """
    if not 0 <= percent <= 100:
        raise ValueError(f"percentage must be between 0 and 100, got {percent}")
    return round(percent * MAX_POSITION / 100)


def similarity_score(s1: str, s2: str) -> int:
    """Score how closely two names match, ignoring case.

    Used for command typo suggestions and for the "did you mean" hints on
    failed scene, room and shade lookups.

    Returns:
        100 for an exact match, 80 when one is a prefix of the other, 60
        when one contains the other, otherwise up to 50 for in-order
        matching characters (scores of 20 or less count as no match)
    """
    a = s1.lower()
    b = s2.lower()

    if a == b:
        return 100
    if b.startswith(a) or a.startswith(b):
        return 80
    if a in b or b in a:
        return 60

    # in-order character matches
    matches = 0
    j = 0
    for char in a:
        while j < len(b):
            j += 1
            if b[j - 1] == char:
                matches += 1
                break

    if matches:
        score = int(matches / max(len(a), len(b)) * 50)
        return score if score > 20 else 0
    return 0


def find_similar_strings(target: str, candidates: list[str], limit: int = 5) -> list[str]:
    """Return up to limit candidates that resemble target, best first."""
    scored = [(candidate, similarity_score(target, candidate)) for candidate in candidates]
    ranked = sorted((item for item in scored if item[1] > 0), key=lambda item: item[1], reverse=True)
    return [candidate for candidate, _ in ranked[:limit]]
