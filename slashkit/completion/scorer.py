# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tiered string-similarity scoring for completion candidates.

Lower scores rank higher. Each tier has a fixed offset so that any prefix match
beats any substring match, which beats any fuzzy match:

- empty query:           0
- prefix match:          10 + (len(candidate) - len(query)) / 100
- substring match:       30 + match index
- subsequence match:     50 + total gap
- no match:              None (candidate is excluded)

All comparisons are case-insensitive.
"""
from __future__ import annotations

PREFIX_TIER = 10
SUBSTRING_TIER = 30
FUZZY_TIER = 50


def fuzzy_score(query: str, value: str) -> int | None:
    """
    Match `query` as an ordered subsequence of `value`.

    Returns the total gap: characters skipped before the first match plus the
    characters skipped between consecutive matches. None if `query` is not a
    subsequence of `value`.
    """
    if not query:
        return 0

    query_index = 0
    total_gap = 0
    last_match = -1

    for index, char in enumerate(value):
        if query_index == len(query):
            break
        if char != query[query_index]:
            continue
        total_gap += index - last_match - 1
        last_match = index
        query_index += 1

    if query_index != len(query):
        return None
    return total_gap


def score_candidate(query: str, candidate: str) -> float | None:
    """Score `candidate` against `query`; lower is better, None excludes it."""
    q = query.lower()
    c = candidate.lower()

    if not q:
        return 0

    if c.startswith(q):
        return PREFIX_TIER + (len(c) - len(q)) / 100

    index = c.find(q)
    if index >= 0:
        return SUBSTRING_TIER + index

    gap = fuzzy_score(q, c)
    if gap is not None:
        return FUZZY_TIER + gap

    return None
