"""Ordered-subsequence matching used by the live target filter."""

from __future__ import annotations

from collections.abc import Sequence


def fuzzy_match(text: str, query: str) -> bool:
    """Return whether ``query`` characters appear in ``text`` in order.

    Characters need not be contiguous: ``"tap"`` matches ``"target_all_prod"``
    while ``"pat"`` does not. An empty query matches everything. Comparison is
    exact; callers fold case before calling.
    """
    if not query:
        return True
    position = 0
    text_len = len(text)
    for ch in query:
        while position < text_len and text[position] != ch:
            position += 1
        if position >= text_len:
            return False
        position += 1
    return True


def fuzzy_match_indices(labels: Sequence[str], query: str) -> list[int]:
    """Return indices of ``labels`` matching ``query`` case-insensitively.

    An empty query returns an empty list, which callers read as "no filter".
    """
    if not query:
        return []
    folded = query.lower()
    return [idx for idx, label in enumerate(labels) if fuzzy_match(label.lower(), folded)]
