# src/analysis/graph.py — v1
"""Modification-graph hygiene for analysed words.

Models occasionally reference ids that do not exist, point a word at itself,
or give a topic word outgoing edges. None of these fail the analysis; the
offending edges are dropped.
"""

from __future__ import annotations

import logging

from bunkai.core.models import WordNode

logger = logging.getLogger(__name__)


def normalize_words(words: list[WordNode]) -> list[WordNode]:
    """Return words ordered by position with a clean modification graph.

    - dangling and self references are dropped (order of the rest is kept),
    - duplicate targets collapse to their first occurrence,
    - topic words get an empty ``modifies``,
    - duplicate positions keep their original relative order.
    """
    known_ids = {w.id for w in words}
    dropped = 0
    cleaned: list[WordNode] = []

    for word in words:
        if word.is_topic:
            if word.modifies:
                dropped += len(word.modifies)
            cleaned.append(word.model_copy(update={"modifies": []}))
            continue
        if word.modifies is None:
            cleaned.append(word)
            continue

        targets: list[str] = []
        for target in word.modifies:
            if target in known_ids and target != word.id and target not in targets:
                targets.append(target)
            else:
                dropped += 1
        cleaned.append(word.model_copy(update={"modifies": targets}))

    if dropped:
        logger.debug("Dropped %d invalid modification reference(s)", dropped)

    # sorted() is stable, so equal positions keep model order.
    return sorted(cleaned, key=lambda w: w.position)


def modification_edges(words: list[WordNode]) -> list[tuple[str, str]]:
    """Directed (source_id, target_id) edges of the modification graph."""
    known_ids = {w.id for w in words}
    edges: list[tuple[str, str]] = []
    for word in words:
        if word.is_topic:
            continue
        for target in word.modifies or []:
            if target in known_ids and target != word.id:
                edges.append((word.id, target))
    return edges
