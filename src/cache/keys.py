# src/cache/keys.py — v2
"""Cache key construction."""

from __future__ import annotations

# ASCII unit separator. Provider and model ids can never contain it, while
# model ids may contain ":" (e.g. "...:free"), so keys stay unambiguous.
KEY_DELIMITER = "\x1f"


def build_cache_key(provider: str, model: str, sentence: str) -> str:
    """Join provider, model and sentence into a cache key.

    The sentence is used verbatim: no case or whitespace normalization, so
    incidental formatting differences produce distinct keys.
    """
    return KEY_DELIMITER.join((provider, model, sentence))
