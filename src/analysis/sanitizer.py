# src/analysis/sanitizer.py — v2
"""Allow-list HTML sanitizer for model-produced rich text.

Tags outside the allow-list are unwrapped (their text survives), the content
of script-like tags is dropped, and every attribute is removed.
"""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import PreformattedString

EXPLANATION_TAGS: frozenset[str] = frozenset(
    {"p", "strong", "em", "ul", "li", "ol", "br", "span"}
)
PARTICLE_TAGS: frozenset[str] = frozenset({"strong", "em", "br"})

# Tags whose inner text is never meaningful prose.
_NON_TEXT_TAGS = ["script", "style", "textarea", "option", "noscript", "iframe", "template"]


def sanitize(html: str, allowed_tags: frozenset[str] | set[str]) -> str:
    """Return html with only allow-listed, attribute-free tags.

    Idempotent: ``sanitize(sanitize(x), t) == sanitize(x, t)``.
    """
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")

    # Comments, doctypes, CDATA, processing instructions.
    for node in soup.find_all(string=lambda s: isinstance(s, PreformattedString)):
        node.extract()

    for tag in soup.find_all(_NON_TEXT_TAGS):
        if not tag.decomposed:
            tag.decompose()

    for tag in soup.find_all(True):
        if tag.name in allowed_tags:
            tag.attrs = {}
        else:
            tag.unwrap()

    # Removed and unwrapped tags leave adjacent whitespace-only strings that
    # the parser would merge on the next pass; merge them now.
    return str(BeautifulSoup(str(soup), "html.parser"))
