"""Section locator — finds the part of a thread that talks about a category.

Two tiers: an explicitly labeled section ("ESG Standards: ...") wins; if the
author gave no such label, fall back to every sentence that mentions the
category name or one of its keywords.
"""

import logging
import re
from dataclasses import dataclass

from .keyword_catalog import Category, keywords_for

log = logging.getLogger("vts.section_locator")

# Boundary before a capital letter that follows sentence-ending punctuation
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s*(?=[A-Z])")

# Max heading characters between the category name and its colon
_MAX_LABEL_TAIL = 80

_SECTION_RE_CACHE: dict[Category, re.Pattern] = {}


@dataclass(frozen=True)
class LocatedText:
    text: str
    labeled: bool = False
    heading: str = ""


def _section_pattern(category: Category) -> re.Pattern:
    pattern = _SECTION_RE_CACHE.get(category)
    if pattern is None:
        pattern = re.compile(
            rf"\b({re.escape(category.value)}[^:\n]{{0,{_MAX_LABEL_TAIL}}}):[ \t]*(.*?)(?:\n[ \t]*\n|\Z)",
            re.IGNORECASE | re.DOTALL,
        )
        _SECTION_RE_CACHE[category] = pattern
    return pattern


def find_labeled_section(text: str, category: Category) -> tuple[str, str] | None:
    """(heading, content) of "<Category>...: <content>" up to a blank line or end of text."""
    if not text:
        return None
    m = _section_pattern(category).search(text)
    if not m or not m.group(2).strip():
        return None
    return m.group(1).strip(), m.group(2).strip()


def split_sentences(text: str) -> list[str]:
    if not text:
        return []
    return [s.strip() for s in _SENTENCE_BOUNDARY_RE.split(text) if s.strip()]


def relevant_sentences(text: str, category: Category, keywords=None) -> list[str]:
    """Sentences whose lowercase form contains the category name or a keyword."""
    terms = (category.key, *(keywords if keywords is not None else keywords_for(category)))
    return [s for s in split_sentences(text) if any(t in s.lower() for t in terms)]


def locate(text: str, category: Category, keywords=None) -> LocatedText:
    """Relevant text block for a category; empty text if nothing matched."""
    section = find_labeled_section(text, category)
    if section is not None:
        heading, content = section
        log.debug("Labeled %s section found (%d chars)", category.value, len(content))
        return LocatedText(content, labeled=True, heading=heading)
    sentences = relevant_sentences(text, category, keywords)
    log.debug("%d %s sentences located", len(sentences), category.value)
    return LocatedText(" ".join(sentences))
