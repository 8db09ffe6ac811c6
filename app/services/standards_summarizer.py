"""Standards summarizer — ESG / Quality / Safety bullets for a vendor thread.

Each category has an ordered detector table. A detector is a regex plus a
bullet template; every detector that matches the located text contributes one
bullet, so the output follows table order rather than document order.

Templates are str.format() strings: {0} is the whole match (whitespace
collapsed), {1}.. are the capture groups ("" when a group didn't take part).

Fallbacks when no detector fires:
  1. category or one of its keywords mentioned anywhere → "mentioned, not detailed"
  2. otherwise → "no information available"

If the author wrote a labeled bullet list ("ESG Standards: • ... • ..."),
their items are used verbatim instead of running detectors.
"""

import logging
import re

from .dedup import drop_repeats
from .keyword_catalog import Category, keywords_for, mentions_category
from .section_locator import LocatedText, locate

log = logging.getLogger("vts.standards_summarizer")

_I = re.IGNORECASE

# ── Detector tables ───────────────────────────────────────────────────

ESG_DETECTORS = [
    (re.compile(
        r"\bESG\s+(?:rating|score)\s*(?:is|of|:)?\s*([A-D][+-]?|\d+(?:\.\d+)?(?:\s*/\s*\d+)?)(?!\w)", _I),
        "ESG rating: {1}"),
    (re.compile(r"carbon[\s-]+neutral", _I),
        "Carbon neutral operations"),
    (re.compile(r"\bISO\s*14001\b", _I),
        "ISO 14001 certified environmental management system"),
    (re.compile(
        r"(?<!\d)(\d+(?:\.\d+)?)\s*%\s*(?:post-consumer\s+)?recycled"
        r"|recycled\s+content\s*(?:of|:|is)?\s*(\d+(?:\.\d+)?)\s*%", _I),
        "{1}{2}% recycled content"),
    (re.compile(
        r"renewable\s+(?:energy|power|electricity)|\bsolar\b|wind\s+power|hydro(?:electric)?\s*power", _I),
        "Powered by renewable energy sources"),
    (re.compile(
        r"fair\s+labou?r|ethical(?:ly)?\s+sourc\w*|responsibl[ey]\s+sourc\w*|conflict[\s-]free", _I),
        "Fair labor and ethical sourcing practices"),
    (re.compile(
        r"communit(?:y|ies)\s+(?:engagement|programs?|outreach|investment|initiatives?)", _I),
        "Community engagement programs"),
    (re.compile(
        r"transparen(?:cy|t)|sustainability\s+report\w*|\bESG\s+report\w*|\bCDP\b|\bGRI\b", _I),
        "Publishes sustainability and transparency reporting"),
]

QUALITY_DETECTORS = [
    (re.compile(r"\bISO\s*9001\b", _I),
        "ISO 9001 certified quality management system"),
    (re.compile(
        r"\bASTM\s*[A-Z]\s*\d+(?:/[A-Z]?\s*\d+M?)?(?:\s*,?\s*(?:grade|gr\.?)\s*[\w-]+)?", _I),
        "Meets {0} material testing standard"),
    (re.compile(
        r"tensile\s+strength\D{0,30}?(\d[\d,]*(?:\.\d+)?)\s*(MPa|GPa|ksi|psi|N/mm2|N/mm²)", _I),
        "Tensile strength: {1} {2}"),
    (re.compile(
        r"hardness\s+(?:test(?:ing|ed|s)?|checks?)|\b(?:brinell|rockwell|vickers|webster)\b", _I),
        "Hardness testing performed"),
    (re.compile(r"quality\s+(?:control|assurance)|\binspect(?:ion|ions|ed)\b", _I),
        "Quality control inspections in place"),
    (re.compile(r"statistical\s+(?:sampling|process\s+control)|\bSPC\b|\bAQL\b|six\s+sigma", _I),
        "Statistical sampling and process control applied"),
    (re.compile(
        r"mill\s+(?:test\s+)?cert\w*|certificates?\s+of\s+(?:conformance|conformity|analysis)", _I),
        "Mill test certificates provided with shipments"),
]

SAFETY_DETECTORS = [
    (re.compile(r"\bISO\s*45001\b|\bOHSAS\s*18001\b", _I),
        "{0} certified occupational health and safety management"),
    (re.compile(r"\bM?SDSs?\b|safety\s+data\s+sheets?", _I),
        "Material Safety Data Sheets (MSDS) provided"),
    (re.compile(r"handling\s+(?:instructions|guidelines|procedures)|safe\s+handling", _I),
        "Handling instructions provided"),
    # case-sensitive: "REACH" the regulation, not "reach out"
    (re.compile(r"\b(OSHA|REACH|RoHS|ANSI)\b"),
        "Compliant with {1} regulations"),
    (re.compile(r"\bPPE\b|personal\s+protective\s+equipment", _I),
        "PPE recommendations provided"),
    (re.compile(
        r"\bhazard\w*\s+(?:label\w*|warnings?|communication|symbols?)|\bGHS\b|warning\s+labels?", _I),
        "Hazard labeling on products and packaging"),
    (re.compile(r"safety\s+training|trained\s+in\s+safe", _I),
        "Safety training available"),
]

DETECTORS = {
    Category.ESG: ESG_DETECTORS,
    Category.QUALITY: QUALITY_DETECTORS,
    Category.SAFETY: SAFETY_DETECTORS,
}

# Labeled section content that reads as a bullet list
_LIST_RE = re.compile(r"[•·]|(?:^|\n)[ \t]*[-*][ \t]")
_LIST_SPLIT_RE = re.compile(r"[\n•·]")
_LEADING_MARKER_RE = re.compile(r"^\s*[-*]\s+")


def mentioned_bullet(category: Category) -> str:
    return (
        f"{category.value} standards mentioned but not detailed. "
        "Recommend requesting documentation."
    )


def no_information_bullet(category: Category) -> str:
    return f"No {category.value} information available in thread."


def is_unspecified(bullets, category: Category) -> bool:
    """True for the single-bullet 'no information' sentinel list."""
    return tuple(bullets) == (no_information_bullet(category),)


def _render(template: str, m: re.Match) -> str:
    whole = re.sub(r"\s+", " ", m.group(0)).strip()
    groups = [re.sub(r"\s+", " ", g).strip() if g else "" for g in m.groups()]
    return template.format(whole, *groups).strip()


def run_detectors(text: str, category: Category) -> list[str]:
    """One bullet per matching detector, in table order."""
    bullets = []
    if not text:
        return bullets
    for pattern, template in DETECTORS[category]:
        m = pattern.search(text)
        if m:
            bullets.append(_render(template, m))
    return bullets


def list_items(content: str) -> list[str]:
    """Items of a bulleted block, markers stripped; [] if it isn't a list."""
    if not content or not _LIST_RE.search(content):
        return []
    items = []
    for piece in _LIST_SPLIT_RE.split(content):
        item = _LEADING_MARKER_RE.sub("", piece).strip()
        if item:
            items.append(item)
    return items


def summarize(located: LocatedText, full_text: str, category: Category) -> tuple[str, ...]:
    """Non-empty bullets for one category."""
    if located.labeled:
        items = list_items(located.text)
        if items:
            return tuple(drop_repeats(items))
        scan = f"{located.heading}: {located.text}"
    else:
        scan = located.text

    bullets = run_detectors(scan, category)
    if bullets:
        log.debug("%s: %d detectors fired", category.value, len(bullets))
        return tuple(bullets)
    if mentions_category(full_text, category):
        return (mentioned_bullet(category),)
    return (no_information_bullet(category),)


def summarize_category(text: str, category: Category) -> tuple[str, ...]:
    """Locate and summarize a category straight from the raw thread."""
    located = locate(text, category, keywords_for(category))
    return summarize(located, text, category)
