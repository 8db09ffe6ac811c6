"""Field extractors — pull scalar vendor facts out of a raw email thread.

Every extractor takes the full thread text and returns a string. None of them
raise: no match means the field's sentinel comes back instead.

Pattern tables are plain data so each rule can be tested on its own:
  - price:              all matches, longest wins (ties go to the first)
  - fees / discounts:   every pattern tried, all hits kept
  - delivery / lead:    ordered, first hit wins
  - notes:              one label per pattern group, fixed order
"""

import logging
import re

from .dedup import dedupe

log = logging.getLogger("vts.field_extractors")

# ── Sentinels ─────────────────────────────────────────────────────────

DEFAULT_VENDOR_NAME = "Unknown Vendor"
DEFAULT_CONTACT = "contact@example.com"
PRICE_NOT_AVAILABLE = "Not available in thread"
NO_FEES = "No additional fees mentioned"
NO_DISCOUNTS = "No quantity discounts mentioned"
NOT_SPECIFIED = "Not specified"
NO_NOTES = "No additional notes"
REVIEW_RECOMMENDED = (
    "The thread contains vendor details that did not match a known field. "
    "Manual review recommended."
)

NOTES_REVIEW_THRESHOLD = 200  # chars of stripped input

# A clause up to the end of its sentence; decimal points don't end it
_DETAIL = r"((?:[^.\n;]|\.\d)+)"

# Linking word between a field label and its value: "is", "of", ":" ...
_LINK = r"\s*(?:(?:is|are|of|for|will be)\b|:)\s*"

# ── Identity / contact ────────────────────────────────────────────────

_FROM_RE = re.compile(r"From:[ \t]*([^<\n]*)", re.IGNORECASE)

_EMAIL_RE = re.compile(r"(?<![a-zA-Z0-9._%+\-])[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")

_PHONE_RE = re.compile(
    r"(?<!\w)(?:\+\d{1,3}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}(?!\d)"
)

# ── Pricing ───────────────────────────────────────────────────────────

_PRICE_RE = re.compile(
    r"(?:US)?[$€£]\s?\d+(?:,\d{3})*(?:\.\d+)?"
    r"(?:\s*(?:per|/)\s*(?:unit|piece|pc|pcs|each|ea|kg|lb|lbs|ton|tonne|meter|metre|m|foot|ft|rod|bar)\b)?"
    r"|\b\d+(?:,\d{3})*(?:\.\d+)?\s*(?:USD|EUR|GBP|dollars|euros)\b",
    re.IGNORECASE,
)

# (label, pattern): detail is capture group 1
FEE_PATTERNS = [
    ("Shipping", re.compile(
        r"shipping(?:\s+(?:fee|cost|charge)s?)?" + _LINK + _DETAIL,
        re.IGNORECASE)),
    ("Handling", re.compile(
        r"handling\s+(?:fee|charge|cost)s?(?:" + _LINK + r"|\s*)" + _DETAIL,
        re.IGNORECASE)),
    ("Additional charge", re.compile(
        r"(?:additional|extra)\s+(?:fee|charge|cost)s?(?:" + _LINK + r"|\s*)" + _DETAIL,
        re.IGNORECASE)),
    ("Setup", re.compile(
        r"set[\s-]?up\s+(?:fee|charge|cost)s?(?:" + _LINK + r"|\s*)" + _DETAIL,
        re.IGNORECASE)),
    ("Surcharge", re.compile(
        r"surcharge(?:" + _LINK + r"|\s*)" + _DETAIL,
        re.IGNORECASE)),
]

DISCOUNT_PATTERNS = [
    re.compile(r"(?<!\d)\d+(?:\.\d+)?\s*%\s*(?:discount|off)\b[^.\n;]*", re.IGNORECASE),
    re.compile(r"discount\s+of\s+\d+(?:\.\d+)?\s*%[^.\n;]*", re.IGNORECASE),
    re.compile(
        r"(?:volume|bulk|quantity|tiered)\s+(?:discount|pricing)s?\b[^.\n;]*",
        re.IGNORECASE,
    ),
]

# ── Logistics ─────────────────────────────────────────────────────────

_DURATION = r"(?<!\d)\d+(?:\s*(?:-|to)\s*\d+)?\s*(?:business\s+|working\s+)?(?:days?|weeks?|months?)"

# (pattern, group): ordered, first hit wins
DELIVERY_PATTERNS = [
    (re.compile(r"delivery\s+terms?" + _LINK + _DETAIL, re.IGNORECASE), 1),
    (re.compile(r"\b(?:EXW|FCA|FAS|FOB|CFR|CIF|CPT|CIP|DAP|DPU|DDP)\b(?:\s+[A-Z][a-zA-Z]+)*"), 0),
    (re.compile(r"(?:free\s+)?(?:delivery|shipping)\s+(?:to|within)\s+" + _DETAIL, re.IGNORECASE), 0),
    (re.compile(r"ships?\s+(?:via|by)\s+" + _DETAIL, re.IGNORECASE), 0),
]

LEAD_TIME_PATTERNS = [
    (re.compile(
        r"lead\s*[-\s]?time\s*(?:is|of|will be|:)?\s*(?:approximately|about|around|roughly)?\s*(" + _DURATION + ")",
        re.IGNORECASE), 1),
    (re.compile(r"(" + _DURATION + r")\s+lead\s*[-\s]?time", re.IGNORECASE), 1),
    (re.compile(
        r"(?:deliver(?:y|ed)?|ship(?:ped|ping|s)?|dispatch(?:ed)?)\s+(?:with)?in\s+(" + _DURATION + ")",
        re.IGNORECASE), 1),
    (re.compile(r"lead\s*[-\s]?time" + _LINK + _DETAIL, re.IGNORECASE), 1),
]

# ── Notes ─────────────────────────────────────────────────────────────

# (label, patterns): fixed output order, first matching pattern per label
NOTE_PATTERNS = [
    ("Payment terms", [
        re.compile(r"payment\s+terms?(?:" + _LINK + r"|\s*)" + _DETAIL, re.IGNORECASE),
        re.compile(r"\b(net\s*\d{1,3}(?:\s+days)?)\b", re.IGNORECASE),
    ]),
    ("Warranty", [
        re.compile(r"warrant(?:y|ies)" + _LINK + _DETAIL, re.IGNORECASE),
        re.compile(r"((?<!\d)\d+[\s-](?:year|month)s?)\s+warranty", re.IGNORECASE),
    ]),
    ("Minimum order", [
        re.compile(
            r"(?:minimum\s+order(?:\s+quantity)?|\bMOQ\b)(?:" + _LINK + r"|\s*)" + _DETAIL,
            re.IGNORECASE),
    ]),
    ("Material", [
        re.compile(
            r"(?:material|alloy)\s*(?:spec(?:ification)?s?|grade)?" + _LINK + _DETAIL,
            re.IGNORECASE),
        re.compile(r"\b(\d{4}-T\d{1,4})\b"),
    ]),
]


def _clean(value: str) -> str:
    return re.sub(r"\s+", " ", value).strip(" \t\n,:-")


def _first_match(patterns, text: str) -> str | None:
    for pattern, group in patterns:
        m = pattern.search(text)
        if m:
            value = _clean(m.group(group))
            if value:
                return value
    return None


# ── Extractors ────────────────────────────────────────────────────────


def extract_vendor_name(text: str) -> str:
    """Text after the first 'From:' up to '<' or end of line."""
    m = _FROM_RE.search(text or "")
    if m:
        name = m.group(1).strip()
        if name:
            return name
    return DEFAULT_VENDOR_NAME


def extract_contact_info(text: str) -> str:
    """'email | phone' when both are present; placeholder when no email."""
    text = text or ""
    email = _EMAIL_RE.search(text)
    if not email:
        return DEFAULT_CONTACT
    contact = email.group(0)
    phone = _PHONE_RE.search(text)
    if phone:
        contact = f"{contact} | {phone.group(0).strip()}"
    return contact


def extract_unit_price(text: str) -> str:
    """Longest currency-looking token; more qualifiers means more informative."""
    best = ""
    for m in _PRICE_RE.finditer(text or ""):
        candidate = m.group(0).strip()
        if len(candidate) > len(best):
            best = candidate
    return best or PRICE_NOT_AVAILABLE


def extract_additional_fees(text: str) -> str:
    text = text or ""
    fees = []
    for label, pattern in FEE_PATTERNS:
        m = pattern.search(text)
        if m:
            detail = _clean(m.group(1))
            if detail:
                fees.append(f"{label}: {detail}")
    return "; ".join(fees) if fees else NO_FEES


def extract_quantity_discounts(text: str) -> str:
    text = text or ""
    hits = []
    for pattern in DISCOUNT_PATTERNS:
        for m in pattern.finditer(text):
            hit = _clean(m.group(0))
            # later patterns often re-match a clause an earlier one already captured
            if hit and not any(hit.lower() in kept.lower() for kept in hits):
                hits.append(hit)
    hits = dedupe(hits)
    return "; ".join(hits) if hits else NO_DISCOUNTS


def extract_delivery_terms(text: str) -> str:
    return _first_match(DELIVERY_PATTERNS, text or "") or NOT_SPECIFIED


def extract_lead_time(text: str) -> str:
    return _first_match(LEAD_TIME_PATTERNS, text or "") or NOT_SPECIFIED


def extract_additional_notes(text: str, threshold: int = NOTES_REVIEW_THRESHOLD) -> str:
    """'Label: value. ' fragments in fixed order, or a fallback sentence.

    With nothing matched, a thread longer than threshold gets a review
    recommendation; shorter threads get the no-notes sentinel.
    """
    text = text or ""
    notes = ""
    for label, patterns in NOTE_PATTERNS:
        value = _first_match([(p, 1) for p in patterns], text)
        if value:
            notes += f"{label}: {value.rstrip('.')}. "
    if notes:
        return notes.strip()
    if len(text.strip()) > threshold:
        log.debug("No note fields matched in %d-char thread, flagging for review", len(text))
        return REVIEW_RECOMMENDED
    return NO_NOTES
