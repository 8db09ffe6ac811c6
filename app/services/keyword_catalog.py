"""Keyword catalog — trigger terms for each standards category.

Static configuration: built once at import time, exposed read-only.
"""

from enum import Enum
from types import MappingProxyType


class Category(str, Enum):
    ESG = "ESG"
    QUALITY = "Quality"
    SAFETY = "Safety"

    @property
    def key(self) -> str:
        """Lowercase name, used for substring matching and record fields."""
        return self.value.lower()


CATEGORY_KEYWORDS = MappingProxyType({
    Category.ESG: (
        "environmental", "sustainable", "sustainability", "carbon",
        "emissions", "recycled", "renewable", "green energy", "social",
        "governance", "ethical", "fair labor", "community", "iso 14001",
    ),
    Category.QUALITY: (
        "iso 9001", "astm", "tensile", "hardness", "inspection",
        "quality control", "tolerance", "defect", "six sigma", "sampling",
        "mill certificate", "certificate of conformance",
    ),
    Category.SAFETY: (
        "osha", "iso 45001", "ohsas", "msds", "sds", "safety data sheet",
        "hazard", "personal protective", "protective equipment",
        "handling instructions", "reach compli", "rohs",
    ),
})


def keywords_for(category: Category) -> tuple[str, ...]:
    return CATEGORY_KEYWORDS[category]


def mentions_category(text: str, category: Category) -> bool:
    """True if the category name or any of its keywords appears in text."""
    lowered = (text or "").lower()
    if category.key in lowered:
        return True
    return any(kw in lowered for kw in CATEGORY_KEYWORDS[category])
