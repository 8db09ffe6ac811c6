"""Near-duplicate sentence collapsing by word-token overlap.

Lexical only: paraphrases with different wording are not caught, and short
sentences sharing most words are merged even if they differ in meaning.
"""

import re

SIMILARITY_THRESHOLD = 0.7

_TOKEN_RE = re.compile(r"\w+")


def _tokens(text: str) -> list[str]:
    return _TOKEN_RE.findall((text or "").lower())


def similarity(a: str, b: str) -> float:
    """Share of a's tokens found in b, over the longer token count. 0.0 if either is empty."""
    tokens_a = _tokens(a)
    tokens_b = _tokens(b)
    if not tokens_a or not tokens_b:
        return 0.0
    vocab_b = set(tokens_b)
    shared = sum(1 for t in tokens_a if t in vocab_b)
    return shared / max(len(tokens_a), len(tokens_b))


def dedupe(sentences, threshold: float = SIMILARITY_THRESHOLD) -> list[str]:
    """Drop sentences too similar to an earlier kept one. Earlier always wins."""
    kept: list[str] = []
    for sentence in sentences:
        if any(similarity(sentence, prior) >= threshold for prior in kept):
            continue
        kept.append(sentence)
    return kept


def drop_repeats(items) -> list[str]:
    """Drop items that repeat an earlier one, ignoring case and spacing."""
    seen: set[str] = set()
    kept: list[str] = []
    for item in items:
        key = " ".join(item.lower().split())
        if key in seen:
            continue
        seen.add(key)
        kept.append(item)
    return kept
