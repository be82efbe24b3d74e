"""Lexical normalization: lowercase, strip punctuation and stopwords, weight tokens."""

import re
from collections.abc import Iterable, Mapping

# Common English function words. Tokens of length <= 2 are dropped before
# this set is consulted, so short words are listed only for completeness.
STOPWORDS: frozenset[str] = frozenset({
    "a", "an", "the", "and", "or", "but", "nor", "so", "yet",
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "as",
    "into", "onto", "upon", "about", "over", "under", "between", "through",
    "during", "before", "after", "above", "below", "across", "within",
    "without", "per", "via",
    "is", "was", "are", "were", "been", "be", "being", "am",
    "has", "have", "had", "having", "do", "does", "did",
    "will", "would", "shall", "should", "can", "could", "may", "might",
    "this", "that", "these", "those", "there", "here",
    "you", "your", "yours", "our", "ours", "their", "theirs", "they",
    "them", "who", "whom", "whose", "which", "what", "where", "when",
    "why", "how", "all", "any", "both", "each", "few", "more", "most",
    "other", "some", "such", "only", "own", "same", "than", "too",
    "very", "also", "just", "not", "its", "it", "we", "us",
    "then", "once", "again", "further", "while",
})

_NON_WORD_RE = re.compile(r"\W+")
MIN_TOKEN_LENGTH = 3


def tokenize(text: str, *, stopwords: Iterable[str] = STOPWORDS) -> list[str]:
    """Return the surviving tokens of ``text`` in order of appearance."""
    if not text:
        return []
    stop = stopwords if isinstance(stopwords, (set, frozenset)) else frozenset(stopwords)
    words = _NON_WORD_RE.sub(" ", text.lower()).split()
    return [w for w in words if len(w) >= MIN_TOKEN_LENGTH and w not in stop]


def normalize(
    text: str,
    weight: int = 1,
    counts: Mapping[str, int] | None = None,
    *,
    stopwords: Iterable[str] = STOPWORDS,
) -> dict[str, int]:
    """Add ``weight`` to every surviving token of ``text``.

    ``counts`` is the running accumulator from earlier calls. It is
    copied, never mutated: the returned dict holds the previous totals
    plus this text's contribution, with keys in first-seen order.
    """
    totals = dict(counts) if counts else {}
    for token in tokenize(text, stopwords=stopwords):
        totals[token] = totals.get(token, 0) + weight
    return totals
