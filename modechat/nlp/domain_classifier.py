"""Knowledge-domain classifier.

Parsing rules:
- Each domain in `DOMAINS` is tested independently with a case-insensitive
  whole-word match against its `DOMAIN_KEYWORDS` entry.
- Several domains may match; they are reported in `DOMAINS` order, never
  ranked by relevance.

Edge cases:
- No match (including empty or whitespace-only input) yields `["general"]`,
  so the result is never empty.
"""

from modechat.core.types import DOMAINS, GENERAL_DOMAIN
from modechat.nlp.lexicon import DOMAIN_KEYWORDS, match_whole_words


def classify_domains(text: str) -> list[str]:
    """Return the knowledge domains mentioned in `text`."""
    domains = [
        domain
        for domain in DOMAINS
        if match_whole_words(text, DOMAIN_KEYWORDS[domain])
    ]
    return domains if domains else [GENERAL_DOMAIN]
