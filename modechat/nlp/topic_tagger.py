"""Secondary topic tagger consulted only by the template synthesizer.

Each topic in `TOPICS` is tested with a case-insensitive whole-word match
against its `TOPIC_KEYWORDS` entry; matched topics are returned in `TOPICS`
order. Unlike the domain classifier there is no fallback label: no match
returns an empty list.
"""

from modechat.core.types import TOPICS
from modechat.nlp.lexicon import TOPIC_KEYWORDS, match_whole_words


def extract_topics(text: str) -> list[str]:
    """Return the coarse topics (`technology`, `education`, ...) found in `text`."""
    return [
        topic
        for topic in TOPICS
        if match_whole_words(text, TOPIC_KEYWORDS[topic])
    ]
