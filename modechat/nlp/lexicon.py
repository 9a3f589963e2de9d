"""Keyword tables and lexical predicates shared by every classifier.

Matching rules:
- Whole-word matching compiles each vocabulary into one alternation wrapped in
  `\\b` boundaries. Multi-word phrases ("machine learning") are matched as-is.
- Substring matching is plain `in` containment over the text the caller passes;
  callers decide whether to lower-case first.
- Prefix matching is plain `startswith` unless `word_boundary=True`, in which
  case the prefix must end on a word boundary ("what" matches "what is" but
  not "whatever").

Determinism:
- Fully deterministic. The keyword tables are module-level constants built at
  import time and never mutated afterwards.
  Whole-word patterns are compiled on first use and cached per vocabulary in
  `_WHOLE_WORD_CACHE`.
"""

import re


# =========================================================
# KNOWLEDGE DOMAINS (declaration order is report order)
# =========================================================

DOMAIN_KEYWORDS = {
    "science_technology": (
        "science", "technology", "research", "data", "algorithm", "AI",
        "machine learning", "programming", "code", "software", "hardware",
        "innovation", "experiment", "hypothesis", "theory", "analysis",
        "compute", "digital", "cyber", "tech", "engineering", "physics",
        "chemistry", "biology", "mathematics", "statistics",
    ),
    "arts_humanities": (
        "art", "literature", "philosophy", "history", "culture", "music",
        "poetry", "creative", "aesthetic", "beauty", "meaning",
        "interpretation", "narrative", "story", "drama", "film", "design",
        "visual", "language", "linguistics", "anthropology", "sociology",
    ),
    "business_economics": (
        "business", "economy", "market", "finance", "investment", "profit",
        "strategy", "management", "leadership", "entrepreneurship",
        "marketing", "sales", "customer", "brand", "competition", "growth",
        "revenue", "cost", "budget", "trade", "commerce",
    ),
    "health_medicine": (
        "health", "medical", "medicine", "doctor", "patient", "treatment",
        "therapy", "diagnosis", "symptoms", "disease", "wellness", "fitness",
        "nutrition", "mental health", "psychology", "psychiatry",
        "pharmaceutical", "clinical", "hospital", "care",
    ),
    "education_learning": (
        "education", "learning", "teaching", "student", "school",
        "university", "knowledge", "study", "exam", "curriculum", "pedagogy",
        "training", "skill", "competency", "academic", "research",
        "scholarship", "degree", "certification",
    ),
    "social_political": (
        "social", "society", "community", "politics", "government", "policy",
        "law", "justice", "rights", "democracy", "citizenship", "public",
        "civil", "ethics", "moral", "values", "diversity", "inclusion",
        "equality", "freedom", "responsibility",
    ),
}


# =========================================================
# INTENT MARKERS
# =========================================================

QUESTION_STARTERS = ("what", "how", "why", "when", "where", "who", "can you")

GREETING_STARTERS = (
    "hi", "hello", "hey",
    "good morning", "good afternoon", "good evening",
)

HELP_MARKERS = ("help", "assist", "support")

PROBLEM_MARKERS = (
    "problem", "issue", "error",
    "not working", "nothing is working", "isn't working", "doesn't work",
    "broken",
)

FAREWELL_STARTERS = (
    "bye", "goodbye", "see you",
    "thanks", "thank you", "that's all",
)

TASK_STARTERS = ("please",)
TASK_MARKERS = ("create", "make", "generate", "write")


# =========================================================
# SENTIMENT (substring, case-sensitive as authored)
# =========================================================

POSITIVE_WORDS = (
    "good", "great", "awesome", "excellent", "love", "like", "happy", "thanks",
)

NEGATIVE_WORDS = (
    "bad", "terrible", "hate", "dislike", "sad", "angry", "frustrated",
    "problem",
)


# =========================================================
# EXPERTISE PROXY
# =========================================================

TECHNICAL_TERMS = (
    "algorithm", "optimization", "methodology", "framework", "paradigm",
    "implementation", "architecture", "infrastructure",
)


# =========================================================
# SECONDARY TOPICS (template selection only)
# =========================================================

TOPIC_KEYWORDS = {
    "technology": (
        "code", "coding", "programming", "software", "app", "website", "tech",
        "computer",
    ),
    "education": (
        "learn", "study", "education", "school", "homework", "exam", "test",
    ),
    "writing": ("write", "writing", "essay", "grammar", "text", "document"),
    "career": ("job", "work", "career", "resume", "interview", "business"),
    "wellness": ("health", "wellness", "stress", "anxiety", "mood", "feeling"),
}


# =========================================================
# RESPONSE FAMILY MARKERS (lower-cased substring)
# =========================================================

REASONING_MARKERS = ("why", "how", "what if")
CREATIVE_MARKERS = ("create", "write", "generate")
PROBLEM_SOLVING_MARKERS = ("problem", "solve", "fix")
ANALYTICAL_MARKERS = ("analyze", "compare", "evaluate")


# =========================================================
# HELPERS
# =========================================================

_WHOLE_WORD_CACHE: dict[tuple[str, ...], re.Pattern] = {}


def _whole_word_pattern(words) -> re.Pattern:
    """Compile (once) a case-insensitive whole-word alternation for `words`."""
    key = tuple(words)
    pattern = _WHOLE_WORD_CACHE.get(key)
    if pattern is None:
        alternation = "|".join(re.escape(w) for w in key)
        pattern = re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)
        _WHOLE_WORD_CACHE[key] = pattern
    return pattern


def match_whole_words(text: str, words) -> bool:
    """Return whether any entry of `words` occurs in `text` as a whole word."""
    if not text:
        return False
    return _whole_word_pattern(words).search(text) is not None


def count_whole_words(text: str, words) -> int:
    """Count non-overlapping whole-word occurrences of `words` in `text`."""
    if not text:
        return 0
    return len(_whole_word_pattern(words).findall(text))


def contains_any(text: str, markers) -> bool:
    """Plain substring containment; no case folding."""
    if not text:
        return False
    return any(m in text for m in markers)


def count_contained(text: str, markers) -> int:
    """Number of distinct `markers` contained in `text` (substring, case-sensitive)."""
    if not text:
        return 0
    return sum(1 for m in markers if m in text)


def starts_with_any(text: str, prefixes, word_boundary: bool = False) -> bool:
    """Return whether `text` starts with one of `prefixes`.

    With `word_boundary`, the character after the prefix (if any) must not be
    a word character.
    """
    if not text:
        return False
    for prefix in prefixes:
        if text.startswith(prefix):
            if not word_boundary:
                return True
            rest = text[len(prefix):]
            if not rest or not (rest[0].isalnum() or rest[0] == "_"):
                return True
    return False


def tokenize(text: str) -> list[str]:
    """Whitespace tokenization used by the complexity estimator."""
    if not text:
        return []
    return text.split()
