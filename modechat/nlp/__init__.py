"""Rule-based classifiers for single utterances.

Module scope:
- Shared keyword tables and predicates (`lexicon`).
- Knowledge domains (`domain_classifier`), primary intent
  (`intent_classifier`), polarity (`sentiment_classifier`), complexity and
  expertise (`complexity_estimator`).
- Template-selection helpers: coarse topics (`topic_tagger`) and grammar
  checks (`grammar_checker`).

Determinism profile:
- Fully deterministic keyword logic; no model-backed scoring.
"""
