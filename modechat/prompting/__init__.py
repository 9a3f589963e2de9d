"""Response templates and the synthesizer that selects among them.

- `templates`: the static, read-only template bank.
- `response_builder`: ordered per-mode decision tables and rendering.

Nothing here classifies text on its own; it consumes labels produced by
`modechat.nlp` and `modechat.core.strategy`.
"""
