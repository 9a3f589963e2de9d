"""Core orchestration package.

Architectural role:
    Exposes the response-synthesis pipeline that sits between the CLI/HTTP
    adapters and the rule-based classifiers.

Composition:
    - `engine`: the entry points (`respond`, `respond_with_trace`,
      `generate_response`).
    - `strategy`: ordered strategy decision table.
    - `modes`: static mode registry.
    - `types`: shared data contracts.
    - `config`: environment-driven adapter settings.

Determinism and side effects:
    Package import only reads environment configuration. The pipeline itself
    is a pure function of its inputs.
"""
