"""ModeChat adapter package.

Architectural role:
- Defines the external interaction boundary for HTTP and CLI interfaces.
- Performs transport-level validation and response shaping.
- Delegates classification and synthesis to the core layer.

Scope:
- Request lifecycle control for adapter concerns only.
- Callers own the conversation history; the core never stores it.
"""
