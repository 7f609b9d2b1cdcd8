"""NvChad workstation installer (Python-first, step-driven).

Core design goals:
- Fail-fast prerequisite gate
- Idempotent steps (skip-if-present or delete-then-recreate)
- Strictly sequential, filesystem-only hand-off between steps
- Centralized logging
"""

__all__ = []
