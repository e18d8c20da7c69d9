"""Response keys a Question may override.

- ASK_ON_ERROR: prompt shown in place of the original after a rejected answer
- INVALID_TYPE: message shown when an answer cannot be coerced
- NOT_VALID:    message shown when an answer fails its constraints
"""

from __future__ import annotations

ASK_ON_ERROR = "ask_on_error"
INVALID_TYPE = "invalid_type"
NOT_VALID = "not_valid"

RESPONSE_KEYS = frozenset({ASK_ON_ERROR, INVALID_TYPE, NOT_VALID})

__all__ = ["ASK_ON_ERROR", "INVALID_TYPE", "NOT_VALID", "RESPONSE_KEYS"]
