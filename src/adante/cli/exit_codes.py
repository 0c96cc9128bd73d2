"""Exit-code constants used by the error handlers.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""No error entries were found."""

GENERAL_ERROR: int = 1
"""At least one error entry was reported to the user."""
