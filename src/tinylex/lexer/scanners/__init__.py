"""Scanners for the tinylex lexer.

Scanners move the cursor over input that does not become a token.
"""

from __future__ import annotations

from tinylex.lexer.scanners.trivia import TriviaScannerMixin

__all__ = ["TriviaScannerMixin"]
