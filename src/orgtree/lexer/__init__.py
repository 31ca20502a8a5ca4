"""Line classifier for orgtree.

Turns a document into a stream of classified LineTokens. See
``orgtree.lexer.core.Lexer``.
"""

from orgtree.lexer.core import Lexer

__all__ = ["Lexer"]
