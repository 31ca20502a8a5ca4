"""Line classifiers for the orgtree lexer.

Each classifier is a mixin that decides whether a line belongs to one
category family. Classifiers are pure functions of the line; none of them
touch the stream position.
"""

from orgtree.lexer.classifiers.directive import DirectiveClassifierMixin
from orgtree.lexer.classifiers.drawer import DrawerClassifierMixin
from orgtree.lexer.classifiers.heading import HeadingClassifierMixin
from orgtree.lexer.classifiers.list import ListClassifierMixin
from orgtree.lexer.classifiers.table import TableClassifierMixin
from orgtree.lexer.classifiers.text import TextClassifierMixin

__all__ = [
    "DirectiveClassifierMixin",
    "DrawerClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "TableClassifierMixin",
    "TextClassifierMixin",
]
