"""Line classifiers for the md0 lexer.

Each classifier is a mixin that decides whether a raw line matches a
particular block pattern. Classifiers never move the lexer's position.
"""

from md0.lexer.classifiers.dash import (
    DashClassifierMixin,
)
from md0.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from md0.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)

__all__ = [
    "DashClassifierMixin",
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
]
