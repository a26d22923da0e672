"""
Errors raised by the class specification model.
"""

from __future__ import annotations


class ClassSpecError(Exception):
    """Raised when a class specification would enter an invalid state.

    This can happen when:
    - The superclass is set a second time
    - A constructor is added through the plain function path
    - A non-constructor is used as the primary constructor or an overload
    - A loaded class document is missing required keys or uses unknown modifiers
    """

    pass
