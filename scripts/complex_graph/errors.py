"""Exceptions raised by complex_graph."""


class ComplexGraphError(Exception):
    """Base class for every error raised by this package."""


class PureRealValueError(ComplexGraphError):
    """A value with a zero imaginary part reached the phase arc computation.

    The complex graph is never shown for a purely real value; the caller is
    expected to route such values to another view. There is no meaningful arc
    for a zero angle, so this is a contract violation rather than a case to
    recover from.
    """

    def __init__(self, real):
        super().__init__(
            f"complex graph needs a non-zero imaginary part (got {real!r} + 0i)"
        )
        self.real = real


class ValueParseError(ComplexGraphError, ValueError):
    """A string could not be read as a complex number."""
