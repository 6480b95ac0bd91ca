"""
Exceptions raised by the booklet maker.
"""


class BookletError(Exception):
    """Base class for booklet maker errors."""


class MalformedAssetError(BookletError, ValueError):
    """
    An image's intrinsic size could not be determined, or is not positive.

    Raised per asset. Callers skip the affected placement and carry on with
    the remaining sheets.
    """


class RenderError(BookletError, RuntimeError):
    """The document renderer failed; the document cannot be completed."""
