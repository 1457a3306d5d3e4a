"""Domain errors raised by the service layer.

Lookups that miss return ``None`` (or ``False`` for mutations) instead of
raising; these exceptions cover the conditions a caller has to handle.
"""


class GalleryError(ValueError):
    """Base class for gallery service errors."""


class ConflictError(GalleryError):
    """A unique key is taken, or a row is still referenced by others."""


class ValidationError(GalleryError):
    """Input the store would reject (e.g. a photo set without images)."""
