"""Gallery Database Models."""

from gallery.models.category import Category
from gallery.models.photoset import PhotoSet
from gallery.models.admin import AdminUser

__all__ = [
    "Category",
    "PhotoSet",
    "AdminUser",
]
