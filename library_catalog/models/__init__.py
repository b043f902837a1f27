"""
Library Catalog — ORM Models
==============================

Importing this package registers every table on `Base.metadata`.
"""

from library_catalog.models.author import Author
from library_catalog.models.genre import Genre
from library_catalog.models.book import Book

__all__ = ["Author", "Genre", "Book"]
