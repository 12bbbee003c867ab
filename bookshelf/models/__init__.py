"""
Persistence Models Package

Pydantic models describing the documents stored in MongoDB.

Collections:
- authors: Author documents (name, age)
- books: Book documents (name, genre, authorId)

One author has many books, linked through `Book.author_id`. The link is a
plain string; MongoDB does not enforce it.
"""

from bookshelf.models.author import Author
from bookshelf.models.book import Book
from bookshelf.models.genre import Genre

__all__ = [
    "Author",
    "Book",
    "Genre",
]
