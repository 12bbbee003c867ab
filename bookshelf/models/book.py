"""
Book Model

The central document of the API, stored in the `books` collection.

Document shape:
    {
        "_id": ObjectId("..."),
        "name": "The river",       # unique index
        "genre": "FANTASY",
        "authorId": "65f1c2..."    # hex id of an author, plain string
    }

The author reference is informal: it is stored as a string and is not
checked by the database. Nothing cascades when an author is removed.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """
    Book document.

    `author_id` is stored under the `authorId` key. The genre is kept as a
    plain string so documents written before the Genre enumeration existed
    still load.
    """

    id: str = Field(..., description="Hex string of the document ObjectId")
    name: str = Field(..., description="Book title, unique across books")
    genre: str | None = Field(default=None, description="Genre name")
    author_id: str | None = Field(
        default=None,
        alias="authorId",
        description="Identifier of the author who wrote the book",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Book":
        """Build a Book from a document read out of the collection."""
        data = dict(document)
        data["id"] = str(data.pop("_id"))
        return cls.model_validate(data)

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, name={self.name!r})"
