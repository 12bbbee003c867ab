"""
Author Model

Represents an author document in the `authors` collection.

Document shape:
    {
        "_id": ObjectId("..."),
        "name": "Mg Mg",
        "age": 26
    }

Pydantic v2 Features Used:
- model_validate(): Build the model from a raw Mongo document
- ConfigDict(frozen=True): Models are immutable snapshots of a document
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    """
    Author document.

    The Mongo `_id` (an ObjectId) is exposed as the string `id`, so the
    rest of the application never handles driver types directly.

    Example:
        author = Author.from_document({"_id": ObjectId(), "name": "Su Su", "age": 27})
        author.id  # '65f1c2...'
    """

    id: str = Field(..., description="Hex string of the document ObjectId")
    name: str = Field(..., description="Author's name")
    age: int | None = Field(default=None, description="Author's age in years")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Author":
        """Build an Author from a document read out of the collection."""
        data = dict(document)
        data["id"] = str(data.pop("_id"))
        return cls.model_validate(data)

    def __repr__(self) -> str:
        return f"Author(id={self.id!r}, name={self.name!r})"
