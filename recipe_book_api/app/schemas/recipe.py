"""
Pydantic models for recipe data.

``RecipeBase`` holds the fields shared by requests and responses.
``course`` doubles as the document store partition key, so it is
required everywhere a recipe is created, replaced or deleted.
Ingredients and instructions are newline-delimited free text.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class RecipeBase(BaseModel):
    name: str = Field(..., examples=["Soup"])
    course: str = Field(..., min_length=1, examples=["starter"])
    ingredients: str = Field("", examples=["water\nsalt"])
    instructions: str = Field("", examples=["boil"])


class RecipeCreate(RecipeBase):
    """Schema for creating a recipe.  The store assigns the id."""
    pass


class RecipeUpdate(RecipeBase):
    """Schema for replacing a recipe.

    Updates are full replacements: every field is written and
    ``course`` must match the partition the recipe was created in.
    """
    pass


class RecipeDelete(BaseModel):
    """Body of a delete request; carries the partition key."""

    course: Optional[str] = None


class RecipeRead(BaseModel):
    """Schema for reading a recipe from the API.

    Stored documents are not guaranteed to carry every field (older
    writers stored whatever body they received), so missing or ``null``
    text fields read back as empty strings.
    """

    id: str
    name: str = ""
    course: str = ""
    ingredients: str = ""
    instructions: str = ""
    # Store metadata (``_etag``, ``_ts`` and friends) is dropped.
    model_config = {
        "from_attributes": True,
        "extra": "ignore",
    }

    @field_validator("name", "course", "ingredients", "instructions", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        if v is None:
            return ""
        if not isinstance(v, str):
            return str(v)
        return v
