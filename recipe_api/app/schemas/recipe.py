"""
Pydantic schemas for recipes.

A recipe consists of a name, a free‑form ingredient list (usually one
ingredient per line), instructions and a free‑form cook time such as
``"30 minutes"``.  All four are required and must be non‑empty.  On
the wire the cook time is called ``cookTime``; in Python and in the
database it is ``cook_time``.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class RecipeBase(BaseModel):
    name: str = Field(..., examples=["Pancakes"])
    ingredients: str = Field(..., examples=["2 eggs\n200 g flour\n300 ml milk"])
    instructions: str = Field(..., examples=["Whisk everything and fry in a hot pan."])
    cook_time: str = Field(..., alias="cookTime", examples=["20 minutes"])

    model_config = {
        "populate_by_name": True,
    }


class RecipeCreate(RecipeBase):
    """Schema for creating a recipe.

    Values are stored verbatim; only the empty string is rejected.
    Non‑string values fail pydantic's own ``str`` validation.  Only
    the wire name ``cookTime`` is accepted for the cook time.
    """

    model_config = {
        "populate_by_name": False,
    }

    @field_validator("name", "ingredients", "instructions", "cook_time")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v


class RecipeRead(RecipeBase):
    """Schema for reading a recipe from the API."""

    id: int
    created_at: Optional[str] = Field(None, alias="createdAt")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class MessageResponse(BaseModel):
    message: str


class HealthStatus(BaseModel):
    status: str = "healthy"
    timestamp: str
