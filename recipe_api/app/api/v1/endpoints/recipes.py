"""
Recipe endpoints for API v1.

These routes expose create, list, retrieve and delete operations for
recipes.  There is no update endpoint.  Every error response carries
an ``error`` key; see ``core.errors`` for how validation failures are
mapped onto 400 and 404.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query, status

from recipe_api.app.core.errors import RECIPE_NOT_FOUND
from recipe_api.app.schemas.recipe import MessageResponse, RecipeCreate, RecipeRead
from recipe_api.app.services.recipe_service import RecipeService

router = APIRouter()

# Largest value SQLite can store in an INTEGER column.
MAX_RECIPE_ID = 2**63 - 1


@router.get("", response_model=List[RecipeRead])
async def list_recipes(
    limit: Optional[int] = Query(None, ge=1, le=1000),
    offset: int = Query(0, ge=0),
) -> List[RecipeRead]:
    """Return stored recipes in creation order.

    ``limit`` and ``offset`` are optional; without them the whole
    collection is returned.  An empty store yields an empty list.
    """
    return await RecipeService.list_recipes(limit=limit, offset=offset)


@router.post("", response_model=RecipeRead, status_code=status.HTTP_201_CREATED)
async def create_recipe(recipe_in: RecipeCreate) -> RecipeRead:
    """Create a new recipe.

    All of ``name``, ``ingredients``, ``instructions`` and ``cookTime``
    must be non‑empty strings, otherwise 400 is returned and nothing is
    stored.
    """
    return await RecipeService.create_recipe(recipe_in)


@router.get("/{recipe_id}", response_model=RecipeRead)
async def get_recipe(recipe_id: int = Path(..., ge=1, le=MAX_RECIPE_ID)) -> RecipeRead:
    """Retrieve a single recipe by ID.

    Returns HTTP 404 if the recipe is not found.
    """
    recipe = await RecipeService.get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=RECIPE_NOT_FOUND)
    return recipe


@router.delete("/{recipe_id}", response_model=MessageResponse)
async def delete_recipe(recipe_id: int = Path(..., ge=1, le=MAX_RECIPE_ID)) -> MessageResponse:
    """Delete a recipe by ID."""
    deleted = await RecipeService.delete_recipe(recipe_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=RECIPE_NOT_FOUND)
    return MessageResponse(message="Recipe deleted successfully")
