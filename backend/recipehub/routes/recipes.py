"""
RecipeHub Backend — Recipe Route Handlers
===========================================

What:  HTTP endpoints for the recipes collection.
How:   Extracts path/query/body, delegates to RecipeService, returns its result.
Who:   Called by the recipe browsing, "my recipes", and editor pages.

Route Order:
    Starlette matches routes in registration order. GET /recipes/top-liked
    is declared before GET /recipes/{recipe_id}; the other way round,
    "top-liked" would be captured as a recipe id and rejected as malformed.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase

from recipehub.database import get_database
from recipehub.schemas.responses import (
    DeleteAck,
    ErrorResponse,
    InsertAck,
    LikeResponse,
    UpdateAck,
)
from recipehub.services.recipe_service import RecipeService, get_recipe_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["Recipes"])


# Literal path: must stay above the /{recipe_id} routes
@router.get(
    "/top-liked",
    response_model=List[Dict[str, Any]],
    responses={500: {"model": ErrorResponse}},
    summary="Six most-liked recipes",
)
async def list_top_liked(
    db: AsyncIOMotorDatabase = Depends(get_database),
    service: RecipeService = Depends(get_recipe_service),
) -> List[Dict[str, Any]]:
    """Recipes with an integer like-count, highest first, at most six."""
    return await service.list_top_liked(db)


@router.get(
    "",
    response_model=List[Dict[str, Any]],
    responses={500: {"model": ErrorResponse}},
    summary="List recipes, optionally by owner",
)
async def list_recipes(
    email: Optional[str] = Query(
        default=None,
        description="Only return recipes whose ownerEmail equals this value",
    ),
    db: AsyncIOMotorDatabase = Depends(get_database),
    service: RecipeService = Depends(get_recipe_service),
) -> List[Dict[str, Any]]:
    return await service.list_recipes(db, owner_email=email)


@router.get(
    "/{recipe_id}",
    response_model=Dict[str, Any],
    responses={
        400: {"description": "Malformed recipe ID", "model": ErrorResponse},
        404: {"description": "Recipe not found", "model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get a single recipe by ID",
)
async def get_recipe(
    recipe_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
    service: RecipeService = Depends(get_recipe_service),
) -> Dict[str, Any]:
    return await service.get_recipe(db, recipe_id)


@router.post(
    "",
    response_model=InsertAck,
    responses={
        400: {"description": "ownerEmail missing", "model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create a recipe",
    description="Stores the submitted recipe with likes set to 0. ownerEmail is required.",
)
async def create_recipe(
    recipe: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncIOMotorDatabase = Depends(get_database),
    service: RecipeService = Depends(get_recipe_service),
) -> InsertAck:
    return await service.create_recipe(db, recipe or {})


@router.put(
    "/{recipe_id}",
    response_model=UpdateAck,
    responses={
        400: {"description": "Malformed recipe ID", "model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Replace a recipe's editable fields",
    description=(
        "Overwrites image, title, ingredients, instructions, cuisine, prepTime and "
        "categories. ownerEmail and likes are never changed. A missing recipe is "
        "reported through matchedCount == 0, not 404."
    ),
)
async def update_recipe(
    recipe_id: str,
    recipe: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncIOMotorDatabase = Depends(get_database),
    service: RecipeService = Depends(get_recipe_service),
) -> UpdateAck:
    return await service.update_recipe(db, recipe_id, recipe or {})


@router.delete(
    "/{recipe_id}",
    response_model=DeleteAck,
    responses={400: {"description": "Malformed recipe ID or delete failed", "model": ErrorResponse}},
    summary="Delete a recipe",
)
async def delete_recipe(
    recipe_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
    service: RecipeService = Depends(get_recipe_service),
) -> DeleteAck:
    return await service.delete_recipe(db, recipe_id)


@router.patch(
    "/{recipe_id}/like",
    response_model=LikeResponse,
    responses={
        400: {"description": "Malformed recipe ID", "model": ErrorResponse},
        404: {"description": "Recipe not found", "model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Add one like to a recipe",
)
async def like_recipe(
    recipe_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
    service: RecipeService = Depends(get_recipe_service),
) -> LikeResponse:
    return await service.like_recipe(db, recipe_id)
