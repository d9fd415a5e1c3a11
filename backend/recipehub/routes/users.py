"""
RecipeHub Backend — User Route Handlers
=========================================

What:  POST /users stores whatever profile the frontend sends after sign-up.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from recipehub.database import get_database
from recipehub.schemas.responses import ErrorResponse, InsertAck
from recipehub.services.user_service import UserService, get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=InsertAck,
    responses={500: {"model": ErrorResponse}},
    summary="Store a user profile",
)
async def create_user(
    profile: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncIOMotorDatabase = Depends(get_database),
    service: UserService = Depends(get_user_service),
) -> InsertAck:
    return await service.create_user(db, profile or {})
