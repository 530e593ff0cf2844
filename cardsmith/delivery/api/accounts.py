# cardsmith/delivery/api/accounts.py
import logging

from fastapi import APIRouter, Depends, status

from cardsmith.delivery.api.deps import get_current_user, get_user_service
from cardsmith.delivery.schemas.body import Credentials, UserOut, UserUpdate
from cardsmith.delivery.schemas.serializers import user_out
from cardsmith.domain.user_service import UserService
from cardsmith.infrastructure.database.models import User

router = APIRouter(tags=["accounts"])
logger = logging.getLogger("uvicorn.error")


@router.post("/auth/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def register(body: Credentials, users: UserService = Depends(get_user_service)):
    user = await users.register(body.email, body.password)
    logger.info(f"Registered user {user.id}")
    return user_out(user)


@router.post("/auth/login", response_model=UserOut)
async def login(body: Credentials, users: UserService = Depends(get_user_service)):
    user = await users.authenticate(body.email, body.password)
    return user_out(user)


@router.get("/users/me", response_model=UserOut)
async def read_me(user: User = Depends(get_current_user)):
    return user_out(user)


@router.put("/users/me", response_model=UserOut)
async def update_me(
    body: UserUpdate,
    user: User = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
):
    return user_out(await users.update_email(user, body.email))
