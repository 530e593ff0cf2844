# cardsmith/delivery/api/deps.py
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from cardsmith.config.database import get_db
from cardsmith.domain.card_service import CardService
from cardsmith.domain.errors import AuthenticationError
from cardsmith.domain.template_service import TemplateService
from cardsmith.domain.user_service import UserService
from cardsmith.infrastructure.database.models import User
from cardsmith.infrastructure.database.repository import Repository
from cardsmith.infrastructure.rendering.client import RenderClient

security = HTTPBasic(auto_error=False)


def get_repository(db: AsyncSession = Depends(get_db)) -> Repository:
    return Repository(db)


def get_user_service(repo: Repository = Depends(get_repository)) -> UserService:
    return UserService(repo)


def get_template_service(repo: Repository = Depends(get_repository)) -> TemplateService:
    return TemplateService(repo)


def get_card_service(repo: Repository = Depends(get_repository)) -> CardService:
    return CardService(repo)


def get_render_client(request: Request) -> RenderClient:
    return request.app.state.render_client


async def get_optional_user(
    creds: Optional[HTTPBasicCredentials] = Depends(security),
    users: UserService = Depends(get_user_service),
) -> Optional[User]:
    if creds is None:
        return None
    return await users.authenticate(creds.username, creds.password)


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise AuthenticationError("User not authenticated")
    return user
