# cardsmith/infrastructure/database/repository.py
import uuid
from typing import List, Optional, Sequence

from sqlalchemy import desc, exists, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from cardsmith.infrastructure.database.models import Card, Template, User


def parse_id(value) -> Optional[uuid.UUID]:
    """UUID from a path parameter; anything unparseable simply matches nothing."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None


class Repository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, *objects) -> None:
        self.session.add_all(objects)
        await self.session.commit()
        for obj in objects:
            await self.session.refresh(obj)

    async def delete(self, obj) -> None:
        await self.session.delete(obj)
        await self.session.commit()

    # --- users ---
    async def get_user(self, user_id) -> Optional[User]:
        key = parse_id(user_id)
        return await self.session.get(User, key) if key else None

    async def get_user_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    # --- templates ---
    async def get_template(self, template_id) -> Optional[Template]:
        key = parse_id(template_id)
        return await self.session.get(Template, key) if key else None

    async def list_templates(self, user_id=None, include_defaults: bool = True) -> Sequence[Template]:
        clauses = []
        if include_defaults:
            clauses.append(Template.is_default.is_(True))
        if user_id is not None:
            clauses.append(Template.user_id == user_id)
        if not clauses:
            return []
        query = (
            select(Template)
            .where(or_(*clauses))
            .order_by(desc(Template.is_default), desc(Template.created_at))
        )
        return (await self.session.execute(query)).scalars().all()

    async def list_default_templates(self) -> Sequence[Template]:
        query = select(Template).where(Template.is_default.is_(True)).order_by(Template.created_at)
        return (await self.session.execute(query)).scalars().all()

    async def template_in_use(self, template_id) -> bool:
        query = select(exists().where(Card.template_id == template_id))
        return bool((await self.session.execute(query)).scalar())

    # --- cards ---
    async def get_card(self, card_id) -> Optional[Card]:
        key = parse_id(card_id)
        return await self.session.get(Card, key) if key else None

    async def list_cards(self, user_id) -> List[Card]:
        query = select(Card).where(Card.user_id == user_id).order_by(desc(Card.created_at))
        return list((await self.session.execute(query)).scalars().all())
