# cardsmith/domain/card_service.py
from typing import Any, Dict, List, Optional

from cardsmith.domain.composition import load_card_data
from cardsmith.domain.errors import NotFoundError
from cardsmith.domain.template_service import is_visible
from cardsmith.infrastructure.database.models import Card, Template, User
from cardsmith.infrastructure.database.repository import Repository


def stored_card_data(raw: Any) -> Dict[str, Any]:
    return load_card_data(raw).model_dump(mode="json", by_alias=True, exclude_none=True)


def template_source(template: Template) -> Dict[str, Any]:
    """The mapping the composition pipeline accepts, with name/id for variant detection."""
    return {
        "id": str(template.id),
        "name": template.name,
        "front": template.front_json,
        "back": template.back_json,
    }


class CardService:
    def __init__(self, repo: Repository):
        self.repo = repo

    async def _visible_template(self, user: User, template_id) -> Template:
        template = await self.repo.get_template(template_id)
        if template is None or not is_visible(template, user):
            raise NotFoundError(f"Template with ID {template_id} not found")
        return template

    async def list_cards(self, user: User) -> List[Card]:
        return await self.repo.list_cards(user.id)

    async def get_card(self, user: User, card_id) -> Card:
        card = await self.repo.get_card(card_id)
        # Someone else's card is indistinguishable from a missing one.
        if card is None or card.user_id != user.id:
            raise NotFoundError(f"Card with ID {card_id} not found")
        return card

    async def create_card(self, user: User, template_id, card_data: Any) -> Card:
        template = await self._visible_template(user, template_id)
        card = Card(user_id=user.id, template_id=template.id, card_data_json=stored_card_data(card_data))
        card.template = template
        await self.repo.save(card)
        return card

    async def update_card(
        self,
        user: User,
        card_id,
        template_id: Optional[str] = None,
        card_data: Any = None,
    ) -> Card:
        card = await self.get_card(user, card_id)
        if template_id is not None:
            template = await self._visible_template(user, template_id)
            card.template_id = template.id
            card.template = template
        if card_data is not None:
            card.card_data_json = stored_card_data(card_data)
        await self.repo.save(card)
        return card

    async def delete_card(self, user: User, card_id) -> None:
        card = await self.get_card(user, card_id)
        await self.repo.delete(card)

    async def duplicate_card(self, user: User, card_id) -> Card:
        original = await self.get_card(user, card_id)
        copy = Card(
            user_id=user.id,
            template_id=original.template_id,
            card_data_json=dict(original.card_data_json),
        )
        copy.template = original.template
        await self.repo.save(copy)
        return copy
