# cardsmith/delivery/api/cards.py
from typing import List

from fastapi import APIRouter, Depends, Response, status

from cardsmith.delivery.api.deps import get_card_service, get_current_user
from cardsmith.delivery.schemas.body import CardCreate, CardDetail, CardOut, CardUpdate
from cardsmith.delivery.schemas.serializers import card_detail, card_out
from cardsmith.domain.card_service import CardService, template_source
from cardsmith.domain.composition import compose_card
from cardsmith.domain.preview_service import preview_payload
from cardsmith.infrastructure.database.models import User

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("", response_model=List[CardOut])
async def list_cards(user: User = Depends(get_current_user), cards: CardService = Depends(get_card_service)):
    return [card_out(card) for card in await cards.list_cards(user)]


@router.get("/{card_id}", response_model=CardDetail)
async def get_card(card_id: str, user: User = Depends(get_current_user), cards: CardService = Depends(get_card_service)):
    return card_detail(await cards.get_card(user, card_id))


@router.post("", response_model=CardDetail, status_code=status.HTTP_201_CREATED)
async def create_card(body: CardCreate, user: User = Depends(get_current_user), cards: CardService = Depends(get_card_service)):
    return card_detail(await cards.create_card(user, body.template_id, body.card_data))


@router.put("/{card_id}", response_model=CardDetail)
async def update_card(
    card_id: str,
    body: CardUpdate,
    user: User = Depends(get_current_user),
    cards: CardService = Depends(get_card_service),
):
    card = await cards.update_card(user, card_id, template_id=body.template_id, card_data=body.card_data)
    return card_detail(card)


@router.delete("/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_card(card_id: str, user: User = Depends(get_current_user), cards: CardService = Depends(get_card_service)):
    await cards.delete_card(user, card_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{card_id}/duplicate", response_model=CardDetail, status_code=status.HTTP_201_CREATED)
async def duplicate_card(card_id: str, user: User = Depends(get_current_user), cards: CardService = Depends(get_card_service)):
    return card_detail(await cards.duplicate_card(user, card_id))


@router.get("/{card_id}/preview")
async def preview_card(card_id: str, user: User = Depends(get_current_user), cards: CardService = Depends(get_card_service)):
    card = await cards.get_card(user, card_id)
    return preview_payload(compose_card(template_source(card.template), card.card_data_json))
