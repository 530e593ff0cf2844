# cardsmith/delivery/schemas/serializers.py
from cardsmith.delivery.schemas.body import CardDetail, CardOut, TemplateOut, TemplateSummary, UserOut
from cardsmith.infrastructure.database.models import Card, Template, User


def user_out(user: User) -> UserOut:
    return UserOut(id=str(user.id), email=user.email, created_at=user.created_at, updated_at=user.updated_at)


def template_summary(template: Template) -> TemplateSummary:
    return TemplateSummary(
        id=str(template.id),
        name=template.name,
        description=template.description,
        is_default=template.is_default,
    )


def template_out(template: Template) -> TemplateOut:
    return TemplateOut(
        id=str(template.id),
        user_id=str(template.user_id) if template.user_id else None,
        name=template.name,
        description=template.description,
        is_default=template.is_default,
        front_json=template.front_json,
        back_json=template.back_json,
        created_at=template.created_at,
        updated_at=template.updated_at,
    )


def card_out(card: Card) -> CardOut:
    return CardOut(
        id=str(card.id),
        template_id=str(card.template_id),
        card_data_json=card.card_data_json,
        created_at=card.created_at,
        updated_at=card.updated_at,
        template=template_summary(card.template) if card.template else None,
    )


def card_detail(card: Card) -> CardDetail:
    return CardDetail(
        id=str(card.id),
        template_id=str(card.template_id),
        card_data_json=card.card_data_json,
        created_at=card.created_at,
        updated_at=card.updated_at,
        template=template_out(card.template) if card.template else None,
    )
