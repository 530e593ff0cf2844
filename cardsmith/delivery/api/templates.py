# cardsmith/delivery/api/templates.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from cardsmith.delivery.api.deps import get_current_user, get_optional_user, get_template_service
from cardsmith.delivery.schemas.body import TemplateCreate, TemplateOut, TemplateUpdate
from cardsmith.delivery.schemas.serializers import template_out
from cardsmith.domain.template_service import TemplateService
from cardsmith.infrastructure.database.models import User

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=List[TemplateOut])
async def list_templates(
    include_defaults: bool = Query(True, alias="includeDefaults"),
    user: Optional[User] = Depends(get_optional_user),
    templates: TemplateService = Depends(get_template_service),
):
    return [template_out(t) for t in await templates.list_templates(user, include_defaults)]


@router.get("/{template_id}", response_model=TemplateOut)
async def get_template(
    template_id: str,
    user: Optional[User] = Depends(get_optional_user),
    templates: TemplateService = Depends(get_template_service),
):
    return template_out(await templates.get_template(user, template_id))


@router.post("", response_model=TemplateOut, status_code=status.HTTP_201_CREATED)
async def create_template(
    body: TemplateCreate,
    user: User = Depends(get_current_user),
    templates: TemplateService = Depends(get_template_service),
):
    template = await templates.create_template(
        user, body.name, body.front, body.back, description=body.description
    )
    return template_out(template)


@router.put("/{template_id}", response_model=TemplateOut)
async def update_template(
    template_id: str,
    body: TemplateUpdate,
    user: User = Depends(get_current_user),
    templates: TemplateService = Depends(get_template_service),
):
    changes = body.model_dump(exclude_unset=True)
    return template_out(await templates.update_template(user, template_id, changes))


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: str,
    user: User = Depends(get_current_user),
    templates: TemplateService = Depends(get_template_service),
):
    await templates.delete_template(user, template_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
