# cardsmith/domain/template_service.py
from typing import Any, Dict, Optional, Sequence

from cardsmith.domain.composition import BACK, FRONT, load_layout
from cardsmith.domain.errors import ConflictError, MalformedDataError, NotFoundError, PermissionDeniedError
from cardsmith.domain.layout import CardLayout
from cardsmith.infrastructure.database.models import Template, User
from cardsmith.infrastructure.database.repository import Repository


def authored_layout(raw: Any, side: str) -> Dict[str, Any]:
    """Validate an authored layout and return its stored (wire) form."""
    layout: CardLayout = load_layout(raw, side)
    duplicates = layout.duplicate_ids()
    if duplicates:
        raise MalformedDataError(
            f"Duplicate element ids in {side} layout: {', '.join(duplicates)}"
        )
    stored = layout.model_dump(mode="json", by_alias=True, exclude_none=True)
    # Only an explicitly declared kind is persisted; otherwise it is detected at load time.
    if not _declared_kind(raw):
        stored.pop("layoutKind", None)
    return stored


def _declared_kind(raw: Any) -> bool:
    if isinstance(raw, CardLayout):
        return raw.layout_kind is not None
    return isinstance(raw, dict) and bool(raw.get("layoutKind") or raw.get("layout_kind"))


def is_visible(template: Template, user: Optional[User]) -> bool:
    return template.is_default or (user is not None and template.user_id == user.id)


class TemplateService:
    def __init__(self, repo: Repository):
        self.repo = repo

    async def list_templates(self, user: Optional[User], include_defaults: bool = True) -> Sequence[Template]:
        return await self.repo.list_templates(
            user_id=user.id if user else None, include_defaults=include_defaults
        )

    async def get_template(self, user: Optional[User], template_id) -> Template:
        template = await self.repo.get_template(template_id)
        if template is None or not is_visible(template, user):
            raise NotFoundError(f"Template with ID {template_id} not found")
        return template

    async def _owned_template(self, user: User, template_id, action: str) -> Template:
        template = await self.repo.get_template(template_id)
        if template is None:
            raise NotFoundError(f"Template with ID {template_id} not found")
        if template.is_default:
            raise PermissionDeniedError(f"Cannot {action} default templates")
        if template.user_id != user.id:
            raise NotFoundError(f"Template with ID {template_id} not found")
        return template

    async def create_template(
        self,
        user: User,
        name: str,
        front: Any,
        back: Any,
        description: Optional[str] = None,
    ) -> Template:
        template = Template(
            user_id=user.id,
            name=name,
            description=description,
            front_json=authored_layout(front, FRONT),
            back_json=authored_layout(back, BACK),
            is_default=False,
        )
        await self.repo.save(template)
        return template

    async def update_template(self, user: User, template_id, changes: Dict[str, Any]) -> Template:
        template = await self._owned_template(user, template_id, "modify")
        if changes.get("name") is not None:
            template.name = changes["name"]
        if "description" in changes:
            template.description = changes["description"]
        if changes.get("front") is not None:
            template.front_json = authored_layout(changes["front"], FRONT)
        if changes.get("back") is not None:
            template.back_json = authored_layout(changes["back"], BACK)
        await self.repo.save(template)
        return template

    async def delete_template(self, user: User, template_id) -> None:
        template = await self._owned_template(user, template_id, "delete")
        if await self.repo.template_in_use(template.id):
            raise ConflictError("Template is used by existing cards and cannot be deleted")
        await self.repo.delete(template)
