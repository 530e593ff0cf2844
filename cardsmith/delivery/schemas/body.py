# cardsmith/delivery/schemas/body.py
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cardsmith.domain.stats_calculator import Number


class Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- accounts ---
class Credentials(Body):
    # Optional so that missing fields are reported as 400, like other bad input.
    email: Optional[str] = None
    password: Optional[str] = None


class UserUpdate(Body):
    email: Optional[str] = None


class UserOut(Body):
    id: str
    email: str
    created_at: datetime
    updated_at: datetime


# --- templates ---
class TemplateCreate(Body):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    front: Dict[str, Any] = Field(alias="frontJson")
    back: Dict[str, Any] = Field(alias="backJson")


class TemplateUpdate(Body):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    front: Optional[Dict[str, Any]] = Field(default=None, alias="frontJson")
    back: Optional[Dict[str, Any]] = Field(default=None, alias="backJson")


class TemplateSummary(Body):
    id: str
    name: str
    description: Optional[str] = None
    is_default: bool


class TemplateOut(TemplateSummary):
    user_id: Optional[str] = None
    front_json: Dict[str, Any]
    back_json: Dict[str, Any]
    created_at: datetime
    updated_at: datetime


# --- cards ---
class CardCreate(Body):
    template_id: str
    card_data: Dict[str, Any] = Field(alias="cardDataJson")


class CardUpdate(Body):
    template_id: Optional[str] = None
    card_data: Optional[Dict[str, Any]] = Field(default=None, alias="cardDataJson")


class CardOut(Body):
    id: str
    template_id: str
    card_data_json: Dict[str, Any]
    created_at: datetime
    updated_at: datetime
    template: Optional[TemplateSummary] = None


class CardDetail(CardOut):
    template: Optional[TemplateOut] = None


# --- preview / stats ---
class PreviewRequest(Body):
    template: Dict[str, Any]
    card_data: Dict[str, Any]


class StatsCalculation(Body):
    category: str = "offensive"
    stats: Dict[str, Number] = Field(default_factory=dict)
