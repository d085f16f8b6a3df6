from pydantic import BaseModel, Field, ConfigDict, computed_field
from typing import List
from datetime import datetime

from finance_tracker.schemas.transaction import TYPE_PATTERN
from finance_tracker.services.catalog import (
    IconName, DEFAULT_ICON, DEFAULT_COLOR, DEFAULT_TYPE, resolve_icon,
)

HEX_COLOR = "^#[0-9a-fA-F]{6}$"


class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    icon: IconName = DEFAULT_ICON
    color: str = Field(DEFAULT_COLOR, pattern=HEX_COLOR)
    type: str = Field(DEFAULT_TYPE, pattern=TYPE_PATTERN)


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CategoryBase):
    pass


class GlobalCategoryResponse(BaseModel):
    id: str
    name: str
    icon: str
    color: str
    type: str
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def component(self) -> str:
        return resolve_icon(self.icon).component

    model_config = ConfigDict(from_attributes=True)


class CategoryResponse(GlobalCategoryResponse):
    user_id: str


class CategoriesByType(BaseModel):
    income: List[CategoryResponse]
    expense: List[CategoryResponse]


class GlobalCategoriesByType(BaseModel):
    income: List[GlobalCategoryResponse]
    expense: List[GlobalCategoryResponse]


class IconOption(BaseModel):
    name: str
    component: str
    glyph: str

    model_config = ConfigDict(from_attributes=True)


class CategoryDefaults(BaseModel):
    icon: str = DEFAULT_ICON.value
    color: str = DEFAULT_COLOR
    type: str = DEFAULT_TYPE


class CategoryOptions(BaseModel):
    icons: List[IconOption]
    colors: List[str]
    defaults: CategoryDefaults = CategoryDefaults()
