"""
Pydantic модели рецепта: промежуточный результат экстрактора и итоговая запись
"""
from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Ingredient(BaseModel):
    """Ингредиент: название, количество и единица измерения"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    amount: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    unit: Optional[str] = None

    @field_validator('name')
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("ingredient name must not be empty")
        return v

    @field_validator('unit')
    @classmethod
    def empty_unit_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class InstructionStep(BaseModel):
    """Один шаг приготовления"""

    instruction: str

    @field_validator('instruction')
    @classmethod
    def instruction_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("instruction must not be empty")
        return v


class PartialRecipe(BaseModel):
    """
    Результат одной стратегии извлечения, до применения значений по умолчанию.
    Все поля необязательные
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    total_time: Optional[int] = None
    servings: Optional[int] = None
    tags: Optional[list[str]] = None
    ingredients: Optional[list[Ingredient]] = None
    instructions: Optional[list[InstructionStep]] = None

    def has_title(self) -> bool:
        """Стратегия нашла непустое название"""
        return bool(self.title and self.title.strip())

    def to_json(self) -> dict:
        """Преобразование модели в JSON-совместимый словарь"""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


class NormalizedRecipe(BaseModel):
    """Итоговая запись рецепта, которую получает вызывающий код"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None
    prep_time: int = Field(default=0, ge=0)
    cook_time: int = Field(default=0, ge=0)
    total_time: int = Field(default=0, ge=0)
    servings: int = Field(default=4, gt=0)
    tags: list[str] = Field(default_factory=list)
    ingredients: list[Ingredient] = Field(default_factory=list)
    instructions: list[InstructionStep] = Field(default_factory=list)

    def to_json(self) -> dict:
        """Преобразование модели в JSON-совместимый словарь (camelCase ключи)"""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)
