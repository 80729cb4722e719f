"""
Пересчёт единиц измерения и масштабирование количеств ингредиентов
"""
import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from src.models.recipe import Ingredient, NormalizedRecipe

MEASUREMENT_SYSTEMS = ('metric', 'us', 'imperial')

# Синонимы единиц -> каноническая короткая форма
UNIT_ALIASES = {
    'teaspoon': 'tsp', 'teaspoons': 'tsp',
    'tablespoon': 'tbsp', 'tablespoons': 'tbsp',
    'cups': 'cup',
    'ounce': 'oz', 'ounces': 'oz',
    'fluid ounce': 'fl-oz', 'fluid ounces': 'fl-oz', 'fl oz': 'fl-oz',
    'pound': 'lb', 'pounds': 'lb', 'lbs': 'lb',
    'gram': 'g', 'grams': 'g',
    'kilogram': 'kg', 'kilograms': 'kg',
    'milliliter': 'ml', 'milliliters': 'ml', 'millilitre': 'ml', 'millilitres': 'ml',
    'liter': 'l', 'liters': 'l', 'litre': 'l', 'litres': 'l',
}

# Кухонные пересчёты, которые имеют смысл: единица -> система -> (множитель, единица)
COOKING_CONVERSIONS = {
    # объём
    'cup': {'metric': (250, 'ml'), 'us': (1, 'cup'), 'imperial': (1, 'cup')},
    'fl-oz': {'metric': (30, 'ml'), 'us': (1, 'fl oz'), 'imperial': (1, 'fl oz')},
    'ml': {'metric': (1, 'ml'), 'us': (1 / 30, 'fl oz'), 'imperial': (1 / 30, 'fl oz')},
    'l': {'metric': (1, 'l'), 'us': (4, 'cups'), 'imperial': (4, 'cups')},
    # вес
    'g': {'metric': (1, 'g'), 'us': (1 / 28, 'oz'), 'imperial': (1 / 28, 'oz')},
    'kg': {'metric': (1, 'kg'), 'us': (2.2, 'lb'), 'imperial': (2.2, 'lb')},
    'oz': {'metric': (28, 'g'), 'us': (1, 'oz'), 'imperial': (1, 'oz')},
    'lb': {'metric': (450, 'g'), 'us': (1, 'lb'), 'imperial': (1, 'lb')},
}


@dataclass
class ConvertedMeasurement:
    """Результат пересчёта; original_* заполнены только если единица изменилась"""
    quantity: float
    unit: str
    display_quantity: str
    original_quantity: Optional[float] = None
    original_unit: Optional[str] = None
    original_display_quantity: Optional[str] = None


@dataclass
class ScaledQuantity:
    quantity: float
    display_quantity: str


def _round_half_up(value: float, digits: int) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_to_sensible_precision(value: float) -> float:
    """< 1 - два знака, < 10 - один знак, иначе целое"""
    if value < 1:
        return _round_half_up(value, 2)
    if value < 10:
        return _round_half_up(value, 1)
    return float(_round_half_up(value, 0))


def _plain_number(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return str(value)


def normalize_unit(unit: str) -> str:
    """Каноническая форма единицы (tablespoons -> tbsp)"""
    unit = unit.strip().lower()
    return UNIT_ALIASES.get(unit, unit)


def format_quantity(quantity: float, use_fractions: bool = True) -> str:
    """
    Отображение количества для пользователя

    Examples:
        2 -> "2", 0.5 -> "1/2", 1.5 -> "1 1/2", 2.37 -> "2 2/5"
    """
    if quantity == 0:
        return '0'

    rounded = round_to_sensible_precision(quantity)
    if not use_fractions:
        return _plain_number(rounded)

    fraction = Fraction(str(rounded))
    if fraction.denominator == 1:
        return str(fraction.numerator)

    if rounded < 1:
        return f"{fraction.numerator}/{fraction.denominator}"

    if fraction.denominator <= 16:
        whole = math.floor(rounded)
        remainder = fraction - whole
        if remainder.numerator == 0:
            return str(whole)
        return f"{whole} {remainder.numerator}/{remainder.denominator}"

    return _plain_number(_round_half_up(rounded, 1))


def convert_measurement(quantity: float, from_unit: str, to_system: str) -> Optional[ConvertedMeasurement]:
    """
    Пересчёт количества в выбранную систему мер

    Args:
        quantity: количество
        from_unit: исходная единица
        to_system: 'metric', 'us' или 'imperial'

    Returns:
        ConvertedMeasurement или None если нет количества или единицы
    """
    if to_system not in MEASUREMENT_SYSTEMS:
        raise ValueError(f"Unknown measurement system: {to_system}")
    if not quantity or not from_unit:
        return None

    conversion = COOKING_CONVERSIONS.get(normalize_unit(from_unit))
    if conversion is None:
        # пересчёт неизвестен - возвращаем как есть
        return ConvertedMeasurement(quantity, from_unit, format_quantity(quantity))

    factor, target_unit = conversion[to_system]
    if target_unit == from_unit:
        return ConvertedMeasurement(quantity, from_unit, format_quantity(quantity))

    converted = round_to_sensible_precision(quantity * factor)
    return ConvertedMeasurement(
        quantity=converted,
        unit=target_unit,
        display_quantity=format_quantity(converted),
        original_quantity=quantity,
        original_unit=from_unit,
        original_display_quantity=format_quantity(quantity),
    )


def scale_quantity(quantity: float, scale_factor: float) -> ScaledQuantity:
    """Масштабирование количества с округлением"""
    scaled = round_to_sensible_precision(quantity * scale_factor)
    return ScaledQuantity(quantity=scaled, display_quantity=format_quantity(scaled))


def scale_recipe(recipe: NormalizedRecipe, servings: int) -> NormalizedRecipe:
    """Копия рецепта с количествами ингредиентов, пересчитанными на другое число порций"""
    if servings <= 0:
        raise ValueError(f"servings must be positive, got {servings}")

    factor = servings / recipe.servings
    ingredients = []
    for ingredient in recipe.ingredients:
        if ingredient.amount is None:
            ingredients.append(ingredient.model_copy())
            continue
        scaled = scale_quantity(ingredient.amount, factor)
        # слишком маленькое количество после округления не сохраняем
        amount = scaled.quantity if scaled.quantity > 0 else None
        ingredients.append(Ingredient(name=ingredient.name, amount=amount, unit=ingredient.unit))

    return recipe.model_copy(update={'servings': servings, 'ingredients': ingredients})
