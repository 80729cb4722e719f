import math
import re
from typing import Optional

from src.models.recipe import Ingredient
from utils.html import clean_text

# Единицы измерения (только английский язык)
UNIT_PATTERNS = {
    'g', 'gram', 'grams', 'kg', 'kilogram', 'kilograms', 'mg',
    'ml', 'milliliter', 'milliliters', 'millilitre', 'millilitres',
    'l', 'liter', 'liters', 'litre', 'litres', 'cl', 'dl',
    'oz', 'ounce', 'ounces', 'lb', 'lbs', 'pound', 'pounds',
    'c', 'cup', 'cups', 'pt', 'pint', 'pints', 'qt', 'quart', 'quarts',
    'gal', 'gallon', 'gallons',
    'tbsp', 'tbs', 'tablespoon', 'tablespoons', 'tsp', 'teaspoon', 'teaspoons',
    'piece', 'pieces', 'pcs', 'pc', 'slice', 'slices', 'clove', 'cloves',
    'bunch', 'bunches', 'pinch', 'pinches', 'handful', 'dash', 'sprig', 'sprigs',
    'can', 'cans', 'jar', 'jars', 'bottle', 'bottles', 'package', 'packages',
    'stick', 'sticks', 'head', 'heads', 'stalk', 'stalks', 'leaf', 'leaves',
    'strip', 'strips',
}

# Символы дробей, которые выдаёт декодер сущностей (и встречаются в тексте как есть)
FRACTION_GLYPHS = {
    '½': 1 / 2, '¼': 1 / 4, '¾': 3 / 4,
    '⅓': 1 / 3, '⅔': 2 / 3,
    '⅛': 1 / 8, '⅜': 3 / 8, '⅝': 5 / 8, '⅞': 7 / 8,
}
_GLYPHS = ''.join(FRACTION_GLYPHS)

# Паттерн количества: смешанная дробь должна быть первой!
QUANTITY_PATTERN = (
    r'('
    r'\d+\s+\d+/\d+|'  # 1 1/2
    rf'\d*\s*[{_GLYPHS}]|'  # ½, 1½, 1 ½
    r'\d+(?:\.\d+|/\d+)?'  # 2, 1.5, 1/2
    r')'
)

# количество, необязательное слово-единица и обязательное название
INGREDIENT_LINE_PATTERN = re.compile(
    rf'^{QUANTITY_PATTERN}\s*([^\W\d_]+\.?)?\s+(.+)$'
)


def parse_amount(quantity: str) -> Optional[float]:
    """
    Преобразует строку количества в float

    Examples:
        "2" -> 2.0, "1.5" -> 1.5, "1/2" -> 0.5, "1 1/2" -> 1.5, "1½" -> 1.5

    Returns:
        Положительное число или None, если количество не распознано
    """
    quantity = quantity.strip()
    if not quantity:
        return None
    try:
        if quantity[-1] in FRACTION_GLYPHS:
            whole = quantity[:-1].strip()
            amount = (float(whole) if whole else 0.0) + FRACTION_GLYPHS[quantity[-1]]
        elif '/' in quantity:
            parts = quantity.split()
            whole = float(parts[0]) if len(parts) == 2 else 0.0
            numerator, denominator = parts[-1].split('/')
            amount = whole + float(numerator) / float(denominator)
        else:
            amount = float(quantity)
    except (ValueError, ZeroDivisionError):
        return None
    return amount if math.isfinite(amount) and amount > 0 else None


def is_unit(word: Optional[str]) -> bool:
    """Проверяет, является ли слово известной единицей измерения (с точкой или без)"""
    if not word:
        return False
    return word.lower().rstrip('.') in UNIT_PATTERNS


def parse_ingredient_line(text: str) -> Optional[Ingredient]:
    """
    Разбор строки ингредиента на количество, единицу и название.

    Examples:
        "2 cups flour" -> {"name": "flour", "amount": 2, "unit": "cups"}
        "1/2 tsp salt" -> {"name": "salt", "amount": 0.5, "unit": "tsp"}
        "2 large eggs" -> {"name": "large eggs", "amount": 2, "unit": None}
        "Salt to taste" -> {"name": "Salt to taste", "amount": None, "unit": None}

    Returns:
        Ingredient или None, если строка пустая после очистки
    """
    cleaned = clean_text(text)
    if not cleaned:
        return None

    match = INGREDIENT_LINE_PATTERN.match(cleaned)
    if not match:
        return Ingredient(name=cleaned)

    quantity, unit, name = match.groups()
    name = name.strip()
    if unit and not is_unit(unit):
        # Слово не похоже на единицу - это часть названия
        name = f"{unit} {name}"
        unit = None
    elif unit and unit.endswith('.'):
        unit = unit[:-1]

    return Ingredient(name=name, amount=parse_amount(quantity), unit=unit)


def parse_ingredient_lines(lines: list) -> list[Ingredient]:
    """
    Разбирает список строк ингредиентов, пустые строки отбрасываются.
    """
    if not lines:
        return []
    return [parsed for line in lines
            if isinstance(line, (str, int, float)) and not isinstance(line, bool)
            and (parsed := parse_ingredient_line(str(line)))]
