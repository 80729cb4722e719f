"""
Разбор рецепта, вставленного пользователем обычным текстом
"""

import logging
import re

from config.config import config
from src.models.recipe import InstructionStep, NormalizedRecipe
from utils.normalization import parse_ingredient_line

logger = logging.getLogger(__name__)

# Маркеры списков: "-", "*", "•" (номера вида "1." / "1)" убираются только у шагов)
BULLET_PREFIX = re.compile(r'^\s*[-*•]+\s*')
STEP_NUMBER_PREFIX = re.compile(r'^\s*(?:step\s*)?\d+\s*[.):]\s*', re.IGNORECASE)
NUMBER = re.compile(r'(\d+)')

INGREDIENTS_HEADERS = ('ingredient',)
INSTRUCTIONS_HEADERS = ('instruction', 'direction', 'method')
MIN_INSTRUCTION_LENGTH = 6
# Заголовок секции - короткая строка, а не шаг вида "Mix the dry ingredients"
MAX_HEADER_WORDS = 3


def _section_header(line: str) -> str | None:
    if len(line.split()) > MAX_HEADER_WORDS:
        return None
    lower = line.lower()
    if any(h in lower for h in INGREDIENTS_HEADERS):
        return 'ingredients'
    if any(h in lower for h in INSTRUCTIONS_HEADERS):
        return 'instructions'
    return None


def parse_recipe_from_text(text: str) -> NormalizedRecipe:
    """
    Разбор текстового рецепта: первая строка - название, затем описание,
    секции ингредиентов и шагов определяются по заголовкам

    Args:
        text: текст рецепта

    Returns:
        NormalizedRecipe
    """
    lines = [line.strip() for line in (text or '').splitlines() if line.strip()]
    if not lines:
        return NormalizedRecipe(title=config.TEXT_DEFAULT_TITLE)

    title = lines[0]
    description = None
    servings = config.EXTRACTOR_DEFAULT_SERVINGS
    ingredients = []
    instructions = []
    found_ingredients_section = False
    leading_lines = []

    section = 'description'
    for line in lines[1:]:
        header = _section_header(line)
        if header:
            section = header
            found_ingredients_section = found_ingredients_section or header == 'ingredients'
            continue

        if section != 'instructions' and 'serving' in line.lower():
            match = NUMBER.search(line)
            if match and int(match.group(1)) > 0:
                servings = int(match.group(1))
            continue

        if section == 'description':
            leading_lines.append(line)
            if description is None:
                description = line
        elif section == 'ingredients':
            ingredient = parse_ingredient_line(BULLET_PREFIX.sub('', line))
            if ingredient:
                ingredients.append(ingredient)
        elif section == 'instructions':
            step = STEP_NUMBER_PREFIX.sub('', BULLET_PREFIX.sub('', line)).strip()
            if len(step) >= MIN_INSTRUCTION_LENGTH:
                instructions.append(InstructionStep(instruction=step))

    if not found_ingredients_section:
        # Секции ингредиентов нет - считаем ингредиентами строки до шагов
        logger.debug("Заголовок ингредиентов не найден, разбираем начало текста как ингредиенты")
        for line in leading_lines:
            ingredient = parse_ingredient_line(BULLET_PREFIX.sub('', line))
            if ingredient:
                ingredients.append(ingredient)

    return NormalizedRecipe(
        title=title,
        description=description,
        servings=servings,
        ingredients=ingredients,
        instructions=instructions,
    )
