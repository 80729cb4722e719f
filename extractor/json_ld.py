"""
Стратегия извлечения рецепта из JSON-LD разметки schema.org (самый надежный способ)
"""

import json
import logging
import re
from typing import Any, Iterator, Optional

from extractor.base import BaseRecipeExtractor
from src.models.recipe import InstructionStep, PartialRecipe
from utils.duration import parse_duration
from utils.html import decode_html_entities
from utils.normalization import parse_ingredient_lines

logger = logging.getLogger(__name__)

LD_JSON_TYPE = re.compile(r'^\s*application/ld\+json\s*$', re.IGNORECASE)
# Обёртки, которыми некоторые сайты закрывают содержимое script
WRAPPER_PREFIX = re.compile(r'^\s*(?://\s*)?(?:<!--|<!\[CDATA\[)\s*')
WRAPPER_SUFFIX = re.compile(r'\s*(?://\s*)?(?:-->|\]\]>)\s*$')
DIGITS = re.compile(r'\d+')

DEFAULT_SERVINGS = 4


def is_recipe(item: Any) -> bool:
    """Проверка типа (может быть строкой или списком)"""
    if not isinstance(item, dict):
        return False
    item_type = item.get('@type')
    if isinstance(item_type, list):
        return 'Recipe' in item_type
    return item_type == 'Recipe'


def as_list(value: Any) -> list:
    """Скалярное значение превращается в список из одного элемента"""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def find_recipe(data: Any) -> Optional[dict]:
    """
    Поиск объекта Recipe в разобранном JSON-LD: сначала сам элемент,
    затем первый подходящий элемент его @graph
    """
    for item in as_list(data):
        if is_recipe(item):
            return item
        if isinstance(item, dict) and '@graph' in item:
            for graph_item in as_list(item['@graph']):
                if is_recipe(graph_item):
                    return graph_item
    return None


def _text(value: Any) -> str:
    if isinstance(value, bool) or value is None:
        return ''
    if isinstance(value, (str, int, float)):
        return str(value)
    return ''


def parse_image(image: Any) -> Optional[str]:
    """URL изображения: строка, объект ImageObject или список из них"""
    if isinstance(image, list):
        if not image:
            return None
        first = image[0]
        if isinstance(first, dict):
            return _text(first.get('url')) or None
        return _text(first) or None
    if isinstance(image, dict):
        return _text(image.get('url') or image.get('@id')) or None
    return _text(image) or None


def parse_servings(recipe_yield: Any) -> int:
    """Количество порций - первое число в recipeYield"""
    if isinstance(recipe_yield, list):
        recipe_yield = recipe_yield[0] if recipe_yield else None
    match = DIGITS.search(_text(recipe_yield))
    return int(match.group(0)) if match else DEFAULT_SERVINGS


def parse_tags(recipe: dict) -> list[str]:
    """Категории, затем кухни - без удаления дубликатов"""
    tags = []
    for value in as_list(recipe.get('recipeCategory')) + as_list(recipe.get('recipeCuisine')):
        tag = decode_html_entities(_text(value)).strip()
        if tag:
            tags.append(tag)
    return tags


def iter_instruction_texts(instructions: Any) -> Iterator[str]:
    """Тексты шагов из recipeInstructions (строки, HowToStep, HowToSection)"""
    if isinstance(instructions, str):
        # одна строка со всеми шагами - делим по переводам строк
        yield from instructions.splitlines()
        return

    for entry in as_list(instructions):
        if isinstance(entry, str):
            yield entry
        elif isinstance(entry, dict):
            if isinstance(entry.get('itemListElement'), list):
                # HowToSection - разворачиваем вложенные шаги
                yield from iter_instruction_texts(entry['itemListElement'])
            else:
                yield _text(entry.get('text')) or _text(entry.get('name'))


def parse_instructions(instructions: Any) -> list[InstructionStep]:
    steps = []
    for text in iter_instruction_texts(instructions):
        text = decode_html_entities(text).strip()
        if text:
            steps.append(InstructionStep(instruction=text))
    return steps


def map_recipe(recipe: dict) -> PartialRecipe:
    """Маппинг полей schema.org Recipe в PartialRecipe"""
    title = _text(recipe.get('name')) or _text(recipe.get('headline'))
    ingredient_lines = recipe.get('recipeIngredient')
    if ingredient_lines is None:
        # устаревшее поле schema.org
        ingredient_lines = recipe.get('ingredients')

    return PartialRecipe(
        title=decode_html_entities(title).strip(),
        description=decode_html_entities(_text(recipe.get('description'))),
        image=parse_image(recipe.get('image')),
        prep_time=parse_duration(recipe.get('prepTime')),
        cook_time=parse_duration(recipe.get('cookTime')),
        total_time=parse_duration(recipe.get('totalTime')),
        servings=parse_servings(recipe.get('recipeYield')),
        tags=parse_tags(recipe),
        ingredients=parse_ingredient_lines(as_list(ingredient_lines)),
        instructions=parse_instructions(recipe.get('recipeInstructions')),
    )


class JsonLdExtractor(BaseRecipeExtractor):
    """Экстрактор рецепта из блоков <script type="application/ld+json">"""

    def iter_json_ld_blocks(self) -> Iterator[Any]:
        """Разобранные JSON-LD блоки страницы, невалидные блоки пропускаются"""
        for script in self.soup.find_all('script', attrs={'type': LD_JSON_TYPE}):
            content = script.string or script.get_text() or ''
            content = WRAPPER_SUFFIX.sub('', WRAPPER_PREFIX.sub('', content))
            if not content.strip():
                continue
            try:
                yield json.loads(content, strict=False)
            except (ValueError, RecursionError) as e:
                logger.warning(f"Пропускаем невалидный JSON-LD блок: {e}")

    def find_recipe_data(self) -> Optional[dict]:
        """Первый найденный объект Recipe"""
        for data in self.iter_json_ld_blocks():
            recipe = find_recipe(data)
            if recipe is not None:
                return recipe
        return None

    def extract_all(self) -> PartialRecipe:
        recipe = self.find_recipe_data()
        if recipe is None:
            return PartialRecipe()
        return map_recipe(recipe)


def extract_json_ld(html: str) -> PartialRecipe:
    """Извлечение рецепта из JSON-LD разметки"""
    return JsonLdExtractor(html).extract_all()
