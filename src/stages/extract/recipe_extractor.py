"""Оркестратор стратегий извлечения данных рецепта из HTML"""
import json
import logging
from pathlib import Path
from typing import Optional, Sequence, Type

from bs4 import BeautifulSoup
from pydantic import ValidationError

from config.config import config
from extractor.base import BaseRecipeExtractor, make_soup
from extractor.basic_html import BasicHtmlExtractor
from extractor.json_ld import JsonLdExtractor
from extractor.microdata import MicrodataExtractor
from src.models.recipe import NormalizedRecipe, PartialRecipe

logger = logging.getLogger(__name__)

# Порядок важен: от самой структурированной разметки к самой общей
DEFAULT_STRATEGIES: tuple[Type[BaseRecipeExtractor], ...] = (
    JsonLdExtractor,
    MicrodataExtractor,
    BasicHtmlExtractor,
)


class RecipeExtractor:
    """
    Запускает стратегии по приоритету и берёт результат первой, нашедшей название.
    Поля разных стратегий не объединяются
    """

    def __init__(self, strategies: Optional[Sequence[Type[BaseRecipeExtractor]]] = None,
                 default_title: Optional[str] = None,
                 default_servings: Optional[int] = None):
        self.strategies = tuple(strategies) if strategies is not None else DEFAULT_STRATEGIES
        self.default_title = default_title or config.EXTRACTOR_DEFAULT_TITLE
        self.default_servings = default_servings or config.EXTRACTOR_DEFAULT_SERVINGS

    @staticmethod
    def _parse(html: str) -> Optional[BeautifulSoup]:
        try:
            return make_soup(html)
        except Exception as e:
            logger.warning(f"Не удалось разобрать HTML: {e}")
            return None

    @staticmethod
    def _run_strategy(strategy: Type[BaseRecipeExtractor], html: str,
                      soup: Optional[BeautifulSoup]) -> PartialRecipe:
        """Любая ошибка стратегии означает "ничего не найдено" """
        try:
            return strategy(html, soup).extract_all()
        except Exception as e:
            logger.warning(f"Стратегия {strategy.__name__} завершилась с ошибкой: {e}")
            return PartialRecipe()

    def _normalize_strategy_result(self, strategy: Type[BaseRecipeExtractor],
                                   partial: PartialRecipe) -> Optional[NormalizedRecipe]:
        """Данные, которые не проходят валидацию модели, означают "ничего не найдено" """
        try:
            return self.normalize(partial)
        except ValidationError as e:
            logger.warning(f"Стратегия {strategy.__name__} вернула некорректные данные: {e}")
            return None

    def normalize(self, partial: PartialRecipe) -> NormalizedRecipe:
        """Заполнение значений по умолчанию для отсутствующих полей"""
        title = partial.title.strip() if partial.has_title() else self.default_title
        servings = partial.servings if partial.servings and partial.servings > 0 else self.default_servings

        return NormalizedRecipe(
            title=title,
            description=partial.description,
            image=partial.image,
            prep_time=max(partial.prep_time or 0, 0),
            cook_time=max(partial.cook_time or 0, 0),
            total_time=max(partial.total_time or 0, 0),
            servings=servings,
            tags=list(partial.tags or []),
            ingredients=list(partial.ingredients or []),
            instructions=list(partial.instructions or []),
        )

    def extract_recipe(self, html: str) -> NormalizedRecipe:
        """
        Извлекает рецепт из HTML страницы

        Args:
            html: HTML документ страницы

        Returns:
            Заполненный NormalizedRecipe (никогда не выбрасывает исключений из-за разметки)
        """
        html = html or ''
        soup = self._parse(html)

        recipe = None
        for strategy in self.strategies:
            partial = self._run_strategy(strategy, html, soup)
            if not partial.has_title():
                continue
            recipe = self._normalize_strategy_result(strategy, partial)
            if recipe is not None:
                logger.debug(f"Рецепт найден стратегией {strategy.__name__}")
                break

        if recipe is None:
            logger.debug("Ни одна стратегия не нашла название рецепта")
            recipe = self.normalize(PartialRecipe())

        logger.info(f"Извлечен рецепт: {recipe.title}")
        return recipe

    def _get_output_filename(self, html_path: Path) -> Path:
        return html_path.with_name(html_path.stem + config.EXTRACTOR_OUTPUT_SUFFIX)

    def process_html_file(self, html_path: str | Path,
                          output_path: Optional[str | Path] = None) -> NormalizedRecipe:
        """
        Обработка одного HTML файла

        Args:
            html_path: Путь к HTML файлу
            output_path: Путь для сохранения JSON (если None, то рядом с HTML)

        Returns:
            Извлеченные данные
        """
        html_path = Path(html_path)
        html = html_path.read_text(encoding='utf-8', errors='replace')
        recipe = self.extract_recipe(html)

        output_path = Path(output_path) if output_path else self._get_output_filename(html_path)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(recipe.to_json(), f, ensure_ascii=False, indent=4)

        logger.info(f"Обработан: {html_path}, сохранен: {output_path}")
        return recipe

    def process_directory(self, directory_path: str | Path) -> dict[str, NormalizedRecipe]:
        """
        Обработка всех HTML файлов в директории

        Args:
            directory_path: Путь к директории с HTML файлами

        Returns:
            Словарь {имя файла: рецепт} для успешно обработанных файлов
        """
        dir_path = Path(directory_path)
        html_files = sorted(dir_path.glob('*.html'))
        logger.info(f"Найдено {len(html_files)} HTML файлов")

        results: dict[str, NormalizedRecipe] = {}
        for html_file in html_files:
            try:
                results[html_file.name] = self.process_html_file(html_file)
            except (OSError, ValueError) as e:
                logger.error(f"Ошибка при обработке {html_file.name}: {e}")

        logger.info(f"Обработка завершена: {len(results)} из {len(html_files)}")
        return results


def extract_recipe(html: str) -> NormalizedRecipe:
    """Извлечение рецепта стратегиями по умолчанию"""
    return RecipeExtractor().extract_recipe(html)
