"""
базовый класс стратегии извлечения данных рецептов
Все стратегии должны наследоваться от этого класса и реализовывать метод extract_all
Стратегии работают с уже загруженной строкой HTML и ничего не скачивают сами
Имена наследников имеют вид <Strategy>Extractor, например JsonLdExtractor
"""

from typing import Optional
from abc import ABC, abstractmethod
from bs4 import BeautifulSoup

from config.config import config
from src.models.recipe import PartialRecipe
from utils.html import collapse_whitespace


def make_soup(html: str) -> BeautifulSoup:
    """Разбор HTML выбранным в конфигурации парсером"""
    return BeautifulSoup(html or '', config.EXTRACTOR_HTML_PARSER)


class BaseRecipeExtractor(ABC):
    """базовый экстрактор данных рецептов"""

    def __init__(self, html: str, soup: Optional[BeautifulSoup] = None):
        """
        Args:
            html: HTML документ страницы
            soup: уже разобранный документ (чтобы не разбирать HTML повторно)
        """
        self.html = html or ''
        self.soup = soup if soup is not None else make_soup(self.html)

    @staticmethod
    def node_text(text: str) -> str:
        """
        Нормализация пробелов в тексте или атрибуте из дерева разбора.
        Сущности парсер уже декодировал, повторно они не декодируются (&amp;amp; -> &amp;)
        """
        return collapse_whitespace(text)

    def meta_content(self, **attrs) -> Optional[str]:
        """Значение content первого meta тега с указанными атрибутами"""
        tag = self.soup.find('meta', attrs={**attrs, 'content': True})
        if tag and tag.get('content'):
            return tag['content']
        return None

    @abstractmethod
    def extract_all(self) -> PartialRecipe:
        """Извлечение всех данных рецепта из HTML"""
        raise NotImplementedError("Метод extract_all должен быть реализован в подклассе")
