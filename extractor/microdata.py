"""
Стратегия извлечения по microdata разметке (атрибуты itemprop)
"""

import logging
from typing import Optional

from extractor.base import BaseRecipeExtractor
from src.models.recipe import PartialRecipe

logger = logging.getLogger(__name__)


class MicrodataExtractor(BaseRecipeExtractor):
    """Экстрактор название/описание/изображение из itemprop атрибутов"""

    def extract_dish_name(self) -> Optional[str]:
        """Первый элемент itemprop="name" с текстом"""
        for tag in self.soup.find_all(attrs={'itemprop': 'name'}):
            text = self.node_text(tag.get_text())
            if text:
                return text
        return None

    def extract_description(self) -> Optional[str]:
        """Описание из content атрибута itemprop="description" """
        tag = self.soup.find(attrs={'itemprop': 'description', 'content': True})
        if tag:
            return self.node_text(tag['content']) or None
        return None

    def extract_image_url(self) -> Optional[str]:
        """URL изображения из src атрибута itemprop="image" """
        tag = self.soup.find(attrs={'itemprop': 'image', 'src': True})
        if tag:
            return tag['src'].strip() or None
        return None

    def extract_all(self) -> PartialRecipe:
        # Ошибка в одном поле не мешает остальным
        fields = {
            'title': self.extract_dish_name,
            'description': self.extract_description,
            'image': self.extract_image_url,
        }
        result = {}
        for field, extract in fields.items():
            try:
                result[field] = extract()
            except Exception as e:
                logger.warning(f"Microdata: не удалось извлечь поле {field}: {e}")
        return PartialRecipe(**result)


def extract_microdata(html: str) -> PartialRecipe:
    """Извлечение рецепта по microdata разметке"""
    return MicrodataExtractor(html).extract_all()
