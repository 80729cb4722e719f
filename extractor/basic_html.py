"""
Последняя стратегия: общие HTML теги (<h1>, <title>, Open Graph и meta description)
"""

from typing import Optional

from extractor.base import BaseRecipeExtractor
from src.models.recipe import PartialRecipe


class BasicHtmlExtractor(BaseRecipeExtractor):
    """Экстрактор для страниц без структурированной разметки"""

    def extract_dish_name(self) -> Optional[str]:
        """Название: <h1>, затем <title>, затем og:title"""
        h1 = self.soup.find('h1')
        if h1:
            title = self.node_text(h1.get_text())
            if title:
                return title

        title_tag = self.soup.find('title')
        if title_tag:
            title = self.node_text(title_tag.get_text())
            if title:
                return title

        og_title = self.meta_content(property='og:title')
        if og_title:
            return self.node_text(og_title) or None

        return None

    def extract_description(self) -> Optional[str]:
        """Описание из meta description"""
        description = self.meta_content(name='description')
        if not description:
            return None
        return self.node_text(description) or None

    def extract_image_url(self) -> Optional[str]:
        """Изображение из og:image"""
        image = self.meta_content(property='og:image')
        if not image:
            return None
        return image.strip() or None

    def extract_all(self) -> PartialRecipe:
        return PartialRecipe(
            title=self.extract_dish_name(),
            description=self.extract_description(),
            image=self.extract_image_url(),
        )


def extract_basic_data(html: str) -> PartialRecipe:
    """Извлечение базовых данных из HTML"""
    return BasicHtmlExtractor(html).extract_all()
