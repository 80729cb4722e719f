"""
Тесты для JSON-LD стратегии
"""

import unittest
import sys
import json
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from extractor.json_ld import JsonLdExtractor, extract_json_ld, find_recipe, is_recipe, parse_image, parse_servings


def page_with_json_ld(*blocks) -> str:
    """HTML страница с указанными JSON-LD блоками (строки вставляются как есть)"""
    scripts = []
    for block in blocks:
        content = block if isinstance(block, str) else json.dumps(block)
        scripts.append(f'<script type="application/ld+json">{content}</script>')
    return f"<html><head>{''.join(scripts)}</head><body><h1>Page heading</h1></body></html>"


FULL_RECIPE = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Mac &amp; Cheese",
    "description": "Creamy &quot;classic&quot; dinner",
    "image": ["https://example.com/mac.jpg", "https://example.com/mac-2.jpg"],
    "prepTime": "PT15M",
    "cookTime": "PT1H",
    "totalTime": "PT1H15M",
    "recipeYield": ["6 servings", "6"],
    "recipeCategory": ["Dinner", "Main"],
    "recipeCuisine": "American",
    "recipeIngredient": ["2 cups macaroni", "1/2 cup butter", "Salt to taste", "  "],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "Boil the pasta."},
        "Melt the butter &amp; whisk.",
        {"@type": "HowToStep", "name": "Bake until golden."},
        {"@type": "HowToStep", "text": "   "},
    ],
}


class TestJsonLdExtractor(unittest.TestCase):
    """Тесты для JsonLdExtractor"""

    def test_full_recipe_mapping(self):
        """Тест маппинга всех полей schema.org Recipe"""
        result = extract_json_ld(page_with_json_ld(FULL_RECIPE))

        self.assertEqual(result.title, "Mac & Cheese")
        self.assertEqual(result.description, 'Creamy "classic" dinner')
        self.assertEqual(result.image, "https://example.com/mac.jpg")
        self.assertEqual(result.prep_time, 15)
        self.assertEqual(result.cook_time, 60)
        self.assertEqual(result.total_time, 75)
        self.assertEqual(result.servings, 6)
        self.assertEqual(result.tags, ["Dinner", "Main", "American"])

        self.assertEqual([i.name for i in result.ingredients], ["macaroni", "butter", "Salt to taste"])
        self.assertEqual(result.ingredients[0].amount, 2.0)
        self.assertEqual(result.ingredients[0].unit, "cups")
        self.assertEqual(result.ingredients[1].amount, 0.5)
        self.assertIsNone(result.ingredients[2].amount)

        self.assertEqual(
            [s.instruction for s in result.instructions],
            ["Boil the pasta.", "Melt the butter & whisk.", "Bake until golden."],
        )

    def test_headline_used_when_name_missing(self):
        """Тест: headline вместо name"""
        result = extract_json_ld(page_with_json_ld({"@type": "Recipe", "headline": "Best Soup"}))

        self.assertEqual(result.title, "Best Soup")

    def test_graph_wrapped_recipe(self):
        """Тест: рецепт внутри @graph"""
        data = {
            "@context": "https://schema.org",
            "@graph": [
                {"@type": "WebPage", "name": "Some page"},
                {"@type": ["Recipe", "NewsArticle"], "name": "Graph Stew"},
                {"@type": "Recipe", "name": "Second Stew"},
            ],
        }
        result = extract_json_ld(page_with_json_ld(data))

        self.assertEqual(result.title, "Graph Stew")

    def test_list_of_objects(self):
        """Тест: JSON-LD как список объектов"""
        data = [{"@type": "Organization", "name": "Site"}, {"@type": "Recipe", "name": "Listed Pie"}]
        result = extract_json_ld(page_with_json_ld(data))

        self.assertEqual(result.title, "Listed Pie")

    def test_malformed_block_skipped(self):
        """Тест: невалидный блок пропускается, следующий разбирается"""
        html = page_with_json_ld('{"@type": "Recipe", "name": ', {"@type": "Recipe", "name": "Valid Cake"})
        result = extract_json_ld(html)

        self.assertEqual(result.title, "Valid Cake")

    def test_first_recipe_wins(self):
        """Тест: используется первый найденный рецепт, без объединения"""
        html = page_with_json_ld(
            {"@type": "Recipe", "name": "First", "recipeIngredient": []},
            {"@type": "Recipe", "name": "Second", "recipeIngredient": ["1 egg"]},
        )
        result = extract_json_ld(html)

        self.assertEqual(result.title, "First")
        self.assertEqual(result.ingredients, [])

    def test_no_recipe(self):
        """Тест: JSON-LD без Recipe даёт пустой результат"""
        result = extract_json_ld(page_with_json_ld({"@type": "Article", "headline": "News"}))

        self.assertIsNone(result.title)
        self.assertFalse(result.has_title())

    def test_no_json_ld_at_all(self):
        """Тест: страница без JSON-LD"""
        result = extract_json_ld("<html><body><p>nothing</p></body></html>")

        self.assertFalse(result.has_title())

    def test_type_attribute_case_insensitive(self):
        """Тест: тип script в другом регистре"""
        html = '<script type="Application/LD+JSON">{"@type": "Recipe", "name": "Upper"}</script>'
        result = extract_json_ld(html)

        self.assertEqual(result.title, "Upper")

    def test_multiline_json_with_raw_newlines(self):
        """Тест: многострочный JSON и переводы строк внутри значений"""
        html = (
            '<script type="application/ld+json">\n{\n "@type": "Recipe",\n'
            ' "name": "Line\nBread"\n}\n</script>'
        )
        result = extract_json_ld(html)

        self.assertEqual(result.title, "Line\nBread")

    def test_cdata_wrapped_block(self):
        """Тест: блок, завернутый в CDATA"""
        html = '<script type="application/ld+json">//<![CDATA[\n{"@type": "Recipe", "name": "Wrapped"}\n//]]></script>'
        result = extract_json_ld(html)

        self.assertEqual(result.title, "Wrapped")

    def test_servings_default_when_absent(self):
        """Тест: без recipeYield порций 4"""
        result = extract_json_ld(page_with_json_ld({"@type": "Recipe", "name": "X"}))

        self.assertEqual(result.servings, 4)
        self.assertEqual(result.description, "")

    def test_how_to_section_flattened(self):
        """Тест: шаги внутри HowToSection"""
        data = {
            "@type": "Recipe",
            "name": "Layered",
            "recipeInstructions": [
                {
                    "@type": "HowToSection",
                    "name": "For the sauce",
                    "itemListElement": [
                        {"@type": "HowToStep", "text": "Simmer tomatoes."},
                        {"@type": "HowToStep", "text": "Season."},
                    ],
                },
                {"@type": "HowToStep", "text": "Serve."},
            ],
        }
        result = extract_json_ld(page_with_json_ld(data))

        self.assertEqual([s.instruction for s in result.instructions], ["Simmer tomatoes.", "Season.", "Serve."])

    def test_single_string_fields(self):
        """Тест: recipeIngredient и recipeInstructions одной строкой"""
        data = {
            "@type": "Recipe",
            "name": "Toast",
            "recipeIngredient": "1 slice bread",
            "recipeInstructions": "Toast the bread.\nButter it.",
        }
        result = extract_json_ld(page_with_json_ld(data))

        self.assertEqual(result.ingredients[0].name, "bread")
        self.assertEqual(result.ingredients[0].unit, "slice")
        self.assertEqual([s.instruction for s in result.instructions], ["Toast the bread.", "Butter it."])

    def test_shared_soup_is_used(self):
        """Тест: экстрактор принимает уже разобранный документ"""
        html = page_with_json_ld({"@type": "Recipe", "name": "Shared"})
        extractor = JsonLdExtractor(html)
        again = JsonLdExtractor(html, extractor.soup)

        self.assertIs(again.soup, extractor.soup)
        self.assertEqual(again.extract_all().title, "Shared")


class TestJsonLdHelpers(unittest.TestCase):
    """Тесты вспомогательных функций"""

    def test_is_recipe(self):
        self.assertTrue(is_recipe({"@type": "Recipe"}))
        self.assertTrue(is_recipe({"@type": ["Thing", "Recipe"]}))
        self.assertFalse(is_recipe({"@type": "Article"}))
        self.assertFalse(is_recipe({}))
        self.assertFalse(is_recipe("Recipe"))

    def test_find_recipe_prefers_element_over_graph(self):
        data = {"@type": "Recipe", "name": "Outer", "@graph": [{"@type": "Recipe", "name": "Inner"}]}
        self.assertEqual(find_recipe(data)["name"], "Outer")

    def test_parse_image_variants(self):
        self.assertEqual(parse_image("https://e.com/a.jpg"), "https://e.com/a.jpg")
        self.assertEqual(parse_image({"@type": "ImageObject", "url": "https://e.com/b.jpg"}), "https://e.com/b.jpg")
        self.assertEqual(parse_image({"@id": "https://e.com/#img"}), "https://e.com/#img")
        self.assertEqual(parse_image([{"url": "https://e.com/c.jpg"}]), "https://e.com/c.jpg")
        self.assertIsNone(parse_image([]))
        self.assertIsNone(parse_image(None))

    def test_parse_servings_variants(self):
        self.assertEqual(parse_servings("Serves 8"), 8)
        self.assertEqual(parse_servings(["12 cookies"]), 12)
        self.assertEqual(parse_servings(3), 3)
        self.assertEqual(parse_servings("a crowd"), 4)
        self.assertEqual(parse_servings(None), 4)


if __name__ == '__main__':
    unittest.main()
