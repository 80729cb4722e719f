"""
Тесты для стратегии на общих HTML тегах
"""

import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from extractor.basic_html import extract_basic_data


class TestBasicHtmlExtractor(unittest.TestCase):
    """Тесты для BasicHtmlExtractor"""

    def test_h1_first(self):
        """Тест: <h1> имеет приоритет над <title> и og:title"""
        html = """
        <html><head>
          <title>Site title</title>
          <meta property="og:title" content="OG title">
          <meta name="description" content="Quick &amp; easy   weeknight dinner">
          <meta property="og:image" content="https://example.com/og.jpg">
        </head><body><h1>
            Chicken   Tikka &amp; Rice
        </h1></body></html>
        """
        result = extract_basic_data(html)

        self.assertEqual(result.title, "Chicken Tikka & Rice")
        self.assertEqual(result.description, "Quick & easy weeknight dinner")
        self.assertEqual(result.image, "https://example.com/og.jpg")

    def test_entities_decoded_once(self):
        """Тест: парсер уже декодировал сущности, повторного декодирования нет"""
        html = """
        <html><head>
          <meta name="description" content="Use &amp;amp; in HTML">
        </head><body><h1>Fish &amp;amp; Chips</h1></body></html>
        """
        result = extract_basic_data(html)

        self.assertEqual(result.title, "Fish &amp; Chips")
        self.assertEqual(result.description, "Use &amp; in HTML")

    def test_title_when_no_h1(self):
        """Тест: <title> если нет <h1>"""
        html = "<html><head><title>Lentil Soup | My Blog</title></head><body></body></html>"
        result = extract_basic_data(html)

        self.assertEqual(result.title, "Lentil Soup | My Blog")

    def test_og_title_last(self):
        """Тест: og:title если нет <h1> и <title>"""
        html = '<html><head><meta property="og:title" content="OG Only"></head><body></body></html>'
        result = extract_basic_data(html)

        self.assertEqual(result.title, "OG Only")

    def test_empty_h1_falls_through(self):
        """Тест: пустой <h1> не считается названием"""
        html = "<html><head><title>Fallback</title></head><body><h1> </h1></body></html>"
        result = extract_basic_data(html)

        self.assertEqual(result.title, "Fallback")

    def test_nothing_found(self):
        """Тест: нет подходящих тегов"""
        result = extract_basic_data("<div>just text</div>")

        self.assertIsNone(result.title)
        self.assertIsNone(result.description)
        self.assertIsNone(result.image)
        self.assertIsNone(result.ingredients)
        self.assertIsNone(result.instructions)


if __name__ == '__main__':
    unittest.main()
