"""
Recipe import pipeline stages
"""

from .extract import RecipeExtractor, extract_recipe
from .parse import parse_recipe_from_text

__all__ = ['RecipeExtractor', 'extract_recipe', 'parse_recipe_from_text']
