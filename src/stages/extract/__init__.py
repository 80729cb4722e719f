"""
Extraction of recipe data from fetched HTML
"""

from .recipe_extractor import RecipeExtractor, extract_recipe

__all__ = ['RecipeExtractor', 'extract_recipe']
