"""
Parsing of recipes pasted as plain text
"""

from .text_recipe import parse_recipe_from_text

__all__ = ['parse_recipe_from_text']
