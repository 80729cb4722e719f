"""
Data models
"""

from .recipe import Ingredient, InstructionStep, PartialRecipe, NormalizedRecipe

__all__ = ['Ingredient', 'InstructionStep', 'PartialRecipe', 'NormalizedRecipe']
