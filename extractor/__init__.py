"""
Стратегии извлечения данных рецептов из HTML
"""
