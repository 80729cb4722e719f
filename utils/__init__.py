"""
Вспомогательные функции разбора текста
"""
