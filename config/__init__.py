"""
Конфигурация из переменных окружения
"""
