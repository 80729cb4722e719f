"""
Конфигурация экстракторов и скриптов импорта рецептов
"""
import os
from dotenv import load_dotenv

# Загружаем переменные из .env файла
load_dotenv()

class Config:
    """Централизованная конфигурация приложения из переменных окружения"""

    # Настройки экстрактора
    EXTRACTOR_HTML_PARSER: str = os.getenv('EXTRACTOR_HTML_PARSER', 'lxml')
    EXTRACTOR_DEFAULT_TITLE: str = os.getenv('EXTRACTOR_DEFAULT_TITLE', 'Imported Recipe')
    EXTRACTOR_DEFAULT_SERVINGS: int = int(os.getenv('EXTRACTOR_DEFAULT_SERVINGS', '4'))
    EXTRACTOR_OUTPUT_SUFFIX: str = os.getenv('EXTRACTOR_OUTPUT_SUFFIX', '_extracted.json')

    # Настройки разбора текстовых рецептов
    TEXT_DEFAULT_TITLE: str = os.getenv('TEXT_DEFAULT_TITLE', 'Untitled Recipe')

    # Логирование
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

# единый экземпляр конфигурации
config = Config()
