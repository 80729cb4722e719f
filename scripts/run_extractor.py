"""
Скрипт для извлечения рецептов из сохраненных HTML страниц или текстовых файлов
"""

import sys
import json
import logging
import argparse
from pathlib import Path

# Добавляем корневую директорию в путь
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.config import config
from src.stages.extract import RecipeExtractor
from src.stages.parse import parse_recipe_from_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Извлечение рецептов из HTML файлов и текста")
    parser.add_argument('path', help='HTML файл, директория с HTML файлами или текстовый файл (с --text)')
    parser.add_argument('--output', default=None, help='Путь для сохранения JSON (только для одного файла)')
    parser.add_argument('--text', action='store_true', help='Разобрать файл как рецепт в виде обычного текста')
    parser.add_argument('--log-level', default=config.LOG_LEVEL, help=f'Уровень логирования (по умолчанию: {config.LOG_LEVEL})')
    return parser


def main(argv: list[str] | None = None) -> int:
    """Основная функция"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - [%(threadName)s] - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )

    path = Path(args.path)
    if not path.exists():
        logger.error(f"Путь не найден: {path}")
        return 1

    if args.text:
        recipe = parse_recipe_from_text(path.read_text(encoding='utf-8'))
        print(json.dumps(recipe.to_json(), ensure_ascii=False, indent=4))
        return 0

    extractor = RecipeExtractor()
    if path.is_dir():
        results = extractor.process_directory(path)
        logger.info(f"Сохранено рецептов: {len(results)}")
    else:
        extractor.process_html_file(path, args.output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
