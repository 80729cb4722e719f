import re

HOURS_PATTERN = re.compile(r'(\d+)H')
MINUTES_PATTERN = re.compile(r'(\d+)M')
DIGITS_PATTERN = re.compile(r'(\d+)')


def parse_duration(duration) -> int:
    """
    Конвертирует длительность в минуты

    Args:
        duration: ISO 8601 строка вида "PT20M" / "PT1H30M" или свободный текст ("35 minutes")

    Returns:
        Время в минутах, 0 если ничего не удалось распознать
    """
    if duration is None or isinstance(duration, (dict, list, bool)):
        return 0

    duration = str(duration).strip()
    if not duration:
        return 0

    if duration.startswith('PT'):
        hour_match = HOURS_PATTERN.search(duration)
        min_match = MINUTES_PATTERN.search(duration)
        hours = int(hour_match.group(1)) if hour_match else 0
        minutes = int(min_match.group(1)) if min_match else 0
        return hours * 60 + minutes

    # Свободный текст - берём первое число как минуты
    match = DIGITS_PATTERN.search(duration)
    return int(match.group(1)) if match else 0
