import re

# Именованные сущности, которые встречаются в рецептах чаще всего
NAMED_ENTITIES = {
    '&amp;': '&',
    '&lt;': '<',
    '&gt;': '>',
    '&quot;': '"',
    '&#39;': "'",
    '&apos;': "'",
    '&nbsp;': ' ',
    '&ndash;': '–',
    '&mdash;': '—',
    '&hellip;': '…',
    '&ldquo;': '“',
    '&rdquo;': '”',
    '&lsquo;': '‘',
    '&rsquo;': '’',
    '&deg;': '°',
    '&frac12;': '½',
    '&frac14;': '¼',
    '&frac34;': '¾',
}

NUMERIC_REFERENCE = re.compile(r'&#(?:[xX]([0-9a-fA-F]+)|(\d+));')
# подряд идущие ссылки разбираются вместе, чтобы склеить суррогатные пары
NUMERIC_REFERENCE_RUN = re.compile(r'(?:&#(?:[xX][0-9a-fA-F]+|\d+);)+')
WHITESPACE = re.compile(r'\s+')

REPLACEMENT_CHARACTER = '\ufffd'
MAX_CODE_POINT = 0x10FFFF


def _is_high_surrogate(code: int) -> bool:
    return 0xD800 <= code <= 0xDBFF


def _is_low_surrogate(code: int) -> bool:
    return 0xDC00 <= code <= 0xDFFF


def _reference_code(match: re.Match) -> int | None:
    """Числовое значение ссылки или None, если число не удалось прочитать"""
    hex_digits, decimal_digits = match.groups()
    try:
        if hex_digits is not None:
            return int(hex_digits, 16)
        return int(decimal_digits)
    except ValueError:
        # слишком длинная строка цифр
        return None


def _decode_reference_run(run: re.Match) -> str:
    """
    Декодирование серии числовых ссылок

    Пара &#55357;&#56832; (старший + младший суррогат) склеивается в один символ,
    одиночные суррогаты и &#0; заменяются на U+FFFD, коды вне диапазона Unicode
    остаются как есть
    """
    references = list(NUMERIC_REFERENCE.finditer(run.group(0)))
    codes = [_reference_code(ref) for ref in references]

    parts = []
    i = 0
    while i < len(references):
        code = codes[i]
        next_code = codes[i + 1] if i + 1 < len(codes) else None

        if code is None or code > MAX_CODE_POINT:
            parts.append(references[i].group(0))
        elif _is_high_surrogate(code) and next_code is not None and _is_low_surrogate(next_code):
            parts.append(chr(0x10000 + ((code - 0xD800) << 10) + (next_code - 0xDC00)))
            i += 1
        elif code == 0 or _is_high_surrogate(code) or _is_low_surrogate(code):
            parts.append(REPLACEMENT_CHARACTER)
        else:
            parts.append(chr(code))
        i += 1

    return ''.join(parts)


def decode_html_entities(text: str) -> str:
    """
    Декодирование HTML сущностей в обычный текст

    Сначала заменяются именованные сущности из таблицы, затем числовые
    ссылки &#NNN; и &#xHHHH;. Суррогатные пары склеиваются, одиночные
    суррогаты и &#0; дают U+FFFD, ссылки вне диапазона Unicode остаются как есть.

    Args:
        text: строка с HTML сущностями

    Returns:
        Декодированная строка ("" для пустого ввода)
    """
    if not text:
        return ''

    decoded = str(text)
    for entity, replacement in NAMED_ENTITIES.items():
        decoded = decoded.replace(entity, replacement)

    return NUMERIC_REFERENCE_RUN.sub(_decode_reference_run, decoded)


def collapse_whitespace(text: str) -> str:
    """Схлопывает подряд идущие пробельные символы в один пробел"""
    if not text:
        return ''
    return WHITESPACE.sub(' ', text).strip()


def clean_text(text: str) -> str:
    """Декодирование сущностей и нормализация пробелов"""
    return collapse_whitespace(decode_html_entities(text))
