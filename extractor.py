"""
Извлечение перевода из HTML ответов Bing Dictionary.

Две независимые стратегии, по одной на каждый эндпоинт:
- parse_hover_snippet: фрагмент SerpHoverTrans (фонетика + пары pos/trs)
- parse_meta_description: полная страница /dict/search (meta description)

Обе стратегии намеренно хрупкие: любая смена разметки на стороне Bing
возвращает None, а не исключение. Сетевых и UI зависимостей нет.
"""

import re
from typing import Final, Optional

# ===== ПАТТЕРНЫ =====
PHONETIC_PATTERN: Final[str] = r'<span class="ht_attr" lang=".*?">\[(.*?)\] </span>'
EXPLAIN_PATTERN: Final[str] = r'<span class="ht_pos">(.*?)</span><span class="ht_trs">(.*?)</span>'

META_START: Final[str] = '<meta name="description" content="'
META_END: Final[str] = '" />'

LINE_PREFIX: Final[str] = "· "

_phonetic_re = re.compile(PHONETIC_PATTERN)
_explain_re = re.compile(EXPLAIN_PATTERN)


def parse_hover_snippet(html: str) -> Optional[str]:
    """
    Strategy A: фонетика и пары (часть речи, перевод).

    Формат результата (по строке на элемент, без завершающего \\n):
        · [h ə ˈ l oʊ]
        · int. 你好

    Returns:
        Строку с результатом или None, если не найдено ни фонетики,
        ни одной пары. None != "" - это сигнал для fallback.
    """
    lines = []

    phonetic = _phonetic_re.search(html)
    if phonetic:
        lines.append(f"{LINE_PREFIX}[{phonetic.group(1).strip()}]")

    for pos, trs in _explain_re.findall(html):
        lines.append(f"{LINE_PREFIX}{pos} {trs}")

    if not lines:
        return None

    return "\n".join(lines)


def parse_meta_description(html: str) -> Optional[str]:
    """
    Strategy B: содержимое <meta name="description" content="...">.

    Подстрока возвращается как есть: HTML entities НЕ раскодируются.
    """
    start = html.find(META_START)
    if start == -1:
        return None

    start += len(META_START)
    end = html.find(META_END, start)
    if end == -1:
        return None

    return html[start:end]
