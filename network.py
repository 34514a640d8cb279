"""
Модуль сетевых операций для QuickDict.

Обрабатывает:
- HTTP запросы к Bing Dictionary (основной + резервный эндпоинт)
- Отдельная requests.Session на каждый эндпоинт (свой User-Agent)
- Цепочку fallback: SerpHoverTrans -> /dict/search -> "No Data"
- Логирование запросов через response hooks

КРИТИЧНО:
- fetch_translation() НИКОГДА не бросает исключений наружу:
  любая ошибка сети/разбора превращается в fallback или "No Data"
- Повторов с backoff нет (Retry total=0 по умолчанию)
"""
import datetime
import logging
from typing import Callable, Final, Optional
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from config import cfg
from extractor import parse_hover_snippet, parse_meta_description

logger = logging.getLogger(__name__)

# ===== КОНСТАНТЫ =====
NO_DATA: Final[str] = "No Data"


# ===== УПРАВЛЕНИЕ СЕССИЯМИ =====
def _create_session(user_agent: str, max_retries: int = 0) -> requests.Session:
    """Создает HTTP session с заданным User-Agent и retry стратегией"""
    session = requests.Session()

    retry_strategy = Retry(
        total=max_retries,
        backoff_factor=0.2,
        status_forcelist=[429, 502, 503, 504],
        allowed_methods=["HEAD", "GET", "OPTIONS"],
        raise_on_status=False
    )

    adapter = HTTPAdapter(max_retries=retry_strategy)

    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({"User-Agent": user_agent})

    # ===== ЛОГИРОВАНИЕ ЗАПРОСОВ (HOOKS) =====
    if cfg.get_bool("DEBUG", "LogRequests"):
        def log_request(response, *args, **kwargs):
            now = datetime.datetime.now()
            start_time = now - response.elapsed

            method = response.request.method
            url = response.url
            if len(url) > 250:
                url = url[:247] + "..."

            logger.debug("[%s] -> REQ: %s %s",
                         start_time.strftime('%H:%M:%S.%f')[:-3], method, url)
            logger.debug("[%s] <- RES: %s (took %.3fs)",
                         now.strftime('%H:%M:%S.%f')[:-3], response.status_code,
                         response.elapsed.total_seconds())

        session.hooks['response'] = [log_request]

    return session


_max_retries = cfg.get_int("NETWORK", "MaxRetries", 0)

# Глобальные сессии для переиспользования соединений
session_primary = _create_session(cfg.get("NETWORK", "PrimaryUserAgent"), _max_retries)
session_fallback = _create_session(cfg.get("NETWORK", "FallbackUserAgent"), _max_retries)


# ===== ХЕЛПЕРЫ =====
def build_url(template: str, word: str) -> str:
    """Подставляет percent-encoded слово в шаблон вида '...?q={query}'"""
    return template.format(query=quote(word, safe=""))


def _get_timeout() -> Optional[float]:
    """Таймаут из config; None = дефолт requests (без ограничения)"""
    return cfg.get_float("NETWORK", "Timeout", None)


def _fetch_and_parse(session: requests.Session, url: str,
                     parser: Callable[[str], Optional[str]]) -> Optional[str]:
    """
    Один GET + разбор ответа.

    Returns:
        Непустой результат парсера или None (ошибка уже залогирована)
    """
    try:
        resp = session.get(url, timeout=_get_timeout())
        if not 200 <= resp.status_code < 300:
            logger.warning("API returned status: %s (%s)", resp.status_code, url)
            return None
        html = resp.text
    except (requests.RequestException, ValueError) as e:
        logger.warning("Request failed: %s (%s)", e, url)
        return None

    result = parser(html)
    if result is None:
        logger.warning("%s failed: pattern not found (%s)", parser.__name__, url)
        return None

    if not result:
        logger.warning("No valid data from API (%s)", url)
        return None

    return result


# ═══════════════════════════════════════════════════════════════════════════
# ПЕРЕВОД (TRANSLATION)
# ═══════════════════════════════════════════════════════════════════════════

def fetch_from_primary(word: str) -> Optional[str]:
    """Bing SerpHoverTrans: фонетика + пары pos/trs (Strategy A)"""
    logger.debug("Trying primary endpoint for: %s", word)
    url = build_url(cfg.get("NETWORK", "PrimaryURL"), word)
    return _fetch_and_parse(session_primary, url, parse_hover_snippet)


def fetch_from_fallback(word: str) -> Optional[str]:
    """Bing /dict/search: meta description полной страницы (Strategy B)"""
    logger.debug("Trying fallback endpoint for: %s", word)
    url = build_url(cfg.get("NETWORK", "FallbackURL"), word)
    return _fetch_and_parse(session_fallback, url, parse_meta_description)


def fetch_translation(word: str) -> str:
    """
    Перевод слова через цепочку эндпоинтов.

    Алгоритм:
    1. Основной эндпоинт (SerpHoverTrans)
    2. Если UseFallback - резервный (/dict/search)
    3. Иначе "No Data"

    Returns:
        Перевод или NO_DATA. Исключений не бросает.
    """
    logger.debug("Fetching translation for: %s", word)

    result = fetch_from_primary(word)
    if result:
        logger.info("Successfully fetched translation from primary endpoint for: %s", word)
        return result

    if not cfg.get_bool("NETWORK", "UseFallback", True):
        logger.warning("Primary endpoint failed for: %s, fallback disabled", word)
        return NO_DATA

    logger.warning("Primary endpoint failed for: %s, falling back to web page", word)

    result = fetch_from_fallback(word)
    if result:
        logger.info("Successfully fetched translation from fallback endpoint for: %s", word)
        return result

    logger.warning("Fallback endpoint failed for: %s", word)
    return NO_DATA


# ═══════════════════════════════════════════════════════════════════════════
# CLEANUP
# ═══════════════════════════════════════════════════════════════════════════

def close_all_sessions():
    """Закрывает все HTTP сессии при завершении приложения"""
    session_primary.close()
    session_fallback.close()
