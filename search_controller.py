"""
Контроллер поиска для QuickDict.

Связывает действие "search" окна с network.fetch_translation.

Architecture:
- Окно хранится ТОЛЬКО через weakref (не продлеваем жизнь окна)
- Поиск пользователя - синхронно в UI потоке
- Стартовый поиск (аргумент CLI) - в фоновом потоке, результат
  передаётся в UI поток через window.post() (after(0, ...))
- Generation tracking: результат устаревшего запроса отбрасывается,
  последний поиск всегда выигрывает
"""

import logging
import threading
import weakref

from network import fetch_translation

logger = logging.getLogger(__name__)


class SearchController:
    """
    Выполняет поиск и доставляет результат в окно.

    Responsibilities:
    - Валидация запроса (пустой после strip -> ничего не отправляем)
    - Преобразование любых неожиданных ошибок в "Error: <msg>"
    - Best-effort доставка: no-op если окно уже закрыто
    - Защита от перезаписи результата устаревшим запросом
    """

    def __init__(self, window):
        """
        Args:
            window: Объект с set_translation(), post() и is_alive()
                    (MainWindow). Хранится как слабая ссылка.
        """
        self._window_ref = weakref.ref(window)

        # State tracking для предотвращения устаревших обновлений
        self._generation_lock = threading.Lock()
        self._generation = 0

    def _next_generation(self) -> int:
        with self._generation_lock:
            self._generation += 1
            return self._generation

    def _is_current(self, generation: int) -> bool:
        with self._generation_lock:
            return self._generation == generation

    def _live_window(self):
        """Возвращает окно или None, если оно собрано GC / уничтожено"""
        window = self._window_ref()
        if window is None or not window.is_alive():
            return None
        return window

    @staticmethod
    def _clean(word) -> str:
        return (word or "").strip()

    @staticmethod
    def _run_fetch(word: str) -> str:
        """fetch_translation с последним рубежом: результат всегда строка"""
        try:
            return fetch_translation(word)
        except Exception as e:
            logger.exception("Unexpected error while fetching: %s", word)
            return f"Error: {e}"

    # ═══════════════════════════════════════════════════════════════════════
    # PUBLIC API
    # ═══════════════════════════════════════════════════════════════════════

    def search(self, word: str) -> bool:
        """
        Синхронный поиск. Вызывается из UI потока (кнопка / Enter).

        Returns:
            True если запрос был отправлен
        """
        word = self._clean(word)
        if not word:
            return False

        logger.info("Search requested for: %s", word)
        generation = self._next_generation()

        result = self._run_fetch(word)
        self._deliver(generation, word, result)
        return True

    def search_in_background(self, word: str) -> bool:
        """
        Поиск в фоновом потоке (стартовое слово), чтобы не блокировать
        первую отрисовку окна.

        Returns:
            True если поток был запущен
        """
        word = self._clean(word)
        if not word:
            return False

        logger.info("Background search requested for: %s", word)
        generation = self._next_generation()

        threading.Thread(
            target=self._worker_search,
            args=(word, generation),
            daemon=True,
            name=f"Search-{word}"
        ).start()
        return True

    # ═══════════════════════════════════════════════════════════════════════
    # WORKERS
    # ═══════════════════════════════════════════════════════════════════════

    def _worker_search(self, word: str, generation: int):
        """Worker: загрузка в фоне, применение результата в UI потоке."""
        result = self._run_fetch(word)

        window = self._live_window()
        if window is None:
            logger.debug("Window is gone, dropping result for: %s", word)
            return

        if not window.post(lambda: self._deliver(generation, word, result)):
            logger.debug("Window closed before delivery, dropping result for: %s", word)

    def _deliver(self, generation: int, word: str, result: str):
        """Запись результата в окно. Только из UI потока."""
        if not self._is_current(generation):
            logger.debug("Stale result for: %s, newer search in progress", word)
            return

        window = self._live_window()
        if window is None:
            logger.debug("Window is gone, dropping result for: %s", word)
            return

        window.set_translation(result)
