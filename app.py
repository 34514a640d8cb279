"""
QuickDict - точка входа.

Интегрирует:
- MainWindow: окно с полем ввода и результатом
- SearchController: поиск и доставка результата в окно
- network: HTTP сессии (закрываются при выходе)

Использование:
    quickdict [WORD]

Exit code: 0 при обычном закрытии, 1 если окно не удалось создать.
"""

import logging
import os
import sys
import tkinter as tk
from typing import List, Optional

from config import cfg
from gui.main_window import MainWindow
from network import close_all_sessions
from search_controller import SearchController

logger = logging.getLogger(__name__)


def setup_logging():
    """
    Настройка логирования.
    Уровень: QUICKDICT_LOG (env) > [DEBUG] LogLevel (config) > INFO.
    """
    level_name = os.environ.get("QUICKDICT_LOG") or cfg.get("DEBUG", "LogLevel", "INFO")
    level = getattr(logging, level_name.strip().upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s.%(msecs)03d] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def parse_initial_word(argv: List[str]) -> str:
    """Единственный позиционный аргумент - стартовое слово (trimmed)"""
    args = argv[1:]
    if len(args) > 1:
        logger.warning("Ignoring extra arguments: %s", args[1:])
    return args[0].strip() if args else ""


def main(argv: Optional[List[str]] = None) -> int:
    """
    Главная точка входа приложения.

    Последовательность:
    1. Логирование и разбор аргумента
    2. Создание окна (ошибка -> exit code 1)
    3. Регистрация callbacks
    4. Стартовый поиск в фоне (если передано слово)
    5. Запуск event loop
    6. Cleanup при завершении
    """
    setup_logging()

    if argv is None:
        argv = sys.argv
    initial_word = parse_initial_word(argv)

    # ===== СОЗДАНИЕ GUI =====
    try:
        app = MainWindow()
    except tk.TclError as e:
        logger.error("Failed to create main window: %s", e)
        close_all_sessions()
        return 1

    # ===== РЕГИСТРАЦИЯ CALLBACKS =====
    controller = SearchController(app)
    app.search_callback = controller.search
    app.quit_callback = app.close_app

    if initial_word:
        app.set_input_text(initial_word)
        controller.search_in_background(initial_word)

    # ===== ЗАПУСК =====
    try:
        app.mainloop()
    finally:
        close_all_sessions()

    return 0


def run():
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    run()
