"""
Главное окно приложения QuickDict.

Отображает:
- Заголовок
- Поле ввода запроса + кнопка Search
- Результат перевода (многострочный)
- Статус бар

Architecture:
- Не знает о сети: действия search/quit отдаются через callbacks,
  которые устанавливает app.py
- set_translation() / set_input_text() - только из UI потока
- post() - единственная точка входа для фоновых потоков
"""

import logging
import tkinter as tk
from typing import Callable, Optional

from config import cfg
from gui.buttons import ActionButton
from gui.styles import COLORS, FONTS
from network import NO_DATA

logger = logging.getLogger(__name__)


class MainWindow(tk.Tk):
    """
    Главное окно приложения.

    Responsibilities:
    - Window management (создание, геометрия из config, закрытие)
    - Layout и UI creation
    - Поверхность состояния: input_text, translation
    - Action hooks: search_callback(word), quit_callback()
    """

    TITLE = "QuickDict"

    # ===== LAYOUT КОНСТАНТЫ =====
    CONTENT_PADDING = 30
    DEFAULT_WRAPLENGTH = 380
    MIN_WINDOW_WIDTH = 300
    MIN_WINDOW_HEIGHT = 200

    def __init__(self):
        super().__init__()

        self.title(self.TITLE)
        self.wm_attributes("-topmost", True)

        x = cfg.get("USER", "WindowX", "100")
        y = cfg.get("USER", "WindowY", "100")
        w = cfg.get("USER", "WindowWidth", "420")
        h = cfg.get("USER", "WindowHeight", "320")
        self.geometry(f"{w}x{h}+{x}+{y}")
        self.configure(bg=COLORS["bg"])
        self.minsize(self.MIN_WINDOW_WIDTH, self.MIN_WINDOW_HEIGHT)

        # Callbacks устанавливаются из app.py
        self.search_callback: Optional[Callable[[str], object]] = None
        self.quit_callback: Optional[Callable[[], None]] = None

        self._alive = True

        self._init_ui()
        self._bind_events()

    @property
    def content_width(self) -> int:
        """Ширина области контента с учетом padding"""
        return self.winfo_width() - self.CONTENT_PADDING

    # ═══════════════════════════════════════════════════════════════════════
    # UI CREATION
    # ═══════════════════════════════════════════════════════════════════════

    def _init_ui(self):
        """
        Инициализация всех UI элементов.

        Порядок важен: status bar пакуется с side="bottom" ДО области
        результата, иначе длинный перевод вытеснит его за край окна.
        """
        self._create_top_bar()
        self._create_input_row()
        self._create_status_bar()
        self._create_translation_display()

    def _create_top_bar(self):
        self.lbl_title = tk.Label(
            self,
            text=self.TITLE,
            font=FONTS["header"],
            bg=COLORS["bg"],
            fg=COLORS["text_header"]
        )
        self.lbl_title.pack(fill="x", pady=(10, 5))

    def _create_input_row(self):
        """Поле ввода и кнопка Search в одной строке"""
        row = tk.Frame(self, bg=COLORS["bg"])
        row.pack(fill="x", padx=15, pady=5)

        self.btn_search = ActionButton(row, "Search", self._on_search)
        self.btn_search.pack(side="right", padx=(8, 0))

        self.entry = tk.Entry(
            row,
            font=FONTS["input"],
            bg=COLORS["bg_secondary"],
            fg=COLORS["text_main"],
            insertbackground=COLORS["cursor"],
            relief="flat"
        )
        self.entry.pack(side="left", fill="x", expand=True, ipady=3)
        self.entry.focus_set()

    def _create_translation_display(self):
        self.lbl_translation = tk.Label(
            self,
            text="",
            font=FONTS["translation"],
            bg=COLORS["bg"],
            fg=COLORS["text_accent"],
            justify="left",
            anchor="nw",
            wraplength=self.DEFAULT_WRAPLENGTH
        )
        self.lbl_translation.pack(fill="both", expand=True, padx=15, pady=(10, 5))

    def _create_status_bar(self):
        self.lbl_status = tk.Label(
            self,
            text="Ready",
            font=FONTS["status"],
            bg=COLORS["bg"],
            fg=COLORS["text_faint"],
            anchor="e"
        )
        self.lbl_status.pack(side="bottom", fill="x", padx=10, pady=2)

    def _bind_events(self):
        """Привязка событий"""
        self.entry.bind("<Return>", lambda e: self._on_search())
        self.bind("<Escape>", lambda e: self._on_quit())
        self.bind("<Configure>", self._on_configure)
        self.protocol("WM_DELETE_WINDOW", self._on_quit)

    # ═══════════════════════════════════════════════════════════════════════
    # ACTIONS
    # ═══════════════════════════════════════════════════════════════════════

    def _on_search(self):
        word = self.entry.get()
        if not word.strip() or self.search_callback is None:
            return

        self.lbl_status.config(text="Searching...")
        # Поиск синхронный: отрисовываем статус до блокировки
        self.update_idletasks()
        self.search_callback(word)

    def _on_quit(self):
        if self.quit_callback is not None:
            self.quit_callback()
        else:
            self.close_app()

    def _on_configure(self, event):
        if event.widget is self:
            self.lbl_translation.config(wraplength=max(self.content_width, 100))

    # ═══════════════════════════════════════════════════════════════════════
    # UI STATE SURFACE
    # ═══════════════════════════════════════════════════════════════════════

    @property
    def input_text(self) -> str:
        return self.entry.get()

    @property
    def translation(self) -> str:
        return self.lbl_translation.cget("text")

    def set_input_text(self, text: str):
        """Предзаполнение поля ввода (стартовое слово из CLI)"""
        self.entry.delete(0, tk.END)
        self.entry.insert(0, text)

    def set_translation(self, text: str):
        """Отображение результата. Цвет зависит от вида результата."""
        if text == NO_DATA:
            fg, status = COLORS["text_faint"], "Not found"
        elif text.startswith("Error:"):
            fg, status = COLORS["text_error"], "Failed"
        else:
            fg, status = COLORS["text_accent"], "Done"

        self.lbl_translation.config(text=text, fg=fg)
        self.lbl_status.config(text=status)

    # ═══════════════════════════════════════════════════════════════════════
    # THREAD HANDOFF
    # ═══════════════════════════════════════════════════════════════════════

    def is_alive(self) -> bool:
        """True пока окно не закрыто"""
        if not self._alive:
            return False
        try:
            return bool(self.winfo_exists())
        except (tk.TclError, RuntimeError):
            return False

    def post(self, callback: Callable[[], None]) -> bool:
        """
        Ставит callback в очередь UI потока (выполнится на следующей
        итерации mainloop).

        Returns:
            False если окно уже уничтожено (callback не будет вызван)
        """
        if not self.is_alive():
            return False
        try:
            self.after(0, callback)
        except (tk.TclError, RuntimeError):
            return False
        return True

    # ═══════════════════════════════════════════════════════════════════════
    # WINDOW STATE
    # ═══════════════════════════════════════════════════════════════════════

    def save_geometry(self):
        """Сохранение позиции и размера окна"""
        cfg.set("USER", "WindowX", self.winfo_x())
        cfg.set("USER", "WindowY", self.winfo_y())
        cfg.set("USER", "WindowWidth", self.winfo_width())
        cfg.set("USER", "WindowHeight", self.winfo_height())

    def close_app(self):
        """Закрытие приложения (выход из mainloop)"""
        if not self._alive:
            return
        try:
            self.save_geometry()
        except (tk.TclError, OSError) as e:
            logger.warning("Could not save window geometry: %s", e)

        self._alive = False
        self.destroy()
