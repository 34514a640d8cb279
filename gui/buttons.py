"""
Кнопки для QuickDict.

Содержит:
- ActionButton: плоская Label-кнопка для однократных действий (Search)
"""

import tkinter as tk
from typing import Callable
from gui.styles import COLORS, FONTS


class ActionButton(tk.Label):
    """
    Кнопка для однократных действий без сохранения состояния.

    Features:
    - Hover эффект (accent фон)
    - command вызывается без аргументов (event не передаётся)
    - invoke() для программного нажатия (например, по Enter)
    """

    def __init__(self, parent: tk.Widget, text: str, command: Callable[[], None], **kwargs):
        """
        Args:
            parent: Родительский виджет
            text: Текст кнопки
            command: Callback без аргументов
            **kwargs: Дополнительные параметры для tk.Label
        """
        defaults = {
            "font": FONTS["button"],
            "bg": COLORS["bg_secondary"],
            "fg": COLORS["text_main"],
            "cursor": "hand2",
            "padx": 10,
            "pady": 4,
            "relief": "flat"
        }
        defaults.update(kwargs)

        super().__init__(parent, text=text, **defaults)

        self.command = command

        self.bind("<Button-1>", lambda e: self.invoke())
        self.bind("<Enter>", self._on_enter)
        self.bind("<Leave>", self._on_leave)

    def invoke(self):
        """Выполняет команду кнопки"""
        self.command()

    def _on_enter(self, event):
        self.config(bg=COLORS["text_accent"], fg=COLORS["bg"])

    def _on_leave(self, event):
        self.config(bg=COLORS["bg_secondary"], fg=COLORS["text_main"])
