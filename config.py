"""
Модуль управления конфигурацией для QuickDict.

Обрабатывает:
- Чтение/сохранение настроек (INI файл)
- Значения по умолчанию для эндпоинтов Bing и User-Agent
- Автоматическое дополнение недостающих ключей
- Singleton экземпляр ConfigManager

Путь к файлу можно переопределить переменной окружения QUICKDICT_CONFIG.
"""

import configparser
import os
from typing import Final, Optional

# ===== КОНСТАНТЫ =====
CONFIG_FILE: Final[str] = os.environ.get("QUICKDICT_CONFIG", "settings.ini")

PRIMARY_URL: Final[str] = "https://cn.bing.com/dict/SerpHoverTrans?q={query}"
FALLBACK_URL: Final[str] = "https://cn.bing.com/dict/search?q={query}"

PRIMARY_USER_AGENT: Final[str] = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/75.0.3770.100 Safari/537.36"
)
FALLBACK_USER_AGENT: Final[str] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/90.0.4430.212 Safari/537.36 Edg/90.0.818.62"
)

DEFAULT_CONFIG: Final[dict] = {
    "NETWORK": {
        "PrimaryURL": PRIMARY_URL,
        "PrimaryUserAgent": PRIMARY_USER_AGENT,
        "FallbackURL": FALLBACK_URL,
        "FallbackUserAgent": FALLBACK_USER_AGENT,
        "UseFallback": "True",      # False = простой вариант без второго запроса
        "Timeout": "10",            # секунды, пусто = без таймаута
        "MaxRetries": "0"           # повторы на уровне HTTPAdapter
    },
    "DEBUG": {
        "LogLevel": "INFO",
        "LogRequests": "False"      # лог каждого ответа через session hook
    },
    "USER": {
        "WindowX": "100",
        "WindowY": "100",
        "WindowWidth": "420",
        "WindowHeight": "320"
    }
}


# ===== МЕНЕДЖЕР КОНФИГУРАЦИИ =====

class ConfigManager:
    """
    Управляет конфигурацией приложения с автоматической валидацией и сохранением.
    Потокобезопасность: Этот класс НЕ потокобезопасен. Используйте singleton 'cfg'.
    """

    def __init__(self, path: str = CONFIG_FILE):
        self.path = path
        # interpolation=None: User-Agent и URL содержат символы '%'
        self.config = configparser.ConfigParser(interpolation=None)
        # Сохраняем регистр ключей (PrimaryURL, а не primaryurl)
        self.config.optionxform = str

        if not os.path.exists(self.path):
            self._create_default()
        else:
            self.config.read(self.path, encoding='utf-8')
            self._validate()

    def _create_default(self):
        """Создает файл конфигурации по умолчанию"""
        for section, options in DEFAULT_CONFIG.items():
            self.config[section] = options
        self._save()

    def _validate(self):
        """
        Валидирует целостность конфигурации и добавляет недостающие ключи.
        Критично для обратной совместимости при добавлении новых настроек.
        """
        changed = False

        for section, options in DEFAULT_CONFIG.items():
            if not self.config.has_section(section):
                self.config.add_section(section)
                changed = True

            for key, val in options.items():
                if not self.config.has_option(section, key):
                    self.config.set(section, key, val)
                    changed = True

        if changed:
            self._save()

    def _save(self):
        """Сохраняет конфигурацию на диск"""
        with open(self.path, 'w', encoding='utf-8') as f:
            self.config.write(f)

    def get(self, section: str, key: str, fallback=None) -> str:
        """Получает значение конфигурации как строку"""
        return self.config.get(section, key, fallback=fallback)

    def get_bool(self, section: str, key: str, fallback=False) -> bool:
        """Получает значение конфигурации как boolean"""
        return self.config.getboolean(section, key, fallback=fallback)

    def get_int(self, section: str, key: str, fallback: int = 0) -> int:
        """Получает значение как int (fallback при мусоре в файле)"""
        try:
            return self.config.getint(section, key, fallback=fallback)
        except ValueError:
            return fallback

    def get_float(self, section: str, key: str,
                  fallback: Optional[float] = None) -> Optional[float]:
        """
        Получает значение как float.
        Пустая строка или мусор -> fallback (используется для Timeout).
        """
        raw = self.config.get(section, key, fallback="").strip()
        if not raw:
            return fallback
        try:
            return float(raw)
        except ValueError:
            return fallback

    def set(self, section: str, key: str, value) -> None:
        """
        Обновляет значение конфигурации и сохраняет на диск.
        Примечание: Каждый set() вызывает файловый I/O.
        """
        if not self.config.has_section(section):
            self.config.add_section(section)

        self.config.set(section, key, str(value))
        self._save()


# ===== SINGLETON ЭКЗЕМПЛЯР =====

# КРИТИЧНО: Импортируйте этот singleton вместо создания новых экземпляров ConfigManager
cfg = ConfigManager()
