"""
UI theme definitions for QuickDict.

Based on Monkeytype's Serika Dark color scheme.
All UI components should reference these constants instead of hardcoding values.

Result colors:
- Translation: accent (#E2B714)
- "No Data": faint
- "Error: ...": soft red
"""

from typing import Final

# ===== COLOR SCHEME =====
COLORS: Final[dict[str, str]] = {
    # === BACKGROUNDS ===
    "bg": "#323437",  # Main window background (soft dark gray)
    "bg_secondary": "#2C2E31",  # Buttons, input field (darker gray)

    # === TEXT COLORS ===
    "text_main": "#D1D0C5",  # Primary text, input text
    "text_header": "#E2B714",  # Window title
    "text_accent": "#E2B714",  # Translation result, hover
    "text_faint": "#646669",  # Status bar, "No Data"
    "text_error": "#CA4754",  # "Error: ..." result

    # === UI ELEMENTS ===
    "cursor": "#E2B714",  # Entry insert cursor
}

# ===== FONT DEFINITIONS =====
FONTS: Final[dict[str, tuple]] = {
    "header": ("Segoe UI", 14, "bold"),  # Window title
    "input": ("Segoe UI", 13),  # Query entry
    "translation": ("Segoe UI", 12),  # Result lines
    "button": ("Segoe UI", 9),  # Search button
    "status": ("Segoe UI", 7),  # Status bar
}
