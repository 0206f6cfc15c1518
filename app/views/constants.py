"""
Console view constants centralized for reuse across view modules.

Menu texts, separators and date formats live here so prompts and menus stay
consistent.
"""

from __future__ import annotations

# Date formats (display and input)
INPUT_DATETIME_FMT: str = "%d.%m.%Y %H:%M"
INPUT_DATE_FMT: str = "%d.%m.%Y"
INPUT_DATETIME_HINT: str = "dd.MM.yyyy HH:mm"
INPUT_DATE_HINT: str = "dd.MM.yyyy"

# Separators
RECORD_SEPARATOR: str = "-" * 35
SECTION_LINE: str = "=" * 33

WELCOME_TEXT: str = "Welcome to the Photo Catalog Manager!"
GOODBYE_TEXT: str = "Program finished."

MAIN_MENU: list[str] = [
    "======= Main Menu =======",
    "1. View the whole catalog",
    "2. Add a new photo",
    "3. Delete a photo by ID",
    "4. Run catalog queries",
    "-------------------------",
    "0. Exit",
    "=========================",
]

QUERY_MENU: list[str] = [
    "========== Query Menu ==========",
    "1. Photos rated N or higher",
    "2. Photos taken after date D",
    "3. Total number of photos",
    "4. Largest photo",
    "--------------------------------",
    "0. Back to main menu",
    "================================",
]

MAIN_PROMPT: str = "Enter option number"
QUERY_PROMPT: str = "Choose a query"
CONTINUE_PROMPT: str = "Press Enter to continue..."
INVALID_CHOICE: str = "Error: invalid choice. Please pick an option from the menu (0-4)."
