# UI module initialization
"""
Probability Calc - UI Module
使用者介面模組
"""

from .console_ui import ConsoleUI, Colors, clear_screen, display_banner

__all__ = ['ConsoleUI', 'Colors', 'clear_screen', 'display_banner']
