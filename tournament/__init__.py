# Tournament module initialization
"""
Probability Calc - Tournament Module
錦標賽挑戰模組
"""

from .challenge import Challenge
from .ledger import ChallengeLedger, CHALLENGE_TEMPLATES
from .export import generate_csv, CSV_HEADER

__all__ = ['Challenge', 'ChallengeLedger', 'CHALLENGE_TEMPLATES', 'generate_csv', 'CSV_HEADER']
