"""
Data Models Package

Contains all data models used throughout the application.
"""

from .progress import GuessEntry, Progress, Verdict
from .user import UserRecord

__all__ = ['GuessEntry', 'Progress', 'Verdict', 'UserRecord']
