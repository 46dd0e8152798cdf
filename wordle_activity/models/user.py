"""
User Data Models

Contains the per-player record and its wire representation.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .progress import Progress


@dataclass
class UserRecord:
    """Per-player game assignment and statistics."""
    id: str
    current_secret: Optional[str] = None
    total_words: int = 0
    total_correct: int = 0
    progress: Optional[Progress] = None
    solved: bool = False  # current secret already guessed
    rounds_used: int = 0  # guesses scored against the current secret

    def to_dict(self) -> Dict[str, Any]:
        """Wire form, keeping the column names the client reads."""
        return {
            'User': self.id,
            'CurrentWord': self.current_secret,
            'TotalWords': self.total_words,
            'TotalCorrect': self.total_correct,
            'GameProgress': self.progress.to_dict() if self.progress else None
        }
