"""
Tests for progress parsing and board consistency rules.
"""

import pytest

from wordle_activity.errors import InvalidProgress
from wordle_activity.models.progress import Progress, Verdict

from .conftest import progress_payload

MISS = ["absent"] * 5
WIN = ["correct"] * 5


class TestProgressFromDict:
    """Tests for Progress.from_dict."""

    def test_none_clears(self):
        assert Progress.from_dict(None) is None

    def test_empty_board(self):
        progress = Progress.from_dict({"guesses": [], "row": 0, "gameOver": False})

        assert progress.guesses == []
        assert progress.row == 0
        assert progress.game_over is False

    def test_round_trip_preserves_structure(self):
        payload = progress_payload([("slate", MISS), ("CRANE", ["correct", "present", "absent", "absent", "correct"])])

        progress = Progress.from_dict(payload)

        assert progress.guesses[0].word == "SLATE"
        assert progress.guesses[1].result[1] == Verdict.PRESENT
        assert progress.to_dict() == {
            "guesses": [
                {"word": "SLATE", "result": MISS},
                {"word": "CRANE", "result": ["correct", "present", "absent", "absent", "correct"]}
            ],
            "row": 2,
            "gameOver": False
        }

    def test_row_may_still_point_at_scored_row(self):
        payload = progress_payload([("SLATE", MISS)], row=0)

        assert Progress.from_dict(payload).row == 0

    def test_win_on_last_row_is_over(self):
        payload = progress_payload([("SLATE", MISS), ("CRANE", WIN)], game_over=True)

        progress = Progress.from_dict(payload)

        assert progress.game_over is True
        assert progress.row == 1

    def test_six_misses_is_over(self):
        payload = progress_payload([("SLATE", MISS)] * 6, game_over=True)

        assert Progress.from_dict(payload).game_over is True

    @pytest.mark.parametrize("payload, message", [
        ("nope", "object"),
        ({"guesses": "SLATE"}, "list"),
        (progress_payload([("SLATE", MISS)] * 7, game_over=True), "At most"),
        (progress_payload([("SLAT", MISS)]), "letters"),
        (progress_payload([("SL4TE", MISS)]), "letters"),
        (progress_payload([("SLATE", MISS[:4])]), "entries"),
        (progress_payload([("SLATE", ["absent"] * 4 + ["green"])]), "unknown verdict"),
        ({"guesses": [], "row": "0", "gameOver": False}, "integer"),
        ({"guesses": [], "row": -1, "gameOver": False}, "between"),
        (progress_payload([("SLATE", MISS)], row=3), "match"),
        ({"guesses": [], "row": 0, "gameOver": "no"}, "boolean"),
        (progress_payload([("CRANE", WIN), ("SLATE", MISS)]), "after a winning"),
        (progress_payload([("CRANE", WIN)], game_over=False, row=1), "inconsistent"),
        (progress_payload([("SLATE", MISS)], game_over=True), "inconsistent"),
        (progress_payload([("SLATE", MISS)] * 6, game_over=False, row=6), "inconsistent"),
    ])
    def test_rejects_inconsistent_boards(self, payload, message):
        with pytest.raises(InvalidProgress, match=message):
            Progress.from_dict(payload)
