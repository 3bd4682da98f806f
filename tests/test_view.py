"""
Tests for the text progress bar and the rich views.
"""

import pytest

from habitual.service.habit import mark_complete
from habitual.template.habit import get_habit_template
from habitual.view import state as view_state
from habitual.view.util import progress_bar
from habitual.view.views import habit as habit_report
from habitual.view.views.header import header


class TestProgressBar:
    @pytest.mark.parametrize(
        "percent, expected",
        [
            (0, "[--------------------] 0%"),
            (50, "[##########----------] 50%"),
            (100, "[####################] 100%"),
        ],
    )
    def test_default_width(self, percent, expected):
        assert progress_bar(percent) == expected

    def test_clamps_out_of_range(self):
        assert progress_bar(140, width=4) == "[####] 100%"
        assert progress_bar(-5, width=4) == "[----] 0%"

    def test_rounds_label(self):
        assert progress_bar(200 / 3, width=3) == "[##-] 67%"


class TestViews:
    def test_habits_view_lists_habits(self, capsys, monday):
        habit = get_habit_template("Read [daily]", 2)
        mark_complete(habit, monday)

        habit_report.habits_view("User", "habits (all)", [(0, habit)], monday)

        out = capsys.readouterr().out
        assert "Read [daily]" in out
        assert "1/2 per week - not done" in out
        assert "[##########----------] 50%" in out

    def test_habits_view_empty(self, capsys, monday):
        habit_report.habits_view("User", "habits (all)", [], monday)
        assert "(no habits)" in capsys.readouterr().out

    def test_reminder_view(self, capsys, monday):
        habit = get_habit_template("Run", 3)

        habit_report.reminder_view([habit], monday)
        out = capsys.readouterr().out
        assert "[Reminder]" in out
        assert "Run: 0/3" in out

        habit_report.reminder_view([], monday)
        assert "All habits reached their target" in capsys.readouterr().out


class TestHeader:
    def test_profile_name_is_printed_literally(self, capsys):
        view_state.set_show_header(True)

        header("[red]Ana", "habits")

        out = capsys.readouterr().out
        assert "[red]Ana" in out
        assert "habits" in out

    def test_hidden_header_prints_nothing(self, capsys):
        header("Ana")

        assert capsys.readouterr().out == ""
