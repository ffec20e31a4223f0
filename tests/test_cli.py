"""Tests for the planner CLI."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from dayplanner.adapters import FileDayStore
from dayplanner.cli import main
from dayplanner.config import Config

DAY = "2025-01-15"


@pytest.fixture
def config(tmp_path):
    return Config(data_dir=str(tmp_path))


@pytest.fixture
def run(config):
    runner = CliRunner()

    def invoke(*args, input=None):
        with patch("dayplanner.cli.load_config", return_value=config):
            return runner.invoke(main, list(args), input=input)

    return invoke


@pytest.fixture
def store(tmp_path):
    return FileDayStore(tmp_path)


class TestAddTask:
    def test_adds_and_persists(self, run, store):
        result = run("add-task", "Write report", "--start", "9:10", "--end", "10:45", "-p", "high", "-d", DAY)
        assert result.exit_code == 0
        assert "09:00-10:30" in result.output
        [task] = store.load(DAY).tasks
        assert task.title == "Write report"
        assert task.priority.value == "high"

    def test_bad_time(self, run):
        result = run("add-task", "X", "--start", "soon", "--end", "10:00", "-d", DAY)
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_bad_date(self, run):
        result = run("add-task", "X", "--start", "09:00", "--end", "10:00", "-d", "someday")
        assert result.exit_code == 1
        assert "invalid date" in result.output


class TestNotes:
    def test_add_and_remove(self, run, store):
        assert run("add-note", "Call", "--time", "15:20", "-d", DAY).exit_code == 0
        [note] = store.load(DAY).notes
        assert note.time == "15:00"

        result = run("remove-note", note.id, "-d", DAY)
        assert result.exit_code == 0
        assert store.load(DAY).notes == ()

    def test_remove_unknown(self, run):
        result = run("remove-note", "nope", "-d", DAY)
        assert result.exit_code == 1


class TestRemoveTask:
    def test_remove(self, run, store):
        run("add-task", "Gym", "--start", "18:00", "--end", "19:00", "-d", DAY)
        [task] = store.load(DAY).tasks
        assert run("remove-task", task.id, "-d", DAY).exit_code == 0
        assert store.load(DAY).tasks == ()


class TestDay:
    def test_empty_day(self, run):
        result = run("day", "-d", DAY)
        assert result.exit_code == 0
        assert "Wednesday, January 15" in result.output
        assert "Nothing planned." in result.output

    def test_shows_tasks_and_notes(self, run):
        run("add-task", "Meeting", "--start", "09:00", "--end", "10:00", "-p", "urgent", "-d", DAY)
        run("add-note", "Bring laptop", "--time", "09:00", "-d", DAY)
        result = run("day", "-d", DAY)
        assert "[Urgent] Meeting (09:00-10:00)" in result.output
        assert "Bring laptop" in result.output
        assert "10:00" in result.output

    def test_json_coverage(self, run, store):
        run("add-task", "Meeting", "--start", "09:00", "--end", "10:00", "-d", DAY)
        [task] = store.load(DAY).tasks
        rows = json.loads(run("day", "--json", "-d", DAY).output)
        covered = [row["slot"] for row in rows if task.id in row["tasks"]]
        assert covered == ["09:00", "09:30", "10:00"]

    def test_priority_filter(self, run):
        run("add-task", "Meeting", "--start", "09:00", "--end", "10:00", "-p", "urgent", "-d", DAY)
        run("add-task", "Nap", "--start", "13:00", "--end", "14:00", "-p", "low", "-d", DAY)
        result = run("day", "-p", "low", "-d", DAY)
        assert "Nap" in result.output
        assert "Meeting" not in result.output

    def test_twelve_hour_display(self, run, config):
        config.time_format = "12h"
        run("add-task", "Meeting", "--start", "09:00", "--end", "10:00", "-d", DAY)
        assert "9:00 AM" in run("day", "-d", DAY).output


class TestStats:
    def test_text(self, run):
        run("add-task", "A", "--start", "09:00", "--end", "10:00", "-d", DAY)
        run("add-task", "B", "--start", "09:30", "--end", "10:30", "-d", DAY)
        result = run("stats", "-d", DAY)
        assert result.exit_code == 0
        assert "Scheduled: 1h 30m" in result.output
        assert "Free:      22h 30m" in result.output

    def test_json(self, run):
        run("add-task", "A", "--start", "09:00", "--end", "10:00", "-p", "urgent", "-d", DAY)
        run("add-task", "B", "--start", "09:00", "--end", "10:00", "-p", "normal", "-d", DAY)
        data = json.loads(run("stats", "--json", "-d", DAY).output)
        assert data["scheduled_minutes"] == 60
        assert data["free_minutes"] == 1380
        assert data["by_priority"] == {"urgent": 60, "high": 0, "normal": 60, "low": 0}
        assert [d["minutes"] for d in data["durations"]] == [60, 60]

    def test_empty(self, run):
        data = json.loads(run("stats", "--json", "-d", DAY).output)
        assert data["scheduled_minutes"] == 0
        assert data["free_minutes"] == 1440
        assert data["durations"] == []


class TestClear:
    def test_confirm_declined(self, run, store):
        run("add-note", "Keep me", "--time", "08:00", "-d", DAY)
        run("clear", "-d", DAY, input="n\n")
        assert len(store.load(DAY).notes) == 1

    def test_yes(self, run, store):
        run("add-note", "Drop me", "--time", "08:00", "-d", DAY)
        result = run("clear", "--yes", "-d", DAY)
        assert result.exit_code == 0
        assert store.load(DAY).is_empty
