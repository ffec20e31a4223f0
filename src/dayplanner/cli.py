"""Day planner CLI - half-hour slots, tasks, notes and time statistics."""

import json
import logging
import sys
from datetime import date

import click

from .config import load_config
from .core.coverage import task_starts_at
from .core.stats import format_duration
from .core.tasks import Priority
from .core.timegrid import InvalidFormat, to_12_hour
from .workflows import PlannerSession, get_store

PRIORITY_CHOICES = [p.value for p in Priority.ordered()]

date_option = click.option(
    "--date", "-d", "target_date", default=None,
    help="Date to use (YYYY-MM-DD), defaults to today",
)


def _open_session(target_date: str | None) -> PlannerSession:
    config = load_config()
    try:
        target = date.fromisoformat(target_date) if target_date else date.today()
    except ValueError:
        click.echo(f"Error: invalid date {target_date!r}, expected YYYY-MM-DD", err=True)
        sys.exit(1)
    return PlannerSession(get_store(config), target, config)


def _fmt_time(session: PlannerSession, t: str) -> str:
    return to_12_hour(t) if session.config.time_format == "12h" else t


@click.group()
@click.version_option(package_name="dayplanner")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Day planner - lay out a day in half-hour slots."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )


@main.command()
@date_option
@click.option("--priority", "-p", "priority_filter", default="all",
              type=click.Choice(["all", *PRIORITY_CHOICES]), help="Only show this priority")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--all-slots", is_flag=True, help="Include empty slots")
def day(target_date: str | None, priority_filter: str, as_json: bool, all_slots: bool):
    """Show the day grid."""
    session = _open_session(target_date)
    rows = session.grid(priority_filter)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "slot": slot,
                        "tasks": [t.id for t in tasks],
                        "notes": [n.id for n in notes],
                    }
                    for slot, tasks, notes in rows
                ],
                indent=2,
            )
        )
        return

    click.echo(f"### {date.fromisoformat(session.date_key).strftime('%A, %B %d')}")
    if session.record.is_empty:
        click.echo("Nothing planned.")
        return

    for slot, tasks, notes in rows:
        if not tasks and not notes and not all_slots:
            continue
        label = _fmt_time(session, slot)
        entries = []
        for task in tasks:
            if task_starts_at(task, slot):
                entries.append(f"[{task.priority.label}] {task.title} "
                               f"({_fmt_time(session, task.start)}-{_fmt_time(session, task.end)}) #{task.id}")
            else:
                entries.append(f"  | {task.title}")
        for note in notes:
            entries.append(f"* [{note.priority.label}] {note.title} #{note.id}")
        click.echo(f"  {label:8} {entries[0] if entries else ''}")
        for entry in entries[1:]:
            click.echo(f"  {'':8} {entry}")


@main.command("add-task")
@date_option
@click.argument("title")
@click.option("--start", "-s", required=True, help="Start time (HH:MM)")
@click.option("--end", "-e", required=True, help="End time (HH:MM)")
@click.option("--description", default="", help="Longer description")
@click.option("--priority", "-p", default=None, type=click.Choice(PRIORITY_CHOICES))
@click.option("--color", default="", help="Display color, e.g. #c7d2fe")
def add_task(target_date, title, start, end, description, priority, color):
    """Add a timed task."""
    session = _open_session(target_date)
    try:
        task = session.add_task(title, start, end, priority=priority, description=description, color=color)
    except (InvalidFormat, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"✓ Added {task.title} {task.start}-{task.end} [{task.priority.label}] #{task.id}")


@main.command("add-note")
@date_option
@click.argument("title")
@click.option("--time", "-t", "at", required=True, help="Time (HH:MM)")
@click.option("--priority", "-p", default=None, type=click.Choice(PRIORITY_CHOICES))
def add_note(target_date, title, at, priority):
    """Add a note pinned to a slot."""
    session = _open_session(target_date)
    try:
        note = session.add_note(title, at, priority=priority)
    except (InvalidFormat, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"✓ Added note {note.title} at {note.time} [{note.priority.label}] #{note.id}")


@main.command("remove-task")
@date_option
@click.argument("task_id")
def remove_task(target_date, task_id):
    """Remove a task by id."""
    session = _open_session(target_date)
    if not session.remove_task(task_id):
        click.echo(f"Error: no task {task_id} on {session.date_key}", err=True)
        sys.exit(1)
    click.echo(f"✓ Removed task {task_id}")


@main.command("remove-note")
@date_option
@click.argument("note_id")
def remove_note(target_date, note_id):
    """Remove a note by id."""
    session = _open_session(target_date)
    if not session.remove_note(note_id):
        click.echo(f"Error: no note {note_id} on {session.date_key}", err=True)
        sys.exit(1)
    click.echo(f"✓ Removed note {note_id}")


@main.command()
@date_option
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
def clear(target_date, yes):
    """Clear all tasks and notes for a day."""
    session = _open_session(target_date)
    if not yes and not click.confirm(f"Clear all tasks & notes for {session.date_key}?"):
        return
    session.clear()
    click.echo(f"✓ Cleared {session.date_key}")


@main.command()
@date_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats(target_date: str | None, as_json: bool):
    """Show time usage statistics."""
    session = _open_session(target_date)
    result = session.stats

    if as_json:
        click.echo(
            json.dumps(
                {
                    "date": session.date_key,
                    "scheduled_minutes": result.scheduled_minutes,
                    "free_minutes": result.free_minutes,
                    "by_priority": {p.value: m for p, m in result.by_priority.items()},
                    "durations": [
                        {"id": t.id, "title": t.title, "start": t.start, "end": t.end, "minutes": m}
                        for t, m in result.durations
                    ],
                },
                indent=2,
            )
        )
        return

    click.echo(f"Stats for {session.date_key}\n")
    click.echo(f"Scheduled: {format_duration(result.scheduled_minutes)}")
    click.echo(f"Free:      {format_duration(result.free_minutes)}\n")
    click.echo("By priority:")
    for priority, minutes in result.by_priority.items():
        click.echo(f"  {priority.label:8} {format_duration(minutes)}")

    click.echo("\nDurations:")
    if not result.durations:
        click.echo("  No tasks.")
    for task, minutes in result.durations:
        span = f"{_fmt_time(session, task.start)}-{_fmt_time(session, task.end)}"
        click.echo(f"  {span:13} {format_duration(minutes):>7}  {task.title}")


if __name__ == "__main__":
    main()
