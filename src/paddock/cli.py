"""Paddock CLI - motorsport fan planner."""

import json
import logging
import sys

import click

from . import __version__
from .config import load_config
from .core.tasks import Priority, Task
from .core.view import SortMode, StatusFilter, ViewState, project
from .forms import ContactForm, EditTaskForm, TaskForm
from .races import next_race_display
from .workflows import TaskAction, dispatch, open_planner

logger = logging.getLogger(__name__)

PRIORITY_CHOICE = click.Choice([p.value for p in Priority], case_sensitive=False)


def _show_tasks(tasks: list[Task], as_json: bool, empty_msg: str) -> None:
    """Shared task table display logic."""
    if as_json:
        click.echo(json.dumps([t.to_dict() for t in tasks], indent=2))
        return

    if not tasks:
        click.echo(empty_msg)
        return

    for task in tasks:
        mark = "x" if task.completed else " "
        click.echo(
            f"[{mark}] {task.id[:8]}  {task.date.isoformat()}  {task.priority.value:6}  "
            f"{task.name} - {task.description}"
        )


def _planner(ctx: click.Context):
    return open_planner(ctx.obj)


@click.group()
@click.version_option(__version__)
@click.option("--store", "store_file", default=None, envvar="PADDOCK_STORE",
              help="Path to the store file (overrides STORE_FILE)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, store_file: str | None, debug: bool):
    """Paddock - fan plans, activity and the next race."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    else:
        logging.basicConfig(level=logging.WARNING)

    config = load_config()
    if store_file:
        config.store_file = store_file
    ctx.obj = config


@main.command()
@click.argument("name")
@click.option("--description", "-m", prompt="Description", default="", show_default=False,
              help="What the plan is about")
@click.option("--date", "-d", "due", prompt="Due date (YYYY-MM-DD)", default="", show_default=False,
              help="Due date (YYYY-MM-DD)")
@click.option("--priority", "-p", type=PRIORITY_CHOICE, default=Priority.MEDIUM.value,
              show_default=True, help="Plan priority")
@click.pass_context
def add(ctx, name: str, description: str, due: str, priority: str):
    """Add a plan."""
    planner = _planner(ctx)
    form = TaskForm(name=name, description=description, date=due, priority=priority)
    task = form.submit(planner.repository)
    if task is None:
        click.echo(f"Error: {form.error}", err=True)
        sys.exit(1)
    click.echo(f"Added {task.id[:8]}: {task.name}")


@main.command("list")
@click.option("--status", type=click.Choice([s.value for s in StatusFilter]), default="all",
              show_default=True, help="Filter by completion")
@click.option("--priority", type=click.Choice(["all"] + [p.value for p in Priority], case_sensitive=False),
              default="all", show_default=True, help="Filter by priority")
@click.option("--sort", type=click.Choice([s.value for s in SortMode]), default="none",
              show_default=True, help="Sort order")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_tasks(ctx, status: str, priority: str, sort: str, as_json: bool):
    """List plans."""
    planner = _planner(ctx)
    view = ViewState.from_options(status, priority, sort)
    tasks = project(planner.repository.all(), view)

    if as_json:
        _show_tasks(tasks, as_json=True, empty_msg="")
        return

    if not planner.repository.all():
        click.echo("No plans yet. Add one with 'paddock add'.")
    else:
        _show_tasks(tasks, as_json=False, empty_msg="No plans match the current filters.")
    click.echo()
    click.echo(planner.repository.summary().format())


def _resolve_id(planner, task_id: str) -> str:
    """Accept a full id or a unique prefix (as printed by 'list')."""
    matches = [t.id for t in planner.repository.all() if t.id.startswith(task_id)]
    return matches[0] if len(matches) == 1 else task_id


def _not_found(action: str, task_id: str) -> None:
    """Log and report a missing plan, then exit 1."""
    logger.warning(f"Ignoring {action}: No plan with id {task_id}")
    click.echo(f"Error: No plan with id {task_id}", err=True)
    sys.exit(1)


@main.command()
@click.argument("task_id")
@click.option("--name", default=None, help="New name")
@click.option("--description", "-m", default=None, help="New description")
@click.option("--date", "-d", "due", default=None, help="New due date (YYYY-MM-DD)")
@click.option("--priority", "-p", type=PRIORITY_CHOICE, default=None, help="New priority")
@click.pass_context
def edit(ctx, task_id: str, name: str | None, description: str | None, due: str | None, priority: str | None):
    """Edit a plan."""
    planner = _planner(ctx)
    task = planner.repository.find_by_id(_resolve_id(planner, task_id))
    if task is None:
        _not_found("edit", task_id)

    form = EditTaskForm.from_task(task)
    if name is not None:
        form.name = name
    if description is not None:
        form.description = description
    if due is not None:
        form.date = due
    if priority is not None:
        form.priority = priority

    updated = form.submit(planner.repository)
    if updated is None:
        click.echo(f"Error: {form.error}", err=True)
        sys.exit(1)
    click.echo(f"Edited {updated.id[:8]}: {updated.name}")


@main.command()
@click.argument("task_id")
@click.pass_context
def complete(ctx, task_id: str):
    """Toggle a plan between completed and upcoming."""
    planner = _planner(ctx)
    task_id = _resolve_id(planner, task_id)
    if not dispatch(planner, TaskAction.COMPLETE, task_id):
        click.echo(f"Error: No plan with id {task_id}", err=True)
        sys.exit(1)
    task = planner.repository.find_by_id(task_id)
    click.echo(f"{task.status_label}: {task.name}")


@main.command()
@click.argument("task_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete(ctx, task_id: str, yes: bool):
    """Delete a plan."""
    planner = _planner(ctx)
    task = planner.repository.find_by_id(_resolve_id(planner, task_id))
    if task is None:
        _not_found("delete", task_id)

    if not yes and not click.confirm(f'Delete "{task.name}"?'):
        return

    if not dispatch(planner, TaskAction.DELETE, task.id):
        click.echo(f"Error: No plan with id {task.id}", err=True)
        sys.exit(1)
    click.echo(f"Deleted: {task.name}")


@main.command()
@click.pass_context
def summary(ctx):
    """Show plan counts."""
    click.echo(_planner(ctx).repository.summary().format())


@main.command()
@click.pass_context
def activity(ctx):
    """Show recent activity."""
    entries = _planner(ctx).activity.all()
    if not entries:
        click.echo("No recent activity.")
        return
    for entry in entries:
        click.echo(entry.format())


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def race(ctx, as_json: bool):
    """Show the next race."""
    display = next_race_display(ctx.obj)
    if as_json:
        click.echo(json.dumps({"name": display.name, "location": display.location, "date": display.date}, indent=2))
        return
    for line in display.lines():
        click.echo(line)


@main.command()
@click.option("--toggle", is_flag=True, help="Switch between dark and light mode")
@click.pass_context
def theme(ctx, toggle: bool):
    """Show or toggle dark mode."""
    preference = _planner(ctx).theme
    dark = preference.toggle() if toggle else preference.is_dark()
    click.echo(f"Dark mode: {'on' if dark else 'off'}")


@main.command()
@click.option("--name", prompt="Your name", default="", help="Your name")
@click.option("--email", prompt="Email", default="", help="Reply address")
@click.option("--message", prompt="Message", default="", help="What you want to say")
def contact(name: str, email: str, message: str):
    """Fill in the contact form."""
    form = ContactForm()
    form.update(name=name, email=email, message=message)

    if not form.can_submit:
        for field_name, error in form.visible_errors().items():
            click.echo(f"  {field_name}: {error}", err=True)
        sys.exit(1)

    confirmation = form.submit()
    click.echo("Thanks! We received:\n")
    click.echo(confirmation.format())


if __name__ == "__main__":
    main()
