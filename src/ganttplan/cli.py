"""Command-line interface for ganttplan."""

from __future__ import annotations

import csv
import json
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError as PydanticValidationError

from . import context
from .exceptions import CircularDependencyError, GanttplanError
from .gantt import GanttConfig, GanttProjector
from .loader import discover_config, load_task_file
from .logger import setup_logger
from .models import GanttTask, Task
from .scheduler import (
    DurationConfig,
    SchedulerInputValidator,
    SchedulingConfig,
    SchedulingMode,
    SchedulingResult,
    SchedulingService,
    build_task_graph,
)
from .writer import write_schedule_annotations

app = typer.Typer(
    name="ganttplan",
    help="Dependency-driven task scheduling with critical path analysis for Gantt timelines",
    add_completion=False,
)

CSV_COLUMNS = [
    "id",
    "name",
    "assignee",
    "phase",
    "section",
    "start_date",
    "end_date",
    "duration_days",
    "week_number",
    "critical_path",
    "slack_days",
    "status",
    "dependencies",
]


@dataclass
class _Inputs:
    tasks: list[Task]
    start_date: date
    scheduler_config: SchedulingConfig
    gantt_config: GanttConfig


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show placements, 2=show checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: ganttplan_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for ganttplan commands."""
    setup_logger(verbose)
    context.set_config_path(config)


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(1)


def _parse_date_option(date_str: str | None, option_name: str) -> date | None:
    """Parse a YYYY-MM-DD CLI option, exiting with an error if malformed."""
    if date_str is None:
        return None

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        raise _fail(
            f"Invalid date format '{date_str}' for --{option_name}. Use YYYY-MM-DD format."
        ) from None


def _load_inputs(file: Path, start_date: str | None) -> _Inputs:
    """Load tasks and config, and resolve the project start date.

    Start date priority: --start-date > config start_date > task file
    metadata.start_date > today.
    """
    parsed_start = _parse_date_option(start_date, "start-date")
    try:
        task_file = load_task_file(file)
        unified = discover_config(file)
    except (GanttplanError, FileNotFoundError, ValueError) as e:
        raise _fail(str(e)) from None

    scheduler_config = unified.scheduler if unified else SchedulingConfig()
    gantt_config = unified.gantt if unified else GanttConfig()
    config_start = unified.start_date if unified else None
    resolved_start = (
        parsed_start or config_start or task_file.start_date or date.today()  # noqa: DTZ011
    )
    return _Inputs(task_file.tasks, resolved_start, scheduler_config, gantt_config)


def _display_schedule(
    result: SchedulingResult, records: list[GanttTask], show_critical_path: bool
) -> None:
    """Print the schedule as a fixed-width table."""
    typer.echo(
        f"Schedule ({result.mode.value}): {result.project_start} -> {result.project_end} "
        f"({result.duration_days} days)"
    )
    typer.echo("=" * 80)
    typer.echo(
        f"{'ID':<10} {'Start':<10}  {'End':<10}  {'Days':>4}  {'Week':>4}  "
        f"{'Status':<7}  {'Slack':>5}  Task"
    )
    for record in records:
        marker = "* " if show_critical_path and record.critical_path else ""
        slack = "-" if record.slack_days is None else str(record.slack_days)
        typer.echo(
            f"{record.task_id:<10} {record.start_date.isoformat():<10}  "
            f"{record.end_date.isoformat():<10}  {record.duration_days:>4}  "
            f"{record.week_number:>4}  {record.status.value:<7}  {slack:>5}  "
            f"{marker}{record.name} ({record.assignee})"
        )
    if show_critical_path and result.critical_chain:
        typer.echo("")
        typer.echo(f"Critical path: {' -> '.join(result.critical_chain)}")


def _export_csv(records: list[GanttTask], output_path: Path) -> None:
    with output_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)
        for record in records:
            row = record.to_dict()
            row["dependencies"] = ";".join(row["dependencies"])
            writer.writerow([row[column] for column in CSV_COLUMNS])


def _print_warnings(warnings: list[str]) -> None:
    if warnings:
        typer.echo("\nWarnings:", err=True)
        for warning in warnings:
            typer.echo(f"  - {warning}", err=True)


@app.command()
def schedule(  # noqa: PLR0913 - CLI command needs multiple options
    file: Annotated[Path, typer.Argument(help="Path to the task YAML file")] = Path("tasks.yaml"),
    *,
    start_date: Annotated[
        str | None,
        typer.Option("--start-date", "-s", help="Project start date (YYYY-MM-DD)"),
    ] = None,
    today: Annotated[
        str | None,
        typer.Option("--today", help="Reference date for task status (YYYY-MM-DD)"),
    ] = None,
    manual: Annotated[
        bool,
        typer.Option("--manual", help="Lay tasks out by phase/section, ignoring dependencies"),
    ] = False,
    show_critical_path: Annotated[
        bool,
        typer.Option("--show-critical-path", help="Mark critical tasks in the output"),
    ] = False,
    hours_per_day: Annotated[
        float | None,
        typer.Option("--hours-per-day", help="Effort hours per calendar day. Overrides config"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the schedule as JSON"),
    ] = False,
    output_csv: Annotated[
        Path | None,
        typer.Option("--output-csv", help="Export the schedule to a CSV file"),
    ] = None,
    annotate_yaml: Annotated[
        bool,
        typer.Option(
            "--annotate-yaml",
            help="Write estimated_start/estimated_end/critical_path back to the task file",
        ),
    ] = False,
) -> None:
    """Schedule tasks and display or export the timeline."""
    chosen_outputs = [
        option
        for option, chosen in (
            ("--output-csv", output_csv is not None),
            ("--annotate-yaml", annotate_yaml),
            ("--json", as_json),
        )
        if chosen
    ]
    if len(chosen_outputs) > 1:
        raise _fail(f"{' and '.join(chosen_outputs)} cannot be combined")

    parsed_today = _parse_date_option(today, "today")
    inputs = _load_inputs(file, start_date)

    updates: dict[str, object] = {}
    if manual:
        updates["mode"] = SchedulingMode.MANUAL
    if show_critical_path:
        updates["show_critical_path"] = True
    if hours_per_day is not None:
        # model_copy() skips validation, so rebuild to enforce the field constraints
        try:
            updates["duration"] = DurationConfig.model_validate(
                {**inputs.scheduler_config.duration.model_dump(), "hours_per_day": hours_per_day}
            )
        except PydanticValidationError:
            raise _fail(
                f"--hours-per-day must be positive and finite (got {hours_per_day})"
            ) from None
    config = inputs.scheduler_config.model_copy(update=updates)

    try:
        result = SchedulingService(inputs.tasks, inputs.start_date, config).schedule()
    except GanttplanError as e:
        raise _fail(str(e)) from None

    epoch = inputs.gantt_config.week_epoch or inputs.start_date
    projector = GanttProjector(epoch, today=parsed_today, config=inputs.gantt_config)
    records = projector.project(result.scheduled_tasks)

    if output_csv:
        _export_csv(records, output_csv)
        typer.echo(f"Schedule exported to {output_csv}")
    elif annotate_yaml:
        count = write_schedule_annotations(file, result.scheduled_tasks)
        typer.echo(f"Annotated {count} tasks in {file}")
    elif as_json:
        payload = {
            "mode": result.mode.value,
            "project_start": result.project_start.isoformat(),
            "project_end": result.project_end.isoformat(),
            "critical_chain": result.critical_chain,
            "tasks": [record.to_dict() for record in records],
            "warnings": result.warnings,
        }
        typer.echo(json.dumps(payload, indent=2))
    else:
        _display_schedule(result, records, config.show_critical_path)

    _print_warnings(result.warnings)


@app.command()
def validate(
    file: Annotated[Path, typer.Argument(help="Path to the task YAML file")] = Path("tasks.yaml"),
) -> None:
    """Check a task file for invalid effort, cycles and unknown dependencies."""
    inputs = _load_inputs(file, None)

    try:
        warnings = SchedulerInputValidator().validate(inputs.tasks)
        build_task_graph(inputs.tasks)
    except CircularDependencyError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"  Cycle: {' -> '.join(e.cycle)}", err=True)
        raise typer.Exit(1) from None
    except GanttplanError as e:
        raise _fail(str(e)) from None

    typer.echo(f"{len(inputs.tasks)} tasks OK")
    _print_warnings(warnings)


@app.command(name="critical-path")
def critical_path(
    file: Annotated[Path, typer.Argument(help="Path to the task YAML file")] = Path("tasks.yaml"),
    *,
    start_date: Annotated[
        str | None,
        typer.Option("--start-date", "-s", help="Project start date (YYYY-MM-DD)"),
    ] = None,
) -> None:
    """Show the critical path and per-task slack."""
    inputs = _load_inputs(file, start_date)
    # The analysis only exists for dependency-driven schedules
    config = inputs.scheduler_config.model_copy(update={"mode": SchedulingMode.AUTO})

    try:
        result = SchedulingService(inputs.tasks, inputs.start_date, config).schedule()
    except GanttplanError as e:
        raise _fail(str(e)) from None

    chain = result.critical_chain
    typer.echo(f"Critical path: {' -> '.join(chain) if chain else '(none)'}")
    typer.echo(f"Project completion: {result.project_end}")
    typer.echo(f"Project duration: {result.duration_days} days")
    typer.echo("")
    typer.echo(f"{'ID':<10} {'ES':>4} {'EF':>4} {'LS':>4} {'LF':>4} {'Slack':>5} {'Free':>5}")
    for record in result.scheduled_tasks:
        earliest_start = (record.start_date - result.project_start).days
        earliest_finish = earliest_start + record.duration_days
        slack = record.slack_days if record.slack_days is not None else 0
        free_slack = record.free_slack_days if record.free_slack_days is not None else 0
        typer.echo(
            f"{record.task_id:<10} {earliest_start:>4} {earliest_finish:>4} "
            f"{earliest_start + slack:>4} {earliest_finish + slack:>4} {slack:>5} "
            f"{free_slack:>5}"
        )

    _print_warnings(result.warnings)


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
