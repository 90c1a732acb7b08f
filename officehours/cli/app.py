"""
Main CLI application using Typer.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..adapters.mock_interview_repository import MockInterviewRepository
from ..config import AppConfig, load_config
from ..domain.exceptions import OfficeHoursError
from ..domain.models import WEEKDAY_NAMES
from ..domain.office_hours_validator import OfficeHoursValidator
from ..services.interview_scheduler import (
    InterviewSchedulingService,
    ScheduleInterviewRequest,
    SchedulingResult,
)

app = typer.Typer(
    name="officehours",
    help="Validate and schedule interviews within office hours",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")
]
DurationOption = Annotated[
    Optional[int],
    typer.Option("--duration", "-d", help="Interview duration in minutes")
]
MockOption = Annotated[
    bool,
    typer.Option("--mock", help="Use the bundled sample interviews as existing bookings.")
]


def _load_config_or_exit(config_file: Optional[Path]) -> AppConfig:
    try:
        return load_config(config_file)
    except OfficeHoursError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


def _build_service(config: AppConfig, mock: bool) -> InterviewSchedulingService:
    repository = MockInterviewRepository() if mock else MockInterviewRepository(data_file=None)
    return InterviewSchedulingService(
        repository=repository,
        validator=OfficeHoursValidator(config.get_policy()),
    )


def _print_failures(result: SchedulingResult) -> None:
    for field_name, message in result.errors.items():
        console.print(f"[bold red]✗ {field_name}:[/bold red] {escape(message)}")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
):
    """
    Interview office hours checks and scheduling.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def check(
    date: Annotated[str, typer.Argument(help="Interview date (YYYY-MM-DD)")],
    time: Annotated[str, typer.Argument(help="Start time, e.g. 09:30 or '2:00 PM'")],
    duration: DurationOption = None,
    config_file: ConfigOption = None,
):
    """
    Check whether an interview slot fits office hours.

    Examples:

        officehours check 2025-11-17 09:00
        officehours check 2025-11-17 "2:00 PM" --duration 90
    """
    config = _load_config_or_exit(config_file)
    minutes = duration if duration is not None else config.defaults.duration_minutes

    verdict = OfficeHoursValidator(config.get_policy()).validate(date, time, minutes)

    if verdict.is_valid:
        console.print(f"[green]✓ {verdict.message}[/green] ({date} {time}, {minutes} min)")
        return

    console.print(f"[bold red]✗ {escape(verdict.message)}[/bold red]")
    raise typer.Exit(1)


@app.command()
def slots(
    date: Annotated[str, typer.Argument(help="Date to inspect (YYYY-MM-DD)")],
    duration: DurationOption = None,
    step: Annotated[Optional[int], typer.Option("--step", help="Minutes between candidate start times")] = None,
    mock: MockOption = False,
    config_file: ConfigOption = None,
):
    """
    List free interview start times for a day.
    """
    config = _load_config_or_exit(config_file)
    minutes = duration if duration is not None else config.defaults.duration_minutes
    step_minutes = step if step is not None else config.defaults.slot_step_minutes

    try:
        service = _build_service(config, mock)
        times = asyncio.run(
            service.available_times(date, duration_minutes=minutes, step_minutes=step_minutes)
        )
    except (OfficeHoursError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if not times:
        console.print(
            f"[yellow]⚠ No free {minutes}-minute slots on {date}.[/yellow]\n"
            "Check that the date is a valid working day or try a shorter duration."
        )
        return

    table = Table(
        title=f"Free start times on {date} ({minutes} min)",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Start", style="bold yellow")
    table.add_column("12-hour", style="dim")

    for start in times:
        table.add_row(start.format_24h(), start.format_12h())

    console.print()
    console.print(table)
    console.print()


@app.command()
def schedule(
    date: Annotated[str, typer.Argument(help="Interview date (YYYY-MM-DD)")],
    time: Annotated[str, typer.Argument(help="Start time, e.g. 09:30 or '2:00 PM'")],
    application_id: Annotated[int, typer.Option("--application-id", help="Application being interviewed")],
    location: Annotated[str, typer.Option("--location", help="Room or meeting link")],
    interview_type: Annotated[str, typer.Option("--type", help="hr, technical, behavioral or panel")] = "hr",
    candidate: Annotated[str, typer.Option("--candidate", help="Candidate name")] = "",
    interviewer: Annotated[str, typer.Option("--interviewer", help="Interviewer name")] = "",
    duration: DurationOption = None,
    mock: MockOption = False,
    config_file: ConfigOption = None,
):
    """
    Book an interview (stored in memory only).
    """
    config = _load_config_or_exit(config_file)
    minutes = duration if duration is not None else config.defaults.duration_minutes

    try:
        request = ScheduleInterviewRequest(
            application_id=application_id,
            candidate_name=candidate,
            interview_type=interview_type,
            interview_date=date,
            interview_time=time,
            duration_minutes=minutes,
            interviewer=interviewer,
            location=location,
        )
        service = _build_service(config, mock)
        result = asyncio.run(service.schedule(request))
    except (OfficeHoursError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if not result.success:
        _print_failures(result)
        raise typer.Exit(1)

    interview = result.interview
    console.print(Panel.fit(
        f"[bold green]✓ {result.message}[/bold green]\n\n"
        f"[bold]Date:[/bold] {interview.date.to_date_string()}\n"
        f"[bold]Time:[/bold] {interview.start.format_12h()} ({interview.duration_minutes} min)\n"
        f"[bold]Location:[/bold] {interview.location}",
        title=f"Interview #{interview.interview_id}"
    ))


@app.command()
def reschedule(
    interview_id: Annotated[int, typer.Argument(help="Interview to move")],
    date: Annotated[str, typer.Argument(help="New date (YYYY-MM-DD)")],
    time: Annotated[str, typer.Argument(help="New start time, e.g. 09:30 or '2:00 PM'")],
    duration: Annotated[Optional[int], typer.Option("--duration", "-d", help="New duration, keeps the current one if omitted")] = None,
    mock: MockOption = False,
    config_file: ConfigOption = None,
):
    """
    Move an interview to a new slot.

    Example:

        officehours reschedule 14 2025-11-18 "3:00 PM" --mock
    """
    config = _load_config_or_exit(config_file)
    service = _build_service(config, mock)
    result = asyncio.run(service.reschedule(interview_id, date, time, duration_minutes=duration))

    if not result.success:
        _print_failures(result)
        raise typer.Exit(1)

    interview = result.interview
    console.print(
        f"[green]✓ {result.message}[/green] "
        f"(#{interview.interview_id}: {interview.date.to_date_string()} "
        f"{interview.start.format_12h()}, {interview.duration_minutes} min)"
    )


@app.command()
def cancel(
    interview_id: Annotated[int, typer.Argument(help="Interview to cancel")],
    reason: Annotated[str, typer.Option("--reason", "-r", help="Why the interview is cancelled")],
    mock: MockOption = False,
    config_file: ConfigOption = None,
):
    """
    Cancel an interview, freeing its slot.
    """
    config = _load_config_or_exit(config_file)
    service = _build_service(config, mock)
    result = asyncio.run(service.cancel(interview_id, reason))

    if not result.success:
        _print_failures(result)
        raise typer.Exit(1)

    console.print(f"[green]✓ {result.message}[/green] (#{interview_id})")


@app.command()
def complete(
    interview_id: Annotated[int, typer.Argument(help="Interview that took place")],
    mock: MockOption = False,
    config_file: ConfigOption = None,
):
    """
    Mark an interview as completed.
    """
    config = _load_config_or_exit(config_file)
    service = _build_service(config, mock)
    result = asyncio.run(service.mark_completed(interview_id))

    if not result.success:
        _print_failures(result)
        raise typer.Exit(1)

    console.print(f"[green]✓ {result.message}[/green] (#{interview_id})")


@app.command()
def policy(
    config_file: ConfigOption = None,
):
    """
    Show the active office hours.
    """
    config = _load_config_or_exit(config_file)
    office_hours = config.get_policy()

    table = Table(title="Office hours", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="bold yellow")
    table.add_column("Value")

    table.add_row("Hours", office_hours.window_label())
    table.add_row(
        "Days",
        ", ".join(WEEKDAY_NAMES[day] for day in sorted(office_hours.allowed_weekdays))
    )
    table.add_row("Default duration", f"{config.defaults.duration_minutes} min")

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]officehours[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
