# src/speccraft/cli/app.py
"""Command-line interface for SpecCraft.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Calls commands module functions
3. Renders results with Rich
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from speccraft import __version__
from speccraft.catalog import BASE_QUESTIONS
from speccraft.commands import (
    answer,
    config_cmd,
    delete,
    follow_up,
    generate,
    list_cmd,
    navigate,
    new,
    status,
    validate,
)
from speccraft.commands.base import CommandResult, SessionResult
from speccraft.config import load_env_file
from speccraft.generator import stringify_value
from speccraft.models import Progress, Question

app = typer.Typer(
    name="speccraft",
    help="SpecCraft - turn a guided questionnaire into a feature specification.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"speccraft {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log debug output to stderr.",
    ),
) -> None:
    """SpecCraft - guided feature specifications."""
    load_env_file()
    setup_logging(verbose)


DATA_DIR_OPTION = typer.Option(
    None,
    "--data-dir",
    "-d",
    help="Data directory (default: from settings)",
)
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to config file",
)
PLAIN_OPTION = typer.Option(
    False,
    "--plain",
    help="Plain output (no colors/formatting)",
)


def _exit_on_error(result: CommandResult, plain: bool = False) -> None:
    if result.success:
        return
    if plain:
        console.print(f"Error: {result.error}", markup=False, highlight=False)
    else:
        console.print(f"[red]Error: {escape(result.error)}[/red]")
    raise typer.Exit(1)


def _progress_text(progress: Progress | None) -> str:
    if progress is None:
        return ""
    return f"{progress.current}/{progress.total} ({progress.percentage}%)"


def _render_question(question: Question, progress: Progress | None, plain: bool) -> None:
    required = "required" if question.required else "optional"
    if plain:
        console.print(f"{question.id}: {question.text} ({question.type}, {required})")
        for option in question.options or []:
            console.print(f"  - {option}")
        if progress is not None:
            console.print(f"Progress: {_progress_text(progress)}")
        return

    body = f"{question.text}\n\n[dim]{question.type}, {required}, {question.category}[/dim]"
    if question.options:
        body += "\n" + "\n".join(f"  - {option}" for option in question.options)
    console.print(
        Panel(
            body,
            title=f"[cyan]{question.id}[/cyan]",
            subtitle=_progress_text(progress),
            border_style="blue",
        )
    )


def _render_position(result: SessionResult, plain: bool) -> None:
    """Show the current question, or how to finish once there is none."""
    if result.question is not None:
        _render_question(result.question, result.progress, plain)
        return
    message = f"All questions answered. Run 'speccraft generate {result.session_id}'."
    console.print(message if plain else f"[green]{message}[/green]")


@app.command(name="new")
def new_cmd(
    title: str = typer.Argument(..., help="Feature title"),
    description: str = typer.Option("", "--description", "-D", help="Feature description"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Start a questionnaire for a new feature."""
    result = new.new(title, description, data_dir=data_dir, config_path=config_file)
    _exit_on_error(result, plain)

    if plain:
        console.print(f"Session: {result.session_id}")
    else:
        console.print(f"[green]Created session[/green] [bold]{result.session_id}[/bold]")
    _render_position(result, plain)


@app.command(name="continue")
def continue_cmd(
    session_id: str = typer.Argument(..., help="Session ID"),
    improve: bool = typer.Option(
        False, "--improve", help="Print a prompt to reword the question for this feature"
    ),
    infer: bool = typer.Option(
        False, "--infer", help="Print a prompt to propose an answer from earlier ones"
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Show the current question of a session."""
    result = new.continue_session(session_id, data_dir=data_dir, config_path=config_file)
    _exit_on_error(result, plain)
    _render_position(result, plain)
    for wanted, prompt in ((improve, result.improvement_prompt), (infer, result.inference_prompt)):
        if wanted and prompt:
            console.print()
            console.print(prompt, markup=False, highlight=False)


@app.command(name="answer")
def answer_cmd(
    session_id: str = typer.Argument(..., help="Session ID"),
    value: str = typer.Argument(..., help="Answer (yes/no for booleans, a, b for multiselect)"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Answer the current question of a session."""
    result = answer.answer(session_id, value, data_dir=data_dir, config_path=config_file)
    _exit_on_error(result, plain)

    if result.answered is not None:
        recorded = f"Recorded {result.answered.question_id}"
        console.print(recorded if plain else f"[green]{recorded}[/green]")
    _render_position(result, plain)


@app.command(name="back")
def back_cmd(
    session_id: str = typer.Argument(..., help="Session ID"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Go back to the previous question."""
    result = navigate.previous(session_id, data_dir=data_dir, config_path=config_file)
    _exit_on_error(result, plain)

    if not result.moved:
        message = "Already at the first question."
        console.print(message if plain else f"[yellow]{message}[/yellow]")
    _render_position(result, plain)


@app.command(name="goto")
def goto_cmd(
    session_id: str = typer.Argument(..., help="Session ID"),
    question_id: str = typer.Argument(..., help="Question ID to jump to"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Jump to a question (for example to change an earlier answer)."""
    result = navigate.goto(session_id, question_id, data_dir=data_dir, config_path=config_file)
    _exit_on_error(result, plain)
    _render_position(result, plain)


@app.command(name="status")
def status_cmd(
    session_id: str = typer.Argument(..., help="Session ID"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Show a session's answers and progress."""
    result = status.status(session_id, data_dir=data_dir, config_path=config_file)
    _exit_on_error(result, plain)

    current = result.question.id if result.question else "(complete)"
    if plain:
        console.print(f"Feature: {result.feature_title}")
        console.print(f"Progress: {_progress_text(result.progress)}")
        console.print(f"Current question: {current}")
        for recorded in result.answers:
            console.print(f"  {recorded.question_id}: {stringify_value(recorded.value)}")
    else:
        table = Table(title=f"{result.feature_title} ({_progress_text(result.progress)})")
        table.add_column("Question", style="cyan")
        table.add_column("Answer", style="green")
        for recorded in result.answers:
            table.add_row(recorded.question_id, stringify_value(recorded.value))
        console.print(table)
        console.print(f"[dim]Current question: {current}[/dim]")

    if result.missing_required:
        console.print(f"Missing required answers: {len(result.missing_required)}")


@app.command(name="list")
def list_sessions_cmd(
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """List stored sessions."""
    result = list_cmd.list_sessions(data_dir=data_dir, config_path=config_file)
    _exit_on_error(result, plain)

    if not result.sessions:
        if plain:
            console.print("No sessions.")
        else:
            console.print("[dim]No sessions. Run 'speccraft new' first.[/dim]")
        raise typer.Exit(0)

    if plain:
        console.print(f"Sessions ({len(result.sessions)}):")
        for info in result.sessions:
            console.print(f"  {info.session_id} {info.feature_title} ({info.percentage}%)")
    else:
        table = Table(title=f"Sessions ({len(result.sessions)})")
        table.add_column("Session", style="cyan")
        table.add_column("Feature")
        table.add_column("Progress", justify="right", style="green")
        table.add_column("Updated", style="dim")
        for info in result.sessions:
            table.add_row(
                info.session_id,
                info.feature_title,
                f"{info.percentage}%",
                info.updated_at.strftime("%Y-%m-%d %H:%M"),
            )
        console.print(table)


@app.command(name="generate")
def generate_cmd(
    session_id: str = typer.Argument(..., help="Session ID"),
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default: specs/NNN_<feature>/<feature>_spec.md)",
    ),
    show: bool = typer.Option(False, "--show", help="Print the full specification"),
    show_prompt: bool = typer.Option(
        False, "--prompt", help="Print a quality review prompt for the specification"
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Generate the specification for a completed session."""
    result = generate.generate(
        session_id, output_path=output, data_dir=data_dir, config_path=config_file
    )
    if not result.success and result.missing_required:
        console.print(f"Completion: {result.completion_percentage}%")
        for text in result.missing_required:
            console.print(f"  - {text}")
    _exit_on_error(result, plain)

    if plain:
        console.print(f"Wrote {result.path}")
        if show:
            console.print(result.markdown, markup=False, highlight=False)
    else:
        console.print(f"[green]Wrote[/green] [bold]{result.path}[/bold]")
        console.print(
            Panel(
                Markdown(result.markdown if show else result.preview),
                title=result.feature_title,
                border_style="green",
            )
        )

    if show_prompt:
        console.print()
        console.print(result.review_prompt, markup=False, highlight=False)


@app.command(name="validate")
def validate_cmd(
    session_id: str = typer.Argument(..., help="Session ID"),
    show_prompt: bool = typer.Option(
        False, "--prompt", help="Print the completeness review prompt"
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Check a session for unanswered required questions."""
    result = validate.validate(session_id, data_dir=data_dir, config_path=config_file)
    _exit_on_error(result, plain)

    if result.is_valid:
        message = f"All required questions answered ({result.completion_percentage}% complete)."
        console.print(message if plain else f"[green]{message}[/green]")
    else:
        heading = f"Missing required answers ({len(result.missing_required)}):"
        console.print(heading if plain else f"[yellow]{heading}[/yellow]")
        for text in result.missing_required:
            console.print(f"  - {text}")

    if show_prompt:
        console.print()
        console.print(result.prompt, markup=False)

    if not result.is_valid:
        raise typer.Exit(1)


@app.command(name="follow-up")
def follow_up_cmd(
    session_id: str = typer.Argument(..., help="Session ID"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
) -> None:
    """Print a prompt asking an assistant for follow-up questions."""
    result = follow_up.follow_up(session_id, data_dir=data_dir, config_path=config_file)
    _exit_on_error(result)
    console.print(result.prompt, markup=False, highlight=False)


@app.command(name="add-questions")
def add_questions_cmd(
    session_id: str = typer.Argument(..., help="Session ID"),
    source: typer.FileText = typer.Argument(
        ..., help="File with the assistant's JSON reply ('-' for stdin)"
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Add follow-up questions from an assistant's JSON reply."""
    result = follow_up.add_generated_questions(
        session_id, source.read(), data_dir=data_dir, config_path=config_file
    )
    _exit_on_error(result, plain)

    message = f"Added {len(result.added)} question(s): {', '.join(result.added) or '-'}"
    console.print(message if plain else f"[green]{message}[/green]")
    _render_position(result, plain)


@app.command(name="delete")
def delete_cmd(
    session_id: str = typer.Argument(..., help="Session ID"),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip confirmation prompt",
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Delete a stored session."""
    if not force and not typer.confirm(f"Delete session {session_id}?"):
        console.print("Cancelled.")
        raise typer.Exit(0)

    result = delete.delete(session_id, data_dir=data_dir, config_path=config_file)
    _exit_on_error(result, plain)
    message = f"Deleted session {session_id}"
    console.print(message if plain else f"[green]{message}[/green]")


@app.command(name="config")
def config_cmd_handler(
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(config_path=config_file, data_dir=data_dir)
    _exit_on_error(result)

    table = Table(title="SpecCraft Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    root_source = "yaml" if result.config_path else "default"
    table.add_row("data_dir", result.data_dir, root_source)
    table.add_row("store", result.store, root_source)
    table.add_row("", "", "")
    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    if result.config_path:
        console.print(f"\n[dim]Config file: {result.config_path}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")

    console.print("\n[dim]Precedence: env var > yaml settings > default[/dim]")


@app.command(name="questions")
def questions_cmd(
    plain: bool = PLAIN_OPTION,
) -> None:
    """List the built-in questions."""
    if plain:
        for question in BASE_QUESTIONS:
            marker = "*" if question.required else " "
            console.print(f"{marker} {question.id}: {question.text}")
        return

    table = Table(title=f"Built-in Questions ({len(BASE_QUESTIONS)})")
    table.add_column("ID", style="cyan")
    table.add_column("Category", style="dim")
    table.add_column("Type")
    table.add_column("Required", justify="center")
    for question in BASE_QUESTIONS:
        table.add_row(
            question.id,
            question.category,
            question.type,
            "yes" if question.required else "",
        )
    console.print(table)


def _ask(question: Question) -> str | bool | list[str]:
    """Prompt for one answer in the terminal."""
    if question.type == "boolean":
        return typer.confirm(question.text)
    if question.type in ("select", "multiselect"):
        options = question.options or []
        for i, option in enumerate(options, 1):
            console.print(f"  [{i}] {option}")
        hint = "Choose" if question.type == "select" else "Choose (comma-separated)"
        response = typer.prompt(hint, default="" if not question.required else None)
        picked = [_pick_option(options, part.strip()) for part in str(response).split(",")]
        picked = [p for p in picked if p]
        if question.type == "select":
            return picked[0] if picked else ""
        return picked
    return str(
        typer.prompt(
            question.text,
            default="" if not question.required else None,
            show_default=False,
        )
    )


def _pick_option(options: list[str], response: str) -> str:
    if response.isdigit() and 1 <= int(response) <= len(options):
        return options[int(response) - 1]
    return response


@app.command(name="interview")
def interview_cmd(
    session_id: str = typer.Argument(None, help="Session ID to resume"),
    title: str = typer.Option(None, "--title", "-t", help="Feature title for a new session"),
    description: str = typer.Option("", "--description", "-D", help="Feature description"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
) -> None:
    """Answer questions interactively until the questionnaire is complete."""
    if session_id:
        result = new.continue_session(session_id, data_dir=data_dir, config_path=config_file)
    else:
        title = title or typer.prompt("Feature title")
        result = new.new(title, description, data_dir=data_dir, config_path=config_file)
    _exit_on_error(result)
    console.print(f"[dim]Session {result.session_id}[/dim]")

    while result.question is not None:
        _render_question(result.question, result.progress, plain=False)
        answered = answer.answer(
            result.session_id, _ask(result.question), data_dir=data_dir, config_path=config_file
        )
        if not answered.success:
            console.print(f"[red]Error: {answered.error}[/red]")
            continue
        result = answered

    _render_position(result, plain=False)


@app.command(name="serve")
def serve_cmd(
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
) -> None:
    """Run the MCP server on stdio."""
    from speccraft.mcp_server import run_stdio

    try:
        run_stdio(data_dir=data_dir, config_path=config_file)
    except ValueError as e:
        # stdout belongs to the protocol
        Console(stderr=True).print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e
