#!/usr/bin/env python3
"""
Command-line interface for working with a stored resume draft.

The draft lives in a JSON key-value store file (RESUME_STORE_PATH, default
outs/resume_store.json) using the same keys as the browser editor, so a store exported
from local storage can be inspected directly.

Commands:
    score        - Show the ATS readiness score and suggestions
    export       - Print the plain-text resume
    guidance     - Show per-line hints for experience details and project descriptions
    load-sample  - Replace the draft with the built-in sample resume
    add-skill    - Add a skill to a group
    template     - Show or change the preview template
    accent       - Show or change the accent color
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from resumekit.contexts.drafting.defaults import ACCENT_OPTIONS, TEMPLATE_OPTIONS
from resumekit.contexts.drafting.exceptions import InvalidPreferenceError, UnknownSectionError
from resumekit.contexts.drafting.logger import _log_success, setup_drafting_logger
from resumekit.contexts.drafting.session import EditingSession
from resumekit.contexts.drafting.store import JsonFileStore
from resumekit.contexts.scoring.bullet_guidance import bullet_guidance, incomplete_entries
from resumekit.utils.timestamp import now

load_dotenv()
RESUME_STORE_PATH = Path(os.getenv("RESUME_STORE_PATH", "outs/resume_store.json"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

BAND_COLORS = {
    "needs-work": typer.colors.RED,
    "getting-there": typer.colors.YELLOW,
    "strong": typer.colors.GREEN,
}

app = typer.Typer(
    add_completion=False,
    help="Inspect and edit a stored resume draft",
    invoke_without_command=True,
)


def _open_session(store_path: Optional[Path]) -> EditingSession:
    store_path = store_path or RESUME_STORE_PATH
    setup_drafting_logger(LOGS_PATH / f"draft_{now()}", store_path=store_path)
    return EditingSession(JsonFileStore(store_path))


StoreOption = typer.Option(None, "--store", "-s", help="Store file (defaults to RESUME_STORE_PATH)")


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("score")
def score_command(
    store: Optional[Path] = StoreOption,
    top: bool = typer.Option(False, "--top", help="Only show the top 3 improvements"),
):
    """
    Show the ATS readiness score.

    Examples:\n

        $ manage_draft.py score

        $ manage_draft.py score --top
    """
    session = _open_session(store)
    result = session.ats_result

    typer.secho(
        f"\nATS Readiness Score: {result.score}/100 ({result.label})",
        fg=BAND_COLORS.get(result.band),
        bold=True,
    )

    suggestions = result.top_improvements if top else result.suggestions
    if not suggestions:
        typer.echo("  No suggestions. Your resume covers every check.")
        return

    typer.echo("\nTop 3 Improvements:" if top else "\nSuggestions:")
    for suggestion in suggestions:
        typer.echo(f"  - {suggestion}")


@app.command("export")
def export_command(
    store: Optional[Path] = StoreOption,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file instead of stdout"),
):
    """
    Print the plain-text resume (warns, but still exports, when it looks incomplete).

    Examples:\n

        $ manage_draft.py export

        $ manage_draft.py export -o resume.txt
    """
    session = _open_session(store)

    warning = session.export_warning()
    if warning:
        typer.secho(warning, fg=typer.colors.YELLOW, err=True)

    text = session.plain_text
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        _log_success(f"Plain-text resume written to {output}")
    else:
        typer.echo(text)


@app.command("guidance")
def guidance_command(store: Optional[Path] = StoreOption):
    """
    Show per-line authoring hints for experience details and project descriptions.

    Examples:\n

        $ manage_draft.py guidance
    """
    document = _open_session(store).document
    found = False

    sources = [(f"Experience {i + 1}", entry.details) for i, entry in enumerate(document.experience)]
    sources += [(f"Project {i + 1}", project.description) for i, project in enumerate(document.projects)]

    for source_name, text in sources:
        for hint in bullet_guidance(text):
            found = True
            typer.secho(f"\n{source_name}: {hint.line}", bold=True)
            for message in hint.messages:
                typer.echo(f"  ! {message}")

    for index in incomplete_entries(document.education):
        found = True
        typer.secho(f"\nEducation {index + 1} is missing title, subtitle, dates or details", bold=True)

    if not found:
        typer.secho("No guidance: every line starts with an action verb and has a number.", fg=typer.colors.GREEN)


@app.command("load-sample")
def load_sample_command(store: Optional[Path] = StoreOption):
    """Replace the stored draft with the sample resume."""
    session = _open_session(store)
    session.load_sample()
    _log_success(f"Sample draft stored ({session.ats_result.score}/100)")


@app.command("add-skill")
def add_skill_command(
    group: str = typer.Argument(..., help="Skill group: technical, soft or tools"),
    skill: str = typer.Argument(..., help="Skill to add"),
    store: Optional[Path] = StoreOption,
):
    """
    Add a skill to a group (ignored if already present in any casing).

    Examples:\n

        $ manage_draft.py add-skill technical "Python"
    """
    session = _open_session(store)
    try:
        session.add_skill(group, skill)
    except UnknownSectionError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{group}: {', '.join(session.document.skills.get_group(group))}")


@app.command("template")
def template_command(
    name: Optional[str] = typer.Argument(None, help=f"One of {TEMPLATE_OPTIONS}"),
    store: Optional[Path] = StoreOption,
):
    """Show or change the preview template."""
    session = _open_session(store)
    if name:
        try:
            session.change_template(name)
        except InvalidPreferenceError as e:
            typer.secho(str(e), fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
    typer.echo(f"Template: {session.template}")


@app.command("accent")
def accent_command(
    color: Optional[str] = typer.Argument(None, help=f"Color name ({', '.join(ACCENT_OPTIONS)}) or token"),
    store: Optional[Path] = StoreOption,
):
    """Show or change the accent color."""
    session = _open_session(store)
    if color:
        try:
            session.change_accent_color(color)
        except InvalidPreferenceError as e:
            typer.secho(str(e), fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
    typer.echo(f"Accent color: {session.accent_color}")


if __name__ == "__main__":
    app()
