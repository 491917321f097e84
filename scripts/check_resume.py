#!/usr/bin/env python3
"""
ATS Compliance CLI

Scores a plain-text resume for ATS compatibility and applies mechanical fixes.

Commands:
    analyze - Score a resume and list issues
    fix     - Apply all auto-fixes and show the before/after score

Examples:\n

    check_resume.py analyze resume.txt                      # Text report

    check_resume.py analyze resume.txt --json               # JSON report

    check_resume.py analyze resume.txt --config scoring.yaml  # Custom weights

    check_resume.py fix resume.txt --output resume_fixed.txt

    cat resume.txt | check_resume.py analyze -               # Read from stdin
"""

import json
import os
import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from atscheck.contexts.analysis import (
    format_analysis_report,
    load_scoring_config,
    run_ats_analysis,
)
from atscheck.contexts.analysis.logger import log_analysis_summary, setup_analysis_logger
from atscheck.contexts.autofix import fix_and_rescore
from atscheck.contexts.autofix.logger import setup_autofix_logger
from atscheck.utils.logger import session_log_dir

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Score resumes for ATS compatibility and auto-fix formatting issues",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def read_resume(source: str) -> str:
    """Read resume text from a file path, or stdin when source is "-"."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


@app.command("analyze")
def analyze_command(
    source: Annotated[
        str,
        typer.Argument(help="Plain-text resume file, or - for stdin"),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the analysis as JSON"),
    ] = False,
    config_path: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="YAML scoring overrides (default: ATSCHECK_SCORING_CONFIG)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show per-detector debug output"),
    ] = False,
):
    """
    Score a resume and list its ATS issues.

    Exit code is 0 when the analysis ran, 1 when the input or config could not be read.
    """
    try:
        text = read_resume(source)
        config = load_scoring_config(config_path)
    except (OSError, ValueError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    setup_analysis_logger(session_log_dir(LOGS_PATH, "analyze"), source=source, verbose=verbose)

    analysis = run_ats_analysis(text, config)
    log_analysis_summary(analysis)

    if as_json:
        payload = analysis.to_dict()
        payload["badge"] = {"label": analysis.badge.label, "tier": analysis.badge.tier}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        typer.echo(format_analysis_report(analysis, title=f"ATS Compliance Report: {source}"))


@app.command("fix")
def fix_command(
    source: Annotated[
        str,
        typer.Argument(help="Plain-text resume file, or - for stdin"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the fixed resume here (default: stdout)"),
    ] = None,
    in_place: Annotated[
        bool,
        typer.Option("--in-place", "-i", help="Overwrite the source file"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show per-transformer debug output"),
    ] = False,
):
    """
    Apply all auto-fixes (tables, special characters, long bullets).

    The fixed resume is re-scored so the before/after difference is visible.
    """
    if in_place and (source == "-" or output is not None):
        typer.secho(
            "Error: --in-place needs a file source and no --output\n", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=1)

    try:
        text = read_resume(source)
    except OSError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    setup_autofix_logger(session_log_dir(LOGS_PATH, "autofix"), source=source, verbose=verbose)

    result = fix_and_rescore(text)

    destination = Path(source) if in_place else output
    if destination is None:
        typer.echo(result.fixed_text)
    else:
        destination.write_text(result.fixed_text, encoding="utf-8")

    if not result.changed:
        typer.secho("Nothing to fix", fg=typer.colors.BLUE, err=True)
        return

    typer.secho(
        f"✓ Score {result.before.score} -> {result.after.score} ({result.score_delta:+d})",
        fg=typer.colors.GREEN if result.score_delta > 0 else typer.colors.YELLOW,
        err=True,
    )
    if destination is not None:
        typer.echo(f"  Written: {destination}", err=True)


if __name__ == "__main__":
    app()
