#!/usr/bin/env python3
"""
Detect which ATS a job posting uses and print formatting tips.

Usage:
    python scripts/detect_ats.py --url https://acme.wd5.myworkdayjobs.com/job/123
    python scripts/detect_ats.py --text-file posting.txt
    python scripts/detect_ats.py --list
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from atscheck.contexts.intake import detect_ats, get_all_ats_systems, get_ats_tips
from atscheck.contexts.intake.logger import setup_intake_logger
from atscheck.utils.logger import session_log_dir

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Detect the ATS behind a job posting.", add_completion=False)


@app.command()
def main(
    url: Annotated[Optional[str], typer.Option("--url", "-u", help="Job posting URL")] = None,
    text_file: Annotated[
        Optional[Path], typer.Option("--text-file", "-t", help="File with the posting text")
    ] = None,
    list_systems: Annotated[
        bool, typer.Option("--list", help="List known platforms and exit")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug output")] = False,
):
    """Detect the posting's ATS and show platform-specific advice."""
    if list_systems:
        for system, name in get_all_ats_systems():
            typer.echo(f"  {system.value:<16} {name}")
        raise typer.Exit()

    job_text = None
    if text_file is not None:
        try:
            job_text = text_file.read_text(encoding="utf-8")
        except OSError as e:
            typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    setup_intake_logger(session_log_dir(LOGS_PATH, "intake"), verbose=verbose)

    result = detect_ats(job_url=url, job_text=job_text)
    tips = get_ats_tips(result.system)

    typer.secho(f"\n{tips.name} ({result.confidence} confidence)", fg=typer.colors.BLUE, bold=True)
    typer.echo(tips.description)
    for indicator in result.indicators:
        typer.echo(f"  ({indicator})")

    typer.echo("\n=== Tips ===")
    for tip in tips.tips:
        typer.echo(f"  - {tip}")

    typer.echo("\n=== Format ===")
    for advice in tips.format_advice:
        typer.echo(f"  - {advice}")

    typer.echo("\n=== Keywords ===")
    typer.echo(f"  {tips.keyword_advice}")

    typer.echo("\n=== Avoid ===")
    typer.echo(f"  {', '.join(tips.avoid_list)}")


if __name__ == "__main__":
    app()
