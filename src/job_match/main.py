"""CLI entry point for Job Match."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

from dotenv import load_dotenv

# Load environment variables from .env.local
# Path: main.py -> job_match/ -> src/ -> project root
load_dotenv(Path(__file__).parent.parent.parent / ".env.local")

import typer  # noqa: E402
from pydantic import ValidationError  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.logging import RichHandler  # noqa: E402
from rich.markup import escape  # noqa: E402
from rich.panel import Panel  # noqa: E402

from job_match.config import get_settings  # noqa: E402
from job_match.matching import JobMatcher, normalize as normalize_text  # noqa: E402
from job_match.models import (  # noqa: E402
    CandidateProfile,
    JobPosting,
    validate_candidate_profile,
    validate_job_offer,
)
from job_match.output.formatting import (  # noqa: E402
    error_response,
    format_match_result,
    format_ranking,
    save_output,
    success_response,
)

logger = logging.getLogger(__name__)


class RecordKind(str, Enum):
    candidate = "candidate"
    job = "job"


app = typer.Typer(
    name="job-match",
    help="Job Match - score candidate profiles against job postings",
    add_completion=False,
)
console = Console()


@app.callback()
def main() -> None:
    """Configure logging from settings before any command runs."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def read_json(path: Path) -> Any:
    """Read a JSON document from a file."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {escape(str(path))}")
        raise typer.Exit(1)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON in {escape(str(path))}: {e}")
        raise typer.Exit(1) from e


def emit_json(payload: dict[str, Any], output: Path | None = None) -> None:
    """Print a JSON envelope, or save it when an output path is given."""
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if output:
        save_output(text, output)
        console.print(f"[green]Saved to:[/green] {output}")
    else:
        typer.echo(text)


def build_matcher() -> JobMatcher:
    """Create a matcher with the configured weights."""
    try:
        weights = get_settings().match_weights
    except ValidationError as e:
        console.print(
            f"[red]Error:[/red] Invalid scoring weights in configuration: {escape(str(e))}"
        )
        raise typer.Exit(1) from e
    return JobMatcher(weights)


def _print_validation_error(error: ValidationError, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(error_response(str(error)), ensure_ascii=False, indent=2))
        return
    console.print("[red]Validation failed:[/red]")
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "(root)"
        console.print(f"  - {escape(location)}: {escape(item['msg'])}")


@app.command()
def normalize(
    text: Annotated[str, typer.Argument(help="Text to normalize")],
) -> None:
    """Show the normalized tokens for a piece of text."""
    tokens = normalize_text(text)
    console.print(" ".join(tokens) if tokens else "[dim](no tokens)[/dim]")


@app.command()
def match(
    candidate: Annotated[Path, typer.Argument(help="Path to candidate profile JSON")],
    job: Annotated[Path, typer.Argument(help="Path to job posting JSON")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the result as a JSON envelope")
    ] = False,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Save the JSON result to a file")
    ] = None,
) -> None:
    """Score a candidate profile against one job posting."""
    candidate_data = read_json(candidate)
    job_data = read_json(job)

    try:
        profile = CandidateProfile.model_validate(candidate_data)
        posting = JobPosting.model_validate(job_data)
    except ValidationError as e:
        _print_validation_error(e, as_json)
        raise typer.Exit(1) from e

    result = build_matcher().compute(profile, posting)

    if as_json or output:
        emit_json(success_response(result), output)
        return

    console.print(Panel(format_match_result(result), title="Match", border_style="blue"))


@app.command()
def rank(
    candidate: Annotated[Path, typer.Argument(help="Path to candidate profile JSON")],
    jobs: Annotated[Path, typer.Argument(help="Path to a JSON list of job postings")],
    min_score: Annotated[
        int | None,
        typer.Option("--min-score", "-m", min=0, max=100, help="Drop jobs scoring below this"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the ranking as a JSON envelope")
    ] = False,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Save the JSON ranking to a file")
    ] = None,
) -> None:
    """Rank job postings for a candidate, best match first."""
    settings = get_settings()
    candidate_data = read_json(candidate)
    jobs_data = read_json(jobs)

    if not isinstance(jobs_data, list):
        console.print(
            f"[red]Error:[/red] Expected a JSON list of job postings in {escape(str(jobs))}"
        )
        raise typer.Exit(1)

    try:
        profile = CandidateProfile.model_validate(candidate_data)
        postings = [JobPosting.model_validate(item) for item in jobs_data]
    except ValidationError as e:
        _print_validation_error(e, as_json)
        raise typer.Exit(1) from e

    threshold = settings.min_score if min_score is None else min_score
    ranked = build_matcher().rank(profile, postings, min_score=threshold)
    logger.debug("Ranked %d of %d jobs", len(ranked), len(postings))

    if as_json or output:
        emit_json(success_response(ranked), output)
        return

    console.print(Panel(format_ranking(ranked), title="Ranking", border_style="blue"))


@app.command()
def validate(
    kind: Annotated[RecordKind, typer.Argument(help="Record kind: candidate or job")],
    path: Annotated[Path, typer.Argument(help="Path to the JSON record")],
) -> None:
    """Check a candidate profile or job offer against the submission rules."""
    data = read_json(path)
    validator = validate_candidate_profile if kind is RecordKind.candidate else validate_job_offer

    try:
        validator(data)
    except ValidationError as e:
        _print_validation_error(e, as_json=False)
        raise typer.Exit(1) from e

    console.print(f"[green]OK[/green] {escape(str(path))} is a valid {kind.value}")


@app.command()
def version() -> None:
    """Show version information."""
    from job_match import __version__

    console.print(f"Job Match v{__version__}")


if __name__ == "__main__":
    app()
