"""Output formatting for match results."""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from job_match.matching.models import MatchResult, RankedJob


def save_output(content: str, output_path: str | Path) -> Path:
    """Save content to a file.

    Args:
        content: Text content to save.
        output_path: Path to save the file.

    Returns:
        Path to the saved file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _to_jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, Sequence) and not isinstance(data, str):
        return [_to_jsonable(item) for item in data]
    return data


def success_response(data: Any) -> dict[str, Any]:
    """Wrap data in the API success envelope."""
    return {"success": True, "data": _to_jsonable(data)}


def error_response(message: str) -> dict[str, Any]:
    """Wrap an error message in the API error envelope."""
    return {"success": False, "error": message}


def format_match_result(result: MatchResult) -> str:
    """Format a match result for display.

    Args:
        result: Scores for one candidate/job pair.

    Returns:
        Markdown-style summary string.
    """
    output = [
        f"## Match Score: {result.overall}%",
        "",
        "### Breakdown",
        f"- **Skills:** {result.skills}%",
        f"- **Location:** {result.location}%",
        f"- **Title:** {result.title}%",
    ]
    return "\n".join(output)


def _job_label(job: Any) -> str:
    if isinstance(job, Mapping):
        title, company = job.get("title"), job.get("company")
    else:
        title, company = getattr(job, "title", None), getattr(job, "company", None)
    label = title or "(untitled)"
    return f"{label} @ {company}" if company else label


def format_ranking(ranked: Sequence[RankedJob]) -> str:
    """Format ranked jobs, one line per job, best first."""
    if not ranked:
        return "No matching jobs."

    lines = []
    for position, item in enumerate(ranked, start=1):
        match = item.match
        lines.append(
            f"{position}. {_job_label(item.job)} - {match.overall}% "
            f"(skills {match.skills}%, location {match.location}%, title {match.title}%)"
        )
    return "\n".join(lines)
