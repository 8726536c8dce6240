"""Output formatting for Job Match."""

from job_match.output.formatting import (
    error_response,
    format_match_result,
    format_ranking,
    save_output,
    success_response,
)

__all__ = [
    "error_response",
    "format_match_result",
    "format_ranking",
    "save_output",
    "success_response",
]
