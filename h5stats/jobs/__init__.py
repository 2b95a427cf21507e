"""Jobs module for report generation."""

from .generate import (
    fetch_collections,
    model_from_collections,
    generate_report,
    run,
)

__all__ = [
    "fetch_collections",
    "model_from_collections",
    "generate_report",
    "run",
]
