"""
Formatting utilities for property results.

Builds renderables only; printing belongs to whichever entry point consumes
the results.
"""

from collections.abc import Iterable

from rich.table import Table
from rich.text import Text

from ..services.property_result import PropertyResult

COLORS = {
    "success": "#00d26a",
    "error": "#ff6b6b",
    "muted": "#6c757d",
    "header": "#00d4ff",
}


def format_duration(seconds: float | None) -> str:
    """Format elapsed time for display."""
    if seconds is None:
        return "-"
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.2f}s"


def format_memory(byte_count: int | None) -> str:
    """Format a byte count for display."""
    if byte_count is None:
        return "-"
    if byte_count < 1024:
        return f"{byte_count}B"
    if byte_count < 1024 * 1024:
        return f"{byte_count / 1024:.1f}KiB"
    return f"{byte_count / (1024 * 1024):.1f}MiB"


def build_results_table(
    results: Iterable[PropertyResult], title: str = "Codec properties"
) -> Table:
    """Build a rich table summarising property results."""
    table = Table(title=title, header_style=f"bold {COLORS['header']}")
    table.add_column("Property")
    table.add_column("Status")
    table.add_column("Iterations", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("Memory", justify="right")
    table.add_column("Failure", style=COLORS["muted"])

    for result in results:
        if result.success:
            status = Text("PASS", style=f"bold {COLORS['success']}")
        else:
            status = Text("FAIL", style=f"bold {COLORS['error']}")
        table.add_row(
            result.property_name,
            status,
            str(result.iterations_run),
            format_duration(result.execution_time),
            format_memory(result.memory_usage),
            result.error_message or "",
        )

    return table
