"""Markdown report for a registry scrape."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any


class ScrapeLogger:
    """Collect per-section results of a scrape and write them as markdown tables."""

    def __init__(self, stage_name: str = "scrape", log_dir: Path = Path("data/logs")):
        """Initialize the report.

        Args:
            stage_name: Report name, used in the title and filename
            log_dir: Directory to store report files
        """
        self.stage_name = stage_name
        self.log_dir = log_dir
        self.start_time = datetime.now(tz=timezone.utc)

        # YYYY-MM-DD-HH-MM-stage.md
        timestamp = self.start_time.strftime("%Y-%m-%d-%H-%M")
        self.log_path = log_dir / f"{timestamp}-{stage_name}.md"

        self.sections: list[tuple[str, str, int]] = []
        self.skipped: list[tuple[str, str]] = []
        self.duplicates: list[tuple[str, str, str]] = []
        self.failures: list[str] = []

    def log_section(self, title: str, element_type: str, count: int) -> None:
        """Record a parsed section and how many rows it contributed."""
        self.sections.append((title, element_type, count))

    def log_skip(self, item: str, reason: str) -> None:
        """Record a section or row that yielded nothing.

        Args:
            item: Section title, or "section: tag" for a row
            reason: Why it was skipped
        """
        self.skipped.append((item, reason))

    def log_duplicate(self, tag: str, previous: str, current: str) -> None:
        self.duplicates.append((tag, previous, current))

    def log_failure(self, message: str) -> None:
        self.failures.append(message)

    @property
    def element_rows(self) -> int:
        return sum(count for _, _, count in self.sections)

    def render(self, additional_summary: dict[str, Any] | None = None) -> str:
        """Render the report as markdown.

        Args:
            additional_summary: Extra key/value lines for the summary

        Returns:
            Markdown text
        """
        elapsed = (datetime.now(tz=timezone.utc) - self.start_time).total_seconds()

        lines = [
            f"# {self.stage_name.capitalize()} Report - {self.start_time.strftime('%Y-%m-%d %H:%M:%S')} UTC",
            "",
            f"**Duration:** {elapsed:.2f}s",
            "",
            "## Summary",
            f"- Sections parsed: {len(self.sections)}",
            f"- Sections/rows skipped: {len(self.skipped)}",
            f"- Element rows: {self.element_rows}",
            f"- Repeated tags: {len(self.duplicates)}",
        ]
        if additional_summary:
            lines.extend(f"- {key}: {value}" for key, value in additional_summary.items())
        lines.append("")

        if self.failures:
            lines.append("## Problems")
            lines.extend(f"- ❌ {message}" for message in self.failures)
            lines.append("")

        if self.sections:
            lines += ["## Sections", "", "| Section | Type | Elements |", "|---|---|---:|"]
            lines.extend(f"| {title} | {element_type} | {count} |" for title, element_type, count in self.sections)
            lines.append("")

        if self.skipped:
            lines += ["## Skipped", "", "| Item | Reason |", "|---|---|"]
            lines.extend(f"| {item} | {reason} |" for item, reason in self.skipped)
            lines.append("")

        if self.duplicates:
            lines += ["## Repeated tags", "", "| Tag | Previous category | Now |", "|---|---|---|"]
            lines.extend(f"| `{tag}` | {previous} | {current} |" for tag, previous, current in self.duplicates)
            lines.append("")

        return "\n".join(lines)

    def write(self, additional_summary: dict[str, Any] | None = None) -> Path:
        """Write the report to a markdown file.

        Returns:
            Path to the written file
        """
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_path.write_text(self.render(additional_summary), encoding="utf-8")
        return self.log_path
