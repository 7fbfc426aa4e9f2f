"""Consistency checks for a freshly built registry."""

from collections import Counter

from rich.console import Console
from rich.table import Table

from .models import SECTION_TYPES, VOID_TAGS, Registry

console = Console()

# The MDN index currently lists well over a hundred elements
MIN_EXPECTED_ELEMENTS = 100


class ValidationError(Exception):
    """Raised when a registry breaks its invariants."""


def validate_registry(registry: Registry, min_elements: int = MIN_EXPECTED_ELEMENTS) -> bool:
    """Check registry invariants.

    Args:
        registry: Registry to check
        min_elements: Size below which a warning is printed

    Returns:
        True if the registry has at least min_elements entries, False otherwise

    Raises:
        ValidationError: If any record is inconsistent
    """
    section_types = set(SECTION_TYPES.values())
    problems: list[str] = []

    for key, record in registry.items():
        if key != record.tag:
            problems.append(f"{key}: keyed under a different tag ({record.tag})")
        if record.is_void != (record.tag in VOID_TAGS):
            problems.append(f"{key}: isVoid={record.is_void} disagrees with void tag list")
        if record.type not in section_types:
            problems.append(f"{key}: type '{record.type}' has no source section")

    if problems:
        raise ValidationError(f"Found {len(problems)} invalid records:\n" + "\n".join(problems))

    if len(registry) < min_elements:
        console.print(
            f"[yellow]⚠ Registry has only {len(registry)} elements (expected at least {min_elements})[/yellow]"
        )
        return False

    console.print(f"[green]✓[/green] Registry valid: {len(registry)} elements")
    return True


def display_registry_summary(registry: Registry) -> None:
    """Print element counts per category and per type."""
    by_category = Counter(record.category for record in registry.values())
    by_type = Counter(record.type for record in registry.values())

    table = Table(title="HTML Element Registry")
    table.add_column("Category", style="blue")
    table.add_column("Elements", justify="right")

    for category, count in sorted(by_category.items()):
        table.add_row(category, str(count))

    console.print(table)

    type_table = Table(title="By Type")
    type_table.add_column("Type", style="cyan")
    type_table.add_column("Elements", justify="right")

    for element_type, count in sorted(by_type.items()):
        type_table.add_row(element_type, str(count))

    console.print(type_table)
    console.print(f"\n[green]Total elements: {len(registry)}[/green]")
