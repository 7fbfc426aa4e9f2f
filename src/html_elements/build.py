"""Build elements.json from the MDN element reference page."""

from pathlib import Path

from rich.console import Console

from .fetch import MDN_ELEMENTS_URL, fetch_html, validate_index_html
from .logger import ScrapeLogger
from .models import Registry
from .registry import DATA_PATH
from .scrape import parse_index_page
from .storage import write_registry
from .validate import display_registry_summary, validate_registry

console = Console()

LOG_DIR = Path("data/logs")


def build_registry(url: str, output_path: Path, log_dir: Path = LOG_DIR) -> Registry:
    """Fetch, parse, check and save the element registry.

    Nothing is written if the fetch fails or the registry is inconsistent.

    Args:
        url: Reference page URL
        output_path: Destination JSON path
        log_dir: Directory for the markdown build report

    Returns:
        The built registry

    Raises:
        FetchError: If the page cannot be fetched
        ValidationError: If the parsed registry is inconsistent
    """
    console.print(f"[bold]Fetching MDN index page:[/bold] {url}")
    html = fetch_html(url)
    validate_index_html(html, url)

    logger = ScrapeLogger("scrape", log_dir)
    registry = parse_index_page(html, logger)
    console.print(f"[green]✓[/green] Parsed {len(registry)} elements")

    complete = validate_registry(registry)
    if not complete:
        logger.log_failure(f"Only {len(registry)} elements parsed")

    write_registry(registry, output_path)
    console.print(f"[green]✓[/green] Wrote elements registry to {output_path}")

    log_path = logger.write({"Source": url, "Elements": len(registry)})
    console.print(f"[dim]Log written to {log_path}[/dim]")

    return registry


def main() -> None:
    """Main entry point for rebuilding the bundled registry."""
    try:
        registry = build_registry(MDN_ELEMENTS_URL, DATA_PATH, LOG_DIR)
    except Exception as e:
        console.print(f"[red bold]Error:[/red bold] {e}")
        raise SystemExit(1) from e

    display_registry_summary(registry)


if __name__ == "__main__":
    main()
