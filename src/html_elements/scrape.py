"""Parse the MDN element index page into a registry.

Page structure:
    <div class="reference-layout__body">
      <section class="content-section">
        <h2><a href="#forms">Forms</a></h2>
        <figure class="table-container">
          <table>
            <tbody>
              <tr><td><a href="/en-US/docs/Web/HTML/Reference/Elements/input"><code>&lt;input&gt;</code></a></td>
                  <td>Description</td></tr>
              ...
"""

from dataclasses import dataclass
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError

from .fetch import MDN_HOST
from .logger import ScrapeLogger
from .models import SECTION_TYPES, VOID_TAGS, ElementRecord, ElementType, Registry

ELEMENTS_PATH_MARKER = "/Web/HTML/Reference/Elements/"


def extract_section_key(heading_text: str) -> str | None:
    """Find the section table key the heading starts with.

    Args:
        heading_text: Raw heading text

    Returns:
        Matching key from SECTION_TYPES, or None if the section is unmapped
    """
    text = heading_text.strip()
    for key in SECTION_TYPES:
        if text.startswith(key):
            return key
    return None


def section_title(heading: Tag) -> str:
    """Display label for a section: its link text, else the full heading text."""
    link = heading.find("a")
    link_text = link.get_text().strip() if link else ""
    return (link_text or heading.get_text()).strip()


def normalize_tag(text: str) -> str:
    """Strip angle brackets and lowercase (e.g., '<INPUT>' -> 'input')."""
    return text.replace("<", "").replace(">", "").strip().lower()


def resolve_url(href: str) -> str:
    """Make a documentation link absolute against the MDN host."""
    if href.startswith("http"):
        return href
    return urljoin(MDN_HOST, href)


@dataclass
class ElementRow:
    """Raw fields read from one element table row."""

    tag: str
    href: str
    description: str


def read_row(row: Tag) -> ElementRow | None:
    """Read tag, link and description from a table row.

    Returns:
        ElementRow, or None if the row does not describe an element
    """
    cells = row.find_all("td")
    if len(cells) < 2:
        return None

    element_cell, desc_cell = cells[0], cells[1]

    link = element_cell.select_one(f'a[href*="{ELEMENTS_PATH_MARKER}"]')
    if not link:
        return None

    href = link.get("href")
    if not href:
        return None

    raw_tag = link.get_text().strip() or element_cell.get_text().strip()
    if not raw_tag:
        return None

    tag = normalize_tag(raw_tag)
    if not tag:
        return None

    return ElementRow(tag=tag, href=href, description=desc_cell.get_text().strip())


def build_record(data: ElementRow, element_type: ElementType, category: str) -> ElementRecord | None:
    """Turn a row into a record, or None if its link does not resolve to an absolute URL."""
    try:
        return ElementRecord(
            tag=data.tag,
            description=data.description,
            type=element_type,
            category=category,
            url=resolve_url(data.href),
            is_void=data.tag in VOID_TAGS,
        )
    except ValidationError:
        return None


def parse_row(row: Tag, element_type: ElementType, category: str) -> ElementRecord | None:
    """Build a record from one table row.

    Args:
        row: <tr> element
        element_type: Type of the enclosing section
        category: Display title of the enclosing section

    Returns:
        ElementRecord, or None if the row does not describe a valid element
    """
    data = read_row(row)
    if data is None:
        return None
    return build_record(data, element_type, category)


def _find_sections(soup: BeautifulSoup) -> list[Tag]:
    body = soup.select_one(".reference-layout__body")
    return (body or soup).select("section.content-section")


def _find_table(section: Tag) -> Tag | None:
    return section.select_one("figure.table-container table") or section.find("table")


def _find_rows(table: Tag) -> list[Tag]:
    # html.parser does not synthesize <tbody>
    return table.select("tbody tr") or table.find_all("tr")


def parse_index_page(html: str, logger: ScrapeLogger | None = None) -> Registry:
    """Parse the element index page into a tag -> record mapping.

    A tag seen in several sections keeps the description, type, url and
    void flag from its first section, while its category follows the last
    section it appears in. Repeated rows never build a record, so only
    their tag text matters.

    Args:
        html: Raw HTML of the index page
        logger: Optional report for per-section results

    Returns:
        Registry keyed by lowercase tag
    """
    soup = BeautifulSoup(html, "html.parser")
    elements: Registry = {}

    for section in _find_sections(soup):
        heading = section.find("h2")
        if not heading:
            if logger:
                logger.log_skip("(untitled section)", "no heading")
            continue

        heading_text = heading.get_text()
        title = section_title(heading)
        section_key = extract_section_key(heading_text)
        if not section_key:
            if logger:
                logger.log_skip(title, "unmapped section")
            continue

        element_type = SECTION_TYPES[section_key]

        table = _find_table(section)
        if not table:
            if logger:
                logger.log_skip(title, "no table")
            continue

        count = 0
        for row in _find_rows(table):
            data = read_row(row)
            if data is None:
                continue

            existing = elements.get(data.tag)
            if existing is not None:
                if logger:
                    logger.log_duplicate(data.tag, existing.category, title)
                existing.category = title
                count += 1
                continue

            record = build_record(data, element_type, title)
            if record is None:
                if logger:
                    logger.log_skip(f"{title}: {data.tag}", f"invalid link {data.href}")
                continue

            elements[data.tag] = record
            count += 1

        if logger:
            logger.log_section(title, element_type, count)

    return elements
