"""Field reference extraction from Filament documentation pages.

Each heuristic is a pure function over the parsed page. Heuristics that have
fallbacks are chained with `_first_success`, so the order of the strategies
is also their priority. A heuristic that finds nothing returns None or an
empty list; none of them raise for missing markup.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

from bs4 import BeautifulSoup, Tag

from filament_mcp.remote.models import ExampleEntry, FieldRecord, PropertyEntry

DEFAULT_EXAMPLE_TITLE = "Code Example"

SECTION_HEADINGS = ["h2", "h3"]
EXAMPLE_HEADINGS = ["h2", "h3", "h4"]

# Heading fragments that introduce a property/method reference section
PROPERTY_SECTION_KEYWORDS = (
    "api reference",
    "methods",
    "properties",
    "available methods",
    "configuration",
)


def parse_markup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def extract_field_record(html: str, subject: str, url: str) -> FieldRecord:
    """Run every heuristic over `html` and assemble a FieldRecord."""
    soup = parse_markup(html)
    properties = extract_properties(soup)
    examples = extract_examples(soup)
    return FieldRecord(
        name=extract_title(soup, subject),
        url=url,
        description=extract_description(soup),
        usage=extract_usage(soup) or None,
        properties=tuple(properties) if properties else None,
        examples=tuple(examples) if examples else None,
    )


# =============================================================================
# Tree helpers
# =============================================================================


def _text(node: Optional[Tag]) -> str:
    if node is None:
        return ""
    return node.get_text().strip()


def _first_success(strategies: Iterable[Callable[[], Optional[str]]]) -> Optional[str]:
    for strategy in strategies:
        result = strategy()
        if result is not None:
            return result
    return None


def _previous_element(node: Tag) -> Optional[Tag]:
    for sibling in node.previous_siblings:
        if isinstance(sibling, Tag):
            return sibling
    return None


def _next_element(node: Tag) -> Optional[Tag]:
    for sibling in node.next_siblings:
        if isinstance(sibling, Tag):
            return sibling
    return None


def _siblings_until(node: Tag, stop_names: Iterable[str]) -> Iterator[Tag]:
    """Yield element siblings after `node` up to (excluding) a stop tag."""
    stops = set(stop_names)
    for sibling in node.next_siblings:
        if not isinstance(sibling, Tag):
            continue
        if sibling.name in stops:
            break
        yield sibling


def _siblings_between(start: Tag, end: Tag) -> Iterator[Tag]:
    for sibling in start.next_siblings:
        if sibling is end:
            break
        if isinstance(sibling, Tag):
            yield sibling


# =============================================================================
# Title / description
# =============================================================================


def _title_from_h1(soup: BeautifulSoup) -> Optional[str]:
    return _text(soup.find("h1")) or None


def extract_title(soup: BeautifulSoup, subject: str) -> str:
    return _first_success([lambda: _title_from_h1(soup), lambda: subject]) or subject


def _description_after_h1(soup: BeautifulSoup) -> Optional[str]:
    heading = soup.find("h1")
    if heading is None:
        return None
    paragraph = heading.find_next_sibling("p")
    if paragraph is None:
        return None
    return _text(paragraph)


def _description_from_main(soup: BeautifulSoup) -> Optional[str]:
    main = soup.find("main")
    if main is None:
        return None
    paragraph = main.find("p")
    if paragraph is None:
        return None
    return _text(paragraph)


def extract_description(soup: BeautifulSoup) -> str:
    return _first_success(
        [
            lambda: _description_after_h1(soup),
            lambda: _description_from_main(soup),
        ]
    ) or ""


# =============================================================================
# Usage snippet
# =============================================================================


def _is_usage_heading(text: str) -> bool:
    lowered = text.strip().lower()
    return "basic usage" in lowered or "usage" in lowered or lowered == "basic"


def _usage_after_heading(soup: BeautifulSoup) -> Optional[str]:
    heading = next(
        (h for h in soup.find_all(SECTION_HEADINGS) if _is_usage_heading(h.get_text())),
        None,
    )
    if heading is None:
        return None
    code_block = heading.find_next_sibling("pre")
    if code_block is None:
        return None
    return _text(code_block)


def _first_code_block(soup: BeautifulSoup) -> Optional[str]:
    code_block = soup.find("pre")
    if code_block is None:
        return None
    return _text(code_block)


def extract_usage(soup: BeautifulSoup) -> str:
    return _first_success(
        [
            lambda: _usage_after_heading(soup),
            lambda: _first_code_block(soup),
        ]
    ) or ""


# =============================================================================
# Examples
# =============================================================================


def _example_from_block(code_block: Tag, code: str) -> ExampleEntry:
    previous = _previous_element(code_block)
    if previous is None or previous.name not in EXAMPLE_HEADINGS:
        return ExampleEntry(title=DEFAULT_EXAMPLE_TITLE, code=code)

    paragraph = next(
        (node for node in _siblings_between(previous, code_block) if node.name == "p"),
        None,
    )
    return ExampleEntry(
        title=_text(previous),
        code=code,
        description=_text(paragraph) if paragraph is not None else None,
    )


def extract_examples(soup: BeautifulSoup) -> list[ExampleEntry]:
    """One entry per non-empty code block, in document order."""
    examples: list[ExampleEntry] = []
    for code_block in soup.find_all("pre"):
        code = _text(code_block)
        if code:
            examples.append(_example_from_block(code_block, code))
    return examples


# =============================================================================
# Properties
# =============================================================================


def _is_property_heading(text: str) -> bool:
    lowered = text.strip().lower()
    return any(keyword in lowered for keyword in PROPERTY_SECTION_KEYWORDS)


def _make_property(
    name: str,
    description: str,
    type_: str | None = None,
    default: str | None = None,
) -> PropertyEntry:
    return PropertyEntry(
        name=name,
        description=description,
        type=type_ or None,
        default=default or None,
        required="required" in description.lower(),
    )


def _table_headers(table: Tag) -> list[str]:
    head = table.find("thead", recursive=False)
    cells = head.find_all("th") if head is not None else []
    if not cells:
        first_row = next(iter(_rows(table)), None)
        cells = first_row.find_all("th") if first_row is not None else []
    return [_text(cell).lower() for cell in cells]


def _rows(table: Tag) -> list[Tag]:
    """Rows owned by `table` itself, ignoring <thead>, <tfoot> and nested tables."""
    bodies = table.find_all("tbody", recursive=False)
    if bodies:
        return [row for body in bodies for row in body.find_all("tr", recursive=False)]
    return table.find_all("tr", recursive=False)


def _column(headers: list[str], *names: str) -> int:
    for name in names:
        if name in headers:
            return headers.index(name)
    return -1


def _cell_text(cells: list[Tag], index: int) -> str:
    if index < 0 or index >= len(cells):
        return ""
    return _text(cells[index])


def properties_from_table(table: Tag) -> list[PropertyEntry]:
    """Read a reference table; tables without name and description columns yield nothing."""
    headers = _table_headers(table)
    name_idx = _column(headers, "method", "name")
    description_idx = _column(headers, "description")
    if name_idx == -1 or description_idx == -1:
        return []
    type_idx = _column(headers, "type")
    default_idx = _column(headers, "default")

    entries: list[PropertyEntry] = []
    for row in _rows(table):
        cells = row.find_all("td", recursive=False)
        if not cells:
            continue
        name = _cell_text(cells, name_idx)
        description = _cell_text(cells, description_idx)
        if not name or not description:
            continue
        entries.append(
            _make_property(
                name,
                description,
                _cell_text(cells, type_idx),
                _cell_text(cells, default_idx),
            )
        )
    return entries


def properties_from_definition_list(dl: Tag) -> list[PropertyEntry]:
    entries: list[PropertyEntry] = []
    for term in dl.find_all("dt"):
        name = _text(term)
        definition = _next_element(term)
        description = _text(definition) if definition is not None and definition.name == "dd" else ""
        if name and description:
            entries.append(_make_property(name, description))
    return entries


def extract_properties(soup: BeautifulSoup) -> list[PropertyEntry]:
    """Collect entries from every reference section, without deduplication."""
    properties: list[PropertyEntry] = []
    headings = [h for h in soup.find_all(SECTION_HEADINGS) if _is_property_heading(h.get_text())]

    for heading in headings:
        section = list(_siblings_until(heading, SECTION_HEADINGS))
        for table in (node for node in section if node.name == "table"):
            properties.extend(properties_from_table(table))
        for dl in (node for node in section if node.name == "dl"):
            properties.extend(properties_from_definition_list(dl))

    return properties
