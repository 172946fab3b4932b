"""Markdown text helpers for titles, excerpts and relevance scoring."""

import re
from pathlib import PurePosixPath
from typing import Optional

UNTITLED = "Untitled"

_TITLE_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_NUMERIC_PREFIX_RE = re.compile(r"^\d+-")
# Paragraph directly after a heading at the very top of the file
_LEAD_PARAGRAPH_RE = re.compile(r"^#[^\n]*\n\n(.*?)(\n\n|$)", re.DOTALL)


def extract_title(content: str) -> str:
    """Return the first level-1 heading, or UNTITLED."""
    match = _TITLE_RE.search(content)
    if match:
        return match.group(1).strip()
    return UNTITLED


def first_paragraph(content: str) -> Optional[str]:
    match = _LEAD_PARAGRAPH_RE.match(content)
    if match and match.group(1):
        return match.group(1).replace("\n", " ").strip()
    return None


def clean_item_name(name: str) -> str:
    """Strip ordering prefixes: '01-installation.md' -> 'installation'."""
    return _NUMERIC_PREFIX_RE.sub("", name).replace(".md", "")


def path_to_title(file_path: str) -> str:
    """'02-getting-started.md' -> 'Getting Started'."""
    stem = PurePosixPath(file_path).name
    if stem.endswith(".md"):
        stem = stem[: -len(".md")]
    words = clean_item_name(stem).split("-")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def make_excerpt(content: str, query: str, length: int = 150) -> str:
    """Return a window of text around the first match of `query`."""
    index = content.lower().find(query.lower())
    if index == -1:
        return content[: min(length, len(content))] + "..."

    start = max(0, index - 50)
    end = min(len(content), index + len(query) + 100)
    prefix = "..." if start > 0 else ""
    suffix = "..." if end < len(content) else ""
    return prefix + content[start:end] + suffix


def score_relevance(content: str, query: str) -> int:
    """Occurrences, plus 10 for a heading hit, plus up to 10 for an early hit."""
    lowered = content.lower()
    needle = query.lower()
    if not needle:
        return 0

    occurrences = lowered.count(needle)
    heading_re = re.compile(rf"^#+\s+.*{re.escape(needle)}.*$", re.MULTILINE)
    title_bonus = 10 if heading_re.search(lowered) else 0
    position = lowered.find(needle)
    position_score = 0 if position == -1 else max(0, 10 - position // 100)
    return occurrences + title_bonus + position_score
