"""Small text helpers shared by the loaders and the CLI."""

from __future__ import annotations

import re

WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_whitespace(value: str) -> str:
    """Collapse runs of whitespace the way rendered inner text reads."""
    return WHITESPACE_PATTERN.sub(" ", value or "").strip()


def parse_link_list(content: str) -> list[str]:
    """Split a newline-delimited link file, dropping carriage returns and blanks."""
    links: list[str] = []
    for line in content.replace("\r", "").split("\n"):
        candidate = line.strip()
        if candidate:
            links.append(candidate)
    return links
