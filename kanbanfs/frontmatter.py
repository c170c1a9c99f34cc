"""Markdown documents with YAML frontmatter, titled markdown, and YAML helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import yaml

DELIMITER = "---"


class FrontmatterError(ValueError):
    """Raised when YAML data cannot be parsed or produced."""


class _Loader(yaml.SafeLoader):
    """Safe loader that keeps timestamp-like scalars as plain strings."""


def _timestamp_as_string(loader: yaml.SafeLoader, node: yaml.Node) -> str:
    return loader.construct_scalar(node)


_Loader.add_constructor("tag:yaml.org,2002:timestamp", _timestamp_as_string)


def _to_text(data: bytes | str) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    return data


def _scan_lines(text: str) -> list[str]:
    """Split text into lines the way a line scanner does."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _load(text: str, message: str) -> Any:
    try:
        return yaml.load(text, Loader=_Loader)
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"{message}: {exc}") from exc


def _dump(data: Any) -> str:
    try:
        return yaml.safe_dump(
            data, sort_keys=True, default_flow_style=False, allow_unicode=True
        )
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"failed to marshal YAML: {exc}") from exc


@dataclass
class FrontmatterDocument:
    """A document split into its YAML frontmatter mapping and body text."""

    frontmatter: dict[str, Any] = field(default_factory=dict)
    content: str = ""

    def get_string(self, key: str) -> str:
        value = self.frontmatter.get(key)
        return value if isinstance(value, str) else ""

    def get_int(self, key: str) -> int:
        value = self.frontmatter.get(key)
        if isinstance(value, bool):
            return 0
        if isinstance(value, int):
            return value
        if isinstance(value, float) and math.isfinite(value):
            return int(value)
        return 0

    def get_string_list(self, key: str) -> list[str]:
        value = self.frontmatter.get(key)
        if isinstance(value, list):
            return [item for item in value if isinstance(item, str)]
        return []


@dataclass
class MarkdownDocument:
    """A markdown document with an optional H1 title."""

    title: str = ""
    content: str = ""


def parse_frontmatter(data: bytes | str) -> FrontmatterDocument:
    """Parse a document that may begin with a '---' delimited YAML block."""
    text = _to_text(data)
    lines = _scan_lines(text)
    if not lines:
        return FrontmatterDocument()
    if lines[0].strip() != DELIMITER:
        return FrontmatterDocument(content=text)

    remaining = iter(lines[1:])
    header: list[str] = []
    for line in remaining:
        if line.strip() == DELIMITER:
            break
        header.append(line)

    frontmatter: dict[str, Any] = {}
    if header:
        parsed = _load("\n".join(header), "failed to parse YAML frontmatter")
        if isinstance(parsed, dict):
            frontmatter = parsed
        elif parsed is not None:
            raise FrontmatterError(
                "failed to parse YAML frontmatter: expected a mapping"
            )

    content = "\n".join(remaining).strip()
    return FrontmatterDocument(frontmatter=frontmatter, content=content)


def serialize_frontmatter(frontmatter: dict[str, Any], content: str) -> bytes:
    """Render frontmatter and body as a '---' delimited document."""
    parts = [DELIMITER, "\n"]
    if frontmatter:
        parts.append(_dump(frontmatter))
    parts += [DELIMITER, "\n"]
    if content:
        parts += [content, "\n"]
    return "".join(parts).encode("utf-8")


def parse_markdown_with_title(data: bytes | str) -> MarkdownDocument:
    """Split markdown into a leading '# ' title and the remaining content."""
    text = _to_text(data)
    lines = text.split("\n")
    first = lines[0].strip()
    if not first.startswith("# "):
        return MarkdownDocument(content=text.strip())

    title = first[2:].strip()
    start = 1
    while start < len(lines) and not lines[start].strip():
        start += 1
    content = "\n".join(lines[start:]).strip() if start < len(lines) else ""
    return MarkdownDocument(title=title, content=content)


def serialize_markdown_with_title(title: str, content: str) -> bytes:
    """Render a title as an H1 heading followed by the content."""
    parts: list[str] = []
    if title:
        parts += ["# ", title, "\n\n"]
    if content:
        parts.append(content)
        if not content.endswith("\n"):
            parts.append("\n")
    return "".join(parts).encode("utf-8")


def serialize_yaml(data: Any) -> bytes:
    """Render data as YAML bytes."""
    return _dump(data).encode("utf-8")


def parse_yaml(data: bytes | str) -> Any:
    """Parse YAML data; empty input gives None."""
    return _load(_to_text(data), "failed to unmarshal YAML")