"""Text pieces of a task card: priority marks, due dates, tags and truncation."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Optional

HIGH_MARK = "⚫"
NONE_MARK = "⚪"
TAG_PREFIX = "🏷️  "
OVERDUE_PREFIX = "⚠️ "
ELLIPSIS = "..."
MIN_CONTENT_WIDTH = 20

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _byte_prefix(text: str, size: int) -> str:
    if size < 0:
        raise ValueError("truncation width is too small")
    return text.encode("utf-8")[:size].decode("utf-8", errors="ignore")


def priority_icon(priority: str) -> str:
    """Return a filled mark for a known priority, an empty one otherwise."""
    if priority.lower() in ("high", "medium", "low"):
        return HIGH_MARK
    return NONE_MARK


def priority_color(priority: str, colors: Any) -> str:
    """Return the configured colour for a priority level."""
    level = priority.lower()
    if level in ("high", "medium", "low"):
        return getattr(colors, level)
    return colors.default


def format_due_date(
    due_date: Optional[datetime],
    is_overdue: bool,
    colors: Any,
    now: Optional[datetime] = None,
) -> tuple[str, str]:
    """Return the due-date text with a relative description, and its colour."""
    if due_date is None:
        return "", ""
    if now is None:
        now = datetime.now(due_date.tzinfo)
    hours = (due_date - now).total_seconds() / 3600

    if is_overdue:
        days = int(-hours / 24)
        if days == 0:
            relative = "overdue today"
        elif days == 1:
            relative = "overdue 1 day"
        else:
            relative = f"overdue {days} days"
        color = colors.overdue
        prefix = OVERDUE_PREFIX
    else:
        days = int(hours / 24)
        if days == 0:
            relative, color = "due today", colors.due_soon
        elif days == 1:
            relative, color = "due tomorrow", colors.due_soon
        elif days <= 3:
            relative, color = f"due in {days} days", colors.due_soon
        elif days <= 7:
            relative, color = f"due in {days} days", colors.upcoming
        else:
            relative, color = f"due in {days} days", colors.far_future
        prefix = ""

    date_text = f"{_MONTHS[due_date.month - 1]} {due_date.day:02d}"
    return f"{prefix}📅 {date_text} ({relative})", color


def format_tags(tags: Iterable[str], max_width: int) -> str:
    """Render tags after a tag mark, cutting off what does not fit."""
    tags = list(tags)
    if not tags:
        return ""
    available = max_width - _byte_len(TAG_PREFIX)
    if available <= 10:
        return ""

    shown: list[str] = []
    used = 0
    for index, tag in enumerate(tags):
        tag_len = _byte_len(tag) + 2
        if used + tag_len > available:
            if index == 0:
                size = min(_byte_len(tag), available - 3)
                shown.append(_byte_prefix(tag, size) + ELLIPSIS)
            else:
                shown.append(f"+{len(tags) - index}")
            break
        shown.append(tag)
        used += tag_len
    return TAG_PREFIX + "  ".join(shown)


def truncate_description(text: str, max_len: int) -> str:
    """Return the first non-blank of the first two lines, shortened to max_len."""
    if not text:
        return ""
    lines = text.split("\n")
    first = lines[0].strip()
    if not first and len(lines) > 1:
        first = lines[1].strip()
    if _byte_len(first) > max_len:
        return _byte_prefix(first, max_len - 3) + ELLIPSIS
    return first


def truncate_title(title: str, content_width: int) -> str:
    """Shorten a title to fit beside the priority mark in a card of this width."""
    width = max(content_width, MIN_CONTENT_WIDTH)
    limit = width - 3
    if _byte_len(title) > limit:
        return _byte_prefix(title, limit - 3) + ELLIPSIS
    return title