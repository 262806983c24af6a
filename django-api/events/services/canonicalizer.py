"""Validate and normalize raw event submissions.

``canonicalize_event`` is the first half of the create/update pipeline. It
never touches the store, so every rule here can be exercised on its own.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from events.domain import Event, EventDraft, Mode
from events.domain.errors import ValidationError
from events.domain.normalization import normalize_date, normalize_time

REQUIRED_TEXT_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "audience",
    "organizer",
)


def canonicalize_event(raw: Mapping[str, Any], current: Event | None = None) -> EventDraft:
    """Turn a raw field bag into an ``EventDraft``.

    With ``current``, fields missing from ``raw`` keep their stored value and
    ``date``/``time`` are only normalized again when they actually change.

    Raises:
        ValidationError: Naming the first offending field.
    """
    fields = {name: _text(raw, name, current) for name in REQUIRED_TEXT_FIELDS}

    return EventDraft(
        **fields,
        date=_date(raw, current),
        time=_time(raw, current),
        mode=_mode(raw, current),
        agenda=_items(raw, "agenda", current),
        tags=_items(raw, "tags", current, unique=True),
    )


def _supplied(raw: Mapping[str, Any], name: str, current: Event | None) -> Any:
    if name in raw or current is None:
        return raw.get(name)
    return getattr(current, name)


def _text(raw: Mapping[str, Any], name: str, current: Event | None) -> str:
    value = _supplied(raw, name, current)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(name, f"{name} is required")
    return value.strip()


def _date(raw: Mapping[str, Any], current: Event | None) -> str:
    value = _text(raw, "date", current)
    if current is not None and value == current.date:
        return current.date
    try:
        return normalize_date(value)
    except ValueError as exc:
        raise ValidationError("date", "invalid date") from exc


def _time(raw: Mapping[str, Any], current: Event | None) -> str:
    value = _text(raw, "time", current)
    if current is not None and value == current.time:
        return current.time
    try:
        return normalize_time(value)
    except ValueError as exc:
        raise ValidationError("time", "invalid time") from exc


def _mode(raw: Mapping[str, Any], current: Event | None) -> Mode:
    value = _supplied(raw, "mode", current)
    if isinstance(value, Mode):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("mode", "mode is required")
    try:
        return Mode(value.strip())
    except ValueError as exc:
        allowed = ", ".join(mode.value for mode in Mode)
        raise ValidationError("mode", f"mode must be one of: {allowed}") from exc


def _items(
    raw: Mapping[str, Any], name: str, current: Event | None, unique: bool = False
) -> tuple[str, ...]:
    value = _supplied(raw, name, current)
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ValidationError(name, f"{name} must be a list of strings")

    items: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValidationError(name, f"{name} must be a list of strings")
        item = item.strip()
        if item and not (unique and item in items):
            items.append(item)

    if not items:
        raise ValidationError(name, f"{name} must have at least one item")
    return tuple(items)
