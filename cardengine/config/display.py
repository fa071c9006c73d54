"""Config display utilities for readable run summaries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pydantic import BaseModel


def format_config_summary(*sections: tuple[str, BaseModel | None]) -> str:
    """Format config sections into a readable multi-line summary.

    Each section is a (label, config) pair. A "variant" field is appended to
    the header; nested dicts and lists of dicts get their own indented lines.

    Example output:
        Game:
          players: 3, hand_size: 5, ranks: [2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14]
          suits: [spades, hearts, diamonds, clubs]
        Seat 0: mcts
          iterations: 500, exploration: 0.7071067811865476
    """
    lines: list[str] = []

    for label, config in sections:
        if config is None:
            continue

        data = config.model_dump()
        header = f"{label}:"
        if "variant" in data:
            header += f" {data.pop('variant')}"
        lines.append(header)

        scalar_parts: list[str] = []
        nested_parts: list[str] = []
        for key, value in data.items():
            if value is None:
                continue
            if isinstance(value, dict):
                nested_parts.append(f"  {key}: {_format_nested(value)}")
            elif isinstance(value, list) and any(isinstance(v, (dict, str)) for v in value):
                nested_parts.append(f"  {key}: {_format_list(value)}")
            else:
                scalar_parts.append(f"{key}: {_format_value(value)}")

        if scalar_parts:
            lines.append(f"  {', '.join(scalar_parts)}")
        lines.extend(nested_parts)

    return "\n".join(lines)


def _format_nested(data: dict[str, Any]) -> str:
    """Format a nested dict as a compact one-liner."""
    if not data:
        return "{}"
    parts = [f"{key}: {_format_value(value)}" for key, value in data.items() if value is not None]
    return ", ".join(parts)


def _format_list(items: list[Any]) -> str:
    """Format a list compactly. Dicts with a 'variant' key show as variant(params)."""
    labels = []
    for item in items:
        if isinstance(item, dict) and "variant" in item:
            extra = {k: v for k, v in item.items() if k != "variant" and v is not None}
            if extra:
                extra_str = ", ".join(f"{k}={_format_value(v)}" for k, v in extra.items())
                labels.append(f"{item['variant']}({extra_str})")
            else:
                labels.append(str(item["variant"]))
        else:
            labels.append(_format_value(item))
    return f"[{', '.join(labels)}]"


def _format_value(value: Any) -> str:
    """Format a single value for display."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value == int(value) and abs(value) < 1e10:
        return f"{value:.1f}"
    return str(value)
