"""Report builder — text and JSON output for glyphfit commands."""

import json
from typing import Any

from glyphfit.core.types import Report


def _format_item(label: str, data: dict[str, Any]) -> list[str]:
    if 'rgba' in data:
        r, g, b, a = data['rgba']
        nearest = data.get('nearest')
        near = f'  ~{nearest} (Δ={data.get("distance", "?")})' if nearest else ''
        return [f'{label:<16} {data.get("hex", "?"):<10} rgba({r}, {g}, {b}, {a}){near}']
    if 'lines' in data:
        out = [f'── {label}  scale={data.get("scale")}  line_height={data.get("line_height")}']
        for ln in data['lines']:
            out.append(f'  ({ln["x"]}, {ln["y"]})  w={ln["width"]}  {ln["text"]!r}')
        if not data['lines']:
            out.append('  (nothing to draw)')
        return out
    # Generic fallback
    return [f'{label}: ' + ', '.join(f'{k}={v}' for k, v in data.items())]


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    for label, data in report.items.items():
        lines.extend(_format_item(label, data))

    if report.skipped:
        lines.append('')
        for s in report.skipped:
            lines.append(f'skipped {s["label"]}={s["value"]!r}: {s["reason"]}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'items': report.items,
        'skipped': report.skipped,
    }
    return json.dumps(obj, indent=2)
