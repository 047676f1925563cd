"""Write SVG markup for a computed network scene."""

from __future__ import annotations

import re
from typing import Any
from xml.sax.saxutils import escape, quoteattr

from trophicnet.engine.levels import FlowPolygon, NetworkScene, SpeciesBox

# "15px Arial", "bold 12pt Helvetica Neue", ...
_FONT_RE = re.compile(r"^(?P<prefix>.*?)(?P<size>\d+(?:\.\d+)?(?:px|pt|em|rem|%))\s+(?P<family>.+)$")

# Approximate half-advance of a label glyph, used to center labels
_LABEL_CHAR_OFFSET = 4
# Label baseline sits this far above the rectangle bottom
_LABEL_BASELINE_INSET = 10


def font_attributes(font: str) -> dict[str, str]:
    """Split a CSS-like font shorthand into SVG text attributes."""
    m = _FONT_RE.match(font.strip())
    if not m:
        return {"font-family": font.strip()} if font.strip() else {}

    attrs = {"font-size": m.group("size"), "font-family": m.group("family")}
    for token in m.group("prefix").split():
        if token in ("bold", "bolder", "lighter") or token.isdigit():
            attrs["font-weight"] = token
        elif token in ("italic", "oblique"):
            attrs["font-style"] = token
    return attrs


def _fmt(value: float) -> str:
    return f"{round(value, 2):g}"


def _points(polygon: FlowPolygon) -> str:
    return " ".join(f"{_fmt(x)},{_fmt(y)}" for x, y in polygon.vertices)


def _rect_element(box: SpeciesBox) -> dict[str, Any]:
    return {
        "tag": "rect",
        "x": _fmt(box.rect.left),
        "y": _fmt(box.rect.top),
        "width": _fmt(box.rect.width),
        "height": _fmt(box.rect.height),
        "fill": box.fill,
    }


def _label_element(box: SpeciesBox, font: dict[str, str]) -> dict[str, Any]:
    rect = box.rect
    x = rect.left + rect.width / 2 - len(box.label) * _LABEL_CHAR_OFFSET
    y = rect.top + rect.height - _LABEL_BASELINE_INSET
    return {
        "tag": "text",
        "x": _fmt(x),
        "y": _fmt(y),
        "fill": box.text_color,
        **font,
        "children": box.label,
    }


def scene_to_elements(scene: NetworkScene) -> list[dict[str, Any]]:
    """Flatten a scene into element dicts, in paint order.

    Rectangles and labels first, level by level, then the flows. Later
    elements paint over earlier ones, as on a canvas.
    """
    font = font_attributes(scene.font)
    elements: list[dict[str, Any]] = []

    for level in scene.levels:
        for box in level.species:
            elements.append(_rect_element(box))
            elements.append(_label_element(box, font))

    for band in scene.flows:
        for polygon in band.polygons:
            elements.append({
                "tag": "polygon",
                "points": _points(polygon),
                "fill": polygon.fill,
            })

    return elements


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 500.0,
    canvas_h: float = 30.0,
    title: str = "",
    description: str = "",
) -> str:
    """Generate clean SVG markup from element definitions."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {_fmt(canvas_w)} {_fmt(canvas_h)}" width="{_fmt(canvas_w)}"'
        f' height="{_fmt(canvas_h)}" xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k not in ("tag", "children")}
        attr_str = " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items())
        children = elem.get("children")
        if children is None:
            lines.append(f"  <{tag} {attr_str} />")
        else:
            lines.append(f"  <{tag} {attr_str}>{escape(str(children))}</{tag}>")

    lines.append("</svg>")
    return "\n".join(lines)


def scene_to_svg(scene: NetworkScene, title: str = "") -> str:
    """Full render: scene → SVG string."""
    return serialize_svg(
        scene_to_elements(scene),
        canvas_w=scene.width,
        canvas_h=scene.height,
        title=title,
    )
