# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Drawing surfaces for crossword documents.

All surfaces share one coordinate convention: origin at the top-left corner
of the page, y growing downward, units in points. Text is positioned by the
top edge of its line box. Colours are hex strings ("#RRGGBB").

Surfaces:
- PDFSurface: ReportLab canvas rendered into an in-memory buffer
- SVGSurface: standalone SVG document
- RecordingSurface: records the ordered call sequence (tests, dry runs)
"""

import io
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A3, A4, landscape, legal, letter, portrait
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen.canvas import Canvas


PAGE_SIZES = {
    "A3": A3,
    "A4": A4,
    "letter": letter,
    "legal": legal,
}

SURFACE_FORMATS = ["pdf", "svg"]


def page_dimensions(size: str = "A4", orientation: str = "landscape") -> Tuple[float, float]:
    """Return (width, height) in points for a named page size."""
    dims = PAGE_SIZES[size]
    if orientation == "landscape":
        return landscape(dims)
    return portrait(dims)


class DrawingSurface:
    """
    Capability consumed by the renderers.

    Subclasses implement the primitives and finish(), which returns the
    complete document. Nothing is emitted before finish() is called.
    """

    def __init__(self, width: float, height: float, font_name: str = "Helvetica"):
        self.width = width
        self.height = height
        self.font_name = font_name
        self.page_count = 1

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str):
        raise NotImplementedError

    def stroke_rect(
        self, x: float, y: float, w: float, h: float, color: str, line_width: float = 1.0
    ):
        raise NotImplementedError

    def stroke_circle(
        self, cx: float, cy: float, r: float, color: str, line_width: float = 1.0
    ):
        raise NotImplementedError

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, color: str, line_width: float = 1.0
    ):
        raise NotImplementedError

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font_size: float,
        color: str = "#000000",
        width: Optional[float] = None,
        align: str = "left",
    ):
        raise NotImplementedError

    def new_page(self):
        """Start a further page of the same size; later calls draw on it."""
        self.page_count += 1

    def text_width(self, text: str, font_size: float) -> float:
        """Rendered width of a single line of text."""
        return pdfmetrics.stringWidth(text, self.font_name, font_size)

    def finish(self) -> bytes:
        raise NotImplementedError

    def _anchor_x(self, x: float, width: Optional[float], align: str) -> float:
        if width is None or align == "left":
            return x
        if align == "center":
            return x + width / 2
        if align == "right":
            return x + width
        raise ValueError(f"Unknown text alignment: {align}")

    def _baseline(self, y: float, font_size: float) -> float:
        """Distance from the top of the line box to the baseline."""
        return y + pdfmetrics.getAscent(self.font_name, font_size)


class PDFSurface(DrawingSurface):
    """PDF drawn with ReportLab, one canvas page per surface page."""

    def __init__(self, width: float, height: float, font_name: str = "Helvetica"):
        super().__init__(width, height, font_name)
        self._buffer = io.BytesIO()
        self._canvas = Canvas(self._buffer, pagesize=(width, height))
        self._canvas.setFont(font_name, 10)

    def _flip(self, y: float) -> float:
        return self.height - y

    def fill_rect(self, x, y, w, h, color):
        c = self._canvas
        c.setFillColor(colors.HexColor(color))
        c.rect(x, self._flip(y + h), w, h, fill=1, stroke=0)

    def stroke_rect(self, x, y, w, h, color, line_width=1.0):
        c = self._canvas
        c.setStrokeColor(colors.HexColor(color))
        c.setLineWidth(line_width)
        c.rect(x, self._flip(y + h), w, h, fill=0, stroke=1)

    def stroke_circle(self, cx, cy, r, color, line_width=1.0):
        c = self._canvas
        c.setStrokeColor(colors.HexColor(color))
        c.setLineWidth(line_width)
        c.circle(cx, self._flip(cy), r, fill=0, stroke=1)

    def draw_line(self, x1, y1, x2, y2, color, line_width=1.0):
        c = self._canvas
        c.setStrokeColor(colors.HexColor(color))
        c.setLineWidth(line_width)
        c.line(x1, self._flip(y1), x2, self._flip(y2))

    def draw_text(self, text, x, y, font_size, color="#000000", width=None, align="left"):
        if not text:
            return
        c = self._canvas
        c.setFillColor(colors.HexColor(color))
        c.setFont(self.font_name, font_size)
        anchor = self._anchor_x(x, width, align)
        baseline = self._flip(self._baseline(y, font_size))
        if width is None or align == "left":
            c.drawString(anchor, baseline, text)
        elif align == "center":
            c.drawCentredString(anchor, baseline, text)
        else:
            c.drawRightString(anchor, baseline, text)

    def new_page(self):
        self._canvas.showPage()
        super().new_page()

    def finish(self) -> bytes:
        self._canvas.showPage()
        self._canvas.save()
        return self._buffer.getvalue()


class SVGSurface(DrawingSurface):
    """
    Standalone SVG document built element by element.

    Further pages are stacked below the first one in the same document.
    """

    TEXT_ANCHORS = {"left": "start", "center": "middle", "right": "end"}

    def __init__(self, width: float, height: float, font_name: str = "Helvetica"):
        super().__init__(width, height, font_name)
        self._parts: List[str] = []
        self._pages: List[List[str]] = [self._parts]

    def fill_rect(self, x, y, w, h, color):
        self._parts.append(
            f'  <rect x="{x:.2f}" y="{y:.2f}" width="{w:.2f}" height="{h:.2f}" '
            f'fill="{color}" stroke="none"/>'
        )

    def stroke_rect(self, x, y, w, h, color, line_width=1.0):
        self._parts.append(
            f'  <rect x="{x:.2f}" y="{y:.2f}" width="{w:.2f}" height="{h:.2f}" '
            f'fill="none" stroke="{color}" stroke-width="{line_width:.3f}"/>'
        )

    def stroke_circle(self, cx, cy, r, color, line_width=1.0):
        self._parts.append(
            f'  <circle cx="{cx:.2f}" cy="{cy:.2f}" r="{r:.2f}" fill="none" '
            f'stroke="{color}" stroke-width="{line_width:.3f}"/>'
        )

    def draw_line(self, x1, y1, x2, y2, color, line_width=1.0):
        self._parts.append(
            f'  <line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}" '
            f'stroke="{color}" stroke-width="{line_width:.3f}"/>'
        )

    def draw_text(self, text, x, y, font_size, color="#000000", width=None, align="left"):
        if not text:
            return
        anchor_x = self._anchor_x(x, width, align)
        anchor = self.TEXT_ANCHORS["left" if width is None else align]
        self._parts.append(
            f'  <text x="{anchor_x:.2f}" '
            f'y="{self._baseline(y, font_size):.2f}" '
            f'font-family="{self.font_name}" font-size="{font_size:.2f}" '
            f'fill="{color}" text-anchor="{anchor}">{escape(text)}</text>'
        )

    def new_page(self):
        super().new_page()
        self._parts = []
        self._pages.append(self._parts)

    def finish(self) -> bytes:
        total_height = self.height * self.page_count
        svg = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 0 {self.width:.2f} {total_height:.2f}" '
            f'width="{self.width:.2f}" height="{total_height:.2f}">',
            f'  <rect width="{self.width:.2f}" height="{total_height:.2f}" fill="#FFFFFF"/>',
        ]
        for index, parts in enumerate(self._pages):
            if index == 0:
                svg.extend(parts)
                continue
            svg.append(f'  <g transform="translate(0 {index * self.height:.2f})">')
            svg.extend(parts)
            svg.append('  </g>')
        svg.append('</svg>')
        return "\n".join(svg).encode("utf-8")


@dataclass
class DrawCall:
    """One recorded drawing primitive."""
    name: str
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)


class RecordingSurface(DrawingSurface):
    """Keeps the ordered list of drawing calls instead of producing a document."""

    def __init__(self, width: float = 842.0, height: float = 595.0, font_name: str = "Helvetica"):
        super().__init__(width, height, font_name)
        self.calls: List[DrawCall] = []

    def _record(self, name, *args, **kwargs):
        self.calls.append(DrawCall(name, args, kwargs))

    def fill_rect(self, x, y, w, h, color):
        self._record("fill_rect", x, y, w, h, color)

    def stroke_rect(self, x, y, w, h, color, line_width=1.0):
        self._record("stroke_rect", x, y, w, h, color, line_width=line_width)

    def stroke_circle(self, cx, cy, r, color, line_width=1.0):
        self._record("stroke_circle", cx, cy, r, color, line_width=line_width)

    def draw_line(self, x1, y1, x2, y2, color, line_width=1.0):
        self._record("draw_line", x1, y1, x2, y2, color, line_width=line_width)

    def draw_text(self, text, x, y, font_size, color="#000000", width=None, align="left"):
        self._record("draw_text", text, x, y, font_size, color, width=width, align=align)

    def new_page(self):
        super().new_page()
        self._record("new_page")

    def calls_named(self, name: str) -> List[DrawCall]:
        return [call for call in self.calls if call.name == name]

    def texts(self) -> List[str]:
        """Text of every draw_text call, in order."""
        return [call.args[0] for call in self.calls_named("draw_text")]

    def finish(self) -> bytes:
        lines = [f"{call.name} {call.args} {call.kwargs}" for call in self.calls]
        return "\n".join(lines).encode("utf-8")


def create_surface(
    fmt: str, width: float, height: float, font_name: str = "Helvetica"
) -> DrawingSurface:
    """Create a drawing surface for an output format."""
    if fmt == "pdf":
        return PDFSurface(width, height, font_name)
    if fmt == "svg":
        return SVGSurface(width, height, font_name)
    raise ValueError(f"Unsupported document format '{fmt}'. Must be one of: {SURFACE_FORMATS}")
