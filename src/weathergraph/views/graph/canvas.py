"""
Immediate-mode drawing surface used by the chart renderer.

`Canvas` is the small 2D context the renderer draws through. `QPainterCanvas`
implements it on top of a QPainter, and `ImageSurface` hands out one such canvas
per redraw, painting into a fresh QImage.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Protocol, Union

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QFont, QFontMetricsF, QImage, QPainter, QPainterPath, QPen

from weathergraph import constants
from weathergraph.constants.fonts import FONT_PATTERN

logger = logging.getLogger("WeatherGraph.Canvas")

TEXT_ALIGNMENTS = ("left", "center", "right")
TEXT_BASELINES = ("top", "middle", "bottom")


class Canvas(Protocol):
    """The drawing operations the chart needs from a 2D surface."""
    stroke_style: str
    fill_style: str
    line_width: float
    font: str
    text_align: str
    text_baseline: str

    def begin_path(self) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def bezier_curve_to(self, cp1x: float, cp1y: float, cp2x: float, cp2y: float,
                        x: float, y: float) -> None: ...
    def stroke(self) -> None: ...
    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...
    def fill_text(self, text: str, x: float, y: float) -> None: ...


def parse_font(font: str) -> QFont:
    """Builds a QFont from a '<n>px <family>' string."""
    match = FONT_PATTERN.fullmatch(font)
    if not match:
        raise ValueError(f"Unsupported font specification: {font!r}")
    qfont = QFont(match.group(2))
    qfont.setPixelSize(max(1, round(float(match.group(1)))))
    return qfont


class QPainterCanvas:
    """
    Canvas implementation drawing through an active QPainter.

    Text is positioned like an HTML canvas: `text_align` anchors the x coordinate at
    the left edge, center or right edge of the text, and `text_baseline` anchors y at
    the top, vertical middle or bottom of the text.
    """

    def __init__(self, painter: QPainter) -> None:
        self.painter = painter
        self.painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
        self.stroke_style = constants.color.BLACK
        self.fill_style = constants.color.BLACK
        self.line_width = 1.0
        self.text_align = "left"
        self.text_baseline = "bottom"
        self._font = constants.fonts.UI_FONT
        self._qfont = parse_font(self._font)
        self._path = QPainterPath()

    @property
    def font(self) -> str:
        return self._font

    @font.setter
    def font(self, value: str) -> None:
        self._qfont = parse_font(value)
        self._font = value

    def begin_path(self) -> None:
        self._path = QPainterPath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(QPointF(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._path.lineTo(QPointF(x, y))

    def bezier_curve_to(self, cp1x: float, cp1y: float, cp2x: float, cp2y: float,
                        x: float, y: float) -> None:
        self._path.cubicTo(QPointF(cp1x, cp1y), QPointF(cp2x, cp2y), QPointF(x, y))

    def stroke(self) -> None:
        pen = QPen(QColor(self.stroke_style), self.line_width)
        self.painter.strokePath(self._path, pen)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.painter.fillRect(QRectF(x, y, width, height), QColor(self.fill_style))

    def fill_text(self, text: str, x: float, y: float) -> None:
        metrics = QFontMetricsF(self._qfont)
        text_width = metrics.horizontalAdvance(text)

        if self.text_align == "center":
            x -= text_width / 2
        elif self.text_align == "right":
            x -= text_width

        # QPainter.drawText(QPointF) places the alphabetic baseline at y.
        if self.text_baseline == "top":
            y += metrics.ascent()
        elif self.text_baseline == "middle":
            y += (metrics.ascent() - metrics.descent()) / 2
        elif self.text_baseline == "bottom":
            y -= metrics.descent()

        self.painter.save()
        self.painter.setFont(self._qfont)
        self.painter.setPen(QColor(self.fill_style))
        self.painter.drawText(QPointF(x, y), text)
        self.painter.restore()


class ImageSurface:
    """
    Paints each redraw into a new transparent QImage of the requested size.

    Attributes:
        last_image: The image produced by the most recent completed redraw.
    """

    def __init__(self) -> None:
        self.last_image: Optional[QImage] = None

    @contextmanager
    def context(self, width: float, height: float) -> Iterator[QPainterCanvas]:
        image = QImage(max(1, round(width)), max(1, round(height)), QImage.Format.Format_ARGB32_Premultiplied)
        image.fill(Qt.GlobalColor.transparent)
        painter = QPainter(image)
        try:
            yield QPainterCanvas(painter)
        finally:
            painter.end()
        self.last_image = image

    def save(self, path: Union[str, Path]) -> None:
        """Writes the last rendered image to disk; the format follows the file suffix."""
        if self.last_image is None:
            raise RuntimeError("Nothing has been rendered yet")
        if not self.last_image.save(str(path)):
            raise OSError(f"Failed to write chart image to {path}")
        logger.info("Chart image written to %s", path)
