"""ReportLab backend drawing laid-out reports into PDF files.

Layout primitives use millimetres with a top-left origin; ReportLab uses
points with a bottom-left origin, so every ``y`` is flipped against the
page height before drawing.
"""

from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas as pdf_canvas
from reportlab.platypus import Paragraph, TableStyle
from reportlab.platypus import Table as PdfTable

from networth_report.application.ports.report_renderer import (
    ReportRendererPort,
)
from networth_report.domain.models.drawing import (
    RGB,
    Circle,
    Line,
    Polygon,
    Polyline,
    Primitive,
    Rect,
    ReportDocument,
    Table,
    Text,
)
from networth_report.infrastructure.logging.logger import get_app_logger

FONT_NAME = "Helvetica"
# Standard PDF fonts only cover the WinAnsi character set.
STANDARD_FONT_ENCODING = "cp1252"
TABLE_COLUMN_WIDTHS_MM = (25.0, 45.0, 30.0)
FOOTER_CLEARANCE_MM = 13.0


def _encodable(char: str) -> bool:
    try:
        char.encode(STANDARD_FONT_ENCODING)
    except UnicodeEncodeError:
        return False
    return True


def _rgb(color: RGB) -> tuple[float, float, float]:
    red, green, blue = color
    return red / 255, green / 255, blue / 255


class ReportLabPdfRenderer(ReportRendererPort):
    """Render report documents with ReportLab's canvas API."""

    def __init__(self, logger=None, font_name: str = FONT_NAME) -> None:
        """Initialize the renderer.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            font_name: Standard PDF font used for text.
        """
        self._logger = logger or get_app_logger()
        self._font_name = font_name
        self._standard_font = font_name in pdfmetrics.standardFonts
        self._page_height = 0.0
        self._cell_style = ParagraphStyle(
            "ReportCell",
            parent=getSampleStyleSheet()["BodyText"],
            fontName=font_name,
            fontSize=9,
            leading=11,
        )

    def render(self, document: ReportDocument, output_dir: Path) -> Path:
        """Draw every page of ``document`` into ``output_dir``.

        Args:
            document: Laid-out report.
            output_dir: Destination directory, created when missing.

        Returns:
            Path: Path of the written PDF.
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / document.filename

        self._page_height = document.page_height
        pdf = pdf_canvas.Canvas(
            str(path),
            pagesize=(document.page_width * mm, document.page_height * mm),
        )
        pdf.setTitle(document.filename)
        for page in document.pages:
            for primitive in page.primitives:
                self.draw(pdf, primitive)
            pdf.showPage()
        pdf.save()
        self._logger.info(
            f"PDF written with {len(document.pages)} pages: {path}"
        )
        return path

    def draw(self, pdf, primitive: Primitive) -> None:
        """Draw one primitive on a ReportLab canvas."""
        if isinstance(primitive, Line):
            self._draw_line(pdf, primitive)
        elif isinstance(primitive, Polyline):
            self._draw_polyline(pdf, primitive)
        elif isinstance(primitive, Polygon):
            self._draw_polygon(pdf, primitive)
        elif isinstance(primitive, Circle):
            self._draw_circle(pdf, primitive)
        elif isinstance(primitive, Rect):
            self._draw_rect(pdf, primitive)
        elif isinstance(primitive, Text):
            self._draw_text(pdf, primitive)
        elif isinstance(primitive, Table):
            self._draw_table(pdf, primitive)
        else:
            raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")

    def pdf_text(self, value: str) -> str:
        """Drop characters the font cannot draw, such as emoji icons."""
        if not self._standard_font:
            return value
        kept = "".join(char for char in value if _encodable(char))
        return " ".join(kept.split())

    def _x(self, value: float) -> float:
        return value * mm

    def _y(self, value: float) -> float:
        return (self._page_height - value) * mm

    def _draw_line(self, pdf, line: Line) -> None:
        pdf.setStrokeColorRGB(*_rgb(line.color))
        pdf.setLineWidth(line.width * mm)
        pdf.line(
            self._x(line.start[0]),
            self._y(line.start[1]),
            self._x(line.end[0]),
            self._y(line.end[1]),
        )

    def _draw_polyline(self, pdf, polyline: Polyline) -> None:
        if len(polyline.points) < 2:
            return
        pdf.setStrokeColorRGB(*_rgb(polyline.color))
        pdf.setLineWidth(polyline.width * mm)
        path = pdf.beginPath()
        first_x, first_y = polyline.points[0]
        path.moveTo(self._x(first_x), self._y(first_y))
        for x, y in polyline.points[1:]:
            path.lineTo(self._x(x), self._y(y))
        pdf.drawPath(path, stroke=1, fill=0)

    def _draw_polygon(self, pdf, polygon: Polygon) -> None:
        if len(polygon.points) < 3:
            return
        pdf.saveState()
        pdf.setFillColorRGB(*_rgb(polygon.fill), alpha=polygon.alpha)
        path = pdf.beginPath()
        first_x, first_y = polygon.points[0]
        path.moveTo(self._x(first_x), self._y(first_y))
        for x, y in polygon.points[1:]:
            path.lineTo(self._x(x), self._y(y))
        path.close()
        pdf.drawPath(path, stroke=0, fill=1)
        pdf.restoreState()

    def _draw_circle(self, pdf, circle: Circle) -> None:
        pdf.setFillColorRGB(*_rgb(circle.fill))
        pdf.circle(
            self._x(circle.center[0]),
            self._y(circle.center[1]),
            circle.radius * mm,
            stroke=0,
            fill=1,
        )

    def _draw_rect(self, pdf, rect: Rect) -> None:
        if rect.stroke is not None:
            pdf.setStrokeColorRGB(*_rgb(rect.stroke))
            pdf.setLineWidth(0.2 * mm)
        if rect.fill is not None:
            pdf.setFillColorRGB(*_rgb(rect.fill))
        pdf.rect(
            self._x(rect.x),
            self._y(rect.y + rect.height),
            rect.width * mm,
            rect.height * mm,
            stroke=int(rect.stroke is not None),
            fill=int(rect.fill is not None),
        )

    def _draw_text(self, pdf, text: Text) -> None:
        content = self.pdf_text(text.text)
        if not content:
            return
        pdf.setFont(self._font_name, text.size)
        pdf.setFillColorRGB(*_rgb(text.color))
        x, y = self._x(text.x), self._y(text.y)
        if text.align == "center":
            pdf.drawCentredString(x, y, content)
        elif text.align == "right":
            pdf.drawRightString(x, y, content)
        else:
            pdf.drawString(x, y, content)

    def _draw_table(self, pdf, table: Table) -> None:
        col_widths = None
        if len(table.header) == len(TABLE_COLUMN_WIDTHS_MM) + 1:
            fixed = sum(TABLE_COLUMN_WIDTHS_MM)
            col_widths = [
                width * mm for width in TABLE_COLUMN_WIDTHS_MM
            ] + [max(table.width - fixed, 20.0) * mm]
        data = [[self.pdf_text(cell) for cell in table.header]]
        for row in table.rows:
            *cells, description = (self.pdf_text(cell) for cell in row)
            data.append([*cells, Paragraph(escape(description), self._cell_style)])

        style = [
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            (
                "BACKGROUND",
                (0, 0),
                (-1, 0),
                colors.Color(*_rgb(table.header_fill)),
            ),
            (
                "TEXTCOLOR",
                (0, 0),
                (-1, 0),
                colors.Color(*_rgb(table.header_color)),
            ),
            ("FONTNAME", (0, 0), (-1, -1), self._font_name),
            ("FONTSIZE", (0, 0), (-1, -1), table.font_size),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ]
        for column in table.right_aligned_columns:
            style.append(("ALIGN", (column, 0), (column, -1), "RIGHT"))

        pdf_table = PdfTable(data, colWidths=col_widths, repeatRows=1)
        pdf_table.setStyle(TableStyle(style))
        _, height = pdf_table.wrapOn(
            pdf,
            table.width * mm,
            self._page_height * mm,
        )
        bottom = self._y(table.y) - height
        if bottom < FOOTER_CLEARANCE_MM * mm:
            self._logger.warning(
                f"Table with {len(table.rows)} rows overruns the page bottom "
                f"by {(FOOTER_CLEARANCE_MM * mm - bottom) / mm:.1f}mm"
            )
        pdf_table.drawOn(pdf, self._x(table.x), bottom)


__all__ = ["ReportLabPdfRenderer"]
