"""PDF rendering of workday report models.

This module lays out a ReportModel with reportlab: a title block with the
brand logo, the report table with its shaded rows, and a footer on every
page with the generation timestamp, the page label and the site URL.
"""

import functools
import logging
from io import BytesIO
from typing import Any, List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from workday_reports.exceptions import RenderError
from workday_reports.models.report import FooterText, ReportModel, RowKind

logger = logging.getLogger(__name__)

SHADED_ROW_COLOR = colors.HexColor("#e5ebf2")
BORDER_COLOR = colors.black
LOGO_HEIGHT = 20
INDEX_COLUMN_WIDTH = 30
FOOTER_FONT = ("Helvetica", 8)

PAGE_MARGINS = {
    "leftMargin": 30,
    "rightMargin": 30,
    "topMargin": 20,
    "bottomMargin": 40,
}


class _FooterCanvas(canvas.Canvas):
    """Canvas that draws the footer once the total page count is known.

    Pages are buffered in showPage() and flushed in save(), so every
    footer can print "page X of Y".
    """

    def __init__(self, *args, footer: FooterText, **kwargs):
        super().__init__(*args, **kwargs)
        self._footer = footer
        self._page_states: List[dict] = []

    def showPage(self):
        self._page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        page_count = len(self._page_states)
        for state in self._page_states:
            self.__dict__.update(state)
            self._draw_footer(page_count)
            super().showPage()
        super().save()

    def _draw_footer(self, page_count: int) -> None:
        width, _ = self._pagesize
        y = PAGE_MARGINS["bottomMargin"] / 2
        self.saveState()
        self.setFont(*FOOTER_FONT)
        self.drawString(PAGE_MARGINS["leftMargin"] + 20, y, self._footer.generated_on)
        self.drawCentredString(
            width / 2,
            y,
            self._footer.strings.footer_page(self.getPageNumber(), page_count),
        )
        self.drawRightString(
            width - PAGE_MARGINS["rightMargin"] - 20, y, self._footer.site_url
        )
        self.restoreState()


class ReportPdfRenderer:
    """Render report models to PDF bytes.

    Example:
        >>> renderer = ReportPdfRenderer()
        >>> pdf = renderer.render(model)
        >>> pdf[:4]
        b'%PDF'
    """

    def __init__(self, pagesize=A4):
        self.pagesize = pagesize
        styles = getSampleStyleSheet()
        self._cell_style = ParagraphStyle(
            "report_cell", parent=styles["Normal"], fontSize=10, alignment=TA_CENTER
        )
        self._title_style = ParagraphStyle(
            "report_title",
            parent=styles["Normal"],
            fontSize=20,
            leading=24,
            alignment=TA_RIGHT,
        )
        self._subtitle_style = ParagraphStyle(
            "report_subtitle",
            parent=styles["Normal"],
            fontSize=14,
            leading=18,
            alignment=TA_RIGHT,
        )

    def render(self, model: ReportModel, logo: Optional[bytes] = None) -> bytes:
        """Render a report model.

        Args:
            model: Report model from the ReportModelBuilder
            logo: Optional brand logo image bytes (PNG or JPEG)

        Returns:
            The PDF document as bytes

        Raises:
            RenderError: If the model cannot be laid out
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self.pagesize,
            title=model.metadata.title,
            author=model.metadata.author,
            subject=model.metadata.subject,
            keywords=model.metadata.keywords,
            **PAGE_MARGINS,
        )

        try:
            story = [
                self._build_header(model, logo, doc.width),
                Spacer(1, 8),
                self._build_table(model, doc.width),
            ]
            doc.build(
                story,
                canvasmaker=functools.partial(_FooterCanvas, footer=model.footer),
            )
        except RenderError:
            raise
        except Exception as e:
            logger.error(f"Failed to render report {model.metadata.title}: {e}")
            raise RenderError(f"Failed to render report: {e}", cause=e) from e

        pdf = buffer.getvalue()
        logger.info(f"Rendered {model.metadata.title} ({len(pdf)} bytes)")
        return pdf

    def _build_header(
        self, model: ReportModel, logo: Optional[bytes], width: float
    ) -> Table:
        stack = [
            Paragraph(escape(model.header.document_title), self._title_style),
            Paragraph(escape(model.header.driver_name), self._subtitle_style),
            Paragraph(escape(model.header.period_text), self._subtitle_style),
        ]
        logo_cell: Any = self._build_logo(logo) if logo else ""

        header = Table([[logo_cell, stack]], colWidths=[width / 2, width / 2])
        header.setStyle(
            TableStyle(
                [
                    ("ALIGN", (0, 0), (0, 0), "LEFT"),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("LEFTPADDING", (0, 0), (-1, -1), 0),
                    ("RIGHTPADDING", (0, 0), (-1, -1), 0),
                ]
            )
        )
        return header

    def _build_logo(self, logo: bytes) -> Image:
        image_width, image_height = ImageReader(BytesIO(logo)).getSize()
        return Image(
            BytesIO(logo),
            width=LOGO_HEIGHT * image_width / image_height,
            height=LOGO_HEIGHT,
            hAlign="LEFT",
        )

    def _build_table(self, model: ReportModel, width: float) -> Table:
        """Lay out the table rows with spans, borders and shading."""
        column_count = model.column_count
        other_width = (width - INDEX_COLUMN_WIDTH) / (column_count - 1)
        col_widths = [INDEX_COLUMN_WIDTH] + [other_width] * (column_count - 1)

        data = []
        commands: List[tuple] = [
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ]
        body_rows = []

        for row_number, row in enumerate(model.table):
            cells = [Paragraph(escape(cell), self._cell_style) for cell in row.cells]
            cells += [""] * (column_count - len(cells))
            data.append(cells)

            if row.kind in (RowKind.NO_DATA, RowKind.SPACER):
                commands.append(("SPAN", (0, row_number), (-1, row_number)))
            if row.kind in (RowKind.DATA, RowKind.NO_DATA):
                body_rows.append(row_number)
            if row.kind == RowKind.HEADER:
                commands.append(
                    ("GRID", (0, row_number), (-1, row_number), 0.5, BORDER_COLOR)
                )
            if row.kind == RowKind.TOTAL:
                commands.append(
                    ("BOX", (0, row_number), (-1, row_number), 0.5, BORDER_COLOR)
                )
                commands.append(
                    ("LINEAFTER", (0, row_number), (0, row_number), 0.5, BORDER_COLOR)
                )
                commands.append(
                    ("LINEBEFORE", (-1, row_number), (-1, row_number), 0.5, BORDER_COLOR)
                )
            if row.shaded:
                commands.append(
                    ("BACKGROUND", (0, row_number), (-1, row_number), SHADED_ROW_COLOR)
                )

        if body_rows:
            commands.append(
                ("BOX", (0, body_rows[0]), (-1, body_rows[-1]), 0.5, BORDER_COLOR)
            )

        table = Table(data, colWidths=col_widths, repeatRows=1)
        table.setStyle(TableStyle(commands))
        return table
