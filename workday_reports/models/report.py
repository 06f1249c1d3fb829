"""Render-ready report model.

These are plain frozen dataclasses produced by the ReportModelBuilder and
consumed by a renderer. They carry only data: row shading is a boolean on
each row and footer text is pre-resolved.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from workday_reports.localization.strings import LocalizedStrings


class RowKind(str, Enum):
    """Kinds of rows in the report table."""

    HEADER = "header"
    DATA = "data"
    NO_DATA = "no_data"
    SPACER = "spacer"
    TOTAL = "total"


@dataclass(frozen=True)
class ComputedRow:
    """Display values derived from one workday entry.

    Attributes:
        index: 1-based position in the request
        display_date: Localized date
        start_time: Start clock string as received
        end_time: End clock string, or the placeholder for open shifts
        rest_time: Break clock string as received
        overnight_marker: Localized marker, empty when not overnight
        work_seconds: Computed worked seconds, None for open shifts
        work_time_display: Formatted worked time, "" or "not computed"
        shaded: Whether the row is drawn with the alternate background
    """

    index: int
    display_date: str
    start_time: str
    end_time: str
    rest_time: str
    overnight_marker: str
    work_seconds: Optional[int]
    work_time_display: str
    shaded: bool

    @property
    def cells(self) -> Tuple[str, ...]:
        return (
            str(self.index),
            self.display_date,
            self.start_time,
            self.end_time,
            self.rest_time,
            self.overnight_marker,
            self.work_time_display,
        )


@dataclass(frozen=True)
class TableRow:
    """One row of the report table, in display order.

    NO_DATA and SPACER rows carry a single cell meant to span all columns.
    """

    kind: RowKind
    cells: Tuple[str, ...]
    shaded: bool = False


@dataclass(frozen=True)
class ReportTotals:
    """Aggregated worked time for the period."""

    total_worked_seconds: int
    total_display: str


@dataclass(frozen=True)
class ReportHeader:
    document_title: str
    driver_name: str
    period_text: str


@dataclass(frozen=True)
class FooterText:
    """Resolved footer content shared by every page.

    Attributes:
        generated_on: Localized "generated on <date> at <time>" text
        strings: Strings of the report language, for the page label
        site_url: Site URL shown on the right
    """

    generated_on: str
    strings: LocalizedStrings
    site_url: str


@dataclass(frozen=True)
class DocumentMetadata:
    title: str
    author: str
    subject: str = "report"
    keywords: str = "report, workdays, monthly"


@dataclass(frozen=True)
class ReportModel:
    """Complete description of a monthly report, ready to render.

    Attributes:
        metadata: PDF document properties
        header: Title block content
        table: All table rows in display order
        rows: Computed rows for the workday entries
        totals: Aggregated worked time
        footer: Footer content
    """

    metadata: DocumentMetadata
    header: ReportHeader
    table: Tuple[TableRow, ...]
    rows: Tuple[ComputedRow, ...]
    totals: ReportTotals
    footer: FooterText

    @property
    def column_count(self) -> int:
        return len(self.table[0].cells)
