"""Report model builder for monthly workday reports.

This module turns a MonthlyReportRequest into a ReportModel: the header
block, the table rows in display order, the aggregated total and the
resolved footer text. The output is pure data, ready for a renderer.
"""

import datetime as dt
import logging
from typing import List, Optional, Tuple

from workday_reports.calculators.clock import (
    compute_work_seconds,
    format_seconds_as_clock,
)
from workday_reports.localization.strings import LocalizedStrings, resolve
from workday_reports.models.report import (
    ComputedRow,
    DocumentMetadata,
    FooterText,
    ReportHeader,
    ReportModel,
    ReportTotals,
    RowKind,
    TableRow,
)
from workday_reports.models.workday import MonthlyReportRequest, WorkdayEntry

logger = logging.getLogger(__name__)

DEFAULT_BRAND_NAME = "Plannify"


class ReportModelBuilder:
    """Build render-ready report models from report requests.

    The builder holds only configuration; every call to build() works on
    locals, so one builder can serve concurrent requests.

    Attributes:
        timezone: Civil timezone used for the "generated on" timestamp
        site_url: Site URL printed in the footer
        brand_name: Brand used in the document metadata

    Example:
        >>> from zoneinfo import ZoneInfo
        >>> builder = ReportModelBuilder(ZoneInfo("Europe/Paris"))
        >>> model = builder.build(request)
        >>> model.totals.total_display
        '07:30:00'
    """

    def __init__(
        self,
        timezone: dt.tzinfo,
        site_url: str = "",
        brand_name: str = DEFAULT_BRAND_NAME,
    ):
        """Initialize the builder.

        Args:
            timezone: Civil timezone for footer timestamps
            site_url: Site URL for the footer
            brand_name: Brand name for document metadata
        """
        self.timezone = timezone
        self.site_url = site_url
        self.brand_name = brand_name

    def build(
        self, request: MonthlyReportRequest, now: Optional[dt.datetime] = None
    ) -> ReportModel:
        """Build the report model for a request.

        Args:
            request: Validated report request
            now: Generation time; defaults to the current time. Naive values
                are taken as already being in the builder's timezone.

        Returns:
            ReportModel with header, table rows, totals and footer

        Raises:
            InvalidLanguageError: If the request language is unsupported
            ParseError: If an entry holds a malformed clock string
        """
        strings = resolve(request.language)

        rows = self._build_computed_rows(request.workdays, strings)
        totals = self._build_totals(rows)
        table = self._build_table(rows, totals, strings)

        logger.debug(
            f"Built report model for {request.month:02d}/{request.year}: "
            f"{len(rows)} entries, total {totals.total_display}"
        )

        return ReportModel(
            metadata=self._build_metadata(request),
            header=ReportHeader(
                document_title=strings.document_title,
                driver_name=request.driver_name,
                period_text=strings.period_text(request.month, request.year),
            ),
            table=table,
            rows=rows,
            totals=totals,
            footer=self._build_footer(strings, now),
        )

    def _build_computed_rows(
        self, workdays: List[WorkdayEntry], strings: LocalizedStrings
    ) -> Tuple[ComputedRow, ...]:
        return tuple(
            self._build_computed_row(position, entry, strings)
            for position, entry in enumerate(workdays, start=1)
        )

    def _build_computed_row(
        self, index: int, entry: WorkdayEntry, strings: LocalizedStrings
    ) -> ComputedRow:
        """Derive display values for one entry.

        Args:
            index: 1-based position of the entry
            entry: The workday entry
            strings: Strings for the report language

        Returns:
            ComputedRow for the entry
        """
        work_seconds: Optional[int] = None
        if entry.end_time is None:
            work_time_display = strings.not_computed
        else:
            work_seconds = compute_work_seconds(
                entry.start_time, entry.end_time, entry.rest_time
            )
            # Non-positive durations are left blank, never shown negative
            work_time_display = (
                format_seconds_as_clock(work_seconds) if work_seconds > 0 else ""
            )

        return ComputedRow(
            index=index,
            display_date=strings.format_date(entry.date),
            start_time=entry.start_time,
            end_time=(
                entry.end_time
                if entry.end_time is not None
                else strings.end_time_placeholder
            ),
            rest_time=entry.rest_time,
            overnight_marker=strings.overnight_marker if entry.overnight else "",
            work_seconds=work_seconds,
            work_time_display=work_time_display,
            # Second, fourth, ... data rows get the alternate background
            shaded=index % 2 == 0,
        )

    def _build_totals(self, rows: Tuple[ComputedRow, ...]) -> ReportTotals:
        total = sum(
            row.work_seconds
            for row in rows
            if row.work_seconds is not None and row.work_seconds > 0
        )
        return ReportTotals(
            total_worked_seconds=total,
            total_display=format_seconds_as_clock(total),
        )

    def _build_table(
        self,
        rows: Tuple[ComputedRow, ...],
        totals: ReportTotals,
        strings: LocalizedStrings,
    ) -> Tuple[TableRow, ...]:
        """Assemble the table rows in display order.

        Order: header, data rows (or a single no-data row), spacer, total.
        """
        column_count = len(strings.column_labels)

        table = [TableRow(kind=RowKind.HEADER, cells=strings.column_labels)]

        if not rows:
            table.append(
                TableRow(kind=RowKind.NO_DATA, cells=(strings.no_data_message,))
            )
        else:
            table.extend(
                TableRow(kind=RowKind.DATA, cells=row.cells, shaded=row.shaded)
                for row in rows
            )

        table.append(TableRow(kind=RowKind.SPACER, cells=("",)))

        total_cells = (
            (strings.total_label,) + ("",) * (column_count - 2) + (totals.total_display,)
        )
        table.append(TableRow(kind=RowKind.TOTAL, cells=total_cells))

        return tuple(table)

    def _build_footer(
        self, strings: LocalizedStrings, now: Optional[dt.datetime]
    ) -> FooterText:
        generated_at = self._localize(now)
        return FooterText(
            generated_on=strings.footer_generated_on(
                strings.format_date(generated_at.date()),
                generated_at.strftime("%H:%M:%S"),
            ),
            strings=strings,
            site_url=self.site_url,
        )

    def _localize(self, now: Optional[dt.datetime]) -> dt.datetime:
        if now is None:
            return dt.datetime.now(self.timezone)
        if now.tzinfo is None:
            return now.replace(tzinfo=self.timezone)
        return now.astimezone(self.timezone)

    def _build_metadata(self, request: MonthlyReportRequest) -> DocumentMetadata:
        return DocumentMetadata(
            title=f"{self.brand_name.lower()}-{request.month:02d}-{request.year}",
            author=self.brand_name,
        )
