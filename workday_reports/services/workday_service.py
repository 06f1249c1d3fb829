"""Workday report service.

This module exposes the request handler behind the
``WorkdayService.GenerateMonthlyWorkdayReport`` RPC: it validates the
request, builds the report model and hands it to the PDF renderer.
"""

import datetime as dt
import logging
from typing import Any, Mapping, Optional, Union

from workday_reports.builders.report_model_builder import ReportModelBuilder
from workday_reports.config.settings import WorkdayReportConfig, get_config
from workday_reports.models.report import ReportModel
from workday_reports.models.workday import MonthlyReportRequest, MonthlyReportResponse
from workday_reports.renderers.pdf_renderer import ReportPdfRenderer
from workday_reports.utils.logging_utils import LogContext, log_rpc_call

logger = logging.getLogger(__name__)

RequestLike = Union[MonthlyReportRequest, Mapping[str, Any]]


class WorkdayReportService:
    """Generate monthly workday reports as PDF documents.

    The service holds the builder, the renderer and the brand logo; it keeps
    no per-request state, so a single instance serves all requests.

    Attributes:
        builder: Builds the report model from a request
        renderer: Turns the report model into PDF bytes
        logo: Brand logo bytes, or None to render without a logo

    Example:
        >>> service = WorkdayReportService.from_config()
        >>> response = service.generate_monthly_workday_report(payload)
        >>> response.pdf_content[:4]
        b'%PDF'
    """

    def __init__(
        self,
        builder: ReportModelBuilder,
        renderer: Optional[ReportPdfRenderer] = None,
        logo: Optional[bytes] = None,
    ):
        self.builder = builder
        self.renderer = renderer or ReportPdfRenderer()
        self.logo = logo

    @classmethod
    def from_config(
        cls, config: Optional[WorkdayReportConfig] = None
    ) -> "WorkdayReportService":
        """Create a service from configuration.

        Args:
            config: Settings to use; defaults to the global configuration

        Returns:
            Configured WorkdayReportService
        """
        config = config or get_config()
        builder = ReportModelBuilder(
            timezone=config.timezone,
            site_url=config.website_url,
            brand_name=config.brand_name,
        )
        logo = config.load_logo()
        logger.info(
            f"Workday report service initialized "
            f"(timezone={config.report_timezone}, logo={'yes' if logo else 'no'})"
        )
        return cls(builder=builder, logo=logo)

    def build_model(
        self, request: RequestLike, now: Optional[dt.datetime] = None
    ) -> ReportModel:
        """Validate a request and build its report model.

        Raises:
            InvalidLanguageError: If the language is unsupported
            pydantic.ValidationError: If another request field is invalid
            ParseError: If an entry holds a malformed clock string
        """
        request = self._validate(request)
        with LogContext(period=f"{request.month:02d}/{request.year}"):
            return self.builder.build(request, now=now)

    def generate_monthly_workday_pdf(
        self, request: RequestLike, now: Optional[dt.datetime] = None
    ) -> bytes:
        """Build and render the monthly report.

        Args:
            request: MonthlyReportRequest or a raw payload mapping
            now: Generation time for the footer; defaults to now

        Returns:
            PDF document bytes

        Raises:
            InvalidLanguageError: If the language is unsupported
            ParseError: If an entry holds a malformed clock string
            RenderError: If the PDF engine fails
        """
        model = self.build_model(request, now=now)
        logger.debug(f"Creating PDF {model.metadata.title}")
        return self.renderer.render(model, self.logo)

    @log_rpc_call("WorkdayService.GenerateMonthlyWorkdayReport")
    def generate_monthly_workday_report(
        self, request: RequestLike
    ) -> MonthlyReportResponse:
        """RPC handler returning the rendered report."""
        pdf_content = self.generate_monthly_workday_pdf(request)
        return MonthlyReportResponse(pdf_content=pdf_content)

    @staticmethod
    def _validate(request: RequestLike) -> MonthlyReportRequest:
        if isinstance(request, MonthlyReportRequest):
            return request
        return MonthlyReportRequest.model_validate(request)
