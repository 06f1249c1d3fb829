"""
Configuration module for the workday report service.
"""
from .logging_config import LoggingConfig, configure_logging
from .settings import (
    WorkdayReportConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'LoggingConfig',
    'WorkdayReportConfig',
    'configure_logging',
    'get_config',
    'load_config',
    'reload_config'
]
