"""Reporting helpers for exporting chart and table outputs."""

from .report_generator import ReportGenerator

__all__ = ["ReportGenerator"]
