"""Reporting helpers for solved games."""

from .report import SolveReport, format_report, summarize, winner_share

__all__ = ["SolveReport", "format_report", "summarize", "winner_share"]
