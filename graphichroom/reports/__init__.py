"""Aggregation engine package."""

from graphichroom.reports.aggregation import (
    LONG_MONTH_NAMES,
    SHORT_MONTH_NAMES,
    bucket_by_category,
    bucket_by_month,
    compute_dashboard_stats,
    compute_report_stats,
    filter_by_substring,
    month_label,
    month_name,
)

__all__ = [
    "LONG_MONTH_NAMES",
    "SHORT_MONTH_NAMES",
    "bucket_by_category",
    "bucket_by_month",
    "compute_dashboard_stats",
    "compute_report_stats",
    "filter_by_substring",
    "month_label",
    "month_name",
]
