"""
Report content for the PDF export.

PDF layout and chart capture stay with the rendering library; this package
produces the rows and texts it lays out.
"""

from studystats.report.summary_table import (
    RECOMMENDATIONS_SECTION_TITLE,
    REPORT_TITLE,
    SESSION_HEADER,
    SESSION_ROWS_LIMIT,
    SESSIONS_SECTION_TITLE,
    SUMMARY_HEADER,
    SUMMARY_SECTION_TITLE,
    ReportRow,
    StudyReport,
    build_session_rows,
    build_study_report,
    build_summary_rows,
)

__all__ = [
    "RECOMMENDATIONS_SECTION_TITLE",
    "REPORT_TITLE",
    "SESSION_HEADER",
    "SESSION_ROWS_LIMIT",
    "SESSIONS_SECTION_TITLE",
    "SUMMARY_HEADER",
    "SUMMARY_SECTION_TITLE",
    "ReportRow",
    "StudyReport",
    "build_session_rows",
    "build_study_report",
    "build_summary_rows",
]
