"""
Plain-text rendering of an ATS analysis.

Issues are grouped by category (format, content, structure) the way a UI
would present them; within a group they keep detector emission order.
"""

from atscheck.contexts.analysis.issues import Analysis
from atscheck.utils.report_formatter import Column, TableFormatter

REPORT_WIDTH = 90

ISSUE_COLUMNS = [
    Column("Severity", 9),
    Column("Fixable", 8),
    Column("Description", 70, truncate=True),
]


def format_analysis_report(analysis: Analysis, title: str = "ATS Compliance Report") -> str:
    """
    Render an analysis as a readable text report.

    Args:
        analysis: Result of run_ats_analysis()
        title: Report heading

    Returns:
        Multi-line report string
    """
    badge = analysis.badge
    report = TableFormatter(ISSUE_COLUMNS, total_width=REPORT_WIDTH)

    report.add_section_header(title)
    report.add_text(f"Score: {analysis.score}/100 ({badge.label})")
    report.add_blank_line()

    if analysis.passed_checks:
        report.add_text(f"Passed checks ({len(analysis.passed_checks)}):")
        report.add_list(list(analysis.passed_checks), marker="[x]")
        report.add_blank_line()

    if not analysis.issues:
        report.add_text("No issues found.")
        return report.render()

    report.add_text(f"Issues ({len(analysis.issues)}, {len(analysis.fixable_issues)} auto-fixable):")

    for category, issues in analysis.issues_by_category().items():
        if not issues:
            continue

        report.add_blank_line()
        report.add_text(category.value.upper())
        report.add_table_header()
        for issue in issues:
            report.add_row(
                [issue.severity.value, "yes" if issue.auto_fixable else "no", issue.description]
            )
            if issue.location_hint:
                report.add_text(f"{'':19}at: {issue.location_hint}")
            report.add_text(f"{'':19}fix: {issue.remedy}")

    return report.render()
