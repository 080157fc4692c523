"""
Report aggregation and summary formatting.
"""

from typing import List, Sequence, Tuple

from ..models.report import JobReport


STATUS_SUCCESSFUL = "Successful"
STATUS_FAILED = "Failed"

REPORT_TEMPLATE = (
    "Importer type: {job_type}\n"
    "Importable DataSets: {expected_count}\n"
    "Imported DataSets: {imported_count}\n"
    "Import Time Used: {elapsed_millis:.2f} ms\n"
    "Import status: {status}"
)


def status_label(is_success: bool) -> str:
    return STATUS_SUCCESSFUL if is_success else STATUS_FAILED


def overall_status_line(is_success: bool) -> str:
    return f"Overall Import status: {status_label(is_success)}"


class ReportAggregator:
    """Folds job reports into one outcome and a printable summary."""

    def aggregate(self, reports: Sequence[JobReport]) -> Tuple[bool, List[str]]:
        """
        Aggregate job reports.

        Args:
            reports: Reports in execution order

        Returns:
            Overall success (every report and sub-report succeeded) and the
            summary lines of all reports, depth-first
        """
        overall_success = all(report.is_fully_successful() for report in reports)

        summary_lines = []
        for report in reports:
            for nested_report in report.iter_reports():
                summary_lines.extend(self.format_report(nested_report))

        return overall_success, summary_lines

    def format_report(self, report: JobReport) -> List[str]:
        """Render one report, without its sub-reports."""
        return REPORT_TEMPLATE.format(
            job_type=report.job_type,
            expected_count=report.expected_count,
            imported_count=report.imported_count,
            elapsed_millis=report.elapsed_millis,
            status=status_label(report.is_success)
        ).splitlines()
