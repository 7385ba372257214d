"""Example reports and the name → report registry."""
from xlreports.reports.base import Report
from xlreports.reports.no_styles import ExampleReportNoStyles
from xlreports.reports.with_styles import ExampleReportWithStyles
from xlreports.reports.border_presets import ExampleReportBorderPresets
from xlreports.utils.exceptions import UnknownReportError

REPORTS: dict[str, type[Report]] = {
    report.name: report
    for report in (ExampleReportNoStyles, ExampleReportWithStyles, ExampleReportBorderPresets)
}


def get_report(name: str) -> Report:
    try:
        return REPORTS[name]()
    except KeyError:
        raise UnknownReportError(name, sorted(REPORTS)) from None
