"""
Report and batch data models for the Data Import Orchestrator

Defines the report an import engine returns for one job, the result an
importer handler hands back to the engine, and the entries of a batch plan.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Iterator


@dataclass(frozen=True)
class BatchEntry:
    """One job of a batch plan, in execution order."""

    job_type: str
    source_location: str


@dataclass(frozen=True)
class ImporterResult:
    """Counters returned by a single importer handler."""

    expected_count: int = 0
    imported_count: int = 0
    is_success: bool = True
    error_message: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImporterResult":
        """Create result from dictionary."""
        return cls(
            expected_count=int(data.get("expected_count", 0)),
            imported_count=int(data.get("imported_count", 0)),
            is_success=bool(data.get("is_success", True)),
            error_message=data.get("error_message")
        )


@dataclass
class JobReport:
    """Result of one job run, possibly nesting sub-job reports."""

    job_type: str
    expected_count: int = 0
    imported_count: int = 0
    elapsed_millis: float = 0.0
    is_success: bool = True
    sub_reports: List["JobReport"] = field(default_factory=list)
    error_message: Optional[str] = None

    def iter_reports(self) -> Iterator["JobReport"]:
        """Yield this report and all nested sub-reports depth-first."""
        yield self
        for sub_report in self.sub_reports:
            yield from sub_report.iter_reports()

    def is_fully_successful(self) -> bool:
        """Check that this report and every nested sub-report succeeded."""
        return all(report.is_success for report in self.iter_reports())

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary."""
        return {
            "job_type": self.job_type,
            "expected_count": self.expected_count,
            "imported_count": self.imported_count,
            "elapsed_millis": self.elapsed_millis,
            "is_success": self.is_success,
            "sub_reports": [report.to_dict() for report in self.sub_reports],
            "error_message": self.error_message
        }
