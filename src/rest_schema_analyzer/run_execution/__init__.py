"""Run execution domain exports."""

from .analysis_run_use_case import AnalysisRunError, execute_schema_analysis_run
from .run_contracts import AnalysisInputs, AnalysisOutcome, AnalysisRequest

__all__ = [
    "AnalysisRequest",
    "AnalysisOutcome",
    "AnalysisInputs",
    "AnalysisRunError",
    "execute_schema_analysis_run",
]
