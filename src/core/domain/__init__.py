"""
Domain models and value objects.

Contains immutable report models for the scalar operation categories.
"""

from src.core.domain.scalar_reports import (
    ArithmeticReport,
    BitwiseReport,
    ComparisonReport,
    RandomNumbersReport,
    ScalarFunctionsReport,
    TrigonometricReport,
)

__all__ = [
    "ArithmeticReport",
    "BitwiseReport",
    "ComparisonReport",
    "RandomNumbersReport",
    "ScalarFunctionsReport",
    "TrigonometricReport",
]
