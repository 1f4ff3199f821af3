"""Calibration range checks for the probability evaluators."""

from .calibration import (
    CalibrationStatus,
    CalibrationReport,
    check_calibration,
)

__all__ = [
    "CalibrationStatus",
    "CalibrationReport",
    "check_calibration",
]
