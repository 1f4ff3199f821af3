"""Calibration range checks for the Studentised maximum range evaluators.

The empirical integration-limit fits are calibrated for k <= 1000 and
nrng <= 100. Inputs beyond that are still evaluated (with reduced accuracy
guarantees); this module reports them as structured messages instead of
rejecting them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from ..statistics.max_range_distribution import NRNG_CALIBRATION_MAX
from ..statistics.range_distribution import K_CALIBRATION_MAX


class CalibrationStatus(Enum):
    """Whether parameters fall inside the calibrated range."""
    OK = "ok"
    WARNING = "warning"  # evaluated best-effort, accuracy not guaranteed


@dataclass
class CalibrationReport:
    """Outcome of a calibration range check."""
    k: int
    nrng: int
    status: CalibrationStatus = CalibrationStatus.OK
    messages: List[str] = field(default_factory=list)

    @property
    def within_calibration(self) -> bool:
        return self.status == CalibrationStatus.OK

    def to_dict(self) -> Dict:
        return {
            "k": self.k,
            "nrng": self.nrng,
            "status": self.status.value,
            "messages": list(self.messages),
        }


def check_calibration(k: int, nrng: int = 1) -> CalibrationReport:
    """Check k and nrng against the calibrated range of the limit fits."""
    report = CalibrationReport(k=k, nrng=nrng)

    if k > K_CALIBRATION_MAX:
        report.status = CalibrationStatus.WARNING
        report.messages.append(
            f"k={k} exceeds {K_CALIBRATION_MAX}: integration limits for "
            f"k={K_CALIBRATION_MAX} are used and accuracy is not guaranteed"
        )

    if nrng > NRNG_CALIBRATION_MAX:
        report.status = CalibrationStatus.WARNING
        report.messages.append(
            f"nrng={nrng} exceeds {NRNG_CALIBRATION_MAX}: integration limits are "
            f"extrapolated and accuracy is not guaranteed"
        )

    return report
