from __future__ import annotations

from typing import Callable, Optional

import psutil

from .errors import HardwareProbeError
from .schemas import Hardware

HardwareProbe = Callable[[], Hardware]


def _cpu_count(logical: bool) -> Optional[int]:
    kind = "logical" if logical else "physical"
    try:
        return psutil.cpu_count(logical=logical)
    except Exception as exc:
        raise HardwareProbeError(f"reading {kind} core count: {exc}") from exc


def logical_core_count() -> int:
    count = _cpu_count(logical=True)
    if count is None:
        raise HardwareProbeError("logical core count unavailable")
    return count


def physical_core_count() -> int:
    """Physical cores, or the logical count when the host does not report them."""
    count = _cpu_count(logical=False)
    if count is None:
        return logical_core_count()
    return count


def probe_hardware() -> Hardware:
    """Query the host for its core counts. Nothing is cached."""
    logical = logical_core_count()
    physical = physical_core_count()
    return Hardware(cpu_count=physical, core_count=logical)
