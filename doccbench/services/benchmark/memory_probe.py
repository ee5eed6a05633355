"""Platform probes for the peak memory footprint of the current process.

Each probe returns the peak footprint in bytes, or None when the platform
API is unavailable or its answer cannot be read. Probes never raise. The
implementation is chosen once, at import time, from ``sys.platform``.
"""

import ctypes
import ctypes.util
import re
import sys
from typing import Optional, Protocol

from doccbench.core.logging_config import get_logger

logger = get_logger(__name__)

KERN_SUCCESS = 0
TASK_VM_INFO = 22

PROC_STATUS_PATH = "/proc/self/status"
PROC_STATUS_PEAK_TAG = "VmPeak"

_DIGITS = re.compile(r"\d+")


class MemoryProbe(Protocol):
    """Interface for reading the process peak memory footprint."""

    def peak_memory(self) -> Optional[float]:
        """Return the peak memory footprint in bytes, or None if unavailable."""
        ...


class _TaskVMInfo(ctypes.Structure):
    """``task_vm_info_data_t`` up to revision 5 (``mach/task_info.h``)."""
    _pack_ = 4
    _fields_ = [
        ("virtual_size", ctypes.c_uint64),
        ("region_count", ctypes.c_int32),
        ("page_size", ctypes.c_int32),
        ("resident_size", ctypes.c_uint64),
        ("resident_size_peak", ctypes.c_uint64),
        ("device", ctypes.c_uint64),
        ("device_peak", ctypes.c_uint64),
        ("internal", ctypes.c_uint64),
        ("internal_peak", ctypes.c_uint64),
        ("external", ctypes.c_uint64),
        ("external_peak", ctypes.c_uint64),
        ("reusable", ctypes.c_uint64),
        ("reusable_peak", ctypes.c_uint64),
        ("purgeable_volatile_pmap", ctypes.c_uint64),
        ("purgeable_volatile_resident", ctypes.c_uint64),
        ("purgeable_volatile_virtual", ctypes.c_uint64),
        ("compressed", ctypes.c_uint64),
        ("compressed_peak", ctypes.c_uint64),
        ("compressed_lifetime", ctypes.c_uint64),
        # rev1
        ("phys_footprint", ctypes.c_uint64),
        # rev2
        ("min_address", ctypes.c_uint64),
        ("max_address", ctypes.c_uint64),
        # rev3
        ("ledger_phys_footprint_peak", ctypes.c_int64),
        ("ledger_purgeable_nonvolatile", ctypes.c_int64),
        ("ledger_purgeable_novolatile_compressed", ctypes.c_int64),
        ("ledger_purgeable_volatile", ctypes.c_int64),
        ("ledger_purgeable_volatile_compressed", ctypes.c_int64),
        ("ledger_tag_network_nonvolatile", ctypes.c_int64),
        ("ledger_tag_network_nonvolatile_compressed", ctypes.c_int64),
        ("ledger_tag_network_volatile", ctypes.c_int64),
        ("ledger_tag_network_volatile_compressed", ctypes.c_int64),
        ("ledger_tag_media_footprint", ctypes.c_int64),
        ("ledger_tag_media_footprint_compressed", ctypes.c_int64),
        ("ledger_tag_media_nofootprint", ctypes.c_int64),
        ("ledger_tag_media_nofootprint_compressed", ctypes.c_int64),
        ("ledger_tag_graphics_footprint", ctypes.c_int64),
        ("ledger_tag_graphics_footprint_compressed", ctypes.c_int64),
        ("ledger_tag_graphics_nofootprint", ctypes.c_int64),
        ("ledger_tag_graphics_nofootprint_compressed", ctypes.c_int64),
        ("ledger_tag_neural_footprint", ctypes.c_int64),
        ("ledger_tag_neural_footprint_compressed", ctypes.c_int64),
        ("ledger_tag_neural_nofootprint", ctypes.c_int64),
        ("ledger_tag_neural_nofootprint_compressed", ctypes.c_int64),
        # rev4
        ("limit_bytes_remaining", ctypes.c_uint64),
        # rev5
        ("decompressions", ctypes.c_int32),
    ]


class MachTaskInfoProbe:
    """Reads ``ledger_phys_footprint_peak`` through the Mach ``task_info`` call.

    The value is comparable to the memory gauge shown by Apple's debugging
    tools.
    """

    def __init__(self, library_path: Optional[str] = None):
        self.library_path = library_path or ctypes.util.find_library("c") or "/usr/lib/libSystem.B.dylib"

    def peak_memory(self) -> Optional[float]:
        try:
            libc = ctypes.CDLL(self.library_path)
            task_self = ctypes.c_uint32.in_dll(libc, "mach_task_self_")
            task_info = libc.task_info
        except (OSError, AttributeError, ValueError) as e:
            logger.debug(f"Mach task_info unavailable: {e}")
            return None

        task_info.restype = ctypes.c_int
        task_info.argtypes = [
            ctypes.c_uint32,
            ctypes.c_int,
            ctypes.POINTER(_TaskVMInfo),
            ctypes.POINTER(ctypes.c_uint32),
        ]

        info = _TaskVMInfo()
        # Count is expressed in natural_t (32-bit) units
        count = ctypes.c_uint32(ctypes.sizeof(_TaskVMInfo) // 4)
        status = task_info(task_self.value, TASK_VM_INFO, ctypes.byref(info), ctypes.byref(count))
        if status != KERN_SUCCESS:
            logger.debug(f"task_info(TASK_VM_INFO) failed with status {status}")
            return None
        return float(info.ledger_phys_footprint_peak)


class ProcStatusProbe:
    """Reads the ``VmPeak`` line of the proc file system process status."""

    def __init__(self, status_path: str = PROC_STATUS_PATH):
        self.status_path = status_path

    def peak_memory(self) -> Optional[float]:
        try:
            with open(self.status_path, "r", encoding="utf-8") as f:
                status = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Cannot read {self.status_path}: {e}")
            return None
        return parse_peak_memory(status)


def parse_peak_memory(status: str) -> Optional[float]:
    """Extract the ``VmPeak`` value from process status text, in bytes.

    The kernel reports the value in kibibytes.
    """
    line = next((l for l in status.splitlines() if l.startswith(PROC_STATUS_PEAK_TAG)), None)
    if line is None:
        logger.debug(f"No {PROC_STATUS_PEAK_TAG} line in process status")
        return None

    digits = _DIGITS.search(line)
    if digits is None:
        logger.debug(f"Malformed {PROC_STATUS_PEAK_TAG} line: {line!r}")
        return None
    return float(digits.group()) * 1024


class PsutilPeakProbe:
    """Reads the peak working set size reported by psutil on Windows."""

    def peak_memory(self) -> Optional[float]:
        try:
            # Lazy import psutil to avoid hard dependency at module load
            import psutil

            peak = getattr(psutil.Process().memory_info(), "peak_wset", None)
        except ImportError:
            logger.debug("psutil not available - peak memory disabled")
            return None
        except psutil.Error as e:
            logger.debug(f"psutil failed to read memory info: {e}")
            return None
        return float(peak) if peak is not None else None


class NullMemoryProbe:
    """Probe for platforms without a supported memory API."""

    def peak_memory(self) -> Optional[float]:
        return None


def select_memory_probe(platform: str = sys.platform) -> MemoryProbe:
    """Return the probe implementation for the given ``sys.platform`` value."""
    if platform in ("darwin", "ios"):
        return MachTaskInfoProbe()
    if platform.startswith("linux"):
        return ProcStatusProbe()
    if platform == "win32":
        return PsutilPeakProbe()
    return NullMemoryProbe()


memory_probe: MemoryProbe = select_memory_probe()
