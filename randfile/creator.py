import os
import time
import logging
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Callable, Optional, Sequence

from randfile.digest import ContentDigest
from randfile.fill import select_fill_mode, describe
from randfile.prompt import confirm as prompt_confirm, file_exists
from randfile.size import SizeError, UnknownSizeSuffix, parse_size, split_size
from randfile.writer import write_sized


logger = logging.getLogger(__name__)


def _log(operation: str, name: str, phase: str, status: str, msg: str = ""):
    # Format: SERVICE, OPERATION, FILENAME, START/END, Status, MSG
    logger.debug(f"CREATOR,{operation},{name},{phase},{status},{msg}")


def _ms(ns_start: int) -> float:
    return (time.perf_counter_ns() - ns_start) / 1e6


class Outcome(Enum):
    DONE = "done"
    CANCELLED = "cancelled"
    INVALID_SIZE_FORMAT = "invalid_size_format"
    UNKNOWN_SIZE_SUFFIX = "unknown_size_suffix"
    INVALID_PATTERNS = "invalid_patterns"
    UNLINK_FAILURE = "unlink_failure"
    FILE_EXISTS = "file_exists"
    OPEN_FAILURE = "open_failure"

    @property
    def status(self) -> int:
        return _STATUS[self][0]

    @property
    def category(self) -> str:
        return _STATUS[self][1]

    @property
    def ok(self) -> bool:
        return self.category in ("ok", "cancelled")


_STATUS = {
    Outcome.DONE: (200, "ok"),
    Outcome.CANCELLED: (200, "cancelled"),
    Outcome.INVALID_SIZE_FORMAT: (400, "client_error"),
    Outcome.UNKNOWN_SIZE_SUFFIX: (400, "client_error"),
    Outcome.INVALID_PATTERNS: (400, "client_error"),
    Outcome.UNLINK_FAILURE: (400, "client_error"),
    Outcome.FILE_EXISTS: (409, "conflict"),
    Outcome.OPEN_FAILURE: (500, "server_error"),
}


@dataclass(frozen=True)
class Result:
    outcome: Outcome
    message: str
    size: Optional[int] = None
    digest: Optional[str] = None

    @property
    def status(self) -> int:
        return self.outcome.status

    def __str__(self):
        return f"{self.status} {self.message}"


def _describe_size(num: int, size: str) -> str:
    _, suffix = split_size(size)
    return f"{num} ({size})" if suffix else str(num)


def create_random_file(name: str,
                       size: str,
                       interactive: bool = True,
                       overwrite: bool = False,
                       random_bytes: bool = False,
                       patterns: Optional[Sequence[str]] = None,
                       rng: Random = None,
                       exists: Callable[[str], bool] = file_exists,
                       confirm: Callable[..., bool] = prompt_confirm,
                       checksum: bool = False) -> Result:
    """
    Create ``name`` holding exactly ``size`` bytes of random data or patterns.

    With no patterns the file is filled with random bytes. One pattern is
    repeated; two or more are picked at random for every repetition.

    An existing file is only replaced after confirmation (interactive) or when
    ``overwrite`` is set (non-interactive). Write errors are not caught: they
    propagate as ``WriteFailure`` and leave the partial file in place.
    """
    t_total = time.perf_counter_ns()
    _log("CREATE", name, "START", "RUN",
         f"size={size};interactive={int(interactive)};overwrite={int(overwrite)};"
         f"patterns={len(patterns or [])}")

    try:
        num = parse_size(size)
    except UnknownSizeSuffix as e:
        _log("CREATE", name, "END", "ERROR", f"phase=PARSE_SIZE;msg={e}")
        return Result(Outcome.UNKNOWN_SIZE_SUFFIX, str(e))
    except SizeError as e:
        _log("CREATE", name, "END", "ERROR", f"phase=PARSE_SIZE;msg={e}")
        return Result(Outcome.INVALID_SIZE_FORMAT, str(e))

    # Patterns are checked before anything on disk is touched.
    try:
        mode = select_fill_mode(patterns)
    except ValueError as e:
        _log("CREATE", name, "END", "ERROR", f"phase=PATTERNS;msg={e}")
        return Result(Outcome.INVALID_PATTERNS, str(e))
    if random_bytes and patterns:
        logger.warning("Both random bytes and patterns requested for %s; using patterns", name)

    if exists(name):
        if interactive:
            if not confirm("Confirm overwrite existing file", default=False):
                _log("CREATE", name, "END", "CANCELLED", "phase=CONFIRM_OVERWRITE")
                return Result(Outcome.CANCELLED, "Cancelled")
        elif not overwrite:
            _log("CREATE", name, "END", "ERROR", "phase=EXISTS;msg=File already exists")
            return Result(Outcome.FILE_EXISTS, "File already exists")
        try:
            os.unlink(name)
        except OSError as e:
            _log("CREATE", name, "END", "ERROR", f"phase=UNLINK;msg={e}")
            return Result(Outcome.UNLINK_FAILURE, f"Can't unlink {name}: {e.strerror or e}")
        _log("CREATE", name, "END", "SUCCESS", "phase=UNLINK")
    elif interactive:
        if not confirm(f"Confirm create '{name}' with size {_describe_size(num, size)}",
                       default=True):
            _log("CREATE", name, "END", "CANCELLED", "phase=CONFIRM_CREATE")
            return Result(Outcome.CANCELLED, "Cancelled")

    try:
        fh = open(name, "wb")
    except OSError as e:
        _log("CREATE", name, "END", "ERROR", f"phase=OPEN;msg={e}")
        return Result(Outcome.OPEN_FAILURE, f"Can't create {name}: {e.strerror or e}")

    digest = ContentDigest() if checksum else None
    t_write = time.perf_counter_ns()
    with fh:
        written = write_sized(fh, num, mode, rng=rng, digest=digest)

    hexdigest = digest.hexdigest() if digest is not None else None
    _log("CREATE", name, "END", "SUCCESS",
         f"bytes={written};mode={describe(mode)};sha256={hexdigest or 'NA'};"
         f"write_time_ms={_ms(t_write):.3f};total_time_ms={_ms(t_total):.3f}")
    return Result(Outcome.DONE, "Done", size=written, digest=hexdigest)
