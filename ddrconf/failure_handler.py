# ddrconf/failure_handler.py
# FailureHandler -- input failure policy for the command-line tools.
#
# Comparison differences are never failures. Only unreadable, corrupt or
# unsupported input (and internal tool faults) end a run with a non-zero
# exit code. The failure summary goes to stderr; stdout carries the report.

import sys
from dataclasses import dataclass
from typing import Dict, Optional, TextIO

from ddrconf.version import TOOL_VERSION

# failure_type_id -> process exit code.
FAILURE_TYPES: Dict[str, int] = {
    "INPUT_NOT_FOUND":     2,
    "INVALID_OPTION":      2,
    "DATA_CORRUPTION":     3,
    "UNSUPPORTED_FORMAT":  3,
    "TOOL_INTERNAL_ERROR": 4,
}


@dataclass(frozen=True)
class FailureRecord:
    failure_type_id: str
    exit_code:       int
    tool:            str
    tool_version:    str
    detail:          str


class FailureHandler:
    """
    On any input failure:
      1. Construct FailureRecord.
      2. Print failure summary to stderr.
      3. Call sys.exit(exit_code).

    Methods:
      handle(failure_type_id, detail)  -- does not return.
      handle_from_exception(exc)       -- parse the failure-type prefix of a
                                          RuntimeError, then handle().
    """

    def __init__(self, tool: str, stream: Optional[TextIO] = None) -> None:
        self._tool   = tool
        self._stream = stream

    def build_record(self, failure_type_id: str, detail: str) -> FailureRecord:
        return FailureRecord(
            failure_type_id=failure_type_id,
            exit_code=FAILURE_TYPES.get(failure_type_id, 4),
            tool=self._tool,
            tool_version=TOOL_VERSION,
            detail=detail,
        )

    def handle(self, failure_type_id: str, detail: str) -> None:
        record = self.build_record(failure_type_id, detail)
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(
            f"{record.tool} {record.tool_version}: FAILED\n"
            f"Failure type: {record.failure_type_id}\n"
            f"Exit code:    {record.exit_code}\n"
            f"Detail:       {record.detail[:500]}\n"
        )
        stream.flush()
        sys.exit(record.exit_code)

    def handle_from_exception(self, exc: Exception) -> None:
        """
        Convention: RuntimeError messages raised by the loaders start with
        FAILURE_TYPE_ID: detail
        """
        msg = str(exc)
        failure_type_id = "TOOL_INTERNAL_ERROR"
        for known_type in FAILURE_TYPES:
            if msg.startswith(known_type + ":") or msg.startswith(known_type + " "):
                failure_type_id = known_type
                break
        self.handle(failure_type_id, msg)
