"""Error formatting — turns caught errors into host error messages.

Formatting is not cosmetic: every rendered line is reported as an
error-severity issue, which is how a single caught exception fails the
job. Nothing here re-raises; the worst outcome of format() is a FAILED
job state.
"""

import json
import logging
import traceback
from typing import Any

from buildtask.errors.types import (
    ErrorRecord,
    ParseErrorRecord,
    RemoteError,
    RemoteErrorRecord,
    RuntimeErrorRecord,
    UnrecognizedError,
)
from buildtask.hostlog.channel import HostLog

logger = logging.getLogger(__name__)

# Guards against cyclic or very deep __cause__ chains
MAX_CAUSE_DEPTH = 5


def classify(obj: Any, _depth: int = 0) -> ErrorRecord:
    """Map an arbitrary error-like object onto an ErrorRecord."""
    if isinstance(obj, RemoteError):
        return RemoteErrorRecord(
            message=str(obj),
            origin=obj.origin,
            stack=obj.remote_stack,
            local_stack=_stack_of(obj),
        )

    if isinstance(obj, json.JSONDecodeError):
        return ParseErrorRecord(
            type_name=type(obj).__name__,
            message=obj.msg,
            location=f"line {obj.lineno}, column {obj.colno} (char {obj.pos})",
            stack=_stack_of(obj),
        )

    if isinstance(obj, SyntaxError):
        return ParseErrorRecord(
            type_name=type(obj).__name__,
            message=obj.msg or str(obj),
            location=_syntax_location(obj),
            source_line=(obj.text or "").rstrip(),
            stack=_stack_of(obj),
        )

    if isinstance(obj, BaseException):
        cause = None
        if obj.__cause__ is not None and _depth < MAX_CAUSE_DEPTH:
            cause = classify(obj.__cause__, _depth + 1)
        return RuntimeErrorRecord(
            type_name=type(obj).__name__,
            message=str(obj),
            stack=_stack_of(obj),
            cause=cause,
        )

    return UnrecognizedError(type_name=type(obj).__name__, text=_safe_str(obj))


def render(record: ErrorRecord) -> str:
    """Render a record as multi-line text."""
    match record:
        case RemoteErrorRecord(message=message, origin=origin, stack=stack, local_stack=local):
            parts = [f"Remote error from {origin}: {message}"]
            if stack:
                parts.append("Remote stack:")
                parts.append(stack)
            if local:
                parts.append("Reported at:")
                parts.append(local)
            return "\n".join(parts)

        case ParseErrorRecord(type_name=name, message=message, location=location, source_line=src, stack=stack):
            parts = [f"{name}: {message}"]
            if location:
                parts.append(f"  at {location}")
            if src:
                parts.append(f"    {src.strip()}")
            if stack:
                parts.append(stack)
            return "\n".join(parts)

        case RuntimeErrorRecord(type_name=name, message=message, stack=stack, cause=cause):
            parts = [f"{name}: {message}" if message else name]
            if stack:
                parts.append(stack)
            if cause is not None:
                parts.append("Caused by:")
                parts.append(render(cause))
            return "\n".join(parts)

        case UnrecognizedError(text=text):
            return text

    raise TypeError(f"Not an ErrorRecord: {type(record).__name__}")


class ErrorFormatter:
    """Formats errors and reports them through a session's host log."""

    def __init__(self, host_log: HostLog) -> None:
        self.host_log = host_log

    def format(self, obj: Any) -> list[str]:
        """Report `obj` as one error issue per rendered line.

        Returns the reported lines.
        """
        record = classify(obj)
        if isinstance(record, UnrecognizedError):
            logger.info(
                "Unrecognized error type %s rendered via str(); "
                "consider adding a dedicated error kind",
                record.type_name,
            )

        lines = [line for line in render(record).splitlines() if line.strip()]
        if not lines:
            lines = [f"Unknown error ({_type_label(record)})"]

        for line in lines:
            self.host_log.error(line)
        return lines


def _stack_of(exc: BaseException) -> str:
    if exc.__traceback__ is None:
        return ""
    return "".join(traceback.format_tb(exc.__traceback__)).rstrip()


def _syntax_location(exc: SyntaxError) -> str:
    parts = []
    if exc.filename:
        parts.append(f'file "{exc.filename}"')
    if exc.lineno:
        parts.append(f"line {exc.lineno}")
    if exc.offset:
        parts.append(f"column {exc.offset}")
    return ", ".join(parts)


def _safe_str(obj: Any) -> str:
    try:
        return str(obj)
    except Exception as exc:
        logger.debug("str() failed for %s: %s", type(obj).__name__, exc)
        return object.__repr__(obj)


def _type_label(record: ErrorRecord) -> str:
    return getattr(record, "type_name", "") or type(record).__name__
