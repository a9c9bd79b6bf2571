"""Command line entry point.

    python -m buildtask publish out/ dist/app.zip --bucket release
    python -m buildtask complete

Each invocation is one session: paths are published in order, then
task.complete is emitted with the aggregated result. The exit status is
1 when the result is Failed, else 0.
"""

import argparse
import sys
from typing import Optional

import structlog

from buildtask.core.config import get_settings
from buildtask.core.logging import configure_logging
from buildtask.hostlog.writer import HostLogWriter
from buildtask.session import BuildSession
from buildtask.status.types import TaskState


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buildtask",
        description="Report build status and publish artifacts to the CI host",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    publish = sub.add_parser("publish", help="Publish files and complete the task")
    publish.add_argument("paths", nargs="+", help="Files or directories to publish")
    publish.add_argument("--bucket", help="Bucket under the staging root (default: release)")

    sub.add_parser("complete", help="Emit task completion for an empty session")
    return parser


def main(argv: Optional[list[str]] = None, writer: Optional[HostLogWriter] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(debug=settings.debug)
    log = structlog.get_logger("buildtask.cli")

    session = BuildSession.create(writer=writer, settings=settings)

    if args.command == "publish":
        for path in args.paths:
            try:
                result = session.publish(path, args.bucket)
            except OSError as exc:
                session.report_error(exc)
                log.error("publish aborted", path=path, error=str(exc))
                continue
            log.info(
                "published",
                path=path,
                uploaded=len(result.uploaded),
                skipped=len(result.skipped),
                failed=len(result.failed),
            )

    state = session.complete()
    log.info("session complete", result=state.value)
    return 1 if state is TaskState.FAILED else 0


if __name__ == "__main__":
    sys.exit(main())
