"""Rendering of CI host logging commands.

The host scans the job's stdout for lines of the form

    ##vso[<area>.<action> key=value;key=value]data

and acts on them. These helpers only build the text; writing it is the
job of a HostLogWriter (see writer.py).

Escaping follows the host agent:
  property values — %, \\r, \\n, ;, ]
  data            — %, \\r, \\n
"""

from buildtask.status.types import Severity, TaskState

COMMAND_PREFIX = "##vso["

_PROPERTY_ESCAPES = (
    ("%", "%AZP25"),
    ("\r", "%0D"),
    ("\n", "%0A"),
    (";", "%3B"),
    ("]", "%5D"),
)

_DATA_ESCAPES = (
    ("%", "%AZP25"),
    ("\r", "%0D"),
    ("\n", "%0A"),
)


def escape_property(value: str) -> str:
    for raw, escaped in _PROPERTY_ESCAPES:
        value = value.replace(raw, escaped)
    return value


def escape_data(value: str) -> str:
    for raw, escaped in _DATA_ESCAPES:
        value = value.replace(raw, escaped)
    return value


def render_command(
    kind: str,
    properties: dict[str, str] | None = None,
    data: str = "",
) -> str:
    """Render one host command line, e.g. render_command("task.complete", {"result": "Failed"})."""
    props = ";".join(
        f"{key}={escape_property(str(value))}"
        for key, value in (properties or {}).items()
    )
    header = f"{COMMAND_PREFIX}{kind} {props}]" if props else f"{COMMAND_PREFIX}{kind}]"
    return header + escape_data(data)


def log_issue(severity: Severity | str, message: str) -> str:
    return render_command(
        "task.logissue",
        {"type": Severity.coerce(severity).value},
        message,
    )


def task_complete(result: TaskState) -> str:
    return render_command("task.complete", {"result": result.value})


def artifact_upload(container_folder: str, artifact_name: str, path: str) -> str:
    return render_command(
        "artifact.upload",
        {"containerfolder": container_folder, "artifactname": artifact_name},
        path,
    )
