"""Archive expansion for published bundles.

Only zip archives are expanded. Every member path is checked before
anything is written, so an archive containing an escaping entry leaves
nothing behind in the destination.
"""

import logging
import zipfile
import zlib
from pathlib import Path, PurePosixPath

from buildtask.errors.types import ArchiveExpansionError

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIXES = frozenset({".zip"})


def is_archive(path: Path) -> bool:
    """True when the file extension marks an expandable archive (case-insensitive)."""
    return path.suffix.lower() in ARCHIVE_SUFFIXES


def expand_archive(archive: Path, dest_dir: Path) -> list[Path]:
    """Expand `archive` into `dest_dir` and return the files written.

    Raises:
        ArchiveExpansionError: if the archive is unreadable or a member
            would land outside dest_dir.
        OSError: if dest_dir cannot be created.
    """
    dest_dir.mkdir(parents=True, exist_ok=True)

    try:
        with zipfile.ZipFile(archive) as zf:
            members = zf.infolist()
            for member in members:
                _validate_member(archive, member.filename)
            zf.extractall(dest_dir)
    except zipfile.BadZipFile as exc:
        raise ArchiveExpansionError(str(archive), f"not a valid zip archive ({exc})") from exc
    except (zlib.error, EOFError) as exc:
        raise ArchiveExpansionError(str(archive), f"corrupt member data ({exc})") from exc
    except NotImplementedError as exc:
        raise ArchiveExpansionError(str(archive), f"unsupported compression ({exc})") from exc
    except RuntimeError as exc:
        # zipfile raises RuntimeError for encrypted members
        raise ArchiveExpansionError(str(archive), f"unreadable member ({exc})") from exc

    written = [dest_dir / m.filename for m in members if not m.is_dir()]
    logger.info("Expanded %s into %s (%d files)", archive.name, dest_dir, len(written))
    return written


def _validate_member(archive: Path, name: str) -> None:
    """Reject member names that could escape the destination directory."""
    if not name:
        raise ArchiveExpansionError(str(archive), "member with empty name")
    if "\x00" in name:
        raise ArchiveExpansionError(str(archive), f"null byte in member {name!r}")

    normalised = name.replace("\\", "/")
    member_path = PurePosixPath(normalised)
    if member_path.is_absolute() or (len(normalised) > 1 and normalised[1] == ":"):
        raise ArchiveExpansionError(str(archive), f"absolute member path {name!r}")
    if ".." in member_path.parts:
        raise ArchiveExpansionError(str(archive), f"path traversal in member {name!r}")
