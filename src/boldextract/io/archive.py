"""Single-entry retrieval from zip containers.

:func:`fetch_entry` opens a container, reads one named member and closes the
container again before returning, whether the read succeeded or not.  Nothing
is written and nothing is cached; every call reopens the file.
"""

from __future__ import annotations

import os
import zipfile

from ..utils.errors import ContainerOpenError, EntryNotFoundError
from ..utils.logging import get_logger

log = get_logger(__name__)


def fetch_entry(container_path: str | os.PathLike[str], entry_name: str) -> bytes:
    """Return the decompressed bytes of ``entry_name`` inside ``container_path``.

    Raises
    ------
    ContainerOpenError
        The container is missing, unreadable, corrupt or not a zip file.
    EntryNotFoundError
        ``entry_name`` is not a member of the container.
    """

    try:
        archive = zipfile.ZipFile(container_path)
    except (OSError, zipfile.BadZipFile) as exc:
        raise ContainerOpenError(f"Unable to open archive file {container_path}") from exc

    with archive:
        try:
            info = archive.getinfo(entry_name)
        except KeyError:
            raise EntryNotFoundError(
                f"Unable to locate {entry_name} in archive {container_path}"
            ) from None
        try:
            data = archive.read(info)
        except (OSError, zipfile.BadZipFile, NotImplementedError) as exc:
            raise ContainerOpenError(
                f"Unable to read {entry_name} from archive {container_path}: {exc}"
            ) from exc

    log.debug("Fetched %s from %s (%d bytes)", entry_name, container_path, len(data))
    return data


__all__ = ["fetch_entry"]
