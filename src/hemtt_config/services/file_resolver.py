"""Resolve the list of files copied into the root of a built mod."""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

# Checked in this order, relative to the working directory
DEFAULT_ROOT_FILES = (
    "mod.cpp",
    "meta.cpp",
    "LICENSE",
    "logo_ca.paa",
    "logo_co.paa",
)


def resolve_root_files(
    declared: Iterable[str],
    exists: Callable[[Path], bool] = Path.exists,
) -> list[str]:
    """Declared files plus default root files present on disk.

    A default already in ``declared`` is not probed. Matching is by exact
    string, so ``./LICENSE`` and ``LICENSE`` are different entries. Glob
    patterns in ``declared`` are passed through untouched.
    """
    files = list(declared)
    for default in DEFAULT_ROOT_FILES:
        if default in files:
            continue
        if exists(Path(default)):
            logger.debug("Including default root file %s", default)
            files.append(default)
    return sorted(set(files))
