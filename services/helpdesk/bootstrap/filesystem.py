"""Working directories and platform tools needed by backup and restore."""
from __future__ import annotations

import logging
import shutil
import sys
import zipfile
from functools import partial
from pathlib import Path
from typing import List

import requests
from packaging.version import InvalidVersion, Version

from .pipeline import BootstrapContext, fan_out

logger = logging.getLogger(__name__)

STAGING_DIRECTORIES = ("backups", "restores")
TOOL_BINARIES = ("pg_dump.exe", "pg_restore.exe")


def ensure_directories(context: BootstrapContext) -> List[Path]:
    paths = [context.app_root / name for name in STAGING_DIRECTORIES]
    fan_out(
        "ensure_directories",
        [(str(path), partial(path.mkdir, parents=True, exist_ok=True)) for path in paths],
        max_workers=context.max_workers,
    )
    return paths


def _is_windows() -> bool:
    return sys.platform == "win32"


def tools_archive_name(database_version: str) -> str:
    version = Version(database_version)
    return f"pgsql-tools.{version.major}.{version.minor}-win32x64.zip"


def _clear_directory(directory: Path) -> None:
    for child in directory.iterdir():
        if child.is_dir():
            shutil.rmtree(child)
        else:
            child.unlink()


def provision_backup_tools(context: BootstrapContext) -> Path | None:
    """Download the database dump/restore binaries on Windows hosts.

    Download or unpack failures are logged and do not fail the step.
    """

    if not _is_windows():
        return None

    try:
        filename = tools_archive_name(context.database_version)
    except InvalidVersion:
        logger.warning("Cannot parse database version %r; skipping tools download", context.database_version)
        return None

    target = context.app_root / "backup" / "bin" / "win32"
    target.mkdir(parents=True, exist_ok=True)
    if all((target / binary).exists() for binary in TOOL_BINARIES):
        return target

    if not context.backup_tools_url:
        logger.warning("BACKUP_TOOLS_URL is not configured; skipping tools download")
        return None

    url = context.backup_tools_url.rstrip("/") + "/" + filename
    archive = target / filename
    logger.info("Windows platform detected. Downloading database tools [%s]", filename)
    try:
        _clear_directory(target)
        with requests.get(url, stream=True, timeout=context.backup_tools_timeout) as response:
            response.raise_for_status()
            with archive.open("wb") as handle:
                for chunk in response.iter_content(chunk_size=64 * 1024):
                    handle.write(chunk)
        with zipfile.ZipFile(archive) as bundle:
            bundle.extractall(target)
    except (requests.RequestException, zipfile.BadZipFile, OSError) as exc:
        logger.warning("Downloading database tools from %s failed: %s", url, exc)
        return None
    finally:
        archive.unlink(missing_ok=True)
    return target
