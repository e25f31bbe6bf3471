"""Version and build information.

The build string names the git commit the running code came from. It is
looked up, in order, in a live checkout, in ``_build_info.py`` (written by
the hatch build hook), and in PEP 610 ``direct_url.json`` metadata.
"""

from __future__ import annotations

import importlib.metadata
import json
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional

DISTRIBUTION = "poststyle"


class BuildInfo(NamedTuple):
    commit: Optional[str]
    date: Optional[str]
    dirty: bool = False


UNKNOWN = BuildInfo(commit=None, date=None)


def package_version() -> str:
    try:
        return importlib.metadata.version(DISTRIBUTION)
    except importlib.metadata.PackageNotFoundError:
        return "0+unknown"


def _git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL
        )
    except (subprocess.CalledProcessError, OSError):
        return None
    return out.decode().strip() or None


def _from_git_checkout() -> Optional[BuildInfo]:
    here = Path(__file__).resolve().parent
    root = _git(["rev-parse", "--show-toplevel"], here)
    if root is None:
        return None
    status = _git(["status", "--porcelain"], Path(root))
    return BuildInfo(
        commit=_git(["rev-parse", "HEAD"], Path(root)),
        date=_git(["show", "-s", "--format=%cI", "HEAD"], Path(root)),
        dirty=bool(status),
    )


def _from_build_file() -> Optional[BuildInfo]:
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    return BuildInfo(
        commit=getattr(_build_info, "COMMIT", None),
        date=getattr(_build_info, "DATE", None),
    )


def _from_direct_url() -> Optional[BuildInfo]:
    try:
        text = importlib.metadata.distribution(DISTRIBUTION).read_text("direct_url.json")
    except importlib.metadata.PackageNotFoundError:
        return None
    if not text:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    commit = (data.get("vcs_info") or {}).get("commit_id")
    return BuildInfo(commit=commit, date=None) if commit else None


def get_build_info() -> BuildInfo:
    for source in (_from_git_checkout, _from_build_file, _from_direct_url):
        info = source()
        if info and (info.commit or info.date):
            return info
    return UNKNOWN


def get_version_string() -> str:
    """``<version> (<short commit>[-dirty] <commit date>)``."""
    info = get_build_info()
    commit = info.commit[:7] if info.commit else "unknown"
    dirty = "-dirty" if info.dirty else ""
    return f"{package_version()} ({commit}{dirty} {info.date or 'unknown'})"
