"""sha3fics: wide SHA-3 family digests for files, wildcards and directories.

Results are written to deterministic, sorted ``.sha3`` manifest files.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "sha3fics"


def package_version() -> str:
    """Installed distribution version; a local marker when running from a checkout."""

    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0+local"


__version__ = package_version()
