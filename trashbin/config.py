"""Installation directories and package metadata."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass

GETTEXT_PACKAGE = "budgie-desktop"
_PACKAGE_DIR = "budgie-desktop"


@dataclass(frozen=True)
class BudgieConfig:
    """Where the desktop's modules, plugins and data are installed."""

    module_directory: str
    module_data_directory: str
    raven_plugin_libdir: str
    raven_plugin_datadir: str
    datadir: str
    version: str
    localedir: str
    confdir: str
    gettext_package: str = GETTEXT_PACKAGE
    website: str | None = None
    module_directory_secondary: str | None = None
    module_data_directory_secondary: str | None = None
    raven_plugin_libdir_secondary: str | None = None
    raven_plugin_datadir_secondary: str | None = None

    @property
    def has_secondary_plugin_dirs(self) -> bool:
        """Whether a second set of plugin directories is configured."""
        return self.module_directory_secondary is not None


def _check_prefix(prefix: str) -> str:
    if not prefix or not posixpath.isabs(prefix):
        raise ValueError(f"prefix must be an absolute path: {prefix!r}")
    return posixpath.normpath(prefix)


def _plugin_dirs(prefix: str) -> tuple[str, str, str, str]:
    libdir = posixpath.join(prefix, "lib", _PACKAGE_DIR)
    sharedir = posixpath.join(prefix, "share", _PACKAGE_DIR)
    return (
        libdir,
        posixpath.join(sharedir, "plugins"),
        posixpath.join(libdir, "raven-plugins"),
        posixpath.join(sharedir, "raven-plugins"),
    )


def build_config(
    prefix: str,
    version: str,
    secondary_prefix: str | None = None,
) -> BudgieConfig:
    """Build the configuration for an installation under ``prefix``."""
    prefix = _check_prefix(prefix)
    module_dir, module_data_dir, raven_lib, raven_data = _plugin_dirs(prefix)

    secondary: dict[str, str | None] = {}
    if secondary_prefix is not None:
        sec_module, sec_data, sec_raven_lib, sec_raven_data = _plugin_dirs(
            _check_prefix(secondary_prefix)
        )
        secondary = {
            "module_directory_secondary": sec_module,
            "module_data_directory_secondary": sec_data,
            "raven_plugin_libdir_secondary": sec_raven_lib,
            "raven_plugin_datadir_secondary": sec_raven_data,
        }

    return BudgieConfig(
        module_directory=module_dir,
        module_data_directory=module_data_dir,
        raven_plugin_libdir=raven_lib,
        raven_plugin_datadir=raven_data,
        datadir=posixpath.join(prefix, "share"),
        version=version,
        localedir=posixpath.join(prefix, "share", "locale"),
        confdir=posixpath.join(prefix, "etc"),
        **secondary,
    )