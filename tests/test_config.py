import dataclasses

import pytest

from trashbin.config import build_config


def test_documented_directories_for_usr():
    config = build_config("/usr", "10.9", None)
    assert config.module_directory == "/usr/lib/budgie-desktop"
    assert config.module_data_directory == "/usr/share/budgie-desktop/plugins"
    assert config.raven_plugin_libdir == "/usr/lib/budgie-desktop/raven-plugins"
    assert config.raven_plugin_datadir == "/usr/share/budgie-desktop/raven-plugins"
    assert config.datadir == "/usr/share"


def test_version_and_gettext_package():
    config = build_config("/usr", "10.9", None)
    assert config.version == "10.9"
    assert config.gettext_package == "budgie-desktop"


def test_no_secondary_dirs():
    config = build_config("/usr", "1.0", None)
    assert config.has_secondary_plugin_dirs is False
    assert config.module_directory_secondary is None
    assert config.raven_plugin_datadir_secondary is None


def test_secondary_dirs_follow_secondary_prefix():
    config = build_config("/usr", "1.0", "/usr/local")
    assert config.has_secondary_plugin_dirs is True
    for path in (
        config.module_directory_secondary,
        config.module_data_directory_secondary,
        config.raven_plugin_libdir_secondary,
        config.raven_plugin_datadir_secondary,
    ):
        assert path.startswith("/usr/local/")
    assert config.module_directory_secondary.endswith("/lib/budgie-desktop")


def test_all_paths_live_under_prefix():
    config = build_config("/opt/desk/", "1.0", None)
    for path in (
        config.module_directory,
        config.module_data_directory,
        config.raven_plugin_libdir,
        config.raven_plugin_datadir,
        config.datadir,
        config.localedir,
        config.confdir,
    ):
        assert path.startswith("/opt/desk/")


def test_relative_prefix_rejected():
    with pytest.raises(ValueError):
        build_config("usr", "1.0", None)
    with pytest.raises(ValueError):
        build_config("/usr", "1.0", "local")


def test_config_is_immutable():
    config = build_config("/usr", "1.0", None)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.version = "2.0"
    assert config.version == "1.0"