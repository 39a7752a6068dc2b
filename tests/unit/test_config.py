import os
import pathlib

import pytest

from sitebuild.lib.config import SiteConfig


def test_site_config_defaults():
    test_config = SiteConfig()

    assert test_config.output_path == pathlib.Path("output")
    assert test_config.force is False

    test_config_none = SiteConfig(output_path=None, force=None)

    # defaults
    assert test_config_none.output_path == pathlib.Path("output")
    assert test_config_none.force is False


def test_site_config_full(tmp_path):
    test_config = SiteConfig(output_path=str(tmp_path / "public"), force=True)

    # strings are converted to paths
    assert test_config.output_path == tmp_path / "public"
    assert test_config.force is True

    assert test_config.as_output_file("style.css") == tmp_path / "public" / "style.css"
    # site paths are absolute, but still land inside output_path
    assert test_config.as_output_file("/images/logo.png") == tmp_path / "public" / "images" / "logo.png"


def test_site_config_invalid_force():
    with pytest.raises(ValueError, match="force must be True or False, got 'yes'"):
        SiteConfig(force="yes")


def test_site_config_from_env(tmp_path):
    os.environ["OUTPUT_PATH"] = str(tmp_path / "public")
    os.environ["FORCE_COMPILE"] = "true"

    test_config = SiteConfig.from_env()

    assert test_config.output_path == tmp_path / "public"
    assert test_config.force is True


def test_site_config_from_env_defaults():
    os.environ.pop("OUTPUT_PATH", None)
    os.environ.pop("FORCE_COMPILE", None)

    test_config = SiteConfig.from_env()

    assert test_config.output_path == pathlib.Path("output")
    assert test_config.force is False
