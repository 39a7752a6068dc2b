import os

import pytest

from sitebuild.lib.asset.asset import Asset
from sitebuild.lib.config import SiteConfig
from sitebuild.lib.site import AssetDefaults, Site


# This fixture will be automatically used by all tests so that environment
# variables set by one test don't leak into the next
@pytest.fixture(autouse=True)
def env():
    initial_env = dict(os.environ)

    yield

    # Reset environment to initial state
    os.environ.clear()
    os.environ.update(initial_env)


@pytest.fixture()
def config(tmp_path) -> SiteConfig:
    """Default configuration

    Uses a new temporary output directory for each test.
    """
    return SiteConfig(output_path=tmp_path / "output")


@pytest.fixture()
def site(config) -> Site:
    """A site with no asset defaults"""
    return Site(config=config)


@pytest.fixture()
def image_site(config) -> Site:
    """A site where every asset has a thumbnail as well as the default rep"""
    return Site(
        config=config,
        asset_defaults=AssetDefaults(attributes={
            "extension": "png",
            "reps": {"thumb": {}},
        }),
    )


@pytest.fixture()
def source_file(tmp_path):
    source = tmp_path / "content" / "logo.png"
    source.parent.mkdir(parents=True)
    source.write_bytes(b"not really a png")
    return source


@pytest.fixture()
def logo(source_file, image_site) -> Asset:
    return Asset(source_file, {}, "images/logo", site=image_site)
