import datetime

from sitebuild.lib.asset.asset import Asset
from sitebuild.lib.asset.proxy import AssetRepProxy


def test_asset_proxy(logo, source_file):
    logo.mtime = datetime.datetime(2024, 3, 1)
    logo.attributes["title"] = "Logo"
    proxy = logo.to_proxy()

    assert proxy["path"] == "/images/logo/"
    assert proxy["mtime"] == datetime.datetime(2024, 3, 1)
    assert proxy["source"] == source_file

    # resolved attributes
    assert proxy["title"] == "Logo"
    assert proxy["extension"] == "png"
    assert proxy["binary"] is True
    # undefined attributes are None
    assert proxy["author"] is None


def test_asset_proxy_reps(logo, config):
    proxy = logo.to_proxy()

    # nothing to show before the reps are built
    assert proxy["reps"] == {}

    logo.build_reps()
    reps = proxy["reps"]

    assert list(reps.keys()) == ["thumb", "default"]
    assert isinstance(reps["thumb"], AssetRepProxy)
    assert reps["thumb"]["name"] == "thumb"
    assert reps["thumb"]["web_path"] == "/images/logo-thumb.png"
    assert reps["thumb"]["disk_path"] == config.output_path / "images" / "logo-thumb.png"
    assert reps["thumb"]["extension"] == "png"
    assert reps["thumb"]["author"] is None


def test_asset_proxy_reads_through():
    asset = Asset(None, {"title": "Before"}, "/logo/")
    proxy = asset.to_proxy()

    asset.attributes["title"] = "After"

    assert proxy["title"] == "After"
