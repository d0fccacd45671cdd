import json

import pytest
from pathlib import Path

from inertia_server.config import config
from inertia_server.core_config import get_cfg_defaults
from inertia_server.errors import InertiaConfigError
from inertia_server.protocol.config_store import ProtocolConfig


def test_default_config_loading():
    """Verify default values are loaded correctly."""
    cfg = get_cfg_defaults()
    assert cfg.INERTIA.TEMPLATE_EXTENSION == ".html"
    assert Path(cfg.INERTIA.TEMPLATE_DIR).name == "templates"
    assert cfg.LOGGING.MAX_BYTES > 0


def test_config_singleton():
    """Verify the singleton config object is loaded and frozen."""
    assert config.is_frozen()
    with pytest.raises(Exception):
        config.INERTIA.TEMPLATE_NAME = "other"


def test_template_dir_points_at_bundled_templates():
    root = Path(get_cfg_defaults().INERTIA.TEMPLATE_DIR)
    assert (root / "app.html").exists()


def test_protocol_config_from_cfg_uses_section_values():
    cfg = get_cfg_defaults()
    cfg.INERTIA.TEMPLATE_NAME = "layout"
    cfg.INERTIA.VERSION = "abc123"
    cfg.INERTIA.MANIFEST_PATH = ""

    protocol = ProtocolConfig.from_cfg(cfg)

    assert protocol.template_name == "layout"
    assert protocol.version == "abc123"
    assert protocol.manifest is None


def test_protocol_config_from_cfg_falls_back_to_defaults():
    cfg = get_cfg_defaults()
    cfg.INERTIA.TEMPLATE_NAME = ""
    cfg.INERTIA.VERSION = ""
    cfg.INERTIA.MANIFEST_PATH = ""

    protocol = ProtocolConfig.from_cfg(cfg)

    assert protocol.template_name == "app"
    assert protocol.version == "1"


def test_protocol_config_loads_manifest_file(tmp_path):
    manifest_path = tmp_path / "manifest.json"
    manifest_path.write_text(json.dumps({"src/main.js": {"file": "assets/main.123.js"}}), encoding="utf-8")
    cfg = get_cfg_defaults()
    cfg.INERTIA.MANIFEST_PATH = str(manifest_path)

    protocol = ProtocolConfig.from_cfg(cfg)

    assert protocol.manifest == {"src/main.js": {"file": "assets/main.123.js"}}


@pytest.mark.parametrize(
    "content",
    ["{not json", "[1, 2]"],
)
def test_protocol_config_rejects_bad_manifest(tmp_path, content):
    manifest_path = tmp_path / "manifest.json"
    manifest_path.write_text(content, encoding="utf-8")
    cfg = get_cfg_defaults()
    cfg.INERTIA.MANIFEST_PATH = str(manifest_path)

    with pytest.raises(InertiaConfigError) as exc_info:
        ProtocolConfig.from_cfg(cfg)
    assert exc_info.value.code == "INERTIA_CONFIG_INVALID"
    assert exc_info.value.details["path"] == str(manifest_path)


def test_protocol_config_missing_manifest(tmp_path):
    cfg = get_cfg_defaults()
    cfg.INERTIA.MANIFEST_PATH = str(tmp_path / "missing.json")

    with pytest.raises(InertiaConfigError):
        ProtocolConfig.from_cfg(cfg)
