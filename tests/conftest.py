import sys
from pathlib import Path

import pytest

# Add project root to sys.path
# This ensures that 'inertia_server' is importable as a top-level package during tests
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def global_config_store():
    from inertia_server.protocol.config_store import config_store

    original = config_store.get_config()
    try:
        yield config_store
    finally:
        config_store.reset(original)


@pytest.fixture
def template_dir(tmp_path):
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "app.html").write_text(
        "<title>{{ title | default('none') }}</title>"
        "<div id=\"app\" data-page=\"{{ inertia_data }}\"></div>"
        "{% if manifest %}<script src=\"{{ manifest['main.js'] }}\"></script>{% endif %}",
        encoding="utf-8",
    )
    return directory
