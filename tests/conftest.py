import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mime_typemap.config.settings import get_settings  # noqa: E402
from mime_typemap.media.registry import reset_default_registry  # noqa: E402


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch):
    """Reset process-wide state between tests.

    Clears any MIME_TYPEMAP_* variables from the environment, the cached
    settings instance and the shared registry.
    """
    for name in [
        "MIME_TYPEMAP_TYPEMAP_PATH",
        "MIME_TYPEMAP_TYPEMAP_URL",
        "MIME_TYPEMAP_ENCODING",
        "MIME_TYPEMAP_HTTP_TIMEOUT",
        "MIME_TYPEMAP_LOAD_BUILTIN_TYPES",
        "MIME_TYPEMAP_STRICT",
        "MIME_TYPEMAP_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_default_registry()
    yield
    get_settings.cache_clear()
    reset_default_registry()


@pytest.fixture
def sample_typemap():
    """Type map mixing comments, both line syntaxes and a continuation."""
    return (
        "# comment\n"
        "\n"
        "type=text/html; exts=htm,html\n"
        "text/plain txt\n"
        "image/png \\\n"
        "png\n"
    )
