import logging
import os
import sys

import pytest

# Add project root to sys.path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from localized_string.core.config import LocalizerOptions
from localized_string.infra.resources import LocalizedStringResources


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # keep a developer's .env or LOCALIZER_* variables out of the tests
    for key in list(os.environ):
        if key.startswith("LOCALIZER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def resources_dir(tmp_path):
    path = tmp_path / "Resources"
    path.mkdir()
    return path


@pytest.fixture
def make_options(resources_dir):
    def _make(extension="strings", cultures=("en-US", "fr-FR")):
        return LocalizerOptions(
            RESOURCES_PATH=str(resources_dir),
            RESOURCES_EXTENSION=extension,
            SUPPORTED_CULTURES=list(cultures),
        )
    return _make


@pytest.fixture
def resources(make_options):
    return LocalizedStringResources(make_options(), ambient_culture="")


@pytest.fixture(autouse=True)
def _reset_logging():
    from localized_string.core.logging_config import LOGGING_CONFIG

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    # setup_logging() replaces root handlers and pins per-namespace levels
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in LOGGING_CONFIG:
        logging.getLogger(name).setLevel(logging.NOTSET)
