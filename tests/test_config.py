from pathlib import Path

import pytest
from pydantic import ValidationError

from localized_string.core.config import LocalizerOptions, load_options


def test_defaults():
    options = LocalizerOptions()
    assert options.RESOURCES_PATH == ""
    assert options.RESOURCES_DIRECTORY == "Resources"
    assert options.RESOURCES_EXTENSION == "strings"
    assert options.SUPPORTED_CULTURES == ["en-US", "pt-PT"]
    assert options.default_culture == "en-US"
    assert options.resources_root == Path("")


def test_resources_directory_is_not_used_as_root():
    options = LocalizerOptions(RESOURCES_PATH="/srv/i18n", RESOURCES_DIRECTORY="ignored")
    assert options.resources_root == Path("/srv/i18n")
    assert LocalizerOptions(RESOURCES_DIRECTORY="elsewhere").resources_root == Path("")


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("LOCALIZER_RESOURCES_PATH", "res")
    monkeypatch.setenv("LOCALIZER_RESOURCES_EXTENSION", ".json")
    monkeypatch.setenv("LOCALIZER_SUPPORTED_CULTURES", "fr-FR, en-US,")
    options = load_options()
    assert options.RESOURCES_PATH == "res"
    assert options.RESOURCES_EXTENSION == "json"
    assert options.SUPPORTED_CULTURES == ["fr-FR", "en-US"]
    assert options.default_culture == "fr-FR"


def test_dotenv_file(tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("LOCALIZER_SUPPORTED_CULTURES=de-DE,en-US\n", encoding="utf-8")
    options = load_options(env_file=env_file)
    assert options.SUPPORTED_CULTURES == ["de-DE", "en-US"]


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("LOCALIZER_RESOURCES_EXTENSION", "json")
    assert load_options(RESOURCES_EXTENSION="strings").RESOURCES_EXTENSION == "strings"


@pytest.mark.parametrize("cultures", [[], "", " , "])
def test_supported_cultures_must_not_be_empty(cultures):
    with pytest.raises(ValidationError):
        LocalizerOptions(SUPPORTED_CULTURES=cultures)


def test_extension_must_not_be_empty():
    with pytest.raises(ValidationError):
        LocalizerOptions(RESOURCES_EXTENSION=".")


def test_options_are_frozen():
    options = LocalizerOptions()
    with pytest.raises(ValidationError):
        options.RESOURCES_EXTENSION = "json"
