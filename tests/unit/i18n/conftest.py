"""Feature-level fixtures for i18n system tests.

Provides message files on disk, in-memory sources and translators.
"""

import json
from unittest.mock import Mock

import pytest
import yaml

from tests.factories.i18n import make_catalogs, make_dict_source
from translatable.i18n import DictMessageSource, Translator, YAMLMessageSource


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with YAML message files.

    Returns a directory structure like:
    - messages/en.yaml
    - messages/es.yaml
    - errors/en.yaml
    - errors/es.yaml
    """
    for domain, locales in make_catalogs().items():
        domain_dir = tmp_path / domain
        domain_dir.mkdir()
        for locale, messages in locales.items():
            with open(domain_dir / f"{locale}.yaml", "w", encoding="utf-8") as f:
                yaml.safe_dump(messages, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def temp_json_translations_dir(tmp_path):
    """Create temporary directory with JSON message files."""
    for domain, locales in make_catalogs().items():
        domain_dir = tmp_path / domain
        domain_dir.mkdir()
        for locale, messages in locales.items():
            with open(domain_dir / f"{locale}.json", "w", encoding="utf-8") as f:
                json.dump(messages, f, ensure_ascii=False)

    return tmp_path


@pytest.fixture
def yaml_source(temp_translations_dir):
    """Create YAMLMessageSource for the temporary translations directory."""
    return YAMLMessageSource(temp_translations_dir)


@pytest.fixture
def dict_source():
    """Create DictMessageSource with the standard catalogs."""
    return make_dict_source()


@pytest.fixture
def recording_source(dict_source):
    """Mock wrapping a DictMessageSource to record get_messages calls."""
    return Mock(wraps=dict_source)


@pytest.fixture
def translator(yaml_source):
    """Create Translator over the YAML fixtures with en, es fallback."""
    return Translator(yaml_source, locale="en", fallback_locales=["en", "es"])


@pytest.fixture
def greet_source():
    """Source holding only the "greet" message in en and es."""
    return DictMessageSource(
        {
            "messages": {
                "en": {"greet": "Hi {name}"},
                "es": {"greet": "Hola {name}"},
            }
        }
    )
