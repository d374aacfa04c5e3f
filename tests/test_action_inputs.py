from __future__ import annotations

import pytest

from npm_publish_config import errors
from npm_publish_config.action_inputs import get_input, load_action_options
from npm_publish_config.options import UNSET

pytestmark = pytest.mark.unit


def test_load_action_options_reads_inputs() -> None:
    environ = {
        "INPUT_TOKEN": "abc",
        "INPUT_REGISTRY": "https://npm.pkg.github.com",
        "INPUT_TAG": "next",
        "INPUT_ACCESS": "restricted",
        "INPUT_PROVENANCE": "true",
        "INPUT_IGNORE-SCRIPTS": "False",
        "INPUT_DRY_RUN": "yes",
        "INPUT_STRATEGY": "upgrade",
        "INPUT_PACKAGE": "packages/widgets",
        "RUNNER_TEMP": "/runner/tmp",
    }

    package, options = load_action_options(environ)

    assert package == "packages/widgets"
    assert options.token == "abc"
    assert options.registry == "https://npm.pkg.github.com"
    assert options.tag == "next"
    assert options.access == "restricted"
    assert options.provenance is True
    assert options.ignore_scripts is False
    assert options.dry_run is True
    assert options.strategy == "upgrade"
    assert options.temporary_directory == "/runner/tmp"


def test_empty_inputs_are_unset() -> None:
    package, options = load_action_options({"INPUT_TOKEN": "abc", "INPUT_TAG": "  ", "INPUT_DRY-RUN": ""})

    assert package == "package.json"
    assert options.tag is UNSET
    assert options.dry_run is UNSET
    assert options.provenance is UNSET
    assert options.temporary_directory is UNSET


def test_get_input_prefers_hyphenated_name() -> None:
    environ = {"INPUT_IGNORE-SCRIPTS": "a", "INPUT_IGNORE_SCRIPTS": "b"}
    assert get_input(environ, "ignore-scripts") == "a"


def test_invalid_boolean_input() -> None:
    with pytest.raises(errors.InvalidActionInputError) as excinfo:
        load_action_options({"INPUT_PROVENANCE": "maybe"})
    assert excinfo.value.name == "provenance"


def test_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_TOKEN", "from-env")
    _, options = load_action_options()
    assert options.token == "from-env"
