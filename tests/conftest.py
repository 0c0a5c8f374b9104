"""Pytest configuration for the i18nlint-react test suite.

Hypothesis profiles:
- dev: 200 examples per property, the default
- ci: 50 derandomized examples, picked when CI=true

HYPOTHESIS_PROFILE=<name> selects a profile explicitly.

Tests marked @pytest.mark.fuzz parse thousands of generated files; they are
skipped unless selected with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import settings

# Property tests parse real sources; the first parse also loads a grammar
settings.register_profile("dev", max_examples=200, deadline=None)
settings.register_profile("ci", max_examples=50, deadline=None, derandomize=True, print_blob=True)


def _profile_name() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit:
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the run selects them with -m."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
