"""Pytest configuration: Hypothesis profiles and catalog fixtures.

Hypothesis profiles:
- dev: local development with 200 examples
- ci: CI runs with 50 examples, derandomized

Profile selection: HYPOTHESIS_PROFILE overrides, CI=true selects "ci",
otherwise "dev".
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import Phase, settings

from cldr_catalog import CatalogConfig, DirectorySource, LocaleCatalog
from tests.corpus import write_corpus

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return write_corpus(tmp_path / "cldr")


@pytest.fixture
def source(data_dir: Path) -> DirectorySource:
    return DirectorySource(data_dir)


@pytest.fixture
def config() -> CatalogConfig:
    return CatalogConfig(
        default_locale="en",
        locales=("en", "en-AG", "fr", "ar"),
        max_workers=4,
    )


@pytest.fixture
def catalog(source: DirectorySource, config: CatalogConfig) -> LocaleCatalog:
    return LocaleCatalog(source, config)
