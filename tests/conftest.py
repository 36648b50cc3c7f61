"""
Shared fixtures for the htmlnode tests.
"""

import pytest

import htmlnode
from htmlnode.utils.config import Config, set_config

from tests.fixtures.html_samples import ARTICLE_MARKUP, SCENARIO_MARKUP


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Give every test a fresh configuration that never reads the user's file."""
    config = Config(str(tmp_path / "config.json"))
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def scenario_div():
    document = htmlnode.parse(SCENARIO_MARKUP)
    return document.descendant_of_tag("div")


@pytest.fixture
def article():
    return htmlnode.parse(ARTICLE_MARKUP)
