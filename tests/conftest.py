"""Pytest configuration and shared fixtures for md2troff test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite.
"""

import datetime
import os

import pytest

from md2troff.ast import document, heading, text
from md2troff.titleblock import Author, TitleBlock

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


FRONT_MATTER = """title: T
authors:
- name: Name
  email: Email
  affiliation: Affiliation
date: Sat Feb 22 15:18:37 GMT 2020
abstract: A
"""


@pytest.fixture
def front_matter() -> str:
    """Provide a YAML front-matter payload with one author.

    Returns
    -------
    str
        Front matter whose title block renders to a known macro sequence.

    """
    return FRONT_MATTER


@pytest.fixture
def front_matter_document(front_matter):
    """Provide a document holding nothing but a flagged front-matter heading."""
    return document(heading(1, text(front_matter), is_titleblock=True))


@pytest.fixture
def sample_title_block() -> TitleBlock:
    """Provide the title block that ``front_matter`` decodes to."""
    return TitleBlock(
        title="T",
        date=datetime.datetime(2020, 2, 22, 15, 18, 37),
        authors=(Author(name="Name", email="Email", affiliation="Affiliation"),),
        abstract="A",
    )


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample markdown content with a title block.

    Returns
    -------
    str
        Standard sample document used across multiple tests.

    """
    return """% title: Sample Document
% authors:
% - name: Jane Doe
%   email: jane@example.com
%   affiliation: Example Labs
% date: Feb 22, 2020
% abstract: A short abstract.

# Introduction

This is a **sample document** with *italic text* and some `inline code`.

Here is a list:

- Item 1
- Item 2

And a numbered list:

1. First item
2. Second item

```
print("Hello, World!")
```

| Header 1 | Header 2 |
|----------|----------|
| Row 1    | Data 1   |
| Row 2    | Data 2   |
"""
