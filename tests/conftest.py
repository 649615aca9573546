#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest configuration and shared fixtures for all tests
"""

import pytest
import sys
import os
from pathlib import Path
from unittest.mock import Mock

# Add src directory to path so we can import our modules
src_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
sys.path.insert(0, src_dir)

from iso_transcoder.config_schema import DEFAULT_CONFIG_TEMPLATE


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing"""
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    return logger


@pytest.fixture
def sample_latin1_text():
    """Text using most of the Latin-1 letters the TeX tables cover"""
    return "Ça coûte cinq £, señor. ¿Qué? ¡Olé! Straße, Ærø, naïve Åsa, Öl, Übermaß, déjà vu, § 3 ©"


@pytest.fixture
def sample_tex_text():
    """TeX source mixing braced, argument and bare accent spellings"""
    return 'Stra\\ss e, {\\"u}ber, \\"{o}l, na\\"\\i ve, \\\'el\\`eve'


@pytest.fixture
def default_config_text():
    """The default configuration file contents"""
    return DEFAULT_CONFIG_TEMPLATE


@pytest.fixture
def config_file(tmp_path):
    """Write the default configuration into a temporary file and return its path"""
    path = tmp_path / "iso_cvt_config.yml"
    path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables before each test"""
    env_backup = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(env_backup)


# Configure pytest options
def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "cli: marks tests that run the iso-cvt command")


def pytest_collection_modifyitems(config, items):
    """Mark command-line tests by module name"""
    for item in items:
        if "cli" in Path(str(item.fspath)).name:
            item.add_marker(pytest.mark.cli)
