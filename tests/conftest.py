"""Shared test fixtures."""

from pathlib import Path

import pytest
from staticroute.config import Config, ServerConfig, SiteConfig

from tests.fakes import MemoryFileSystem


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Create the site root directory."""
    site_root = tmp_path / "public"
    site_root.mkdir(exist_ok=True)
    return site_root


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def test_config(root: Path) -> Config:
    """Create a test configuration serving the root fixture."""
    return Config(server=ServerConfig(), site=SiteConfig(root_dir=root))
