"""
Shared pytest fixtures for the Branch Sentinel test suite.

Usage in tests:
    def test_something(sentinel_factory):
        sentinel_factory.add_repo("api", branch="main")
        engine = sentinel_factory.create_engine(focus="api")

    def test_multi_repo(sentinel_env):
        # api (main), web (dev), tools (local-only), docs (release)
        cli = sentinel_env.create_cli(focus="api")
"""

import pytest

from tests.factories import SentinelTestFactory, MemoryStore


@pytest.fixture
def sentinel_factory(tmp_path):
    """Empty workspace: no repos, default configuration."""
    return SentinelTestFactory(tmp_path)


@pytest.fixture
def sentinel_env(tmp_path):
    """
    Workspace with four repositories:

    - api    main        remote      -> prod
    - web    dev         remote      -> dev
    - tools  main        no remote   -> local
    - docs   release     remote      -> unknown
    """
    factory = SentinelTestFactory(tmp_path)
    factory.add_repo("api", branch="main")
    factory.add_repo("web", branch="dev")
    factory.add_repo("tools", branch="main", has_remote=False)
    factory.add_repo("docs", branch="release")
    return factory


@pytest.fixture
def memory_store():
    """Dict-backed store that records every write."""
    return MemoryStore()
