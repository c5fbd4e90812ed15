import hashlib
import os
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from loguru import logger


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "posix_only: tests that rely on POSIX filesystem features"
    )


def pytest_collection_modifyitems(config, items):
    if sys.platform.startswith("win"):
        skip_posix = pytest.mark.skip(reason="requires POSIX filesystem features")
        for item in items:
            if "posix_only" in item.keywords:
                item.add_marker(skip_posix)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Ensure tests run without MODELDIGEST_* overrides from the host."""
    for key in [k for k in os.environ if k.startswith("MODELDIGEST_")]:
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore loguru's default sink after tests that reconfigure it."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Create a model directory from a {relative path: content} mapping."""

    def _make_tree(files: dict[str, str], name: str = "model") -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content.encode("utf-8"))
        return root

    return _make_tree


class FakeHasher:
    """FileHasher that returns canned digests or hashes file bytes in-process."""

    def __init__(
        self,
        digests: dict[Path, dict[str, str]] | None = None,
        error: Exception | None = None,
    ):
        self.digests = digests
        self.error = error
        self.calls: list[tuple[list[Path], tuple[str, ...]]] = []

    def hash_files(
        self, paths: Sequence[Path], algorithms: Sequence[str]
    ) -> dict[Path, dict[str, str]]:
        self.calls.append((list(paths), tuple(algorithms)))
        if self.error is not None:
            raise self.error
        if self.digests is not None:
            return self.digests
        return {
            path: {name: hashlib.new(name, path.read_bytes()).hexdigest() for name in algorithms}
            for path in paths
        }


@pytest.fixture
def fake_hasher() -> FakeHasher:
    return FakeHasher()


@pytest.fixture
def fake_hasher_cls() -> type[FakeHasher]:
    """The FakeHasher class, for tests that need canned digests or errors."""
    return FakeHasher
