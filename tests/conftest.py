"""Pytest configuration and shared LMDB store fixtures."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Mapping

import pytest


def pytest_sessionstart() -> None:
    """Add the project root to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


StoreLayout = Mapping[bytes, Mapping[bytes, bytes]]


@pytest.fixture
def make_store(tmp_path: Path) -> Callable[..., str]:
    """Build a single-file LMDB store with the given buckets and return its path."""
    import lmdb

    def _make(layout: StoreLayout, name: str = "store.mdb") -> str:
        path = tmp_path / name
        env = lmdb.open(
            str(path), subdir=False, max_dbs=max(1, len(layout)), map_size=1 << 22
        )
        try:
            for bucket, entries in layout.items():
                db = env.open_db(bucket)
                with env.begin(write=True, db=db) as txn:
                    for key, value in entries.items():
                        txn.put(key, value)
        finally:
            env.close()
        return str(path)

    return _make


@pytest.fixture
def users_store(make_store: Callable[..., str]) -> str:
    """Store with one bucket `users` holding key 0x0102 -> b'alice'."""
    return make_store({b"users": {b"\x01\x02": b"alice"}})
