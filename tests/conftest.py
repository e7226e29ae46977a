"""Test configuration and fixtures for filelist."""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any handler or level the CLI's logging setup installed during a test."""
    logger = logging.getLogger("filelist")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small project-like tree.

    Layout::

        a.ts
        b.js
        README.md
        node_modules/c.ts
        node_modules/pkg/d.ts
        src/main.ts
        src/util.js
        src/lib/deep.ts
        .git/HEAD
    """
    (tmp_path / "a.ts").write_text("a")
    (tmp_path / "b.js").write_text("b")
    (tmp_path / "README.md").write_text("# readme")
    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "node_modules" / "c.ts").write_text("c")
    (tmp_path / "node_modules" / "pkg" / "d.ts").write_text("d")
    (tmp_path / "src" / "lib").mkdir(parents=True)
    (tmp_path / "src" / "main.ts").write_text("main")
    (tmp_path / "src" / "util.js").write_text("util")
    (tmp_path / "src" / "lib" / "deep.ts").write_text("deep")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").write_text("ref: refs/heads/main")
    return tmp_path


@pytest.fixture
def relpaths():
    """Return a helper expressing result paths relative to a root, with forward slashes."""

    def relative_paths(paths, root):
        return {os.path.relpath(p, root).replace(os.sep, "/") for p in paths}

    return relative_paths


@pytest.fixture
def symlink():
    """Return a helper creating a symlink, skipping the test where the platform refuses."""

    def make_symlink(target, link):
        try:
            os.symlink(target, link)
        except (OSError, NotImplementedError):
            pytest.skip("Symlink creation not supported on this platform/environment")

    return make_symlink


@pytest.fixture
def deny_listing(monkeypatch):
    """Return a helper making os.scandir raise PermissionError for directories with given names."""
    real_scandir = os.scandir

    def deny(*names):
        def fake_scandir(path="."):
            if os.path.basename(os.fspath(path)) in names:
                raise PermissionError(13, "Permission denied", os.fspath(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", fake_scandir)

    return deny
