"""Shared pytest fixtures for filetools tests."""
import io
import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from filetools.core import config as config_module
from filetools.core import logging as logging_module
from filetools.core.logging import Logger


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def lua_tree(temp_dir: Path) -> Path:
    """Root with a.lua, b.txt and sub/c.lua."""
    root = temp_dir / "root"
    root.mkdir()
    (root / "a.lua").write_text("print('a')")
    (root / "b.txt").write_text("b")
    (root / "sub").mkdir()
    (root / "sub" / "c.lua").write_text("print('c')")
    return root


@pytest.fixture
def source_tree(temp_dir: Path) -> Path:
    """A deeper tree with mixed files and directories."""
    source = temp_dir / "source"
    source.mkdir()

    (source / "initial.pdf").write_text("pdf")
    (source / ".gitignore").write_text("*.o")
    (source / "ffolder").mkdir()
    (source / "ffolder" / "first.rs").write_text("fn main() {}")
    (source / "sfolder").mkdir()
    (source / "sfolder" / "second.txt").write_text("second")
    (source / "sfolder" / "third.php").write_text("<?php")
    (source / "tfolder").mkdir()
    (source / "tfolder" / "fourth.cpp").write_text("int main() {}")
    (source / "tfolder" / "deep").mkdir()
    (source / "tfolder" / "deep" / "fifth.rs").write_text("")

    return source


@pytest.fixture
def log_stream() -> Generator[io.StringIO, None, None]:
    """Install a DEBUG-level global logger writing into a StringIO."""
    std_logger = logging.getLogger("filetools")
    saved_handlers = list(std_logger.handlers)
    saved_level = std_logger.level
    previous = logging_module._global_logger

    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logging_module.set_global_logger(Logger(name="filetools", level="DEBUG", handlers=[handler]))
    try:
        yield stream
    finally:
        std_logger.handlers = saved_handlers
        std_logger.setLevel(saved_level)
        logging_module.set_global_logger(previous)


@pytest.fixture(autouse=True)
def reset_global_config():
    """Keep the global ConfigManager from leaking between tests."""
    previous = config_module._global_config
    config_module.set_global_config(None)
    yield
    config_module.set_global_config(previous)
