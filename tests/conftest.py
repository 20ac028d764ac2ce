"""Shared fixtures: small cscope databases built in memory."""

import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

# Two files. main() calls parse_args() twice and run() once;
# run() calls helper(), helper() calls the undefined printf().
SAMPLE_SYMBOLS = (
    "\t@main.c\n"
    "\n"
    "1 #include \n"
    "\t~<stdio.h\n"
    ">\n"
    "\n"
    "3 int \n"
    "\t$main\n"
    "(void) {\n"
    "\n"
    "4 \n"
    "\t`parse_args\n"
    "();\n"
    "\n"
    "5 \n"
    "\t`run\n"
    "();\n"
    "\n"
    "6 \n"
    "\t`parse_args\n"
    "();\n"
    "\n"
    "7 }\n"
    "\n"
    "\t@util.c\n"
    "\n"
    "2 void \n"
    "\t$run\n"
    "(void) {\n"
    "\n"
    "3 \n"
    "\t`helper\n"
    "();\n"
    "\n"
    "5 void \n"
    "\t$helper\n"
    "(void) {\n"
    "\n"
    "6 \n"
    "\t`printf\n"
    '("hi");\n'
    "\n"
    "\t@\n"
)

SAMPLE_TRAILER = "1\n.\n2\nmain.c\nutil.c\n1\n13\n/usr/include\n"

DatabaseFactory = Callable[..., bytes]


def build_database(
    symbols: str,
    trailer: str = SAMPLE_TRAILER,
    flags: str = "",
    version: int = 15,
) -> bytes:
    """Wrap a symbol region in a header pointing at the trailer."""
    head = f"cscope {version} /home/user/src{flags} "
    header_len = len(head.encode()) + 11
    trailer_offset = header_len + len(symbols.encode())
    return f"{head}{trailer_offset:010d}\n{symbols}{trailer}".encode()


@pytest.fixture
def make_database() -> DatabaseFactory:
    """Factory for database buffers."""
    return build_database


@pytest.fixture
def sample_database() -> bytes:
    """The two-file sample database."""
    return build_database(SAMPLE_SYMBOLS)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


@pytest.fixture
def sample_db_path(temp_dir: Path, sample_database: bytes) -> Path:
    """The sample database written to cscope.out."""
    path = temp_dir / "cscope.out"
    path.write_bytes(sample_database)
    return path
