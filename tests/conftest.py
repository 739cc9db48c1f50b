"""Shared test fixtures for dotini."""

import pytest


@pytest.fixture
def ini_file(tmp_path):
    """Write INI content to a temp file.

    Returns a helper function. Call it with a str (written as utf-8)
    or raw bytes; it returns the file path.
    """
    def _write(content, name="test.ini"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8", newline="")
        return path
    return _write


@pytest.fixture
def sample_text():
    return (
        "[section1]\n"
        "name1=value1\n"
        "name2=value2\n"
        "[section2]\n"
        "name3=value3"
    )
