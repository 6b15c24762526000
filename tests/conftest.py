import os
from pathlib import Path

import pytest

# Subprocess CLI runs report into the same coverage data when enabled
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()


SAMPLE_PROGRAM = """
def myFunc(a, b) {
    x = 10;
}
myFunc(5, 15);
"""


@pytest.fixture  # type: ignore[misc]
def sample_program() -> str:
    return SAMPLE_PROGRAM


@pytest.fixture  # type: ignore[misc]
def sample_file(tmp_path: Path) -> str:
    path = tmp_path / "sample.prl"
    path.write_text(SAMPLE_PROGRAM, encoding="utf-8")
    return str(path)
