"""End-to-end tests: mini source to three-address code.

Test cases live in tac/*.tests files. Format:

    === test name
    mini source
    (any number of lines)
    ---
    expected TAC, one instruction per line
    (or 'error: <ErrorClass>')
    ---
"""

from pathlib import Path

import pytest

from minitac import errors
from minitac.lexer import tokenize
from minitac.mini_to_tac import mini_to_tac
from minitac.parser import parse_assignment

TAC_DIR = Path(__file__).parent / "tac"


def parse_test_file(path: Path) -> list[tuple[str, str, str]]:
    """Parse .tests file into (name, input, expected) tuples."""
    lines = path.read_text().split("\n")
    result: list[tuple[str, str, str]] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith("=== "):
            test_name = line[4:].strip()
            i += 1
            input_lines: list[str] = []
            while i < len(lines) and lines[i] != "---":
                input_lines.append(lines[i])
                i += 1
            i += 1
            expected_lines: list[str] = []
            while i < len(lines) and lines[i] != "---":
                expected_lines.append(lines[i])
                i += 1
            i += 1
            test_input = "\n".join(input_lines)
            expected = "\n".join(expected_lines).strip()
            result.append((test_name, test_input, expected))
        else:
            i += 1
    return result


def discover_tac_tests() -> list[tuple[str, str, str]]:
    """Find all TAC tests, returns (test_id, input, expected)."""
    results = []
    for test_file in sorted(TAC_DIR.glob("*.tests")):
        for name, input_code, expected in parse_test_file(test_file):
            results.append((f"{test_file.stem}/{name}", input_code, expected))
    return results


def pytest_generate_tests(metafunc):
    """Parametrize tests over TAC test files."""
    if "tac_input" in metafunc.fixturenames:
        params = [
            pytest.param(input_code, expected, id=test_id)
            for test_id, input_code, expected in discover_tac_tests()
        ]
        metafunc.parametrize("tac_input,tac_expected", params)


def compile_source(source: str) -> str:
    return mini_to_tac(parse_assignment(tokenize(source))).text().strip()


def test_tac(tac_input: str, tac_expected: str):
    """Verify the pipeline produces the expected TAC or error."""
    if tac_expected.startswith("error: "):
        error_class = getattr(errors, tac_expected[len("error: "):])
        with pytest.raises(error_class):
            compile_source(tac_input)
    else:
        assert compile_source(tac_input) == tac_expected


def test_test_files_were_found():
    assert len(discover_tac_tests()) >= 10
