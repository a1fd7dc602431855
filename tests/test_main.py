"""
End-to-end tests for the factorial prompt.
"""

import io
import subprocess
import sys

import pytest

from factorial_prompt.main import main


def run(text, *argv):
    stdout, stderr = io.StringIO(), io.StringIO()
    code = main(list(argv), io.StringIO(text), stdout, stderr)
    return code, stdout.getvalue(), stderr.getvalue()


def result_lines(output):
    header = "Factorials of the entered numbers:\n"
    assert header in output
    return output.split(header, 1)[1].splitlines()


def test_three_and_five():
    code, output, _ = run("3\n5\nq\n")
    assert code == 0
    assert output.startswith("Enter up to 100 numbers (enter 'q' to quit):\n")
    assert result_lines(output) == ["3! = 6", "5! = 120"]


def test_zero_and_one():
    _, output, _ = run("0\n1\nQ\n")
    assert result_lines(output) == ["0! = 1", "1! = 1"]


def test_immediate_quit_prints_only_header():
    code, output, err = run("q\n")
    assert code == 0
    assert result_lines(output) == []
    assert err == ""


def test_non_numeric_entry_reports_zero_factorial():
    _, output, _ = run("abc\nq\n")
    assert result_lines(output) == ["0! = 1"]


def test_negative_entry_is_undefined():
    code, output, err = run("-4\n3\nq\n")
    assert code == 0
    assert result_lines(output) == ["-4! = undefined", "3! = 6"]
    assert "[WARN]" in err
    assert "negative" in err


def test_quiet_suppresses_warnings():
    _, output, err = run("-4\nq\n", "--quiet")
    assert result_lines(output) == ["-4! = undefined"]
    assert err == ""


def test_wrap_matches_32_bit_output():
    _, output, err = run("13 34 q", "--wrap")
    assert result_lines(output) == ["13! = 1932053504", "34! = 0"]
    assert err.count("[WARN]") == 2


def test_exact_output_by_default():
    _, output, err = run("13 q")
    assert result_lines(output) == ["13! = 6227020800"]
    assert err == "[WARN] 13! does not fit in a 32-bit integer\n"


def test_no_warning_when_result_fits():
    _, _, err = run("12 q")
    assert err == ""


def test_end_of_input_output_matches_quit():
    _, eof_output, _ = run("3\n5\n")
    _, quit_output, _ = run("3\n5\nq\n")
    assert "Number 3: \nFactorials of the entered numbers:\n" in eof_output
    assert eof_output == quit_output


def test_capacity_reached_without_sentinel():
    text = " ".join(str(n % 5) for n in range(150))
    _, output, _ = run(text)
    assert "Number 100: " in output
    assert "Number 101: " not in output
    assert len(result_lines(output)) == 100


def test_max_size_option():
    _, output, _ = run("1 2 3 4", "--max-size", "2")
    assert output.startswith("Enter up to 2 numbers (enter 'q' to quit):\n")
    assert result_lines(output) == ["1! = 1", "2! = 2"]


def test_max_depth_option():
    _, output, err = run("20 q", "--max-depth", "10")
    assert result_lines(output) == ["20! = undefined"]
    assert "recursion depth" in err


@pytest.mark.parametrize("argv", [
    ["--max-size", "0"],
    ["--max-size", "ten"],
    ["--max-depth", "100000"],
])
def test_invalid_options_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as excinfo:
        run("q\n", *argv)
    assert excinfo.value.code == 2


def test_module_entry_point():
    result = subprocess.run(
        [sys.executable, "-m", "factorial_prompt"],
        input="3\n5\nq\n",
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "3! = 6\n5! = 120\n" in result.stdout
