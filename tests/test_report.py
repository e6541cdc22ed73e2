import io

from tid.utils.report import LABEL_WIDTH, emit_line, format_line, ns_to_ms


def test_ns_to_ms():
    assert ns_to_ms(1_500_000) == 1.5
    assert ns_to_ms(0) == 0.0


def test_format_line_exact():
    assert format_line("timed", "hei", 1) == "[timed] hei" + " " * 23 + "    0.0000ms"
    assert format_line("timer", "a", 100_000_000) == "[timer] a" + " " * 25 + "  100.0000ms"


def test_short_label_padded_to_width():
    line = format_line("timed", "abc", 0)
    assert line[len("[timed] "):len("[timed] ") + LABEL_WIDTH] == "abc" + " " * 23
    assert line.endswith("    0.0000ms")


def test_full_width_label_gets_no_padding():
    label = "x" * 26
    assert format_line("timed", label, 0) == f"[timed] {label}    0.0000ms"


def test_long_label_is_not_truncated():
    label = "y" * 40
    assert format_line("timer", label, 2_000_000) == f"[timer] {label}    2.0000ms"


def test_wide_values_keep_four_decimals():
    # 12345.6789 ms does not fit in width 9; it grows instead
    assert format_line("timed", "big", 12_345_678_900).endswith(" 12345.6789ms")


def test_emit_line_to_stream():
    buf = io.StringIO()
    emit_line("hello", buf)
    assert buf.getvalue() == "hello\n"


def test_emit_line_defaults_to_stdout(capsys):
    emit_line("to stdout")
    assert capsys.readouterr().out == "to stdout\n"
