# tid/utils/report.py
import sys

LABEL_WIDTH = 26
NS_PER_MS = 1_000_000.0


def ns_to_ms(elapsed_ns: int) -> float:
    return elapsed_ns / NS_PER_MS


def format_line(tag: str, label: str, elapsed_ns: int) -> str:
    """
    One output line without the trailing newline:
        [tag] <label padded to 26> <ms, width 9, 4 decimals>ms
    Long labels are not truncated.
    """
    return f"[{tag}] {label:<{LABEL_WIDTH}} {ns_to_ms(elapsed_ns):9.4f}ms"


def emit_line(line: str, file=None):
    # sys.stdout is looked up here so redirected streams (pytest capsys) are honoured
    print(line, file=sys.stdout if file is None else file)
