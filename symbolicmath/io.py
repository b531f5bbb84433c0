import numpy as np
from termcolor import colored

from symbolicmath.config import ReportConfig

RULE = "-" * 72


def _paint(text, color, config):
    return colored(text, color) if config.color else text


def header(config: ReportConfig = None):
    config = config if config is not None else ReportConfig()
    if not config.printing:
        return
    print("{:^20} | {:^18} | {:^8} | {:^6} | {:^11}".format(
        "Name", "Class", "Dims", "Degree", "# Variables"))
    print(_paint(RULE, "blue", config))


def summary_row(name, expr) -> str:
    """Format one table row describing ``expr``."""
    n_rows, n_cols = expr.dims()
    return "{:<20} | {:^18} | {:^8} | {:^6} | {:^11}".format(
        str(name)[:20],
        type(expr).__name__[:18],
        f"{n_rows}x{n_cols}",
        expr.degree(),
        len(expr.variables()),
    )


def summary(config: ReportConfig = None, **exprs):
    """Print a table of class, dims, degree and variable count per expression.

    Returns:
        list[str]: The formatted rows, in keyword order
    """
    config = config if config is not None else ReportConfig()
    rows = [summary_row(name, expr) for name, expr in exprs.items()]
    if config.printing:
        header(config)
        for row in rows:
            print(row)
        print(_paint(RULE, "blue", config))
    return rows


def report_check(*exprs, config: ReportConfig = None) -> bool:
    """Validate every expression and print one status line each.

    Returns:
        bool: True when every expression passes ``check()``
    """
    config = config if config is not None else ReportConfig()
    ok = True
    for index, expr in enumerate(exprs):
        err = expr.check()
        if err is None:
            line = _paint(f"[{index}] OK     {expr!r}", "green", config)
        else:
            ok = False
            line = _paint(f"[{index}] FAILED {type(err).__name__}: {err}", "red", config)
        if config.printing:
            print(line)
    return ok


def format_coefficients(values, config: ReportConfig = None) -> str:
    """Render a numpy array of coefficients at the configured precision."""
    config = config if config is not None else ReportConfig()
    return np.array2string(np.asarray(values, dtype=float), precision=config.precision)
