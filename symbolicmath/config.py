from dataclasses import dataclass


@dataclass
class ReportConfig:

    def __init__(self, color: bool = True, precision: int = 4, printing: bool = True):
        """
        Configuration class for console reports.

        This class defines how :mod:`symbolicmath.io` renders summaries and
        validation reports.

        Args:
            color (bool): Whether to colorize status lines with termcolor. Defaults to True.
            precision (int): Number of decimal places used when printing coefficients. Defaults to 4.
            printing (bool): Whether reports are printed at all. Return values are unaffected. Defaults to True.
        """
        if precision < 0:
            raise ValueError(f"precision must be non-negative; received {precision}")
        self.color = color
        self.precision = precision
        self.printing = printing
