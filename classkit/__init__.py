"""Small teaching classes: dates, intervals, big integers, fixed-size arrays, an HTTP client and a directory scanner."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bigint_demo",
    "biginteger",
    "date_demo",
    "dates",
    "dirscan",
    "httpget",
    "interval",
    "interval_calc",
]