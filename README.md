# classkit

A collection of small, self-contained classes about value types, resource
handling and error reporting:

- `classkit.dates`: a mutable `Date` from 1950-01-01 to 2199-12-31 with
  leap-year rules (`is_leap_year`, `month_length`), day arithmetic
  (`Date.advance`, `difference`) and parsing of `YYYY-MM-DD` and
  `MM/DD/YYYY` text (`Date.from_string`, `Date.set_from_string`,
  `read_date`). Bad values raise `InvalidDate`; years outside the range
  raise `DateOutOfRange`. A date left unchanged when an error is raised.
- `classkit.interval`: `Interval` values `[lower, upper]` that can be added,
  subtracted, multiplied and divided (dividing by an interval that contains
  zero raises `ZeroDivisionError`). Comparisons are made on the half-width
  of each interval, not on its position. `Interval.parse` reads `[a, b]`.
- `classkit.biginteger`: `BigInteger`, a non-negative integer of at most 128
  decimal digits, built from an `int`, a digit string or another
  `BigInteger`. Results too large raise `OverflowError`, results below zero
  raise `ArithmeticError`, text with non-digits raises `InvalidFormat`.
- `classkit.arrays`: fixed-size arrays with bounds-checked access.
  `StaticArray` treats its size as part of its type (assignment and ordering
  need equal sizes); `DynamicArray.assign` raises `ValueError` on a size
  mismatch, and `DynamicArray.copy` makes an independent copy.
- `classkit.httpget`: `HttpConnection`, a minimal HTTP/1.0 GET client over a
  plain TCP socket, and `make_multiple` to open several connections to the
  same server.
- `classkit.dirscan`: `DirectoryScanner`, which yields the entry names of a
  directory (none if it cannot be opened).

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from classkit.dates import Date, InvalidDate, difference

today = Date(2020, 9, 15)
today.advance(1)
print(today)                      # 2020-09-16
print(f"|{today:*>20}|")          # honours fill, alignment and width

leap = Date.from_string("2000-02-29")
try:
    Date.from_string("2100-02-29")
except InvalidDate as err:
    print("rejected:", err)

print(difference(Date(2020, 3, 1), Date(2020, 2, 1)))   # 29
```

```python
from classkit.interval import Interval

a = Interval.parse("[1, 2]")
b = Interval(3, 4)
print(a + b, a * b)               # [4, 6] [3, 8]
```

```python
from classkit.biginteger import BigInteger

w = BigInteger("1234567890987654321012345678909876543210000000000")
x = BigInteger(9999)
print(w + x + x)
```

```python
from classkit.arrays import DynamicArray

a = DynamicArray(4, 0)
a[0] = 7
b = a.copy()
print(a == b)                     # True
```

```python
from classkit.httpget import HttpConnection

with HttpConnection("localhost", 8080) as conn:
    print(conn.get("/"))          # "not connected" if the connection failed
```

## Commands

| Command | What it does |
| --- | --- |
| `classkit-date-demo` | Shows date formatting, reads two birthdays from standard input and compares them, then shows that 2100-02-29 is rejected (so it ends by reporting that error and exiting with status 1). |
| `classkit-interval-calc` | A stack-based calculator: each line is an interval such as `[1, 2]` or one of `+ - * /`; an empty line ends it. Errors are reported and exit with status 1. |
| `classkit-bigint-demo` | Adds a few large integers and prints the sum. |
| `classkit-array-demo` | Demonstrates array comparison and assignment, then writes past the end to show the bounds check (exit status 1). |
| `classkit-httpget [HOST [PORT]]` | Opens five connections to HOST (default `localhost`, port 80) and prints the response to `GET /` on each. |
| `classkit-dirscan DIRECTORY` | Prints the names of the entries in a directory. |

## What it does not do

- `HttpConnection` speaks only plain HTTP/1.0: no TLS, no request headers,
  no redirects, and the response is returned as raw text, headers included.
- `BigInteger` holds no negative numbers and nothing beyond 128 digits.