import re
import time
from contextlib import contextmanager


@contextmanager
def performance_logging(description: str, logger=None):
    start = time.time()
    try:
        yield
    finally:
        took = (time.time() - start) * 1000
        unit = "ms"
        if took < 0.1:
            took *= 1000
            unit = "us"

        msg = f"{description} took: {took:.2f}{unit}"
        if logger:
            logger.info(msg)
        else:
            print(msg)


_first_cap_re = re.compile("(.)([A-Z][a-z0-9]+)")
_all_cap_re = re.compile("([a-z0-9])([A-Z])")


def camelcase_to_snakecase(name: str) -> str:
    """Convert camel-case string to snake-case."""
    s1 = _first_cap_re.sub(r"\1_\2", name)
    return _all_cap_re.sub(r"\1_\2", s1).lower()


def parse_pair(value: str, separator: str = ",") -> tuple:
    """Parse a string like '10,20' or '800x600' into a tuple of two floats."""
    parts = value.split(separator)
    if len(parts) != 2:
        raise ValueError(
            f"Expected two values separated by '{separator}', got '{value}'"
        )
    return float(parts[0].strip()), float(parts[1].strip())
