"""Resource parsing utilities for table cells.

Provides functions to parse Kubernetes resource strings into numbers so that
table columns holding CPU, memory, counts, ratios or percentages can be
ordered by value rather than lexically:
- CPU: parsed to cores (float)
- Memory: parsed to bytes (float)
- Generic cells: best-effort numeric value, ``None`` when malformed
"""

# Suffix multipliers for memory_str_to_bytes() to convert to bytes.
_MEMORY_BYTES_MULTIPLIERS: tuple[tuple[str, int], ...] = (
    ("Ki", 1024),
    ("Mi", 1024**2),
    ("Gi", 1024**3),
    ("Ti", 1024**4),
)

_CPU_DIVISORS: tuple[tuple[str, int], ...] = (
    ("n", 1_000_000_000),
    ("u", 1_000_000),
    ("m", 1000),
)


def parse_cpu(cpu_str: str) -> float:
    """Parse CPU string to cores (float).

    Handles various CPU resource formats:
    - Nanocores: "500000000n" -> 0.5 cores
    - Microcores: "500000u" -> 0.5 cores
    - Millicores: "100m" -> 0.1 cores
    - Decimal: "1.5" -> 1.5 cores

    Args:
        cpu_str: CPU value as string (e.g., "100m", "1.5", "500")

    Returns:
        CPU value in cores as float. Returns 0.0 on parse error or empty string.
    """
    if not cpu_str:
        return 0.0

    cpu_str = str(cpu_str).strip()
    for suffix, divisor in _CPU_DIVISORS:
        if cpu_str.endswith(suffix):
            try:
                return float(cpu_str[:-1]) / divisor
            except ValueError:
                return 0.0

    try:
        return float(cpu_str)
    except ValueError:
        return 0.0


def memory_str_to_bytes(memory_str: str) -> float:
    """Convert memory string to bytes.

    Handles "1024Ki", "512Mi", "1Gi", "1Ti" and plain byte counts.

    Returns:
        Memory value in bytes as float. Returns 0.0 on parse error or empty string.
    """
    if not memory_str:
        return 0.0

    memory_str = str(memory_str).strip()

    for suffix, mult in _MEMORY_BYTES_MULTIPLIERS:
        if memory_str.endswith(suffix):
            try:
                return float(memory_str[:-2]) * mult
            except ValueError:
                return 0.0

    try:
        return float(memory_str)
    except ValueError:
        return 0.0


def parse_numeric_cell(cell: str) -> float | None:
    """Parse a display cell into a comparable number.

    Understands plain numbers, thousands separators, percentages ("45%"),
    ratios ("1/2" compares by numerator then by the ratio), millicores
    ("250m") and binary memory suffixes ("128Mi").

    Args:
        cell: Raw cell text.

    Returns:
        The numeric value, or None when the cell is empty or malformed.
    """
    text = str(cell or "").strip().replace(",", "")
    if not text:
        return None

    if text.endswith("%"):
        text = text[:-1]

    if "/" in text:
        head, _, tail = text.partition("/")
        try:
            numerator = float(head)
            denominator = float(tail)
        except ValueError:
            return None
        if denominator == 0:
            return numerator
        # Keep "2/3" above "1/3" and, for equal numerators, order by ratio.
        return numerator + numerator / (denominator * 1_000_000)

    for suffix, mult in _MEMORY_BYTES_MULTIPLIERS:
        if text.endswith(suffix):
            try:
                return float(text[:-2]) * mult
            except ValueError:
                return None

    if text.endswith("m"):
        try:
            return float(text[:-1]) / 1000
        except ValueError:
            return None

    try:
        return float(text)
    except ValueError:
        return None


__all__ = [
    "memory_str_to_bytes",
    "parse_cpu",
    "parse_numeric_cell",
]
