"""Utilities for formatting data."""

BYTES_IN_KIB = 1024
UNIT_PREFIXES = "KMGTPE"


def byte_to_hr(size_in_bytes: int) -> str:
    """Convert a size in bytes to a binary-prefixed, human-readable string.

    Values below 1024 are shown as whole bytes (``"512 B"``). Larger values
    are divided by 1024 until the next division would drop the quotient
    below 1024, and shown with one decimal and an ``iB`` unit
    (``"1.5KiB"``, ``"1.0MiB"``). Anything past the exbibyte range stays
    in EiB.

    Args:
        size_in_bytes: The size in bytes.

    Returns:
        The formatted size string.

    """
    if size_in_bytes < BYTES_IN_KIB:
        return f"{size_in_bytes} B"

    divisor = BYTES_IN_KIB
    exponent = 0
    quotient = size_in_bytes // BYTES_IN_KIB
    while quotient >= BYTES_IN_KIB and exponent < len(UNIT_PREFIXES) - 1:
        divisor *= BYTES_IN_KIB
        exponent += 1
        quotient //= BYTES_IN_KIB

    return f"{size_in_bytes / divisor:.1f}{UNIT_PREFIXES[exponent]}iB"
