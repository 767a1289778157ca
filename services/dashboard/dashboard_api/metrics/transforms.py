BYTES_PER_MEGABYTE = 1024 * 1024


def to_megabytes_text(value: float) -> str:
    """Bytes to megabytes, rounded to two decimals and rendered as text."""
    return f"{value / BYTES_PER_MEGABYTE:.2f}"
