U64_MAX: int = 2**64 - 1


def saturating_add(value: int, delta: int) -> int:
    """
    Adds `delta` to `value`, clamping the result to the unsigned 64-bit range.
    Parameters:
        value (int): The current counter value.
        delta (int): The non-negative amount to add.
    Returns:
        int: `value + delta`, or U64_MAX if that would not fit in 64 bits.
    """
    return min(value + delta, U64_MAX)


def humanize(bytes_size: int) -> str:
    """
    Converts a size in bytes to a compact human-readable format using binary prefixes.
    Exact multiples of a unit render without decimals ("4K"), anything else with one
    decimal digit ("1.5K"). Values below 1024 are rendered in bytes ("512B").
    Rounding never carries into the next unit, so 2**20 - 1 renders as "1024.0K".
    Parameters:
        bytes_size (int): The size in bytes to be converted.
    Returns:
        str: The human-readable size, uppercase and without spaces.
    """
    if bytes_size < 1024:
        return f"{bytes_size}B"
    magnitude = 1024
    for unit in ["K", "M", "G", "T", "P"]:
        if bytes_size < magnitude * 1024:
            break
        magnitude *= 1024
    else:
        unit = "E"
    if bytes_size % magnitude == 0:
        return f"{bytes_size // magnitude}{unit}"
    return f"{bytes_size / magnitude:.1f}{unit}"
