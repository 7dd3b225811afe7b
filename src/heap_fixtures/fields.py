"""Fixed-width integer checks for fixture fields.

Python ints are unbounded, so fixture nodes that model 16, 32 or 64 bit
fields check their literals on construction instead.
"""


def int_bounds(bits: int) -> tuple[int, int]:
    """Inclusive range of a signed integer of the given width."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def check_signed(name: str, value: int, bits: int) -> None:
    """Raise ValueError unless ``value`` fits a signed ``bits``-wide integer."""
    low, high = int_bounds(bits)
    if not low <= value <= high:
        raise ValueError(f"{name} must fit in a signed {bits}-bit integer, got {value}")


def check_int16(name: str, value: int) -> None:
    check_signed(name, value, 16)


def check_int32(name: str, value: int) -> None:
    check_signed(name, value, 32)


def check_int64(name: str, value: int) -> None:
    check_signed(name, value, 64)
