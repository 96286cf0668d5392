def group_string(value: str, sep: str = " ", size: int = 4) -> str:
    """
    split string into groups of <size> chars, joined by <sep>.
    useful for making secrets easier to read by humans.
    """
    return sep.join(value[idx : idx + size] for idx in range(0, len(value), size))
