"""Fixed-size sequences and growable lists."""


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """The same four numbers as an immutable tuple and as a list."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(v: list[int]) -> list[int]:
    """Double every element in place and return the list."""
    v[:] = [element * 2 for element in v]
    return v


def vec_map(v: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [element * 2 for element in v]