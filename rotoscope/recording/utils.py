from __future__ import annotations


def normalize_directory(directory: str) -> str:
    """Return the directory path with exactly one trailing slash."""
    return str(directory).rstrip("/\\") + "/"


def pad_width(count: int) -> int:
    """Number of decimal digits in count (floor(log10(count)) + 1)."""
    if count <= 0:
        return 1
    return len(str(int(count)))


def sequence_filename(prefix: str, index: int, width: int, image_format: str = "png") -> str:
    return f"{prefix}-table-{int(index):0{int(width)}d}.{image_format}"


def matrix_filename(prefix: str, cell_width: int, cell_height: int, image_format: str = "png") -> str:
    return f"{prefix}-table-{int(cell_width)}-{int(cell_height)}.{image_format}"

