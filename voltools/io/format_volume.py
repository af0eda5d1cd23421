"""
Human readable text rendering of volumes.
"""

import sys
from typing import Optional, TextIO
from ..funcs.volume import Volume


def format_shape(volume: Volume) -> str:
    """'(depth, rows, cols)'"""
    return f"({volume.depth}, {volume.rows}, {volume.cols})"


def format_volume(
    volume: Volume,
    decimals: Optional[int] = None) -> str:
    """
    Render a volume channel by channel.

    Each channel starts with a 'Channel i:' line, followed by one line per row
    of space-separated values and a blank line. Values use six decimals unless
    `decimals` is given. The invalid volume renders as an empty string.
    """
    if not volume.is_valid:
        return ""
    fmt = "{:f}" if decimals is None else "{:." + str(int(decimals)) + "f}"
    grid = volume.as_array()
    lines = []
    for i in range(volume.depth):
        lines.append(f"Channel {i}:")
        for j in range(volume.rows):
            lines.append(" ".join(fmt.format(float(v)) for v in grid[i, j]))
        lines.append("")
    return "\n".join(lines) + "\n"


def print_volume(
    volume: Volume,
    decimals: Optional[int] = None,
    file: TextIO = None) -> None:
    print(format_volume(volume, decimals), end="", file=file or sys.stdout)


def print_shape(
    volume: Volume,
    file: TextIO = None) -> None:
    print(format_shape(volume), file=file or sys.stdout)
