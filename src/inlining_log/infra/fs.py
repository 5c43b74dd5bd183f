from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Writes rendered reports to disk for the surrounding compiler's diagnostic
output directory.
"""

import os
from typing import List, Optional, Tuple


def save_lines(path: str, lines: List[str]) -> Tuple[bool, Optional[str]]:
    """
    Write `lines` to `path`, one per line, creating parent directories.

    Args:
        path: Target file path.
        lines: Report lines.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        out_dir = os.path.dirname(os.path.abspath(path))
        os.makedirs(out_dir, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write("".join(f"{line}\n" for line in lines))
        return True, None
    except OSError as e:
        return False, str(e)
