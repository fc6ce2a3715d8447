"""Path string helpers."""

from __future__ import annotations

from collections.abc import Iterable


def get_common_directory_path(paths: Iterable[str], sep: str = "/") -> str:
    """Return the longest common directory of *paths*, with trailing *sep*.

    ``['/web/images/image1.png', '/web/images/image2.png']`` gives
    ``'/web/images/'``.  Returns ``''`` when the paths share no directory.
    """
    items = list(paths)
    if not items:
        return ""
    prefix = items[0]
    for path in items[1:]:
        length = 0
        for a, b in zip(prefix, path):
            if a != b:
                break
            length += 1
        prefix = prefix[:length]
    cut = prefix.rfind(sep)
    return prefix[: cut + 1] if cut >= 0 else ""
