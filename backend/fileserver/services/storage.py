from __future__ import annotations
import html
import os
import stat
from typing import List, Optional
from urllib.parse import quote


def escape_path(url_path: str) -> str:
    # quotes as numeric entities (&#39; &#34;), not &#x27; &quot;
    return html.escape(url_path, quote=False).replace("'", "&#39;").replace('"', "&#34;")


def join_root(root_directory: str, escaped_path: str) -> str:
    # plain concatenation: os.path.join would drop the root for "//abs" paths
    filename = escaped_path.removeprefix("/")
    return root_directory + "/" + filename


def base_name(file_path: str) -> str:
    name = os.path.basename(file_path.rstrip("/"))
    return name or "/"


def is_within_root(root_directory: str, file_path: str) -> bool:
    try:
        base = os.path.realpath(root_directory)
        real = os.path.realpath(file_path)
    except ValueError:
        # embedded NUL
        return False
    return os.path.commonpath([base, real]) == base


def stat_path(file_path: str) -> Optional[os.stat_result]:
    """Stat a regular file or directory.

    Returns None when the path is missing, unreadable, or some other kind
    of file (fifo, socket, device). Callers do not get to tell these cases
    apart.
    """
    try:
        st = os.stat(file_path)
    except (OSError, ValueError):
        return None
    if not (stat.S_ISREG(st.st_mode) or stat.S_ISDIR(st.st_mode)):
        return None
    return st


def list_directory(dir_path: str) -> List[str]:
    """Sorted entry names, directories suffixed with "/". Raises OSError."""
    names = []
    with os.scandir(dir_path) as it:
        for entry in it:
            names.append(entry.name + "/" if entry.is_dir() else entry.name)
    return sorted(names)


def render_listing(names: List[str]) -> str:
    lines = ['<!doctype html>', '<meta name="viewport" content="width=device-width">', "<pre>"]
    for name in names:
        lines.append(f'<a href="{html.escape(quote(name))}">{html.escape(name)}</a>')
    lines.append("</pre>")
    return "\n".join(lines) + "\n"


def resolve_file(root_directory: str, url_path: str, confine: bool = True) -> tuple[str, str]:
    """Map a request path onto the root directory.

    Returns (escaped_path, file_path). The escaped path is what gets logged.
    When confine is set and the path leaves the root, file_path is "".
    """
    escaped = escape_path(url_path)
    file_path = join_root(root_directory, escaped)
    if confine and not is_within_root(root_directory, file_path):
        return escaped, ""
    return escaped, file_path
