"""
Standard input helpers

The "is stdin piped" check is an environment probe; main_cli looks it up in
click's context object so tests can substitute their own.
"""

import os
import stat
import sys

from rpc.errors import StdinError


def stdin_is_piped(stream=None) -> bool:
    """True when stdin is not a character device (pipe, file, socket).

    Not perfect: a character device such as /dev/zero counts as a terminal.
    """
    stream = stream if stream is not None else sys.stdin
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (AttributeError, OSError, ValueError):
        return False
    return not stat.S_ISCHR(mode)


def read_stdin(stream=None) -> bytes:
    """Read stdin to completion as raw bytes"""
    stream = stream if stream is not None else sys.stdin
    binary = getattr(stream, "buffer", stream)
    try:
        data = binary.read()
    except OSError as e:
        raise StdinError(str(e)) from e
    if isinstance(data, str):
        data = data.encode("utf-8")
    return data
