"""
Whitespace-only JSON reformatting

Both functions work on the token stream and copy string literals, numbers and
keywords byte for byte, so escapes and number spelling in a reply survive
formatting unchanged. Neither validates its input.
"""

_WHITESPACE = b" \t\r\n"
_QUOTE = ord('"')
_BACKSLASH = ord("\\")
_OPEN = b"{["
_CLOSE = b"}]"


def compact(data: bytes) -> bytes:
    """Drop whitespace outside string literals"""
    out = bytearray()
    in_string = False
    escaped = False

    for byte in data:
        if in_string:
            out.append(byte)
            if escaped:
                escaped = False
            elif byte == _BACKSLASH:
                escaped = True
            elif byte == _QUOTE:
                in_string = False
            continue

        if byte in _WHITESPACE:
            continue
        if byte == _QUOTE:
            in_string = True
        out.append(byte)

    return bytes(out)


def indent(data: bytes, unit: str = "\t") -> bytes:
    """Re-indent JSON with one `unit` per nesting level.

    Empty objects and arrays stay on one line (`{}` / `[]`) and members are
    written as `"key": value`.
    """
    step = unit.encode("utf-8")
    out = bytearray()
    depth = 0
    pending_open = False
    in_string = False
    escaped = False

    def newline():
        out.extend(b"\n" + step * depth)

    for byte in compact(data):
        if in_string:
            out.append(byte)
            if escaped:
                escaped = False
            elif byte == _BACKSLASH:
                escaped = True
            elif byte == _QUOTE:
                in_string = False
            continue

        if pending_open and byte not in _CLOSE:
            pending_open = False
            depth += 1
            newline()

        if byte == _QUOTE:
            in_string = True
            out.append(byte)
        elif byte in _OPEN:
            out.append(byte)
            pending_open = True
        elif byte in _CLOSE:
            if pending_open:
                pending_open = False
            else:
                depth = max(depth - 1, 0)
                newline()
            out.append(byte)
        elif byte == ord(","):
            out.append(byte)
            newline()
        elif byte == ord(":"):
            out.extend(b": ")
        else:
            out.append(byte)

    return bytes(out)


def render(raw: bytes, format_output: bool = True, unit: str = "\t") -> bytes:
    """Reply bytes as printed: raw for -no-format, tab-indented otherwise"""
    if not format_output:
        return raw
    return indent(raw, unit)
