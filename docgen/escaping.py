"""
RTF escaping for user-supplied text.
"""

# Curly quotes -> straight ASCII quotes
_QUOTE_TABLE = str.maketrans({
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
})


def escape_rtf(text: str) -> str:
    """
    Escape RTF control characters and normalize smart quotes.

    Backslash is escaped first so the escapes added for braces are not
    doubled. Empty or None input yields an empty string.
    """
    if not text:
        return ''
    return (
        str(text)
        .replace('\\', '\\\\')
        .replace('{', '\\{')
        .replace('}', '\\}')
        .translate(_QUOTE_TABLE)
    )


def encode_unicode(text: str) -> str:
    """
    Write non-ASCII characters as RTF unicode escapes (``\\uN?``).

    Applied after escape_rtf(); output contains no braces, so group balance
    is unaffected. Code points above U+FFFF are emitted as UTF-16 surrogate
    pairs with signed 16-bit values, as RTF readers expect.
    """
    if not text:
        return ''
    out = []
    for char in text:
        code = ord(char)
        if code < 128:
            out.append(char)
            continue
        units = char.encode('utf-16-be')
        for i in range(0, len(units), 2):
            unit = int.from_bytes(units[i:i + 2], 'big')
            if unit > 32767:
                unit -= 65536
            out.append(f'\\u{unit}?')
    return ''.join(out)


def rtf_text(text: str) -> str:
    """Escape then encode: the form every free-text field takes in RTF output."""
    return encode_unicode(escape_rtf(text))


def unescape_rtf(text: str) -> str:
    """Inverse of escape_rtf() (quote normalization is not reversible)."""
    out = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == '\\' and i + 1 < len(text) and text[i + 1] in '\\{}':
            out.append(text[i + 1])
            i += 2
            continue
        out.append(char)
        i += 1
    return ''.join(out)
