"""Shell-safe escaping for values placed on unit-file command lines."""

import re

# Characters that never need quoting in a POSIX shell word
_SAFE_CHARS = r"\w@%+=:,./-"
_SAFE_WORD = re.compile(rf"^[{_SAFE_CHARS}]+$", re.ASCII)
_SAFE_CHAR = re.compile(rf"[{_SAFE_CHARS}]", re.ASCII)


def cmd(value: str) -> str:
    """Quote ``value`` as one shell word when it holds whitespace or metacharacters.

    Safe values are returned unchanged. Anything else is wrapped in double
    quotes with backslashes and double quotes escaped.

    This is shell quoting only. systemd still expands ``%`` specifiers and
    ``$VAR`` references on command lines, so a value such as ``100%`` or
    ``$HOME`` does not reach the program literally.
    """
    if _SAFE_WORD.match(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def cmd_escape(value: str) -> str:
    """Backslash-escape every unsafe character so ``value`` stays one unbroken token.

    Like ``cmd``, this leaves ``%`` specifiers for systemd to expand.
    """
    return "".join(ch if _SAFE_CHAR.match(ch) else f"\\{ch}" for ch in value)
