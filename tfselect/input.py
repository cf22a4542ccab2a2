"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing and multi-byte UTF-8 characters.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_MAX_CSI_PARAMS = 16
UNKNOWN_KEY = "UNKNOWN"
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x15": "CTRL_U",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_CURSOR_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

# ESC [ n ~ keys.
_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"3": "DELETE",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"7": "HOME",
    b"8": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_utf8_char(fd: int, lead: bytes) -> str:
    """Collect continuation bytes for a multi-byte character."""
    data = lead
    for _ in range(_utf8_length(lead[0]) - 1):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        data += part
    return data.decode("utf-8", errors="replace")



def _read_escape_sequence(fd: int) -> str:
    """Decode the bytes after ``ESC`` into a key token.

    ``"ESC"`` is returned only for a bare escape: nothing follows within the
    timeout, or a second ``ESC`` starts the next key.
    Complete sequences the picker has no use for, such as function keys,
    modified arrows, or Alt+key, yield ``UNKNOWN_KEY``.
    """
    lead = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if lead is None:
        return "ESC"
    if lead == b"\x1b":
        _PENDING_BYTES.append(lead)
        return "ESC"
    if lead == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return UNKNOWN_KEY
        return _CURSOR_KEYS.get(final, UNKNOWN_KEY)
    if lead != b"[":
        # Alt+key: the terminal prefixes the key with ESC.
        if lead[0] >= 0xC0:
            _read_utf8_char(fd, lead)
        return UNKNOWN_KEY

    # CSI: parameter and intermediate bytes up to a final byte in 0x40-0x7E.
    params = b""
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return UNKNOWN_KEY
        if 0x40 <= part[0] <= 0x7E:
            final = part
            break
        params += part
        if len(params) > _MAX_CSI_PARAMS:
            return UNKNOWN_KEY

    if final == b"~":
        return _TILDE_KEYS.get(params, UNKNOWN_KEY)
    if params not in {b"", b"1"}:
        return UNKNOWN_KEY
    return _CURSOR_KEYS.get(final, UNKNOWN_KEY)


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token; returns ``""`` when ``timeout_ms`` elapses first."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    named = _CONTROL_KEYS.get(ch)
    if named is not None:
        return named

    if ch != b"\x1b":
        return _read_utf8_char(fd, ch)
    return _read_escape_sequence(fd)
