"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, control keys, and SGR mouse events.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
UNKNOWN_KEY = "UNKNOWN"
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS = {
    b"\x02": "CTRL_B",
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
    b"\x06": "CTRL_F",
    b"\x15": "CTRL_U",
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
}

_ARROWS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> str:
    """Complete a multi-byte UTF-8 character that starts with ``lead``."""
    first = lead[0]
    if first >= 0xF0:
        needed = 3
    elif first >= 0xE0:
        needed = 2
    elif first >= 0xC0:
        needed = 1
    else:
        needed = 0
    data = lead
    for _ in range(needed):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _read_csi(fd: int) -> tuple[bytes, bytes] | None:
    """Read ``ESC [`` parameters up to the final byte (``0x40``-``0x7e``).

    Returns ``(params, final)`` or ``None`` when the sequence is cut short or
    runs past a sane length.
    """
    params: list[bytes] = []
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return None
        if 0x40 <= part[0] <= 0x7E:
            return b"".join(params), part
        params.append(part)
        if len(params) > 64:
            return None


def _decode_sgr_mouse(params: bytes, final: bytes) -> str:
    """Decode an SGR mouse report ``ESC [ < btn ; col ; row (M|m)``."""
    try:
        btn_s, col_s, row_s = params[1:].decode("ascii").split(";")
        btn = int(btn_s)
        col = int(col_s)
        row = int(row_s)
    except ValueError:
        return UNKNOWN_KEY
    button = btn & 0b11
    is_wheel = (btn & 0b0100_0000) != 0
    is_motion = (btn & 0b0010_0000) != 0
    if is_wheel:
        if button == 0:
            return f"MOUSE_WHEEL_UP:{col}:{row}"
        if button == 1:
            return f"MOUSE_WHEEL_DOWN:{col}:{row}"
        return "MOUSE"
    if button == 0 and not is_motion:
        suffix = "DOWN" if final == b"M" else "UP"
        return f"MOUSE_LEFT_{suffix}:{col}:{row}"
    return "MOUSE"


def _decode_csi(params: bytes, final: bytes) -> str:
    if params.startswith(b"<"):
        if final not in {b"M", b"m"}:
            return UNKNOWN_KEY
        return _decode_sgr_mouse(params, final)
    arrow = _ARROWS.get(final)
    # Plain arrows, or ESC [ 1 ; <mod> <A-D> with the modifier dropped.
    if arrow is not None and (params == b"" or params.startswith(b"1;")):
        return arrow
    return UNKNOWN_KEY


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Returns ``""`` when ``timeout_ms`` elapses without input or the stream
    hits EOF. ``"ESC"`` is a lone Escape press; escape sequences that are not
    recognized decode to ``"UNKNOWN"`` and are consumed whole.
    """
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

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch)

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"[":
        csi = _read_csi(fd)
        if csi is None:
            return UNKNOWN_KEY
        return _decode_csi(*csi)
    if seq == b"O":
        # SS3: application-mode arrows and F1-F4.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return UNKNOWN_KEY
        return _ARROWS.get(final, UNKNOWN_KEY)
    # Lone ESC followed by an ordinary key.
    _PENDING_BYTES.append(seq)
    return "ESC"
