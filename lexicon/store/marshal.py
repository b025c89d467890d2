"""
Minimal Ruby Marshal 4.8 reader.

Covers the subset RPG Maker VX Ace uses for Data/Scripts.rvdata2 (an array
of [id, name, deflated code] triples) plus the other scalar types that can
appear alongside them.  Strings are returned as raw `bytes`; instance
variables attached to strings (encoding markers) are read and dropped.

Type bytes handled
──────────────────
  0 nil   T true   F false   i fixnum   l bignum   f float
  " string   : symbol   ; symbol link   @ object link
  I ivar wrapper   [ array
"""

import struct

from lexicon.exceptions import LoaderError

__all__ = ["loads", "MARSHAL_VERSION"]

MARSHAL_VERSION = (4, 8)


class _Reader:
    """Cursor over one Marshal stream with its symbol and object tables."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0
        self._symbols: list[str] = []
        self._objects: list[object] = []

    # ── Primitive reads ───────────────────────────────────────────────────

    def _byte(self) -> int:
        if self._pos >= len(self._data):
            raise LoaderError("Unexpected end of Marshal data")
        value = self._data[self._pos]
        self._pos += 1
        return value

    def _bytes(self, count: int) -> bytes:
        if count < 0 or self._pos + count > len(self._data):
            raise LoaderError(f"Marshal length {count} exceeds data at offset {self._pos}")
        chunk = self._data[self._pos:self._pos + count]
        self._pos += count
        return chunk

    def _fixnum(self) -> int:
        code = struct.unpack("b", bytes([self._byte()]))[0]
        if code == 0:
            return 0
        if 0 < code <= 4:
            return int.from_bytes(self._bytes(code), "little")
        if -4 <= code < 0:
            size = -code
            return int.from_bytes(self._bytes(size), "little") - (1 << (8 * size))
        return code - 5 if code > 0 else code + 5

    def _register(self, obj: object) -> object:
        self._objects.append(obj)
        return obj

    # ── Values ────────────────────────────────────────────────────────────

    def header(self) -> None:
        version = (self._byte(), self._byte())
        if version != MARSHAL_VERSION:
            raise LoaderError(f"Unsupported Marshal version {version[0]}.{version[1]}")

    def value(self) -> object:
        kind = chr(self._byte())

        if kind == "0":
            return None
        if kind == "T":
            return True
        if kind == "F":
            return False
        if kind == "i":
            return self._fixnum()
        if kind == ":":
            symbol = self._bytes(self._fixnum()).decode("utf-8", errors="replace")
            self._symbols.append(symbol)
            return symbol
        if kind == ";":
            index = self._fixnum()
            try:
                return self._symbols[index]
            except IndexError:
                raise LoaderError(f"Bad Marshal symbol link {index}") from None
        if kind == "@":
            index = self._fixnum()
            try:
                return self._objects[index]
            except IndexError:
                raise LoaderError(f"Bad Marshal object link {index}") from None
        if kind == '"':
            return self._register(self._bytes(self._fixnum()))
        if kind == "l":
            sign = chr(self._byte())
            magnitude = int.from_bytes(self._bytes(self._fixnum() * 2), "little")
            return self._register(-magnitude if sign == "-" else magnitude)
        if kind == "f":
            return self._register(self._float(self._bytes(self._fixnum())))
        if kind == "I":
            obj = self.value()
            for _ in range(self._fixnum()):
                self.value()   # ivar name
                self.value()   # ivar value
            return obj
        if kind == "[":
            items: list[object] = []
            self._register(items)
            for _ in range(self._fixnum()):
                items.append(self.value())
            return items

        raise LoaderError(f"Unsupported Marshal type byte {kind!r} at offset {self._pos - 1}")

    @staticmethod
    def _float(raw: bytes) -> float:
        text = raw.split(b"\x00", 1)[0].decode("ascii", errors="replace")
        if text == "nan":
            return float("nan")
        if text == "inf":
            return float("inf")
        if text == "-inf":
            return float("-inf")
        try:
            return float(text)
        except ValueError:
            raise LoaderError(f"Bad Marshal float {text!r}") from None


def loads(data: bytes) -> object:
    """
    Decode one Marshal 4.8 document from *data*.

    Raises:
        LoaderError: wrong version, truncated data, or an unsupported type.
    """
    reader = _Reader(data)
    reader.header()
    return reader.value()
