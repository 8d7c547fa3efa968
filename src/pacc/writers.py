from __future__ import annotations
from typing import Iterable, List
from .utils import to_hex8, to_bin8
from .encoding import Encoded
from .isa import MAGIC, MAGIC_WIDTH
from .diagnostics import IoError

def header() -> bytes:
    return MAGIC.to_bytes(MAGIC_WIDTH, "big")

def serialize(code: bytes) -> bytes:
    """Cabecera mágica (big-endian) seguida del cuerpo; sin longitud ni checksum."""
    return header() + bytes(code)

def write_program(path: str, code: bytes) -> int:
    """Escribe cabecera + cuerpo (truncando el archivo). Devuelve los bytes escritos."""
    data = serialize(code)
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as ex:
        raise IoError(ex) from ex
    return len(data)

def to_hex_lines(words: Iterable[Encoded]) -> List[str]:
    return [f"{to_hex8(w.byte)}  {to_bin8(w.byte)}  {w.mnemonic:<4} ; line {w.line}" for w in words]

def write_listing(words: Iterable[Encoded], path: str) -> None:
    lines = to_hex_lines(words)
    try:
        with open(path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as ex:
        raise IoError(ex) from ex
