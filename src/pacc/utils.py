'''
enteros acotados (U3, U4, U5) y bit-twiddling de 8 bits
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar

# Máscara para 8 bits sin signo
U8_MASK = 0xFF

def u8(x: int) -> int:
    """Fuerza el valor al rango de 8 bits sin signo."""
    return x & U8_MASK

def is_unsigned_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [0, 2^n) (sin signo de n bits)."""
    if n <= 0:
        raise ValueError("n must be positive")
    return 0 <= x < (1 << n)

def to_bin8(x: int) -> str:
    """Representación binaria de 8 bits (cadena)."""
    return format(u8(x), "08b")

def to_hex8(x: int, *, prefix: bool = True) -> str:
    """Representación hexadecimal de 8 bits (cadena), con o sin prefijo 0x."""
    s = format(u8(x), "02x")
    return ("0x" + s) if prefix else s

# ---- Enteros acotados ----

@dataclass(frozen=True)
class _Bounded:
    """Entero sin signo validado en construcción; nunca se trunca."""
    value: int

    BITS: ClassVar[int] = 8
    MAX: ClassVar[int] = U8_MASK

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"{type(self).__name__} requires an int, got {self.value!r}")
        if not 0 <= self.value <= self.MAX:
            raise ValueError(f"{type(self).__name__} out of range: {self.value} (0..{self.MAX})")

    @property
    def fits(self) -> bool:
        """True si el valor cabe en el ancho de campo BITS."""
        return is_unsigned_nbit(self.value, self.BITS)

    def __int__(self) -> int:
        return self.value

class U3(_Bounded):
    BITS = 3
    MAX = 7

class U4(_Bounded):
    # El validador acepta 16 aunque el campo sólo tiene 4 bits (ver encoding)
    BITS = 4
    MAX = 16

class U5(_Bounded):
    BITS = 5
    MAX = 31
