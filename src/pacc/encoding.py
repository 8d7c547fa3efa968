# src/pacc/encoding.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List

from .ast import Instruction, Immediate, RegisterPair, MemoryAddress, IoOperation, Program
from .utils import u8
from .diagnostics import Diagnostic, warning

OPCODE_SHIFT = 5

# ---------------- Resultados de codificación ----------------

@dataclass(frozen=True)
class Encoded:
    byte: int     # u8
    index: int    # posición en el cuerpo del programa
    line: int
    mnemonic: str

@dataclass(frozen=True)
class EncodeResult:
    words: List[Encoded]
    diagnostics: List[Diagnostic]

    @property
    def code(self) -> bytes:
        """Cuerpo del programa: un byte por instrucción, en orden de fuente."""
        return bytes(w.byte for w in self.words)

# ---------------- Helpers de empaquetado de bits ----------------

def _pack(opc: int, payload: int) -> int:
    return u8((opc & 0x7) << OPCODE_SHIFT | (payload & 0x1F))

def _pack_imm(value: int) -> int:
    return value & 0x1F

def _pack_reg(indirect: bool, src: int, dest: int) -> int:
    return (int(indirect) & 0x1) << 4 | (src & 0x3) << 2 | (dest & 0x3)

def _pack_mem(pointer: bool, addr: int) -> int:
    # addr=16 no cabe en 4 bits: se emiten los 4 bits bajos (encode() avisa)
    return (int(pointer) & 0x1) << 4 | (addr & 0xF)

def _pack_io(device: int, function: int) -> int:
    return (device & 0x3) << 3 | (function & 0x7)

# ---------------- Codificador ----------------

def encode_instruction(ins: Instruction) -> int:
    """Empaqueta una Instruction en un byte: [opcode:3][payload:5]."""
    d = ins.data
    if isinstance(d, Immediate):
        payload = _pack_imm(d.value.value)
    elif isinstance(d, RegisterPair):
        payload = _pack_reg(d.indirect, int(d.src), int(d.dest))
    elif isinstance(d, MemoryAddress):
        payload = _pack_mem(d.pointer, d.addr.value)
    elif isinstance(d, IoOperation):
        payload = _pack_io(int(d.device), d.function.value)
    else:
        raise TypeError(f"unknown instruction data: {d!r}")
    return _pack(int(ins.opcode), payload)

def encode(program: Program) -> EncodeResult:
    diags: List[Diagnostic] = []
    words: List[Encoded] = []

    for index, ins in enumerate(program):
        d = ins.data
        if isinstance(d, MemoryAddress) and not d.addr.fits:
            diags.append(warning(
                f"Address `{d.addr.value}` on line {ins.line} does not fit the 4-bit field; "
                f"encoded as {d.addr.value & 0xF}",
                line=ins.line,
                hint="addresses 0..15 encode exactly",
            ))
        words.append(Encoded(
            byte=encode_instruction(ins),
            index=index,
            line=ins.line,
            mnemonic=ins.opcode.name.lower(),
        ))

    return EncodeResult(words=words, diagnostics=diags)
