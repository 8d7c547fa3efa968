'''
tabla formal del ISA de 8 bits (opcodes, categorías, aridad, máximos)
'''

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict

# Cabecera mágica del binario (contrato con el decodificador/emulador)
MAGIC = 0x5041_4354  # "PACT"
MAGIC_WIDTH = 4      # bytes, big-endian

# Sufijo de direccionamiento indirecto ('addp', 'jnep', ...)
INDIRECT_SUFFIX = "p"

# Pseudo-instrucción que se expande a 'ioi cpu 0'
HALT_MNEMONIC = "hlt"

class Opcode(IntEnum):
    """Opcode de 3 bits (bits 7..5 del byte codificado)."""
    ADI = 0b000
    ADD = 0b001
    SUB = 0b010
    JNE = 0b011
    JG  = 0b100
    JL  = 0b101
    IOI = 0b110
    IOR = 0b111

class Register(IntEnum):
    RA = 0b00
    RB = 0b01
    RC = 0b10
    RD = 0b11

class Device(IntEnum):
    CPU = 0b00
    KBD = 0b01
    SCR = 0b10
    MTH = 0b11

class Category(Enum):
    """Forma de los operandos; decide aridad y disposición de bits."""
    IMMEDIATE = "immediate"
    REGISTER_PAIR = "register_pair"
    MEMORY_ADDRESS = "memory_address"
    IO_OPERATION = "io_operation"

@dataclass(frozen=True)
class OpSpec:
    """Especificación de un opcode.

    - category: forma de los operandos
    - arity: número exacto de operandos tras el mnemónico
    - max_value: máximo del campo entero (None si la categoría no tiene entero)
    """
    opcode: Opcode
    category: Category
    arity: int
    max_value: int | None = None

# Máximos declarados por categoría
IMM_MAX = 31
ADDR_MAX = 16
FUNC_MAX = 7

SPEC: Dict[str, OpSpec] = {}

def _add(name: str, spec: OpSpec):
    SPEC[name] = spec

# Inmediato
_add("adi", OpSpec(Opcode.ADI, Category.IMMEDIATE, 1, IMM_MAX))

# Par de registros
_add("add", OpSpec(Opcode.ADD, Category.REGISTER_PAIR, 2))
_add("sub", OpSpec(Opcode.SUB, Category.REGISTER_PAIR, 2))

# Saltos a dirección de memoria
_add("jne", OpSpec(Opcode.JNE, Category.MEMORY_ADDRESS, 1, ADDR_MAX))
_add("jg",  OpSpec(Opcode.JG,  Category.MEMORY_ADDRESS, 1, ADDR_MAX))
_add("jl",  OpSpec(Opcode.JL,  Category.MEMORY_ADDRESS, 1, ADDR_MAX))

# Entrada/salida
_add("ioi", OpSpec(Opcode.IOI, Category.IO_OPERATION, 2, FUNC_MAX))
_add("ior", OpSpec(Opcode.IOR, Category.IO_OPERATION, 2, FUNC_MAX))

CATEGORY_OF: Dict[Opcode, Category] = {s.opcode: s.category for s in SPEC.values()}

def spec(mnemonic: str) -> OpSpec:
    """Devuelve la especificación de una instrucción por mnemónico (sin sufijo)."""
    m = mnemonic.lower()
    if m not in SPEC:
        raise KeyError(f"Unknown instruction: {mnemonic}")
    return SPEC[m]
