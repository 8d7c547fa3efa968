'''
dataclases de instrucciones (Instruction y formas de operandos)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Type, Union

from .isa import Category, CATEGORY_OF, Device, Opcode, Register
from .utils import U3, U4, U5

# ---- Formas de operandos (una por categoría) ----

@dataclass(frozen=True)
class Immediate:
    """Inmediato sin signo de 5 bits (adi)."""
    value: U5

@dataclass(frozen=True)
class RegisterPair:
    """Origen y destino (add/sub); 'indirect' viene del sufijo 'p'."""
    indirect: bool
    src: Register
    dest: Register

@dataclass(frozen=True)
class MemoryAddress:
    """Dirección de salto (jne/jg/jl); 'pointer' viene del sufijo 'p'."""
    pointer: bool
    addr: U4

@dataclass(frozen=True)
class IoOperation:
    """Dispositivo y función de E/S (ioi/ior)."""
    device: Device
    function: U3

InstructionData = Union[Immediate, RegisterPair, MemoryAddress, IoOperation]

SHAPE_OF: Dict[Category, Type] = {
    Category.IMMEDIATE: Immediate,
    Category.REGISTER_PAIR: RegisterPair,
    Category.MEMORY_ADDRESS: MemoryAddress,
    Category.IO_OPERATION: IoOperation,
}

# ---- Nodos a nivel de fuente ----

@dataclass(frozen=True)
class Instruction:
    """Opcode con su forma de operandos; la forma debe coincidir con la categoría."""
    opcode: Opcode
    data: InstructionData
    line: int = 0

    def __post_init__(self):
        shape = SHAPE_OF[CATEGORY_OF[self.opcode]]
        if not isinstance(self.data, shape):
            raise ValueError(
                f"{self.opcode.name.lower()} requires {shape.__name__} operands, "
                f"got {type(self.data).__name__}"
            )

def halt(line: int = 0) -> Instruction:
    """'hlt' == 'ioi cpu 0'."""
    return Instruction(Opcode.IOI, IoOperation(Device.CPU, U3(0)), line)

Program = List[Instruction]
