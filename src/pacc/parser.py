# src/pacc/parser.py
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Optional

from .lexer import (
    source_lines,
    is_blank,
    split_mnemonic_operands,
    strip_suffix,
)
from .ast import (
    Instruction, InstructionData, Immediate, RegisterPair, MemoryAddress,
    IoOperation, Program, halt,
)
from .isa import Category, Opcode, OpSpec, INDIRECT_SUFFIX, HALT_MNEMONIC, spec as isa_spec
from .regs import normalize_reg, normalize_device
from .utils import U3, U4, U5, U8_MASK
from .diagnostics import (
    LineTooShort, LineTooLong, InvalidInstruction, InvalidRegister,
    InvalidDevice, InvalidInteger, IntegerTooLarge,
)

# signo "+" opcional, como al analizar un u8
DEC_INT_RE = re.compile(r"\+?[0-9]+")
U8_DIGITS = 3

@dataclass(frozen=True)
class Resolved:
    """Salida del resolutor de mnemónicos: opcode, bandera indirecta y operandos crudos."""
    spec: OpSpec
    indirect: bool
    operands: List[str]
    line: int

    @property
    def opcode(self) -> Opcode:
        return self.spec.opcode

# ---------------- Resolutor de mnemónicos ----------------

def resolve_mnemonic(token: str, operands: List[str], line: int) -> Resolved:
    """Traduce el mnemónico a su OpSpec.

    - sin distinguir mayúsculas
    - sufijo 'p' => indirect=True (salvo 'adip', que es inválido)
    - error InvalidInstruction con el token tal cual se escribió
    """
    lowered = token.lower()
    name, indirect = strip_suffix(lowered, INDIRECT_SUFFIX)
    if indirect and name == "adi":
        raise InvalidInstruction(token, line)
    try:
        spec = isa_spec(name)
    except KeyError:
        raise InvalidInstruction(token, line) from None
    return Resolved(spec=spec, indirect=indirect, operands=operands, line=line)

# ---------------- Validador de operandos ----------------

def _check_arity(res: Resolved) -> None:
    n = len(res.operands)
    if n < res.spec.arity:
        raise LineTooShort(res.line)
    if n > res.spec.arity:
        raise LineTooLong(res.line)

def _parse_uint(token: str, maximum: int, line: int) -> int:
    """Entero decimal sin signo que cabe en un byte y no supera 'maximum'."""
    if not DEC_INT_RE.fullmatch(token):
        raise InvalidInteger(token, line)
    digits = token.lstrip("+").lstrip("0")
    # más de 3 cifras significativas nunca caben en un u8
    if len(digits) > U8_DIGITS:
        raise InvalidInteger(token, line)
    val = int(digits or "0")
    if val > U8_MASK:
        raise InvalidInteger(token, line)
    if val > maximum:
        raise IntegerTooLarge(val, maximum, line)
    return val

def _parse_reg(token: str, line: int):
    try:
        return normalize_reg(token)
    except ValueError:
        raise InvalidRegister(token, line) from None

def _parse_device(token: str, line: int):
    try:
        return normalize_device(token)
    except ValueError:
        raise InvalidDevice(token, line) from None

def validate_operands(res: Resolved) -> InstructionData:
    """Comprueba aridad y campos según la categoría y construye la forma de datos."""
    _check_arity(res)
    ops, line, spec = res.operands, res.line, res.spec
    cat = spec.category

    if cat is Category.IMMEDIATE:
        return Immediate(U5(_parse_uint(ops[0], spec.max_value, line)))

    if cat is Category.REGISTER_PAIR:
        src = _parse_reg(ops[0], line)
        dest = _parse_reg(ops[1], line)
        return RegisterPair(indirect=res.indirect, src=src, dest=dest)

    if cat is Category.MEMORY_ADDRESS:
        addr = _parse_uint(ops[0], spec.max_value, line)
        return MemoryAddress(pointer=res.indirect, addr=U4(addr))

    if cat is Category.IO_OPERATION:
        device = _parse_device(ops[0], line)
        function = _parse_uint(ops[1], spec.max_value, line)
        return IoOperation(device=device, function=U3(function))

    raise AssertionError(f"unhandled category: {cat}")

# ---------------- Líneas y programa ----------------

def parse_line(line: str, lineno: int) -> Optional[Instruction]:
    """Devuelve la Instruction de una línea, o None si la línea está en blanco."""
    if is_blank(line):
        return None
    mnemonic, operands = split_mnemonic_operands(line)
    # 'hlt' se reconoce antes de quitar el sufijo e ignora el resto de la línea
    if mnemonic.lower() == HALT_MNEMONIC:
        return halt(lineno)
    res = resolve_mnemonic(mnemonic, operands, lineno)
    return Instruction(res.opcode, validate_operands(res), lineno)

def parse(text: str) -> Program:
    """
    Devuelve el Program (lista de Instruction en orden de fuente).

    Reglas:
      - Una instrucción por línea; campos separados por un único espacio.
      - Las líneas en blanco no generan instrucción pero sí cuentan para la numeración.
      - El primer error aborta el análisis (se propaga la AsmError).
    """
    program: Program = []
    for lineno, raw in source_lines(text):
        ins = parse_line(raw, lineno)
        if ins is not None:
            program.append(ins)
    return program
