import pytest
from src.pacc.parser import parse, parse_line
from src.pacc.encoding import encode, encode_instruction
from src.pacc.isa import Opcode

def _byte(line: str) -> int:
    return encode_instruction(parse_line(line, 1))

@pytest.mark.parametrize("line, expected", [
    ("adi 0",      0b000_00000),
    ("adi 31",     0b000_11111),
    ("add ra rb",  0b001_0_00_01),
    ("addp rd ra", 0b001_1_11_00),
    ("sub rc rd",  0b010_0_10_11),
    ("jne 15",     0b011_0_1111),
    ("jnep 15",    0b011_1_1111),
    ("jg 3",       0b100_0_0011),
    ("jl 0",       0b101_0_0000),
    ("ioi cpu 0",  0b110_00_000),
    ("ioi kbd 5",  0b110_01_101),
    ("ior mth 7",  0b111_11_111),
])
def test_bit_layout(line, expected):
    assert _byte(line) == expected

def test_opcode_occupies_top_bits_uniquely():
    lines = ["adi 1", "add ra rb", "sub ra rb", "jne 1", "jg 1", "jl 1", "ioi cpu 1", "ior cpu 1"]
    tops = [_byte(l) >> 5 for l in lines]
    assert tops == [int(op) for op in Opcode]
    assert len(set(tops)) == 8

def test_hlt_same_as_ioi_cpu_0():
    assert _byte("hlt") == _byte("ioi cpu 0") == 0xC0

def test_encode_program_order_and_code():
    enc = encode(parse("add ra rb\nsub rc rd\nhlt\n"))
    assert enc.code == bytes([0x21, 0x4B, 0xC0])
    assert [w.index for w in enc.words] == [0, 1, 2]
    assert [w.mnemonic for w in enc.words] == ["add", "sub", "ioi"]
    assert not enc.diagnostics

def test_address_sixteen_warns_and_keeps_low_bits():
    enc = encode(parse("adi 1\njne 16\n"))
    assert enc.code == bytes([0x01, 0b011_0_0000])
    assert len(enc.diagnostics) == 1
    d = enc.diagnostics[0]
    assert d.severity == "warning"
    assert d.line == 2
