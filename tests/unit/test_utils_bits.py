import pytest
from src.pacc.utils import u8, is_unsigned_nbit, to_bin8, to_hex8, U3, U4, U5

def test_u8_and_formats():
    assert u8(-1) == 0xFF
    assert to_bin8(1) == "0"*7 + "1"
    assert to_hex8(0xC0, prefix=True) == "0xc0"
    assert to_hex8(0x1F, prefix=False) == "1f"

def test_nbit_checks():
    assert is_unsigned_nbit(15, 4)
    assert not is_unsigned_nbit(16, 4)
    assert not is_unsigned_nbit(-1, 4)

@pytest.mark.parametrize("cls, maximum", [(U3, 7), (U4, 16), (U5, 31)])
def test_bounded_accepts_max_and_rejects_above(cls, maximum):
    assert cls(maximum).value == maximum
    assert int(cls(0)) == 0
    with pytest.raises(ValueError):
        cls(maximum + 1)
    with pytest.raises(ValueError):
        cls(-1)

def test_bounded_rejects_non_int():
    with pytest.raises(TypeError):
        U3("3")
    with pytest.raises(TypeError):
        U3(True)

def test_u4_sixteen_does_not_fit_field():
    assert U4(15).fits
    assert not U4(16).fits

def test_bounded_types_are_distinct():
    assert U3(1) == U3(1)
    assert U3(1) != U5(1)
