'''
mapeos nombre↔código de registros y dispositivos, validaciones
'''

from __future__ import annotations
from typing import Dict

from .isa import Device, Register

# Nombres aceptados en el fuente (en minúsculas)
REGISTER_NAMES: Dict[str, Register] = {r.name.lower(): r for r in Register}
DEVICE_NAMES: Dict[str, Device] = {d.name.lower(): d for d in Device}

def normalize_reg(token: str) -> Register:
    """Devuelve el Register del token (sin distinguir mayúsculas) o lanza ValueError."""
    r = REGISTER_NAMES.get(token.lower())
    if r is None:
        raise ValueError(f"Invalid register: {token}")
    return r

def normalize_device(token: str) -> Device:
    """Devuelve el Device del token (sin distinguir mayúsculas) o lanza ValueError."""
    d = DEVICE_NAMES.get(token.lower())
    if d is None:
        raise ValueError(f"Invalid device: {token}")
    return d
