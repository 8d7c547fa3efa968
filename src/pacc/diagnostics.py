'''
clase Diagnostic, helpers y la taxonomía cerrada de errores del ensamblador
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

Severity = Literal["error", "warning", "note"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "warning": "WARNING",
    "note": "NOTE",
}

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Abarca errores, advertencias y notas, con ubicación opcional (archivo y línea)
    y un mensaje de ayuda (pista) para orientar la corrección.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}:"
        if loc:
            loc += " "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (hint: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, hint, file)

def warning(message: str, *, line: int | None = None,
            file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo advertencia."""
    return Diagnostic("warning", message, line, hint, file)

def note(message: str, *, line: int | None = None,
         file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo nota."""
    return Diagnostic("note", message, line, hint, file)

# ---- Errores ----

class AsmError(Exception):
    """Base de todos los errores de ensamblado. Salvo IoError, todos llevan línea."""
    line: Optional[int] = None
    hint: Optional[str] = None

    def to_diagnostic(self, *, file: str | None = None) -> Diagnostic:
        return error(str(self), line=self.line, file=file, hint=self.hint)

class LineTooShort(AsmError):
    def __init__(self, line: int):
        self.line = line
        super().__init__(f"Line {line} too short")

class LineTooLong(AsmError):
    def __init__(self, line: int):
        self.line = line
        super().__init__(f"Line {line} too long")

class _TokenError(AsmError):
    """Error que nombra el token ofensivo."""
    what = "token"

    def __init__(self, token: str, line: int):
        self.token = token
        self.line = line
        super().__init__(f"Invalid {self.what} `{token}` on line {line}")

class InvalidInstruction(_TokenError):
    what = "instruction"

class InvalidRegister(_TokenError):
    what = "register"
    hint = "expected one of ra, rb, rc, rd"

class InvalidDevice(_TokenError):
    what = "device"
    hint = "expected one of cpu, kbd, scr, mth"

class InvalidInteger(_TokenError):
    what = "integer"

class IntegerTooLarge(AsmError):
    def __init__(self, value: int, maximum: int, line: int):
        self.value = value
        self.maximum = maximum
        self.line = line
        super().__init__(f"Integer `{value}` on line {line} too large (max is {maximum})")

class IoError(AsmError):
    """Envuelve un OSError sin reinterpretarlo."""
    def __init__(self, cause: OSError):
        self.cause = cause
        super().__init__(str(cause))
