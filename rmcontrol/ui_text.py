"""Status strings shown on the operator client."""

from __future__ import annotations

FRIC_OFF = 0
FRIC_ON = 1
FRIC_ACC = 2

_SPIN_TEXT = {0: "OFF", 1: "ON "}
_FRIC_TEXT = {FRIC_OFF: "OFF", FRIC_ON: "ON ", FRIC_ACC: "ACC"}


def _digit(number: int, divisor: int) -> str:
    """Decimal digit of ``number`` at ``divisor``, with truncating division."""
    digit = abs(number) // divisor % 10
    return chr(48 - digit) if number < 0 else chr(48 + digit)


def int_to_str(number: int) -> str:
    """Return the last three decimal digits of ``number``, zero padded."""
    return "".join(_digit(number, d) for d in (100, 10, 1))


def cap_text_format(cap_percent: int) -> str:
    """Return the super-capacitor label, such as ``CAP: 100%``."""
    return f"CAP: {int_to_str(cap_percent)}%"


def spin_state_str(spin_state: int) -> str:
    """Return the eight-character spin label for state 0 or 1."""
    try:
        return "SPIN " + _SPIN_TEXT[spin_state]
    except KeyError:
        raise ValueError(f"unknown spin state {spin_state!r}") from None


def fric_state_str(fric_state: int) -> str:
    """Return the eight-character friction wheel label."""
    try:
        return "FRIC " + _FRIC_TEXT[fric_state]
    except KeyError:
        raise ValueError(f"unknown friction state {fric_state!r}") from None


def state_str(cap_percent: int, spin_state: int, fric_state: int) -> str:
    """Return the 21-character three-line status block.

    The lines are the friction label, the spin label and the capacitor
    percentage as three digits.
    """
    return "\n".join(
        (fric_state_str(fric_state), spin_state_str(spin_state), int_to_str(cap_percent))
    )