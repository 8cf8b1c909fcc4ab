"""
Core math modules для riemann

Численные примитивы и алгебра на парах (re, im) с гарантией стабильности.
"""

# Numerical Safeguards
from riemann.core.math.numerical_safeguards import (
    # Constants
    EPSILON,
    HYPOT_DIRECT_LIMIT,
    NORMAL_FLOOR,
    # IEEE-754 wrappers
    ieee_ceil,
    ieee_cos,
    ieee_div,
    ieee_exp,
    ieee_expm1,
    ieee_floor,
    ieee_log,
    ieee_pow,
    ieee_round,
    ieee_sin,
    ieee_sqrt,
    # Stable primitives
    cosh,
    cosm1,
    hypot,
    log_hypot,
    sinh,
)

# Poles
from riemann.core.math.poles import (
    ADD_RULES,
    DIV_RULES,
    INVERSE_RULES,
    MUL_RULES,
    POW_RULES,
    SUB_RULES,
    Pole,
    PoleOutcome,
    classify,
    resolve,
)

# Arithmetic
from riemann.core.math.arithmetic import Pair

__all__ = [
    # Numerical Safeguards — Constants
    "EPSILON",
    "HYPOT_DIRECT_LIMIT",
    "NORMAL_FLOOR",
    # Numerical Safeguards — IEEE-754 wrappers
    "ieee_ceil",
    "ieee_cos",
    "ieee_div",
    "ieee_exp",
    "ieee_expm1",
    "ieee_floor",
    "ieee_log",
    "ieee_pow",
    "ieee_round",
    "ieee_sin",
    "ieee_sqrt",
    # Numerical Safeguards — Stable primitives
    "cosh",
    "cosm1",
    "hypot",
    "log_hypot",
    "sinh",
    # Poles — Types
    "Pole",
    "PoleOutcome",
    # Poles — Tables
    "ADD_RULES",
    "SUB_RULES",
    "MUL_RULES",
    "DIV_RULES",
    "POW_RULES",
    "INVERSE_RULES",
    # Poles — Functions
    "classify",
    "resolve",
    # Arithmetic — Types
    "Pair",
]
