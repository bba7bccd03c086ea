"""Quantity formulas over residence variables.

A formula is an ordered list of variable and operator tokens, e.g.
``Dakoppervlak * AantalWoningen + 5``. Multiplication and division bind
tighter than addition and subtraction; evaluation is otherwise left to
right. A leading operator implies a leading zero and a trailing operator
is ignored.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from versneller.exceptions import FormulaError
from versneller.models.enums import TokenType

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from versneller.models.measure import FormulaToken

# Variable names used by older measure records, mapped to current names.
LEGACY_VARIABLES: dict[str, str] = {
    "AantalWoningen": "aantalWoningen",
    "Dakoppervlak": "dakOppervlak",
    "LengteDakvlak": "dakLengte",
    "BreedteWoning": "breedte",
    "NettoGevelOppervlak": "gevelOppervlakNetto",
    "VloerOppervlakteBeganeGrond": "vloerOppervlak",
    "OmtrekKozijnen": "kozijnOmtrekTotaal",
    "GevelOppervlak": "gevelOppervlakTotaal",
}

LEGACY_CONSTANTS: dict[str, float] = {
    "5%": 0.05,
}


def resolve_variable(name: str, variables: Mapping[str, float]) -> float:
    """Resolve a formula variable to a number.

    Lookup order: exact name, legacy constant, legacy name, lower-cased
    name, numeric literal. Only finite plain decimal literals count as
    numbers, so "nan", "inf" and "1_000" are unknown names.

    Raises:
        FormulaError: If the name cannot be resolved.
    """
    if name in variables:
        return float(variables[name])
    if name in LEGACY_CONSTANTS:
        return LEGACY_CONSTANTS[name]
    mapped = LEGACY_VARIABLES.get(name)
    if mapped is not None and mapped in variables:
        return float(variables[mapped])
    if name.lower() in variables:
        return float(variables[name.lower()])
    msg = f"Variable '{name}' not found in residence data"
    if "_" in name:
        raise FormulaError(msg)
    try:
        value = float(name)
    except ValueError:
        raise FormulaError(msg) from None
    if not math.isfinite(value):
        raise FormulaError(msg)
    return value


def evaluate_formula(
    tokens: Sequence[FormulaToken],
    variables: Mapping[str, float],
) -> float:
    """Evaluate a token formula with operator precedence.

    Tokens with an empty value are skipped.

    Raises:
        FormulaError: On unknown variables, two adjacent operands or
            operators, or division by zero.
    """
    operands: list[float] = []
    operators: list[str] = []
    expect_operand = True

    for token in tokens:
        # Unfilled placeholders from the measure editor.
        if not token.value:
            continue
        if token.type == TokenType.OPERATOR:
            if expect_operand:
                if operands:
                    msg = f"Operator '{token.value}' follows another operator"
                    raise FormulaError(msg)
                operands.append(0.0)
            operators.append(token.value)
            expect_operand = True
            continue

        if not expect_operand:
            msg = f"Missing operator before '{token.value}'"
            raise FormulaError(msg)
        operands.append(resolve_variable(token.value, variables))
        expect_operand = False

    if not operands:
        return 0.0
    # Drop a dangling trailing operator.
    operators = operators[: len(operands) - 1]

    # First pass: fold * and / into the running term.
    terms = [operands[0]]
    additive: list[str] = []
    for op, value in zip(operators, operands[1:], strict=True):
        if op == "*":
            terms[-1] *= value
        elif op == "/":
            if value == 0:
                msg = "Division by zero in quantity formula"
                raise FormulaError(msg)
            terms[-1] /= value
        else:
            additive.append(op)
            terms.append(value)

    # Second pass: + and -.
    result = terms[0]
    for op, value in zip(additive, terms[1:], strict=True):
        result = result + value if op == "+" else result - value
    return result
