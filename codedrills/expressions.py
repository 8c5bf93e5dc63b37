"""Arithmetic expressions in infix and postfix form, and parenthesis checks."""

from __future__ import annotations

import re
from typing import Iterable, List

_INFIX_PIECE = re.compile(r"\d+|[-+*/]")
_NUMBER = re.compile(r"-?\d+")
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
_COMPACT_PRECEDENCE = {**_PRECEDENCE, "^": 3}


def _truncating_divide(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_APPLY = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_divide,
}


def infix_to_postfix(expression: str) -> List[str]:
    """Convert an infix expression of integers and + - * / to postfix tokens.

    Characters other than digits and operators are skipped.
    """
    output: List[str] = []
    stack: List[str] = []
    for piece in _INFIX_PIECE.findall(expression):
        if piece in _PRECEDENCE:
            while stack and _PRECEDENCE[stack[-1]] >= _PRECEDENCE[piece]:
                output.append(stack.pop())
            stack.append(piece)
        else:
            output.append(piece)
    output.extend(reversed(stack))
    return output


def compact_postfix(expression: str) -> str:
    """Convert a single-character-operand infix expression to a postfix string.

    Every character that is not an operator or a parenthesis is an operand.
    """
    output: List[str] = []
    stack: List[str] = []
    for ch in expression:
        if ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')'")
            stack.pop()
        elif ch in _COMPACT_PRECEDENCE:
            while (
                stack
                and stack[-1] != "("
                and _COMPACT_PRECEDENCE[ch] <= _COMPACT_PRECEDENCE[stack[-1]]
            ):
                output.append(stack.pop())
            stack.append(ch)
        else:
            output.append(ch)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unmatched '('")
        output.append(top)
    return "".join(output)


def evaluate_postfix(tokens: Iterable[str]) -> int:
    """Evaluate postfix tokens with integer arithmetic; division truncates toward zero."""
    stack: List[int] = []
    for item in tokens:
        match = _NUMBER.match(item)
        if match:
            stack.append(int(match.group()))
            continue
        operation = _APPLY.get(item)
        if operation is None:
            raise ValueError(f"unknown operator {item!r}")
        if len(stack) < 2:
            raise ValueError(f"not enough operands for {item!r}")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def calculate(expression: str) -> int:
    """Evaluate an infix expression of integers and + - * /."""
    return evaluate_postfix(infix_to_postfix(expression))


def count_valid_pairs(text: str) -> int:
    """Number of ')' that close an open '('."""
    depth = 0
    count = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")" and depth:
            depth -= 1
            count += 1
    return count


def min_insertions(text: str) -> int:
    """Insertions needed so that every '(' is closed by '))'.

    Every character other than '(' counts as ')'.
    """
    required = 0
    depth = 0
    i = 0
    size = len(text)
    while i < size:
        if text[i] == "(":
            depth += 1
        else:
            doubled = i + 1 < size and text[i + 1] == ")"
            if depth == 0:
                required += 1 if doubled else 2
            else:
                depth -= 1
                if not doubled:
                    required += 1
            if doubled:
                i += 1
        i += 1
    return required + depth * 2


def remove_unbalanced(text: str) -> str:
    """Drop every parenthesis that has no partner, keeping everything else."""
    open_positions: List[int] = []
    dropped = set()
    for i, ch in enumerate(text):
        if ch == "(":
            open_positions.append(i)
        elif ch == ")":
            if open_positions:
                open_positions.pop()
            else:
                dropped.add(i)
    dropped.update(open_positions)
    return "".join(ch for i, ch in enumerate(text) if i not in dropped)