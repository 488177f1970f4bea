"""Regular expressions: infix to postfix conversion and Thompson NFA construction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class RegexError(ValueError):
    """Raised for malformed regular expressions or postfix sequences."""


class Symbol(Enum):
    """Special tokens of the postfix form and special NFA state signals."""

    CONCAT = "concat"
    IGNORE = "ignore"
    SPLIT = "split"
    MATCH = "match"
    DOT = "dot"


Token = Union[str, Symbol]


@dataclass(eq=False, repr=False)
class State:
    """An NFA state; `signal` is the character it consumes or a Symbol."""

    signal: Token
    out1: State | None = None
    out2: State | None = None

    def __repr__(self) -> str:
        return f"State({self.signal!r})"


def regex_to_postfix(regexp: str, ignore: str | None = None) -> list[Token]:
    """Convert an infix regular expression to postfix tokens.

    Concatenation is written as Symbol.CONCAT; the `ignore` character, if
    given, becomes a Symbol.IGNORE atom.
    """
    out: list[Token] = []
    stack: list[tuple[int, int]] = []
    nalt = natom = 0

    for i, ch in enumerate(regexp):
        if ignore is not None and ch == ignore:
            if natom > 1:
                natom -= 1
                out.append(Symbol.CONCAT)
            out.append(Symbol.IGNORE)
            natom += 1
            continue

        if ch == "(":
            if natom > 1:
                natom -= 1
                out.append(Symbol.CONCAT)
            stack.append((nalt, natom))
            nalt = natom = 0
        elif ch == "|":
            if natom == 0:
                raise RegexError(f"alternative without operand at {i}")
            out.extend([Symbol.CONCAT] * (natom - 1))
            natom = 0
            nalt += 1
        elif ch == ")":
            if not stack:
                raise RegexError(f"unbalanced parentheses at {i}")
            if natom == 0:
                raise RegexError(f"empty parentheses at {i}")
            out.extend([Symbol.CONCAT] * (natom - 1))
            out.extend("|" * nalt)
            nalt, natom = stack.pop()
            natom += 1
        else:
            if ch == "*":
                if natom == 0:
                    raise RegexError(f"repetition without operand at {i}")
                out.append(ch)
                if i > 0 and regexp[i - 1] in "*+":
                    continue
            if natom > 1:
                natom -= 1
                out.append(Symbol.CONCAT)
            out.append(ch)
            natom += 1

    if stack:
        raise RegexError("unbalanced parentheses")
    out.extend([Symbol.CONCAT] * max(natom - 1, 0))
    out.extend("|" * nalt)
    return out


@dataclass
class _Fragment:
    start: State
    holes: list[tuple[State, str]]


def _patch(holes: list[tuple[State, str]], target: State) -> None:
    for state, attr in holes:
        setattr(state, attr, target)


def postfix_to_nfa(postfix: list[Token]) -> State:
    """Build a Thompson NFA from postfix tokens and return its start state."""
    if not postfix:
        raise RegexError("empty postfix expression")
    stack: list[_Fragment] = []

    def pop() -> _Fragment:
        if not stack:
            raise RegexError("operator without enough operands")
        return stack.pop()

    for token in postfix:
        if token is Symbol.IGNORE:
            continue
        if token is Symbol.CONCAT:
            second, first = pop(), pop()
            _patch(first.holes, second.start)
            stack.append(_Fragment(first.start, second.holes))
        elif token == "|":
            second, first = pop(), pop()
            split = State(Symbol.SPLIT, first.start, second.start)
            stack.append(_Fragment(split, first.holes + second.holes))
        elif token == "?":
            frag = pop()
            split = State(Symbol.SPLIT, frag.start)
            stack.append(_Fragment(split, frag.holes + [(split, "out2")]))
        elif token == "*":
            frag = pop()
            split = State(Symbol.SPLIT, frag.start)
            _patch(frag.holes, split)
            stack.append(_Fragment(split, [(split, "out2")]))
        elif token == "+":
            frag = pop()
            split = State(Symbol.SPLIT, frag.start)
            _patch(frag.holes, split)
            stack.append(_Fragment(frag.start, [(split, "out2")]))
        else:
            signal = Symbol.DOT if token == "." else token
            state = State(signal)
            stack.append(_Fragment(state, [(state, "out1")]))

    frag = pop()
    _patch(frag.holes, State(Symbol.MATCH))
    return frag.start


def parse_regexp(text: str) -> State:
    """Compile a regular expression into an NFA start state."""
    return postfix_to_nfa(regex_to_postfix(text))