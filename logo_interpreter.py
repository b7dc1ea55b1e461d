#!/usr/bin/env python3
"""logo_interpreter.py

A small Logo interpreter that renders turtle drawings to SVG.

Key features:
- Line-oriented tokenizer (blank lines and `//` comment lines are dropped).
- Single-pass recursive-descent parser with prefix-notation maths.
- Tree-walking evaluator with IF/WHILE blocks and numeric variables.
- Turtle state machine that hands pen-down moves to a drawing sink.
- SVG canvas sink using the classic 16-colour Logo palette.

Run:
  python logo_interpreter.py render drawing.lg drawing.svg 500 500
  python logo_interpreter.py validate drawing.lg
  python logo_interpreter.py --help
"""

from __future__ import annotations

import argparse
import math
import operator
import os
import re
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Literal, Protocol, cast

Point = tuple[float, float]


# -------------------------
# Errors / Validation
# -------------------------


def _at(msg: str, position: int | None) -> str:
    if position is None:
        return f"{msg} (at end of input)"
    return f"{msg} (at token {position})"


class ParseError(ValueError):
    """Raised while turning tokens into an AST. Nothing has been drawn yet."""


class UnexpectedTokenError(ParseError):
    def __init__(self, found: str, position: int | None = None) -> None:
        self.found = found
        self.position = position
        super().__init__(_at(f"unexpected token {found!r}", position))


class InvalidSyntaxError(ParseError):
    def __init__(self, details: str, position: int | None = None) -> None:
        self.details = details
        self.position = position
        super().__init__(_at(details, position))


class UndeclaredVariableError(ParseError):
    def __init__(self, name: str, position: int | None = None) -> None:
        self.name = name
        self.position = position
        super().__init__(
            _at(f"variable {name!r} is used before it is made with MAKE", position)
        )


class ExecutionError(RuntimeError):
    """Raised while running a parsed program.

    Segments already handed to the drawing sink are not undone.
    """


class DivisionByZeroError(ExecutionError):
    def __init__(self) -> None:
        super().__init__("division by zero")


class UnboundVariableError(ExecutionError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"variable {name!r} is not bound")


class ValueTypeError(ExecutionError):
    def __init__(self, expected: str, got: object) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"expected {expected}, got {got!r}")


class ColorIndexError(ExecutionError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"pen colour index must be between 0 and {len(COLORS) - 1} "
            f"inclusive; got {index}"
        )


class DrawError(RuntimeError):
    """The drawing sink could not represent a segment. Fatal for the run."""


def _require_syntax(cond: bool, details: str, position: int | None) -> None:
    if not cond:
        raise InvalidSyntaxError(details, position)


def _as_number(x: object, what: str) -> float:
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        raise ValueTypeError(f"a number for {what}", x)
    return float(x)


def _truncate(x: float, what: str) -> int:
    """Truncate toward zero, the way headings and colour indices are taken."""
    if not math.isfinite(x):
        raise ValueTypeError(f"a finite number for {what}", x)
    return int(x)


def _float_range_heading(degrees: int) -> int:
    # Headings are read back as floats by the HEADING query.
    try:
        float(degrees)
    except OverflowError:
        raise ValueTypeError("a heading within float range", degrees) from None
    return degrees


# -------------------------
# Tokenizer
# -------------------------

COMMENT_MARKER = "//"


def tokenize(source: str) -> list[str]:
    """Split script text into whitespace-separated tokens.

    Each line is trimmed; blank lines and lines starting with `//` are dropped.
    A token never spans a line break.
    """
    tokens: list[str] = []
    for raw in source.splitlines():
        line = raw.strip()
        if not line or line.startswith(COMMENT_MARKER):
            continue
        tokens.extend(line.split())
    return tokens


# -------------------------
# Value / AST model
# -------------------------

LITERAL_MARKER = '"'
VARIABLE_MARKER = ":"
BLOCK_OPEN = "["
BLOCK_CLOSE = "]"

QueryKind = Literal["XCOR", "YCOR", "HEADING", "COLOR"]
MathOp = Literal["+", "-", "*", "/", "EQ", "LT", "GT", "NE", "AND", "OR"]
ConditionOp = Literal["EQ", "LT", "GT", "AND", "OR"]

QUERY_KEYWORDS: tuple[QueryKind, ...] = ("XCOR", "YCOR", "HEADING", "COLOR")
MATH_OPERATORS: tuple[MathOp, ...] = (
    "+", "-", "*", "/", "EQ", "LT", "GT", "NE", "AND", "OR",
)
CONDITION_OPERATORS: tuple[ConditionOp, ...] = ("EQ", "LT", "GT", "AND", "OR")
BOOLEAN_LITERALS = {"TRUE": 1.0, "FALSE": 0.0}

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Query:
    """Reads live turtle state when evaluated."""

    kind: QueryKind


@dataclass(frozen=True)
class Variable:
    name: str


@dataclass(frozen=True)
class Math:
    op: MathOp
    lhs: Expression
    rhs: Expression


Expression = Number | Query | Variable | Math


@dataclass(frozen=True)
class UnaryCommand:
    """A command that takes exactly one expression argument."""

    arg: Expression


class Forward(UnaryCommand):
    pass


class Back(UnaryCommand):
    pass


class Left(UnaryCommand):
    pass


class Right(UnaryCommand):
    pass


class Turn(UnaryCommand):
    pass


class SetHeading(UnaryCommand):
    pass


class SetX(UnaryCommand):
    pass


class SetY(UnaryCommand):
    pass


class SetPenColor(UnaryCommand):
    pass


@dataclass(frozen=True)
class PenUp:
    pass


@dataclass(frozen=True)
class PenDown:
    pass


@dataclass(frozen=True)
class Make:
    name: str
    expr: Expression


@dataclass(frozen=True)
class AddAssign:
    name: str
    expr: Expression


Command = UnaryCommand | PenUp | PenDown | Make | AddAssign


@dataclass(frozen=True)
class Condition:
    op: ConditionOp
    lhs: Expression
    rhs: Expression


@dataclass(frozen=True)
class If:
    condition: Condition
    block: tuple[Node, ...]


@dataclass(frozen=True)
class While:
    condition: Condition
    block: tuple[Node, ...]


ControlFlow = If | While
Node = Command | ControlFlow

UNARY_COMMANDS: dict[str, type[UnaryCommand]] = {
    "FORWARD": Forward,
    "BACK": Back,
    "LEFT": Left,
    "RIGHT": Right,
    "TURN": Turn,
    "SETHEADING": SetHeading,
    "SETX": SetX,
    "SETY": SetY,
    "SETPENCOLOR": SetPenColor,
}


def walk(nodes: Iterable[Node]) -> Iterator[Node]:
    """Yield every node depth-first, descending into IF/WHILE blocks."""
    for node in nodes:
        yield node
        if isinstance(node, (If, While)):
            yield from walk(node.block)


def count_nodes(nodes: Iterable[Node]) -> int:
    return sum(1 for _ in walk(nodes))


# -------------------------
# Environment
# -------------------------


class Environment:
    """Variable bindings for one script run.

    Values are always resolved numbers; MAKE and ADDASSIGN are the only writers.
    """

    def __init__(self) -> None:
        self._values: dict[str, float] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def names(self) -> list[str]:
        return sorted(self._values)

    def lookup(self, name: str) -> float:
        try:
            return self._values[name]
        except KeyError:
            raise UnboundVariableError(name) from None

    def bind(self, name: str, value: float) -> None:
        # An existing binding is overwritten.
        self._values[name] = _as_number(value, f"variable {name!r}")

    def add(self, name: str, delta: float) -> float:
        total = self.lookup(name) + _as_number(delta, f"ADDASSIGN {name!r}")
        self._values[name] = total
        return total


# -------------------------
# Parser
# -------------------------


@dataclass
class Cursor:
    """Read position into the token list, shared by every parse routine."""

    tokens: Sequence[str]
    pos: int = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> str | None:
        if self.at_end():
            return None
        return self.tokens[self.pos]

    def take(self, expected: str) -> str:
        """Consume and return the next token; `expected` names it for errors."""
        if self.at_end():
            raise InvalidSyntaxError(f"expected {expected}, found end of input")
        token = self.tokens[self.pos]
        self.pos += 1
        return token


def parse_program(tokens: Sequence[str]) -> list[Node]:
    """Parse a whole token list. Every token must be consumed."""
    cursor = Cursor(tokens)
    declared: set[str] = set()
    nodes = parse_tokens(cursor, declared)
    if not cursor.at_end():
        raise UnexpectedTokenError(cast(str, cursor.peek()), cursor.pos)
    return nodes


def parse_tokens(cursor: Cursor, declared: set[str]) -> list[Node]:
    """Parse statements until end of input or an unconsumed `]`.

    The `]` is left for the caller: a block parse consumes it, the top-level
    driver reports it.
    """
    nodes: list[Node] = []
    while not cursor.at_end() and cursor.peek() != BLOCK_CLOSE:
        nodes.append(parse_statement(cursor, declared))
    return nodes


def parse_statement(cursor: Cursor, declared: set[str]) -> Node:
    start = cursor.pos
    keyword = cursor.take("a statement")

    if keyword == "PENUP":
        return PenUp()
    if keyword == "PENDOWN":
        return PenDown()

    command = UNARY_COMMANDS.get(keyword)
    if command is not None:
        return command(parse_expression(cursor, declared, f"an argument for {keyword}"))

    if keyword == "MAKE":
        name_pos = cursor.pos
        name = cursor.take("a variable name after MAKE").lstrip(LITERAL_MARKER)
        _require_syntax(bool(name), "MAKE needs a non-empty variable name", name_pos)
        expr = parse_expression(cursor, declared, f"a value for MAKE {name!r}")
        declared.add(name)
        return Make(name, expr)

    if keyword == "ADDASSIGN":
        name_pos = cursor.pos
        token = cursor.take("a variable name after ADDASSIGN")
        _require_syntax(
            token.startswith(LITERAL_MARKER) and len(token) > 1,
            f"ADDASSIGN expects a quoted variable name like '\"x'; got {token!r}",
            name_pos,
        )
        name = token[1:]
        if name not in declared:
            raise UndeclaredVariableError(name, name_pos)
        expr = parse_expression(cursor, declared, f"a value for ADDASSIGN {name!r}")
        return AddAssign(name, expr)

    if keyword == "IF" or keyword == "WHILE":
        condition = parse_condition(cursor, declared, keyword)
        block = parse_block(cursor, declared, keyword)
        if keyword == "IF":
            return If(condition, block)
        return While(condition, block)

    raise UnexpectedTokenError(keyword, start)


def parse_expression(cursor: Cursor, declared: set[str], expected: str) -> Expression:
    """Resolve one expression, recursing into prefix maths operands."""
    pos = cursor.pos
    token = cursor.take(expected)

    if token.startswith(LITERAL_MARKER):
        return Number(parse_literal(token[len(LITERAL_MARKER):], pos))

    if token.startswith(VARIABLE_MARKER):
        name = token[len(VARIABLE_MARKER):]
        if name not in declared:
            raise UndeclaredVariableError(name, pos)
        return Variable(name)

    if token in MATH_OPERATORS:
        op = cast(MathOp, token)
        lhs = parse_expression(cursor, declared, f"a first operand for {op}")
        rhs = parse_expression(cursor, declared, f"a second operand for {op}")
        return Math(op, lhs, rhs)

    if token in QUERY_KEYWORDS:
        return Query(cast(QueryKind, token))

    raise InvalidSyntaxError(f"cannot parse {token!r} as an expression", pos)


def parse_literal(text: str, position: int | None = None) -> float:
    if text in BOOLEAN_LITERALS:
        return BOOLEAN_LITERALS[text]
    if _NUMBER_RE.fullmatch(text):
        value = float(text)
        if math.isfinite(value):
            return value
    raise InvalidSyntaxError(f"cannot parse {text!r} as a number", position)


def parse_condition(cursor: Cursor, declared: set[str], keyword: str) -> Condition:
    op = cursor.peek()
    if op in CONDITION_OPERATORS:
        cursor.take(op)
        lhs = parse_expression(cursor, declared, f"a first operand for {op}")
        rhs = parse_expression(cursor, declared, f"a second operand for {op}")
        return Condition(cast(ConditionOp, op), lhs, rhs)

    # A bare expression is true when it equals 1.
    expr = parse_expression(cursor, declared, f"a condition for {keyword}")
    return Condition("EQ", expr, Number(1.0))


def parse_block(cursor: Cursor, declared: set[str], keyword: str) -> tuple[Node, ...]:
    open_pos = cursor.pos
    token = cursor.take(f"'{BLOCK_OPEN}' to open the {keyword} block")
    _require_syntax(
        token == BLOCK_OPEN,
        f"expected '{BLOCK_OPEN}' to open the {keyword} block, found {token!r}",
        open_pos,
    )

    block = parse_tokens(cursor, declared)
    if cursor.at_end():
        raise InvalidSyntaxError(
            f"{keyword} block opened at token {open_pos} is never closed"
        )
    cursor.take(BLOCK_CLOSE)
    return tuple(block)


# -------------------------
# Turtle
# -------------------------

DEFAULT_PEN_COLOR = 7


def end_point(x: float, y: float, heading: int, distance: float) -> Point:
    """Where a move ends. Heading 0 points up; screen y grows downward."""
    rad = math.radians(heading)
    return (x + distance * math.sin(rad), y - distance * math.cos(rad))


class DrawingSink(Protocol):
    def dimensions(self) -> tuple[int, int]: ...

    def draw_segment(
        self, x: float, y: float, heading: int, distance: float, color: str
    ) -> Point: ...


@dataclass
class Turtle:
    sink: DrawingSink
    x: float = 0.0
    y: float = 0.0
    # Degrees, never normalised.
    heading: int = 0
    pen_down: bool = False
    pen_color: int = DEFAULT_PEN_COLOR

    @classmethod
    def centred(cls, sink: DrawingSink) -> Turtle:
        width, height = sink.dimensions()
        return cls(sink, x=width / 2, y=height / 2)

    def lower_pen(self) -> None:
        self.pen_down = True

    def raise_pen(self) -> None:
        self.pen_down = False

    def set_pen_color(self, index: int) -> None:
        if not 0 <= index < len(COLORS):
            raise ColorIndexError(index)
        self.pen_color = index

    def turn(self, degrees: int) -> None:
        self.heading = _float_range_heading(self.heading + degrees)

    def set_heading(self, degrees: int) -> None:
        self.heading = _float_range_heading(degrees)

    def set_x(self, x: float) -> None:
        # A teleport: never draws, even with the pen down.
        self.x = x

    def set_y(self, y: float) -> None:
        self.y = y

    def move(self, heading: int, distance: float) -> None:
        if self.pen_down:
            self.x, self.y = self.sink.draw_segment(
                self.x, self.y, heading, distance, COLORS[self.pen_color]
            )
        else:
            self.x, self.y = end_point(self.x, self.y, heading, distance)

    def query(self, kind: QueryKind) -> float:
        if kind == "XCOR":
            return self.x
        if kind == "YCOR":
            return self.y
        if kind == "HEADING":
            return float(self.heading)
        if kind == "COLOR":
            return float(self.pen_color)
        raise ValueTypeError("a turtle query", kind)


# -------------------------
# SVG canvas
# -------------------------

COLORS: tuple[str, ...] = (
    "#000000",  # 0 black
    "#0000ff",  # 1 blue
    "#00ffff",  # 2 cyan
    "#00ff00",  # 3 green
    "#ff0000",  # 4 red
    "#ff00ff",  # 5 magenta
    "#ffff00",  # 6 yellow
    "#ffffff",  # 7 white
    "#a52a2a",  # 8 brown
    "#d2b48c",  # 9 tan
    "#228b22",  # 10 forest
    "#7fffd4",  # 11 aqua
    "#fa8072",  # 12 salmon
    "#800080",  # 13 purple
    "#ffa500",  # 14 orange
    "#808080",  # 15 grey
)


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    color: str


def _ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)) or ".", exist_ok=True)


def _fmt(x: float, precision: int) -> str:
    # Normalise -0.0 so it never produces "-0" in SVG output.
    if not x:
        x = 0.0
    # Strip trailing zeros for nicer SVG.
    s = f"{x:.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s or "0"


class SvgCanvas:
    """Drawing sink that records segments and serialises them as SVG.

    End points are returned unclipped; the viewBox clips what is visible.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas must be at least 1x1; got {width}x{height}")
        self.width = width
        self.height = height
        self.segments: list[Segment] = []

    def dimensions(self) -> tuple[int, int]:
        return (self.width, self.height)

    def draw_segment(
        self, x: float, y: float, heading: int, distance: float, color: str
    ) -> Point:
        if not all(math.isfinite(v) for v in (x, y, distance)):
            raise DrawError(
                f"cannot draw from ({x}, {y}) over distance {distance}"
            )
        end = end_point(x, y, heading, distance)
        if not all(math.isfinite(v) for v in end):
            raise DrawError(f"segment from ({x}, {y}) ends outside representable space")
        self.segments.append(Segment((x, y), end, color))
        return end

    def to_svg(
        self,
        *,
        background: str | None = "black",
        stroke_width: float = 1.0,
        precision: int = 3,
    ) -> str:
        w = str(self.width)
        h = str(self.height)

        lines: list[str] = []
        lines.append('<?xml version="1.0" encoding="UTF-8"?>')
        lines.append(
            "<svg xmlns=\"http://www.w3.org/2000/svg\" version=\"1.1\" "
            f"viewBox=\"0 0 {w} {h}\" width=\"{w}\" height=\"{h}\">"
        )

        if background and background.lower() != "none":
            lines.append(
                f'  <rect x="0" y="0" width="{w}" height="{h}" fill="{background}" />'
            )

        sw = _fmt(stroke_width, precision)
        for seg in self.segments:
            (x0, y0), (x1, y1) = seg.start, seg.end
            lines.append(
                f'  <line x1="{_fmt(x0, precision)}" y1="{_fmt(y0, precision)}" '
                f'x2="{_fmt(x1, precision)}" y2="{_fmt(y1, precision)}" '
                f'stroke="{seg.color}" stroke-width="{sw}" stroke-linecap="round" />'
            )

        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def save_svg(
        self,
        path: str,
        *,
        background: str | None = "black",
        stroke_width: float = 1.0,
        precision: int = 3,
    ) -> None:
        content = self.to_svg(
            background=background, stroke_width=stroke_width, precision=precision
        )
        _ensure_parent_dir(path)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)


# -------------------------
# Evaluator
# -------------------------

_MATH_OPS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "EQ": lambda a, b: float(a == b),
    "LT": lambda a, b: float(a < b),
    "GT": lambda a, b: float(a > b),
    "NE": lambda a, b: float(a != b),
    "AND": lambda a, b: float(a != 0 and b != 0),
    "OR": lambda a, b: float(a != 0 or b != 0),
}

_COMPARATORS: dict[str, Callable[[float, float], bool]] = {
    "EQ": operator.eq,
    "LT": operator.lt,
    "GT": operator.gt,
    "AND": lambda a, b: a != 0 and b != 0,
    "OR": lambda a, b: a != 0 or b != 0,
}

# Heading offset applied to the turtle's heading for each move command.
_MOVE_OFFSETS: dict[type[UnaryCommand], int] = {
    Forward: 0,
    Back: 180,
    Left: -90,
    Right: 90,
}


def evaluate(expr: Expression, turtle: Turtle, env: Environment) -> float:
    if isinstance(expr, Number):
        return expr.value
    if isinstance(expr, Query):
        return turtle.query(expr.kind)
    if isinstance(expr, Variable):
        return env.lookup(expr.name)
    if isinstance(expr, Math):
        if expr.op == "/":
            divisor = evaluate(expr.rhs, turtle, env)
            if divisor == 0:
                raise DivisionByZeroError()
            return evaluate(expr.lhs, turtle, env) / divisor
        lhs = evaluate(expr.lhs, turtle, env)
        rhs = evaluate(expr.rhs, turtle, env)
        return _MATH_OPS[expr.op](lhs, rhs)
    raise ValueTypeError("an expression", expr)


def holds(condition: Condition, turtle: Turtle, env: Environment) -> bool:
    lhs = evaluate(condition.lhs, turtle, env)
    rhs = evaluate(condition.rhs, turtle, env)
    return _COMPARATORS[condition.op](lhs, rhs)


def execute(nodes: Iterable[Node], turtle: Turtle, env: Environment) -> None:
    """Run nodes in order. The first error stops the run and propagates."""
    for node in nodes:
        if isinstance(node, If):
            if holds(node.condition, turtle, env):
                execute(node.block, turtle, env)
        elif isinstance(node, While):
            # No iteration cap: an always-true condition never returns.
            while holds(node.condition, turtle, env):
                execute(node.block, turtle, env)
        else:
            execute_command(node, turtle, env)


def execute_command(command: Command, turtle: Turtle, env: Environment) -> None:
    if isinstance(command, PenUp):
        turtle.raise_pen()
    elif isinstance(command, PenDown):
        turtle.lower_pen()
    elif isinstance(command, Make):
        env.bind(command.name, evaluate(command.expr, turtle, env))
    elif isinstance(command, AddAssign):
        delta = evaluate(command.expr, turtle, env)
        env.add(command.name, delta)
    elif isinstance(command, UnaryCommand):
        value = evaluate(command.arg, turtle, env)
        offset = _MOVE_OFFSETS.get(type(command))
        if offset is not None:
            turtle.move((turtle.heading + offset) % 360, value)
        elif isinstance(command, Turn):
            turtle.turn(_truncate(value, "TURN"))
        elif isinstance(command, SetHeading):
            turtle.set_heading(_truncate(value, "SETHEADING"))
        elif isinstance(command, SetX):
            turtle.set_x(value)
        elif isinstance(command, SetY):
            turtle.set_y(value)
        elif isinstance(command, SetPenColor):
            turtle.set_pen_color(_truncate(value, "SETPENCOLOR"))
        else:
            raise ValueTypeError("a known command", command)
    else:
        raise ValueTypeError("a known command", command)


def run_script(source: str, sink: DrawingSink) -> tuple[Turtle, Environment]:
    """Tokenise, parse and execute `source`, drawing into `sink`."""
    nodes = parse_program(tokenize(source))
    turtle = Turtle.centred(sink)
    env = Environment()
    execute(nodes, turtle, env)
    return turtle, env


# -------------------------
# CLI / Help
# -------------------------

HELP_EPILOG = r"""
LANGUAGE

A script is a sequence of whitespace-separated tokens. Lines are trimmed;
blank lines and lines starting with // are ignored.

Values

  "100      number literal (also "-2.5, "1e3)
  "TRUE     1
  "FALSE    0
  :name     variable made earlier with MAKE
  XCOR YCOR HEADING COLOR
            live turtle state
  + - * / EQ LT GT NE AND OR <a> <b>
            prefix maths; comparisons and logic give 1 or 0

Commands

  PENUP / PENDOWN
  FORWARD <v>  BACK <v>  LEFT <v>  RIGHT <v>
      move relative to the heading; draws when the pen is down
  TURN <v>  SETHEADING <v>
      degrees, truncated toward zero; 0 points up; never wrapped
  SETX <v>  SETY <v>
      jump without drawing
  SETPENCOLOR <v>
      palette index 0..15 (0 black, 1 blue, 2 cyan, 3 green, 4 red, 5 magenta,
      6 yellow, 7 white, 8 brown, 9 tan, 10 forest, 11 aqua, 12 salmon,
      13 purple, 14 orange, 15 grey)
  MAKE "name <v>
      bind a variable (overwrites)
  ADDASSIGN "name <v>
      add to an existing variable

Control flow

  IF <cond> [ ... ]
  WHILE <cond> [ ... ]

  <cond> is EQ, LT, GT, AND or OR followed by two values, or a single value
  that is true when it equals 1.

The turtle starts at the centre of the canvas, heading 0 (up), pen up, white.

Example

  PENDOWN
  MAKE "side "0
  WHILE LT :side "4 [
    FORWARD "100
    TURN "90
    ADDASSIGN "side "1
  ]
"""


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer; got {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0; got {value}")
    return value


def _precision(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer; got {text!r}") from None
    if not 0 <= value <= 10:
        raise argparse.ArgumentTypeError("must be between 0 and 10")
    return value


def _svg_path(text: str) -> str:
    if os.path.splitext(text)[1].lower() != ".svg":
        raise argparse.ArgumentTypeError(
            f"unsupported output extension for {text!r}; use .svg"
        )
    return text


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="logo_interpreter.py",
        description="Logo interpreter that renders turtle drawings to SVG.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_EPILOG,
    )

    sub = p.add_subparsers(dest="cmd", required=True)

    pr = sub.add_parser(
        "render",
        help="Run a Logo script and write the drawing as SVG.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    pr.add_argument("script", help="Path to the Logo script.")
    pr.add_argument("output", type=_svg_path, help="Path to write the SVG output.")
    pr.add_argument("height", type=_positive_int, help="Canvas height in pixels.")
    pr.add_argument("width", type=_positive_int, help="Canvas width in pixels.")
    pr.add_argument(
        "--background",
        default="black",
        help="Canvas background colour, or 'none'. Default: black.",
    )
    pr.add_argument(
        "--stroke-width", type=float, default=1.0, help="Line width. Default: 1."
    )
    pr.add_argument(
        "--precision",
        type=_precision,
        default=3,
        help="Coordinate formatting precision, 0..10. Default: 3.",
    )
    pr.add_argument(
        "--verbose", action="store_true", help="Print a summary of the run."
    )

    pv = sub.add_parser(
        "validate",
        help="Parse a Logo script without running it and print a brief summary.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    pv.add_argument("script", help="Path to the Logo script.")

    return p


# -------------------------
# Commands
# -------------------------


def load_script(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


@dataclass
class RenderOptions:
    background: str | None = "black"
    stroke_width: float = 1.0
    precision: int = 3
    verbose: bool = False


def cmd_render(
    script_path: str,
    output_path: str,
    height: int,
    width: int,
    options: RenderOptions,
) -> None:
    source = load_script(script_path)
    canvas = SvgCanvas(width, height)
    turtle, env = run_script(source, canvas)

    canvas.save_svg(
        output_path,
        background=options.background,
        stroke_width=options.stroke_width,
        precision=options.precision,
    )

    if options.verbose:
        tokens = tokenize(source)
        print(f"tokens: {len(tokens)}")
        print(f"statements: {count_nodes(parse_program(tokens))}")
        print(f"segments: {len(canvas.segments)}")
        print(
            "turtle: "
            f"x={turtle.x:.3f} y={turtle.y:.3f} heading={turtle.heading} "
            f"pen={'down' if turtle.pen_down else 'up'} color={turtle.pen_color}"
        )
        names = env.names()
        print(f"variables: {', '.join(names) if names else '(none)'}")


def cmd_validate(script_path: str) -> None:
    tokens = tokenize(load_script(script_path))
    nodes = parse_program(tokens)

    declared = sorted({node.name for node in walk(nodes) if isinstance(node, Make)})
    print(f"tokens: {len(tokens)}")
    print(f"top-level statements: {len(nodes)}")
    print(f"statements: {count_nodes(nodes)}")
    print(f"variables: {', '.join(declared) if declared else '(none)'}")


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    try:
        if args.cmd == "render":
            cmd_render(
                args.script,
                args.output,
                args.height,
                args.width,
                RenderOptions(
                    background=args.background,
                    stroke_width=args.stroke_width,
                    precision=args.precision,
                    verbose=args.verbose,
                ),
            )
        elif args.cmd == "validate":
            cmd_validate(args.script)
        else:
            raise AssertionError("unreachable")
    except ParseError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        return 2
    except ExecutionError as e:
        print(f"Execution error: {e}", file=sys.stderr)
        return 2
    except DrawError as e:
        print(f"Draw error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
