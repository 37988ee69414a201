# texture_generator/boolean.py

"""
================================================================================
BOOLEAN COMPOSER
================================================================================
N-ary And / Or / Xor and unary Not over input nodes, in one of four
interpretation modes:

1. COMPONENT_WISE: channel-by-channel bit logic on the 8-bit channels.
2. BITWISE: bit logic on the packed 32-bit RGBA word.
3. THRESHOLD: each input is reduced to a bool by a predicate; the result
   picks the true or false color.
4. FUZZY: each input is reduced to a real in [0, 1] by a predicate; the result
   interpolates from the false color to the true color.

Data Contract:
---------------
- Inputs:
    - op: BooleanOp. inputs: a list of nodes (None entries are skipped).
    - mode: BooleanMode. Options: predicate, true_color, false_color.
- Outputs:
    - One Color per pixel as described above.
- Side Effects: None.
- Invariants:
    - No usable inputs gives the false color if one was set, else transparent.
    - Not only reads the first usable input.
================================================================================
"""

import enum
from typing import Callable

from .core import BLACK, TRANSPARENT, WHITE, Color, Null, as_color, lerp_color

Predicate = Callable[[Color], object]


class BooleanOp(enum.Enum):
    AND = "and"
    OR = "or"
    XOR = "xor"
    NOT = "not"


class BooleanMode(enum.Enum):
    COMPONENT_WISE = "component_wise"
    BITWISE = "bitwise"
    THRESHOLD = "threshold"
    FUZZY = "fuzzy"


# --- Predicates ---

def alpha_threshold(threshold: int = 128) -> Predicate:
    """True when alpha >= threshold."""
    return lambda c: c.a >= threshold


def red_above(threshold: int = 128) -> Predicate:
    return lambda c: c.r >= threshold


def average_gray_above(threshold: int = 128) -> Predicate:
    return lambda c: (c.r + c.g + c.b) // 3 >= threshold


def fuzzy_alpha(c: Color) -> float:
    return c.a / 255.0


def fuzzy_red(c: Color) -> float:
    return c.r / 255.0


def fuzzy_gray(c: Color) -> float:
    return c.gray16() / 65535.0


# --- Word & Channel Logic ---

def pack_rgba(c: Color) -> int:
    return (c.r << 24) | (c.g << 16) | (c.b << 8) | c.a


def unpack_rgba(word: int) -> Color:
    return Color((word >> 24) & 0xFF, (word >> 16) & 0xFF, (word >> 8) & 0xFF, word & 0xFF)


_BINARY = {
    BooleanOp.AND: lambda a, b: a & b,
    BooleanOp.OR: lambda a, b: a | b,
    BooleanOp.XOR: lambda a, b: a ^ b,
}


def _fold_channels(op: BooleanOp, colors: list) -> Color:
    fn = _BINARY[op]
    result = colors[0]
    for c in colors[1:]:
        result = Color(*(fn(p, q) for p, q in zip(result, c)))
    return result


def _fold_words(op: BooleanOp, colors: list) -> Color:
    fn = _BINARY[op]
    word = pack_rgba(colors[0])
    for c in colors[1:]:
        word = fn(word, pack_rgba(c))
    return unpack_rgba(word)


class Boolean(Null):
    """The shared implementation behind And, Or, Xor and Not."""

    def __init__(self, op: BooleanOp, inputs, mode: BooleanMode = BooleanMode.COMPONENT_WISE, *options):
        self.op = BooleanOp(op)
        self.mode = BooleanMode(mode)
        self.inputs = [i for i in (inputs or []) if i is not None]
        self.predicate = None
        self.true_color = None
        self.false_color = None
        if self.inputs:
            super().__init__(*options, default_bounds=self.inputs[0].bounds())
        else:
            super().__init__(*options)

    def set_predicate(self, fn: Predicate):
        self.predicate = fn

    def set_true_color(self, color):
        self.true_color = as_color(color)

    def set_false_color(self, color):
        self.false_color = as_color(color)

    def _predicate(self) -> Predicate:
        if self.predicate is not None:
            return self.predicate
        if self.mode is BooleanMode.THRESHOLD:
            return alpha_threshold(128)
        return fuzzy_alpha

    def sample(self, x: int, y: int) -> Color:
        if not self.inputs:
            return self.false_color if self.false_color is not None else TRANSPARENT
        inputs = self.inputs[:1] if self.op is BooleanOp.NOT else self.inputs
        colors = [i.sample(x, y) for i in inputs]

        if self.mode is BooleanMode.COMPONENT_WISE:
            if self.op is BooleanOp.NOT:
                c = colors[0]
                return Color(255 - c.r, 255 - c.g, 255 - c.b, c.a)
            return _fold_channels(self.op, colors)

        if self.mode is BooleanMode.BITWISE:
            if self.op is BooleanOp.NOT:
                return unpack_rgba(~pack_rgba(colors[0]) & 0xFFFFFFFF)
            return _fold_words(self.op, colors)

        predicate = self._predicate()
        true_color = self.true_color if self.true_color is not None else WHITE
        false_color = self.false_color if self.false_color is not None else BLACK

        if self.mode is BooleanMode.THRESHOLD:
            flags = [bool(predicate(c)) for c in colors]
            if self.op is BooleanOp.AND:
                result = all(flags)
            elif self.op is BooleanOp.OR:
                result = any(flags)
            elif self.op is BooleanOp.XOR:
                result = sum(flags) % 2 == 1
            else:
                result = not flags[0]
            return true_color if result else false_color

        values = [float(predicate(c)) for c in colors]
        if self.op is BooleanOp.AND:
            v = min(values)
        elif self.op is BooleanOp.OR:
            v = max(values)
        elif self.op is BooleanOp.XOR:
            v = values[0]
            for other in values[1:]:
                v = abs(v - other)
        else:
            v = 1.0 - values[0]
        return lerp_color(false_color, true_color, v)


# --- Constructors ---

def And(inputs, mode: BooleanMode = BooleanMode.COMPONENT_WISE, *options) -> Boolean:
    return Boolean(BooleanOp.AND, inputs, mode, *options)


def Or(inputs, mode: BooleanMode = BooleanMode.COMPONENT_WISE, *options) -> Boolean:
    return Boolean(BooleanOp.OR, inputs, mode, *options)


def Xor(inputs, mode: BooleanMode = BooleanMode.COMPONENT_WISE, *options) -> Boolean:
    return Boolean(BooleanOp.XOR, inputs, mode, *options)


def Not(source, mode: BooleanMode = BooleanMode.COMPONENT_WISE, *options) -> Boolean:
    return Boolean(BooleanOp.NOT, [source], mode, *options)
