# texture_generator/hashing.py

"""
================================================================================
STABLE COORDINATE HASH
================================================================================
The single source of randomness for every texture node. A SplitMix64-style
finalizer applied to a linear combination of (x, y, seed).

Data Contract:
---------------
- Inputs:
    - x, y: Signed Python ints (pixel or lattice coordinates).
    - seed: Any int; reinterpreted as an unsigned 64-bit value.
- Outputs:
    - An int in [0, 2**64).
- Side Effects: None.
- Invariants:
    - All arithmetic is modulo 2**64; negative coordinates use two's
      complement reinterpretation, so results match a native uint64 version
      bit for bit on every platform.
    - hash(0, 0, 0) == 0.
================================================================================
"""

MASK64 = 0xFFFFFFFFFFFFFFFF

# --- Mixing Constants ---
X_MULTIPLIER = 0x9E3779B9
Y_MULTIPLIER = 0x632BE59B
MIX_1 = 0xBF58476D1CE4E5B9
MIX_2 = 0x94D049BB133111EB

# --- Stream Salts ---
# XOR-folded into a seed when one node needs several uncorrelated streams
# at the same coordinate.
VIA_SALT = 0x9E3779B97F4A7C15
SHINE_SALT = 0x51EDC0DE
MASK_JITTER_SALT = 0xDECAFBAD
MORTAR_SALT = 0xABCDEF


def to_seed(value: int) -> int:
    """Reinterprets a signed 64-bit seed as unsigned."""
    return int(value) & MASK64


def stable_hash(x: int, y: int, seed: int) -> int:
    z = (x * X_MULTIPLIER + y * Y_MULTIPLIER + seed) & MASK64
    z = ((z ^ (z >> 30)) * MIX_1) & MASK64
    z = ((z ^ (z >> 27)) * MIX_2) & MASK64
    return z ^ (z >> 31)


def hash_unit(x: int, y: int, seed: int) -> float:
    """The low 16 bits of the hash as a float in [0, 1]."""
    return (stable_hash(x, y, seed) & 0xFFFF) / 65535.0
