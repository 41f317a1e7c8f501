"""
Arbitrary-precision signed integer arithmetic.

Digit-string primitives (src.bigint.math) and the immutable BigInt
value type built on top of them (src.bigint.domain).
"""
