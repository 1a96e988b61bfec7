"""Test utilities: exhaustive algebraic law checks."""

import operator

from algebra.field import FieldElement, elements

F4 = list(elements())
F4_STAR = [e for e in F4 if e]


def assert_abelian_group(elts, neutral, op, inv):
    """Check neutrality, inverses, commutativity and associativity exhaustively.

    inv(a, b) is the inverse operation, so inv(neutral, a) is the inverse of a.
    """
    for a in elts:
        assert op(a, neutral) == a
        assert op(a, inv(neutral, a)) == neutral
        for b in elts:
            assert op(a, b) == op(b, a)
            for c in elts:
                assert op(op(a, b), c) == op(a, op(b, c))


def assert_distributive(elts):
    for a in elts:
        for b in elts:
            for c in elts:
                assert a * (b + c) == a * b + a * c


def assert_inplace_agrees(left, right, op, iop):
    """a op= b must leave a bound to a op b."""
    for a in left:
        for b in right:
            expected = op(a, b)
            acc = a
            acc = iop(acc, b)
            assert acc == expected


def convolution(p, q, bound):
    """Reference product of coefficient lists, truncated at bound."""
    out = [FieldElement.zero()] * (bound + 1)
    for i, a in enumerate(p):
        for j, b in enumerate(q):
            if i + j <= bound:
                out[i + j] = out[i + j] + a * b
    return out


ADD = operator.add
SUB = operator.sub
MUL = operator.mul
DIV = operator.truediv
