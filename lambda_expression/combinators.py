"""Foundational combinators, built once at import time and never mutated.

Bodies are written as nested Python lambdas; every inner lambda is wrapped
into an Expression when it is returned from a strict application, and every
application inside a body (`x(z)`) is the deferred, call-by-name kind.
Reading them as ordinary lambda-calculus terms is therefore accurate.
"""

from __future__ import annotations

from lambda_expression.types.expression import Expression
from lambda_expression.codec.church import church_encode

# -------------------------------
# Booleans
# -------------------------------
truth = Expression(lambda x: lambda y: x)

falsity = Expression(lambda x: lambda y: y)

# -------------------------------
# Fixed point
# -------------------------------
# The outer self-application is a direct Python call; the `x(x)` inside is
# deferred, so building Y(f) stops after one step and yields f(Y(f)).
Y = Expression(lambda f: (lambda x: f(x(x)))(Expression(lambda x: f(x(x)))))

# -------------------------------
# SKI and iota
# -------------------------------
I = Expression(lambda x: x)

K = Expression(lambda x: lambda y: x)

S = Expression(lambda x: lambda y: lambda z: x(z)(y(z)))

iota = Expression(lambda f: f(S)(K))

# -------------------------------
# Church numerals
# -------------------------------
zero = church_encode(0)

one = church_encode(1)

succ = Expression(lambda n: lambda f: lambda x: f(n(f)(x)))

# Threads a pair through n steps and keeps the lagging component;
# pred(0) is 0.
pred = Expression(
    lambda n: lambda f: lambda x: n(lambda g: lambda h: h(g(f)))(lambda y: x)(lambda y: y)
)

add = Expression(lambda n: lambda m: n(succ)(m))

# sub(n)(m) is n - m, saturating at zero.
sub = Expression(lambda n: lambda m: m(pred)(n))

mult = Expression(lambda n: lambda m: n(add(m))(zero))

is_zero = Expression(lambda n: n(lambda x: falsity)(truth))

# -------------------------------
# Scott lists
# -------------------------------
# A cell applied to a handler `f` calls f(head)(tail); the empty list
# ignores the handler and behaves as `truth` on the next two arguments.
cons = Expression(lambda a: lambda b: lambda f: f(a)(b))

car = Expression(lambda p: p(lambda x: lambda y: x))

cdr = Expression(lambda p: p(lambda x: lambda y: y))

empty_list = Expression(lambda f: lambda x: lambda y: x)

is_empty = Expression(lambda l: l(lambda x: lambda y: falsity))
