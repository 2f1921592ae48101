"""Ready-made list programs for `run_on_integer_sequence`.

Each is an ordinary Expression assembled from the combinator library, with
recursion expressed through Y rather than Python-level self-reference.
"""

from __future__ import annotations

from lambda_expression.types.expression import Expression
from lambda_expression.combinators import (
    Y, add, car, cdr, cons, empty_list, is_empty, is_zero, mult, one, pred, succ, zero,
)

# n! on Church numerals
factorial = Y(lambda fact: lambda n: is_zero(n)(one)(mult(n)(fact(pred(n)))))

# scott_map(f)(list): apply f to every element, keeping order
scott_map = Y(
    lambda map_: lambda f: lambda l: is_empty(l)(empty_list)(cons(f(car(l)))(map_(f)(cdr(l))))
)

factorial_map = scott_map(factorial)

# Reverse by moving cells onto an accumulator
scott_reverse = Y(
    lambda rev: lambda acc: lambda l: is_empty(l)(acc)(rev(cons(car(l))(acc))(cdr(l)))
)(empty_list)

# Sum of a list of numerals, as a numeral
scott_sum = Y(lambda sum_: lambda l: is_empty(l)(zero)(add(car(l))(sum_(cdr(l)))))

# Number of cells, as a numeral
scott_length = Y(lambda len_: lambda l: is_empty(l)(zero)(succ(len_(cdr(l)))))

# List programs wrapping the folds above into one-element lists
singleton_sum = Expression(lambda l: cons(scott_sum(l))(empty_list))

length_program = Expression(lambda l: cons(scott_length(l))(empty_list))
