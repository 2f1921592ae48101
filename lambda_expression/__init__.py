# Core type aliases for the lambda_expression data model.
# Every calculus value is an `Expression` (lambda_expression.types.expression);
# numerals, booleans and list cells are all Expressions with particular shapes.
#
# Naming guidance:
# - ExpressionFn: the plain Python callable an Expression wraps.
# - NativeSink:   where decoders write their results (a callable such as
#                 `list.append`, or any object with an `append` method).
# Aliases resolve to loose typing types so that plain lambdas can be used
# wherever an Expression is expected.

from typing import Any, Callable

# Wrapped function: one argument in, Expression (or a callable coercible to one) out
ExpressionFn = Callable[[Any], Any]

# Output target for decoders
NativeSink = Any
