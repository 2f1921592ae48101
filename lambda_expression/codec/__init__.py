"""Conversions between native Python values and their calculus encodings.

Submodules are imported individually (`lambda_expression.codec.church` is
loaded by the combinator library itself, so nothing is re-exported here).
"""
