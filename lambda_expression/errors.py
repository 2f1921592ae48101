class LambdaExpressionError(Exception):
    """ Base class for all lambda_expression errors"""
    pass

class ExpressionTypeError(LambdaExpressionError, TypeError):
    """ Raised when a value that is not callable is used as an Expression"""

class DecodeError(LambdaExpressionError):
    """ Raised when an Expression does not have the shape a decoder expects"""

class ConfigError(LambdaExpressionError, ValueError):
    """ Raised when an environment setting cannot be parsed"""
