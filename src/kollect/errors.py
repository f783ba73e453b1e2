"""
Exceptions raised by kollect's functions.

Defines:
    KollectError            base class for every error raised by this package
    InvalidArgumentError    a size or step argument is out of range
    EmptyInputError         an operation needs at least one element and got none
"""


class KollectError(Exception):
    """Base class for errors raised by kollect"""
    pass


class InvalidArgumentError(KollectError, ValueError):
    """Raised when a numeric argument (chunk size, window size, window step) is not positive"""
    pass


class EmptyInputError(KollectError, ValueError):
    """Raised when reduce, reduce_indexed or Seq.head is applied to an empty sequence"""
    pass
