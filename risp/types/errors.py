from __future__ import annotations


class RispError(Exception):
    """ Base class for all risp errors"""
    pass


class ArgumentMismatch(RispError):
    """ Raised when two operands have no defined ordering"""

    def __init__(self, left: object, right: object):
        self.left = left
        self.right = right
        super().__init__(f"cannot compare {left} with {right}")


class NoChildren(RispError):
    """ Raised when a list operation is applied to an atom"""

    def __init__(self, value: object = None):
        self.value = value
        super().__init__(f"{value} has no children" if value is not None else "value has no children")


class NotANumber(RispError):
    """ Raised when a numeric value was expected"""

    def __init__(self, value: object = None):
        self.value = value
        super().__init__(f"{value} is not a number" if value is not None else "not a number")


class NumArguments(RispError):
    """ Raised when a builtin receives the wrong number of arguments"""

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(f"expected {expected} arguments, received {received}")


class ParseError(RispError):
    """ Raised when source text does not match the grammar"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnknownFunction(RispError):
    """ Raised when a name is not bound in the environment"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown function {name!r}")


class WrongType(RispError):
    """ Raised when a value has the wrong shape"""

    def __init__(self, expected: str, received: str):
        self.expected = expected
        self.received = received
        super().__init__(f"expected {expected}, received {received}")


class DivisionByZero(RispError):
    """ Raised on integer division or remainder by zero"""

    def __init__(self):
        super().__init__("division by zero")
