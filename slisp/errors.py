class SlispError(Exception):
    """Base class for all slisp errors; carries a human-readable reason."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class SlispSyntaxError(SlispError):
    """ Raised when the token stream is malformed"""


class SlispUnboundSymbol(SlispError):
    """ Raised when a symbol is looked up before it is bound"""


class SlispInvalidForm(SlispError):
    """ Raised when a form cannot be evaluated (empty call, non-function head)"""


class SlispTypeError(SlispError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""


class SlispArityError(SlispError):
    """ Raised when a builtin receives too few arguments"""
