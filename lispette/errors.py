class LispetteError(Exception):
    """ Base class for all Lispette errors"""
    pass


class LispetteSyntaxError(LispetteError):
    """ Raised when a form is malformed; carries the offending form's text"""

    def __init__(self, form_text: str, message: str = "wrong length"):
        super().__init__(f"{form_text}: {message}")
        self.form_text = form_text
        self.message = message


class LispetteUnboundSymbol(LispetteError):
    """ Raised when a symbol is referenced before it is bound"""


class LispetteTypeError(LispetteError):
    """ Raised when a non-procedure is applied or a builtin gets bad operands"""


class LispetteArityError(LispetteError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

    def __init__(self, expected: int, given: int, detail: str = ""):
        msg = f"expected {expected} argument(s), got {given}"
        super().__init__(f"{msg}: {detail}" if detail else msg)
        self.expected = expected
        self.given = given


class LispetteContinuationError(LispetteError):
    """ Raised when an escape continuation is invoked after its call/cc returned"""
