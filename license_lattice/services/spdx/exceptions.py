"""
Exceptions raised while turning license expression text into the AST.
"""


class InvalidLicenseExpression(ValueError):
    """
    Raised when a license expression cannot be parsed, or when it names a
    license or exception identifier that is not registered (strict mode).
    """

    def __init__(self, message: str, expression: str | None = None):
        super().__init__(message)
        self.expression = expression
