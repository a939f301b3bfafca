class SexpandError(Exception):
    pass


class NestedBracketError(SexpandError):
    def __init__(self):
        super().__init__("cannot nest brackets in pattern")


class UnbalancedBracketError(SexpandError):
    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"Unbalanced brackets in pattern '{pattern}'")


class MismatchedWidthError(SexpandError):
    def __init__(self, start: str, end: str):
        self.start = start
        self.end = end
        super().__init__(
            f"Range boundaries '{start}' and '{end}' must have the same width: "
            "[0-09] is invalid, but [00,09] or [0,9] is valid"
        )


class InvalidNumberError(SexpandError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid number '{token}' in hostname pattern")


class MissingPlaceholderError(SexpandError):
    def __init__(self, template: str, placeholder: str):
        self.template = template
        super().__init__(
            f"Expression '{template}' does not contain the placeholder '{placeholder}'"
        )
