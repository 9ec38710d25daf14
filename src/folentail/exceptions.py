class ProblemFormatError(ValueError):
    def __init__(self, message, line=None, text=None):
        location = f"line {line}: " if line is not None else ""
        super().__init__(f"{location}{message}" + (f" ({text!r})" if text else ""))
        self.line = line
        self.text = text


class QueryCountError(ProblemFormatError):
    def __init__(self, expected, got, line=None):
        super().__init__(f"Expected {expected} lines, got {got}", line=line)
        self.expected = expected
        self.got = got
