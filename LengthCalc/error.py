

class CompilerError(Exception):
    stage = "COMPILER"

    def __init__(self, message, code="9999", expression=None, position=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.expression = expression
        self.position = position

    def __str__(self):
        if self.position is not None:
            return f"[{self.stage}] {self.message} (at {self.position})"
        return f"[{self.stage}] {self.message}"

class ParseError(CompilerError):
    stage = "PARSE"

class SolveError(CompilerError):
    stage = "SOLVE"

class ConfigurationError(CompilerError):
    stage = "CONFIG"










Error_Dictionary= {

    "1" : "Parse Error",
    "2" : "Solve Error",
    "3" : "Configuration Error",
    "9" : "Unexpected Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error (stage)
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "1000" : "No input.",
    "1001" : "Unknown character: ", # + character
    "1002" : "Bad numeric construction.",
    "1003" : "Invalid prefixed numeric literal.",
    "1004" : "Unknown operator: ", # + operator
    "1005" : "Parenthesis '(' & ')' not balanced.",
    "1006" : "Number too big.",


    "2000" : "Expression is malformed.",
    "2001" : "Unexpected close parenthesis.",
    "2002" : "Unexpected close parenthesis (no open parenthesis found).",
    "2003" : "Unsupported token: ", # + token
    "2004" : "Unexpected token: ", # + token
    "2005" : "Indeterminate expression.",
    "2006" : "Division by zero.",
    "2007" : "Number too big.",


    "3000" : "Unknown unit system: ", # + given system
    "3001" : "Invalid setting value: ", # + setting


    "9999" : "Unexpected Error: " #+error
}


def describe(code):
    """Return the group and message registered for an error code."""
    group = Error_Dictionary.get(str(code)[:1], Error_Dictionary["9"])
    return f"{group}: {ERROR_MESSAGES.get(str(code), ERROR_MESSAGES['9999'])}"
