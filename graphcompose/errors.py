class ComposeError(Exception):
    pass


class ArgumentValidationError(ComposeError):
    pass
