class InvalidArgument(ValueError):
    """Raised when a filter is constructed outside its valid parameter domain"""

    def __init__(self, argument: str, value, message: str):
        self.argument = argument
        self.value = value
        super().__init__(f"{argument}={value!r}: {message}")
