class AxelarHelpersError(ValueError):
    pass


class MissingCredentialsError(AxelarHelpersError):
    def __init__(self, message: str = "Need to set EVM_PRIVATE_KEY or EVM_MNEMONIC environment variable."):
        super().__init__(message)


class InvalidEnvironmentError(AxelarHelpersError):
    def __init__(self, env=None):
        super().__init__("Need to specify testnet or local as an argument to this script.")

        self.env = env

    def __str__(self) -> str:
        return f"{super().__str__()}\nReceived: {self.env!r}"
