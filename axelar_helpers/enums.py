from enum import Enum

from .exceptions import InvalidEnvironmentError


class Environment(str, Enum):
    LOCAL = "local"
    TESTNET = "testnet"

    def __str__(self) -> str:
        return self.value


def resolve_environment(env: Environment | str | None) -> Environment:
    """
    :return: Environment member for "local" or "testnet"
    :raises InvalidEnvironmentError: for anything else, including None
    """
    if isinstance(env, Environment):
        return env
    if not isinstance(env, str):
        raise InvalidEnvironmentError(env)
    try:
        return Environment(env)
    except ValueError:
        raise InvalidEnvironmentError(env) from None
