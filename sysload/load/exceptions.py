class InvalidArgumentException(ValueError):
    pass


class InvalidStateException(Exception):
    pass
