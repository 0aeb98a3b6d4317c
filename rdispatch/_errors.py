__all__ = (
    "ConstructionError",
    "DispatchError",
    "InvalidActionError",
)


class DispatchError(Exception):
    pass


class ConstructionError(DispatchError):
    pass


class InvalidActionError(DispatchError, TypeError):
    pass
