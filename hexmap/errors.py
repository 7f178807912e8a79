"""Exceptions raised by hexmap."""


class GridError(Exception):
    """Base class for grid failures."""


class CollectionAccessError(GridError):
    """The backing tile collection could not be reached at all.

    A plain missing key is not this error; lookups on a reachable store
    simply come back empty.
    """

    def __init__(self, message: str = "Could not access the collection") -> None:
        super().__init__(message)
