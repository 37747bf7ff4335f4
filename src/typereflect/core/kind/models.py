"""Kind enumeration: the closed classification every other module switches on."""

from enum import Enum, auto


class Kind(Enum):
    """Underlying shape of a runtime value."""

    STRING = auto()
    INT = auto()
    BOOL = auto()
    FLOAT = auto()
    STRUCT = auto()
    POINTER = auto()
    SLICE = auto()
    UNSUPPORTED = auto()  # Anything the toolkit does not model

    def is_primitive(self) -> bool:
        """Check if this kind holds a scalar value.

        Returns:
            True for STRING, INT, BOOL and FLOAT.
        """
        return self in _PRIMITIVE_KINDS

    def is_numeric(self) -> bool:
        """Check if this kind renders as a decimal number.

        Returns:
            True for INT and FLOAT. BOOL is not numeric.
        """
        return self in (Kind.INT, Kind.FLOAT)


_PRIMITIVE_KINDS = frozenset({Kind.STRING, Kind.INT, Kind.BOOL, Kind.FLOAT})
