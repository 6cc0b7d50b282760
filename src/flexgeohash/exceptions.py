"""Custom exception hierarchy for flexgeohash."""


class GeohashError(Exception):
    """Base exception for all flexgeohash errors."""


class InvalidCharacter(GeohashError, ValueError):
    """A geohash string contains a symbol outside the encoding's alphabet."""

    def __init__(self, char: str, position: int, encoding: object):
        self.char = char
        self.position = position
        self.encoding = encoding
        super().__init__(
            f"Invalid character '{char}' at position {position} "
            f"for {encoding}"
        )


class InvalidPrecision(GeohashError, ValueError):
    """Precision is not a positive number of characters."""

    def __init__(self, precision: int, encoding: object, detail: str = ""):
        self.precision = precision
        self.encoding = encoding
        super().__init__(
            detail or f"Precision must be at least 1, got {precision}"
        )


class PrecisionOverflow(InvalidPrecision):
    """precision x bits-per-character exceeds the 64-bit hash."""

    def __init__(self, precision: int, encoding: object, bits: int):
        super().__init__(
            precision,
            encoding,
            f"Precision {precision} needs {precision * bits} bits "
            f"with {encoding}, only 64 are available",
        )


class CoordinateOutOfRange(GeohashError, ValueError):
    """Latitude or longitude lies outside its valid range."""

    def __init__(self, axis: str, value: float, limit: float):
        self.axis = axis
        self.value = value
        self.limit = limit
        super().__init__(
            f"{axis.capitalize()} {value!r} is outside [-{limit}, {limit}]"
        )


class InvalidDirection(GeohashError, ValueError):
    """The name does not identify a compass direction."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown direction: '{name}'")


class InvalidEncoding(GeohashError, ValueError):
    """The value does not identify one of the supported encodings."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown encoding: '{value}'")
