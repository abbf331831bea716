"""Exceptions raised by room geometry synthesis."""


class RoomGenError(Exception):
    """Base exception for room generation errors."""

    def __init__(self, message: str, error_type: str = "unknown"):
        super().__init__(message)
        self.error_type = error_type


class InvalidRoomInput(RoomGenError):
    """Input cannot form a room (e.g. fewer than three polygon vertices)."""

    def __init__(self, message: str):
        super().__init__(message, error_type="invalid_input")


class GeometryError(RoomGenError):
    """Synthesized geometry broke one of its own invariants."""

    def __init__(self, message: str):
        super().__init__(message, error_type="geometry")
