class ConfigError(ValueError):
    """Invalid grid size, tick interval or difficulty."""


class GridFullError(RuntimeError):
    """Raised when food is requested but the snake covers every cell."""

    def __init__(self, width: int, height: int):
        super().__init__(f"no free cell left on the {width}x{height} grid")
        self.width = width
        self.height = height
