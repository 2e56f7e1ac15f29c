class SolarcalError(Exception):
    """Base error."""

class SunEventUndefinedError(SolarcalError):
    """Raised when a sunrise or sunset is requested where none occurs (polar day/night)."""

    def __init__(self, ratio: float):
        super().__init__(f"acos not defined for {ratio}")
        self.ratio = ratio
