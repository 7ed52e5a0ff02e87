"""VaccinationType class for the kinds of vaccination a pet can receive."""


class VaccinationType:
    """A vaccination kind with its nominal re-vaccination interval."""

    def __init__(self, id: int, name: str, interval: int = 12):
        self.id = id
        self.name = name
        self.interval = interval
