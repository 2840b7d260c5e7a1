"""exceptions raised when a match or configuration is malformed"""


class PlrateError(ValueError):
    """Base class for every error raised by plrate."""


class ConfigurationError(PlrateError):
    """An Environment value or option is out of range."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for '{field}': {reason}")


class ArityMismatch(PlrateError):
    """ranks or weights disagree with the number of teams or players in the match."""

    def __init__(self, what: str, expected, got):
        self.what = what
        self.expected = expected
        self.got = got
        super().__init__(f'{what} has shape {got} but the match has shape {expected}')


class ShapeMismatch(PlrateError):
    """the ratings before and after an update can not be aligned player for player."""

    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__(f'cannot align updated ratings of shape {got} with original shape {expected}')


class InvalidMatchSize(PlrateError):
    """a pairwise computation was asked for with fewer than two teams."""

    def __init__(self, num_teams: int):
        self.num_teams = num_teams
        super().__init__(f'at least 2 teams are required, got {num_teams}')
