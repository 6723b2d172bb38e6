# esports_backend/core/exceptions.py
# Domain errors raised by the services. They subclass ValueError so routes can
# map them to HTTP errors the same way they map any other bad-input ValueError.


class LeagueDataError(ValueError):
    """Base class for missing/invalid league data."""


class ResultNotFoundError(LeagueDataError):
    def __init__(self, match_id: str):
        super().__init__(f"Result {match_id} not found.")
        self.match_id = match_id


class ScheduleNotFoundError(LeagueDataError):
    def __init__(self):
        super().__init__("No schedule found.")


class PlayerNotFoundError(LeagueDataError):
    def __init__(self, player_id: int):
        super().__init__(f"Player {player_id} not found.")
        self.player_id = player_id



class InvalidStatsError(LeagueDataError):
    """Raised for a stats upload that cannot be saved as-is."""
