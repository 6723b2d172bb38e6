# esports_backend/models/__init__.py
# Centralized imports for all database models and schemas

# Results and audit trail
from .result_model import Result, ResultCreate, ResultHistory, HistoryAction

# Per-game player statistics
from .game_stat_model import GameStat, GameStatCreate

# Heroes
from .hero_model import Hero, HeroCreate

# Teams
from .team_logo_model import TeamLogo, TeamLogoCreate

# Players
from .player_model import Player, PlayerCreate, PreviousIGNRequest, UpdateIGNRequest

# Schedule
from .schedule_model import Schedule, ScheduleCreate

# League table (derived, not stored)
from .standing_model import StandingRow, DetailedStandingRow
