# esports_backend/core/league_config.py
"""
league_config.py
----------------
League rules and demo data for the tournament.

- Match days >= KNOCKOUT_MATCH_DAY belong to the knockout bracket and never
  count towards the league table.
- Matches are best-of-N, so every played match has a winner and a loser.
"""

# First match day of the knockout/playoff stage
KNOCKOUT_MATCH_DAY = 90

# Points awarded for a match win (a loss is worth nothing, draws cannot happen)
POINTS_PER_WIN = 3

# Number of recent results shown in the "form" column
FORM_LENGTH = 5

# Stat lines per team per game (5v5)
PLAYERS_PER_TEAM = 5

# Season overview thresholds
MIN_TEAM_GAMES_FOR_BEST_TEAM = 2
MIN_HERO_PICKS_FOR_WIN_RATE = 5

# Heroes listed per player in the player-hero breakdown
TOP_HEROES_PER_PLAYER = 3

# Demo teams used by the seeder when AUTO_SEED is enabled
demo_teams = [
    {"team_name": "Buriram Blaze", "logo_url": "https://cdn.example.com/logos/buriram-blaze.png"},
    {"team_name": "Chiang Mai Tigers", "logo_url": "https://cdn.example.com/logos/chiang-mai-tigers.png"},
    {"team_name": "Khon Kaen Kings", "logo_url": "https://cdn.example.com/logos/khon-kaen-kings.png"},
    {"team_name": "Phuket Phantoms", "logo_url": "https://cdn.example.com/logos/phuket-phantoms.png"},
]
