import os

# =====================================
# Global configuration for the league backend
# =====================================

# --- Database ---
# Absolute path of the SQLite file; defaults to esports.db next to the package.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATABASE_PATH = os.getenv("DATABASE_PATH", os.path.join(BASE_DIR, "esports.db"))

# Echo SQL statements to stdout (noisy, debugging only)
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

# --- HTTP ---
# Allowed CORS origin for the public site / admin dashboard.
# When unset every origin is allowed (local development).
CLIENT_URL = os.getenv("CLIENT_URL")

# Seconds public GET endpoints may be cached by browsers and proxies
CACHE_MAX_AGE = int(os.getenv("CACHE_MAX_AGE", "60"))

# The hero list barely changes during a season
HERO_CACHE_MAX_AGE = int(os.getenv("HERO_CACHE_MAX_AGE", "600"))

# --- Startup ---
# AUTO_SEED:
# When True, an empty database is seeded with the demo teams from
# league_config.py on startup.
AUTO_SEED = os.getenv("AUTO_SEED", "false").lower() in ("1", "true", "yes")

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
