import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from esports_backend.core.config import AUTO_SEED, CLIENT_URL, LOG_LEVEL
from esports_backend.core.database import get_session, init_db, sync_engine
from esports_backend.models.team_logo_model import TeamLogo
from esports_backend.seed.seed_all import seed_all

# --- Routers ---
from esports_backend.routes.standings_routes import router as standings_router
from esports_backend.routes.result_routes import router as result_router
from esports_backend.routes.team_routes import teams_router, logos_router
from esports_backend.routes.player_routes import router as player_router
from esports_backend.routes.schedule_routes import router as schedule_router
from esports_backend.routes.stats_routes import router as stats_router
from esports_backend.routes.hero_routes import router as hero_router

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Esports League API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[CLIENT_URL] if CLIENT_URL else ["*"],
    allow_credentials=bool(CLIENT_URL),
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.on_event("startup")
async def on_startup():
    # 1️⃣ Init DB tables async
    await init_db()

    # 2️⃣ Optional demo seeding (sync engine)
    if AUTO_SEED:
        with Session(sync_engine) as session:
            team_count = len(session.exec(select(TeamLogo)).all())
        if team_count == 0:
            logger.info("🌱 No teams found. Auto-seeding database...")
            seed_all()
        else:
            logger.info("✅ Database already seeded. Skipping auto-seed.")


@app.get("/")
def read_root():
    return {"message": "Esports League API", "status": "online"}


@app.get("/api/health")
def health(session: Session = Depends(get_session)):
    database = "connected"
    try:
        session.exec(select(TeamLogo.id).limit(1)).first()
    except SQLAlchemyError as e:
        logger.error(f"Health check could not reach the database: {e}")
        database = "disconnected"
    return {"status": "ok", "database": database}


# Routers
app.include_router(standings_router, prefix="/api/standings", tags=["Standings"])
app.include_router(result_router, prefix="/api/results", tags=["Results"])
app.include_router(teams_router, prefix="/api/teams", tags=["Teams"])
app.include_router(logos_router, prefix="/api/team-logos", tags=["Teams"])
app.include_router(player_router, prefix="/api/players", tags=["Players"])
app.include_router(schedule_router, prefix="/api/schedules", tags=["Schedules"])
app.include_router(stats_router, prefix="/api/stats", tags=["Stats"])
app.include_router(hero_router, prefix="/api/heroes", tags=["Heroes"])


if __name__ == "__main__":
    import os
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
