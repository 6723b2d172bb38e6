# league_data.py
# Read side of the league: where the standings calculator gets its inputs.

import logging
from typing import List, Set

from sqlmodel import Session, select

from esports_backend.core.exceptions import ScheduleNotFoundError
from esports_backend.models.player_model import Player
from esports_backend.models.result_model import Result
from esports_backend.models.schedule_model import Schedule
from esports_backend.models.team_logo_model import TeamLogo

logger = logging.getLogger(__name__)


class ResultStore:
    """Lists recorded match results."""

    def __init__(self, session: Session):
        self.session = session

    def list_results(self) -> List[Result]:
        return list(self.session.exec(select(Result).order_by(Result.match_day, Result.id)).all())


class TeamRegistry:
    """
    Lists the teams in the league.

    There is no dedicated team table: a team exists once it has a logo, a
    registered player, or a place in the published schedule. Names are
    stripped and blanks dropped so all three sources agree.
    """

    def __init__(self, session: Session):
        self.session = session

    def list_teams(self) -> Set[str]:
        names = set()

        for team_name in self.session.exec(select(TeamLogo.team_name)).all():
            names.add(team_name)

        for team in self.session.exec(select(Player.team).where(Player.team.is_not(None))).all():
            names.add(team)

        latest = latest_schedule(self.session)
        if latest:
            names.update(latest.teams or [])

        teams = {name.strip() for name in names if name and name.strip()}
        logger.debug(f"Team registry resolved {len(teams)} teams")
        return teams


def latest_schedule(session: Session):
    """Newest published schedule, or None."""
    return session.exec(select(Schedule).order_by(Schedule.created_at.desc(), Schedule.id.desc())).first()


def get_latest_schedule(session: Session) -> Schedule:
    """Like latest_schedule, but raises ScheduleNotFoundError when nothing is published."""
    schedule = latest_schedule(session)
    if not schedule:
        raise ScheduleNotFoundError()
    return schedule
