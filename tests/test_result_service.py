import pytest
from pydantic import ValidationError
from sqlmodel import select

from esports_backend.core.exceptions import ResultNotFoundError, ScheduleNotFoundError
from esports_backend.models import GameStat, HistoryAction, Player, Result, ResultCreate, ResultHistory, Schedule, TeamLogo
from esports_backend.services.league_data import ResultStore, TeamRegistry, get_latest_schedule
from esports_backend.services.result_service import (
    build_match_id,
    clear_all_data,
    delete_result,
    list_result_history,
    reset_day_results,
    save_result,
)


def payload(**overrides):
    data = {
        "match_day": 1,
        "team_blue": "Phuket Phantoms",
        "team_red": "Khon Kaen Kings",
        "score_blue": 2,
        "score_red": 1,
    }
    data.update(overrides)
    return ResultCreate(**data)


def test_build_match_id_strips_whitespace():
    assert build_match_id(3, "Phuket Phantoms", "Khon Kaen Kings") == "3_PhuketPhantoms_vs_KhonKaenKings"


def test_save_result_derives_winner_and_trims_names(session):
    result = save_result(session, payload(team_blue="  Phuket Phantoms ", score_blue=0, score_red=2))

    assert result.team_blue == "Phuket Phantoms"
    assert result.winner == "Khon Kaen Kings"
    assert result.loser == "Phuket Phantoms"
    assert result.match_id == "1_PhuketPhantoms_vs_KhonKaenKings"
    assert result.is_bye_win is False
    assert result.game_details == []


def test_save_result_upserts_by_match_id(session):
    save_result(session, payload(score_blue=2, score_red=0))
    save_result(session, payload(score_blue=1, score_red=2))

    rows = session.exec(select(Result)).all()
    assert len(rows) == 1
    assert rows[0].winner == "Khon Kaen Kings"

    history = list_result_history(session)
    assert [entry.action for entry in history] == ["update", "create"]
    assert history[0].previous_data["score_blue"] == 2
    assert history[0].new_data["score_blue"] == 1


def test_delete_result_records_history(session):
    result = save_result(session, payload())

    delete_result(session, result.match_id, changed_by="referee")

    assert session.exec(select(Result)).all() == []
    entry = list_result_history(session, limit=1)[0]
    assert entry.action == "delete"
    assert entry.changed_by == "referee"
    assert entry.previous_data["winner"] == "Phuket Phantoms"


def test_delete_unknown_result_raises(session):
    with pytest.raises(ResultNotFoundError):
        delete_result(session, "1_Nobody_vs_NoOne")


def test_reset_day_only_touches_that_day(session):
    save_result(session, payload(match_day=1))
    save_result(session, payload(match_day=1, team_blue="Buriram Blaze"))
    save_result(session, payload(match_day=2))

    assert reset_day_results(session, 1) == 2
    assert [r.match_day for r in session.exec(select(Result)).all()] == [2]


def test_result_store_orders_by_match_day(session):
    save_result(session, payload(match_day=4))
    save_result(session, payload(match_day=2))

    assert [r.match_day for r in ResultStore(session).list_results()] == [2, 4]


def test_history_is_stored_for_every_change(session):
    save_result(session, payload())
    save_result(session, payload(match_day=2))

    assert len(session.exec(select(ResultHistory)).all()) == 2


def test_team_registry_merges_all_sources(session):
    session.add(TeamLogo(team_name="Buriram Blaze", logo_url="https://example.com/b.png"))
    session.add(Player(name="Somchai", team=" Chiang Mai Tigers "))
    session.add(Player(name="Free Agent", team=None))
    session.add(Player(name="Blank", team="   "))
    session.add(Schedule(teams=["Buriram Blaze", "Phuket Phantoms"]))
    session.commit()

    assert TeamRegistry(session).list_teams() == {"Buriram Blaze", "Chiang Mai Tigers", "Phuket Phantoms"}


def test_team_registry_uses_latest_schedule_only(session):
    session.add(Schedule(teams=["Old Team"]))
    session.commit()
    session.add(Schedule(teams=["New Team"]))
    session.commit()

    assert TeamRegistry(session).list_teams() == {"New Team"}


def test_latest_schedule_missing_raises(session):
    with pytest.raises(ScheduleNotFoundError):
        get_latest_schedule(session)


def add_stat(session, match_id, player_name="Som"):
    session.add(GameStat(match_id=match_id, game_number=1, team_name="Phuket Phantoms", player_name=player_name, hero_name="Layla"))
    session.commit()


def test_save_bye_win_uses_given_winner(session):
    result = save_result(session, payload(score_blue=0, score_red=0, is_bye_win=True, winner="Khon Kaen Kings"))

    assert result.is_bye_win is True
    assert result.winner == "Khon Kaen Kings"
    assert result.loser == "Phuket Phantoms"


def test_bye_win_without_winner_is_rejected():
    with pytest.raises(ValidationError):
        payload(is_bye_win=True)
    with pytest.raises(ValidationError):
        payload(is_bye_win=True, winner="Buriram Blaze")


def test_result_create_strips_and_rejects_blank_names():
    assert payload(team_red=" Khon Kaen Kings  ").team_red == "Khon Kaen Kings"
    with pytest.raises(ValidationError):
        payload(team_blue="   ")


def test_delete_result_removes_game_stats(session):
    result = save_result(session, payload())
    add_stat(session, result.match_id)
    add_stat(session, "2_Other_vs_Match")

    delete_result(session, result.match_id)

    assert [stat.match_id for stat in session.exec(select(GameStat)).all()] == ["2_Other_vs_Match"]


def test_reset_day_records_history(session):
    save_result(session, payload(match_day=4))
    save_result(session, payload(match_day=4, team_blue="Buriram Blaze"))

    reset_day_results(session, 4, changed_by="referee")

    deletes = session.exec(select(ResultHistory).where(ResultHistory.action == HistoryAction.DELETE)).all()
    assert len(deletes) == 2
    assert {entry.reason for entry in deletes} == {"Match day 4 reset"}
    assert {entry.changed_by for entry in deletes} == {"referee"}
    assert {entry.previous_data["match_day"] for entry in deletes} == {4}


def test_clear_all_data_records_history_and_removes_stats(session):
    first = save_result(session, payload(match_day=1))
    save_result(session, payload(match_day=2))
    add_stat(session, first.match_id)
    session.add(Schedule(teams=["Phuket Phantoms", "Khon Kaen Kings"]))
    session.commit()

    assert clear_all_data(session) == {"schedules": 1, "results": 2}

    assert session.exec(select(Result)).all() == []
    assert session.exec(select(Schedule)).all() == []
    assert session.exec(select(GameStat)).all() == []
    deletes = session.exec(select(ResultHistory).where(ResultHistory.action == HistoryAction.DELETE)).all()
    assert sorted(entry.match_id for entry in deletes) == [
        "1_PhuketPhantoms_vs_KhonKaenKings",
        "2_PhuketPhantoms_vs_KhonKaenKings",
    ]
    assert all(entry.reason == "Season reset" for entry in deletes)
