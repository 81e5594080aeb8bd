"""
Renders the view state into display tables: the season schedule and the results modal.
"""
from typing import Optional, Sequence

from api_pydantic_models.race_table import RaceTableView, ResultsModal, Table
from api_pydantic_models.races import Race, RaceResult
from api_pydantic_models.view_state import ResultsViewState, ViewState

RACE_TABLE_HEADERS = ["Round", "Race name", "Circuit name", "Date", "Time"]
RESULTS_TABLE_HEADERS = ["Position", "Headshot", "Driver", "Nationality", "Team", "Time", "Points"]
LOADING_MESSAGE = "Loading..."


def race_row(race: Race) -> list[str]:
    return [str(race.round), race.name, race.circuit_name, race.date, race.time or ""]


def result_row(result: RaceResult) -> list[str]:
    return [
        str(result.position),
        result.headshot_url,
        result.driver_name,
        result.nationality,
        result.team,
        result.time or "",
        f"{result.points:g}",
    ]


def modal_title(results_view: ResultsViewState, races: Sequence[Race]) -> str:
    for race in races:
        if str(race.round) == results_view.round:
            return f"{race.name} Results"
    return f"Round {results_view.round} Results"


def present(view_state: ViewState) -> RaceTableView:
    """
    Render the view state into tables.
    While loading the message replaces the table, and after a failure the error does.
    """
    load_state = view_state.load_state
    results_view = view_state.results_view

    race_table: Optional[Table] = None
    if load_state.status == "loaded":
        message = None
        race_table = Table(headers=RACE_TABLE_HEADERS, rows=[race_row(r) for r in load_state.races])
    elif load_state.status == "failed":
        message = load_state.error
    else:
        message = LOADING_MESSAGE

    results_modal: Optional[ResultsModal] = None
    if results_view.visible:
        results_modal = ResultsModal(
            title=modal_title(results_view, load_state.races),
            table=Table(headers=RESULTS_TABLE_HEADERS, rows=[result_row(r) for r in results_view.results]),
        )

    return RaceTableView(
        status=load_state.status,
        message=message,
        race_table=race_table,
        results_modal=results_modal,
    )
