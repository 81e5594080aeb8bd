"""
View state for the race table: schedule load state machine plus the results modal.
"""
import logging
from typing import Union

from api_pydantic_models.view_state import (
    Failed,
    FetchFailure,
    FetchInit,
    FetchSuccess,
    Idle,
    LoadAction,
    LoadState,
    Loaded,
    Loading,
    ResultsViewState,
    ViewState,
)
from utils.exceptions import FetchError, UnhandledActionError
from utils.race_repository import RaceRepositoryClient

logger = logging.getLogger(__name__)


def reduce_load_state(state: LoadState, action: LoadAction) -> LoadState:
    """
    Compute the next load state. The previous state is never modified.

    FETCH_INIT is accepted from any state so a loaded or failed view can refetch.
    Anything that is not one of the known actions raises UnhandledActionError.
    """
    if isinstance(action, FetchInit):
        return Loading()
    if isinstance(action, FetchSuccess):
        return Loaded(races=action.payload)
    if isinstance(action, FetchFailure):
        return Failed(error=action.payload)
    action_type = getattr(action, "type", type(action).__name__)
    raise UnhandledActionError(f"Unhandled action type: {action_type}")


class RaceViewController:
    """
    Owns the state of one race table view.

    Each completed action replaces the state object in a single assignment.
    Responses are applied in completion order: a slow results response for an
    earlier click can replace the results of a later one.
    """

    def __init__(self, repository: RaceRepositoryClient):
        self.repository = repository
        self._load_state: LoadState = Idle()
        self._results_view = ResultsViewState()

    @property
    def load_state(self) -> LoadState:
        return self._load_state

    @property
    def results_view(self) -> ResultsViewState:
        return self._results_view

    @property
    def view_state(self) -> ViewState:
        return ViewState(load_state=self._load_state, results_view=self._results_view)

    def dispatch(self, action: LoadAction) -> LoadState:
        self._load_state = reduce_load_state(self._load_state, action)
        return self._load_state

    async def load_schedule(self) -> LoadState:
        """
        Fetch the season schedule and move to Loaded or Failed.
        Fetch errors end up in the Failed state and are not raised.
        """
        self.dispatch(FetchInit())
        try:
            races = await self.repository.fetch_season_schedule()
        except FetchError as e:
            logger.warning("Season schedule fetch failed: %s", e.message)
            return self.dispatch(FetchFailure(payload=e.message))
        return self.dispatch(FetchSuccess(payload=races))

    async def select_race(self, round: Union[int, str]) -> ResultsViewState:
        """
        Fetch results for a round and open the modal with them.
        On failure the error is only logged and the modal state stays as it was.
        """
        try:
            results = await self.repository.fetch_race_results(round)
        except FetchError:
            logger.exception("Error fetching race results for round=%s", round)
            return self._results_view

        self._results_view = ResultsViewState(round=str(round), results=results, visible=True)
        return self._results_view

    def dismiss_modal(self) -> ResultsViewState:
        """Hide the modal. Results are kept until the next selection."""
        self._results_view = self._results_view.model_copy(update={"visible": False})
        return self._results_view
