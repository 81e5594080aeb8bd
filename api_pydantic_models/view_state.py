"""
Pydantic models for the race table view state and the actions that drive it.
All models are frozen: a transition always produces a new object.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Literal, Optional, Tuple, Union

from api_pydantic_models.races import Race, RaceResult


class Idle(BaseModel):
    """Nothing requested yet."""
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"

    @property
    def is_loading(self) -> bool:
        return False

    @property
    def races(self) -> Tuple[Race, ...]:
        return ()

    @property
    def error(self) -> Optional[str]:
        return None


class Loading(BaseModel):
    """Season schedule request in flight."""
    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"

    @property
    def is_loading(self) -> bool:
        return True

    @property
    def races(self) -> Tuple[Race, ...]:
        return ()

    @property
    def error(self) -> Optional[str]:
        return None


class Loaded(BaseModel):
    """Season schedule in API order."""
    model_config = ConfigDict(frozen=True)

    status: Literal["loaded"] = "loaded"
    races: Tuple[Race, ...]

    @property
    def is_loading(self) -> bool:
        return False

    @property
    def error(self) -> Optional[str]:
        return None


class Failed(BaseModel):
    """Season schedule request failed; error is shown instead of the table."""
    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    error: str

    @property
    def is_loading(self) -> bool:
        return False

    @property
    def races(self) -> Tuple[Race, ...]:
        return ()


LoadState = Annotated[Union[Idle, Loading, Loaded, Failed], Field(discriminator="status")]


class ResultsViewState(BaseModel):
    """
    Results of the selected race and whether the modal showing them is open.
    An empty results tuple is allowed while visible (race without classified results).
    """
    model_config = ConfigDict(frozen=True)

    round: Optional[str] = None
    results: Tuple[RaceResult, ...] = ()
    visible: bool = False


class ViewState(BaseModel):
    """Everything the presentation layer reads, served as one snapshot."""
    model_config = ConfigDict(frozen=True)

    load_state: LoadState
    results_view: ResultsViewState


class FetchInit(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["FETCH_INIT"] = "FETCH_INIT"


class FetchSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["FETCH_SUCCESS"] = "FETCH_SUCCESS"
    payload: Tuple[Race, ...]


class FetchFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["FETCH_FAILURE"] = "FETCH_FAILURE"
    payload: str


LoadAction = Union[FetchInit, FetchSuccess, FetchFailure]
