from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from api_pydantic_models.race_table import RaceTableView
from api_pydantic_models.view_state import ViewState
from config.api_config import ApiConfig
from utils.race_repository import RaceRepositoryClient
from utils.table_presenter import present
from utils.view_state_controller import RaceViewController
import logging

logging.basicConfig(
    level=ApiConfig.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the view controller and load the season schedule on startup, like a page mount."""
    repository = RaceRepositoryClient(**ApiConfig.get_client_params())
    app.state.controller = RaceViewController(repository)
    await app.state.controller.load_schedule()
    yield


app = FastAPI(lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Change in production!
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_controller(request: Request) -> RaceViewController:
    return request.app.state.controller


@app.get("/view-state")
def get_view_state(controller: RaceViewController = Depends(get_controller)) -> ViewState:
    return controller.view_state


@app.get("/race-table")
def get_race_table(controller: RaceViewController = Depends(get_controller)) -> RaceTableView:
    return present(controller.view_state)


@app.post("/schedule/load")
async def load_schedule(controller: RaceViewController = Depends(get_controller)) -> ViewState:
    """
    Refetch the season schedule.
    A failed fetch is not an HTTP error: it is reported through the failed load state.
    """
    try:
        logging.info("Request: load season schedule")
        load_state = await controller.load_schedule()
        logging.info("Response: season schedule status=%s races=%d", load_state.status, len(load_state.races))
        return controller.view_state
    except Exception as e:
        logging.exception("Error in load_schedule")
        raise HTTPException(status_code=500, detail=f"Failed to load schedule: {str(e)}")


@app.post("/races/{round}/select")
async def select_race(round: str, controller: RaceViewController = Depends(get_controller)) -> ViewState:
    """
    Fetch results for a round and open the results modal.
    If the results cannot be fetched the modal simply stays as it was.
    """
    try:
        logging.info("Request: race results for round=%s", round)
        results_view = await controller.select_race(round)
        logging.info("Response: results modal visible=%s with %d results", results_view.visible, len(results_view.results))
        return controller.view_state
    except Exception as e:
        logging.exception("Error in select_race for round=%s", round)
        raise HTTPException(status_code=500, detail=f"Failed to select race: {str(e)}")


@app.post("/results/dismiss")
def dismiss_results(controller: RaceViewController = Depends(get_controller)) -> ViewState:
    controller.dismiss_modal()
    return controller.view_state
