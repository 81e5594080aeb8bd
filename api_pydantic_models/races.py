from pydantic import BaseModel, ConfigDict
from typing import Optional, Union


class Race(BaseModel):
    model_config = ConfigDict(frozen=True)

    round: Union[int, str]  # passed through as delivered, "1" or 1
    name: str
    circuit_name: str
    date: str  # ISO date as delivered by the API
    time: Optional[str] = None


class RaceResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: int
    driver_name: str
    nationality: str
    team: str
    # Absent for drivers that were not classified
    time: Optional[str] = None
    points: float
    headshot_url: str
