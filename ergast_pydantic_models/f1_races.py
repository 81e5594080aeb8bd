from pydantic import AliasChoices, BaseModel, Field
from typing import List, Optional, Union


class ErgastCircuit(BaseModel):
    circuitName: str


class ErgastRace(BaseModel):
    # https://ergast.com/mrd/methods/schedule/
    round: Union[int, str]
    raceName: str
    date: str
    time: Optional[str] = None
    circuit: ErgastCircuit = Field(alias="Circuit")


class ErgastDriver(BaseModel):
    givenName: str
    familyName: str
    nationality: str


class ErgastConstructor(BaseModel):
    name: str


class ErgastResultTime(BaseModel):
    time: Optional[str] = None


class ErgastResult(BaseModel):
    # https://ergast.com/mrd/methods/results/
    position: int
    points: float
    driver: ErgastDriver = Field(alias="Driver")
    constructor: ErgastConstructor = Field(alias="Constructor")

    # Only classified finishers carry a time, e.g. {"millis": "5503742", "time": "1:31:44.742"}.
    # Live Ergast payloads capitalise the key, mirrors use either spelling
    time: Optional[ErgastResultTime] = Field(None, validation_alias=AliasChoices("time", "Time"))


class ErgastRaceWithResults(BaseModel):
    # Only Results is read; the race fields repeated by the API are ignored
    results: List[ErgastResult] = Field(alias="Results")


class ErgastScheduleTable(BaseModel):
    races: List[ErgastRace] = Field(alias="Races")


class ErgastResultsTable(BaseModel):
    races: List[ErgastRaceWithResults] = Field(alias="Races")


class ErgastScheduleData(BaseModel):
    race_table: ErgastScheduleTable = Field(alias="RaceTable")


class ErgastResultsData(BaseModel):
    race_table: ErgastResultsTable = Field(alias="RaceTable")


class GetErgastScheduleResponse(BaseModel):
    mr_data: ErgastScheduleData = Field(alias="MRData")


class GetErgastResultsResponse(BaseModel):
    mr_data: ErgastResultsData = Field(alias="MRData")
