"""
Client for the Ergast-compatible results API.
Fetches the season schedule and per-round results and maps them to our entities.
"""
import httpx
import logging
from typing import Any, List, Optional, Union

from pydantic import ValidationError

from api_pydantic_models.races import Race, RaceResult
from constants.ergast_api_endpoints import (
    ERGAST_BASE_URL,
    HEADSHOT_URL_TEMPLATE,
    RACE_RESULTS_PATH,
    SEASON_SCHEDULE_PATH,
)
from ergast_pydantic_models.f1_races import (
    ErgastRace,
    ErgastResult,
    GetErgastResultsResponse,
    GetErgastScheduleResponse,
)
from utils.exceptions import NetworkError, ParseError
from utils.name_normalizer import driver_slug, headshot_url

logger = logging.getLogger(__name__)


def convert_ergast_race(ergast_race: ErgastRace) -> Race:
    return Race(
        round=ergast_race.round,
        name=ergast_race.raceName,
        circuit_name=ergast_race.circuit.circuitName,
        date=ergast_race.date,
        time=ergast_race.time,
    )


def convert_ergast_result(ergast_result: ErgastResult, template: str = HEADSHOT_URL_TEMPLATE) -> RaceResult:
    """
    Convert an upstream result entry to a RaceResult.
    The headshot url is built from the driver slug and is never checked for existence.

    Args:
        ergast_result: Result entry from the results endpoint
        template: Image url template with a {slug} placeholder

    Returns:
        RaceResult with display name and derived headshot url
    """
    driver = ergast_result.driver
    slug = driver_slug(driver.givenName, driver.familyName)
    return RaceResult(
        position=ergast_result.position,
        driver_name=f"{driver.givenName} {driver.familyName}",
        nationality=driver.nationality,
        team=ergast_result.constructor.name,
        time=ergast_result.time.time if ergast_result.time else None,
        points=ergast_result.points,
        headshot_url=headshot_url(slug, template),
    )


class RaceRepositoryClient:
    """
    Single-shot access to the schedule and results endpoints.

    Every call opens its own httpx.AsyncClient, so concurrent calls for
    different rounds do not share or coordinate anything. No retries.
    """

    def __init__(
        self,
        base_url: str = ERGAST_BASE_URL,
        season: str = "current",
        timeout: float = 10,
        headshot_url_template: str = HEADSHOT_URL_TEMPLATE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.season = season
        self.timeout = timeout
        self.headshot_url_template = headshot_url_template
        self.transport = transport

    async def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}/{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(f"Request to {url} failed with status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Response from {url} is not valid JSON") from e
        logger.debug("Response from %s: %s", url, data)
        return data

    async def fetch_season_schedule(self) -> List[Race]:
        """
        Fetch the season's races in API order (round ascending).

        Raises:
            NetworkError: request failed to complete
            ParseError: body is not a schedule payload
        """
        data = await self._get_json(SEASON_SCHEDULE_PATH.format(season=self.season))
        try:
            schedule = GetErgastScheduleResponse.model_validate(data)
        except ValidationError as e:
            raise ParseError(f"Unexpected season schedule response for season={self.season}") from e

        races = [convert_ergast_race(r) for r in schedule.mr_data.race_table.races]
        logger.info("Fetched %d races for season=%s", len(races), self.season)
        return races

    async def fetch_race_results(self, round: Union[int, str]) -> List[RaceResult]:
        """
        Fetch the finishing order of one round.

        The endpoint is expected to return exactly one race; its Results list
        is mapped as a whole, so one malformed entry fails the entire call.

        Args:
            round: Round identifier within the configured season

        Returns:
            List of RaceResult in finishing order

        Raises:
            NetworkError: request failed to complete
            ParseError: body is not a results payload or holds no race
        """
        data = await self._get_json(RACE_RESULTS_PATH.format(season=self.season, round=round))
        try:
            validated_response = GetErgastResultsResponse.model_validate(data)
        except ValidationError as e:
            raise ParseError(f"Unexpected race results response for round={round}") from e

        races = validated_response.mr_data.race_table.races
        if not races:
            raise ParseError(f"No race found in results response for round={round}")

        results = [convert_ergast_result(r, self.headshot_url_template) for r in races[0].results]
        logger.info("Fetched %d results for season=%s round=%s", len(results), self.season, round)
        return results
