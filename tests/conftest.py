"""
Shared fixtures: Ergast-shaped payloads and a client wired to an in-memory transport.
"""
import httpx
import pytest

from utils.race_repository import RaceRepositoryClient

BASE_URL = "https://ergast.test/api/f1"


def make_race(round: str, name: str, circuit: str, date: str, time: str = "15:00:00Z") -> dict:
    return {
        "season": "2023",
        "round": round,
        "url": f"https://en.wikipedia.org/wiki/{name.replace(' ', '_')}",
        "raceName": name,
        "Circuit": {"circuitId": circuit.lower().replace(" ", "_"), "circuitName": circuit},
        "date": date,
        "time": time,
    }


def make_result(position: str, given: str, family: str, nationality: str, team: str,
                points: str, time: str = None) -> dict:
    result = {
        "number": "1",
        "position": position,
        "positionText": position,
        "points": points,
        "Driver": {"givenName": given, "familyName": family, "nationality": nationality},
        "Constructor": {"name": team},
        "status": "Finished" if time else "+1 Lap",
    }
    if time:
        result["time"] = {"time": time}
    return result


def schedule_payload(races: list) -> dict:
    return {"MRData": {"series": "f1", "RaceTable": {"season": "2023", "Races": races}}}


def results_payload(race: dict, results: list) -> dict:
    return {"MRData": {"RaceTable": {"season": "2023", "round": race["round"], "Races": [dict(race, Results=results)]}}}


@pytest.fixture
def season_races():
    return [
        make_race("1", "Bahrain Grand Prix", "Bahrain International Circuit", "2023-03-05"),
        make_race("2", "Saudi Arabian Grand Prix", "Jeddah Corniche Circuit", "2023-03-19", "17:00:00Z"),
        make_race("3", "Australian Grand Prix", "Albert Park Grand Prix Circuit", "2023-04-02", "05:00:00Z"),
    ]


@pytest.fixture
def round_5_results():
    race = make_race("5", "Miami Grand Prix", "Miami International Autodrome", "2023-05-07", "19:30:00Z")
    return results_payload(race, [
        make_result("1", "Max", "Verstappen", "Dutch", "Red Bull", "25", "1:27:38.241"),
        make_result("2", "Sergio", "Pérez", "Mexican", "Red Bull", "18", "+5.384"),
        make_result("20", "Nico", "Hülkenberg", "German", "Haas F1 Team", "0"),
    ])


@pytest.fixture
def make_client():
    """Build a RaceRepositoryClient whose requests are answered by handler(request)."""
    def _make_client(handler) -> RaceRepositoryClient:
        return RaceRepositoryClient(
            base_url=BASE_URL,
            season="2023",
            timeout=5,
            transport=httpx.MockTransport(handler),
        )
    return _make_client
