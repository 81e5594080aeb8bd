ERGAST_BASE_URL = "https://ergast.com/api/f1"

# Relative to the base url, formatted with season (and round)
SEASON_SCHEDULE_PATH = "{season}.json"
RACE_RESULTS_PATH = "{season}/{round}/results.json"

# Driver headshots are not served by Ergast; formula1.com content path keyed by driver slug
HEADSHOT_URL_TEMPLATE = (
    "https://www.formula1.com/content/fom-website/en/drivers/{slug}"
    "/jcr:content/image.img.1920.medium.jpg/1677069223130.jpg"
)
