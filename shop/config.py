import os
from pathlib import Path
from dotenv import load_dotenv

# pick up a local .env once, real environment variables win
load_dotenv()

DEFAULT_DB_NAME = "mari-zap-shop"
DEFAULT_DATA_JSON = Path(__file__).parent / "data.json"
# simulated "processing" time of a submit, in seconds
DEFAULT_SUBMIT_DELAY = 0.8


def get_mongo_uri():
    return os.environ.get("MONGO_URI")


def get_db_name():
    return os.environ.get("MONGO_DB", DEFAULT_DB_NAME)


def get_data_json():
    path = os.environ.get("SHOP_DATA_JSON")
    return Path(path) if path else DEFAULT_DATA_JSON


def get_submit_delay():
    raw = os.environ.get("SHOP_SUBMIT_DELAY")
    if raw is None or raw.strip() == "":
        return DEFAULT_SUBMIT_DELAY
    try:
        delay = float(raw)
    except ValueError:
        print(f"config: SHOP_SUBMIT_DELAY={raw!r} is not a number, using {DEFAULT_SUBMIT_DELAY}")
        return DEFAULT_SUBMIT_DELAY
    if delay < 0:
        print(f"config: SHOP_SUBMIT_DELAY cannot be negative, using {DEFAULT_SUBMIT_DELAY}")
        return DEFAULT_SUBMIT_DELAY
    return delay
