"""Data loader module for parsing airport reference data."""

import logging
import os
from typing import Any, Dict, List, Optional

import pandas as pd

from .config import AIRPORTS_CSV

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["code", "name", "city", "country", "latitude", "longitude"]
OPTIONAL_INT_COLUMNS = ["demand_rating", "landing_fee", "slots"]


def _optional_int(value: Any) -> Optional[int]:
    """Convert a CSV cell to int, mapping blanks to None."""
    if pd.isna(value):
        return None
    return int(value)


def load_airports(csv_path: str = AIRPORTS_CSV) -> List[Dict[str, Any]]:
    """
    Parse the airports CSV into airport records (without ids).

    The file is semicolon separated. demand_rating, landing_fee and slots
    are optional and may be blank.

    Args:
        csv_path: Path to airports CSV file

    Returns:
        List of airport field dictionaries in file order
    """
    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"Airports CSV not found at {csv_path}")

    df = pd.read_csv(
        csv_path,
        sep=";",
        dtype={"code": str, "name": str, "city": str, "country": str},
        keep_default_na=False,
        na_values=[""],
    )
    logger.info(f"Loaded airports CSV with {len(df)} rows")

    for col in REQUIRED_COLUMNS:
        if col not in df.columns:
            raise ValueError(f"Missing required column: {col}")

    airports = []
    seen = set()
    for _, row in df.iterrows():
        code = str(row["code"]).strip().upper()
        if code in seen:
            logger.warning(f"Duplicate airport code {code} in {csv_path}, skipping")
            continue
        seen.add(code)

        record = {
            "code": code,
            "name": str(row["name"]),
            "city": str(row["city"]),
            "country": str(row["country"]),
            "latitude": float(row["latitude"]),
            "longitude": float(row["longitude"]),
        }
        for col in OPTIONAL_INT_COLUMNS:
            record[col] = _optional_int(row[col]) if col in df.columns else None

        airports.append(record)
        logger.debug(f"Loaded airport {code}: {record['name']}")

    logger.info(f"Successfully loaded {len(airports)} airports")
    return airports
