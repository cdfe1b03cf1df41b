"""
Loading and summarizing the portfolio data file.

The portfolio document is a JSON object with a ``photos`` list:

    {"photos": [{"category": "Street", "location": "Lisbon", "featured": true, ...}]}

Any other top-level keys are kept and handed to the page templates as-is.
"""

import logging
from pathlib import Path
from typing import Any

import orjson  # Faster JSON parsing

from ..errors import PortfolioError

logger = logging.getLogger(__name__)


def load_portfolio(path: str | Path) -> dict[str, Any]:
    """
    Read and validate the portfolio document.

    Args:
        path: Path to the JSON data file

    Returns:
        The parsed document

    Raises:
        PortfolioError: If the file is missing, unreadable or not a valid portfolio
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:  # Binary mode for orjson
            document = orjson.loads(f.read())
    except FileNotFoundError as e:
        raise PortfolioError(f"Portfolio data not found: {path}") from e
    except OSError as e:
        raise PortfolioError(f"Could not read portfolio data {path}: {e}") from e
    except orjson.JSONDecodeError as e:
        raise PortfolioError(f"Malformed JSON in {path}: {e}") from e

    if not isinstance(document, dict):
        raise PortfolioError(f"{path}: top level must be an object")

    photos = document.get("photos")
    if not isinstance(photos, list):
        raise PortfolioError(f"{path}: 'photos' must be a list")
    for i, photo in enumerate(photos):
        if not isinstance(photo, dict):
            raise PortfolioError(f"{path}: photo #{i} must be an object")

    logger.debug(f"Loaded {len(photos)} photos from {path}")
    return document


def _distinct_key(value: Any) -> Any:
    # Lists and objects are not hashable; compare them by their canonical JSON form
    if isinstance(value, (list, dict)):
        return orjson.dumps(value, option=orjson.OPT_SORT_KEYS)
    # true == 1 in Python but they are different JSON values
    if isinstance(value, bool):
        return ("bool", value)
    return value


def summarize(photos: list[dict[str, Any]]) -> dict[str, int]:
    """Count photos, featured photos, and distinct categories and locations."""
    return {
        "photos": len(photos),
        "featured": sum(1 for p in photos if p.get("featured")),
        "categories": len({_distinct_key(p.get("category")) for p in photos}),
        "locations": len({_distinct_key(p.get("location")) for p in photos}),
    }
