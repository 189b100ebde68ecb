"""Stop list: product ids temporarily hidden from ordinary users."""
import logging
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)


def parse_stop_param(raw: Optional[str]) -> List[int]:
    """Parse the comma-separated ``stop`` launch parameter.

    Tokens that are not integers are skipped, duplicates are dropped and the
    first-seen order is kept.
    """
    if not raw:
        return []

    stop_list: List[int] = []
    for token in raw.split(","):
        token = token.strip()
        try:
            product_id = int(token)
        except ValueError:
            if token:
                logger.debug(f"[STOP LIST] Ignoring non-numeric token '{token}'")
            continue
        if product_id not in stop_list:
            stop_list.append(product_id)
    return stop_list


def toggle_stopped(stop_list: Iterable[int], product_id: int) -> List[int]:
    """Return a new stop list with ``product_id`` added or removed."""
    current = list(stop_list)
    if product_id in current:
        return [pid for pid in current if pid != product_id]
    return current + [product_id]
