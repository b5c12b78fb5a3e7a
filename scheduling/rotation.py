"""
Round-robin assignment of duty dates to apartments.
"""
from typing import Dict, List, Sequence

from utils.data_models import ApartmentId
from utils.logging_config import get_logger

logger = get_logger(__name__)


def assign_round_robin(apartments: Sequence[ApartmentId], dates: Sequence[str]) -> Dict[ApartmentId, List[str]]:
    """
    Distribute dates among apartments in rotation.

    Date i goes to apartments[i % len(apartments)], so earlier apartments pick
    up the remainder when the dates do not divide evenly. Every apartment gets
    a key, even when it receives no date.

    Args:
        apartments: Apartment identifiers in rotation order
        dates: Dates in chronological order

    Returns:
        Dict mapping each apartment to its dates, in input order
    """
    if not apartments:
        if dates:
            logger.warning(f"No apartments to assign {len(dates)} dates to")
        return {}

    assignments: Dict[ApartmentId, List[str]] = {apartment: [] for apartment in apartments}
    for index, duty_date in enumerate(dates):
        assignments[apartments[index % len(apartments)]].append(duty_date)

    return assignments
