# greenmo/queries/runner.py
import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import List, Optional
from greenmo.queries.green_mobility import GreenMo
from greenmo.queries.position_query import BoundingBox, Position, run_query
from greenmo.queries.spirii import Spirii
from greenmo.utils.env import REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

NO_CARS_MESSAGE = "No cars for charging were found."
NO_CHARGERS_MESSAGE = "No available chargers were found."
NOTHING_REQUESTED_MESSAGE = "Neither cars nor chargers were requested."


@dataclass(frozen=True)
class QueryResult:
    car_positions: List[Position] = field(default_factory=list)
    charger_positions: List[Position] = field(default_factory=list)


def query_positions(bbox: BoundingBox, flags, timeout: float = REQUEST_TIMEOUT) -> QueryResult:
    """
    Run the requested providers side by side and wait for both.
    The first NetworkingError (or any other error) is re-raised as soon as
    it happens; the other query is abandoned.
    """
    jobs = {}
    if flags.include_cars:
        cars = GreenMo(flags.desired_fuel_level)
        jobs["cars"] = (cars, cars.parameters(bbox))
    if flags.include_chargers:
        chargers = Spirii()
        jobs["chargers"] = (chargers, chargers.parameters(bbox))
    if not jobs:
        return QueryResult()

    executor = ThreadPoolExecutor(max_workers=len(jobs))
    try:
        futures = {
            key: executor.submit(run_query, query, params, timeout)
            for key, (query, params) in jobs.items()
        }
        done, _ = wait(futures.values(), return_when=FIRST_EXCEPTION)
        for future in done:
            error = future.exception()
            if error is not None:
                raise error
        results = {key: future.result() for key, future in futures.items()}
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    return QueryResult(
        car_positions=results.get("cars", []),
        charger_positions=results.get("chargers", []),
    )


def nothing_found(flags, result: QueryResult) -> Optional[str]:
    """Message for the first requested provider that came back empty, if any."""
    if not flags.include_cars and not flags.include_chargers:
        return NOTHING_REQUESTED_MESSAGE
    if flags.include_cars and not result.car_positions:
        return NO_CARS_MESSAGE
    if flags.include_chargers and not result.charger_positions:
        return NO_CHARGERS_MESSAGE
    return None
