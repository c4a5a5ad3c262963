"""Validator module for pre-scheduling flight checks."""

import logging
from datetime import date, datetime
from typing import List

from pydantic import BaseModel

from .config import AIRCRAFT_EN_ROUTE, AIRCRAFT_MAINTENANCE
from .models import Aircraft, Route
from .schemas.flight_schemas import ScheduleFlightRequest
from .utils import parse_hhmm

logger = logging.getLogger(__name__)


class ValidationReport(BaseModel):
    """Validation report with errors and warnings."""

    errors: List[str]
    warnings: List[str]

    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0


class FlightScheduleValidator:
    """Validates a flight request against its aircraft, route and the game date."""

    def validate(
        self,
        request: ScheduleFlightRequest,
        aircraft: Aircraft,
        route: Route,
        current_date: date,
    ) -> ValidationReport:
        """
        Validate a flight before it is created.

        Args:
            request: Flight scheduling request
            aircraft: Aircraft the flight is assigned to
            route: Route the flight operates
            current_date: Player's current simulated date

        Returns:
            ValidationReport with errors and warnings
        """
        errors = []
        warnings = []

        # Seats
        if request.maximum_passengers is not None and request.maximum_passengers > aircraft.capacity:
            errors.append(
                f"Maximum passengers {request.maximum_passengers} exceeds "
                f"{aircraft.registration} capacity of {aircraft.capacity}"
            )

        # Range
        if route.distance > aircraft.range:
            errors.append(
                f"Route {route.label()} ({route.distance} km) exceeds "
                f"{aircraft.registration} range of {aircraft.range} km"
            )

        # Aircraft availability
        if aircraft.status == AIRCRAFT_MAINTENANCE:
            errors.append(f"Aircraft {aircraft.registration} is in maintenance")
        elif aircraft.status == AIRCRAFT_EN_ROUTE:
            warnings.append(f"Aircraft {aircraft.registration} is currently en-route")

        if aircraft.maintenance_due <= request.departure_date:
            warnings.append(
                f"Aircraft {aircraft.registration} maintenance is due on {aircraft.maintenance_due}"
            )

        # Timing
        if request.departure_date < current_date:
            errors.append(
                f"Departure date {request.departure_date} is before the current date {current_date}"
            )

        if (request.arrival_date is None) != (request.arrival_time is None):
            errors.append("Arrival date and arrival time must be given together")
        elif request.arrival_date is not None:
            departure = datetime.combine(request.departure_date, parse_hhmm(request.departure_time))
            arrival = datetime.combine(request.arrival_date, parse_hhmm(request.arrival_time))
            if arrival <= departure:
                errors.append("Arrival must be after departure")

        if errors:
            logger.info(f"Flight {request.flight_number} failed validation: {errors}")

        return ValidationReport(errors=errors, warnings=warnings)
