import logging
from typing import Callable, Optional

from features.airports.models.airport_types import Airport
from features.common.exceptions.observation_exceptions import ObservationError
from features.wind.models.wind_types import (
    ObservationStatusEnum,
    SelectionState,
    SelectionStateEnum
)
from features.wind.services.wind_observation_service import WindObservationService

logger = logging.getLogger(__name__)

class WindSelectionController:
    """State machine behind the airport selector.

    idle -> loading -> ready | calm | no_data | error, re-entering loading on every
    selection. Each selection carries a generation token and a chain that
    finishes after a newer selection started is dropped.
    """

    def __init__(
        self,
        wind_service: WindObservationService,
        on_change: Optional[Callable[[SelectionState], None]] = None
    ):
        self.wind_service = wind_service
        self.on_change = on_change
        self._generation = 0
        self._state = SelectionState()

    @property
    def state(self) -> SelectionState:
        return self._state

    def _apply(self, state: SelectionState):
        self._state = state
        if self.on_change:
            self.on_change(state)

    async def select(self, airport: Airport) -> SelectionState:
        """Load wind for a newly selected airport."""
        self._generation += 1
        generation = self._generation
        self._apply(SelectionState(
            state=SelectionStateEnum.LOADING,
            generation=generation,
            airport=airport,
            wind=self._state.wind
        ))

        try:
            wind = await self.wind_service.get_airport_wind(airport)
        except ObservationError as e:
            logger.error(f"❌ Wind lookup failed for {airport.id}: {str(e)}")
            outcome = SelectionState(
                state=SelectionStateEnum.ERROR,
                generation=generation,
                airport=airport,
                message=str(e)
            )
        except Exception as e:
            logger.error(f"❌ Unexpected error loading wind for {airport.id}: {str(e)}")
            outcome = SelectionState(
                state=SelectionStateEnum.ERROR,
                generation=generation,
                airport=airport,
                message="Failed to fetch weather data"
            )
        else:
            if wind.status == ObservationStatusEnum.READY:
                outcome = SelectionState(
                    state=SelectionStateEnum.READY,
                    generation=generation,
                    airport=airport,
                    wind=wind
                )
            elif wind.status == ObservationStatusEnum.CALM:
                outcome = SelectionState(
                    state=SelectionStateEnum.CALM,
                    generation=generation,
                    airport=airport,
                    wind=wind,
                    message=wind.message
                )
            else:
                outcome = SelectionState(
                    state=SelectionStateEnum.NO_DATA,
                    generation=generation,
                    airport=airport,
                    wind=wind,
                    message=wind.message
                )

        if generation != self._generation:
            logger.debug(f"Discarding stale result for {airport.id} (generation {generation})")
            return self._state

        self._apply(outcome)
        return outcome
