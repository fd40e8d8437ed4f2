"""Observer pattern - a weather station pushing measurements to displays.

Observers are notified synchronously in the order they registered. Each
notification iterates over a snapshot of the observer list, so an observer
removed while a notification is in progress still receives that one and
none after it.
"""
import logging
from abc import abstractmethod
from typing import List, Optional

from oodnotes.domain.base.capability import Capability
from oodnotes.domain.base.value_object import ValueObject
from oodnotes.domain.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class Measurements(ValueObject):
    temperature: float
    humidity: float
    pressure: float


class Observer(Capability):
    @abstractmethod
    def update(self, measurements: Measurements) -> None:
        """Receive new measurements."""


class WeatherData:
    """Subject holding the latest measurements and an ordered list of observers."""

    def __init__(self):
        self._observers: List[Observer] = []
        self._measurements: Optional[Measurements] = None

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    @property
    def measurements(self) -> Optional[Measurements]:
        return self._measurements

    def register_observer(self, observer: Observer) -> None:
        if observer in self._observers:
            return
        self._observers.append(observer)
        logger.debug(f"Registered observer {type(observer).__name__}")

    def remove_observer(self, observer: Observer) -> None:
        if observer not in self._observers:
            raise ValidationError(f"{type(observer).__name__} is not registered")
        self._observers.remove(observer)
        logger.debug(f"Removed observer {type(observer).__name__}")

    def notify_observers(self) -> int:
        """Push current measurements to every observer. Returns the number notified."""
        if self._measurements is None:
            return 0
        observers = tuple(self._observers)
        logger.debug(f"Notifying {len(observers)} observers")
        for observer in observers:
            observer.update(self._measurements)
        return len(observers)

    def set_measurements(self, temperature: float, humidity: float, pressure: float) -> int:
        self._measurements = Measurements(
            temperature=temperature, humidity=humidity, pressure=pressure
        )
        return self.notify_observers()


class CurrentConditionsDisplay(Observer):
    def __init__(self):
        self.temperature: Optional[float] = None
        self.humidity: Optional[float] = None

    def update(self, measurements: Measurements) -> None:
        self.temperature = measurements.temperature
        self.humidity = measurements.humidity

    def display(self) -> str:
        if self.temperature is None:
            return "Current conditions: no data"
        return f"Current conditions: {self.temperature}F degrees and {self.humidity}% humidity"


class StatisticsDisplay(Observer):
    def __init__(self):
        self._readings: List[float] = []

    def update(self, measurements: Measurements) -> None:
        self._readings.append(measurements.temperature)

    @property
    def minimum(self) -> Optional[float]:
        return min(self._readings) if self._readings else None

    @property
    def maximum(self) -> Optional[float]:
        return max(self._readings) if self._readings else None

    @property
    def average(self) -> Optional[float]:
        return sum(self._readings) / len(self._readings) if self._readings else None

    def display(self) -> str:
        if not self._readings:
            return "Avg/Max/Min temperature: no data"
        return f"Avg/Max/Min temperature = {self.average:.1f}/{self.maximum}/{self.minimum}"


class ForecastDisplay(Observer):
    def __init__(self):
        self.current_pressure: Optional[float] = None
        self.last_pressure: Optional[float] = None

    def update(self, measurements: Measurements) -> None:
        self.last_pressure = self.current_pressure
        self.current_pressure = measurements.pressure

    def display(self) -> str:
        if self.current_pressure is None or self.last_pressure is None:
            return "Forecast: more data needed"
        if self.current_pressure > self.last_pressure:
            return "Forecast: Improving weather on the way!"
        if self.current_pressure == self.last_pressure:
            return "Forecast: More of the same"
        return "Forecast: Watch out for cooler, rainy weather"
