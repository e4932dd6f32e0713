"""Factory pattern: construct product variants from a type tag.

Callers ask ``VehicleFactory`` for ``"car"``, ``"truck"`` or
``"motorcycle"`` and receive the matching ``Vehicle`` without naming the
concrete class. New tags can be registered at runtime, so adding a product
never touches the dispatch code.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from src.domain.core.exceptions import ConfigurationError, UnknownTypeError
from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Vehicle(ABC):
    """Abstract product created by the factory."""

    vehicle_type: str = "vehicle"

    def __init__(self, model: Optional[str] = None):
        self.model = model or self.default_model

    @property
    @abstractmethod
    def wheels(self) -> int:
        """Number of wheels."""

    @property
    def default_model(self) -> str:
        return "generic"

    def describe(self) -> str:
        return f"{self.model} {self.vehicle_type} with {self.wheels} wheels"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model='{self.model}')"


class Car(Vehicle):
    vehicle_type = "car"

    @property
    def wheels(self) -> int:
        return 4

    @property
    def default_model(self) -> str:
        return "sedan"


class Truck(Vehicle):
    vehicle_type = "truck"

    def __init__(self, model: Optional[str] = None, payload_tons: float = 10.0):
        super().__init__(model)
        self.payload_tons = payload_tons

    @property
    def wheels(self) -> int:
        return 6

    @property
    def default_model(self) -> str:
        return "hauler"

    def describe(self) -> str:
        return f"{super().describe()} carrying {self.payload_tons:g} tons"


class Motorcycle(Vehicle):
    vehicle_type = "motorcycle"

    @property
    def wheels(self) -> int:
        return 2

    @property
    def default_model(self) -> str:
        return "roadster"


VehicleConstructor = Callable[..., Vehicle]


class VehicleFactory:
    """
    Creates vehicles by type tag.

    Tags are matched case-insensitively with surrounding whitespace ignored.
    Unknown tags raise UnknownTypeError listing the supported tags.
    """

    def __init__(self, register_defaults: bool = True):
        self._constructors: Dict[str, VehicleConstructor] = {}
        if register_defaults:
            self.register("car", Car)
            self.register("truck", Truck)
            self.register("motorcycle", Motorcycle)

    @staticmethod
    def _normalize(vehicle_type: str) -> str:
        return vehicle_type.strip().lower()

    def register(self, vehicle_type: str, constructor: VehicleConstructor) -> None:
        """
        Register a constructor for a type tag.

        Args:
            vehicle_type: Tag callers will pass to create()
            constructor: Class or callable returning a Vehicle

        Raises:
            ConfigurationError: If the tag is already registered
        """
        tag = self._normalize(vehicle_type)
        if not tag:
            raise ConfigurationError("Vehicle type tag must not be empty")
        if tag in self._constructors:
            raise ConfigurationError(f"Vehicle type '{tag}' is already registered")
        self._constructors[tag] = constructor
        logger.debug(f"Registered vehicle type: {tag}")

    def unregister(self, vehicle_type: str) -> bool:
        return self._constructors.pop(self._normalize(vehicle_type), None) is not None

    def is_supported(self, vehicle_type: str) -> bool:
        return isinstance(vehicle_type, str) and self._normalize(vehicle_type) in self._constructors

    def supported_types(self) -> List[str]:
        """Get the registered type tags, sorted."""
        return sorted(self._constructors)

    def create(self, vehicle_type: str, **kwargs: Any) -> Vehicle:
        """
        Create a vehicle for the given tag.

        Args:
            vehicle_type: Type tag such as "car"
            **kwargs: Passed to the product constructor

        Returns:
            The constructed vehicle

        Raises:
            UnknownTypeError: If the tag is not a registered string
        """
        if not isinstance(vehicle_type, str):
            logger.warning(f"Rejected non-string vehicle type: {vehicle_type!r}")
            raise UnknownTypeError(repr(vehicle_type), self.supported_types())

        tag = self._normalize(vehicle_type)
        constructor = self._constructors.get(tag)
        if constructor is None:
            logger.warning(f"Rejected unknown vehicle type: {vehicle_type!r}")
            raise UnknownTypeError(vehicle_type, self.supported_types())

        vehicle = constructor(**kwargs)
        logger.debug(f"Created {vehicle!r} for tag '{tag}'")
        return vehicle


_default_factory = VehicleFactory()


def create_vehicle(vehicle_type: str, **kwargs: Any) -> Vehicle:
    """Create a vehicle using the default factory."""
    return _default_factory.create(vehicle_type, **kwargs)
