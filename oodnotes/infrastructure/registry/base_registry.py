"""Base registry - name-keyed factory registrations.

Registries are ordinary objects built by the composition root; there is no
process-wide instance.
"""
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from oodnotes.infrastructure.logging.logger import get_logger


class BaseRegistration:
    """Container for registration information."""

    def __init__(self, type_name: str, factory: Callable[..., Any]):
        """
        Initialize registration.

        Args:
            type_name: Unique name the factory is registered under
            factory: Callable producing the registered object or result
        """
        self.type_name = type_name
        self.factory = factory


R = TypeVar("R", bound=BaseRegistration)


class BaseRegistry(ABC, Generic[R]):
    """Thread-safe registry of factory registrations keyed by name."""

    def __init__(self):
        self._registrations: Dict[str, R] = {}
        self._registration_lock = threading.RLock()
        self._logger = get_logger(self.__class__.__module__)

    def register_type(self, type_name: str, factory: Callable[..., Any], **kwargs: Any) -> R:
        """
        Register a factory under a type name.

        Raises:
            ValueError: If type_name is already registered
        """
        with self._registration_lock:
            if type_name in self._registrations:
                raise ValueError(f"Type '{type_name}' is already registered")
            registration = self._create_registration(type_name, factory, **kwargs)
            self._registrations[type_name] = registration
            self._logger.debug(f"Registered {type_name}")
            return registration

    def unregister_type(self, type_name: str) -> bool:
        """Unregister a type. Returns True if it was registered."""
        with self._registration_lock:
            if type_name in self._registrations:
                del self._registrations[type_name]
                self._logger.debug(f"Unregistered {type_name}")
                return True
            return False

    def get_registration(self, type_name: str) -> Optional[R]:
        return self._registrations.get(type_name)

    def get_registered_types(self) -> List[str]:
        return sorted(self._registrations)

    def __len__(self) -> int:
        return len(self._registrations)

    @abstractmethod
    def _create_registration(self, type_name: str, factory: Callable[..., Any], **kwargs: Any) -> R:
        """Build the registration object for this registry."""
