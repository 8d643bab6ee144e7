"""Service registry used in place of framework dependency injection."""

from typing import Callable, Dict, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")

ServiceFactory = Callable[[AsyncSession], T]

_factories: Dict[Type, ServiceFactory] = {}


def register_service(service_class: Type[T]) -> Type[T]:
    """Register a service class so it can be built from a session.

    The class must provide a ``from_db(db)`` classmethod.
    """
    _factories[service_class] = service_class.from_db
    return service_class


def get_service_factory(service_class: Type[T]) -> ServiceFactory:
    """Return the factory building ``service_class`` from a session.

    Raises:
        ValueError: If the service class was never registered
    """
    try:
        return _factories[service_class]
    except KeyError:
        raise ValueError(f"Service {service_class.__name__} not registered") from None
