"""
Registry for transport factories.

The client looks up its transport factory by name here, which lets tests and
applications swap in their own transports.
"""

from typing import Any, List

from exee.transport.factory import TransportFactory
from exee.transport.protocol import Transport


class TransportFactoryRegistry:
    """Registry for transport factories."""

    def __init__(self):
        self._factories = {}

    def register(self, name: str, factory: TransportFactory) -> None:
        """Register a transport factory, replacing any previous one."""
        self._factories[name] = factory

    def unregister(self, name: str) -> None:
        """Remove a transport factory if it is registered."""
        self._factories.pop(name, None)

    def get(self, name: str) -> TransportFactory:
        """Get a transport factory by name.

        Raises:
            KeyError: If no factory is registered with the given name.
        """
        return self._factories[name]

    def get_registered_names(self) -> List[str]:
        return list(self._factories)

    def create_transport(self, name: str, **kwargs: Any) -> Transport:
        """Create a transport using a registered factory.

        Args:
            name: The name of the factory to use.
            **kwargs: Transport-specific configuration options.

        Raises:
            KeyError: If no factory is registered with the given name.
        """
        return self.get(name).create_transport(**kwargs)


_registry = None


def get_transport_factory_registry() -> TransportFactoryRegistry:
    """Get the process-wide registry, with the TCP factory registered."""
    global _registry
    if _registry is None:
        from exee.transport.tcp.factory import TcpTransportFactory

        _registry = TransportFactoryRegistry()
        _registry.register("tcp", TcpTransportFactory())
    return _registry
