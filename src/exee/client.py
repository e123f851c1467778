"""
Core exee client implementation.
"""

from contextlib import aclosing
from typing import Any, Callable, Dict, Optional

import anyio

from exee.concurrency import run_blocking, shield
from exee.config import (
    DEFAULTS,
    coerce_float,
    coerce_int,
    get_env_config,
    merge_configs,
    parse_endpoint,
)
from exee.errors import (
    ConfigurationError,
    ExeeError,
    TimeoutError,
    TransportError,
    ValidationError,
)
from exee.telemetry import get_telemetry
from exee.transaction.builder import TransactionBuilder
from exee.transport.protocol import Transport
from exee.transport.registry import get_transport_factory_registry
from exee.types import TypeRegistry

Sink = Callable[[bytes], Any]


class Client(TransactionBuilder):
    """
    Builds a transaction and pushes it to a terminal over a single-use
    connection.

    Each push opens one connection, writes the encoded transaction once,
    waits for the first reply chunk and closes the connection.
    """

    def __init__(
        self,
        uri: Optional[str] = None,
        transaction_id: Optional[str] = None,
        *,
        transport: Optional[Transport] = None,
        transport_type: str = "tcp",
        reorder: bool = True,
        type_registry: Optional[TypeRegistry] = None,
        enable_telemetry: bool = True,
        config: Optional[Dict[str, Any]] = None,
        **transport_options: Any,
    ):
        """Initialize the client.

        Args:
            uri: Terminal endpoint as ``host:port``.
            transaction_id: Identifier used when a model carries none.
            transport: Optional pre-built transport, connected and closed on
                every push.
            transport_type: Registered factory used when no transport is given.
            reorder: Whether model attributes are sorted by field name.
            type_registry: Registry used to resolve type codes.
            enable_telemetry: Whether to log and trace pushes.
            config: Configuration options for the client.
            **transport_options: Additional options passed to the transport factory.
        """
        self._config = config or {}
        self._transport_type = transport_type
        self._transport_options = transport_options
        self._transport = transport
        self._owns_transport = transport is None

        self._tracer, logger = get_telemetry("exee.client") if enable_telemetry else (None, None)

        super().__init__(
            transaction_id=transaction_id or self._get_config("transaction_id"),
            reorder=reorder,
            type_registry=type_registry,
            logger=logger,
        )

        self.uri = uri or self._get_config("uri")
        self.host, self.port = parse_endpoint(self.uri)
        self.timeout = coerce_float("timeout", self._get_config("timeout"))
        self.connect_timeout = coerce_float(
            "connect_timeout", self._get_config("connect_timeout")
        )
        self.read_timeout = coerce_float("read_timeout", self._get_config("read_timeout"))
        self.max_bytes = coerce_int("max_bytes", self._get_config("max_bytes"))
        self.encoding = self._get_config("encoding")

        self._validate_config()

    def _validate_config(self) -> None:
        if self._owns_transport:
            factory_registry = get_transport_factory_registry()
            if self._transport_type not in factory_registry.get_registered_names():
                raise ConfigurationError(
                    f"Invalid transport type: {self._transport_type}. "
                    f"Available types: {', '.join(factory_registry.get_registered_names())}"
                )
        try:
            "".encode(self.encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding: {self.encoding}") from e

    def _get_config(self, key: str, default: Any = None) -> Any:
        """Get a configuration value from the hierarchy.

        Instance configuration wins over ``EXEE_*`` environment variables,
        which win over the package defaults.
        """
        if key in self._config:
            return self._config[key]

        env_value = get_env_config(key)
        if env_value is not None:
            return env_value

        return DEFAULTS.get(key, default)

    def _create_transport(self) -> Transport:
        """Get the transport for one push.

        Owned transports are created fresh from the registered factory.

        Raises:
            ConfigurationError: If the transport cannot be created.
        """
        if not self._owns_transport:
            return self._transport

        options = merge_configs(
            {
                "host": self.host,
                "port": self.port,
                "connect_timeout": self.connect_timeout,
                "read_timeout": self.read_timeout,
                "max_bytes": self.max_bytes,
            },
            self._transport_options,
        )

        try:
            factory = get_transport_factory_registry().get(self._transport_type)
            return factory.create_transport(**options)
        except Exception as e:
            raise ConfigurationError(f"Failed to create transport: {e}") from e

    async def push(
        self,
        with_validation: bool = True,
        timeout: Optional[float] = None,
        sink: Optional[Sink] = None,
    ) -> bytes:
        """Send the transaction and return the terminal's first reply.

        Args:
            with_validation: Whether to validate attached models first. A
                failure aborts before any network activity.
            timeout: Deadline in seconds for the whole exchange. Falls back to
                the configured ``timeout``.
            sink: Optional callable that receives the reply bytes.

        Returns:
            The raw reply bytes, empty if the terminal closed without replying.

        Raises:
            ValidationError: If an attached model fails validation, or a field
                value cannot be encoded in the configured encoding.
            TransportError: If the connection, write or read fails.
            TimeoutError: If the exchange exceeds the deadline.
        """
        if with_validation:
            self.validate_models()

        payload = self._encode_payload()

        if self._tracer:
            with self._tracer.start_as_current_span(
                "exee.push",
                attributes={
                    "net.peer.name": self.host,
                    "net.peer.port": self.port,
                    "transaction.id": self.transaction_id,
                    "request.size": len(payload),
                },
            ) as span:
                try:
                    result = await self._push_with_timeout(payload, timeout)
                    span.set_attribute("response.size", len(result))
                except Exception as e:
                    span.record_exception(e)
                    raise
        else:
            result = await self._push_with_timeout(payload, timeout)

        if sink is not None:
            sink(result)
        return result

    def _encode_payload(self) -> bytes:
        try:
            return self.encoded.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise ValidationError(
                f"Transaction cannot be encoded as {self.encoding}: {e.reason} "
                f"at position {e.start}"
            ) from e

    def push_blocking(
        self,
        with_validation: bool = True,
        timeout: Optional[float] = None,
        sink: Optional[Sink] = None,
    ) -> bytes:
        """Run ``push`` on an event loop of its own and return the reply."""
        return run_blocking(
            self.push, with_validation=with_validation, timeout=timeout, sink=sink
        )

    async def _push_with_timeout(self, payload: bytes, timeout: Optional[float]) -> bytes:
        if self._logger:
            self._logger.info(
                "push.start",
                host=self.host,
                port=self.port,
                transaction_id=self.transaction_id,
                payload_size=len(payload),
                timeout=timeout,
            )

        if timeout is None:
            timeout = self.timeout

        try:
            if timeout is not None:
                with anyio.move_on_after(float(timeout)) as scope:
                    result = await self._perform_push(payload)

                if scope.cancelled_caught:
                    if self._logger:
                        self._logger.error("push.timeout", timeout=timeout, host=self.host)
                    raise TimeoutError(f"Push timed out after {timeout} seconds")
            else:
                result = await self._perform_push(payload)

            if self._logger:
                self._logger.info(
                    "push.complete", payload_size=len(payload), result_size=len(result)
                )
            return result

        except Exception as e:
            if self._logger:
                self._logger.error("push.error", error=str(e), error_type=type(e).__name__)
            raise

    async def _perform_push(self, payload: bytes) -> bytes:
        """Drive one connection through connect, write, first read and close."""
        transport = self._create_transport()

        try:
            await transport.connect()
            if self._logger:
                self._logger.debug("push.connected", host=self.host, port=self.port)

            await transport.send(payload)
            if self._logger:
                self._logger.debug("push.sent", payload_size=len(payload))

            result = b""
            async with aclosing(transport.receive()) as replies:
                async for chunk in replies:
                    result = chunk
                    break

            if self._logger:
                self._logger.debug("push.received", result_size=len(result))
            return result

        except ExeeError:
            raise
        except OSError as e:
            raise TransportError(f"Connection error: {e}") from e
        except Exception as e:
            raise ExeeError(f"Unexpected error: {e}") from e
        finally:
            await shield(transport.disconnect)
