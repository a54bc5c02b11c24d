"""LED device source port definition.

Defines the interface the collector uses to discover LEDs and read their
brightness attributes. This keeps the collector independent of sysfs so
tests can inject deterministic or faulty devices.

Read Semantics:
- Every call performs a live read, no caching
- A failed read raises LedReadError for that attribute only
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LedDevice(Protocol):
    """Protocol for a single LED device handle."""

    @property
    def name(self) -> str:
        """Raw device name (may contain ":" and "-")."""
        ...

    def brightness(self) -> int:
        """Read the current brightness.

        Raises:
            LedReadError: If the attribute cannot be read.
        """
        ...

    def max_brightness(self) -> int:
        """Read the maximum brightness.

        Raises:
            LedReadError: If the attribute cannot be read.
        """
        ...


@runtime_checkable
class LedSource(Protocol):
    """Protocol for enumerating LED devices on the host."""

    def discover(self) -> list[LedDevice]:
        """Enumerate all LED devices currently present.

        Returns:
            Device handles in a stable order (may be empty).

        Raises:
            LedEnumerationError: If the device interface is unavailable.
        """
        ...


__all__ = ["LedDevice", "LedSource"]
