"""Linux sysfs LED device source.

Reads LED class devices from /sys/class/leds. Each entry is a directory
(usually a symlink into /sys/devices) holding plain-text attribute files:

    /sys/class/leds/input3::capslock/brightness      -> "0\n"
    /sys/class/leds/input3::capslock/max_brightness  -> "1\n"

Attributes are re-read on every call; nothing is cached.
"""

from __future__ import annotations

from pathlib import Path

from led_exporter.application.ports.led_source import LedDevice, LedSource
from led_exporter.domain.errors.led import LedEnumerationError, LedReadError

DEFAULT_LEDS_PATH = "/sys/class/leds"

BRIGHTNESS_ATTRIBUTE = "brightness"
MAX_BRIGHTNESS_ATTRIBUTE = "max_brightness"


class SysfsLed(LedDevice):
    """One LED class device backed by a sysfs directory."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def name(self) -> str:
        """Directory name; undecodable bytes become U+FFFD."""
        return self._path.name.encode("utf-8", "surrogateescape").decode(
            "utf-8", "replace"
        )

    @property
    def path(self) -> Path:
        return self._path

    def brightness(self) -> int:
        return self._read_int(BRIGHTNESS_ATTRIBUTE)

    def max_brightness(self) -> int:
        return self._read_int(MAX_BRIGHTNESS_ATTRIBUTE)

    def _read_int(self, attribute: str) -> int:
        """Read an integer attribute file.

        Args:
            attribute: File name inside the device directory.

        Returns:
            The parsed base-10 integer.

        Raises:
            LedReadError: If the file is missing, unreadable, or not an integer.
        """
        try:
            return int((self._path / attribute).read_text().strip())
        except (OSError, ValueError) as e:
            raise LedReadError(self.name, attribute, str(e)) from e

    def __repr__(self) -> str:
        return f"SysfsLed({str(self._path)!r})"


class SysfsLedSource(LedSource):
    """Enumerate LED class devices under a sysfs directory.

    The root defaults to /sys/class/leds and can point at any directory
    with the same layout.
    """

    def __init__(self, root: Path | str = DEFAULT_LEDS_PATH) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def discover(self) -> list[LedDevice]:
        """List every entry of the root directory as a device, sorted by name.

        Raises:
            LedEnumerationError: If the root is missing or cannot be listed.
        """
        try:
            entries = sorted(self._root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise LedEnumerationError(
                f"Cannot list LED devices in {self._root}: {e}"
            ) from e
        return [SysfsLed(entry) for entry in entries]
