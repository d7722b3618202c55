"""Virtual input devices backed by the Linux uinput interface."""

from __future__ import annotations

import errno
import fcntl
import os
import struct

# ioctl request encoding (asm-generic/ioctl.h).
_IOC_NONE = 0
_IOC_WRITE = 1


def _ioc(direction: int, kind: str, nr: int, size: int) -> int:
    return (direction << 30) | (size << 16) | (ord(kind) << 8) | nr


_INT_SIZE = struct.calcsize("i")

# struct input_id + char name[UINPUT_MAX_NAME_SIZE] + __u32 ff_effects_max
_MAX_NAME_SIZE = 80
_SETUP_FORMAT = f"=HHHH{_MAX_NAME_SIZE}sI"

# __u16 code + padding + struct input_absinfo (value, min, max, fuzz, flat, resolution)
_ABS_SETUP_FORMAT = "=H2xiiiiii"

# struct input_event: struct timeval, __u16 type, __u16 code, __s32 value
_EVENT_FORMAT = "@llHHi"

_UI_DEV_CREATE = _ioc(_IOC_NONE, "U", 1, 0)
_UI_DEV_DESTROY = _ioc(_IOC_NONE, "U", 2, 0)
_UI_DEV_SETUP = _ioc(_IOC_WRITE, "U", 3, struct.calcsize(_SETUP_FORMAT))
_UI_ABS_SETUP = _ioc(_IOC_WRITE, "U", 4, struct.calcsize(_ABS_SETUP_FORMAT))
_UI_SET_EVBIT = _ioc(_IOC_WRITE, "U", 100, _INT_SIZE)
_UI_SET_KEYBIT = _ioc(_IOC_WRITE, "U", 101, _INT_SIZE)
_UI_SET_PROPBIT = _ioc(_IOC_WRITE, "U", 110, _INT_SIZE)

_BUS_VIRTUAL = 0x06

_U16_MAX = 0xFFFF
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _check_range(name: str, value: int, low: int, high: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{name} {value} is out of range [{low}, {high}]")
    return value


def _u16(name: str, value: int) -> int:
    return _check_range(name, value, 0, _U16_MAX)


def _i32(name: str, value: int) -> int:
    return _check_range(name, value, _I32_MIN, _I32_MAX)


class UinputDevice:
    """A virtual input device created through a uinput node.

    Event types, keys, properties and axes are enabled first, then
    :meth:`create` registers the device, after which :meth:`emit` sends events.
    Operating-system failures are raised as :class:`OSError`.
    """

    def __init__(
        self,
        path: str | os.PathLike[str] = "/dev/uinput",
        name: str = "",
        vendor: int = 0,
        product: int = 0,
        version: int = 0,
    ) -> None:
        self.name = name
        self.vendor = _u16("vendor", vendor)
        self.product = _u16("product", product)
        self.version = _u16("version", version)
        self._fd: int | None = os.open(path, os.O_WRONLY | os.O_NONBLOCK)

    @property
    def closed(self) -> bool:
        """Whether the underlying node has been closed."""
        return self._fd is None

    def _handle(self) -> int:
        if self._fd is None:
            raise ValueError("operation on a closed uinput device")
        return self._fd

    def set_evbit(self, ev: int) -> None:
        """Enable an event type (e.g. EV_KEY or EV_ABS)."""
        fcntl.ioctl(self._handle(), _UI_SET_EVBIT, _i32("ev", ev))

    def set_propbit(self, prop: int) -> None:
        """Set a device property (e.g. INPUT_PROP_POINTER)."""
        fcntl.ioctl(self._handle(), _UI_SET_PROPBIT, _i32("prop", prop))

    def set_keybit(self, key: int) -> None:
        """Enable a key event (e.g. BTN_TOUCH)."""
        fcntl.ioctl(self._handle(), _UI_SET_KEYBIT, _i32("key", key))

    def set_absinfo(self, code: int, minimum: int, maximum: int, resolution: int) -> None:
        """Enable an absolute axis with its range and resolution."""
        payload = struct.pack(
            _ABS_SETUP_FORMAT,
            _u16("code", code),
            0,
            _i32("minimum", minimum),
            _i32("maximum", maximum),
            0,
            0,
            _i32("resolution", resolution),
        )
        fcntl.ioctl(self._handle(), _UI_ABS_SETUP, payload)

    def create(self) -> None:
        """Register the device with the configured identity and capabilities."""
        fd = self._handle()
        encoded = self.name.encode()
        if len(encoded) > _MAX_NAME_SIZE:
            raise ValueError(
                f"device name is {len(encoded)} bytes, at most {_MAX_NAME_SIZE} are allowed"
            )

        payload = struct.pack(
            _SETUP_FORMAT,
            _BUS_VIRTUAL,
            self.vendor,
            self.product,
            self.version,
            encoded,
            0,
        )
        fcntl.ioctl(fd, _UI_DEV_SETUP, payload)
        fcntl.ioctl(fd, _UI_DEV_CREATE)

    def emit(self, type_: int, code: int, value: int) -> int:
        """Write one input event and return the number of bytes written."""
        event = struct.pack(
            _EVENT_FORMAT, 0, 0, _u16("type", type_), _u16("code", code), _i32("value", value)
        )
        return os.write(self._handle(), event)

    def close(self) -> None:
        """Destroy the device and close the node. Calling it again does nothing."""
        if self._fd is None:
            return
        fd, self._fd = self._fd, None
        try:
            fcntl.ioctl(fd, _UI_DEV_DESTROY)
        except OSError:
            pass
        os.close(fd)

    def __enter__(self) -> UinputDevice:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except (OSError, AttributeError):
            pass