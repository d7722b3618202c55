# iptskit

Helpers for processing capacitive touch heatmaps from IPTS touchscreens and
for passing the resulting input to the kernel through a uinput device.

## Installation

```
pip install iptskit
```

To install the test dependencies and run the tests:

```
pip install "iptskit[test]"
pytest
```

## Heatmap processing

Heatmaps are two-dimensional `numpy` arrays indexed as `data[y, x]`.

### Convolution

`iptskit.convolution.convolve(data, kernel)` runs a 2D convolution of a heatmap
with a kernel. The heatmap's borders are extended, so any sample outside the
heatmap takes the value of the nearest edge sample. The kernel is applied as
given and is not flipped. A 5x5 kernel goes through the dedicated routine in
`iptskit.convolution5.convolve_5x5`. Kernels of any other size go through
`iptskit.convolution.convolve_generic`. Both routines give the same result.
The output has the shape of the input and a floating point dtype. Input that
is not two-dimensional raises `ValueError`.

```python
import numpy as np
from iptskit.convolution import convolve

heatmap = np.random.default_rng(0).random((44, 64))
kernel = np.full((5, 5), 1 / 25)
smoothed = convolve(heatmap, kernel)
```

### Local maxima

`iptskit.maximas.find_maxima(data, threshold)` returns the `(x, y)` positions
of all local maxima whose value is strictly above `threshold`, in row-major
order. A cell's neighbours to the left and above must be strictly lower. Its
neighbours to the right and below may be equal. Because of this, two equal
neighbouring peaks are reported once, not twice, and are not both dropped.

```python
from iptskit.maximas import find_maxima

peaks = find_maxima(smoothed, 0.5)
```

## HID usages

`iptskit.usage.Usage` is a frozen, hashable `(page, value)` pair that names a
HID usage. Both fields must be integers that fit in 16 bits. Anything else
raises `TypeError` or `ValueError`. `Usage.packed()` returns the page in the
high 16 bits and the value in the low 16 bits.

## uinput devices

`iptskit.uinput.UinputDevice` opens a uinput node, which is `/dev/uinput`
unless you give another path. Through it you enable event types, keys,
properties and axes, create the virtual device and write input events to it.
Use the device as a context manager so that it is destroyed and the node is
closed when you are done:

```python
from iptskit.uinput import UinputDevice

EV_SYN, EV_KEY, EV_ABS = 0x00, 0x01, 0x03
BTN_TOUCH, ABS_X, ABS_Y = 0x14A, 0x00, 0x01

with UinputDevice(name="Example Touch", vendor=0x1234, product=0x5678) as dev:
    dev.set_evbit(EV_KEY)
    dev.set_evbit(EV_ABS)
    dev.set_keybit(BTN_TOUCH)
    dev.set_absinfo(ABS_X, 0, 9600, 40)
    dev.set_absinfo(ABS_Y, 0, 7200, 40)
    dev.create()

    dev.emit(EV_ABS, ABS_X, 4800)
    dev.emit(EV_ABS, ABS_Y, 3600)
    dev.emit(EV_KEY, BTN_TOUCH, 1)
    dev.emit(EV_SYN, 0, 0)
```

Failed system calls raise `OSError`. Values outside their field's range, a
device name longer than 80 bytes, and any use after `close()` raise
`ValueError`. `close()` is safe to call more than once. uinput works only on
Linux, and the user needs write access to the uinput node.

## What it does not do

iptskit is a set of building blocks. It does not provide these things:

- It does not read reports from a touchscreen or decode them into heatmaps or
  stylus data.
- It does not detect or track contacts beyond the convolution and maxima
  helpers above.
- It has no daemon and no command-line tools.