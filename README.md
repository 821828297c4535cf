# qdsp

Small, dependency-free building blocks for audio signal processing.
Most processors are callable objects that take one sample and return one
value, so they fit into a plain `for` loop over a list of floats.
Frequencies are plain floats in hertz, durations plain floats in seconds.

## Modules

- `qdsp.db_table`: `db2a(db)`, a decibel-to-amplitude conversion using
  a 0.1 dB lookup table with linear interpolation. Negative values give the
  reciprocal of their positive counterpart, and 120 dB and above saturate
  at 1,000,000.
- `qdsp.decibel`: the `Decibel` value type (a frozen dataclass holding
  `rep`, supporting negation, addition, subtraction, scaling and division),
  plus `lin_float` (table lookup), `lin_double` (exact), `lin_to_db` and
  `approx_db`. A level of zero maps to negative infinity, and a negative
  amplitude raises `ValueError`.
- `qdsp.units`: `hz`, `khz`, `mhz` (return hertz), `seconds`, `ms`, `us`
  (return seconds), `db` (returns a `Decibel`) and `pi_times`.
- `qdsp.ring_buffer`: `RingBuffer` and `FractionalRingBuffer`.
  - `RingBuffer` rounds its capacity up to a power of two, and `len()` gives
    that capacity. Index 0 is the newest element.
  - `FractionalRingBuffer` accepts fractional indices and interpolates
    linearly between neighbouring elements.
- `qdsp.differentiator`: `FirstDifference`, `CentralDifference` and
  `Slope` (`Slope(n)` or `Slope.from_duration(dt, sps)`; `current()`
  reads the slope without pushing a sample).
- `qdsp.moving_average`: `MovingAverage` (boxcar average, window starts
  at zero), `ExpMovingAverage` (exponential, `b = 2 / (n + 1)`) and
  `MovingAverage2` (two-point average).
- `qdsp.envelope`: the envelope followers.
  - `PeakEnvelopeFollower`, `ArEnvelopeFollower`.
  - `FastEnvelopeFollower`, a staircase peak follower with `div + 1`
    round-robin holders.
  - `FastAveEnvelopeFollower`, the staircase follower smoothed by a moving
    average.
  - `FastRmsEnvelopeFollower` and `FastRmsEnvelopeFollowerDb`, where the
    dB variant returns a `Decibel`.
- `qdsp.pitch_names`: equal-tempered pitches.
  - `next_frequency`, `OctavePitches`, `OctaveFrequencies`, and the tables
    `OCT_PITCH` and `PITCH_FREQUENCIES`.
  - `pitch(name, octave)`: for example `pitch("A", 4) == 440.0`. Octaves run
    0 to 7. Names are `A`, `As`, `Ab`, `B`, `Bb`, `C`, `Cs`, `D`, `Db`,
    `Ds`, `E`, `Eb`, `F`, `Fs`, `G`, `Gb`, `Gs`. `"Eb"` gives the same
    frequency as `"E"`.
- `qdsp.envelope_gen`: the `Ramp` protocol, `EnvelopeSegment` and
  `EnvelopeGen`.
  - `attack()` starts the first segment and `release()` jumps to the last.
  - When the last segment finishes, the envelope is idle and outputs 0.
- `qdsp.oscillators`: `sin_osc(phase)` and `basic_triangle(phase)`. The
  phase is an integer in which `ONE_CYCLE` (2**32) is one period. Values
  outside one cycle wrap around.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Following the envelope of a signal:

```python
import math

from qdsp.decibel import lin_to_db
from qdsp.envelope import ArEnvelopeFollower, PeakEnvelopeFollower
from qdsp.units import ms, seconds

sps = 44100
signal = [math.sin(2 * math.pi * 440 * i / sps) for i in range(sps)]

env = ArEnvelopeFollower(ms(2), seconds(2), sps)
peak = PeakEnvelopeFollower(seconds(2), sps)

for s in signal:
    level = env(abs(s))
    level_db = lin_to_db(peak(abs(s)))
```

A ring buffer keeps the most recent samples:

```python
from qdsp.ring_buffer import RingBuffer

buf = RingBuffer(8)
buf.push(1.0)
buf.push(2.0)
assert buf[0] == 2.0 and buf[1] == 1.0
```

An envelope generator needs ramps. A ramp is any object with `__call__()`,
`reset()` and `config(width, sps)`, built from `(width, sps)`. The ramp
should produce values from 0 to 1:

```python
import math

from qdsp.envelope_gen import EnvelopeGen, EnvelopeSegment


class LinearUp:
    def __init__(self, width, sps):
        self.config(width, sps)

    def config(self, width, sps):
        self._n = max(1, math.ceil(width * sps))
        self.reset()

    def reset(self):
        self._i = 0

    def __call__(self):
        self._i += 1
        return min(1.0, self._i / self._n)


class LinearDown(LinearUp):
    def __call__(self):
        return 1.0 - super().__call__()


sps = 48000
env = EnvelopeGen([
    EnvelopeSegment(LinearUp, 0.01, 1.0, sps),    # attack
    EnvelopeSegment(LinearDown, 0.1, 0.0, sps),   # release
])
env.attack()
samples = [env() for _ in range(480)]
```

## What this package does not do

- It reads and writes no audio files.
- It does not talk to audio or MIDI devices.
- It has no pitch or period detector and no signal conditioner, compressor
  or noise gate.
- It ships no ramp shapes. `EnvelopeGen` plays whatever ramps you give it,
  and there is no ready-made ADSR envelope.
- The only oscillators are the plain sine and the triangle, which is not
  bandwidth limited.
- There is no command-line program. Everything is used as a library.