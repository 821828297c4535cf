"""Equal-tempered pitch frequencies by note name and octave.

Frequencies are plain floats in hertz. An octave runs from C to B, so C is
a semitone above the B of the previous A-based octave, halved.
"""

from __future__ import annotations

from collections.abc import Iterator

# Twelfth root of two: the frequency ratio of one semitone.
TWELFTH_ROOT = 1.059463094359295


def next_frequency(f: float) -> float:
    """Return the frequency one semitone above ``f``."""
    return f * TWELFTH_ROOT


class OctavePitches:
    """The twelve pitches of an octave built from the frequency of its A.

    C to Gs lie below A (C is derived from the semitone above B, halved),
    matching the convention that an octave starts at C. Flat names are
    aliases of the matching sharps.
    """

    __slots__ = (
        "A", "As", "B", "C", "Cs", "D", "Ds", "E", "F", "Fs", "G", "Gs",
        "Ab", "Bb", "Db", "eb", "Gb",
    )

    def __init__(self, base: float) -> None:
        self.A = float(base)
        self.As = next_frequency(self.A)
        self.B = next_frequency(self.As)
        self.C = next_frequency(self.B) / 2
        self.Cs = next_frequency(self.C)
        self.D = next_frequency(self.Cs)
        self.Ds = next_frequency(self.D)
        self.E = next_frequency(self.Ds)
        self.F = next_frequency(self.E)
        self.Fs = next_frequency(self.F)
        self.G = next_frequency(self.Fs)
        self.Gs = next_frequency(self.G)

        self.Ab = self.Gs
        self.Bb = self.As
        self.Db = self.Cs
        self.eb = self.Ds
        self.Gb = self.Fs

    def __repr__(self) -> str:
        return f"OctavePitches(base={self.A!r})"


class OctaveFrequencies:
    """Twelve consecutive semitone frequencies starting at ``base``."""

    __slots__ = ("f",)

    def __init__(self, base: float) -> None:
        freqs = [float(base)]
        for _ in range(11):
            freqs.append(next_frequency(freqs[-1]))
        self.f: tuple[float, ...] = tuple(freqs)

    def __getitem__(self, semitone: int) -> float:
        return self.f[semitone]

    def __len__(self) -> int:
        return len(self.f)

    def __iter__(self) -> Iterator[float]:
        return iter(self.f)

    def __repr__(self) -> str:
        return f"OctaveFrequencies(base={self.f[0]!r})"


OCT_PITCH: tuple[OctavePitches, ...] = tuple(
    OctavePitches(base)
    for base in (27.5, 55.0, 110.0, 220.0, 440.0, 880.0, 1760.0, 3520.0, 7040.0)
)

PITCH_FREQUENCIES: tuple[OctaveFrequencies, ...] = tuple(
    OctaveFrequencies(base)
    for base in (13.75, 27.5, 55.0, 110.0, 220.0, 440.0, 880.0, 1760.0, 3520.0, 7040.0)
)

# Note name -> attribute of OctavePitches used for that name.
_NAME_TO_ATTR: dict[str, str] = {
    "Ab": "Ab",
    "A": "A",
    "As": "As",
    "Bb": "Bb",
    "B": "B",
    "C": "C",
    "Cs": "Cs",
    "Db": "Db",
    "D": "D",
    "Ds": "Ds",
    "Eb": "E",
    "E": "E",
    "F": "F",
    "Fs": "Fs",
    "Gb": "Gb",
    "G": "G",
    "Gs": "Gs",
}

# Named pitches cover the first eight octaves.
NUM_NAMED_OCTAVES = 8

PITCH_NAMES: tuple[str, ...] = tuple(_NAME_TO_ATTR)


def pitch(name: str, octave: int) -> float:
    """Return the frequency of the note ``name`` in ``octave`` (0 to 7).

    ``pitch("A", 4)`` is 440 Hz. Raises KeyError for an unknown name and
    IndexError for an octave outside the named range.
    """
    try:
        attr = _NAME_TO_ATTR[name]
    except KeyError:
        raise KeyError(f"unknown pitch name: {name!r}") from None
    if not 0 <= octave < NUM_NAMED_OCTAVES:
        raise IndexError(
            f"octave must be between 0 and {NUM_NAMED_OCTAVES - 1}: {octave}"
        )
    return getattr(OCT_PITCH[octave], attr)