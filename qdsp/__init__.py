"""Audio DSP building blocks: decibels, ring buffers, differentiators, moving averages, envelope followers, envelope generators, pitch names and basic oscillators."""

__version__ = "0.1.0"