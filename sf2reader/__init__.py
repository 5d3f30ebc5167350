"""Reader for SoundFont 2 files: raw RIFF records and a structured view of presets and instruments."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "riff",
    "generator",
    "modulator",
    "headers",
    "sample",
    "sample_data",
    "info",
    "hydra",
    "raw",
    "soundfont",
]