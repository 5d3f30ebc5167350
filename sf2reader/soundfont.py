"""A SoundFont with its hydra resolved into presets, instruments and zones."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import BinaryIO, Optional, Sequence

from .generator import Generator, GeneratorAmountRange, GeneratorType
from .headers import Bag, InstrumentHeader, PresetHeader
from .info import Info
from .modulator import Modulator
from .raw import RawSoundFontData
from .sample import SampleHeader
from .sample_data import SampleData


@dataclass
class Zone:
    """The modulators and generators of one preset or instrument zone."""

    mod_list: list[Modulator] = field(default_factory=list)
    gen_list: list[Generator] = field(default_factory=list)

    def _amount(self, ty: GeneratorType):
        return next((g.amount for g in self.gen_list if g.ty == ty), None)

    def key_range(self) -> Optional[GeneratorAmountRange]:
        """The zone's key range, if it has one."""
        return self._amount(GeneratorType.KEY_RANGE)

    def vel_range(self) -> Optional[GeneratorAmountRange]:
        """The zone's velocity range, if it has one."""
        return self._amount(GeneratorType.VEL_RANGE)

    def instrument(self) -> Optional[int]:
        """Index of the instrument a preset zone refers to."""
        return self._amount(GeneratorType.INSTRUMENT)

    def sample(self) -> Optional[int]:
        """Index of the sample an instrument zone refers to."""
        return self._amount(GeneratorType.SAMPLE_ID)


@dataclass
class Preset:
    header: PresetHeader
    zones: list[Zone]


@dataclass
class Instrument:
    header: InstrumentHeader
    zones: list[Zone]


def _zones(
    bags: list[Bag],
    modulators: list[Modulator],
    generators: list[Generator],
    start: int,
    end: int,
) -> list[Zone]:
    zones = []
    for j in range(start, end):
        curr = bags[j]
        nxt = bags[j + 1] if j + 1 < len(bags) else None
        mod_end = nxt.modulator_id if nxt is not None else len(bags)
        gen_end = nxt.generator_id if nxt is not None else len(bags)
        zones.append(
            Zone(
                mod_list=list(modulators[curr.modulator_id : mod_end]),
                gen_list=list(generators[curr.generator_id : gen_end]),
            )
        )
    return zones


def _grouped(headers, bags, modulators, generators, terminator):
    """Pair each header with its zones, dropping the terminal record."""
    following = [h.bag_id for h in headers[1:]] + [len(bags)]
    for header, end in zip(headers, following):
        zones = _zones(bags, modulators, generators, header.bag_id, end)
        if header.name != terminator:
            yield header, zones


def _sort_key(preset: Preset) -> int:
    key = ((preset.header.bank << 16) | preset.header.preset) & 0xFFFFFFFF
    return key - (1 << 32) if key & 0x80000000 else key


@dataclass
class SoundFont2:
    """A SoundFont with presets and instruments split into zones."""

    info: Info
    presets: list[Preset]
    instruments: list[Instrument]
    sample_headers: list[SampleHeader]
    sample_data: SampleData

    @classmethod
    def load(cls, stream: BinaryIO) -> "SoundFont2":
        """Read and resolve a SoundFont from a seekable binary stream."""
        return cls.from_raw(RawSoundFontData.load(stream))

    @classmethod
    def from_raw(cls, data: RawSoundFontData) -> "SoundFont2":
        """Resolve the raw hydra lists into presets and instruments."""
        hydra = data.hydra
        instruments = [
            Instrument(header, zones)
            for header, zones in _grouped(
                hydra.instrument_headers,
                hydra.instrument_bags,
                hydra.instrument_modulators,
                hydra.instrument_generators,
                "EOS",
            )
        ]
        presets = [
            Preset(header, zones)
            for header, zones in _grouped(
                hydra.preset_headers,
                hydra.preset_bags,
                hydra.preset_modulators,
                hydra.preset_generators,
                "EOP",
            )
        ]
        return cls(
            info=data.info,
            presets=presets,
            instruments=instruments,
            sample_headers=[h for h in hydra.sample_headers if h.name != "EOS"],
            sample_data=data.sample_data,
        )

    def sort_presets(self) -> "SoundFont2":
        """Sort presets by bank, then preset number, and return self."""
        self.presets.sort(key=_sort_key)
        return self


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print each preset of a SoundFont with its instruments."""
    parser = argparse.ArgumentParser(description="List the presets of an SF2 file.")
    parser.add_argument("path", help="SoundFont file to read")
    args = parser.parse_args(argv)

    with open(args.path, "rb") as stream:
        sf2 = SoundFont2.load(stream)

    for preset in sf2.presets:
        print("====== Preset =======")
        print(f"Name: {preset.header.name}")
        instruments = []
        for zone in preset.zones:
            index = zone.instrument()
            if index is None:
                continue
            instrument = sf2.instruments[index]
            samples = [
                sf2.sample_headers[z.sample()]
                for z in instrument.zones
                if z.sample() is not None
            ]
            instruments.append((instrument.header.name, len(samples)))
        print(f"Instruments: {instruments!r}")
        print()
    return 0