# sf2reader

A pure-Python reader for SoundFont 2 (`.sf2`) files. No third-party libraries
are needed.

## Two levels of access

- **Raw level**: `sf2reader.raw.RawSoundFontData.load(stream)` reads the file
  as it is stored:
  - `info`: the `INFO` list, as `sf2reader.info.Info` (version, bank name,
    sound engine and the optional descriptive text fields);
  - `sample_data`: the sample data list, as `sf2reader.sample_data.SampleData`;
  - `hydra`: the preset, instrument, bag, modulator, generator and sample
    header records, as `sf2reader.hydra.Hydra`.
- **Structured level**: `sf2reader.soundfont.SoundFont2` groups the raw records
  into `Preset` and `Instrument` objects, each with a list of `Zone`s, and
  drops the terminal records (`EOP` for presets, `EOS` for instruments and
  sample headers).

Every record type is a dataclass: `Bag`, `InstrumentHeader`, `PresetHeader`
(`sf2reader.headers`), `Generator` with `GeneratorType` and
`GeneratorAmountRange` (`sf2reader.generator`), `Modulator` with
`ModulatorSource` and `ModulatorTransform` (`sf2reader.modulator`), and
`SampleHeader` with `SampleLink` (`sf2reader.sample`). A generator whose
operator number is not defined by the format keeps that number as a plain int
in its `ty` field; `Generator.known_type()` raises for it.

`sf2reader.modulator` also provides the format's default modulators
(`DEFAULT_VEL2ATT_MOD`, `DEFAULT_PAN_MOD`, `DEFAULT_REVERB_MOD` and so on) and
`default_pitch_bend_mod(dest)`, which builds the pitch-wheel modulator for a
destination of your choice.

## Usage

```python
from sf2reader.soundfont import SoundFont2

with open("piano.sf2", "rb") as stream:
    sf2 = SoundFont2.load(stream)

for preset in sf2.sort_presets().presets:
    print(preset.header.bank, preset.header.preset, preset.header.name)
    for zone in preset.zones:
        instrument_id = zone.instrument()
        if instrument_id is None:
            continue
        instrument = sf2.instruments[instrument_id]
        sample_ids = [z.sample() for z in instrument.zones if z.sample() is not None]
        print("  ", instrument.header.name, len(sample_ids))
```

`sort_presets()` sorts the presets by bank and then by preset number, in
place, and returns the same object. `Zone` offers `key_range()`,
`vel_range()`, `instrument()` and `sample()`, each returning `None` when the
zone has no such generator.

## Sample audio

The audio itself is not loaded or decoded. `sf2.sample_data.smpl` (and
`sm24`, when present) is a `SampleChunk` holding the byte `offset` and
`length` of that data in the file; seek to it and read it yourself. Neither
rendering nor playback is part of this package.

## Errors

Malformed files raise subclasses of `sf2reader.errors.SoundFontError`, such as
`MissingChunkError` (with a `MissingChunk` member), `InvalidChunkSizeError`,
`UnexpectedChunkError`, `UnknownSampleTypeError`,
`UnknownModulatorTransformError`, `UnknownGeneratorTypeError` and
`TruncatedDataError`. The per-list readers raise `ValueError` when handed a
chunk of the wrong kind.

## Command line

```
sf2reader path/to/font.sf2
```

For each preset this prints its name and a list of `(instrument name, number
of samples)` pairs for the instruments its zones refer to.