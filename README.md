# midilights

`midilights` is a library for building the colours of an RGB LED strip. It
holds saturating 8-bit colour arithmetic, processing blocks that draw on a
strip, processing chains and patches that combine blocks, a factory that
builds all of these from JSON, and a few loggers.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Colours (`midilights.colors`)

`Rgb` is an immutable colour with `r`, `g` and `b` channels in 0..255;
values outside that range raise `ValueError`, non-integers `TypeError`.
Addition, subtraction and multiplication saturate at 0 and 255:

```python
from midilights.colors import Rgb, rgb_from_float

Rgb(250, 250, 250) + Rgb(1, 20, 30)   # Rgb(r=251, g=255, b=255)
Rgb(5, 5, 5) - Rgb(1, 20, 30)         # Rgb(r=4, g=0, b=0)
Rgb(10, 20, 30) * 1.5                 # Rgb(r=15, g=30, b=45)
2 * Rgb(10, 20, 30)                   # Rgb(r=20, g=40, b=60)
Rgb(10, 20, 40) * Rgb(128, 64, 32)    # each channel scaled, 255 meaning 100 %
str(Rgb(255, 0, 16))                  # '#ff0010'
rgb_from_float(300.0, -4.0, 12.7)     # Rgb(r=255, g=0, b=12)
```

The module also defines the constants `OFF`, `RED`, `GREEN`, `BLUE`,
`YELLOW`, `MAGENTA`, `CYAN` and `WHITE`, and the data classes
`LinearConstants` (`factor`, `offset`) and `NoteState` (`pressed`,
`sounding`, `press_down_velocity`, `note_on_time_stamp`, `press_down_color`).

A note-to-light map is a plain `dict` from MIDI note number to light index.
`note_map_to_json` turns it into a JSON object with string keys, sorted by
note. `note_map_from_json` reads note numbers 0..255 back, skips entries that
are not numbers, and keeps light numbers as 8-bit values.

## Colour pickers (`midilights.color_picker`)

`ColorPicker` is the abstract base with a `pick()` method.
`SequentialColorPicker().pick()` returns red, green, blue, yellow, magenta and
cyan in turn, then starts again.

## Blocks, chains and patches

A strip is a list of `Rgb` values; blocks change it in place.

- `midilights.blocks.ProcessingBlock` is the abstract base, with `activate()`,
  `deactivate()`, `execute(strip, note_to_light_map)`, `mode()`, `to_json()`
  and `from_json(data)`. `mode()` returns `Mode.ADDITIVE` unless a block
  overrides it.
- `SingleColorFill(color)` fills the whole strip with its `color`.
- `midilights.chain.ProcessingChain(factory)` runs its blocks in order. It
  clears the strip first; an additive block draws on a blank strip that is
  then added to the result, an overwriting block works on the result itself.
  `insert_block(block, index=None)` inserts at the index, or at the end when
  the index is missing or too large, and activates or deactivates the block
  to match the chain. `blocks` lists them.
- `midilights.patch.Patch(factory)` owns one chain (`processing_chain`) and
  has `name` (default `"Untitled Patch"`), `bank`, `program` and
  `has_bank_and_program`. Setting `program` marks bank and program as valid;
  `clear_bank_and_program()` marks them invalid. `activate()`,
  `deactivate()` and `execute(...)` are passed on to the chain.

`midilights.factory.ProcessingBlockFactory` builds these objects:

```python
from midilights.colors import Rgb
from midilights.factory import ProcessingBlockFactory

factory = ProcessingBlockFactory()
patch = factory.create_patch({
    "objectType": "Patch",
    "name": "Warm fill",
    "processingChain": {
        "objectType": "ProcessingChain",
        "processingChain": [
            {"objectType": "SingleColorFill", "r": 255, "g": 80, "b": 0},
        ],
    },
})
patch.activate()

strip = [Rgb()] * 10
patch.execute(strip, {60: 0, 61: 1})
patch.to_json()
```

`create_processing_block(data)` knows the object types `SingleColorFill` and
`ProcessingChain`, and returns `None` for a missing or unknown type. Further
types are added with `register(object_type, creator)`, where `creator` is
called with the factory. The factory keeps the `midi_input`,
`rgb_function_factory` and `time` it was given for such creators.
`create_processing_chain()` returns an empty chain.

JSON data is ordinary Python dictionaries and lists, as `json.loads` gives.
`midilights.json_helper.JsonHelper(user, data, log_missing_keys=True)` reads
typed items with `get_int`, `get_float`, `get_bool`, `get_str`, `get_object`
and `get_array`. Each returns `None` when the key is missing or holds the
wrong type, and logs an error through the `logging` module.

## Loggers (`midilights.loggers`)

- `StripChangeLogger(concert)` calls `concert.subscribe(self)`.
  `on_strip_update(strip)` logs, at debug level, every strip that differs
  from the one before it and returns the message, or `None` if nothing
  changed.
- `MidiMessageLogger(midi_input)` calls `midi_input.subscribe(self)` and logs
  one debug line per `on_note_change`, `on_control_change`,
  `on_program_change`, `on_channel_pressure_change` and
  `on_pitch_bend_change`, returning the line.
- Both unsubscribe on `close()` and can be used in a `with` statement.
- `StdLogger(stream=None)` writes `<time> <Level>(<component>):<message>`
  lines to the stream, standard output by default. `log_message` takes a
  `LogLevel` or its integer value; anything else is written as `Error`.

## What it does not do

The package has no command-line program. It reads no MIDI itself and drives
no LED hardware: the concert and MIDI input the loggers subscribe to are
supplied by the caller. It has no note-visualising block and no RGB functions;
the factory builds only `SingleColorFill` and `ProcessingChain` unless more
creators are registered.