# openscribe

Building blocks for hotkey-driven speech transcription: choosing a microphone
from an ordered list of preferences, collecting 16 kHz mono 16-bit PCM audio
from a capture backend, writing and reading WAV files, and playing short
feedback sounds when recording starts, stops and finishes.

No third-party libraries are needed at run time.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `openscribe`:

```
openscribe version                 # version, commit and build date
openscribe config --list-sounds    # list the macOS system sounds and which are used
openscribe config --test-sounds    # play the start, stop and complete sounds
```

`openscribe config` with no option prints its help. `--test-sounds` exits
with status 1 on platforms other than macOS.

## Library use

### WAV files (`openscribe.wav`)

```python
from openscribe.wav import save_wav, load_wav

save_wav("clip.wav", pcm_bytes, 16000, 1)
data, sample_rate, channels = load_wav("clip.wav")
```

`save_wav` writes a canonical 44-byte header for 16-bit PCM followed by the
data. `load_wav` checks the `RIFF`/`WAVE` markers and raises `WavError` for
files it cannot open or understand. `WavHeader` packs and unpacks the header
itself; `WavHeader.for_pcm16(sample_rate, channels, data_size)` builds one.

### Microphones (`openscribe.devices`)

```python
from openscribe.devices import Device, select_microphone

devices = [
    Device(id="0", name="Built-in Microphone", is_default=True),
    Device(id="1", name="USB Mic"),
]
chosen = select_microphone(devices, ["usb mic"], "")
print(chosen.name)  # "USB Mic"
```

Preferences are matched without regard to case, in the order given. When
none is connected the default device is used, and failing that the first
device in the list. With no preferences, the single `microphone` name is
tried before the default. An empty device list raises `MicrophoneError`.

Other helpers:

- `list_microphones(enumerator)` turns what a `DeviceEnumerator` reports for
  `DeviceType.CAPTURE` into `Device` objects, numbered from `"0"`.
- `get_default_microphone(devices)`, `find_microphone_by_name(devices, name)`
  and `find_microphone_by_name_or_index(devices, name_or_index)`; the last
  takes a 1-based position when given a number, otherwise an exact name.
- `MockDeviceInfo`, `MockDeviceEnumerator` and `create_mock_enumerator`
  stand in for audio hardware.

### Preferences (`openscribe.preferences`)

```python
from openscribe.preferences import add_preference, remove_preference, format_preferences

prefs = add_preference([], "USB Mic")
prefs, removed = remove_preference(prefs, "1")
print(format_preferences(prefs))
```

Adding a name already in the list, removing from an empty list, an index out
of range or an unknown name all raise `PreferenceError`.

### Recording (`openscribe.recorder`)

`Recorder(device_name, backend)` collects the bytes a `CaptureBackend`
delivers between `start()` and `stop()`, at 16 kHz mono. A named device must
be among `backend.capture_devices()`; an empty name uses the default device.
`record_duration(seconds)` records for a fixed time. Failures raise
`RecorderError`.

### Feedback sounds (`openscribe.feedback`)

```python
from openscribe.feedback import new_feedback

with new_feedback() as feedback:
    feedback.play_start_sound()
```

On macOS, `new_feedback` returns a `SystemSoundFeedback` that plays the
system sounds Tink, Pop and Glass through `afplay`; elsewhere it raises
`FeedbackUnsupportedError`. `NoopFeedback` stays silent. Feedback can be
switched with `enable()` and `disable()`.

## What this package does not do

- It has no audio capture backend of its own: `Recorder` needs an object
  that implements `CaptureBackend`.
- It does not listen for hotkeys, transcribe speech, paste text, download
  models or keep a transcription history.
- It does not read or write a configuration file; preference lists are
  plain Python lists handed in and returned.