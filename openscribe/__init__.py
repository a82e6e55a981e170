"""Speech transcription helpers: microphone selection, PCM recording, WAV files, feedback sounds and a small command line."""

__version__ = "0.1.0"