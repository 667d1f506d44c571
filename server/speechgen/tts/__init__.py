"""Speech synthesis package exports."""

from speechgen.tts.gemini import (
    GeminiSpeechClient,
    SpeechConfigError,
    SpeechError,
    SpeechNoAudioError,
    SpeechProviderError,
    SynthesizedAudio,
)
from speechgen.tts.voices import resolve_voice
from speechgen.tts.wav import pcm_to_wav

__all__ = [
    "GeminiSpeechClient",
    "SpeechError",
    "SpeechConfigError",
    "SpeechProviderError",
    "SpeechNoAudioError",
    "SynthesizedAudio",
    "resolve_voice",
    "pcm_to_wav",
]
