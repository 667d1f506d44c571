"""WAV container assembly for raw PCM returned by the speech provider.

Gemini speech models answer with headerless 16-bit little-endian PCM
(``audio/L16;codec=pcm;rate=24000``). Browsers cannot play that directly, so
the bytes are prefixed with a canonical 44-byte RIFF/WAVE header.
"""

from __future__ import annotations

import io
import struct

WAV_HEADER_SIZE = 44
DEFAULT_SAMPLE_RATE = 24000
DEFAULT_CHANNELS = 1
DEFAULT_BITS_PER_SAMPLE = 16
MIN_SAMPLE_RATE = 8000
MAX_SAMPLE_RATE = 96000

_PCM_FORMAT = 1
_FMT_CHUNK_SIZE = 16


def wav_header(
    data_size: int,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    channels: int = DEFAULT_CHANNELS,
    bits_per_sample: int = DEFAULT_BITS_PER_SAMPLE,
) -> bytes:
    """Return the 44-byte RIFF/WAVE header for ``data_size`` bytes of PCM."""
    byte_rate = sample_rate * channels * bits_per_sample // 8
    block_align = channels * bits_per_sample // 8

    buf = io.BytesIO()
    # RIFF header
    buf.write(b"RIFF")
    buf.write(struct.pack("<I", 36 + data_size))
    buf.write(b"WAVE")
    # fmt chunk
    buf.write(b"fmt ")
    buf.write(struct.pack("<I", _FMT_CHUNK_SIZE))
    buf.write(
        struct.pack(
            "<HHIIHH",
            _PCM_FORMAT,
            channels,
            sample_rate,
            byte_rate,
            block_align,
            bits_per_sample,
        )
    )
    # data chunk
    buf.write(b"data")
    buf.write(struct.pack("<I", data_size))
    return buf.getvalue()


def pcm_to_wav(
    pcm: bytes,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    channels: int = DEFAULT_CHANNELS,
    bits_per_sample: int = DEFAULT_BITS_PER_SAMPLE,
) -> bytes:
    """Prefix raw PCM samples with a WAV header. The payload is not touched."""
    return wav_header(len(pcm), sample_rate, channels, bits_per_sample) + bytes(pcm)


def _mime_params(mime_type: str) -> tuple[str, dict[str, str]]:
    head, *rest = mime_type.split(";")
    params: dict[str, str] = {}
    for item in rest:
        key, sep, value = item.partition("=")
        if sep:
            params[key.strip().lower()] = value.strip().lower()
    return head.strip().lower(), params


def is_raw_pcm(mime_type: str) -> bool:
    """True when the provider mime type describes headerless PCM samples."""
    base, params = _mime_params(mime_type or "")
    if base in {"audio/l16", "audio/pcm"}:
        return True
    return base.startswith("audio/") and params.get("codec") == "pcm"


def pcm_sample_rate(mime_type: str, default: int = DEFAULT_SAMPLE_RATE) -> int:
    """Read the ``rate=`` parameter of a PCM mime type, else ``default``.

    Rates outside 8 kHz–96 kHz are treated as absent.
    """
    _, params = _mime_params(mime_type or "")
    try:
        rate = int(params.get("rate", ""))
    except ValueError:
        return default
    if not (MIN_SAMPLE_RATE <= rate <= MAX_SAMPLE_RATE):
        return default
    return rate
