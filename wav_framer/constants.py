"""Fixed conversion parameters for WAV Framer."""

VERSION = "0.1.0"

# Required input profile and fixed output profile
TARGET_SAMPLE_RATE = 48_000
TARGET_CHANNELS = 1
TARGET_BITS_PER_SAMPLE = 24
TARGET_SAMPLES = 1024

PCM_FORMAT_TAG = 1
FMT_CHUNK_SIZE = 16

TEMP_SUFFIX = ".tmp"
