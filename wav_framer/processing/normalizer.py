"""Fixed-length framing of sample sequences."""

import numpy as np

from wav_framer.constants import TARGET_SAMPLES


def normalize_length(samples, target: int = TARGET_SAMPLES) -> np.ndarray:
    """Trim or zero-pad ``samples`` to exactly ``target`` samples.

    Longer inputs keep their first ``target`` samples; shorter inputs are
    extended with zeros. The input is never modified.

    Args:
        samples: Integer sample sequence
        target: Required output length

    Returns:
        New 1-D array of length ``target`` with the input's integer dtype

    Raises:
        ValueError: If target is negative
    """
    if target < 0:
        raise ValueError(f"Target length must be non-negative, got {target}")

    data = np.asarray(samples).reshape(-1)
    if data.dtype.kind not in "iu":
        data = data.astype(np.int64)

    if len(data) >= target:
        return data[:target].copy()
    return np.concatenate([data, np.zeros(target - len(data), dtype=data.dtype)])
