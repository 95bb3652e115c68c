"""
Tempo normalization for analysed BPM values.
"""

ROUND_THRESHOLD = 0.03


def normalize_tempo(tempo: float, threshold: float = ROUND_THRESHOLD) -> float:
    """
    Snap a tempo to the nearest whole BPM when it is within the threshold.

    Beat detection leaves small jitter on whole-number tempos (127.98,
    128.01); genuinely fractional tempos are returned unchanged.

    Args:
        tempo: Tempo in BPM
        threshold: Maximum distance from the nearest integer to snap

    Returns:
        The rounded tempo, or the original value
    """
    rounded = float(round(tempo))
    if abs(tempo - rounded) < threshold:
        return rounded
    return tempo
