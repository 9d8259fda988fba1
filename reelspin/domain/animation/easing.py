# reelspin/domain/animation/easing.py


def ease_in_out_expo(x: float) -> float:
    """
    Exponential ease-in/ease-out curve on [0, 1].

    Accelerates sharply towards the midpoint and flattens out towards 1,
    which gives the reel its slam-in, slow-out deceleration. Inputs are
    expected to be clamped to [0, 1] by the caller.
    """
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    if x < 0.5:
        return 2 ** (20 * x - 10) / 2
    return (2 - 2 ** (-20 * x + 10)) / 2


def clamp01(x: float) -> float:
    return min(1.0, max(0.0, x))
