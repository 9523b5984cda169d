import torch

from .constants import ActionType


def draw_uniform(generator: torch.Generator) -> float:
    """One uniform draw in [0, 1) from the player's own generator."""
    return float(torch.rand((), dtype=torch.float64, generator=generator).item())


def sample_action(action_probs: torch.Tensor | list[float], r: float) -> ActionType:
    """
    Inverse-CDF selection over (fold, call, raise).

    The first entry with ``r <= p`` wins; otherwise ``p`` is subtracted and the
    walk moves on. Zero-probability entries are never selected. If the walk runs
    out (entries summing to less than ``r``), raise is chosen, or the last
    action with positive probability when raise has none.
    """
    fallback = ActionType.RAISE
    for action in ActionType:
        p = float(action_probs[action])
        if p <= 0.0:
            continue
        if r <= p:
            return action
        r -= p
        fallback = action
    return fallback


def make_generator(seed: int) -> torch.Generator:
    generator = torch.Generator(device="cpu")
    generator.manual_seed(int(seed))
    return generator
