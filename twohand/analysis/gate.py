"""Cheap per-object estimate of how likely a transition is to be played with
two hands.

Only objects whose running score reaches the threshold are handed to the
cursor index assigner; every other object is assumed to be hit by cursor 0.
"""
import math

from ..utils import clamp

default_spacing_score = 10
spacing_threshold = 200

spinner_factor = 0.1
min_factor = 0.8


def spacing_factor(difficulty_hit_object):
    """How much the transition into ``difficulty_hit_object`` raises or lowers
    the running score.

    Parameters
    ----------
    difficulty_hit_object : DifficultyHitObject
        The object to score.

    Returns
    -------
    factor : float
        The multiplier for the running score.
    """
    if difficulty_hit_object.is_spinner:
        return spinner_factor

    angle = difficulty_hit_object.angle
    if angle is None:
        angle_factor = 1
    else:
        angle_factor = 0.5 + math.cos(angle / 2) ** 2

    speed_factor = (
        difficulty_hit_object.jump_distance /
        max(1, difficulty_hit_object.delta_time)
    )
    return max(min_factor, angle_factor * speed_factor)


def spacing_scores(objects,
                   *,
                   default=default_spacing_score,
                   threshold=spacing_threshold):
    """Compute the running spacing score for each object.

    Parameters
    ----------
    objects : sequence[DifficultyHitObject]
        The difficulty objects in time order.
    default : float, optional
        The starting score, also the lower bound.
    threshold : float, optional
        The score at which an object is checked. The score is capped at
        ``threshold + 100``.

    Returns
    -------
    scores : list[float]
        The running score after each object. The first object has no
        transition so its score is ``default``.
    """
    scores = []
    score = default
    for i, difficulty_hit_object in enumerate(objects):
        if i:
            score = clamp(
                score * spacing_factor(difficulty_hit_object),
                default,
                threshold + 100,
            )
        scores.append(score)

    return scores


def gated(objects,
          *,
          default=default_spacing_score,
          threshold=spacing_threshold):
    """Which objects need the full cursor check.

    Parameters
    ----------
    objects : sequence[DifficultyHitObject]
        The difficulty objects in time order.
    default : float, optional
        The starting score.
    threshold : float, optional
        The score at which an object is checked.

    Returns
    -------
    checks : list[bool]
        ``True`` where the cursor index assigner should run.
    """
    return [
        score >= threshold
        for score in spacing_scores(
            objects,
            default=default,
            threshold=threshold,
        )
    ]
