"""
panic_blob module: blob/fear.py

Fear model: threat proximity -> urgency in [0, 1].
Quadratic ease-in, so fear stays low until the threat is close and then rises sharply.
"""

from __future__ import annotations
import math
from typing import Tuple


def fear(agent_pos: Tuple[float, float], threat_pos: Tuple[float, float], fear_radius: float) -> float:
    d = math.hypot(agent_pos[0] - threat_pos[0], agent_pos[1] - threat_pos[1])
    linear = max(0.0, min(1.0, 1.0 - d / fear_radius))
    return linear * linear
