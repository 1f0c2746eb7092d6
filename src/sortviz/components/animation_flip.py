from dataclasses import dataclass

@dataclass(slots=True)
class FlipAnimation:
    """In-flight FLIP transition of one node.

    ``dx``/``dy`` is the inverted offset (first position minus last position).
    The drawn offset is ``(dx, dy) * (1 - eased(progress))``.
    """
    dx: float
    dy: float
    duration: float
    progress: float = 0.0  # 0..1
    phase: str = 'invert'  # 'invert', 'play', 'done'

    def offset(self) -> tuple[float, float]:
        if self.phase == 'invert':
            return self.dx, self.dy
        if self.phase == 'done':
            return 0.0, 0.0
        remaining = 1.0 - ease_out(self.progress)
        return self.dx * remaining, self.dy * remaining


def ease_out(t: float) -> float:
    """Cubic ease-out, close to cubic-bezier(.2,.8,.2,1)."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    inv = 1.0 - t
    return 1.0 - inv * inv * inv
