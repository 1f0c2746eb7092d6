from dataclasses import dataclass

@dataclass(slots=True)
class FreshHighlight:
    remaining: float  # seconds until the FRESH flag is cleared
