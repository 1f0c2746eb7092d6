from dataclasses import dataclass

@dataclass(slots=True)
class RenderSlot:
    """Index of the node in the rendered left-to-right sequence.

    This is the rendering truth the element registry resynchronizes from.
    """
    index: int
