"""Append-only output buffer for rendered declarations."""


class Emitter:
    """Collects declaration blocks in the order they are emitted."""

    def __init__(self):
        self._blocks: list[str] = []

    def emit(self, block: str):
        """Append a declaration block."""
        if not block.endswith("\n"):
            block += "\n"
        self._blocks.append(block)

    def __len__(self) -> int:
        return len(self._blocks)

    @property
    def output(self) -> str:
        """All blocks, separated by one blank line."""
        return "\n".join(self._blocks)
