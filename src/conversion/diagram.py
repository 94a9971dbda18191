"""Diagram sub-renderer abstraction for specially tagged code blocks."""

from abc import ABC, abstractmethod

DIAGRAM_LANGUAGE = "mermaid"


class DiagramRenderer(ABC):
    """Abstract base class for diagram renderers (e.g. a mermaid bridge)."""

    @abstractmethod
    def render(self, source: str) -> str:
        """Render diagram source to an HTML fragment.

        Raises:
            DiagramRendererError: If the diagram cannot be rendered
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the renderer is ready to accept diagrams."""
