"""Display layout state and its mapping onto the feed container."""

from enum import Enum

from pydantic import BaseModel, Field


class LayoutMode(str, Enum):
    GRID = "grid"
    LIST = "list"


class DisplayState(BaseModel):
    """User-chosen display parameters for the feed container."""

    layout: LayoutMode = LayoutMode.GRID
    columns: int = Field(default=3, ge=1, le=10)
    thumbnail_size_px: int = Field(default=200, ge=50, le=600)


class Presentation(BaseModel):
    """Container class and CSS custom properties for a display state."""

    class_name: str
    style: dict[str, str]


def apply_layout(state: DisplayState) -> Presentation:
    """Map a display state onto presentation parameters."""
    return Presentation(
        class_name=state.layout.value,
        style={
            "--columns": str(state.columns),
            "--thumbnail-size": f"{state.thumbnail_size_px}px",
        },
    )


class LayoutController:
    """Owns the session display state."""

    def __init__(self, state: DisplayState | None = None):
        self.state = state or DisplayState()

    def update(
        self,
        layout: LayoutMode | None = None,
        columns: int | None = None,
        thumbnail_size_px: int | None = None,
    ) -> DisplayState:
        """Change some display parameters, validating the resulting state.

        Raises:
            pydantic.ValidationError: If a value is out of range
        """
        changes = {
            "layout": layout,
            "columns": columns,
            "thumbnail_size_px": thumbnail_size_px,
        }
        merged = self.state.model_dump()
        merged.update({k: v for k, v in changes.items() if v is not None})
        self.state = DisplayState.model_validate(merged)
        return self.state

    def apply(self) -> Presentation:
        return apply_layout(self.state)
