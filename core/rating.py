from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class GlyphKind(Enum):
    SYSTEM = "system"  # named symbol, resolved by the host
    IMAGE = "image"    # image file on disk


@dataclass(frozen=True)
class Glyph:
    """Opaque handle for an icon resource. The host decides how to draw it."""
    kind: GlyphKind
    name: str

    @classmethod
    def system(cls, name: str) -> "Glyph":
        return cls(GlyphKind.SYSTEM, name)

    @classmethod
    def image(cls, path: str) -> "Glyph":
        return cls(GlyphKind.IMAGE, path)

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["Glyph"]:
        """Parses ``system:<name>``, ``image:<path>`` or a bare symbol name.

        Empty or missing values parse to ``None`` so an unset off-glyph stays unset.
        """
        if not text:
            return None
        prefix, sep, rest = text.partition(":")
        if sep and prefix == GlyphKind.IMAGE.value:
            return cls.image(rest)
        if sep and prefix == GlyphKind.SYSTEM.value:
            return cls.system(rest)
        return cls.system(text)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.name}"


STAR_FILL = Glyph.system("star.fill")


@dataclass(frozen=True)
class RatingStyle:
    """Display configuration for a rating row. Every field has a default."""
    space_between: float = 10.0
    label: str = ""
    maximum_rating: int = 5
    off_image: Optional[Glyph] = None
    on_image: Glyph = STAR_FILL
    off_colour: str = "gray"
    on_colour: str = "yellow"


@dataclass(frozen=True)
class Slot:
    index: int  # 1-based, also the value written on tap
    is_on: bool
    glyph: Glyph
    colour: str


@dataclass
class RatingRow:
    """Host-independent description of one render pass."""
    label: Optional[str]
    slots: List[Slot] = field(default_factory=list)
    spacing: float = 10.0

    @property
    def tap_targets(self) -> List[int]:
        return [slot.index for slot in self.slots]


def glyph_for(number: int, rating: int, style: RatingStyle) -> Glyph:
    if number > rating:
        return style.off_image or style.on_image
    return style.on_image


def render_slot(number: int, rating: int, style: RatingStyle) -> Slot:
    is_on = number <= rating
    return Slot(
        index=number,
        is_on=is_on,
        glyph=glyph_for(number, rating, style),
        colour=style.on_colour if is_on else style.off_colour,
    )


def render_row(rating: int, style: RatingStyle) -> RatingRow:
    """Derives the label and slot sequence for the current rating.

    Nothing is clamped: a rating above ``maximum_rating`` turns every slot on, and a
    non-positive ``maximum_rating`` produces an empty row.
    """
    slots = [render_slot(number, rating, style)
             for number in range(1, style.maximum_rating + 1)]
    return RatingRow(
        label=style.label or None,
        slots=slots,
        spacing=style.space_between,
    )
