"""
Fish asset table.

A small curated set of ASCII fish plus the measurement helper that sizes
any multi-line art block. The engine only ever reads assets by index;
callers are free to concatenate this set with their own.

Measurement rules:
- Width is the maximum character count across all lines.
- Height is the number of lines (str.splitlines semantics, so a trailing
  newline does not add a line).
- Both are floored to 1 so an empty block still has a 1x1 footprint.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class FishArt:
    """
    Visual asset for a fish.

    Attributes:
        art: Multi-line glyph text
        width: Measured width in cells
        height: Measured height in cells
    """
    art: str
    width: int
    height: int

    @classmethod
    def from_text(cls, text: str) -> 'FishArt':
        """Build an asset from raw text, measuring its footprint"""
        width, height = measure_art(text)
        return cls(art=text, width=width, height=height)

    @property
    def lines(self) -> List[str]:
        return self.art.splitlines()


def measure_art(art: str) -> Tuple[int, int]:
    """
    Measure an ASCII art block as (width, height) in cells.

    Args:
        art: Multi-line text

    Returns:
        (max line length, line count), each at least 1
    """
    lines = art.splitlines()
    width = max((len(line) for line in lines), default=0)
    return max(width, 1), max(len(lines), 1)


def _block(text: str) -> str:
    """Strip the leading/trailing newline left by triple-quoted literals"""
    return text.strip('\n')


# ============================================================================
# Curated Fish
# ============================================================================

FISH_01 = "<º)))><"
FISH_02 = "><(((º>"

FISH_03 = _block(r"""
   __
><(o )___
 ( .__> /
  `----'
""")

FISH_04 = _block(r"""
><>
<__>
""")

# Angler
FISH_05 = _block(r"""
  __
q(==)p
  \/
""")

FISH_06 = _block(r"""
       \
     ...\..,
\  /'       \
 >=     (  ' >
/  \      / /
    `"'"'/''
""")

FISH_07 = _block(r"""
      /
  ,../...
 /       '\  /
< '  )     =<
 \ \      /  \
  `'\'"'"'
""")

FISH_08 = _block(r"""
    \
\ /--\
>=  (o>
/ \__/
    /
""")

FISH_09 = _block(r"""
  /
 /--\ /
<o)  =<
 \__/ \
  \
""")

FISH_10 = _block(r"""
  __
\/ o\
/\__/
""")

FISH_11 = _block(r"""
 __
/o \/
\__/\
""")

FISH_12 = _block(r"""
  ,\
>=('>
  '/
""")

FISH_13 = _block(r"""
 /,
<')=<
 \`
""")

CURATED_FISH = (
    FISH_01, FISH_02, FISH_03, FISH_04, FISH_05, FISH_06, FISH_07,
    FISH_08, FISH_09, FISH_10, FISH_11, FISH_12, FISH_13,
)


def get_fish_assets() -> List[FishArt]:
    """
    Return the curated fish set with auto-measured footprints.

    Returns:
        List of FishArt in a stable order (index 0 = FISH_01)
    """
    return [FishArt.from_text(text) for text in CURATED_FISH]


def build_asset_table(*sources: Sequence[str]) -> List[FishArt]:
    """
    Concatenate raw art sources into one asset table.

    Args:
        *sources: Sequences of art text, appended in the given order

    Returns:
        List of measured FishArt
    """
    table = []
    for source in sources:
        table.extend(FishArt.from_text(text) for text in source)
    return table
