"""
Static art for the environment and the large creatures.

Waterline patterns, castle, ships, sharks, whales and the whale spout
frames. Creature art comes in (moving_right, moving_left) pairs; the
renderer picks one by the sign of the creature's horizontal velocity.
Blank cells are plain spaces and never overdraw.
"""

from .assets import measure_art


def _block(text: str) -> str:
    return text.strip('\n')


WATERLINES = (
    "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~",
    "^^^^ ^^^  ^^^   ^^^    ^^^^      ",
    "^^^^      ^^^^     ^^^    ^^     ",
    "^^      ^^^^      ^^^    ^^^^^^  ",
)

CASTLE = _block(r"""
               T~~
               |
              /^\
             /   \
 _   _   _  /     \  _   _   _
[ ]_[ ]_[ ]/ _   _ \[ ]_[ ]_[ ]
|_=__-_ =_|_[ ]_[ ]_|_=-___-__|
 | _- =  | =_ = _    |= _=   |
 |= -[]  |- = _ =    |_-=_[] |
 | =_    |= - ___    | =_ =  |
 |=  []- |-  /| |\   |=_ =[] |
 |- =_   | =| | | |  |- = -  |
 |_______|__|_|_|_|__|_______|
""")

SHIP_RIGHT = _block(r"""
     |    |    |
    )_)  )_)  )_)
   )___))___))___)\
  )____)____)_____)\\
_____|____|____|____\\\__
\                   /
""")

SHIP_LEFT = _block(r"""
         |    |    |
        (_(  (_(  (_(
      /(___((___((___(
    //(_____(____(____(
__///____|____|____|_____
    \                   /
""")

SHARK_RIGHT = _block(r"""
                              __
                             ( `\
  ,                          )   `\
;' `.                        (     `\__
 ;   `.             __..---''          `~~~~-._
  `.   `.____...--''                       (b  `--._
    >                     _.-'      .((      ._     )
  .`.-`--...__         .-'     -.___.....-(|/|/|/|/|/'
 ;.'         `. ...----`.___.',,,_______......---'
 '           '-'
""")

SHARK_LEFT = _block(r"""
                     __
                    /' )
                  /'   (                          ,
              __/'     )                        .' `;
      _.-~~~~'          ``---..__             .'   ;
 _.--'  b)                       ``--...____.'   .'
(     _.      )).      `-._                     <
 `\|\|\|\|)-.....___.-     `-.         __...--'-.'.
   `---......_______,,,`.___.'----... .'         `.;
                                     `-`           `
""")

WHALE_RIGHT = _block(r"""
        .-----:
      .'       `.
,    /       (o) \
\`._/          ,__)
""")

WHALE_LEFT = _block(r"""
    :-----.
  .'       `.
 / (o)       \    ,
(__,          \_.'/
""")

# Spout frames, each three lines tall; drawn directly above the whale
WHALE_SPOUT = (
    ("", "", "   :"),
    ("", "   :", "   :"),
    ("  . .", "  -:-", "   :"),
    ("  . .", " .-:-.", "   :"),
    ("  . .", "'.-:-.`", "'  :  '"),
    ("", " .- -.", ";  :  ;"),
    ("", "", ";     ;"),
)

# Spout column offset from the whale's left edge (right-facing, left-facing)
WHALE_SPOUT_ALIGN = (11, 1)

CREATURE_ART = {
    'ship': (SHIP_RIGHT, SHIP_LEFT),
    'shark': (SHARK_RIGHT, SHARK_LEFT),
    'whale': (WHALE_RIGHT, WHALE_LEFT),
}


def creature_art(species: str, vx: float) -> str:
    """Art for a creature species facing its direction of travel"""
    right, left = CREATURE_ART[species]
    return right if vx >= 0 else left


def creature_size(species: str):
    """
    Footprint (width, height) covering both facings of a species.

    Spawn placement and despawn tests use this so both directions share
    one bounding box.
    """
    sizes = [measure_art(text) for text in CREATURE_ART[species]]
    return max(w for w, _ in sizes), max(h for _, h in sizes)
