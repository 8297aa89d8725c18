"""
Facing heuristic and horizontal mirroring for fish art.

faces_right() guesses which way a piece of art faces from glyph cues. The
cue list and weights are empirical; callers should treat the answer as a
hint, not a property of the art. mirror_art() flips art horizontally,
swapping glyphs that have a mirror counterpart.
"""

from typing import List

# Head/tail fragments that point right (head on the right) or left
RIGHT_CUES = ("o>", "'>", "º>", "(o", "o\\", ">=")
LEFT_CUES = ("<o", "<'", "<º", "o)", "/o", "=<")

CUE_WEIGHT = 2

MIRROR_PAIRS = {
    '<': '>', '>': '<',
    '(': ')', ')': '(',
    '[': ']', ']': '[',
    '{': '}', '}': '{',
    '/': '\\', '\\': '/',
}

MIRROR_TABLE = str.maketrans(MIRROR_PAIRS)


def facing_score(text: str) -> int:
    """
    Score how strongly art faces right (positive) or left (negative).

    Three kinds of evidence are summed:
    - arrow counts: each '>' scores +1, each '<' scores -1
    - directional fragments (eye next to a mouth, tail next to a body),
      weighted by CUE_WEIGHT
    - line edges: a stripped line starting or ending with '>' scores +1
      per edge, with '<' scores -1 per edge
    """
    score = text.count('>') - text.count('<')

    for cue in RIGHT_CUES:
        score += CUE_WEIGHT * text.count(cue)
    for cue in LEFT_CUES:
        score -= CUE_WEIGHT * text.count(cue)

    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        for edge in (stripped[0], stripped[-1]):
            if edge == '>':
                score += 1
            elif edge == '<':
                score -= 1

    return score


def faces_right(text: str) -> bool:
    """True if art appears to face right; ties default to right"""
    return facing_score(text) >= 0


def needs_mirror(text: str, vx: float) -> bool:
    """
    True when velocity sign conflicts with the art's natural facing.

    A stationary fish (vx == 0) is drawn as authored.
    """
    if vx > 0:
        return not faces_right(text)
    if vx < 0:
        return faces_right(text)
    return False


def mirror_line(line: str, width: int) -> str:
    """Reverse a line padded to width and swap mirrorable glyphs"""
    return line.ljust(width)[::-1].translate(MIRROR_TABLE)


def mirror_art(text: str, width: int) -> List[str]:
    """
    Mirror multi-line art horizontally.

    Lines are padded to the art width before reversal so the block keeps
    its alignment. Symmetric glyphs are left unchanged.

    Returns:
        Mirrored lines
    """
    return [mirror_line(line, width) for line in text.splitlines()]
