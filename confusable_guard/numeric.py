"""Digit lookalikes folded to literal ASCII digits.

Each range maps contiguous code points onto consecutive integers starting at
``first``; two-digit values ("10".."20") come out as two ASCII characters.
"""

from __future__ import annotations

from typing import Optional, Tuple

# (start, end, value of start), all inclusive
_RANGES: Tuple[Tuple[int, int, int], ...] = (
    # circled: '①'..'⑳'
    (0x2460, 0x2473, 1),
    # parenthesized: '⑴'..'⒇'
    (0x2474, 0x2487, 1),
    # digit / number full stop: '⒈'..'⒛'
    (0x2488, 0x249B, 1),
    # negative circled: '⓫'..'⓴'
    (0x24EB, 0x24F4, 11),
    # double circled: '⓵'..'⓾'
    (0x24F5, 0x24FE, 1),
    # dingbat negative circled: '❶'..'❿'
    (0x2776, 0x277F, 1),
    # dingbat circled sans-serif: '➀'..'➉'
    (0x2780, 0x2789, 1),
    # dingbat negative circled sans-serif: '➊'..'➓'
    (0x278A, 0x2793, 1),
    # mathematical bold
    (0x1D7CE, 0x1D7D7, 0),
    # mathematical double-struck
    (0x1D7D8, 0x1D7E1, 0),
    # mathematical sans-serif
    (0x1D7E2, 0x1D7EB, 0),
    # mathematical sans-serif bold
    (0x1D7EC, 0x1D7F5, 0),
    # mathematical monospace
    (0x1D7F6, 0x1D7FF, 0),
    # digit comma: '🄁'..'🄊'
    (0x1F101, 0x1F10A, 0),
    # segmented digits
    (0x1FBF0, 0x1FBF9, 0),
)

_ZEROS = frozenset(
    {
        0x24EA,  # CIRCLED DIGIT ZERO
        0x24FF,  # NEGATIVE CIRCLED DIGIT ZERO
        0x1F100,  # DIGIT ZERO FULL STOP
        0x1F10B,  # DINGBAT CIRCLED SANS-SERIF DIGIT ZERO
        0x1F10C,  # DINGBAT NEGATIVE CIRCLED SANS-SERIF DIGIT ZERO
    }
)


def fold_numeric(rune: str) -> Optional[str]:
    """Return the ASCII digits ``rune`` stands for, or ``None``.

    ``None`` means "not a digit lookalike"; callers fall through to the
    general folding path.
    """
    if len(rune) != 1:
        return None
    cp = ord(rune)
    if cp in _ZEROS:
        return "0"
    for start, end, first in _RANGES:
        if start <= cp <= end:
            return str(first + cp - start)
    return None
