# measure.py

"""
Escape-sequence-aware, Unicode-width-aware text measurement.

Everything that pads, wraps, cuts or joins text goes through this module so
that column counts agree across the renderer and the layout helpers. Widths
come from ``rich.cells.cell_len``: zero for combining marks and control
characters, two for wide CJK ideographs and most emoji, one otherwise.

Cuts happen between grapheme clusters (a base character plus its combining
marks, variation selectors, skin-tone modifiers and joined emoji) and every
cut is measured with ``cell_len`` on the whole visible prefix, so a cut line
never measures wider than its limit.
"""

import re
import unicodedata
from typing import Iterator, List, Optional, Tuple
from rich.cells import cell_len

# CSI sequences (SGR and friends) and OSC sequences ending in BEL or ST
ANSI_REGEX = re.compile(r'\x1B\[[0-?]*[ -/]*[@-~]|\x1B\][^\x07\x1B]*(?:\x07|\x1B\\)')
RESET = '\x1b[0m'
LINK_CLOSE = '\x1b]8;;\x1b\\'
ZWJ = '\u200d'

def _tokens(text: str) -> Iterator[Tuple[bool, str]]:
    """Yield (is_escape, chunk) pairs covering ``text`` in order."""
    pos = 0
    for match in ANSI_REGEX.finditer(text):
        if match.start() > pos:
            yield False, text[pos:match.start()]
        yield True, match.group(0)
        pos = match.end()
    if pos < len(text):
        yield False, text[pos:]

def is_sgr(seq: str) -> bool:
    return seq.startswith('\x1b[') and seq.endswith('m')

def is_reset(seq: str) -> bool:
    """True for ``ESC[m``, ``ESC[0m`` and other all-zero SGR sequences."""
    if not is_sgr(seq):
        return False
    return all(p in ('', '0', '00') for p in seq[2:-1].split(';'))

def link_target(seq: str) -> Optional[str]:
    """URI of an OSC 8 hyperlink sequence; ``''`` closes a link, None if not a link."""
    if not seq.startswith('\x1b]8;'):
        return None
    body = seq[4:-1] if seq.endswith('\x07') else seq[4:-2]
    return body.partition(';')[2]

def _is_regional(char: str) -> bool:
    return 0x1F1E6 <= ord(char) <= 0x1F1FF

def _extends(char: str, cluster: str) -> bool:
    """True when ``char`` continues the grapheme cluster ``cluster``."""
    if cluster.endswith(ZWJ):
        return True
    code = ord(char)
    if char == ZWJ or 0xFE00 <= code <= 0xFE0F or 0x1F3FB <= code <= 0x1F3FF:
        return True
    if 0xE0020 <= code <= 0xE007F:  # emoji tag sequences
        return True
    if len(cluster) == 1 and _is_regional(cluster) and _is_regional(char):
        return True
    return unicodedata.category(char) in ('Mn', 'Me', 'Mc')

def clusters(text: str) -> Iterator[str]:
    """Split escape-free text into grapheme clusters."""
    cluster = ''
    for char in text:
        if cluster and _extends(char, cluster):
            cluster += char
            continue
        if cluster:
            yield cluster
        cluster = char
    if cluster:
        yield cluster

def strip_ansi(text: str) -> str:
    """Remove complete escape sequences. Broken ones stay as literal text."""
    return ANSI_REGEX.sub('', text)

def visible_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies."""
    if not text:
        return 0
    return cell_len(strip_ansi(text))

def split_lines(text: str) -> List[str]:
    """Split on line breaks, keeping trailing empty lines. ``""`` is one empty line."""
    return text.replace('\r\n', '\n').split('\n')

def width_per_line(text: str) -> List[int]:
    return [visible_width(line) for line in split_lines(text)]

def block_width(text: str) -> int:
    """Width of the widest line."""
    return max(width_per_line(text))

def line_count(text: str) -> int:
    return len(split_lines(text))

def pad_right(text: str, width: int, fill: str = ' ') -> str:
    """Pad ``text`` with ``fill`` up to ``width`` visible columns."""
    missing = width - visible_width(text)
    return text + fill * missing if missing > 0 else text

def _styling_open(styled: bool, seq: str) -> bool:
    if not is_sgr(seq):
        return styled
    return not is_reset(seq)

def _link_open(linked: bool, seq: str) -> bool:
    target = link_target(seq)
    return linked if target is None else bool(target)

def _closers(styled: bool, linked: bool) -> str:
    return (RESET if styled else '') + (LINK_CLOSE if linked else '')

def truncate(text: str, max_width: int, tail: str = '') -> str:
    """
    Return the longest prefix of ``text`` that fits in ``max_width`` columns.

    Text that already fits is returned unchanged. When a cut happens, ``tail``
    is appended (its width counts against ``max_width``), escape sequences past
    the cut are dropped, and a reset (or hyperlink close) is added if one was
    left open. A grapheme cluster that would straddle the limit is left out
    whole.
    """
    if max_width <= 0:
        return ''
    if visible_width(text) <= max_width:
        return text

    tail_width = visible_width(tail)
    if tail_width >= max_width:
        return truncate(tail, max_width)
    budget = max_width - tail_width

    out, visible, styled, linked = [], '', False, False
    for is_escape, chunk in _tokens(text):
        if is_escape:
            out.append(chunk)
            styled = _styling_open(styled, chunk)
            linked = _link_open(linked, chunk)
            continue
        for cluster in clusters(chunk):
            if cell_len(visible + cluster) > budget:
                return ''.join(out) + tail + _closers(styled, linked)
            out.append(cluster)
            visible += cluster
    return ''.join(out) + tail + _closers(styled, linked)

def _hard_break(word: str, width: int) -> List[str]:
    """Cut a single word into pieces of at most ``width`` columns."""
    pieces, current, visible = [], [], ''
    for is_escape, chunk in _tokens(word):
        if is_escape:
            current.append(chunk)
            continue
        for cluster in clusters(chunk):
            if visible and cell_len(visible + cluster) > width:
                pieces.append(''.join(current))
                current, visible = [], ''
            current.append(cluster)
            visible += cluster
    pieces.append(''.join(current))
    return pieces

def _carry_styles(lines: List[str]) -> List[str]:
    """Close styling and hyperlinks left open at each line end and reopen them on the next line."""
    result, active, link = [], [], ''
    for line in lines:
        prefix = link + ''.join(active)
        for match in ANSI_REGEX.finditer(line):
            seq = match.group(0)
            target = link_target(seq)
            if target is not None:
                link = seq if target else ''
            elif is_reset(seq):
                active = []
            elif is_sgr(seq):
                active.append(seq)
        result.append(prefix + line + _closers(bool(active), bool(link)))
    return result

def _words(text: str) -> List[str]:
    """Space-separated words; leading indentation stays on the first word."""
    body = text.lstrip(' ')
    words = [word for word in body.split(' ') if word]
    if words:
        words[0] = text[:len(text) - len(body)] + words[0]
    return words

def wrap(text: str, width: int) -> List[str]:
    """
    Word-wrap a single line of text to ``width`` columns.

    Only plain spaces separate words: runs of them collapse to one space and
    leading indentation is kept. Other whitespace, such as a no-break space,
    is part of a word. Words wider than ``width`` are broken between grapheme
    clusters.
    """
    if width <= 0:
        return ['']
    if visible_width(text) <= width:
        return [text]

    lines, current, current_width = [], '', 0
    for word in _words(text):
        word_width = visible_width(word)
        if word_width > width:
            if current:
                lines.append(current)
            pieces = _hard_break(word, width)
            lines.extend(pieces[:-1])
            current, current_width = pieces[-1], visible_width(pieces[-1])
            continue
        if not current:
            current, current_width = word, word_width
        elif current_width + 1 + word_width <= width:
            current += ' ' + word
            current_width += 1 + word_width
        else:
            lines.append(current)
            current, current_width = word, word_width
    lines.append(current)
    return _carry_styles(lines)
