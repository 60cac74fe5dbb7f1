# test_render.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tuistyles import (
    BOTTOM, CENTER, RIGHT, BorderType, Color, RenderedBlock, Style,
    StyleDefinitions, StyleProps, StyleRenderer, visible_width
)
from tuistyles.style import create_output_strategy
from tuistyles.style.definitions import Border

RESET = '\x1b[0m'
RED = Color.parse('red')
GREEN = Color.parse('green')
BLUE = Color.parse('blue')


def dimensions(rendered: str):
    lines = rendered.split('\n')
    return {visible_width(line) for line in lines}, len(lines)


class TestScenarios:
    """End-to-end examples of the box model."""

    def test_bordered_box_with_vertical_centering(self):
        out = (Style().width(15).height(5).align_vertical(CENTER)
               .border(BorderType.NORMAL).render('Hi'))
        lines = out.split('\n')
        assert len(lines) == 7
        assert lines[0] == '┌' + '─' * 15 + '┐'
        assert lines[1] == lines[2] == '│' + ' ' * 15 + '│'
        assert lines[3] == '│Hi' + ' ' * 13 + '│'
        assert lines[4] == lines[5] == '│' + ' ' * 15 + '│'
        assert lines[6] == '└' + '─' * 15 + '┘'

    def test_padding_shorthand_renders_identically(self):
        text = 'same\ncontent'
        assert Style().padding(1, 2).render(text) == Style().padding(1, 2, 1, 2).render(text)

    def test_wide_characters_stay_inside_width(self):
        out = Style().width(5).render('漢字漢字')
        assert all(visible_width(line) == 5 for line in out.split('\n'))

    def test_wide_character_wider_than_width(self):
        assert Style().width(1).render('漢') == ' '

    @pytest.mark.parametrize('emoji', ['\u2764\ufe0f', '\u26a0\ufe0f'])
    def test_emoji_with_variation_selector_stays_inside_width(self, emoji):
        block = Style().width(3).render_block(emoji * 4)
        assert block.width == 3
        assert dimensions(str(block)) == ({3}, block.height)
        assert ''.join(block.lines).replace(' ', '') == emoji * 4

    def test_emoji_under_max_width(self):
        block = Style().max_width(5).render_block('\u26a0\ufe0f' * 4 + ' warning')
        assert block.width == 5
        assert block.lines[0].endswith('...')
        assert dimensions(str(block)) == ({5}, 1)

    def test_hyperlink_wraps_without_breaking_the_escape(self):
        link = '\x1b]8;;http://example.com\x07'
        out = Style().width(6).render(f'{link}click here now\x1b]8;;\x07')
        assert dimensions(out) == ({6}, 3)
        assert all(line.startswith(link) for line in out.split('\n'))

    def test_indentation_survives_wrapping(self):
        assert Style().width(6).render('  ab cd ef gh') == '  ab  \ncd ef \ngh    '


class TestDimensionInvariant:
    """Final size is content + padding + border edges + margin, exactly."""

    @pytest.mark.parametrize('style, width, height', [
        (Style(), 5, 2),
        (Style().padding(1, 2), 9, 4),
        (Style().border(BorderType.ROUNDED), 7, 4),
        (Style().border(BorderType.DOUBLE, True, False, True, False), 5, 4),
        (Style().margin(2).padding(1).border(BorderType.THICK), 13, 10),
        (Style().width(10).height(4), 10, 4),
        (Style().width(3).height(1).margin(0, 1, 0, 0), 4, 1),
    ])
    def test_sizes(self, style, width, height):
        block = style.render_block('hello\nworld')
        assert (block.width, block.height) == (width, height)
        assert dimensions(str(block)) == ({width}, height)

    def test_colored_output_measures_the_same(self):
        style = (Style().bold().foreground(RED).background(BLUE).padding(1)
                 .border(BorderType.NORMAL).border_foreground(GREEN).width(8).align(CENTER))
        assert dimensions(style.render('abc')) == ({12}, 5)

    def test_zero_width_keeps_line_count(self):
        block = Style().width(0).render_block('abc\ndef')
        assert block.lines == ('', '')
        assert block.width == 0


class TestContentSizing:
    """Wrapping, truncation, alignment and height reconciliation."""

    def test_word_wrap_to_width(self):
        assert Style().width(10).render('the quick brown fox') == 'the quick \nbrown fox '

    def test_truncate_instead_of_wrap(self):
        assert Style().width(5).truncate().render('hello world') == 'hello'

    def test_max_width_uses_ellipsis(self):
        assert Style().max_width(8).render('hello world') == 'hello...'

    def test_max_width_leaves_short_lines(self):
        assert Style().max_width(8).render('hi') == 'hi'

    def test_center_puts_odd_cell_on_the_right(self):
        assert Style().width(5).align(CENTER).render('ab') == ' ab  '

    def test_right_alignment(self):
        assert Style().width(5).align(RIGHT).render('ab') == '   ab'

    def test_lines_padded_to_widest(self):
        assert Style().render('a\nabc') == 'a  \nabc'

    def test_bottom_alignment(self):
        assert Style().height(3).align_vertical(BOTTOM).render('a') == ' \n \na'

    def test_height_drops_trailing_lines(self):
        assert Style().height(1).render('a\nb') == 'a'

    def test_max_height(self):
        assert Style().max_height(2).render('a\nb\nc') == 'a\nb'

    def test_tabs_expand(self):
        assert Style().render('a\tb') == 'a    b'

    def test_empty_text(self):
        assert Style().render('') == ''

    def test_empty_text_with_padding(self):
        assert Style().padding(1).render('') == '  \n  \n  '


class TestBorders:
    """Edge selection and glyph sets."""

    def test_disabled_edges_collapse(self):
        out = Style().border(BorderType.NORMAL, True, False, True, False).render('ab')
        assert out == '──\nab\n──'

    def test_all_edges_disabled_means_no_border(self):
        assert Style().border(BorderType.NORMAL, False).render('ab') == 'ab'

    def test_edge_flags_without_kind_draw_nothing(self):
        assert Style().border_top().render('a') == 'a'

    def test_unset_edges_default_on(self):
        style = Style(StyleProps(border_type=BorderType.ROUNDED, border_top=False))
        assert style.render('a') == '│a│\n╰─╯'

    def test_corner_needs_its_side(self):
        out = Style().border(BorderType.NORMAL, True, True, True, False).render('a')
        assert out == '─┐\na│\n─┘'

    def test_custom_border(self):
        custom = Border('=', '-', '[', ']', '<', '>', '{', '}')
        assert Style().border(custom).render('ab') == '<==>\n[ab]\n{--}'

    def test_hidden_border_keeps_size(self):
        assert Style().border(BorderType.HIDDEN).render('a') == '   \n a \n   '


class TestColors:
    """SGR output for decorations, colors and fills."""

    def test_decorations_then_foreground(self):
        out = Style().italic().bold().foreground(RED).render('hi')
        assert out == f'\x1b[1m\x1b[3m\x1b[31mhi{RESET}'

    def test_fill_carries_background_only(self):
        out = Style().bold().background(BLUE).width(4).render('hi')
        assert out == f'\x1b[1m\x1b[44mhi{RESET}\x1b[44m  {RESET}'

    def test_border_colors(self):
        out = Style().border(BorderType.NORMAL).border_foreground(GREEN).render('x')
        lines = out.split('\n')
        assert lines[0] == f'\x1b[32m┌─┐{RESET}'
        assert lines[1] == f'\x1b[32m│{RESET}x\x1b[32m│{RESET}'

    def test_margin_is_uncolored(self):
        out = Style().background(BLUE).margin(0, 1).render('x')
        assert out == f' \x1b[44mx{RESET} '

    def test_embedded_reset_reapplies_style(self):
        out = Style().bold().render(f'a{RESET}b')
        assert out == f'\x1b[1ma{RESET}\x1b[1mb{RESET}'

    def test_unstyled_text_has_no_escapes(self):
        assert Style().padding(1).render('x') == '   \n x \n   '


class TestPlainOutput:
    """Color disabled: no escape sequences at all."""

    def test_style_codes_suppressed(self):
        style = Style().bold().foreground(RED).background(BLUE).padding(0, 1)
        assert style.render('hi', color=False) == ' hi '

    def test_embedded_escapes_stripped(self):
        assert Style().render(f'\x1b[31mhi{RESET}', color=False) == 'hi'

    def test_renderer_flag(self):
        renderer = StyleRenderer(color_enabled=False)
        assert renderer.render(Style().bold(), 'x') == 'x'
        assert renderer.strategy.name == 'plain'

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match='Unknown strategy type'):
            create_output_strategy('html')


class TestRenderer:
    """Configuration through StyleDefinitions."""

    def test_custom_ellipsis(self):
        renderer = StyleRenderer(StyleDefinitions(ellipsis='~'))
        assert renderer.render(Style().max_width(4), 'abcdef') == 'abc~'

    def test_custom_tab_width(self):
        renderer = StyleRenderer(StyleDefinitions(tab_width=2))
        assert renderer.render(Style(), 'a\tb') == 'a  b'

    def test_render_block(self):
        block = StyleRenderer().render_block(Style().padding(0, 1), 'ab')
        assert block == RenderedBlock((' ab ',), 4)
        assert block.height == 1

    def test_deterministic(self):
        style = Style().bold().foreground(RED).border(BorderType.DOUBLE).width(7).align(CENTER)
        assert style.render('repeat me') == style.render('repeat me')

    def test_engine_accepts_props(self):
        renderer = StyleRenderer()
        style = Style().width(3)
        assert renderer.render(style.props, 'a') == renderer.render(style, 'a')
