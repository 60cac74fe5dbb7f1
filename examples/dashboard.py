# dashboard.py

import argparse
from tuistyles import (
    CENTER, TOP, BorderType, Color, Logger, Style,
    color_enabled, join_horizontal, join_vertical
)

METRICS = """
Users:     1,234
Active:      567
Pending:     123

CPU:        45%
Memory:     67%
Disk:       82%"""

LOGS = """
23:45:12 INFO  Server started
23:45:20 WARN  High memory usage
23:45:25 ERROR Cache timeout
23:45:30 INFO  Cache reconnected"""

def build(color: bool) -> str:
    cyan, green, red = Color.parse('cyan'), Color.parse('green'), Color.parse('red')
    yellow, gray = Color.parse('yellow'), Color.parse('gray')

    header = (Style().bold().foreground(Color.parse('#FFFFFF')).background(Color.parse('#5555FF'))
              .padding(1, 2).width(62).align(CENTER)
              .render('TUI Styles Dashboard - System Monitor', color=color))

    panel = Style().border(BorderType.ROUNDED).padding(1).width(26).height(9)
    title = lambda text, fg: Style().bold().foreground(fg).render(text, color=color)
    mark = lambda glyph, fg: Style().foreground(fg).render(glyph, color=color)

    status = '\n'.join([
        '',
        f"Database:   {mark('✓', green)} OK",
        f"API Server: {mark('✓', green)} OK",
        f"Cache:      {mark('✗', red)} Down",
        f"Search:     {mark('!', yellow)} Degraded",
    ])
    left = panel.border_foreground(cyan).render(title('Metrics', cyan) + METRICS, color=color)
    right = panel.border_foreground(green).render(title('System Status', green) + status, color=color)

    logs = (Style().border(BorderType.ROUNDED).border_foreground(yellow).padding(1).width(60)
            .render(title('Recent Logs', yellow) + LOGS, color=color))
    footer = (Style().foreground(gray).padding(1, 0).width(66).align(CENTER)
              .render('Press Q to quit', color=color))

    panels = join_horizontal(TOP, left, '  ', right)
    return join_vertical(CENTER, header, '', panels, '', logs, footer)

def main():
    parser = argparse.ArgumentParser(description='tuistyles dashboard demo')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    parser.add_argument('--no-color',
        action='store_true',
        help='Render without escape sequences')

    args = parser.parse_args()
    Logger('tuistyles.examples', logging_enabled=args.enable_logging, log_file=args.log_file)

    print(build(color_enabled() and not args.no_color))

if __name__ == "__main__":
    main()
