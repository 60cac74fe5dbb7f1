# borders.py

from tuistyles import (
    BOTTOM, CENTER, RIGHT, BorderType, Color, Style,
    color_enabled, join_horizontal, join_vertical, place
)

def main():
    color = color_enabled()
    label = Style().faint()

    # Every catalog entry, three to a row
    boxes = [
        join_vertical(CENTER, label.render(kind.value, color=color),
                      Style().border(kind).padding(0, 1).margin(0, 1).render('Hello', color=color))
        for kind in BorderType
    ]
    for start in range(0, len(boxes), 3):
        print(join_horizontal(BOTTOM, *boxes[start:start + 3]))
        print()

    # Partial edges
    underline = Style().border(BorderType.THICK, False, False, True, False)
    print(underline.border_foreground(Color.parse('magenta')).render('Section title', color=color))
    print()

    # Anchoring inside a fixed canvas
    badge = Style().bold().reverse().padding(0, 1).render('v1.0', color=color)
    print(Style().border(BorderType.DOUBLE).render(place(30, 5, RIGHT, BOTTOM, badge), color=color))

if __name__ == "__main__":
    main()
