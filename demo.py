#!/usr/bin/env python3
"""
Demo script for RetroLabel.

Renders a handful of labels as terminal shapes and SVG text.
"""

from retrolabel import LabelRenderer


def print_header(title):
    """Print a formatted header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70 + "\n")


def show(renderer, label):
    """Render one label and print both outputs."""
    result = renderer.render(label, cx=100, cy=50)
    print(f"Input:  {label!r}")
    print(f"Text:   {result.text!r}")
    print(f"Size:   {result.metrics.width:.1f} x {result.metrics.height:.1f}")
    print()
    print(result.to_ascii())
    print()
    print(result.svg)
    print()


def demo_1():
    """Demo 1: Single-line labels"""
    print_header("Demo 1: Single-Line Stadiums")
    renderer = LabelRenderer()
    show(renderer, "Start")
    show(renderer, "**Deploy** to prod")


def demo_2():
    """Demo 2: Multi-line labels"""
    print_header("Demo 2: Multi-Line Labels")
    renderer = LabelRenderer()
    show(renderer, "Build<br/>*and*<br/>Test")
    show(renderer, '"Review\\nApprove"')


def demo_3():
    """Demo 3: ASCII mode and rectangles"""
    print_header("Demo 3: ASCII Borders")
    show(LabelRenderer(use_ascii=True, padding=1), "Retry<br>~~later~~")
    show(LabelRenderer(use_ascii=True, shape="rectangle"), "<u>Queue</u>")


def demo_4():
    """Demo 4: Wide characters and backgrounds"""
    print_header("Demo 4: CJK Text With Background")
    renderer = LabelRenderer(bg_attrs='fill="#fff" stroke="#999"', bg_padding=4)
    show(renderer, "测试<br>テスト")


def main():
    """Run all demos."""
    demo_1()
    demo_2()
    demo_3()
    demo_4()


if __name__ == "__main__":
    main()
