"""CLI options for board size, step rate, front-end, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Rhombus Territory (human vs random opponent)")
    parser.add_argument("--rows", type=int, help="Number of physical board rows (default from settings)")
    parser.add_argument("--steps-per-second", type=float, help="Logical game steps per second")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the opponent and board resets")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for human)")
    parser.add_argument("--window-size", type=int, help="GUI window height in pixels")
    parser.add_argument("--no-sound", action="store_true", help="Disable the placement beep")
    parser.add_argument("--quiet", action="store_true", help="Do not print move log lines")
    parser.add_argument("--verbose", action="store_true", help="Also print ignored placements")
    return parser.parse_args(argv)
