"""Entry point for Rhombus Territory. Load config, wire the front-end, start Territorygame."""

import random
from pathlib import Path

import yaml

try:
    from utils.cli import parse_args
    from utils.logger import make_logger
    from Board import Occupant
    from Territorygame import Territorygame
    from Player import HumanPlayer, RandomPlayer
    from gui.pygame_view import PygameView
except ImportError:
    from Rhombus_Territory.utils.cli import parse_args
    from Rhombus_Territory.utils.logger import make_logger
    from Rhombus_Territory.Board import Occupant
    from Rhombus_Territory.Territorygame import Territorygame
    from Rhombus_Territory.Player import HumanPlayer, RandomPlayer
    from Rhombus_Territory.gui.pygame_view import PygameView


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_rows": 16,
    "steps_per_second": 30,
    "seed": None,
    "window_size": 800,
    "sound": True,
}

SYMBOLS = {Occupant.EMPTY: ".", Occupant.PLAYER_1: "X", Occupant.PLAYER_2: "O"}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Rhombus_Territory/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        print(f"Warning: settings file {path} not found, using defaults.")
    return settings


def merge_settings(args, settings):
    """Command-line flags win over the settings file."""
    return {
        "board_rows": args.rows or settings["board_rows"],
        "steps_per_second": args.steps_per_second or settings["steps_per_second"],
        "seed": args.seed if args.seed is not None else settings["seed"],
        "window_size": args.window_size or settings["window_size"],
        "sound": bool(settings["sound"]) and not args.no_sound,
    }


def render_text(snapshot):
    """ASCII rendering: rows are indented so the rhombus shape is visible."""
    rows = {}
    for cell in snapshot.cells:
        rows.setdefault(cell.r, []).append(cell)
    lines = []
    for r in sorted(rows):
        cells = rows[r]
        indent = snapshot.rows + 2 * cells[0].c - r - 1
        lines.append(" " * indent + " ".join(SYMBOLS[cell.occupant] for cell in cells))
    s = snapshot.scores
    lines.append(
        f"P1: {round(s.p1score * 100)} (est {s.p1estimate:.2f})  "
        f"P2: {round(s.p2score * 100)} (est {s.p2estimate:.2f})"
    )
    return "\n".join(lines)


def play_text(game, human):
    """Console loop: one command per line, each followed by a game step."""
    while not game.finished:
        print(render_text(game.snapshot()))
        try:
            command = human.next_command()
        except ValueError as exc:
            print(exc)
            continue
        if command is None:
            break
        game.submit(command)
        game.step()
    print(render_text(game.snapshot()))
    return game.scores()


def main(argv=None):
    args = parse_args(argv)
    settings = merge_settings(args, load_settings(args.settings))
    logger = make_logger(enabled=not args.quiet)
    debug = make_logger(enabled=args.verbose and not args.quiet)

    rng = random.Random(settings["seed"])
    game = Territorygame(
        board_rows=settings["board_rows"],
        opponent=RandomPlayer(Occupant.PLAYER_2, rng=rng),
        rng=rng,
        logger=logger,
        steps_per_second=settings["steps_per_second"],
        debug=debug,
    )
    board = game.board
    logger(f"rows = {board.rows}, cols = {board.cols}, cells = {board.total_cells}")

    if args.gui:
        view = PygameView(
            board_rows=settings["board_rows"],
            window_size=settings["window_size"],
            sound=settings["sound"],
            logger=logger,
        )
        game.to_cell = view.to_cell
        game.on_place.append(view.play_beep)
        result = game.play(view.poll, renderer=view.render, closer=view.close)
    else:
        result = play_text(game, HumanPlayer(Occupant.PLAYER_1))

    print(f"Final score P1 {result.p1score:.3f}, P2 {result.p2score:.3f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
