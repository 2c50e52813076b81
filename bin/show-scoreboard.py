"""Print stored games, or the scoreboard of one game.

Usage: uv run python bin/show-scoreboard.py [game_id]

Reads the data directory from SCOREKEEPER_DATA_DIR (see ScorekeeperSettings).
"""

import sys
from pathlib import Path

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from scorekeeper.logic.exceptions import GameNotFoundError
from scorekeeper.logic.standings import determine_winners
from scorekeeper.service import ScorekeeperService
from scorekeeper.settings import ScorekeeperSettings
from shared.logging import setup_logging

_COLUMN_WIDTH = 12


def _print_games(service: ScorekeeperService) -> None:
    games = service.games()
    if not games:
        print("No games yet.")
        return
    for game in games:
        status = "finalized" if game.completed else f"{game.rounds_count} rounds"
        names = ", ".join(p.name for p in game.players) or "no players"
        print(f"{game.id}  {game.name}  ({status})  {names}")


def _print_scoreboard(service: ScorekeeperService, game_id: str) -> None:
    view = service.scoreboard(game_id)
    print(view.game_name)
    if not view.players:
        print("Add players to see the scorecard.")
        return
    print("".ljust(6) + "".join(p.name[: _COLUMN_WIDTH - 1].ljust(_COLUMN_WIDTH) for p in view.players))
    for row in view.rows:
        cells = []
        for cell in row.cells:
            text = ""
            if row.played:
                text = f"{cell.total} {cell.bid}/{cell.tricks_won}"
            if cell.is_dealer:
                text += " D"
            cells.append(text.ljust(_COLUMN_WIDTH))
        print(f"R{row.round}".ljust(6) + "".join(cells))
    if view.completed:
        winner_ids = determine_winners(service.get_game(game_id))
        winners = [p.name for p in view.players if p.id in winner_ids]
        print(f"Winner(s): {', '.join(winners)}")


def main() -> None:
    if len(sys.argv) > 2:
        print(f"Usage: {sys.argv[0]} [game_id]")
        sys.exit(1)

    settings = ScorekeeperSettings()
    setup_logging(log_dir=settings.log_dir or None)
    service = ScorekeeperService.from_settings(settings)

    if len(sys.argv) == 1:
        _print_games(service)
        return

    try:
        _print_scoreboard(service, sys.argv[1])
    except GameNotFoundError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
