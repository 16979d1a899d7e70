"""Command-line entry point: load a map file and open the game window."""

from __future__ import annotations

import os
import sys
from typing import Sequence

from solong.game import Game
from solong.mapfile import MapError, check_extension, read_map
from solong.printf import printf
from solong.validate import validate_map

WINDOW_TITLE = "CrackHead"


def key_hook(keycode: int) -> int:
    """Report a pressed key on standard output."""
    printf("Key hooks : %d\n", keycode)
    return 0


def load_game(path: str | os.PathLike[str]) -> Game:
    """Read and validate a map file and build a game from it.

    Raises MapError with the message to show the user.
    """
    if not check_extension(os.fspath(path)):
        raise MapError("Entrer le bon format de fichier(.ber)")
    try:
        grid = read_map(path)
    except MapError as exc:
        raise MapError("Error\nFichier non conforme") from exc
    try:
        validate_map(grid)
    except MapError as exc:
        raise MapError(f"Erreur\n{exc}") from exc
    return Game.from_grid(grid)


def _run(game: Game) -> int:
    import pygame

    from solong.display import load_images, render_map, window_size

    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size(game))
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            images = load_images()
        except FileNotFoundError as exc:
            printf("Error\n%s\n", str(exc))
            return 1
        render_map(screen, game, images)
        pygame.display.flip()
        printf("Position du joueur x : %d et y : %d\n", game.player_x, game.player_y)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key_hook(event.key)
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Entrer le fichier\n")
        return 1
    try:
        game = load_game(args[0])
    except MapError as exc:
        printf("%s\n", str(exc))
        return 1
    printf("%s", game.format_map())
    return _run(game)


if __name__ == "__main__":
    sys.exit(main())