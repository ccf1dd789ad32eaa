#!/usr/bin/env python3
"""
PrimeFall - Standalone entry point.

Usage:
    python -m games.PrimeFall.main
    python -m games.PrimeFall.main --mode gentle
    python -m games.PrimeFall.main --config my_mode.yaml --seed 42
"""

import argparse
import os
import sys
from typing import List, Optional

import pygame
import yaml
from pydantic import ValidationError

# Support running from any directory - add project root to path
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from models import GameConfig, GameState
from primefall.input import InputManager
from primefall.input.sources import KeyboardInputSource
from primefall.logging import (
    close_all_sinks,
    configure_logging,
    create_sink_for_module,
    get_logger,
    register_sink,
)
from games.PrimeFall.config import apply_overrides, default_config
from games.PrimeFall.game_mode import PrimeFallMode
from games.PrimeFall.mode_loader import ModeLoader

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser from the game's ARGUMENTS list."""
    parser = argparse.ArgumentParser(
        prog='primefall',
        description=f"{PrimeFallMode.NAME} - {PrimeFallMode.DESCRIPTION}",
    )
    parser.add_argument('--list-modes', action='store_true', help='List available modes and exit')

    for arg_def in PrimeFallMode.get_arguments():
        kwargs = {}
        if 'action' in arg_def:
            kwargs['action'] = arg_def['action']
        elif 'type' in arg_def:
            kwargs['type'] = arg_def['type']
        if 'default' in arg_def:
            kwargs['default'] = arg_def['default']
        if 'help' in arg_def:
            kwargs['help'] = arg_def['help']
        if 'choices' in arg_def:
            kwargs['choices'] = arg_def['choices']
        parser.add_argument(arg_def['name'], **kwargs)

    return parser


def build_config(args: argparse.Namespace, loader: Optional[ModeLoader] = None) -> GameConfig:
    """
    Resolve the game configuration from parsed arguments.

    Precedence: --config file, then --mode, then environment defaults.
    --max-lives and --fps are applied on top of whichever was chosen.

    Raises:
        FileNotFoundError: If the mode or config file doesn't exist
        ValueError: If the configuration is invalid
        yaml.YAMLError: If a mode file is malformed
    """
    loader = loader or ModeLoader()
    if args.config:
        config = loader.load_file(args.config)
    elif args.mode:
        config = loader.load_mode(args.mode)
    else:
        config = default_config()
    return apply_overrides(config, max_lives=args.max_lives, fps=args.fps)


def run(
    game: PrimeFallMode,
    screen: pygame.Surface,
    input_manager: InputManager,
    fps: int,
    max_frames: Optional[int] = None,
) -> int:
    """
    Drive the game once per display refresh until the window closes.

    Events are pumped even after game over so the restart key still works.

    Args:
        game: Game mode to drive
        screen: Display surface
        input_manager: Input manager with a keyboard source
        fps: Frame rate cap
        max_frames: Stop after this many iterations (None = until quit)

    Returns:
        Number of loop iterations run
    """
    clock = pygame.time.Clock()
    running = True
    frames = 0
    last_state = game.state

    while running:
        clock.tick(fps)

        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        input_manager.update(events)
        game.handle_input(input_manager.get_events())
        game.update()
        game.render(screen)
        pygame.display.flip()

        if game.state != last_state:
            if game.state == GameState.GAME_OVER:
                print(f"\nGAME OVER! Score: {game.get_score()}  (press R to restart)")
            else:
                print("\n--- RESTARTING ---\n")
            last_state = game.state

        frames += 1
        if max_frames is not None and frames >= max_frames:
            running = False

    return frames


def main(argv: Optional[List[str]] = None) -> int:
    """Run PrimeFall."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    loader = ModeLoader()
    if args.list_modes:
        for mode_id in loader.list_available_modes():
            info = loader.get_mode_info(mode_id)
            print(f"  {mode_id:<12} {info['name']} - {info['description']}")
        return 0

    try:
        config = build_config(args, loader)
        keyboard = KeyboardInputSource(config.keys)
    except (FileNotFoundError, ValidationError, ValueError, yaml.YAMLError) as e:
        log.error("Configuration error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    register_sink('session', create_sink_for_module('session'))

    pygame.init()
    try:
        screen = pygame.display.set_mode((config.game_width, config.game_height))
        pygame.display.set_caption(PrimeFallMode.NAME)

        game = PrimeFallMode(config=config, seed=args.seed, assets_dir=args.assets_dir)
        input_manager = InputManager(keyboard)

        print("=" * 50)
        print(PrimeFallMode.NAME.upper())
        print("=" * 50)
        print("\nCatch the primes, dodge the rest!")
        print("\nControls:")
        print(f"  - {config.keys.left} / {config.keys.right} to change lane")
        print(f"  - {config.keys.restart} to restart")
        print("  - ESC to quit")
        print("=" * 50)

        run(game, screen, input_manager, config.fps)
        log.info("Exiting with score %d", game.get_score())
    finally:
        close_all_sinks()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
