#!/usr/bin/env python3

import argparse
import sys
from dataclasses import replace

from skirmish.core.config import load_simulation_config, parse_combat_mode
from skirmish.core.errors import BattleError
from skirmish.game.simulation import describe_modes, run_simulation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a strategy-pattern duel between two combatants")
    parser.add_argument("--config", help="Simulation YAML file (default: assets/config/simulation.yaml)")
    parser.add_argument("--player", help="Player combatant template, e.g. Ranger")
    parser.add_argument("--enemy", help="Enemy combatant template, e.g. Skeleton")
    parser.add_argument("--player-mode", choices=describe_modes(), help="Player combat mode")
    parser.add_argument("--enemy-mode", choices=describe_modes(), help="Enemy combat mode")
    parser.add_argument("--seed", type=int, help="Seed for random combat modes")
    parser.add_argument("--max-rounds", type=int, help="Stop after this many rounds")
    parser.add_argument("--debug", action="store_true", help="Show strategy selection messages")
    parser.add_argument("--save-log", action="store_true", help="Write the log to the logs/ directory")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_simulation_config(args.config)
        overrides = {}
        if args.player:
            overrides["player_template"] = args.player
        if args.enemy:
            overrides["enemy_template"] = args.enemy
        if args.player_mode:
            overrides["player_mode"] = parse_combat_mode(args.player_mode)
        if args.enemy_mode:
            overrides["enemy_mode"] = parse_combat_mode(args.enemy_mode)
        if args.seed is not None:
            overrides["seed"] = args.seed
        if args.max_rounds is not None:
            overrides["max_rounds"] = args.max_rounds

        # replace() re-runs SimulationConfig validation on the overrides
        result = run_simulation(replace(config, **overrides))
    except BattleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log_manager = result.log_manager
    if args.debug:
        log_manager.toggle_debug()

    for line in log_manager.get_formatted_messages():
        print(line)

    stats = result.statistics
    print()
    print(f"Rounds: {stats.rounds}  "
          f"Damage taken: player {stats.total_damage_to_player:g}, enemy {stats.total_damage_to_enemy:g}")

    if args.save_log:
        path = log_manager.save_log_to_file()
        if path is None:
            print("Failed to save log file", file=sys.stderr)
            return 1
        print(f"Log saved to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
