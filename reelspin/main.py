# reelspin/main.py
import argparse
import logging
import sys
import time

from reelspin.application.config.config_service import load_game_config
from reelspin.application.game.slot_game import SlotGame
from reelspin.application.simulation.headless_runner import HeadlessRunner
from reelspin.domain.events.event_dispatcher import EventDispatcher
from reelspin.infrastructure.config.errors import ConfigError
from reelspin.infrastructure.logging.log_manager import initialize_logging
from reelspin.infrastructure.output.output_manager import OutputManager
from reelspin.infrastructure.rng.rng_provider import RNGProvider
from reelspin.infrastructure.timing.frame_clock import FrameBudgetExceededError


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Single reel slot machine")

    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Path to game configuration file (bundled default_game.yaml if omitted)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--log-mode",
        choices=["all", "app", "domain", "none"],
        default=None,
        help="Select logging mode: 'all'=verbose, 'app'=application only, 'domain'=domain only, 'none'=minimal"
    )

    parser.add_argument(
        "--headless",
        action="store_true",
        help="Play spins without a window and write the results"
    )

    parser.add_argument(
        "--spins",
        type=int,
        default=None,
        help="Number of headless spins (overrides simulation.spins)"
    )

    parser.add_argument(
        "--stop-after-frames",
        type=int,
        default=None,
        help="Press the spin control again after this many frames of every headless spin"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed (overrides rng.seed)"
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Results directory for headless runs (overrides output.base_dir)"
    )

    return parser.parse_args(argv)


LAYERS = ("domain", "application", "infrastructure")


def set_layer_level(loggers, layer, level):
    """
    Set the level of a whole logger layer.

    Child entries (e.g. "domain.spin" under "domain") are configured after
    their parent and would override it, so they are removed.
    """
    for name in [name for name in loggers if name.startswith(layer + ".")]:
        del loggers[name]
    loggers[layer] = {"level": level}


def apply_log_mode(config, args):
    """Adjust the logging section of config from --log-mode and --verbose."""
    log_config = config.get("logging") or {}
    loggers = log_config.setdefault("loggers", {})

    if args.log_mode == "all" or args.verbose:
        log_config["level"] = "DEBUG"
        log_config["console_level"] = "DEBUG"
        for layer in LAYERS:
            set_layer_level(loggers, layer, "DEBUG")
    elif args.log_mode in ("app", "domain"):
        shown = "application" if args.log_mode == "app" else "domain"
        log_config["level"] = "WARNING"
        log_config["console_level"] = "DEBUG"
        for layer in LAYERS:
            set_layer_level(loggers, layer, "DEBUG" if layer == shown else "WARNING")
    elif args.log_mode == "none":
        log_config["level"] = "WARNING"
        log_config["console_level"] = "WARNING"
        for layer in LAYERS:
            set_layer_level(loggers, layer, "WARNING")

    config["logging"] = log_config
    return config


def run_headless(game, config, args, logger) -> int:
    simulation = config.get("simulation") or {}
    spins = args.spins if args.spins is not None else simulation.get("spins", 10)
    stop_after = args.stop_after_frames if args.stop_after_frames is not None \
        else simulation.get("stop_after_frames")

    runner = HeadlessRunner(
        game,
        frame_delta_ms=simulation.get("frame_delta_ms", 1000 / 60),
        max_frames_per_spin=simulation.get("max_frames_per_spin", 10000),
    )
    results = runner.run(spins, stop_after)

    output_config = dict(config.get("output") or {})
    if args.output_dir:
        output_config["base_dir"] = args.output_dir
    written = OutputManager(output_config).write_results(results)
    for path in written:
        logger.info(f"Results saved to {path}")

    summary = results["summary"]
    print("\nHeadless Run Summary:")
    print(f"- Spins: {summary['spins']}")
    print(f"- Total Payout: {summary['total_payout']:.2f}")
    print(f"- Average Payout: {summary['average_payout']:.2f}")
    print(f"- Average Spin Frames: {summary['average_spin_frames']:.1f}")
    print(f"- Average Align Frames: {summary['average_align_frames']:.1f}")
    for symbol, count in sorted(summary["symbol_counts"].items(), key=lambda item: -item[1]):
        print(f"  {symbol}: {count}")
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    start_time = time.time()

    try:
        config = load_game_config(args.config)
    except ConfigError as e:
        print(f"Error loading configuration: {str(e)}")
        return 1

    if args.seed is not None:
        config.setdefault("rng", {})["seed"] = args.seed

    apply_log_mode(config, args)
    initialize_logging(config.get("logging"))
    logger = logging.getLogger("main")
    logger.info("reelspin starting")

    try:
        game = SlotGame.from_config(config, RNGProvider(), event_dispatcher=EventDispatcher())

        if args.headless:
            status = run_headless(game, config, args, logger)
        else:
            from reelspin.application.rendering.pygame_renderer import run_window
            run_window(game, config.get("display") or {})
            status = 0

        print(f"\nTotal execution time: {time.time() - start_time:.2f} seconds")
        return status

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except (ConfigError, FrameBudgetExceededError) as e:
        logger.error(str(e))
        return 1
    finally:
        logging.shutdown()


if __name__ == "__main__":
    sys.exit(main())
