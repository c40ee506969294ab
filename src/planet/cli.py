"""Command-line interface for planet terrain sampling."""

import argparse
import logging
from pathlib import Path

import structlog

from .config import Config, find_config, load_config


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog console output."""
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def build_parser() -> argparse.ArgumentParser:
    # Shared by every subcommand: planet sample --seed 7 0 1 0
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of planet TOML config file",
    )
    common.add_argument("--seed", type=int, default=None, help="Seed (overrides config)")
    common.add_argument("--scale", type=float, default=None, help="Height multiplier (overrides config)")
    common.add_argument("--radius", type=float, default=None, help="Base radius (overrides config)")
    common.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    parser = argparse.ArgumentParser(
        description="Seeded procedural planet terrain"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sample = subparsers.add_parser(
        "sample", parents=[common], help="Height and surface position for one direction"
    )
    sample.add_argument("x", type=float)
    sample.add_argument("y", type=float)
    sample.add_argument("z", type=float)

    heightmap = subparsers.add_parser(
        "heightmap", parents=[common], help="Summarize an equirectangular heightmap"
    )
    heightmap.add_argument("--width", type=int, default=None, help="Samples along longitude")
    heightmap.add_argument("--height", type=int, default=None, help="Samples along latitude")

    return parser


def resolve_config(args: argparse.Namespace) -> Config:
    """Load the requested config and apply CLI overrides.

    Raises:
        SystemExit: If the named config cannot be found.
    """
    logger = structlog.get_logger()

    if args.config:
        try:
            config_path = find_config(args.config)
        except FileNotFoundError:
            config_path = Path(args.config)
            if not config_path.exists():
                logger.error("config_not_found", path=args.config)
                raise SystemExit(1)

        config = load_config(config_path)
        logger.info("config_loaded", path=str(config_path))
    else:
        config = Config()
        logger.info("using_default_config")

    planet = config.planet.model_copy(
        update={
            key: value
            for key, value in (("seed", args.seed), ("scale", args.scale), ("radius", args.radius))
            if value is not None
        }
    )
    heightmap = config.heightmap
    if args.command == "heightmap":
        heightmap = heightmap.model_copy(
            update={
                key: value
                for key, value in (("width", args.width), ("height", args.height))
                if value is not None
            }
        )
    return Config.model_validate({"planet": planet.model_dump(), "heightmap": heightmap.model_dump()})


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    # Import here to avoid slow startup for --help
    from .sphere import HeightmapSummary, generate_heightmap
    from .terrain import get_final_position, get_height

    config = resolve_config(args)
    planet = config.build()

    if args.command == "sample":
        direction = (args.x, args.y, args.z)
        height = float(get_height(direction, planet))
        px, py, pz = (float(c) for c in get_final_position(direction, planet))
        print(f"height: {height:.6f}")
        print(f"position: ({px:.6f}, {py:.6f}, {pz:.6f})")
        return

    heightmap = generate_heightmap(planet, config.heightmap.width, config.heightmap.height)
    summary = HeightmapSummary.from_heightmap(heightmap)
    print(f"Heightmap {config.heightmap.width}x{config.heightmap.height} seed {planet.seed}")
    print(f"  min:  {summary.min_height:.4f}")
    print(f"  max:  {summary.max_height:.4f}")
    print(f"  mean: {summary.mean_height:.4f}")
    print(f"  land: {summary.land_fraction:.2%}")


if __name__ == "__main__":
    main()
