"""
Command-line entry point for spellforge.

Usage:
    spellforge extract "a fiery blast that lasts an instant"
    spellforge generate "heal my allies with water" --bloodline Water
    spellforge random --seed 42 --bloodline Fire
    spellforge efficiency Fire Earth
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import SpellforgeConfig, load_config
from .context import load_context
from .efficiency import EfficiencyCalculator
from .exceptions import SpellforgeError
from .extractor import ComponentExtractor
from .generator import SpellGenerator
from .models import Spell

logger = logging.getLogger("spellforge")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="spellforge",
        description="Generate spells and infer spell components from descriptions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--data",
        type=Path,
        help="YAML spell data file (defaults to the bundled data)",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser("extract", help="Extract components from a description")
    extract.add_argument("prompt", help="Free-text spell description")

    generate = subparsers.add_parser("generate", help="Build a spell from a description")
    generate.add_argument("prompt", help="Free-text spell description")
    generate.add_argument("--bloodline", help="Caster bloodline for efficiency")
    generate.add_argument("--seed", type=int, help="Seed for template selection")

    rand = subparsers.add_parser("random", help="Build a spell from random components")
    rand.add_argument("--bloodline", help="Caster bloodline for efficiency")
    rand.add_argument("--seed", type=int, help="Seed for component and template selection")

    efficiency = subparsers.add_parser("efficiency", help="Look up bloodline/element efficiency")
    efficiency.add_argument("bloodline", help="Caster bloodline")
    efficiency.add_argument("element", help="Spell element")

    return parser.parse_args(argv)


def format_spell(spell: Spell) -> str:
    """Render a spell as plain text."""
    lines = [spell.name, spell.description, ""]
    for category, value in spell.components.as_dict().items():
        lines.append(f"  {category:<9} {value}")
    if spell.efficiency_label:
        lines.append(f"  {'Bloodline':<9} {spell.bloodline} ({spell.efficiency_label})")
    return "\n".join(lines)


def run(args: argparse.Namespace, config: SpellforgeConfig) -> str:
    """Execute a parsed command and return its output text."""
    context = load_context(config.data_file)

    if args.command == "extract":
        components = ComponentExtractor(context, threshold=config.match_threshold).extract(args.prompt)
        lines = []
        for category, value in components.as_dict().items():
            marker = " (default)" if category in {c.value for c in components.defaulted} else ""
            lines.append(f"{category:<9} {value}{marker}")
        return "\n".join(lines)

    if args.command == "efficiency":
        label, percentage = EfficiencyCalculator(context).efficiency(args.bloodline, args.element)
        return f"{args.bloodline} casting {args.element}: {label} ({percentage})"

    generator = SpellGenerator(context, config=config)
    if args.command == "generate":
        return format_spell(generator.from_prompt(args.prompt, bloodline=args.bloodline))
    return format_spell(generator.random_spell(bloodline=args.bloodline))


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = load_config(
            data_file=args.data,
            log_level=args.log_level,
            seed=getattr(args, "seed", None),
        )
    except SpellforgeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=getattr(logging, config.log_level))

    try:
        print(run(args, config))
    except SpellforgeError as e:
        logger.debug(f"Command failed: {e.details}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
