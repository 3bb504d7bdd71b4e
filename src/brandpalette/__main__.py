"""Entry point for running brandpalette as a module.

Usage: python -m brandpalette generate brand.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brandpalette",
        description="Generate accessible brand color palettes from brand descriptors.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate palettes from a brand JSON file")
    gen.add_argument("input", help="Path to brand input JSON, or - for stdin")
    gen.add_argument("--count", type=int, default=None, help="Number of palettes")
    gen.add_argument("--no-dark-mode", action="store_true", help="Skip dark variants")
    gen.add_argument("--offline", action="store_true", help="Disable embedding lookups")
    gen.add_argument("--best", action="store_true", help="Only output the top palette")
    gen.add_argument("--cache", type=Path, default=None, help="Trait embeddings cache file")

    emb = sub.add_parser("build-embeddings", help="Embed the known traits into a cache file")
    emb.add_argument("--output", type=Path, default=None, help="Cache file to write")

    key = sub.add_parser("set-key", help="Store the Gemini API key")
    key.add_argument("api_key")

    return parser


def _read_input(source: str) -> dict:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, "r", encoding="utf-8") as f:
        return json.load(f)


def _cmd_generate(args) -> int:
    from brandpalette.core.generator import Generator
    from brandpalette.core.models import BrandInput, GenerationOptions
    from brandpalette.core.trait_mapper import TraitMapper
    from brandpalette.config.settings import GENERATION_CONFIG

    brand_input = BrandInput.from_dict(_read_input(args.input))
    options = GenerationOptions(
        palette_count=args.count if args.count is not None else GENERATION_CONFIG.palette_count,
        include_dark_mode=not args.no_dark_mode,
    )
    if args.offline:
        mapper = TraitMapper()
    else:
        mapper = TraitMapper.from_environment(args.cache)

    generator = Generator(brand_input, options, trait_mapper=mapper)
    result = generator.generate_best() if args.best else generator.generate()
    json.dump(result.to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def _cmd_build_embeddings(args) -> int:
    from brandpalette.core.embedding_client import GeminiEmbeddingClient
    from brandpalette.core.trait_mapper import build_trait_embeddings
    from brandpalette.storage.embedding_cache import save_embeddings_cache
    from brandpalette.storage.key_manager import load_api_key

    api_key = load_api_key()
    if not api_key:
        logging.getLogger(__name__).error("No Gemini API key found; run 'set-key' first")
        return 1

    client = GeminiEmbeddingClient(api_key)
    path = save_embeddings_cache(build_trait_embeddings(client.embed), args.output)
    print(path)
    return 0


def _cmd_set_key(args) -> int:
    from brandpalette.storage.key_manager import save_api_key

    return 0 if save_api_key(args.api_key) else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    commands = {
        "generate": _cmd_generate,
        "build-embeddings": _cmd_build_embeddings,
        "set-key": _cmd_set_key,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
