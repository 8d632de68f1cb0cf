import argparse
import logging
import os
import random
import sys
import typing

import yaml

import stickwork.exceptions
import stickwork.generator
import stickwork.midi_export
import stickwork.presets
import stickwork.tokens


logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def _normalize (args: argparse.Namespace, config: dict) -> int:

	apply_disco = config.get('repair', {}).get('apply_disco_voicing', True)

	result = stickwork.presets.normalize_file(args.path, output=args.output, apply_disco_voicing=apply_disco)

	for preset_id in result.unmatched_rudiments:
		print(f"UNMATCHED RUDIMENT {preset_id}")

	for failure in result.failures:
		print(f"FAILED {failure.preset_id}: {failure.reason}")

	print(f"{len(result.collection.presets)} presets, {len(result.changed)} changed, {len(result.failures)} failed (version {result.collection.version})")

	return 1 if result.failures else 0


def _generate (args: argparse.Namespace, config: dict) -> int:

	practice_pad = args.practice_pad or config.get('generator', {}).get('practice_pad', False)
	rng = random.Random(args.seed)

	pattern = stickwork.generator.generate(args.time_signature, args.subdivision, rng=rng, practice_pad=practice_pad)

	print(f"time signature: {pattern.time_signature}  subdivision: {pattern.subdivision}  notes: {pattern.notes_per_bar}")
	print(f"voicing:  {stickwork.tokens.format(pattern.drum_pattern)}")
	print(f"sticking: {stickwork.tokens.format(pattern.sticking_pattern)}")
	print(f"phrase:   {stickwork.tokens.format(pattern.phrase)}")
	print(f"accents:  {stickwork.tokens.format(pattern.accents or [])}")
	print(f"repeat:   {pattern.repeat}")

	return 0


def _export_midi (args: argparse.Namespace, config: dict) -> int:

	bpm = args.bpm or config.get('midi', {}).get('bpm', 120)
	collection = stickwork.presets.load_collection(args.path)

	patterns = []

	for preset in collection.presets:
		try:
			patterns.append(preset.pattern())
		except stickwork.exceptions.StickworkError as exc:
			logger.warning(f"Skipping preset {preset.id!r}: {exc}")

	stickwork.midi_export.export_midi(patterns, args.output, bpm=bpm)

	return 0


def build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(prog="stickwork", description="Drum practice pattern fitting and repair")
	parser.add_argument("--config", default="config.yaml", help="YAML config file (default: config.yaml)")

	commands = parser.add_subparsers(dest="command", required=True)

	normalize = commands.add_parser("normalize", help="Repair every preset in a collection")
	normalize.add_argument("path", help="Preset JSON document")
	normalize.add_argument("--output", help="Write here instead of overwriting PATH")
	normalize.set_defaults(handler=_normalize)

	generate = commands.add_parser("generate", help="Print a random pattern")
	generate.add_argument("time_signature", help="e.g. 4/4")
	generate.add_argument("subdivision", type=int, help="e.g. 16")
	generate.add_argument("--seed", type=int, default=None)
	generate.add_argument("--practice-pad", action="store_true")
	generate.set_defaults(handler=_generate)

	export = commands.add_parser("export-midi", help="Render a preset collection to a MIDI file")
	export.add_argument("path", help="Preset JSON document")
	export.add_argument("output", help="MIDI file to write")
	export.add_argument("--bpm", type=float, default=None)
	export.set_defaults(handler=_export_midi)

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the stickwork command line.
	"""

	args = build_parser().parse_args(argv)
	config = load_config(args.config)

	level = config.get('logging', {}).get('level', 'INFO')
	logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO))

	try:
		return args.handler(args, config)
	except stickwork.exceptions.StickworkError as exc:
		logger.error(str(exc))
		return 2


if __name__ == "__main__":
	sys.exit(main())
