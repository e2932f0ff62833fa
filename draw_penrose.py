"""
Generates a kite and dart Penrose tiling and plots it, either over the whole
root triangle at a given depth or over a (random) square region at a depth
chosen to suit the region's size.
"""


import argparse
import logging

import numpy as np

import logging_config
import tile_tree
import tiling_plot
from overlap import BUFFER, Rectangle, random_region
from penrose_tilings import BASE_LENGTH


logger = logging.getLogger(__name__)


def parse_args(argv=None):
	parser = argparse.ArgumentParser(
		description="Draw a section of the kite and dart Penrose tiling")
	mode = parser.add_mutually_exclusive_group()
	mode.add_argument(
		"--depth", type=int,
		help=f"deflate the whole root triangle this many times "
		     f"(at most {tile_tree.MAX_SAFE_DEPTH})")
	mode.add_argument(
		"--region", action="store_true",
		help="generate the tiling over a random square region only")
	parser.add_argument(
		"--rect", type=int, nargs=3, metavar=("X", "Y", "LENGTH"),
		help="use this region instead of a random one (implies --region)")
	parser.add_argument(
		"--seed", type=int, help="seed for the random region")
	parser.add_argument(
		"--fullscreen", action="store_true",
		help="scale the region up to fill the plot")
	parser.add_argument(
		"--base-length", type=int, default=BASE_LENGTH,
		help="base length of the root triangle (default: %(default)s)")
	parser.add_argument(
		"--density", type=float, default=tile_tree.DENSITY_CONSTANT,
		help="density constant for regions (default: %(default)s)")
	parser.add_argument(
		"--output", metavar="PATH",
		help="save the plot to this file instead of displaying it")
	parser.add_argument(
		"-v", "--verbose", action="store_true", help="log debugging output")
	args = parser.parse_args(argv)
	if args.rect is not None:
		if args.depth is not None:
			parser.error("--rect cannot be used with --depth")
		args.region = True
	if args.depth is None and not args.region:
		parser.error("one of --depth, --region or --rect is required")
	return args


def main(argv=None):
	"""
	Runs the command line interface, returning the exit status
	"""
	args = parse_args(argv)
	logging_config.setup_logging(logging.DEBUG if args.verbose else logging.INFO)
	rect = None
	try:
		if args.depth is not None:
			triangles = tile_tree.direct_tiling(args.depth, args.base_length)
		else:
			if args.rect is not None:
				rect = Rectangle(*args.rect)
			else:
				rect = random_region(args.base_length, BUFFER,
				                     np.random.default_rng(args.seed))
			triangles, _ = tile_tree.region_tiling(
				rect, args.base_length, args.density)
	except ValueError as e:
		logger.error("Invalid input: %s", e)
		return 2
	interior, tiles = tile_tree.partition_interior(triangles)
	logger.info("Generated %d tiles (%d interior triangles)",
	            len(tiles), len(interior))
	plot_kwargs = dict(rect=rect, fullscreen=args.fullscreen,
	                   base_length=args.base_length)
	if args.output:
		tiling_plot.save_plot(triangles, args.output, **plot_kwargs)
		logger.info("Saved plot to %s", args.output)
	else:
		tiling_plot.show_plot(triangles, **plot_kwargs)
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
