"""
Draws tilings generated by tile_tree with matplotlib.
"""


import dataclasses

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection, PolyCollection
from matplotlib.patches import Rectangle as RectanglePatch

from penrose_tilings import BASE_LENGTH, root_height
from tile_tree import partition_interior


@dataclasses.dataclass
class RenderStyle:
	"""
	The colours and line widths used to draw a tiling.

	Attributes:
	  kite_color        Fill colour of kites, also used for the edge
	                    joining the two halves of a kite
	  dart_color        As kite_color, for darts
	  line_color        Colour of the outer edges of the tiles
	  ghost_color       Colour of the outlines of interior triangles
	  line_width        Width of all lines in the tiling
	  region_color      Colour of the outline drawn around a region
	  region_line_width Width of the region outline
	"""
	kite_color: str = "forestgreen"
	dart_color: str = "lightgreen"
	line_color: str = "black"
	ghost_color: str = "gray"
	line_width: float = 1
	region_color: str = "blue"
	region_line_width: float = 2


def scale_point(point, rect, ratio):
	"""
	Maps a point within the region rect onto a viewport, with the top left
	corner of the region at the origin and lengths multiplied by ratio
	"""
	return ratio * (np.array(point, dtype=float) - np.array([rect.x, rect.y]))


def triangle_lines(triangle, style, points=None):
	"""
	Returns the three edges of a tile as a list of (segment, colour) pairs.

	The base (p2 to p3) and one of the two equal edges are outer edges of
	the tile. The other equal edge joins the triangle to its mirror image, so
	takes the tile's fill colour: p1 to p2 for types 0 and 2, and p1 to p3
	for types 1 and 3.

	points can be given to draw the triangle at different coordinates (eg
	scaled ones) to its own.
	"""
	if points is None:
		points = triangle.points
	p1, p2, p3 = (tuple(p) for p in points)
	fill_color = style.kite_color if triangle.is_kite else style.dart_color
	if triangle.type in (0, 2):
		inner, outer = (p1, p2), (p1, p3)
	else:
		inner, outer = (p1, p3), (p1, p2)
	return [
		(outer, style.line_color),
		(inner, fill_color),
		((p2, p3), style.line_color),
	]


def draw_tiling(ax, triangles, style=None, rect=None, fullscreen=False,
                base_length=BASE_LENGTH):
	"""
	Draws a list of triangles (as returned by tile_tree.build()) onto the
	matplotlib axes ax.

	Tiles are filled, while interior triangles are drawn beneath them as
	outlines only.

	Arguments:
	  ax                The matplotlib Axes to draw on
	  triangles         The list of triangles
	  style             A RenderStyle. Defaults to RenderStyle().
	  rect              The overlap.Rectangle over which the tiling was
	                    generated, if any. It is outlined unless fullscreen
	                    is set.
	  fullscreen        If True (and rect is given), only the tiles are
	                    drawn, scaled so that rect fills a view of width
	                    base_length
	  base_length       The base length of the root triangle, which sets
	                    the size of the view
	"""
	if style is None: style = RenderStyle()
	interior, tiles = partition_interior(triangles)
	scaled = fullscreen and rect is not None
	if scaled:
		ratio = base_length / rect.length
		tile_points = [
			[scale_point(p, rect, ratio) for p in t.points] for t in tiles]
	else:
		tile_points = [t.points for t in tiles]
		ax.add_collection(LineCollection(
			[[tuple(a), tuple(b)]
			 for t in interior
			 for a, b in ((t.p1, t.p2), (t.p1, t.p3), (t.p2, t.p3))],
			colors=style.ghost_color,
			linewidths=style.line_width,
			zorder=1))
	# Fills go beneath all of the lines
	ax.add_collection(PolyCollection(
		[[tuple(p) for p in points] for points in tile_points],
		facecolors=[style.kite_color if t.is_kite else style.dart_color
		            for t in tiles],
		edgecolors="none",
		zorder=2))
	segments, colors = [], []
	for tile, points in zip(tiles, tile_points):
		for segment, color in triangle_lines(tile, style, points):
			segments.append(segment)
			colors.append(color)
	ax.add_collection(LineCollection(
		segments, colors=colors, linewidths=style.line_width, zorder=3))
	if rect is not None and not scaled:
		ax.add_patch(RectanglePatch(
			(rect.x, rect.y), rect.length, rect.length,
			fill=False,
			edgecolor=style.region_color,
			linewidth=style.region_line_width,
			zorder=4))
	# Screen coordinates, so y increases downwards
	ax.set_xlim(0, base_length)
	if scaled:
		ax.set_ylim(base_length, 0)
	else:
		ax.set_ylim(root_height(base_length), 0)
	ax.set_aspect("equal")
	ax.set_axis_off()


def _make_figure(triangles, **kwargs):
	fig = plt.figure()
	ax = fig.add_subplot()
	draw_tiling(ax, triangles, **kwargs)
	return fig


def show_plot(triangles, **kwargs):
	"""
	Displays a matplotlib popup with a plot of the tiling.

	Takes the same arguments as draw_tiling() (minus ax).
	"""
	_make_figure(triangles, **kwargs)
	plt.show()


def save_plot(triangles, path, **kwargs):
	"""
	Saves a plot of the tiling to the file at path.

	Takes the same arguments as draw_tiling() (minus ax).
	"""
	fig = _make_figure(triangles, **kwargs)
	fig.savefig(path)
	plt.close(fig)
