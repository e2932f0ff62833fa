"""
Builds finite sections of the kite and dart tiling by repeatedly deflating a
root triangle, either everywhere or only where the triangles overlap a chosen
region. The depth for a region can be chosen so that the number of tiles
visible in it is roughly the same whatever its size.
"""


import logging
import numbers

from penrose_tilings import (
	BASE_LENGTH, DART_TYPES, DepthTooLarge, InvalidDepth, root_height,
	root_triangle, subdivide)
from overlap import TOLERANCE, overlaps


logger = logging.getLogger(__name__)


# Beyond this many deflations the floating point errors in the vertex
# positions become visible
MAX_SAFE_DEPTH = 12

# Controls the density of triangles within a region. Increase for more
# (smaller) triangles.
DENSITY_CONSTANT = 1500


class TriangleFilter:
	"""
	A template class for the filters which decide which triangles are
	deflated further while building a tiling.
	"""

	def apply(self, triangle):
		"""
		This should return the triangle if it is to be kept (and deflated
		further), or None if it is to be discarded along with everything
		that would have been generated from it.
		"""
		raise NotImplementedError(f"The class {type(self).__name__} is a "
		                          f"subclass of tile_tree.TriangleFilter but "
		                          f"lacks an apply() method")

	def __call__(self, triangle):
		return self.apply(triangle)


class AcceptAll(TriangleFilter):
	"""Keeps every triangle"""

	def apply(self, triangle):
		return triangle


class RegionBounded(TriangleFilter):
	"""
	Keeps only those triangles which overlap a square region.

	Attributes:
	  rect              The overlap.Rectangle specifying the region
	  tolerance         The distance within which a triangle is considered
	                    to touch the region
	"""

	def __init__(self, rect, tolerance=TOLERANCE):
		self.rect, self.tolerance = rect, tolerance

	def apply(self, triangle):
		if overlaps(triangle, self.rect, self.tolerance):
			return triangle
		return None


def build(root, depth, triangle_filter=None):
	"""
	Deflates root depth times and returns a list of every triangle generated
	along the way, root included.

	Every triangle which was deflated further has its is_interior attribute
	set to True, so the tiles of the final tiling are those with is_interior
	False. The list is in pre-order: each interior triangle comes before
	all of the triangles generated from it.

	Floating point errors accumulate with every deflation, so depth should
	not exceed MAX_SAFE_DEPTH. This is left to the caller to enforce.

	Arguments:
	  root              The Triangle to start from
	  depth             The number of deflations to perform, a non-negative
	                    integer
	  triangle_filter   A TriangleFilter (or any equivalent callable)
	                    which is applied to each triangle as soon as it is
	                    created. Triangles it discards are neither deflated
	                    nor included in the output. Defaults to AcceptAll().
	"""
	_check_non_negative(depth)
	if triangle_filter is None: triangle_filter = AcceptAll()
	triangles = _build(root, depth, triangle_filter)
	logger.debug("Built %d triangles from a type %d root at depth %d",
	             len(triangles), root.type, depth)
	return triangles


def _build(root, depth, triangle_filter):
	if depth == 0:
		return [root]
	children = subdivide(root, triangle_filter)
	root.is_interior = True
	triangles = [root]
	for child in children:
		if child is not None:
			triangles.extend(_build(child, depth - 1, triangle_filter))
	return triangles


def partition_interior(triangles):
	"""
	Splits a list of triangles into two lists: first those which are
	interior, then the rest (the tiles). Order is otherwise preserved.
	"""
	interior, tiles = [], []
	for triangle in triangles:
		(interior if triangle.is_interior else tiles).append(triangle)
	return interior, tiles


def triangle_counts(depth, root_type=2):
	"""
	Returns the number of half kites and half darts (in that order) that
	deflating a single triangle of type root_type depth times produces.

	A half kite deflates into two half kites and a half dart, and a half
	dart into one of each, so no triangles need be generated.
	"""
	kites, darts = (0, 1) if root_type in DART_TYPES else (1, 0)
	for i in range(depth):
		kites, darts = 2*kites + darts, kites + darts
	return kites, darts


def estimate_depth(rect_length, base_length=BASE_LENGTH,
                   density_constant=DENSITY_CONSTANT):
	"""
	Returns the smallest depth at which the tiling has a triangle density
	of at least density_constant / rect_length**2.

	The density at a given depth is estimated as the number of triangles
	(as given by triangle_counts()) divided by half the area of the
	bounding rectangle of the root triangle, whose base length is
	base_length. There is no upper limit on the depth returned.
	"""
	if rect_length <= 0:
		raise ValueError(f"rect_length must be positive, not {rect_length}")
	target_density = density_constant / rect_length**2
	root_area = base_length * root_height(base_length)
	depth = 0
	while target_density > 2 * sum(triangle_counts(depth)) / root_area:
		depth += 1
	return depth


def check_depth(depth, max_depth=MAX_SAFE_DEPTH):
	"""
	Raises InvalidDepth or DepthTooLarge unless depth is an integer in
	[0, max_depth]
	"""
	_check_non_negative(depth)
	if depth > max_depth:
		raise DepthTooLarge(
			f"Depth {depth} is larger than the maximum of {max_depth}")


def direct_tiling(depth, base_length=BASE_LENGTH):
	"""
	Returns the list of triangles (as returned by build()) from deflating
	the whole root triangle depth times.
	"""
	check_depth(depth)
	logger.info("Generating tiling at depth %d", depth)
	return build(root_triangle(base_length), depth, AcceptAll())


def region_tiling(rect, base_length=BASE_LENGTH,
                  density_constant=DENSITY_CONSTANT, max_depth=MAX_SAFE_DEPTH):
	"""
	Generates the tiling over the region rect only, deflating to the depth
	given by estimate_depth().

	Returns two values: the list of triangles (as returned by build()) and
	the depth used. Raises DepthTooLarge if the region is so small that the
	required depth exceeds max_depth.
	"""
	depth = estimate_depth(rect.length, base_length, density_constant)
	check_depth(depth, max_depth)
	logger.info("Generating tiling over %s at depth %d", rect, depth)
	triangles = build(root_triangle(base_length), depth, RegionBounded(rect))
	return triangles, depth


def _check_non_negative(depth):
	if (not isinstance(depth, numbers.Integral) or isinstance(depth, bool)
			or depth < 0):
		raise InvalidDepth(f"Depth must be a non-negative integer, not {depth!r}")
