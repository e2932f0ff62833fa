"""
Determines whether triangles of a tiling overlap a square region, so that a
tiling can be generated over that region alone.
"""


import dataclasses
import math

import numpy as np

from penrose_tilings import BASE_LENGTH, norm, root_height


# Leeway allowed when comparing coordinates, to account for the floating
# point errors that accumulate over repeated deflations
TOLERANCE = 3

# Minimum distance between a random region and the apex or base of the root
# triangle. Also the minimum side length of a random region.
BUFFER = 60


@dataclasses.dataclass(frozen=True)
class Rectangle:
	"""
	An axis-aligned square region.

	Attributes:
	  x, y              The corner with the smallest coordinates (the top
	                    left on a screen)
	  length            The length of each side
	"""
	x: float
	y: float
	length: float


def overlaps(triangle, rect, tolerance=TOLERANCE):
	"""
	Returns bool whether triangle and the square rect overlap, including
	the cases where one contains the other entirely.

	Shapes closer together than tolerance are treated as overlapping, so
	tiles at the boundary of the region are never discarded because of
	accumulated rounding errors.
	"""
	left, right = rect.x, rect.x + rect.length
	top, bottom = rect.y, rect.y + rect.length
	p1, p2, p3 = triangle.points
	# Case 1: a vertex of the triangle lies inside the rectangle
	for x, y in triangle.points:
		if (_within(x, left, right, tolerance)
				and _within(y, top, bottom, tolerance)):
			return True
	# Case 2: a corner of the rectangle lies inside the triangle. A corner
	# is inside if it lies between the apex and the point where the line
	# from the apex through the corner crosses the base.
	base_left, base_right = sorted((p2[0], p3[0]))
	base_top, base_bottom = sorted((p2[1], p3[1]))
	for corner in ((left, top), (left, bottom), (right, top), (right, bottom)):
		corner = np.array(corner, dtype=float)
		intersect = line_intersection(p1, corner, p2, p3)
		if intersect is None:
			continue
		# Skip corners past the base
		if norm(corner - p1) > norm(intersect - p1):
			continue
		# Skip corners behind the apex
		if np.dot(corner - p1, intersect - p1) < 0:
			continue
		if (_within(intersect[0], base_left, base_right, tolerance)
				and _within(intersect[1], base_top, base_bottom, tolerance)):
			return True
	# Case 3: neither contains a point of the other, but one of the two equal
	# edges crosses an edge of the rectangle
	for edge_start, edge_end in ((p1, p2), (p1, p3)):
		for x in (left, right):
			if _edge_crosses(edge_start, edge_end, 0, x, top, bottom, tolerance):
				return True
		for y in (top, bottom):
			if _edge_crosses(edge_start, edge_end, 1, y, left, right, tolerance):
				return True
	return False


def line_intersection(a, b, c, d):
	"""
	Returns the point (as a numpy array) at which the line through a and b
	meets the line through c and d, or None if the lines are parallel.

	Vertical lines are handled by substituting their x coordinate directly
	rather than working with an infinite gradient.
	"""
	ab_vertical = a[0] == b[0]
	cd_vertical = c[0] == d[0]
	if ab_vertical and cd_vertical:
		return None
	if ab_vertical:
		return np.array([a[0], _y_on_line(c, d, a[0])])
	if cd_vertical:
		return np.array([c[0], _y_on_line(a, b, c[0])])
	m1, k1 = _gradient_intercept(a, b)
	m2, k2 = _gradient_intercept(c, d)
	if m1 == m2:
		return None
	x = (k2 - k1) / (m1 - m2)
	return np.array([x, m1*x + k1])


def random_region(base_length=BASE_LENGTH, buffer=BUFFER, rng=None):
	"""
	Returns a randomly placed Rectangle lying entirely within the root
	triangle (as returned by penrose_tilings.root_triangle()).

	Arguments:
	  base_length       The base length of the root triangle
	  buffer            The top of the region is at least this far from both
	                    the apex and the base of the root triangle, and this
	                    is also the region's minimum side length
	  rng               A numpy.random.Generator to draw from. A new one is
	                    created if unspecified.
	"""
	if rng is None: rng = np.random.default_rng()
	height = root_height(base_length)
	centre = base_length // 2
	rect_y = int(rng.integers(buffer, int(height) - buffer))
	# Width of the triangle along the line y = rect_y. The region never
	# extends above this line, and the triangle only gets wider below it.
	cross_section = 2 * rect_y / math.tan(math.pi / 5)
	offset = int(rng.integers(int(cross_section / 2)))
	if rng.integers(2):
		offset = -offset
	rect_x = centre + offset
	# The region extends from rect_x towards the centre, so may reach as
	# far as the opposite side of the cross section
	max_length = min(height - rect_y, abs(offset) + cross_section / 2)
	rect_length = buffer + int(rng.integers(max(1, int(max_length) - 2*buffer)))
	if rect_x >= centre:
		rect_x -= rect_length
	return Rectangle(rect_x, rect_y, rect_length)


def _within(value, low, high, tolerance):
	return value + tolerance >= low and value <= high + tolerance


def _gradient_intercept(a, b):
	gradient = (b[1] - a[1]) / (b[0] - a[0])
	return gradient, a[1] - gradient * a[0]


def _y_on_line(a, b, x):
	gradient, intercept = _gradient_intercept(a, b)
	return gradient * x + intercept


def _edge_crosses(start, end, axis, value, low, high, tolerance):
	"""
	Returns bool whether the edge from start to end crosses the axis-aligned
	segment on which coordinate number axis equals value and the other
	coordinate runs from low to high.

	The tolerance is measured along each axis rather than perpendicular to
	the edge, so for steep edges the effective slack exceeds tolerance.
	"""
	other = 1 - axis
	if start[axis] == end[axis]:
		# Parallel, so they only meet if the edge lies along the segment
		other_low, other_high = sorted((start[other], end[other]))
		return (abs(start[axis] - value) <= tolerance
		        and other_high + tolerance >= low
		        and other_low <= high + tolerance)
	edge_low, edge_high = sorted((start[axis], end[axis]))
	crossing = start[other] + ((value - start[axis])
	                           * (end[other] - start[other])
	                           / (end[axis] - start[axis]))
	return (_within(value, edge_low, edge_high, tolerance)
	        and _within(crossing, low, high, tolerance))
